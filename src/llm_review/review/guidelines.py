# src/llm_review/review/guidelines.py
import logging
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


class ProjectGuidelines(BaseModel):
    prompts: list[str] = Field(default_factory=list)

    @field_validator("prompts", mode="before")
    @classmethod
    def _wrap_single_prompt(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def render(self) -> str:
        return "\n".join(prompt.strip() for prompt in self.prompts if prompt.strip())


def load_project_prompts(yaml_content: str | None) -> str:
    """Turn a guidelines YAML document into the project prompts string."""
    if not yaml_content:
        return ""

    try:
        data = yaml.safe_load(yaml_content) or {}
        return ProjectGuidelines(**data).render()
    except Exception as e:
        logger.warning(f"Invalid project guidelines: {e}")
        return ""


def read_project_prompts(path: str | Path) -> str:
    """Read guidelines from a file; a missing file means no guidelines."""
    path = Path(path)
    if not path.is_file():
        logger.info(f"No project guidelines at {path}")
        return ""
    return load_project_prompts(path.read_text(encoding="utf-8"))
