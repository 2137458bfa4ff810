# src/llm_review/config.py
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # LLM provider
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"
    request_timeout: float = 60.0

    # Defaults
    project_prompts_path: str = ".ai-review.yaml"
    log_level: str = "INFO"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper())
