# tests/unit/test_guidelines.py
import pytest
from llm_review.review.guidelines import load_project_prompts, read_project_prompts


def test_load_prompts_from_list():
    yaml_content = """
prompts:
  - Use type hints
  - Keep functions short
"""
    assert load_project_prompts(yaml_content) == "Use type hints\nKeep functions short"


def test_load_prompts_from_block_string():
    yaml_content = """
prompts: |
  Follow PEP 8.
  No print statements.
"""
    assert load_project_prompts(yaml_content) == "Follow PEP 8.\nNo print statements."


def test_load_prompts_empty_or_missing():
    assert load_project_prompts(None) == ""
    assert load_project_prompts("") == ""
    assert load_project_prompts("other: value") == ""


def test_load_prompts_invalid_yaml():
    assert load_project_prompts("prompts: [unclosed") == ""


def test_read_prompts_from_file(tmp_path):
    path = tmp_path / ".ai-review.yaml"
    path.write_text("prompts:\n  - Prefer dataclasses\n", encoding="utf-8")

    assert read_project_prompts(path) == "Prefer dataclasses"


def test_read_prompts_missing_file(tmp_path):
    assert read_project_prompts(tmp_path / "missing.yaml") == ""
