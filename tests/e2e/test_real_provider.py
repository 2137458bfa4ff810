# tests/e2e/test_real_provider.py
"""
End-to-end tests against a real chat-completion endpoint.

These tests require valid API credentials set in environment variables:
- OPENAI_API_KEY: API key for the endpoint
- OPENAI_BASE_URL: optional, for OpenAI-compatible endpoints
- OPENAI_MODEL: optional, defaults to the settings default

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from llm_review.config import Settings
from llm_review.models.diff import FileChange, Hunk
from llm_review.review.service import create_review_service


SIMPLE_CHANGE = FileChange(
    filename="math.py",
    hunks=[Hunk(
        new_start=1,
        new_lines=2,
        content="@@ -0,0 +1,2 @@\n+def add(a, b):\n+    return a - b",
    )],
)


@pytest.fixture
def service():
    if not os.environ.get("OPENAI_API_KEY"):
        pytest.skip("OPENAI_API_KEY not set")
    return create_review_service(Settings())


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_real_file_review(service):
    comments = await service.analyze_pr_changes(SIMPLE_CHANGE, "Report logic errors.")

    assert isinstance(comments, list)
    for comment in comments:
        assert 1 <= comment.line <= 3
    print(f"\nComments: {comments}")


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_real_pr_info_review(service):
    result = await service.analyze_pr_info(
        pr_description="Fix addition",
        file_count=35,
        branch_name="fix-add",
        commit_messages=["fix add"],
    )

    assert isinstance(result, str)
    print(f"\nPR info feedback: {result}")
