# src/llm_review/review/service.py
import logging
from llm_review.config import Settings, configure_logging
from llm_review.models.diff import FileChange
from llm_review.models.review import ReviewComment
from llm_review.providers.base import LLMProvider
from llm_review.providers.openai import OpenAIProvider
from .guidelines import read_project_prompts
from .parser import parse_review_response
from .prompts import build_pr_info_messages, build_review_messages


logger = logging.getLogger(__name__)


class ReviewService:
    """Asks the model to review file diffs and PR metadata.

    Provider errors are not caught here; each call makes exactly one request.
    """

    def __init__(self, provider: LLMProvider, model: str, project_prompts: str = ""):
        self._provider = provider
        self._model = model
        self._project_prompts = project_prompts

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    @property
    def project_prompts(self) -> str:
        """Guidelines used when a call does not pass its own."""
        return self._project_prompts

    async def request_file_review(self, file_change: FileChange, project_prompts: str | None = None) -> str:
        """Send one file's hunks for review and return the raw model answer."""
        if project_prompts is None:
            project_prompts = self._project_prompts
        messages = build_review_messages(file_change, project_prompts)

        logger.info(f"Requesting review for {file_change.filename} ({len(file_change.hunks)} hunks)")
        text = await self._provider.complete(messages, self._model)
        logger.info(f"Review response for {file_change.filename}: {len(text)} chars")
        return text

    async def analyze_pr_changes(self, file_change: FileChange, project_prompts: str | None = None) -> list[ReviewComment]:
        """Review one file and return the comments anchored to its hunks."""
        text = await self.request_file_review(file_change, project_prompts)
        comments = parse_review_response(text, file_change)
        logger.info(f"Parsed {len(comments)} comments for {file_change.filename}")
        return comments

    async def analyze_pr_info(
        self,
        pr_description: str,
        file_count: int,
        branch_name: str,
        commit_messages: list[str],
    ) -> str:
        """Review PR metadata; the answer is free text and is returned as is."""
        messages = build_pr_info_messages(pr_description, file_count, branch_name, commit_messages)

        logger.info(f"Requesting PR info review for branch {branch_name} ({file_count} files)")
        text = await self._provider.complete(messages, self._model)
        logger.info(f"PR info response: {len(text)} chars")
        return text


def create_review_service(settings: Settings) -> ReviewService:
    """Build a ReviewService backed by the OpenAI provider from settings.

    Applies the configured log level and loads the project guidelines file
    as the service's default project prompts.
    """
    configure_logging(settings.log_level)

    if not settings.openai_api_key:
        raise ValueError("OPENAI_API_KEY is not configured")

    provider = OpenAIProvider(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout,
    )
    return ReviewService(
        provider=provider,
        model=settings.openai_model,
        project_prompts=read_project_prompts(settings.project_prompts_path),
    )
