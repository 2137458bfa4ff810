# src/llm_review/providers/openai.py
import logging
from openai import AsyncOpenAI
from .base import LLMProvider
from llm_review.models.chat import ChatMessage


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Chat-completion provider for OpenAI and OpenAI-compatible endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float = 60.0,
        default_headers: dict[str, str] | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        # Failures go straight back to the caller, the client must not retry
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers=default_headers,
        )

    async def complete(self, messages: list[ChatMessage], model: str) -> str:
        response = await self.client.chat.completions.create(
            model=model,
            messages=[message.model_dump() for message in messages],
        )

        text = response.choices[0].message.content or ""
        logger.debug(f"{model} response length: {len(text)} chars")
        return text
