# src/llm_review/providers/base.py
from abc import ABC, abstractmethod
from llm_review.models.chat import ChatMessage


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, messages: list[ChatMessage], model: str) -> str:
        """Send chat messages to the model and return the first choice's text ("" if absent)."""
        pass
