"""
Native OpenAI API adapter for GPT models.

Use this for official OpenAI API (GPT-4o, GPT-4.1, etc.)
"""

from __future__ import annotations

from langchain_openai import ChatOpenAI

from .base import LLMAdapter


class OpenAIAdapter(LLMAdapter):
    """
    Native OpenAI API adapter.

    Uses the official OpenAI API endpoint (https://api.openai.com/v1).
    The api_key is always passed explicitly; the OPENAI_API_KEY fallback of
    the SDK is never relied on.
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        temperature: float = 0.1,
        max_tokens: int = 10000,
        streaming: bool = True,
    ):
        self.chat = ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            streaming=streaming,
        )
        self._model = model
        self.streaming = streaming

    @property
    def provider(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model
