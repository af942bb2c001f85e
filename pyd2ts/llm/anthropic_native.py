from __future__ import annotations

from langchain_anthropic import ChatAnthropic

from .base import LLMAdapter


class AnthropicAdapter(LLMAdapter):
    """
    Claude models through ChatAnthropic. No request is sent until
    ainvoke/astream.
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        temperature: float = 0.1,
        max_tokens: int = 10000,
        streaming: bool = True,
    ):
        self.chat = ChatAnthropic(
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
        return "anthropic"

    @property
    def model_name(self) -> str:
        return self._model
