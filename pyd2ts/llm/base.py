from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, List, Optional, Sequence

from langchain_core.callbacks import BaseCallbackHandler
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.runnables import RunnableConfig


def content_text(content: Any) -> str:
    """
    Chat message content -> plain text.
    Anthropic 계열은 content가 block 리스트로 올 수 있다.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: List[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content)


def build_run_config(
    callbacks: Optional[Sequence[BaseCallbackHandler]] = None,
    run_name: Optional[str] = None,
) -> RunnableConfig:
    config: RunnableConfig = {}
    if callbacks:
        config["callbacks"] = list(callbacks)
    if run_name:
        config["run_name"] = run_name
    return config


class LLMAdapter(ABC):
    """
    Provider-neutral chat capability: messages in, text out
    (whole via ainvoke, incremental via astream).
    """

    chat: BaseChatModel
    streaming: bool = True

    @property
    @abstractmethod
    def provider(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def model_name(self) -> str:
        raise NotImplementedError

    async def ainvoke(
        self,
        messages: Sequence[BaseMessage],
        *,
        callbacks: Optional[Sequence[BaseCallbackHandler]] = None,
        run_name: Optional[str] = None,
    ) -> str:
        """Return raw text output from the model."""
        res = await self.chat.ainvoke(list(messages), config=build_run_config(callbacks, run_name))
        return content_text(res.content) if hasattr(res, "content") else str(res)

    async def astream(
        self,
        messages: Sequence[BaseMessage],
        *,
        callbacks: Optional[Sequence[BaseCallbackHandler]] = None,
        run_name: Optional[str] = None,
    ) -> AsyncIterator[str]:
        """
        Yield text chunks in arrival order.
        streaming=False 이면 전체 응답 하나만 yield 한다.
        """
        if not self.streaming:
            yield await self.ainvoke(messages, callbacks=callbacks, run_name=run_name)
            return

        config = build_run_config(callbacks, run_name)
        async for chunk in self.chat.astream(list(messages), config=config):
            text = content_text(chunk.content)
            if text:
                yield text
