"""
Tests for converter.py (generate_typescript)
"""
import os
from pathlib import Path
from typing import List

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from pyd2ts.domain.prompts.registry import BUNDLED_TEMPLATES_DIR, PromptTemplateStore
from pyd2ts.domain.schemas.conversion import ProviderConfig, TracingConfig
from pyd2ts.exceptions import ConfigurationError, PromptTemplateNotFound
from pyd2ts.llm import tracing
from pyd2ts.llm.base import LLMAdapter
from pyd2ts.pipelines import converter
from pyd2ts.tools.diff import build_diff

BASE_PYTHON = """
class User(BaseModel):
    id: int
"""

NEW_PYTHON = """
class User(BaseModel):
    id: int
    age: Optional[int] = None
"""

CURRENT_TS = "export interface User { id: number; }"


class ScriptedAdapter(LLMAdapter):
    """Yields pre-scripted chunks and records what it was called with"""

    def __init__(self, chunks: List[str], error: Exception | None = None):
        self.chunks = chunks
        self.error = error
        self.calls: list[dict] = []

    @property
    def provider(self) -> str:
        return "scripted"

    @property
    def model_name(self) -> str:
        return "scripted-model"

    async def astream(self, messages, *, callbacks=None, run_name=None):
        self.calls.append({"messages": list(messages), "callbacks": callbacks, "run_name": run_name})
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


@pytest.fixture
def bundled() -> PromptTemplateStore:
    return PromptTemplateStore([BUNDLED_TEMPLATES_DIR])


@pytest.fixture
def config() -> ProviderConfig:
    return ProviderConfig(provider="anthropic", model="test-model", anthropic_api_key="test-key")


def _use_adapter(monkeypatch, adapter: LLMAdapter) -> list[ProviderConfig]:
    seen: list[ProviderConfig] = []

    def fake_create_client(cfg):
        seen.append(cfg)
        return adapter

    monkeypatch.setattr(converter, "create_client", fake_create_client)
    return seen


@pytest.mark.asyncio
async def test_end_to_end_added_optional_field(monkeypatch, bundled, config):
    adapter = ScriptedAdapter(["```typescript\nexport interface User { id: number; age?: number; }\n```"])
    seen = _use_adapter(monkeypatch, adapter)
    diff = build_diff("models.py", BASE_PYTHON, "models.py", NEW_PYTHON)

    result = await converter.generate_typescript(
        BASE_PYTHON, NEW_PYTHON, diff, CURRENT_TS, config, templates=bundled
    )

    assert result == "export interface User { id: number; age?: number; }"
    assert seen == [config]

    messages = adapter.calls[0]["messages"]
    assert isinstance(messages[0], SystemMessage)
    assert isinstance(messages[1], HumanMessage)
    assert "+    age: Optional[int] = None" in messages[1].content
    assert CURRENT_TS in messages[1].content
    assert "{customPrompt}" not in messages[1].content


@pytest.mark.asyncio
async def test_chunks_are_concatenated_before_extraction(monkeypatch, bundled, config):
    _use_adapter(monkeypatch, ScriptedAdapter(["export ", "interface User {}"]))

    result = await converter.generate_typescript("a", "b", "d", "c", config, templates=bundled, verbose=False)

    assert result == "export interface User {}"


@pytest.mark.asyncio
async def test_fence_split_across_chunks(monkeypatch, bundled, config):
    _use_adapter(monkeypatch, ScriptedAdapter(["Here:\n``", "`typescript\nexport type A", " = 1;\n``", "`\nthanks"]))

    result = await converter.generate_typescript("a", "b", "d", "c", config, templates=bundled)

    assert result == "export type A = 1;"


@pytest.mark.asyncio
async def test_custom_prompt_reaches_user_message(monkeypatch, bundled, config):
    adapter = ScriptedAdapter(["x"])
    _use_adapter(monkeypatch, adapter)

    await converter.generate_typescript(
        "a", "b", "d", "c", config, custom_prompt="Use readonly fields", templates=bundled
    )

    assert "Use readonly fields" in adapter.calls[0]["messages"][1].content


@pytest.mark.asyncio
async def test_tracing_callbacks_are_passed_explicitly(monkeypatch, bundled, config):
    adapter = ScriptedAdapter(["x"])
    _use_adapter(monkeypatch, adapter)
    monkeypatch.setattr(tracing, "Client", lambda **kwargs: object())
    monkeypatch.delenv("LANGSMITH_TRACING", raising=False)

    await converter.generate_typescript(
        "a",
        "b",
        "d",
        "c",
        config,
        tracing_config=TracingConfig(api_key="ls-key", run_name="models.py"),
        templates=bundled,
    )

    call = adapter.calls[0]
    assert len(call["callbacks"]) == 1
    assert call["run_name"] == "models.py"
    assert "LANGSMITH_TRACING" not in os.environ


@pytest.mark.asyncio
async def test_no_tracing_by_default(monkeypatch, bundled, config):
    adapter = ScriptedAdapter(["x"])
    _use_adapter(monkeypatch, adapter)

    await converter.generate_typescript("a", "b", "d", "c", config, templates=bundled)

    assert adapter.calls[0]["callbacks"] == []
    assert adapter.calls[0]["run_name"] is None


@pytest.mark.asyncio
async def test_missing_key_fails_before_any_call(bundled):
    cfg = ProviderConfig(provider="openai", model="gpt-4o")

    with pytest.raises(ConfigurationError, match="OpenAI API key is required"):
        await converter.generate_typescript("a", "b", "d", "c", cfg, templates=bundled)


@pytest.mark.asyncio
async def test_missing_templates_propagate(monkeypatch, tmp_path: Path, config):
    adapter = ScriptedAdapter(["x"])
    _use_adapter(monkeypatch, adapter)

    with pytest.raises(PromptTemplateNotFound):
        await converter.generate_typescript(
            "a", "b", "d", "c", config, templates=PromptTemplateStore([tmp_path / "nope"])
        )
    assert adapter.calls == []


@pytest.mark.asyncio
async def test_provider_error_propagates_unchanged(monkeypatch, bundled, config):
    boom = ConnectionError("network down")
    _use_adapter(monkeypatch, ScriptedAdapter(["partial "], error=boom))

    with pytest.raises(ConnectionError) as exc_info:
        await converter.generate_typescript("a", "b", "d", "c", config, templates=bundled)

    assert exc_info.value is boom
