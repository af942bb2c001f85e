from __future__ import annotations

from pyd2ts.domain.schemas.conversion import ProviderConfig
from pyd2ts.exceptions import ConfigurationError
from pyd2ts.llm.anthropic_native import AnthropicAdapter
from pyd2ts.llm.base import LLMAdapter
from pyd2ts.llm.openai_native import OpenAIAdapter

DEFAULT_MAX_TOKENS = 10000


def create_client(config: ProviderConfig) -> LLMAdapter:
    max_tokens = config.max_tokens or DEFAULT_MAX_TOKENS
    api_key = config.api_key

    if config.provider == "anthropic":
        if not api_key:
            raise ConfigurationError("Anthropic API key is required when using Anthropic provider")
        return AnthropicAdapter(
            model=config.model,
            api_key=api_key,
            temperature=config.temperature,
            max_tokens=max_tokens,
            streaming=config.streaming,
        )
    if config.provider == "openai":
        if not api_key:
            raise ConfigurationError("OpenAI API key is required when using OpenAI provider")
        return OpenAIAdapter(
            model=config.model,
            api_key=api_key,
            temperature=config.temperature,
            max_tokens=max_tokens,
            streaming=config.streaming,
        )
    raise ConfigurationError(f"Unsupported provider: {config.provider}")
