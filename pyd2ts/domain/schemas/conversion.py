from __future__ import annotations

from typing import List, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LANGSMITH_PROJECT = "pydantic-to-typescript-action"


class FileContent(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    path: str
    text: str


class ProviderConfig(BaseModel):
    """
    provider 값 검증은 create_client()에서 한다 (지원하지 않는 provider도 일단 받는다).
    """
    model_config = ConfigDict(extra="forbid")
    provider: str = Field(default="anthropic")
    model: str = Field(default="claude-3-7-sonnet-latest")
    anthropic_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    temperature: float = Field(default=0.1, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    streaming: bool = True

    @property
    def api_key(self) -> Optional[str]:
        if self.provider == "anthropic":
            return self.anthropic_api_key
        if self.provider == "openai":
            return self.openai_api_key
        return None


class TracingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    api_key: str
    project_name: str = Field(default=DEFAULT_LANGSMITH_PROJECT)
    run_name: str = ""


class RenderedPrompt(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    system: str
    user: str

    def to_messages(self) -> List[BaseMessage]:
        return [SystemMessage(content=self.system), HumanMessage(content=self.user)]


class ConversionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    base_python_file: str
    new_python_file: str
    current_typescript_file: str
    output_typescript_file: str
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    custom_prompt: str = ""
    langsmith_api_key: Optional[str] = None
    langsmith_project: str = Field(default=DEFAULT_LANGSMITH_PROJECT)
    verbose: bool = True


class ConversionResult(BaseModel):
    model_config = ConfigDict(extra="forbid")
    output_typescript_file: str
    typescript: str
    diff: str
    llm_provider: str = ""
    model: str = ""
    tracing_enabled: bool = False
