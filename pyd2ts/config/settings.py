from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    model_provider: str = "anthropic"  # | "openai"
    model_name: str = "claude-3-7-sonnet-latest"

    anthropic_api_key: str | None = None
    openai_api_key: str | None = None

    temperature: float = 0.1
    max_tokens: int = 10000

    langsmith_api_key: str | None = None
    langsmith_project: str = "pydantic-to-typescript-action"

    # system.txt / user.txt 를 먼저 찾는 디렉터리
    prompts_dir: Path | None = None

    verbose: bool = True
    log_level: str = "INFO"


settings = Settings()
