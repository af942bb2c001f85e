from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pyd2ts.domain.prompts.registry import PromptTemplateStore
from pyd2ts.domain.schemas.conversion import (
    ConversionRequest,
    ConversionResult,
    FileContent,
    TracingConfig,
)
from pyd2ts.exceptions import ConfigurationError
from pyd2ts.pipelines import converter
from pyd2ts.tools.diff import build_diff, diff_stats

logger = logging.getLogger(__name__)


class ConverterService:
    """
    얇은 오케스트레이터(Facade).

    - 입력 파일 확인/읽기
    - diff 생성
    - LangSmith run name 결정 (base python 파일명)
    - generate_typescript() 실행 후 결과 파일 저장

    프롬프트 렌더링, provider 호출, 코드 추출은 pipelines.converter 에 있음.
    """

    def __init__(self, templates: Optional[PromptTemplateStore] = None) -> None:
        self._templates = templates

    async def convert(self, req: ConversionRequest) -> ConversionResult:
        # 1) 입력 확인
        _validate_file_path(req.base_python_file, "Base Python file")
        _validate_file_path(req.new_python_file, "New Python file")
        _validate_file_path(req.current_typescript_file, "Current TypeScript file")

        logger.info("Reading input files...")
        base = _read_file(req.base_python_file)
        new = _read_file(req.new_python_file)
        current = _read_file(req.current_typescript_file)

        # 2) diff
        logger.info("Generating diff between Python files...")
        diff = build_diff(base.path, base.text, new.path, new.text)
        stats = diff_stats(diff)
        logger.info(
            "DIFF hunks=%d insertions=%d deletions=%d",
            stats.hunks,
            stats.insertions,
            stats.deletions,
        )

        # 3) tracing
        tracing = None
        if req.langsmith_api_key:
            tracing = TracingConfig(
                api_key=req.langsmith_api_key,
                project_name=req.langsmith_project,
                run_name=Path(req.base_python_file).name,
            )

        # 4) generate
        logger.info(
            "Using LLM (%s - %s) to generate TypeScript...",
            req.provider.provider,
            req.provider.model,
        )
        typescript = await converter.generate_typescript(
            base.text,
            new.text,
            diff,
            current.text,
            req.provider,
            custom_prompt=req.custom_prompt,
            tracing_config=tracing,
            verbose=req.verbose,
            templates=self._templates,
        )

        # 5) write
        output = Path(req.output_typescript_file)
        output.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing output to %s...", output)
        output.write_text(typescript, encoding="utf-8")

        return ConversionResult(
            output_typescript_file=str(output),
            typescript=typescript,
            diff=diff,
            llm_provider=req.provider.provider,
            model=req.provider.model,
            tracing_enabled=tracing is not None,
        )


def _validate_file_path(file_path: str, description: str) -> None:
    if not Path(file_path).exists():
        raise ConfigurationError(f"{description} not found at path: {file_path}")


def _read_file(file_path: str) -> FileContent:
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e
    return FileContent(path=file_path, text=text)
