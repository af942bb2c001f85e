"""
CLI for updating a TypeScript adaptation from changed Pydantic models.

Usage:
    python -m pyd2ts \\
        --base-python-file old/models.py \\
        --new-python-file models.py \\
        --current-typescript-file web/types.ts \\
        --output-typescript-file web/types.ts

API keys are read from the environment / .env only:
    ANTHROPIC_API_KEY, OPENAI_API_KEY, LANGSMITH_API_KEY
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pyd2ts.config.settings import Settings, settings
from pyd2ts.domain.prompts.registry import PromptTemplateStore
from pyd2ts.domain.schemas.conversion import ConversionRequest, ProviderConfig
from pyd2ts.services.converter_service import ConverterService
from pyd2ts.shared.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser(cfg: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyd2ts",
        description="Update a TypeScript adaptation of Pydantic models using an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-python-file", required=True, help="Path to the base Python Pydantic file")
    parser.add_argument("--new-python-file", required=True, help="Path to the new Python Pydantic file")
    parser.add_argument("--current-typescript-file", required=True, help="Path to the current TypeScript file")
    parser.add_argument("--output-typescript-file", required=True, help="Path to the output TypeScript file")

    parser.add_argument(
        "--model-provider",
        default=cfg.model_provider,
        help="LLM provider to use (anthropic or openai)",
    )
    parser.add_argument("--model-name", default=cfg.model_name, help="Specific model to use")
    parser.add_argument("--temperature", type=float, default=cfg.temperature, help="Temperature (0.0-1.0)")
    parser.add_argument("--max-tokens", type=int, default=cfg.max_tokens, help="Max output tokens")
    parser.add_argument("--custom-prompt", default="", help="Optional extra rule/message for the model")
    parser.add_argument("--langsmith-project", default=cfg.langsmith_project, help="LangSmith project name")
    parser.add_argument("--prompts-dir", type=Path, default=cfg.prompts_dir, help="Directory with system.txt/user.txt")
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=cfg.verbose,
        help="Log rendered prompts and raw model output",
    )
    return parser


def build_request(args: argparse.Namespace, cfg: Settings) -> ConversionRequest:
    return ConversionRequest(
        base_python_file=args.base_python_file,
        new_python_file=args.new_python_file,
        current_typescript_file=args.current_typescript_file,
        output_typescript_file=args.output_typescript_file,
        provider=ProviderConfig(
            provider=args.model_provider,
            model=args.model_name,
            anthropic_api_key=cfg.anthropic_api_key,
            openai_api_key=cfg.openai_api_key,
            temperature=args.temperature,
            max_tokens=args.max_tokens,
        ),
        custom_prompt=args.custom_prompt or "",
        langsmith_api_key=cfg.langsmith_api_key,
        langsmith_project=args.langsmith_project or cfg.langsmith_project,
        verbose=args.verbose,
    )


def main(argv: Optional[Sequence[str]] = None, cfg: Settings = settings) -> int:
    args = build_parser(cfg).parse_args(argv)
    setup_logging(cfg.log_level)

    logger.info("Verbose mode is %s.", "enabled" if args.verbose else "disabled")
    try:
        req = build_request(args, cfg)
        service = ConverterService(templates=PromptTemplateStore.default(args.prompts_dir))
        result = asyncio.run(service.convert(req))
    except Exception as e:
        logger.error("Conversion failed: %s", e)
        # GitHub Actions error annotation
        print(f"::error::{e}", file=sys.stderr)
        return 1

    logger.info("Successfully generated TypeScript! (%s)", result.output_typescript_file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
