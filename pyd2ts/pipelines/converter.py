from __future__ import annotations

import logging
from typing import Optional

from pyd2ts.config.settings import settings
from pyd2ts.core.parsing.extract import extract_typescript_code
from pyd2ts.domain.prompts.registry import PromptTemplateStore
from pyd2ts.domain.prompts.render import build_variables, render_prompt
from pyd2ts.domain.schemas.conversion import ProviderConfig, TracingConfig
from pyd2ts.llm.provider import create_client
from pyd2ts.llm.tracing import build_tracing_callbacks

logger = logging.getLogger(__name__)


async def generate_typescript(
    base_python: str,
    new_python: str,
    diff_text: str,
    current_typescript: str,
    provider_config: ProviderConfig,
    custom_prompt: Optional[str] = None,
    tracing_config: Optional[TracingConfig] = None,
    verbose: bool = True,
    templates: Optional[PromptTemplateStore] = None,
) -> str:
    """
    Render the prompt, stream the model's answer and extract the TypeScript.

    1) tracing callbacks (optional, passed into the call, no env mutation)
    2) load system/user templates
    3) render with basePython/newPython/diff/currentTypescript/customPrompt
    4) build the provider client (config errors surface before any network I/O)
    5) stream, concatenating chunks in arrival order
    6) extract the code block from the full text

    Template, configuration and provider errors propagate unchanged.
    """
    # 1) tracing
    callbacks = build_tracing_callbacks(tracing_config)
    if not callbacks:
        logger.info("LangSmith tracing not enabled.")
    run_name = tracing_config.run_name if tracing_config else None

    # 2) templates
    store = templates or PromptTemplateStore.default(settings.prompts_dir)
    pack = store.get()

    # 3) render
    prompt = render_prompt(
        pack.system,
        pack.user,
        build_variables(
            base_python=base_python,
            new_python=new_python,
            diff=diff_text,
            current_typescript=current_typescript,
            custom_prompt=custom_prompt,
        ),
    )
    if verbose:
        logger.info("System Message:\n%s", prompt.system)
        logger.info("User Message:\n%s", prompt.user)

    # 4) client
    client = create_client(provider_config)

    # 5) stream
    logger.info("LLM_INVOKE provider=%s model=%s", client.provider, client.model_name)
    parts: list[str] = []
    async for chunk in client.astream(prompt.to_messages(), callbacks=callbacks, run_name=run_name):
        parts.append(chunk)
        if verbose:
            logger.debug("chunk %r", chunk)
    response = "".join(parts)

    if verbose:
        logger.info("LLM Output:\n%s", response)
    logger.info("LLM_DONE chunks=%d chars=%d", len(parts), len(response))

    # 6) extract
    return extract_typescript_code(response)
