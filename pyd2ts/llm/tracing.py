from __future__ import annotations

import logging
from typing import List, Optional

from langchain_core.callbacks import BaseCallbackHandler
from langchain_core.tracers import LangChainTracer
from langsmith import Client

from pyd2ts.domain.schemas.conversion import DEFAULT_LANGSMITH_PROJECT, TracingConfig

logger = logging.getLogger(__name__)


def build_tracing_callbacks(tracing: Optional[TracingConfig]) -> List[BaseCallbackHandler]:
    """
    TracingConfig -> LangSmith tracer callbacks.

    The tracer is handed to the call explicitly, so LANGSMITH_* environment
    variables are never touched and concurrent runs keep separate projects.
    """
    if tracing is None or not tracing.api_key:
        return []

    tracer = LangChainTracer(
        project_name=tracing.project_name or DEFAULT_LANGSMITH_PROJECT,
        client=Client(api_key=tracing.api_key),
    )
    logger.info(
        "LangSmith tracing enabled project=%s run=%s",
        tracer.project_name,
        tracing.run_name,
    )
    return [tracer]
