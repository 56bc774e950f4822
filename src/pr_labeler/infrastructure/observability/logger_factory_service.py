"""Structlog logging setup with a stdlib bridge.

- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): structlog logger bound to a component name
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from pr_labeler.infrastructure.observability.redaction_service import redaction_processor

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure structlog once; later calls are no-ops.

    The renderer follows LOG_FORMAT (json|console); when unset, CI runners
    get JSON and local shells get the console renderer.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    numeric_level = logging.getLevelName((level or os.environ.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(component: str) -> Any:
    return structlog.get_logger().bind(context_component=component)


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    if os.environ.get("GITHUB_ACTIONS") == "true" or os.environ.get("CI", "").lower() == "true":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
