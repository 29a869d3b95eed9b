"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- WorkflowCommandRenderer selection when running inside GitHub Actions
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from tracker_validator.infrastructure.observability.logging.workflow_command_renderer import (
    WorkflowCommandRenderer,
)
from tracker_validator.infrastructure.observability.redaction_service import redaction_processor

_CONFIGURED = False


def configure_logging(level: int = logging.DEBUG) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by LOG_FORMAT env (json|console|github) or GITHUB_ACTIONS.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output (httpx, etc.) through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env or the GitHub Actions runner."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    if log_format == "github" or os.environ.get("GITHUB_ACTIONS", "").lower() == "true":
        return WorkflowCommandRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
