"""Structlog renderer for GitHub Actions workflow commands.

Maps log levels onto the runner's annotation commands so that debug lines
are hidden unless step debugging is enabled and warnings/errors surface on
the run summary. Events bound with ``annotation="notice"`` become notices.
"""

from __future__ import annotations

from typing import Any

_LEVEL_COMMANDS = {
    "debug": "debug",
    "warning": "warning",
    "error": "error",
    "critical": "error",
    "exception": "error",
}

_DROPPED_KEYS = ("timestamp", "annotation", "level")


def escape_data(value: str) -> str:
    """Escape a workflow-command payload (``%``, CR and LF)."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _format_extras(event_dict: dict[str, Any]) -> str:
    extras = [f"{key}={value}" for key, value in event_dict.items() if key not in _DROPPED_KEYS]
    return " ".join(extras)


class WorkflowCommandRenderer:
    """Render an event dict as a single workflow-command (or plain) output line."""

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> str:
        event_dict = dict(event_dict)
        message = str(event_dict.pop("event", ""))
        command = self._command_for(event_dict)
        extras = _format_extras(event_dict)
        line = f"{message} {extras}" if extras else message
        if command is None:
            return line
        return f"::{command}::{escape_data(line)}"

    @staticmethod
    def _command_for(event_dict: dict[str, Any]) -> str | None:
        if event_dict.get("annotation") == "notice":
            return "notice"
        return _LEVEL_COMMANDS.get(str(event_dict.get("level", "info")).lower())
