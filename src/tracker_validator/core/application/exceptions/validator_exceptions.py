"""Application-layer exception hierarchy.

Business-rule mismatches are not exceptions (see ``ValidationFailure``);
only the final outcome of a failed run is raised from this tree.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class TrackerValidationFailedError(ApplicationError):
    """Raised when a validation run ends with failures.

    The message embeds the failure digest followed by whatever successes were recorded.
    """
