from __future__ import annotations

from tracker_validator.core.application.tools.common.exceptions.provider_error import ProviderError


class TrackerNotSupportedError(ProviderError):
    """Raised when the tracker-type discriminator names no known tracker."""

    def __init__(self, tracker_type: str) -> None:
        super().__init__(
            provider=tracker_type,
            message=f"Missing tracker or Unknown tracker type: '{tracker_type}'",
        )
        self.tracker_type = tracker_type

    def __str__(self) -> str:
        return self.message
