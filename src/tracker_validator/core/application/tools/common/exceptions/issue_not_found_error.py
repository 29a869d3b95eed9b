from __future__ import annotations

from tracker_validator.core.application.tools.common.exceptions.provider_error import ProviderError


class IssueNotFoundError(ProviderError):
    """Raised when the tracker rejects the requested issue id."""

    def __init__(self, provider: str, issue_id: str, status_code: int | None = None) -> None:
        super().__init__(
            provider=provider,
            message=f"Issue '{issue_id}' was not found.",
            status_code=status_code,
        )
        self.issue_id = issue_id
