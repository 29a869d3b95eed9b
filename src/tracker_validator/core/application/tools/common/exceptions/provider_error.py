from __future__ import annotations

from dataclasses import dataclass

from tracker_validator.core.application.tools.common.exceptions.domain_error import DomainError


@dataclass(eq=False)
class ProviderError(DomainError):
    """Transport-level failure talking to a tracker or to GitHub. Never retried."""

    provider: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
