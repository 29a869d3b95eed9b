"""Pure functions mapping Bugzilla REST payloads onto domain issue snapshots."""

from typing import Any

from tracker_validator.core.domain.issue import IssueDetails, TrackerFlag
from tracker_validator.infrastructure.tools.tracker.bugzilla.dtos import BugzillaBugDTO


def map_bug(payload: dict[str, Any]) -> IssueDetails:
    """Build IssueDetails; the first bug version acts as the product."""
    dto = BugzillaBugDTO.model_validate(payload)
    return IssueDetails(
        id=str(dto.id),
        summary=dto.summary,
        product=dto.version[0] if dto.version else "",
        component=dto.component[0] if dto.component else "",
        status=dto.status,
        flags=tuple(TrackerFlag(name=flag.name, status=flag.status) for flag in dto.flags),
    )
