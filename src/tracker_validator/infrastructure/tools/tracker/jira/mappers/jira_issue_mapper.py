"""Pure functions mapping Jira REST payloads onto domain issue snapshots."""

from typing import Any

from tracker_validator.core.domain.issue import IssueDetails
from tracker_validator.infrastructure.tools.tracker.jira.dtos import JiraIssueDTO, JiraNamedDTO


def _first_name(entries: list[JiraNamedDTO]) -> str:
    return entries[0].name if entries else ""


def map_issue(payload: dict[str, Any], requested_id: str) -> IssueDetails:
    """Build IssueDetails; the first affected version acts as the product."""
    dto = JiraIssueDTO.model_validate(payload)
    fields = dto.fields
    return IssueDetails(
        id=dto.key or requested_id,
        summary=fields.summary,
        product=_first_name(fields.versions),
        component=_first_name(fields.components),
        status=fields.status.name if fields.status else "",
        fix_versions=tuple(version.name for version in fields.fix_versions),
    )
