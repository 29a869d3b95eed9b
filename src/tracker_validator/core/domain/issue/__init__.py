from tracker_validator.core.domain.issue.issue_details import IssueDetails, TrackerFlag

__all__ = ["IssueDetails", "TrackerFlag"]
