from enum import StrEnum


class TrackerType(StrEnum):
    """Closed set of supported issue trackers."""

    BUGZILLA = "bugzilla"
    JIRA = "jira"
