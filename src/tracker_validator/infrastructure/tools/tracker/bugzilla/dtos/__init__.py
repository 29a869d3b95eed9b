from .bugzilla_bug_dto import (
    BugzillaBugDTO,
    BugzillaBugsResponseDTO,
    BugzillaExternalBugDTO,
    BugzillaExternalBugsDTO,
    BugzillaExternalTypeDTO,
    BugzillaFlagDTO,
    BugzillaVersionDTO,
)

__all__ = [
    "BugzillaBugDTO",
    "BugzillaBugsResponseDTO",
    "BugzillaExternalBugDTO",
    "BugzillaExternalBugsDTO",
    "BugzillaExternalTypeDTO",
    "BugzillaFlagDTO",
    "BugzillaVersionDTO",
]
