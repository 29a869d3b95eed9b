from .bugzilla_http_client import BugzillaHttpClient
from .bugzilla_tracker_adapter import BugzillaTrackerAdapter
from .config.bugzilla_settings import BugzillaSettings

__all__ = ["BugzillaHttpClient", "BugzillaSettings", "BugzillaTrackerAdapter"]
