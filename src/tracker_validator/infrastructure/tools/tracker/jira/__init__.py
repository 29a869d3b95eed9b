from .config.jira_settings import JiraSettings
from .jira_http_client import JiraHttpClient
from .jira_tracker_adapter import JiraTrackerAdapter

__all__ = ["JiraHttpClient", "JiraSettings", "JiraTrackerAdapter"]
