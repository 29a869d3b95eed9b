from .jira_issue_mapper import map_issue

__all__ = ["map_issue"]
