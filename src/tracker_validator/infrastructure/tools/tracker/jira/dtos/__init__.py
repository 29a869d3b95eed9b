from .jira_issue_dto import (
    JiraIssueDTO,
    JiraIssueFieldsDTO,
    JiraNamedDTO,
    JiraRemoteLinkDTO,
    JiraRemoteLinkObjectDTO,
    JiraServerInfoDTO,
)

__all__ = [
    "JiraIssueDTO",
    "JiraIssueFieldsDTO",
    "JiraNamedDTO",
    "JiraRemoteLinkDTO",
    "JiraRemoteLinkObjectDTO",
    "JiraServerInfoDTO",
]
