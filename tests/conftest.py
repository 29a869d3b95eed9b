from unittest.mock import AsyncMock

import pytest

from tracker_validator.core.application.tools import TrackerController, TrackerTool, VcsTool
from tracker_validator.core.domain.issue import IssueDetails
from tracker_validator.core.domain.pull_request import PullRequest
from tracker_validator.core.domain.shared import TrackerType
from tracker_validator.core.domain.validation import ValidationRules


class InMemoryTracker(TrackerTool):
    """Tracker double serving a fixed issue and recording mutations."""

    _NAME = "InMemory"

    def __init__(self, issue: IssueDetails, approved: bool = True) -> None:
        super().__init__("https://tracker.example.com/")
        self._issue = issue
        self._approved = approved
        self.fetched_ids: list[str] = []
        self.link_calls: list[tuple[str, str]] = []
        self.state_calls = 0
        self.disconnected = False

    @property
    def tracker_type(self) -> TrackerType:
        return TrackerType.JIRA

    async def disconnect(self) -> None:
        self.disconnected = True

    async def get_issue_details(self, issue_id: str) -> IssueDetails:
        self.fetched_ids.append(issue_id)
        self._issue_details = self._issue
        return self._issue

    async def get_version(self) -> str:
        return "9.12.0"

    def get_url(self) -> str:
        return f"{self.instance}/browse/{self._require_details('get_url').id}"

    def is_approved(self) -> bool:
        self._require_details("is_approved")
        return self._approved

    async def change_state(self) -> str:
        self._require_details("change_state")
        self.state_calls += 1
        return f"Issue {self.get_markdown_url()} has changed state to 'In Progress'"

    async def add_link(self, url_prefix: str, identifier: str) -> str:
        self._require_details("add_link")
        self.link_calls.append((url_prefix, identifier))
        return f"PR was linked with issue {self.get_markdown_url()}"


# ── Fixtures ──────────────────────────────────────────────────


@pytest.fixture()
def pull_request() -> PullRequest:
    return PullRequest(number=42, base="main", ref="feature")


@pytest.fixture()
def matching_issue() -> IssueDetails:
    return IssueDetails(
        id="RHEL-1234",
        summary="systemd crashes on boot",
        product="8.1",
        component="kernel",
        status="New",
        fix_versions=("8.1.0",),
    )


@pytest.fixture()
def rules() -> ValidationRules:
    return ValidationRules(
        tracker_type="jira",
        tracker_id="RHEL-1234",
        component="kernel",
        products=("8.1",),
    )


@pytest.fixture()
def vcs() -> AsyncMock:
    mock = AsyncMock(spec=VcsTool)
    mock.get_labels.return_value = []
    return mock


@pytest.fixture()
def make_tracker():
    def _factory(issue: IssueDetails, approved: bool = True) -> InMemoryTracker:
        return InMemoryTracker(issue, approved=approved)

    return _factory


@pytest.fixture()
def resolver_for():
    """Build a resolve_tracker callable that always hands back the given adapter."""

    def _factory(tracker: TrackerTool):
        return lambda _tracker_type: TrackerController(tracker)

    return _factory
