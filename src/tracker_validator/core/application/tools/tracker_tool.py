from abc import abstractmethod
from collections.abc import Collection

from tracker_validator.core.application.tools.common.exceptions import PreconditionError
from tracker_validator.core.domain.issue import IssueDetails
from tracker_validator.core.domain.shared.base_tool import BaseTool
from tracker_validator.core.domain.shared.tool_type import ToolType
from tracker_validator.core.domain.shared.tracker_type import TrackerType


class TrackerTool(BaseTool):
    """Abstract tool contract shared by every issue-tracker backend.

    ``get_issue_details`` must run first: it caches the issue snapshot on the
    adapter and every other details-dependent operation reads that snapshot.
    """

    _NAME: str = "Tracker"

    def __init__(self, instance: str) -> None:
        self.instance = instance.rstrip("/")
        self._issue_details: IssueDetails | None = None

    @property
    def tool_type(self) -> ToolType:
        return ToolType.TRACKER

    @property
    @abstractmethod
    def tracker_type(self) -> TrackerType: ...

    @property
    def issue_details(self) -> IssueDetails:
        return self._require_details("issue_details")

    def _require_details(self, operation: str) -> IssueDetails:
        if self._issue_details is None:
            raise PreconditionError(self._NAME, operation)
        return self._issue_details

    # ── Remote lookups ──

    @abstractmethod
    async def get_issue_details(self, issue_id: str) -> IssueDetails:
        """Fetch the issue and cache it for the rest of the run."""

    @abstractmethod
    async def get_version(self) -> str:
        """Return the tracker server version; raise MissingDataError if absent."""

    # ── Formatting ──

    @abstractmethod
    def get_url(self) -> str: ...

    def get_markdown_url(self) -> str:
        details = self._require_details("get_markdown_url")
        return f"[{details.id}]({self.get_url()})"

    # ── Predicates ──

    def is_matching_product(self, expected: Collection[str]) -> bool:
        # product matching is optional
        if not expected:
            return True
        return self._require_details("is_matching_product").product in expected

    def is_matching_component(self, expected: str) -> bool:
        return self._require_details("is_matching_component").component == expected

    @abstractmethod
    def is_approved(self) -> bool: ...

    # ── Remote mutations ──

    @abstractmethod
    async def change_state(self) -> str:
        """Advance a not-yet-started issue; a no-op (with message) otherwise."""

    @abstractmethod
    async def add_link(self, url_prefix: str, identifier: str) -> str:
        """Link ``url_prefix + identifier`` to the issue unless it is already linked."""
