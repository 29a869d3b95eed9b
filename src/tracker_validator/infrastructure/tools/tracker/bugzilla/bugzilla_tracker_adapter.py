import dataclasses

import structlog

from tracker_validator.core.application.tools import TrackerTool
from tracker_validator.core.application.tools.common.exceptions import (
    IssueNotFoundError,
    MissingDataError,
    ProviderError,
)
from tracker_validator.core.domain.issue import IssueDetails
from tracker_validator.core.domain.shared import TrackerType
from tracker_validator.infrastructure.tools.tracker.bugzilla.bugzilla_http_client import (
    BugzillaHttpClient,
)
from tracker_validator.infrastructure.tools.tracker.bugzilla.config.bugzilla_settings import (
    BugzillaSettings,
)
from tracker_validator.infrastructure.tools.tracker.bugzilla.dtos import (
    BugzillaBugsResponseDTO,
    BugzillaExternalBugsDTO,
    BugzillaVersionDTO,
)
from tracker_validator.infrastructure.tools.tracker.bugzilla.mappers import map_bug

logger = structlog.get_logger()


class BugzillaTrackerAdapter(TrackerTool):
    """Bugzilla backend: approval is a ``+`` release flag, state moves by a status update."""

    _NAME = "Bugzilla"

    def __init__(
        self, settings: BugzillaSettings, client: BugzillaHttpClient | None = None
    ) -> None:
        super().__init__(settings.instance)
        self._settings = settings
        self._client = client or BugzillaHttpClient(settings)
        self._linked_urls: set[str] = set()

    @property
    def tracker_type(self) -> TrackerType:
        return TrackerType.BUGZILLA

    async def connect(self) -> None:
        await self._client.connect()

    async def disconnect(self) -> None:
        await self._client.disconnect()

    # ── Remote lookups ──

    async def get_issue_details(self, issue_id: str) -> IssueDetails:
        try:
            payload = await self._client.get_bug(issue_id)
        except ProviderError as exc:
            if exc.status_code == 404:
                raise IssueNotFoundError(self._NAME, issue_id, exc.status_code) from exc
            raise
        response = BugzillaBugsResponseDTO.model_validate(payload or {})
        if response.error or not response.bugs:
            logger.warning("Bugzilla returned no bug", issue_id=issue_id, fault=response.message)
            raise IssueNotFoundError(self._NAME, issue_id)
        self._issue_details = map_bug(response.bugs[0])
        self._linked_urls.clear()
        return self._issue_details

    async def get_version(self) -> str:
        info = BugzillaVersionDTO.model_validate(await self._client.get_version() or {})
        if not info.version:
            raise MissingDataError("Bugzilla.get_version(): missing version.")
        return info.version

    # ── Formatting ──

    def get_url(self) -> str:
        details = self._require_details("get_url")
        return f"{self.instance}/show_bug.cgi?id={details.id}"

    # ── Predicates ──

    def is_approved(self) -> bool:
        return self._require_details("is_approved").has_flag(self._settings.approval_flag, "+")

    # ── Remote mutations ──

    async def change_state(self) -> str:
        details = self._require_details("change_state")
        if details.status not in self._settings.not_started_states:
            logger.debug(
                "Bugzilla bug is already started",
                issue_id=details.id,
                status=details.status,
                not_started_states=self._settings.not_started_states,
            )
            return f"Bugzilla bug {self.get_markdown_url()} has desired state."

        logger.debug("Changing Bugzilla bug state", issue_id=details.id)
        await self._client.update_status(details.id, self._settings.target_state)
        self._issue_details = dataclasses.replace(details, status=self._settings.target_state)
        return (
            f"Bugzilla bug {self.get_markdown_url()} has changed state to "
            f"'{self._settings.target_state}'"
        )

    async def add_link(self, url_prefix: str, identifier: str) -> str:
        details = self._require_details("add_link")
        url = f"{url_prefix}{identifier}"
        if url in self._linked_urls or await self._has_external_bug(details.id, url):
            return f"Link {url} is already linked with Bugzilla bug {self.get_markdown_url()}."

        await self._client.add_external_bug(details.id, url_prefix, identifier)
        self._linked_urls.add(url)
        return f"PR was linked with Bugzilla bug {self.get_markdown_url()}"

    async def _has_external_bug(self, bug_id: str, url: str) -> bool:
        payload = BugzillaBugsResponseDTO.model_validate(
            await self._client.get_external_bugs(bug_id) or {}
        )
        if not payload.bugs:
            return False
        for entry in BugzillaExternalBugsDTO.model_validate(payload.bugs[0]).external_bugs:
            # entries missing a tracker type or id cannot be compared
            if entry.type is None or entry.type.url is None or entry.ext_bz_bug_id is None:
                continue
            if f"{entry.type.url}{entry.ext_bz_bug_id}" == url:
                return True
        return False
