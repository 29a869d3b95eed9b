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
from tracker_validator.infrastructure.tools.tracker.jira.config.jira_settings import JiraSettings
from tracker_validator.infrastructure.tools.tracker.jira.dtos import (
    JiraRemoteLinkDTO,
    JiraServerInfoDTO,
)
from tracker_validator.infrastructure.tools.tracker.jira.jira_http_client import JiraHttpClient
from tracker_validator.infrastructure.tools.tracker.jira.mappers import map_issue

logger = structlog.get_logger()

GITHUB_ICON_URL = "https://github.githubassets.com/favicon.ico"


class JiraTrackerAdapter(TrackerTool):
    """Jira backend: approval is "has a fix version", state moves by a configured transition."""

    _NAME = "Jira"

    def __init__(self, settings: JiraSettings, client: JiraHttpClient | None = None) -> None:
        super().__init__(settings.instance)
        self._settings = settings
        self._client = client or JiraHttpClient(settings)
        self._linked_urls: set[str] = set()

    @property
    def tracker_type(self) -> TrackerType:
        return TrackerType.JIRA

    async def connect(self) -> None:
        await self._client.connect()

    async def disconnect(self) -> None:
        await self._client.disconnect()

    # ── Remote lookups ──

    async def get_issue_details(self, issue_id: str) -> IssueDetails:
        try:
            payload = await self._client.get_issue(issue_id)
        except ProviderError as exc:
            if exc.status_code == 404:
                raise IssueNotFoundError(self._NAME, issue_id, exc.status_code) from exc
            raise
        self._issue_details = map_issue(payload, issue_id)
        self._linked_urls.clear()
        return self._issue_details

    async def get_version(self) -> str:
        info = JiraServerInfoDTO.model_validate(await self._client.get_server_info() or {})
        if not info.version:
            raise MissingDataError("Jira.get_version(): missing version.")
        return info.version

    # ── Formatting ──

    def get_url(self) -> str:
        details = self._require_details("get_url")
        return f"{self.instance}/browse/{details.id}"

    # ── Predicates ──

    def is_approved(self) -> bool:
        # approved once a Fix Version/s is set
        return len(self._require_details("is_approved").fix_versions) > 0

    # ── Remote mutations ──

    async def change_state(self) -> str:
        details = self._require_details("change_state")
        if details.status not in self._settings.not_started_states:
            logger.debug(
                "Jira issue is already started",
                issue_id=details.id,
                status=details.status,
                not_started_states=self._settings.not_started_states,
            )
            return f"Jira issue {self.get_markdown_url()} has desired state."

        logger.debug("Changing Jira issue state", issue_id=details.id)
        await self._client.do_transition(details.id, self._settings.transition_id)
        self._issue_details = dataclasses.replace(details, status=self._settings.target_state)
        return (
            f"Jira issue {self.get_markdown_url()} has changed state to "
            f"'{self._settings.target_state}'"
        )

    async def add_link(self, url_prefix: str, identifier: str) -> str:
        details = self._require_details("add_link")
        url = f"{url_prefix}{identifier}"
        if url in self._linked_urls or await self._has_remote_link(details.id, url):
            return f"Link {url} is already linked with Jira issue {self.get_markdown_url()}."

        await self._client.create_remote_link(
            details.id,
            {
                "title": f"Fix has been submitted as GitHub PR {identifier}",
                "url": url,
                "icon": {"title": "GitHub", "url16x16": GITHUB_ICON_URL},
            },
        )
        self._linked_urls.add(url)
        return f"PR was linked with Jira issue {self.get_markdown_url()}"

    async def _has_remote_link(self, issue_id: str, url: str) -> bool:
        for raw in await self._client.get_remote_links(issue_id):
            link = JiraRemoteLinkDTO.model_validate(raw)
            # partial records without an object or url are ignored
            if link.object is None or link.object.url is None:
                continue
            if link.object.url == url:
                return True
        return False
