from typing import Any

from tracker_validator.infrastructure.tools.common.base_http_client import BaseHttpClient
from tracker_validator.infrastructure.tools.tracker.jira.config.jira_settings import JiraSettings


class JiraHttpClient(BaseHttpClient):
    """Jira REST API v2 client authenticated with a personal access token."""

    _PROVIDER = "Jira"

    def __init__(self, settings: JiraSettings) -> None:
        super().__init__(settings.instance)
        self.settings = settings

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.api_token.get_secret_value() if self.settings.api_token else ""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    async def get_issue(self, key: str) -> dict[str, Any]:
        return await self.get(f"rest/api/2/issue/{key}")

    async def get_server_info(self) -> dict[str, Any]:
        return await self.get("rest/api/2/serverInfo")

    async def do_transition(self, key: str, transition_id: str) -> None:
        await self.post(
            f"rest/api/2/issue/{key}/transitions", {"transition": {"id": transition_id}}
        )

    async def get_remote_links(self, key: str) -> list[dict[str, Any]]:
        return await self.get(f"rest/api/2/issue/{key}/remotelink") or []

    async def create_remote_link(self, key: str, link_object: dict[str, Any]) -> None:
        await self.post(f"rest/api/2/issue/{key}/remotelink", {"object": link_object})
