from typing import Any

from tracker_validator.infrastructure.tools.common.base_http_client import BaseHttpClient
from tracker_validator.infrastructure.tools.tracker.bugzilla.config.bugzilla_settings import (
    BugzillaSettings,
)

ISSUE_FIELDS = "id,summary,product,component,version,status,flags"


class BugzillaHttpClient(BaseHttpClient):
    """Bugzilla REST client authenticated with an API key."""

    _PROVIDER = "Bugzilla"

    def __init__(self, settings: BugzillaSettings) -> None:
        super().__init__(settings.instance)
        self.settings = settings

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.api_token.get_secret_value() if self.settings.api_token else ""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    async def get_bug(self, bug_id: str) -> dict[str, Any]:
        return await self.get(f"rest/bug/{bug_id}", params={"include_fields": ISSUE_FIELDS})

    async def get_version(self) -> dict[str, Any]:
        return await self.get("rest/version")

    async def update_status(self, bug_id: str, status: str) -> None:
        await self.put(f"rest/bug/{bug_id}", {"status": status})

    async def get_external_bugs(self, bug_id: str) -> dict[str, Any]:
        return await self.get(f"rest/bug/{bug_id}", params={"include_fields": "external_bugs"})

    async def add_external_bug(self, bug_id: str, type_url: str, external_id: str) -> None:
        await self.put(
            f"rest/bug/{bug_id}",
            {"external_bugs": {"add": [{"ext_type_url": type_url, "ext_bz_bug_id": external_id}]}},
        )
