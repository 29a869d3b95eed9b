import base64
from datetime import UTC, datetime
from urllib.parse import quote

import structlog

from tracker_validator.core.application.tools import VcsTool
from tracker_validator.core.application.tools.common.exceptions import ProviderError
from tracker_validator.infrastructure.tools.vcs.github.config.github_settings import GitHubSettings
from tracker_validator.infrastructure.tools.vcs.github.dtos import GitHubContentDTO, GitHubLabelDTO
from tracker_validator.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient

logger = structlog.get_logger()

CHECK_RUN_TITLE = "Tracker Validation"


class GitHubVcsAdapter(VcsTool):
    """Pull request labels, check-runs and repository files over the GitHub REST API."""

    def __init__(self, settings: GitHubSettings, client: GitHubHttpClient | None = None) -> None:
        self._client = client or GitHubHttpClient(settings)

    async def connect(self) -> None:
        await self._client.connect()

    async def disconnect(self) -> None:
        await self._client.disconnect()

    async def get_labels(self, owner: str, repo: str, number: int) -> list[str]:
        payload = await self._client.get(f"repos/{owner}/{repo}/issues/{number}/labels") or []
        return [GitHubLabelDTO.model_validate(item).name for item in payload]

    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> None:
        if not labels:
            logger.debug("No labels to set", pr_number=number)
            return
        await self._client.post(
            f"repos/{owner}/{repo}/issues/{number}/labels", {"labels": labels}
        )
        logger.info("Labels added", pr_number=number, labels=labels, source_system="GitHub")

    async def remove_label(self, owner: str, repo: str, number: int, label: str) -> None:
        path = f"repos/{owner}/{repo}/issues/{number}/labels/{quote(label, safe='')}"
        try:
            await self._client.delete(path)
        except ProviderError as exc:
            if exc.status_code != 404:
                raise
            logger.debug("Label already absent", pr_number=number, label=label)
            return
        logger.info("Label removed", pr_number=number, label=label, source_system="GitHub")

    async def update_check_run(
        self, owner: str, repo: str, check_run_id: int, conclusion: str, summary: str
    ) -> None:
        await self._client.patch(
            f"repos/{owner}/{repo}/check-runs/{check_run_id}",
            {
                "completed_at": datetime.now(UTC).isoformat(),
                "conclusion": conclusion,
                "output": {"title": CHECK_RUN_TITLE, "summary": summary},
            },
        )
        logger.info(
            "Check run updated",
            check_run_id=check_run_id,
            conclusion=conclusion,
            source_system="GitHub",
        )

    async def get_file_content(self, owner: str, repo: str, path: str) -> str | None:
        try:
            payload = await self._client.get(f"repos/{owner}/{repo}/contents/{path.lstrip('/')}")
        except ProviderError as exc:
            if exc.status_code == 404:
                return None
            raise
        entry = GitHubContentDTO.model_validate(payload or {})
        if entry.encoding != "base64":
            return entry.content
        return base64.b64decode(entry.content).decode("utf-8")
