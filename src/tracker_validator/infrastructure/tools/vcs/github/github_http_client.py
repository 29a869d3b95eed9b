from tracker_validator.infrastructure.tools.common.base_http_client import BaseHttpClient
from tracker_validator.infrastructure.tools.vcs.github.config.github_settings import GitHubSettings


class GitHubHttpClient(BaseHttpClient):
    _PROVIDER = "GitHub"

    def __init__(self, settings: GitHubSettings) -> None:
        super().__init__(settings.api_url)
        self.settings = settings

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.token.get_secret_value() if self.settings.token else ""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "Authorization": f"Bearer {token}",
        }
