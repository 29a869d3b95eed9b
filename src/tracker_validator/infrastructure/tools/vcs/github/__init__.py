from .config.github_settings import GitHubSettings
from .github_http_client import GitHubHttpClient
from .github_vcs_adapter import GitHubVcsAdapter

__all__ = ["GitHubHttpClient", "GitHubSettings", "GitHubVcsAdapter"]
