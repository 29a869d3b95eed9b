from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracker_validator.core.application.tools.common.exceptions import ConfigurationError


class GitHubSettings(BaseSettings):
    """Settings for the GitHub REST API used for labels, check-runs and config files."""

    token: SecretStr | None = Field(default=None, alias="INPUT_TOKEN")
    api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")

    def validate_credentials(self) -> None:
        if self.token is None or not self.token.get_secret_value():
            raise ConfigurationError("GitHub token is not configured (input 'token').")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
