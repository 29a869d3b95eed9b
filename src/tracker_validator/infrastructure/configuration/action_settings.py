from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracker_validator.core.application.tools.common.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = ".github/tracker-validator.yml"


class ActionSettings(BaseSettings):
    """Inputs of the GitHub Action step plus the runner-provided repository slug."""

    tracker_type: str = Field(default="", alias="INPUT_TRACKER-TYPE")
    tracker: str = Field(default="", alias="INPUT_TRACKER")
    component: str = Field(default="", alias="INPUT_COMPONENT")
    pr_metadata: str = Field(default="", alias="INPUT_PR-METADATA")
    check_run_id: int | None = Field(default=None, alias="INPUT_CHECK-RUN-ID")
    config_path: str = Field(default=DEFAULT_CONFIG_PATH, alias="INPUT_CONFIG-PATH")
    repository: str = Field(default="", alias="GITHUB_REPOSITORY")

    @field_validator("check_run_id", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        """Unset action inputs arrive as empty strings."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("config_path", mode="before")
    @classmethod
    def default_config_path(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return DEFAULT_CONFIG_PATH
        return value

    def split_repository(self) -> tuple[str, str]:
        owner, _, repo = self.repository.partition("/")
        if not owner or not repo:
            raise ConfigurationError(
                f"GITHUB_REPOSITORY must be 'owner/repo', got '{self.repository}'."
            )
        return owner, repo

    def validate_inputs(self) -> None:
        missing = [
            name
            for name, value in (
                ("tracker", self.tracker),
                ("component", self.component),
                ("pr-metadata", self.pr_metadata),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required action inputs: {', '.join(missing)}.")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
