import json

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracker_validator.core.application.tools.common.exceptions import ConfigurationError


class JiraSettings(BaseSettings):
    """Settings for the Jira tracker integration (read from action inputs)."""

    # ── Core Jira settings ──
    instance: str = Field(default="", alias="INPUT_JIRA-INSTANCE")
    api_token: SecretStr | None = Field(default=None, alias="INPUT_JIRA-API-TOKEN")

    # ── Workflow states ──
    transition_id: str = Field(default="111", alias="INPUT_JIRA-TRANSITION-ID")
    not_started_states: list[str] = Field(
        default_factory=lambda: ["New", "Planning"], alias="INPUT_JIRA-NOT-STARTED-STATES"
    )
    target_state: str = Field(default="In Progress", alias="INPUT_JIRA-TARGET-STATE")

    @field_validator("not_started_states", mode="before")
    @classmethod
    def parse_json_list(cls, value: object) -> list[str]:
        """Parse a JSON list string into a Python list."""
        if isinstance(value, str):
            parsed = json.loads(value)
            if not isinstance(parsed, list):
                raise ValueError(f"Expected a JSON list, got {type(parsed).__name__}")
            return parsed
        if isinstance(value, list):
            return value
        return []

    def validate_credentials(self) -> None:
        if not self.instance:
            raise ConfigurationError("Jira instance is not configured (input 'jira-instance').")
        if self.api_token is None or not self.api_token.get_secret_value():
            raise ConfigurationError("Jira API token is not configured (input 'jira-api-token').")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
