import json

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracker_validator.core.application.tools.common.exceptions import ConfigurationError


class BugzillaSettings(BaseSettings):
    """Settings for the Bugzilla tracker integration (read from action inputs)."""

    # ── Core Bugzilla settings ──
    instance: str = Field(default="", alias="INPUT_BUGZILLA-INSTANCE")
    api_token: SecretStr | None = Field(default=None, alias="INPUT_BUGZILLA-API-TOKEN")

    # ── Approval and workflow states ──
    approval_flag: str = Field(default="release", alias="INPUT_BUGZILLA-APPROVAL-FLAG")
    not_started_states: list[str] = Field(
        default_factory=lambda: ["NEW", "ASSIGNED"], alias="INPUT_BUGZILLA-NOT-STARTED-STATES"
    )
    target_state: str = Field(default="POST", alias="INPUT_BUGZILLA-TARGET-STATE")

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
            raise ConfigurationError(
                "Bugzilla instance is not configured (input 'bugzilla-instance')."
            )
        if self.api_token is None or not self.api_token.get_secret_value():
            raise ConfigurationError(
                "Bugzilla API token is not configured (input 'bugzilla-api-token')."
            )

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
