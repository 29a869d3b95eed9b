import structlog
from pydantic import ValidationError
from pydantic_settings import SettingsError

from tracker_validator.core.application.tools import TrackerController, TrackerTool
from tracker_validator.core.application.tools.common.exceptions import (
    ConfigurationError,
    TrackerNotSupportedError,
)
from tracker_validator.core.domain.shared import TrackerType
from tracker_validator.infrastructure.tools.tracker.bugzilla import (
    BugzillaSettings,
    BugzillaTrackerAdapter,
)
from tracker_validator.infrastructure.tools.tracker.jira import JiraSettings, JiraTrackerAdapter

logger = structlog.get_logger()


class TrackerResolver:
    """Maps the tracker-type input onto one of the two supported adapters."""

    def __init__(
        self,
        jira_settings: JiraSettings | None = None,
        bugzilla_settings: BugzillaSettings | None = None,
    ) -> None:
        self._jira_settings = jira_settings
        self._bugzilla_settings = bugzilla_settings

    def __call__(self, tracker_type: str) -> TrackerController[TrackerTool]:
        return self.resolve(tracker_type)

    def resolve(self, tracker_type: str) -> TrackerController[TrackerTool]:
        # exact match: only "jira" and "bugzilla" are accepted
        try:
            kind = TrackerType(tracker_type)
        except ValueError as exc:
            raise TrackerNotSupportedError(tracker_type) from exc

        adapter: TrackerTool
        match kind:
            case TrackerType.BUGZILLA:
                adapter = BugzillaTrackerAdapter(self._bugzilla())
            case TrackerType.JIRA:
                adapter = JiraTrackerAdapter(self._jira())

        logger.info("Tracker adapter selected", tracker=kind.value, instance=adapter.instance)
        return TrackerController(adapter)

    def _bugzilla(self) -> BugzillaSettings:
        try:
            settings = self._bugzilla_settings or BugzillaSettings()
        except (ValidationError, SettingsError) as exc:
            raise ConfigurationError(f"Invalid Bugzilla settings: {exc}") from exc
        settings.validate_credentials()
        return settings

    def _jira(self) -> JiraSettings:
        try:
            settings = self._jira_settings or JiraSettings()
        except (ValidationError, SettingsError) as exc:
            raise ConfigurationError(f"Invalid Jira settings: {exc}") from exc
        settings.validate_credentials()
        return settings
