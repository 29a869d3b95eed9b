"""GitHub Action entry point: wire adapters, run the validation, report the check-run."""

import structlog
from pydantic import ValidationError
from pydantic_settings import SettingsError

from tracker_validator.core.application.exceptions import TrackerValidationFailedError
from tracker_validator.core.application.tools import VcsTool
from tracker_validator.core.application.tools.common.exceptions import (
    ConfigurationError,
    DomainError,
)
from tracker_validator.core.application.workflows import TrackerValidationWorkflow
from tracker_validator.core.application.workflows.validation.tracker_validation_workflow import (
    TrackerResolverFn,
)
from tracker_validator.core.domain.pull_request import PullRequest
from tracker_validator.infrastructure.configuration import ActionSettings, ValidatorConfigLoader
from tracker_validator.infrastructure.entrypoints.action.dtos import PullRequestMetadataDTO
from tracker_validator.infrastructure.observability import configure_logging
from tracker_validator.infrastructure.resolution import TrackerResolver
from tracker_validator.infrastructure.tools.vcs.github import GitHubSettings, GitHubVcsAdapter

logger = structlog.get_logger()


class ActionRunner:
    def __init__(
        self,
        settings: ActionSettings,
        vcs: VcsTool,
        resolve_tracker: TrackerResolverFn,
    ) -> None:
        self._settings = settings
        self._vcs = vcs
        self._resolve_tracker = resolve_tracker

    async def run(self) -> int:
        """Return the process exit code: 0 when every check passed, 1 otherwise."""
        try:
            owner, repo = self._settings.split_repository()
        except ConfigurationError as exc:
            self._log_failure(exc)
            return 1

        await self._vcs.connect()
        try:
            return await self._run_and_report(owner, repo)
        finally:
            await self._vcs.disconnect()

    async def _run_and_report(self, owner: str, repo: str) -> int:
        try:
            summary = await self._validate(owner, repo)
        except TrackerValidationFailedError as exc:
            self._log_failure(exc, labels_added=exc.context.get("labels_added", []))
            await self._report(owner, repo, "failure", str(exc))
            return 1
        except Exception as exc:  # noqa: BLE001
            self._log_failure(exc)
            await self._report(owner, repo, "failure", str(exc))
            return 1

        logger.info("Tracker validation succeeded", summary=summary, processing_status="SUCCESS")
        try:
            await self._report(owner, repo, "success", summary)
        except DomainError as exc:
            self._log_failure(exc)
            return 1
        return 0

    async def _validate(self, owner: str, repo: str) -> str:
        self._settings.validate_inputs()
        pull_request = self._parse_pull_request()
        config = await ValidatorConfigLoader(self._vcs).load(
            owner, repo, self._settings.config_path
        )
        rules = config.to_rules(
            tracker_type=self._settings.tracker_type,
            tracker_id=self._settings.tracker,
            component=self._settings.component,
        )
        workflow = TrackerValidationWorkflow(self._vcs, self._resolve_tracker, rules)
        return await workflow.execute(owner, repo, pull_request)

    def _parse_pull_request(self) -> PullRequest:
        try:
            dto = PullRequestMetadataDTO.model_validate_json(self._settings.pr_metadata)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid 'pr-metadata' input: {exc}") from exc
        return dto.to_domain()

    async def _report(self, owner: str, repo: str, conclusion: str, summary: str) -> None:
        check_run_id = self._settings.check_run_id
        if check_run_id is None:
            logger.debug("No check run configured, skipping report", conclusion=conclusion)
            return
        try:
            await self._vcs.update_check_run(owner, repo, check_run_id, conclusion, summary)
        except DomainError as exc:
            if conclusion == "success":
                raise
            # the run already failed; keep its error as the outcome
            logger.warning(
                "Failed to report check run",
                check_run_id=check_run_id,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )

    @staticmethod
    def _log_failure(exc: Exception, **extra: object) -> None:
        logger.error(
            "Tracker validation run failed",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
            **extra,
        )


async def run_action() -> int:
    """Build the runner from the action environment and execute it."""
    configure_logging()
    try:
        settings = ActionSettings()
        github_settings = GitHubSettings()
        github_settings.validate_credentials()
    except (ConfigurationError, ValidationError, SettingsError) as exc:
        ActionRunner._log_failure(exc)
        return 1
    runner = ActionRunner(settings, GitHubVcsAdapter(github_settings), TrackerResolver())
    return await runner.run()
