"""Deterministic tracker validation pipeline for a single pull request."""

from collections.abc import Callable
from dataclasses import dataclass

import structlog
from structlog.contextvars import bound_contextvars

from tracker_validator.core.application.exceptions import TrackerValidationFailedError
from tracker_validator.core.application.tools import TrackerController, TrackerTool, VcsTool
from tracker_validator.core.application.tools.common.exceptions import TrackerNotSupportedError
from tracker_validator.core.application.workflows.base_workflow import BaseWorkflow
from tracker_validator.core.domain.pull_request import PullRequest
from tracker_validator.core.domain.validation import CheckName, ValidationReport, ValidationRules

logger = structlog.get_logger()

TrackerResolverFn = Callable[[str], TrackerController[TrackerTool]]


@dataclass(frozen=True)
class _RunTarget:
    owner: str
    repo: str
    pull_request: PullRequest
    present_labels: frozenset[str]

    @property
    def number(self) -> int:
        return self.pull_request.number


class TrackerValidationWorkflow(BaseWorkflow):
    """Resolve -> Fetch -> Product -> Component -> Approval -> Link/Transition -> Labels."""

    def __init__(
        self,
        vcs: VcsTool,
        resolve_tracker: TrackerResolverFn,
        rules: ValidationRules,
    ) -> None:
        self._vcs = vcs
        self._resolve_tracker = resolve_tracker
        self._rules = rules

    async def execute(self, owner: str, repo: str, pull_request: PullRequest) -> str:
        """Run every check and return the success digest, or raise with the combined digest."""
        report = await self.run(owner, repo, pull_request)
        return self._step_9_conclude(report)

    async def run(self, owner: str, repo: str, pull_request: PullRequest) -> ValidationReport:
        """Execute steps 1-8 and return the accumulated report without concluding."""
        with bound_contextvars(
            tracker_type=self._rules.tracker_type,
            tracker_id=self._rules.tracker_id,
            pr_number=pull_request.number,
        ):
            logger.info("Tracker validation started", repository=f"{owner}/{repo}")
            controller = await self._step_1_resolve_tracker(owner, repo, pull_request)
            tracker = controller.adapter
            await tracker.connect()
            try:
                await self._log_tracker_version(tracker)
                return await self._run_validation_pipeline(tracker, owner, repo, pull_request)
            finally:
                await self._disconnect_tracker(tracker)

    async def _run_validation_pipeline(
        self, tracker: TrackerTool, owner: str, repo: str, pull_request: PullRequest
    ) -> ValidationReport:
        target = await self._step_2_fetch_pr_labels(owner, repo, pull_request)
        await self._step_3_fetch_issue(tracker)
        report = ValidationReport()
        report, product_ok = await self._step_4_check_product(tracker, report, target)
        report, component_ok = await self._step_5_check_component(tracker, report, target)
        report = await self._step_6_check_approval(tracker, report, target)
        # approval is reported but does not gate linking
        if product_ok and component_ok:
            report = await self._step_7_link_and_transition(tracker, report, target)
        else:
            logger.info("Skipping tracker link and state change: product or component mismatch")
        await self._step_8_apply_labels(report, target)
        return report

    # ── Step Methods ─────────────────────────────────────────────────

    async def _step_1_resolve_tracker(
        self, owner: str, repo: str, pull_request: PullRequest
    ) -> TrackerController[TrackerTool]:
        """Pick the adapter once for the whole run; label the PR if the type is unknown."""
        logger.info("Step 1: Resolving tracker adapter")
        try:
            return self._resolve_tracker(self._rules.tracker_type)
        except TrackerNotSupportedError as exc:
            label = self._rules.label_for(CheckName.MISSING_TRACKER)
            logger.error(
                "Unknown tracker type",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            await self._vcs.add_labels(owner, repo, pull_request.number, [label])
            raise TrackerValidationFailedError(
                str(exc), context={"labels_added": [label]}
            ) from exc

    async def _step_2_fetch_pr_labels(
        self, owner: str, repo: str, pull_request: PullRequest
    ) -> _RunTarget:
        logger.info("Step 2: Fetching pull request labels")
        labels = await self._vcs.get_labels(owner, repo, pull_request.number)
        logger.debug("Pull request labels fetched", labels=labels)
        return _RunTarget(owner, repo, pull_request, frozenset(labels))

    async def _step_3_fetch_issue(self, tracker: TrackerTool) -> None:
        logger.info("Step 3: Fetching issue details")
        details = await tracker.get_issue_details(self._rules.tracker_id)
        logger.info(
            "Issue details fetched",
            issue_id=details.id,
            product=details.product,
            component=details.component,
            status=details.status,
        )

    async def _step_4_check_product(
        self, tracker: TrackerTool, report: ValidationReport, target: _RunTarget
    ) -> tuple[ValidationReport, bool]:
        products = self._rules.products
        passed = tracker.is_matching_product(products)
        product = tracker.issue_details.product
        md_url = tracker.get_markdown_url()
        report = await self._record_check(
            report,
            target,
            CheckName.INVALID_PRODUCT,
            passed,
            success_message=f"🟢 Tracker {md_url} has set desired product: `{product}`",
            failure_message=(
                f"🔴 Tracker {md_url} has product `{product}` "
                f"but desired product is one of `{','.join(products)}`"
            ),
        )
        return report, passed

    async def _step_5_check_component(
        self, tracker: TrackerTool, report: ValidationReport, target: _RunTarget
    ) -> tuple[ValidationReport, bool]:
        expected = self._rules.component
        passed = tracker.is_matching_component(expected)
        md_url = tracker.get_markdown_url()
        report = await self._record_check(
            report,
            target,
            CheckName.INVALID_COMPONENT,
            passed,
            success_message=f"🟢 Tracker {md_url} has set desired component: `{expected}`",
            failure_message=(
                f"🔴 Tracker {md_url} has component `{tracker.issue_details.component}` "
                f"but desired component is `{expected}`"
            ),
        )
        return report, passed

    async def _step_6_check_approval(
        self, tracker: TrackerTool, report: ValidationReport, target: _RunTarget
    ) -> ValidationReport:
        md_url = tracker.get_markdown_url()
        return await self._record_check(
            report,
            target,
            CheckName.UNAPPROVED,
            tracker.is_approved(),
            success_message=f"🟢 Tracker {md_url} has been approved",
            failure_message=f"🔴 Tracker {md_url} has not been approved",
        )

    async def _step_7_link_and_transition(
        self, tracker: TrackerTool, report: ValidationReport, target: _RunTarget
    ) -> ValidationReport:
        """Link the PR and advance the issue; outcomes are notices, not checks."""
        logger.info("Step 7: Linking pull request and updating tracker state")
        pr_path = target.pull_request.path(target.owner, target.repo)
        link_message = f"🔗 {await tracker.add_link(self._rules.link_url_prefix, pr_path)}"
        logger.info(link_message, annotation="notice")
        state_message = f"🎺 {await tracker.change_state()}"
        logger.info(state_message, annotation="notice")
        return report.with_notice(link_message).with_notice(state_message)

    async def _step_8_apply_labels(self, report: ValidationReport, target: _RunTarget) -> None:
        if not report.labels.add:
            logger.debug("No labels to set")
            return
        labels = list(report.labels.add)
        logger.info("Step 8: Applying labels", labels=labels)
        await self._vcs.add_labels(target.owner, target.repo, target.number, labels)

    def _step_9_conclude(self, report: ValidationReport) -> str:
        if report.has_failures:
            logger.error(
                "Tracker validation failed",
                processing_status="ERROR",
                failed_checks=[failure.check.value for failure in report.failures],
            )
            raise TrackerValidationFailedError(
                report.summary(),
                context={"labels_added": list(report.labels.add), "report": report},
            )
        logger.info("Tracker validation passed", processing_status="SUCCESS")
        return report.summary()

    # ── Private Helpers ──────────────────────────────────────────────

    async def _record_check(
        self,
        report: ValidationReport,
        target: _RunTarget,
        check: CheckName,
        passed: bool,
        success_message: str,
        failure_message: str,
    ) -> ValidationReport:
        """Fold one check result into the report; detach its label right away if it now passes."""
        updated = report.record_check(
            check,
            passed,
            self._rules.label_for(check),
            target.present_labels,
            success_message,
            failure_message,
        )
        for label in updated.labels.removals_since(report.labels):
            logger.info("Removing stale label", label=label)
            await self._vcs.remove_label(target.owner, target.repo, target.number, label)
        logger.info("Check evaluated", check=check.value, passed=passed)
        return updated

    async def _log_tracker_version(self, tracker: TrackerTool) -> None:
        version = await tracker.get_version()
        logger.debug(
            "Using tracker",
            tracker=tracker.tracker_type.value,
            instance=tracker.instance,
            version=version,
        )

    @staticmethod
    async def _disconnect_tracker(tracker: TrackerTool) -> None:
        """Close the tracker session; swallow errors to avoid masking the original exception."""
        try:
            await tracker.disconnect()
        except Exception:  # noqa: BLE001
            logger.warning("Failed to disconnect tracker", tool_type=type(tracker).__name__)
