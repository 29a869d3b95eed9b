"""Unit tests for TrackerValidationWorkflow: tracker and GitHub are in-memory doubles."""

import dataclasses
from unittest.mock import AsyncMock, call

import pytest
from structlog.contextvars import clear_contextvars, get_contextvars

from tracker_validator.core.application.exceptions import TrackerValidationFailedError
from tracker_validator.core.application.tools.common.exceptions import (
    ProviderError,
    TrackerNotSupportedError,
)
from tracker_validator.core.application.workflows import TrackerValidationWorkflow
from tracker_validator.core.domain.issue import IssueDetails
from tracker_validator.core.domain.pull_request import PullRequest
from tracker_validator.core.domain.validation import CheckName, ValidationRules

MD_URL = "[RHEL-1234](https://tracker.example.com/browse/RHEL-1234)"


def _workflow(vcs: AsyncMock, tracker, rules: ValidationRules, resolver_for):
    return TrackerValidationWorkflow(vcs, resolver_for(tracker), rules)


# ══════════════════════════════════════════════════════════════
#  All checks pass
# ══════════════════════════════════════════════════════════════


class TestHappyPath:
    @pytest.mark.asyncio
    async def test_returns_success_digest_with_three_green_lines(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(matching_issue)

        result = await _workflow(vcs, tracker, rules, resolver_for).execute(
            "octo", "repo", pull_request
        )

        assert result == (
            "### Success\n\n"
            f"🟢 Tracker {MD_URL} has set desired product: `8.1`\n"
            f"🟢 Tracker {MD_URL} has set desired component: `kernel`\n"
            f"🟢 Tracker {MD_URL} has been approved"
        )
        vcs.add_labels.assert_not_awaited()
        vcs.remove_label.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_links_and_transitions_exactly_once(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(matching_issue)

        report = await _workflow(vcs, tracker, rules, resolver_for).run(
            "octo", "repo", pull_request
        )

        assert tracker.link_calls == [("https://github.com/", "octo/repo/pull/42")]
        assert tracker.state_calls == 1
        assert report.notices[0].startswith("🔗 ")
        assert report.notices[1].startswith("🎺 ")
        assert tracker.fetched_ids == ["RHEL-1234"]
        assert tracker.disconnected

    @pytest.mark.asyncio
    async def test_stale_labels_are_removed_for_passing_checks(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        vcs.get_labels.return_value = ["invalid-product", "unapproved", "unrelated"]
        tracker = make_tracker(matching_issue)

        await _workflow(vcs, tracker, rules, resolver_for).execute("octo", "repo", pull_request)

        assert vcs.remove_label.await_args_list == [
            call("octo", "repo", 42, "invalid-product"),
            call("octo", "repo", 42, "unapproved"),
        ]

    @pytest.mark.asyncio
    async def test_empty_product_list_disables_product_check(
        self, vcs, matching_issue, pull_request, resolver_for, make_tracker
    ) -> None:
        rules = ValidationRules(tracker_type="jira", tracker_id="RHEL-1234", component="kernel")
        tracker = make_tracker(dataclasses.replace(matching_issue, product="whatever"))

        result = await _workflow(vcs, tracker, rules, resolver_for).execute(
            "octo", "repo", pull_request
        )

        assert "has set desired product: `whatever`" in result


# ══════════════════════════════════════════════════════════════
#  Validation failures
# ══════════════════════════════════════════════════════════════


class TestValidationFailures:
    @pytest.mark.asyncio
    async def test_product_mismatch_labels_and_skips_tracker_mutation(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(dataclasses.replace(matching_issue, product="9.0"))

        with pytest.raises(TrackerValidationFailedError) as exc_info:
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        message = str(exc_info.value)
        assert message.startswith("### Failed\n\n")
        assert (
            f"🔴 Tracker {MD_URL} has product `9.0` but desired product is one of `8.1`" in message
        )
        assert "### Success" in message
        vcs.add_labels.assert_awaited_once_with("octo", "repo", 42, ["invalid-product"])
        assert tracker.link_calls == []
        assert tracker.state_calls == 0

    @pytest.mark.asyncio
    async def test_component_mismatch_skips_tracker_mutation(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(dataclasses.replace(matching_issue, component="systemd"))

        with pytest.raises(TrackerValidationFailedError) as exc_info:
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        assert (
            f"🔴 Tracker {MD_URL} has component `systemd` but desired component is `kernel`"
            in str(exc_info.value)
        )
        assert tracker.link_calls == []
        assert tracker.state_calls == 0

    @pytest.mark.asyncio
    async def test_unapproved_issue_fails_but_still_links(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(
            dataclasses.replace(matching_issue, fix_versions=()), approved=False
        )

        with pytest.raises(TrackerValidationFailedError) as exc_info:
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        assert f"🔴 Tracker {MD_URL} has not been approved" in str(exc_info.value)
        assert len(tracker.link_calls) == 1
        assert tracker.state_calls == 1
        vcs.add_labels.assert_awaited_once_with("octo", "repo", 42, ["unapproved"])

    @pytest.mark.asyncio
    async def test_every_failure_is_collected_before_raising(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        issue = dataclasses.replace(matching_issue, product="9.0", component="systemd")
        tracker = make_tracker(issue, approved=False)

        with pytest.raises(TrackerValidationFailedError) as exc_info:
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        report = exc_info.value.context["report"]
        assert [failure.check for failure in report.failures] == [
            CheckName.INVALID_PRODUCT,
            CheckName.INVALID_COMPONENT,
            CheckName.UNAPPROVED,
        ]
        assert exc_info.value.context["labels_added"] == [
            "invalid-product",
            "invalid-component",
            "unapproved",
        ]
        assert str(exc_info.value).endswith("\n\n")

    @pytest.mark.asyncio
    async def test_configured_label_text_is_used(
        self, vcs, matching_issue, pull_request, resolver_for, make_tracker
    ) -> None:
        rules = ValidationRules(
            tracker_type="jira",
            tracker_id="RHEL-1234",
            component="kernel",
            products=("8.1",),
            labels={CheckName.INVALID_PRODUCT: "tracker: wrong product"},
        )
        tracker = make_tracker(dataclasses.replace(matching_issue, product="7.9"))

        with pytest.raises(TrackerValidationFailedError):
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        vcs.add_labels.assert_awaited_once_with("octo", "repo", 42, ["tracker: wrong product"])


# ══════════════════════════════════════════════════════════════
#  Fatal errors
# ══════════════════════════════════════════════════════════════


class TestFatalErrors:
    @pytest.mark.asyncio
    async def test_unknown_tracker_type_labels_and_fails_before_fetch(
        self, vcs, rules, pull_request
    ) -> None:
        def _resolve(tracker_type: str):
            raise TrackerNotSupportedError(tracker_type)

        workflow = TrackerValidationWorkflow(
            vcs, _resolve, dataclasses.replace(rules, tracker_type="redmine")
        )

        with pytest.raises(TrackerValidationFailedError) as exc_info:
            await workflow.execute("octo", "repo", pull_request)

        assert str(exc_info.value) == "Missing tracker or Unknown tracker type: 'redmine'"
        vcs.add_labels.assert_awaited_once_with("octo", "repo", 42, ["missing-tracker"])
        vcs.get_labels.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_error_propagates_and_skips_label_write(
        self, vcs, matching_issue, rules, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(dataclasses.replace(matching_issue, product="9.0"))
        tracker.get_issue_details = AsyncMock(  # type: ignore[method-assign]
            side_effect=ProviderError(provider="Jira", message="boom", status_code=500)
        )

        with pytest.raises(ProviderError):
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", PullRequest(number=7)
            )

        vcs.add_labels.assert_not_awaited()
        assert tracker.disconnected

    @pytest.mark.asyncio
    async def test_link_failure_propagates(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        tracker = make_tracker(matching_issue)
        tracker.add_link = AsyncMock(  # type: ignore[method-assign]
            side_effect=ProviderError(provider="Jira", message="forbidden", status_code=403)
        )

        with pytest.raises(ProviderError, match="forbidden"):
            await _workflow(vcs, tracker, rules, resolver_for).execute(
                "octo", "repo", pull_request
            )

        assert tracker.state_calls == 0


# ══════════════════════════════════════════════════════════════
#  Log context
# ══════════════════════════════════════════════════════════════


class TestLogContext:
    @pytest.mark.asyncio
    async def test_run_context_is_unbound_after_success(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        clear_contextvars()
        tracker = make_tracker(matching_issue)

        await _workflow(vcs, tracker, rules, resolver_for).run("octo", "repo", pull_request)

        assert "pr_number" not in get_contextvars()
        assert "tracker_id" not in get_contextvars()

    @pytest.mark.asyncio
    async def test_run_context_is_unbound_after_failure(
        self, vcs, matching_issue, rules, pull_request, resolver_for, make_tracker
    ) -> None:
        clear_contextvars()
        tracker = make_tracker(matching_issue)
        tracker.add_link = AsyncMock(  # type: ignore[method-assign]
            side_effect=ProviderError(provider="Jira", message="forbidden", status_code=403)
        )

        with pytest.raises(ProviderError):
            await _workflow(vcs, tracker, rules, resolver_for).run("octo", "repo", pull_request)

        assert get_contextvars() == {}
