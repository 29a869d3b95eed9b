import dataclasses

import pytest

from tracker_validator.core.application.tools import TrackerController
from tracker_validator.core.application.tools.common.exceptions import PreconditionError
from tracker_validator.core.domain.issue import IssueDetails


@pytest.fixture()
def tracker(matching_issue: IssueDetails, make_tracker):
    return make_tracker(matching_issue)


class TestProductMatching:
    def test_empty_expected_set_matches_before_fetch(self, tracker) -> None:
        assert tracker.is_matching_product(set()) is True

    @pytest.mark.asyncio
    async def test_empty_expected_set_matches_any_product(
        self, matching_issue: IssueDetails, make_tracker
    ) -> None:
        tracker = make_tracker(dataclasses.replace(matching_issue, product=""))
        await tracker.get_issue_details("RHEL-1234")

        assert tracker.is_matching_product([]) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("product", "expected"),
        [("8.1", True), ("9.0", False), ("", False), ("8.1.0", False)],
    )
    async def test_single_product_requires_exact_membership(
        self, matching_issue: IssueDetails, make_tracker, product: str, expected: bool
    ) -> None:
        tracker = make_tracker(dataclasses.replace(matching_issue, product=product))
        await tracker.get_issue_details("RHEL-1234")

        assert tracker.is_matching_product({"8.1"}) is expected

    def test_non_empty_expected_set_requires_fetch(self, tracker) -> None:
        with pytest.raises(PreconditionError, match=r"InMemory\.is_matching_product\(\)"):
            tracker.is_matching_product({"8.1"})


class TestFormatting:
    @pytest.mark.asyncio
    async def test_markdown_url_wraps_issue_url(self, tracker) -> None:
        await tracker.get_issue_details("RHEL-1234")

        assert tracker.instance == "https://tracker.example.com"
        assert tracker.get_markdown_url() == (
            "[RHEL-1234](https://tracker.example.com/browse/RHEL-1234)"
        )

    def test_markdown_url_requires_fetch(self, tracker) -> None:
        with pytest.raises(PreconditionError):
            tracker.get_markdown_url()

    def test_issue_details_property_requires_fetch(self, tracker) -> None:
        with pytest.raises(PreconditionError, match="call InMemory.get_issue_details\\(\\) first"):
            _ = tracker.issue_details


def test_controller_exposes_the_bound_adapter(tracker, make_tracker) -> None:
    controller = TrackerController(tracker)

    assert controller.adapter is tracker
    with pytest.raises(dataclasses.FrozenInstanceError):
        controller.adapter = make_tracker(tracker._issue)  # type: ignore[misc]
