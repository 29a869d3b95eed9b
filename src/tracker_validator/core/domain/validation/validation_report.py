"""Immutable accumulator for a single validation run.

Each check step receives the current report and returns an updated copy,
so the outcome of a run is a single value that can be inspected in isolation.
"""

from dataclasses import dataclass, field, replace

from tracker_validator.core.domain.validation.check_name import CheckName
from tracker_validator.core.domain.validation.label_decision import LabelDecision

FAILED_HEADER = "### Failed"
SUCCESS_HEADER = "### Success"


@dataclass(frozen=True)
class ValidationFailure:
    """A business-rule mismatch. Collected, never raised."""

    check: CheckName
    message: str


@dataclass(frozen=True)
class ValidationReport:
    successes: tuple[str, ...] = ()
    failures: tuple[ValidationFailure, ...] = ()
    notices: tuple[str, ...] = ()
    labels: LabelDecision = field(default_factory=LabelDecision)

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0

    def record_check(
        self,
        check: CheckName,
        passed: bool,
        label: str,
        present_labels: frozenset[str],
        success_message: str,
        failure_message: str,
    ) -> "ValidationReport":
        labels = self.labels.reconcile(label, passed, present_labels)
        if passed:
            return replace(self, successes=(*self.successes, success_message), labels=labels)
        failure = ValidationFailure(check=check, message=failure_message)
        return replace(self, failures=(*self.failures, failure), labels=labels)

    def with_notice(self, notice: str) -> "ValidationReport":
        return replace(self, notices=(*self.notices, notice))

    def failed_digest(self) -> str:
        return _digest(FAILED_HEADER, [failure.message for failure in self.failures])

    def success_digest(self) -> str:
        return _digest(SUCCESS_HEADER, list(self.successes))

    def summary(self) -> str:
        """Final run message: failures first (if any), then successes."""
        if self.has_failures:
            return self.failed_digest() + "\n\n" + self.success_digest()
        return self.success_digest()


def _digest(header: str, lines: list[str]) -> str:
    if not lines:
        return ""
    return header + "\n\n" + "\n".join(lines)
