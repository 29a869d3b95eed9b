from tracker_validator.core.domain.validation.check_name import CheckName
from tracker_validator.core.domain.validation.label_decision import LabelDecision
from tracker_validator.core.domain.validation.validation_report import (
    ValidationFailure,
    ValidationReport,
)
from tracker_validator.core.domain.validation.validation_rules import (
    GITHUB_URL_PREFIX,
    ValidationRules,
)

__all__ = [
    "GITHUB_URL_PREFIX",
    "CheckName",
    "LabelDecision",
    "ValidationFailure",
    "ValidationReport",
    "ValidationRules",
]
