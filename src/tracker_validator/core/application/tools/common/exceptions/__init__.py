from tracker_validator.core.application.tools.common.exceptions.configuration_error import (
    ConfigurationError,
)
from tracker_validator.core.application.tools.common.exceptions.domain_error import DomainError
from tracker_validator.core.application.tools.common.exceptions.issue_not_found_error import (
    IssueNotFoundError,
)
from tracker_validator.core.application.tools.common.exceptions.missing_data_error import (
    MissingDataError,
)
from tracker_validator.core.application.tools.common.exceptions.precondition_error import (
    PreconditionError,
)
from tracker_validator.core.application.tools.common.exceptions.provider_error import (
    ProviderError,
)
from tracker_validator.core.application.tools.common.exceptions.tracker_not_supported_error import (
    TrackerNotSupportedError,
)

__all__ = [
    "ConfigurationError",
    "DomainError",
    "IssueNotFoundError",
    "MissingDataError",
    "PreconditionError",
    "ProviderError",
    "TrackerNotSupportedError",
]
