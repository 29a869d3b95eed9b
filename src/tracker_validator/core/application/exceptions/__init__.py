from tracker_validator.core.application.exceptions.validator_exceptions import (
    ApplicationError,
    TrackerValidationFailedError,
)

__all__ = ["ApplicationError", "TrackerValidationFailedError"]
