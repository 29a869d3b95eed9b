from tracker_validator.core.application.tools.common.exceptions.domain_error import DomainError


class ConfigurationError(DomainError):
    """Raised when configuration or action inputs are invalid or incomplete."""
