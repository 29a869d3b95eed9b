from tracker_validator.core.application.tools.common.exceptions.domain_error import DomainError


class MissingDataError(DomainError):
    """A tracker response lacks a field the validator requires."""
