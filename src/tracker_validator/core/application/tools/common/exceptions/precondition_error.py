from tracker_validator.core.application.tools.common.exceptions.domain_error import DomainError


class PreconditionError(DomainError):
    """An operation that needs fetched issue details was called before the fetch.

    Always an ordering defect in the caller; never recoverable.
    """

    def __init__(self, adapter: str, operation: str) -> None:
        super().__init__(
            f"{adapter}.{operation}(): missing issue details, "
            f"call {adapter}.get_issue_details() first."
        )
        self.adapter = adapter
        self.operation = operation
