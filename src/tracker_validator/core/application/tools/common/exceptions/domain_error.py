class DomainError(Exception):
    """
    Base class for all tool-level exceptions.
    Ensures a consistent exception hierarchy for catching tracker and VCS issues.
    """

    pass
