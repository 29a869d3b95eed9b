from tracker_validator.core.domain.pull_request.pull_request import PullRequest

__all__ = ["PullRequest"]
