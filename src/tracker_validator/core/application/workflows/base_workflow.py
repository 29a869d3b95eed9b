from abc import ABC, abstractmethod

from tracker_validator.core.domain.pull_request import PullRequest


class BaseWorkflow(ABC):
    """Abstract base for deterministic pull-request pipelines."""

    @abstractmethod
    async def execute(self, owner: str, repo: str, pull_request: PullRequest) -> str:
        """Run the pipeline; return the success digest or raise on failure."""
