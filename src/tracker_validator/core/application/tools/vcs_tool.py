from abc import abstractmethod

from tracker_validator.core.domain.shared.base_tool import BaseTool
from tracker_validator.core.domain.shared.tool_type import ToolType


class VcsTool(BaseTool):
    """Abstract tool contract for the code-hosting side (pull request labels, check runs)."""

    @property
    def tool_type(self) -> ToolType:
        return ToolType.VCS

    @abstractmethod
    async def get_labels(self, owner: str, repo: str, number: int) -> list[str]: ...

    @abstractmethod
    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> None: ...

    @abstractmethod
    async def remove_label(self, owner: str, repo: str, number: int, label: str) -> None: ...

    @abstractmethod
    async def update_check_run(
        self, owner: str, repo: str, check_run_id: int, conclusion: str, summary: str
    ) -> None: ...

    @abstractmethod
    async def get_file_content(self, owner: str, repo: str, path: str) -> str | None:
        """Return the decoded file from the default branch, or None if it does not exist."""
