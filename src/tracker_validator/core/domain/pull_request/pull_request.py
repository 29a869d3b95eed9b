from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequest:
    number: int
    base: str = ""
    ref: str = ""

    def path(self, owner: str, repo: str) -> str:
        """Repository-relative PR path, e.g. ``octo/repo/pull/7``."""
        return f"{owner}/{repo}/pull/{self.number}"
