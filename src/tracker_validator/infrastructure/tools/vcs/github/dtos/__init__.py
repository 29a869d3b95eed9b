from .github_dto import GitHubContentDTO, GitHubLabelDTO

__all__ = ["GitHubContentDTO", "GitHubLabelDTO"]
