from .pull_request_metadata_dto import (
    CherryPickDTO,
    CommitDTO,
    CommitMessageDTO,
    PullRequestMetadataDTO,
)

__all__ = ["CherryPickDTO", "CommitDTO", "CommitMessageDTO", "PullRequestMetadataDTO"]
