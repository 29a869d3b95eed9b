from pydantic import BaseModel, ConfigDict, Field

from tracker_validator.core.domain.pull_request import PullRequest


class CherryPickDTO(BaseModel):
    sha: str


class CommitMessageDTO(BaseModel):
    title: str = ""
    body: str = ""
    cherry_pick: list[CherryPickDTO] = Field(default_factory=list, alias="cherryPick")

    model_config = ConfigDict(populate_by_name=True)


class CommitDTO(BaseModel):
    sha: str
    url: str = ""
    message: CommitMessageDTO = Field(default_factory=CommitMessageDTO)


class PullRequestMetadataDTO(BaseModel):
    """``pr-metadata`` input as produced by the upstream PR metadata action."""

    number: int
    base: str = ""
    ref: str = ""
    commits: list[CommitDTO] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def to_domain(self) -> PullRequest:
        return PullRequest(number=self.number, base=self.base, ref=self.ref)
