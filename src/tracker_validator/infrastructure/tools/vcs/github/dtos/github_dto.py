from pydantic import BaseModel, ConfigDict


class GitHubLabelDTO(BaseModel):
    name: str

    model_config = ConfigDict(extra="ignore")


class GitHubContentDTO(BaseModel):
    """Repository file entry returned by the contents API."""

    content: str = ""
    encoding: str = "base64"

    model_config = ConfigDict(extra="ignore")
