from pydantic import BaseModel, ConfigDict, Field


class JiraNamedDTO(BaseModel):
    """Any ``{name: ...}`` entity: version, component, status."""

    name: str = ""


class JiraIssueFieldsDTO(BaseModel):
    summary: str = ""
    versions: list[JiraNamedDTO] = Field(default_factory=list)
    components: list[JiraNamedDTO] = Field(default_factory=list)
    fix_versions: list[JiraNamedDTO] = Field(default_factory=list, alias="fixVersions")
    status: JiraNamedDTO | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JiraIssueDTO(BaseModel):
    key: str | None = None
    fields: JiraIssueFieldsDTO = Field(default_factory=JiraIssueFieldsDTO)

    model_config = ConfigDict(extra="ignore")


class JiraRemoteLinkObjectDTO(BaseModel):
    url: str | None = None
    title: str | None = None


class JiraRemoteLinkDTO(BaseModel):
    """Remote link entry; ``object`` may be absent on malformed links."""

    id: int | None = None
    object: JiraRemoteLinkObjectDTO | None = None

    model_config = ConfigDict(extra="ignore")


class JiraServerInfoDTO(BaseModel):
    version: str | None = None

    model_config = ConfigDict(extra="ignore")
