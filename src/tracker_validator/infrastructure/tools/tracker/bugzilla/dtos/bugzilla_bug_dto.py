from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_list(value: object) -> list[str]:
    """Bugzilla returns single- or multi-valued fields depending on the instance."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)]


class BugzillaFlagDTO(BaseModel):
    name: str = ""
    status: str = ""

    model_config = ConfigDict(extra="ignore")


class BugzillaBugDTO(BaseModel):
    id: int | str
    summary: str = ""
    product: str = ""
    component: list[str] = Field(default_factory=list)
    version: list[str] = Field(default_factory=list)
    status: str = ""
    flags: list[BugzillaFlagDTO] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("component", "version", mode="before")
    @classmethod
    def normalize_multi_value(cls, value: object) -> list[str]:
        return _as_list(value)


class BugzillaExternalTypeDTO(BaseModel):
    url: str | None = None

    model_config = ConfigDict(extra="ignore")


class BugzillaExternalBugDTO(BaseModel):
    """External tracker reference; fields may be missing on partial records."""

    ext_bz_bug_id: str | None = None
    type: BugzillaExternalTypeDTO | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class BugzillaExternalBugsDTO(BaseModel):
    external_bugs: list[BugzillaExternalBugDTO] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class BugzillaBugsResponseDTO(BaseModel):
    """Envelope of ``GET rest/bug``; faults come back as ``error``/``message``."""

    bugs: list[dict] = Field(default_factory=list)
    error: bool = False
    message: str | None = None

    model_config = ConfigDict(extra="ignore")


class BugzillaVersionDTO(BaseModel):
    version: str | None = None

    model_config = ConfigDict(extra="ignore")
