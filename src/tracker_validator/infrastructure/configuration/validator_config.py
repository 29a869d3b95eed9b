from pydantic import BaseModel, ConfigDict, Field

from tracker_validator.core.domain.validation import CheckName, ValidationRules


class LabelsConfig(BaseModel):
    """Label text applied for each failing check; defaults to the check name itself."""

    missing_tracker: str = Field(default=CheckName.MISSING_TRACKER.value, alias="missing-tracker")
    invalid_product: str = Field(default=CheckName.INVALID_PRODUCT.value, alias="invalid-product")
    invalid_component: str = Field(
        default=CheckName.INVALID_COMPONENT.value, alias="invalid-component"
    )
    unapproved: str = Field(default=CheckName.UNAPPROVED.value, alias="unapproved")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def as_mapping(self) -> dict[CheckName, str]:
        return {
            CheckName.MISSING_TRACKER: self.missing_tracker,
            CheckName.INVALID_PRODUCT: self.invalid_product,
            CheckName.INVALID_COMPONENT: self.invalid_component,
            CheckName.UNAPPROVED: self.unapproved,
        }


class ValidatorConfig(BaseModel):
    """Repository-level configuration (``.github/tracker-validator.yml``)."""

    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    products: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def to_rules(self, tracker_type: str, tracker_id: str, component: str) -> ValidationRules:
        return ValidationRules(
            tracker_type=tracker_type,
            tracker_id=tracker_id,
            component=component,
            products=tuple(self.products),
            labels=self.labels.as_mapping(),
        )
