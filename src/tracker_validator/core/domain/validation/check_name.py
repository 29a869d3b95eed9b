from enum import StrEnum


class CheckName(StrEnum):
    """Logical check categories; configuration maps each one to a PR label."""

    MISSING_TRACKER = "missing-tracker"
    INVALID_PRODUCT = "invalid-product"
    INVALID_COMPONENT = "invalid-component"
    UNAPPROVED = "unapproved"
