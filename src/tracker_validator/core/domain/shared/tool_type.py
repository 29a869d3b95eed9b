from enum import StrEnum, auto


class ToolType(StrEnum):
    """Classifies every external system the validator talks to."""

    VCS = auto()
    TRACKER = auto()
