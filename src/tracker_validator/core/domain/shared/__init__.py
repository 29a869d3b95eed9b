from tracker_validator.core.domain.shared.base_tool import BaseTool
from tracker_validator.core.domain.shared.tool_type import ToolType
from tracker_validator.core.domain.shared.tracker_type import TrackerType

__all__ = ["BaseTool", "ToolType", "TrackerType"]
