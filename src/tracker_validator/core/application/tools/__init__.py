from tracker_validator.core.application.tools.tracker_controller import TrackerController
from tracker_validator.core.application.tools.tracker_tool import TrackerTool
from tracker_validator.core.application.tools.vcs_tool import VcsTool

__all__ = ["TrackerController", "TrackerTool", "VcsTool"]
