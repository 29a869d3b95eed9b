from tracker_validator.infrastructure.observability.logging.workflow_command_renderer import (
    WorkflowCommandRenderer,
    escape_data,
)

__all__ = ["WorkflowCommandRenderer", "escape_data"]
