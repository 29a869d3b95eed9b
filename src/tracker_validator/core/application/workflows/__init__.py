from tracker_validator.core.application.workflows.base_workflow import BaseWorkflow
from tracker_validator.core.application.workflows.validation.tracker_validation_workflow import (
    TrackerValidationWorkflow,
)

__all__ = ["BaseWorkflow", "TrackerValidationWorkflow"]
