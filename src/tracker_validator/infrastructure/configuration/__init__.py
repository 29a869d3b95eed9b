from .action_settings import DEFAULT_CONFIG_PATH, ActionSettings
from .validator_config import LabelsConfig, ValidatorConfig
from .validator_config_loader import ValidatorConfigLoader

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ActionSettings",
    "LabelsConfig",
    "ValidatorConfig",
    "ValidatorConfigLoader",
]
