import structlog
import yaml
from pydantic import ValidationError

from tracker_validator.core.application.tools import VcsTool
from tracker_validator.core.application.tools.common.exceptions import ConfigurationError
from tracker_validator.infrastructure.configuration.validator_config import ValidatorConfig

logger = structlog.get_logger()


class ValidatorConfigLoader:
    """Reads the validator config file from the repository under validation."""

    def __init__(self, vcs: VcsTool) -> None:
        self._vcs = vcs

    async def load(self, owner: str, repo: str, path: str) -> ValidatorConfig:
        content = await self._vcs.get_file_content(owner, repo, path)
        if content is None:
            logger.info("Validator config not found, using defaults", config_path=path)
            return ValidatorConfig()
        config = self.parse(content, path)
        logger.debug(
            "Validator config loaded",
            config_path=path,
            products=config.products,
            labels=config.labels.model_dump(by_alias=True),
        )
        return config

    @staticmethod
    def parse(content: str, path: str = "<config>") -> ValidatorConfig:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in '{path}': {exc}") from exc
        if data is None:
            return ValidatorConfig()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"'{path}' must contain a mapping, got {type(data).__name__}."
            )
        try:
            return ValidatorConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid validator config '{path}': {exc}") from exc
