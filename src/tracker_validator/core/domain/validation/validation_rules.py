from collections.abc import Mapping
from dataclasses import dataclass, field

from tracker_validator.core.domain.validation.check_name import CheckName

GITHUB_URL_PREFIX = "https://github.com/"


def _default_labels() -> dict[CheckName, str]:
    return {check: check.value for check in CheckName}


@dataclass(frozen=True)
class ValidationRules:
    """What a single run validates against, resolved from action inputs and repo config."""

    tracker_type: str
    tracker_id: str
    component: str
    products: tuple[str, ...] = ()
    labels: Mapping[CheckName, str] = field(default_factory=_default_labels)
    link_url_prefix: str = GITHUB_URL_PREFIX

    def label_for(self, check: CheckName) -> str:
        return self.labels.get(check, check.value)
