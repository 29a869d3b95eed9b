from dataclasses import dataclass
from typing import Generic, TypeVar

from tracker_validator.core.application.tools.tracker_tool import TrackerTool

TrackerT = TypeVar("TrackerT", bound=TrackerTool)


@dataclass(frozen=True)
class TrackerController(Generic[TrackerT]):
    """Binds exactly one tracker adapter for the whole run.

    A pass-through holder: it keeps no state besides the adapter, and the
    adapter cannot be swapped once the controller exists.
    """

    adapter: TrackerT
