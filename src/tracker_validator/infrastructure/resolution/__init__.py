from .tracker_resolver import TrackerResolver

__all__ = ["TrackerResolver"]
