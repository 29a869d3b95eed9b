from .bugzilla_bug_mapper import map_bug

__all__ = ["map_bug"]
