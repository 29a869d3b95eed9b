from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrackerFlag:
    """A named tracker flag and its state (``+``, ``-``, ``?``)."""

    name: str
    status: str


@dataclass(frozen=True)
class IssueDetails:
    """Snapshot of a tracker issue, fetched once per validation run.

    Optional tracker fields are resolved to their defaults at fetch time:
    ``product``, ``component`` and ``status`` fall back to ``""``, the approval
    signals fall back to empty tuples.
    """

    id: str
    summary: str
    product: str = ""
    component: str = ""
    status: str = ""
    fix_versions: tuple[str, ...] = field(default_factory=tuple)
    flags: tuple[TrackerFlag, ...] = field(default_factory=tuple)

    def has_flag(self, name: str, status: str) -> bool:
        return any(flag.name == name and flag.status == status for flag in self.flags)
