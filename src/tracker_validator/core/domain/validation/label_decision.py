from dataclasses import dataclass


@dataclass(frozen=True)
class LabelDecision:
    """Labels to attach to and detach from the pull request.

    ``add`` and ``remove`` stay disjoint; when two checks resolve to the same
    label text, a failing check wins over a passing one.
    """

    add: tuple[str, ...] = ()
    remove: tuple[str, ...] = ()

    def adding(self, label: str) -> "LabelDecision":
        if label in self.add:
            return self
        return LabelDecision(
            add=(*self.add, label),
            remove=tuple(item for item in self.remove if item != label),
        )

    def removing(self, label: str) -> "LabelDecision":
        if label in self.add or label in self.remove:
            return self
        return LabelDecision(add=self.add, remove=(*self.remove, label))

    def reconcile(self, label: str, passed: bool, present: frozenset[str]) -> "LabelDecision":
        """Queue ``label`` for addition on failure, or for removal if it is on the PR."""
        if not passed:
            return self.adding(label)
        if label in present:
            return self.removing(label)
        return self

    def removals_since(self, previous: "LabelDecision") -> tuple[str, ...]:
        return tuple(label for label in self.remove if label not in previous.remove)
