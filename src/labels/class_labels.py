"""Built-in class label types."""

from __future__ import annotations

from functools import total_ordering

from core.errors import FacetInstantiationError

HIERARCHY_SEPARATOR = "."


@total_ordering
class SimpleClassLabel:
    """Class label holding one name.

    The empty name marks an unlabeled record, which is what label merging
    yields for rows without any label segment.
    """

    def __init__(self) -> None:
        self._name: str | None = None

    def init(self, label: str) -> None:
        """Set the label name.

        Raises:
            FacetInstantiationError: If called twice.
        """
        if self._name is not None:
            raise FacetInstantiationError(f"Class label already initialized as '{self._name}'.")
        self._name = label.strip()

    @property
    def name(self) -> str:
        if self._name is None:
            raise FacetInstantiationError("Class label has not been initialized.")
        return self._name

    @property
    def is_unlabeled(self) -> bool:
        """Return whether the label carries no class name."""
        return self.name == ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleClassLabel):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: "SimpleClassLabel") -> bool:
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"SimpleClassLabel({self._name!r})"


class HierarchicalClassLabel(SimpleClassLabel):
    """Class label whose name is a dot-separated path, e.g. ``animal.cat``.

    An unlabeled hierarchical label has zero levels.
    """

    def init(self, label: str) -> None:
        super().init(label)
        if self.name and any(not level for level in self.name.split(HIERARCHY_SEPARATOR)):
            raise FacetInstantiationError(
                f"Hierarchical label '{label}' has an empty level. "
                f"Separate levels with a single '{HIERARCHY_SEPARATOR}'."
            )

    @property
    def levels(self) -> tuple[str, ...]:
        """Return the label path from root to leaf."""
        if not self.name:
            return ()
        return tuple(self.name.split(HIERARCHY_SEPARATOR))

    @property
    def depth(self) -> int:
        return len(self.levels)

    def is_descendant_of(self, other: "HierarchicalClassLabel") -> bool:
        """Return whether ``other`` is a strict prefix of this label's path."""
        if not other.levels:
            return False
        return other.depth < self.depth and self.levels[: other.depth] == other.levels

    def __repr__(self) -> str:
        return f"HierarchicalClassLabel({self._name!r})"
