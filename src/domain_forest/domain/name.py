"""Name entity: one hierarchical name, its origin, and its child labels.

Identity is the label alone. Two Names with the same label are equal
regardless of origin or children, and the hash never looks at the
mutable children collection, so a Name can sit in a set or dict key
while its children change underneath it.

Children are stored as labels, not as Name objects. The arena that
created the Name resolves them (see forest/arena.py), which keeps
reparenting to "drop a label here, add it there".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from domain_forest.domain.labels import is_descendant_of, validate_label
from domain_forest.domain.types import Label, Origin

if TYPE_CHECKING:
    from domain_forest.index.base import NameList


@dataclass(slots=True, eq=False)
class Name:
    """A single normalised label with the source it came from."""
    label: Label
    origin: Origin
    children: NameList

    @classmethod
    def create(
        cls,
        raw: str,
        origin: Origin = "",
        children: NameList | None = None,
    ) -> Name:
        """Factory: normalise *raw* and build a Name with no children.

        Raises InvalidLabel for blank or dot-prefixed text. When no
        children collection is given a SuffixIndex is used.
        """
        if children is None:
            from domain_forest.index.suffix_index import SuffixIndex
            children = SuffixIndex()
        return cls(label=validate_label(raw), origin=origin, children=children)

    def is_descendant_of(self, other: Name | Label) -> bool:
        parent = other.label if isinstance(other, Name) else other
        return is_descendant_of(self.label, parent)

    def has_children(self) -> bool:
        return not self.children.is_empty()

    def child_labels(self) -> list[Label]:
        return self.children.get_domains()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)

    def __str__(self) -> str:
        return self.label
