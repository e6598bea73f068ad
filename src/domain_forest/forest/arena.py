"""Arena of Name records addressed by label.

Every Name in a forest is owned here. Collections (the top level and
each Name's children) store labels only, so a Name is never referenced
from two lists at once: moving it under a new parent means removing
its label from one collection and adding it to another.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator

from domain_forest.domain.name import Name
from domain_forest.domain.types import Label, Origin
from domain_forest.index.base import NameList


class DuplicateName(ValueError):
    """Raised when the arena is asked to create a label it already owns."""


class NameArena:
    """Owns Name records. Labels are unique, so the label is the key.

    Args:
        new_children: factory for the collection each new Name uses
            to hold its children.
    """

    __slots__ = ("_names", "_new_children")

    def __init__(self, new_children: Callable[[], NameList]) -> None:
        self._names: dict[Label, Name] = {}
        self._new_children = new_children

    def create(self, label: Label, origin: Origin) -> Name:
        """Create and register a childless Name. Raises DuplicateName."""
        if label in self._names:
            raise DuplicateName(f"Label {label!r} already exists")
        name = Name(label=label, origin=origin, children=self._new_children())
        self._names[label] = name
        return name

    def adopt(self, name: Name) -> None:
        """Register a childless Name built outside the arena.

        Its children collection is replaced with one from this arena's
        factory. Raises DuplicateName, or ValueError if the Name
        already has children.
        """
        if name.label in self._names:
            raise DuplicateName(f"Label {name.label!r} already exists")
        if name.has_children():
            raise ValueError(f"Cannot adopt {name.label!r}: it already has children")
        name.children = self._new_children()
        self._names[name.label] = name

    def get(self, label: Label) -> Name:
        """Return the Name for *label*. Raises KeyError if unknown."""
        return self._names[label]

    def find(self, label: Label) -> Name | None:
        return self._names.get(label)

    def resolve(self, labels: Iterable[Label]) -> list[Name]:
        """Map labels to their Names, preserving order."""
        return [self._names[label] for label in labels]

    def __contains__(self, label: object) -> bool:
        return label in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._names.values())
