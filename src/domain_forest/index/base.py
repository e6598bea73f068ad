"""Abstract base for name collections.

Both SuffixIndex and LinearNameList implement this interface. The top
level of a forest and the children of every Name are collections of
this type, so the merge algorithm can recurse from one to the other
without caring which it is looking at. Swap implementations without
touching the merge code, then benchmark to show the suffix index wins
on lookups.

Collections hold labels. The arena (forest/arena.py) turns labels back
into Name records.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from domain_forest.domain.types import Label


class NameList(ABC):
    """Interface that both the indexed and the linear collections implement."""

    @abstractmethod
    def add_domain(self, label: Label) -> None:
        """Register a label that is neither an ancestor nor a descendant of any member."""
        ...

    @abstractmethod
    def remove_domain(self, label: Label) -> None:
        """Unregister a label. Removing an absent label is a no-op."""
        ...

    @abstractmethod
    def find_parents_of(self, label: Label) -> list[Label]:
        """Return the most specific registered ancestors of *label*.

        *label* need not be registered. Returns [] when no member is
        an ancestor.
        """
        ...

    @abstractmethod
    def find_sub_domains(self, label: Label) -> list[Label]:
        """Return every registered label equal to or descending from *label*."""
        ...

    @abstractmethod
    def get_domains(self) -> list[Label]:
        """All registered labels, each once, in insertion order."""
        ...

    @abstractmethod
    def contains(self, label: Label) -> bool:
        """True if *label* itself is registered."""
        ...

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Label]:
        return iter(self.get_domains())

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.contains(label)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_domains()!r})"
