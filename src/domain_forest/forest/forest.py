"""Forest: an arena of Names plus the collection of top-level labels.

Usage:
    forest = Forest()
    forest.add("one.internal.acme.com", origin="domains1.txt")
    forest.add("acme.com", origin="domains2.txt")
    forest.add("internal.acme.com", origin="domains2.txt")

    [n.label for n in forest.roots()]
    # ["acme.com"]
    [n.label for n in forest.children("acme.com")]
    # ["internal.acme.com"]

The strategy picks the collection used for the top level and for every
Name's children: "indexed" (SuffixIndex, the default) or "linear"
(LinearNameList, the O(n) baseline). Both produce the same forest.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator

from domain_forest.domain.labels import ancestor_suffixes, is_descendant_of, validate_label
from domain_forest.domain.name import Name
from domain_forest.domain.types import Label, Origin
from domain_forest.forest.arena import NameArena
from domain_forest.forest.merge import merge
from domain_forest.index.base import NameList
from domain_forest.index.linear import LinearNameList
from domain_forest.index.suffix_index import SuffixIndex

log = logging.getLogger(__name__)

STRATEGIES: dict[str, Callable[[], NameList]] = {
    "indexed": SuffixIndex,
    "linear": LinearNameList,
}


class ForestInvariantError(AssertionError):
    """Raised by check_invariants() when the forest is not well formed."""


class Forest:
    """A forest of hierarchical names built one merge at a time.

    Not thread-safe: merges must be applied one after another.
    """

    __slots__ = ("_strategy", "_arena", "_roots")

    def __init__(self, strategy: str = "indexed") -> None:
        try:
            factory = STRATEGIES[strategy]
        except KeyError:
            raise ValueError(
                f"Unknown strategy {strategy!r}, expected one of {sorted(STRATEGIES)}"
            ) from None
        self._strategy = strategy
        self._arena = NameArena(factory)
        self._roots: NameList = factory()

    @property
    def strategy(self) -> str:
        return self._strategy

    # ---- mutation --------------------------------------------------------

    def add(self, label: str, origin: Origin = "") -> bool:
        """Create a Name for *label* and merge it into the forest.

        Returns False, creating nothing, if the label is already known
        (the first origin wins). Raises InvalidLabel for blank or
        dot-prefixed text.
        """
        label = validate_label(label)
        existing = self._arena.find(label)
        if existing is not None:
            log.debug(
                "Skipping duplicate %s from %s (first seen in %s)",
                label, origin, existing.origin,
            )
            return False
        name = self._arena.create(label, origin)
        merge(self._arena, self._roots, name)
        return True

    def merge(self, name: Name) -> list[Name]:
        """Merge an already-built Name and return the top-level Names.

        A Name whose label is already known is ignored. The Name must
        be childless (ValueError otherwise) and is given a children
        collection of this forest's strategy.
        """
        if name.label not in self._arena:
            self._arena.adopt(name)
            merge(self._arena, self._roots, name)
        return self.roots()

    # ---- queries ---------------------------------------------------------

    def roots(self) -> list[Name]:
        """Top-level Names in insertion order."""
        return self._arena.resolve(self._roots.get_domains())

    def get(self, label: Label) -> Name:
        """Return the Name for *label*. Raises KeyError if unknown."""
        return self._arena.get(label)

    def children(self, name: Name | Label) -> list[Name]:
        """Immediate children of *name*, in insertion order."""
        return self._arena.resolve(self._resolve(name).children.get_domains())

    def descendants(self, name: Name | Label) -> Iterator[Name]:
        """All Names below *name*, depth first, parents before children."""
        for child in self.children(name):
            yield child
            yield from self.descendants(child)

    def walk(self) -> Iterator[tuple[int, Name]]:
        """Yield (depth, Name) for the whole forest, depth first.

        Top-level Names have depth 0.
        """
        stack = [(0, n) for n in reversed(self.roots())]
        while stack:
            depth, name = stack.pop()
            yield depth, name
            stack.extend((depth + 1, c) for c in reversed(self.children(name)))

    def shape(self) -> dict[Label, frozenset[Label]]:
        """Map every label to the set of its children's labels.

        Ignores origins and insertion order, so two forests built from
        the same labels in different orders have equal shapes.
        """
        return {
            name.label: frozenset(name.children.get_domains())
            for _, name in self.walk()
        }

    def check_invariants(self) -> None:
        """Raise ForestInvariantError if the forest is not well formed.

        Checks that every label is placed exactly once, that each child
        descends from its parent, and that each Name sits directly under
        its most specific known ancestor (which also rules out siblings
        nested inside each other).
        """
        seen: set[Label] = set()
        path: list[Label] = []
        for depth, name in self.walk():
            del path[depth:]
            label = name.label
            if label in seen:
                raise ForestInvariantError(f"{label} is placed more than once")
            seen.add(label)
            if path and not is_descendant_of(label, path[-1]):
                raise ForestInvariantError(
                    f"{label} is a child of {path[-1]} but does not descend from it"
                )
            known_ancestors = [s for s in ancestor_suffixes(label) if s in self._arena]
            if known_ancestors[:1] != path[-1:]:
                raise ForestInvariantError(
                    f"{label} should be under {known_ancestors[:1] or 'the top level'}, "
                    f"found under {path[-1:] or 'the top level'}"
                )
            path.append(label)
        if len(seen) != len(self._arena):
            missing = sorted(n.label for n in self._arena if n.label not in seen)
            raise ForestInvariantError(f"Names not reachable from the top level: {missing}")

    def _resolve(self, name: Name | Label) -> Name:
        if isinstance(name, Name):
            return self._arena.get(name.label)
        return self._arena.get(name)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, label: object) -> bool:
        return label in self._arena

    def __len__(self) -> int:
        return len(self._arena)

    def __repr__(self) -> str:
        return (
            f"Forest(strategy={self._strategy!r}, names={len(self._arena)}, "
            f"roots={len(self._roots)})"
        )
