"""Cross-origin summary: which names gained sub-names from other sources.

For each top-level Name, collect every descendant at any depth whose
origin differs from the top-level Name's own origin, flattened into one
list in depth-first order. Descendants are compared with the top-level
Name, not with their immediate parent, so a same-origin Name in the
middle of a chain is left out while its differently sourced children
are kept. Top-level Names with nothing to report are dropped.
"""
from __future__ import annotations

from dataclasses import dataclass

from domain_forest.domain.name import Name
from domain_forest.domain.types import Label, Origin
from domain_forest.forest.forest import Forest


@dataclass(frozen=True, slots=True)
class OriginSummary:
    """A top-level Name and its differently sourced descendants."""
    name: Name
    descendants: tuple[Name, ...]

    @property
    def label(self) -> Label:
        return self.name.label

    @property
    def origin(self) -> Origin:
        return self.name.origin

    def descendant_labels(self) -> list[Label]:
        return [d.label for d in self.descendants]


def cross_origin_descendants(forest: Forest, name: Name) -> list[Name]:
    """Descendants of *name* (any depth) whose origin differs from its own."""
    return [d for d in forest.descendants(name) if d.origin != name.origin]


def cross_origin_summary(forest: Forest) -> list[OriginSummary]:
    """One OriginSummary per top-level Name that has cross-origin descendants."""
    summaries: list[OriginSummary] = []
    for root in forest.roots():
        found = cross_origin_descendants(forest, root)
        if found:
            summaries.append(OriginSummary(name=root, descendants=tuple(found)))
    return summaries
