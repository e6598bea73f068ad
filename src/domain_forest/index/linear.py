"""Linear name list: a plain list of labels, every query a full scan.

This is the baseline for benchmarking and the oracle for differential
tests against SuffixIndex. It is correct and simple, and each
find_parents_of / find_sub_domains call is O(n) in the number of
registered labels, which makes building a forest of n names O(n^2).

find_parents_of returns every registered ancestor in list order. Within
one level of a well-formed forest there is at most one, so callers that
take the first get the same answer as from the suffix index.
"""
from __future__ import annotations

from domain_forest.domain.labels import is_descendant_of
from domain_forest.domain.types import Label
from domain_forest.index.base import NameList


class LinearNameList(NameList):
    """Store labels in a list[Label]. Every query is a linear scan."""

    __slots__ = ("_labels",)

    def __init__(self, labels: list[Label] | None = None) -> None:
        self._labels: list[Label] = list(labels or [])

    def add_domain(self, label: Label) -> None:
        self._labels.append(label)

    def remove_domain(self, label: Label) -> None:
        try:
            self._labels.remove(label)
        except ValueError:
            pass

    def find_parents_of(self, label: Label) -> list[Label]:
        return [p for p in self._labels if is_descendant_of(label, p)]

    def find_sub_domains(self, label: Label) -> list[Label]:
        return [
            s for s in self._labels
            if s == label or is_descendant_of(s, label)
        ]

    def get_domains(self) -> list[Label]:
        return list(self._labels)

    def contains(self, label: Label) -> bool:
        return label in self._labels

    def __len__(self) -> int:
        return len(self._labels)
