"""Suffix index: map every dotted suffix to the labels that end with it.

For each registered label the index stores the label under its own
text and under every suffix left after dropping leading segments:

    "one.internal.acme.com" is stored under
        "one.internal.acme.com", "internal.acme.com", "acme.com", "com"

That gives the two structural queries the merge needs without a scan:

    find_sub_domains("acme.com")
        one dict lookup: the bucket keyed "acme.com" holds exactly the
        registered labels that are "acme.com" or descend from it.

    find_parents_of("x.a.b.c")
        walk "a.b.c", "b.c", "c" and stop at the first bucket holding a
        label whose length equals the key. Equal length plus the key
        being a suffix means the label IS the key, i.e. a registered
        ancestor, not just another member sharing that tail.

add_domain/remove_domain are O(depth), find_parents_of is O(depth)
lookups and find_sub_domains is one lookup plus a copy. The linear
alternative (index/linear.py) is O(n) per query.

Buckets are dicts used as insertion-ordered sets.
"""
from __future__ import annotations

from domain_forest.domain.labels import ancestor_suffixes, suffixes_of
from domain_forest.domain.types import Label
from domain_forest.index.base import NameList


class SuffixIndex(NameList):
    """Suffix-keyed collection of labels.

    Buckets hold only the labels registered in this collection, i.e.
    one level of the forest. Children of a member live in that member's
    own collection.
    """

    __slots__ = ("_known", "_by_suffix")

    def __init__(self) -> None:
        self._known: dict[Label, None] = {}
        # suffix -> {label: None} (ordered set)
        self._by_suffix: dict[Label, dict[Label, None]] = {}

    def add_domain(self, label: Label) -> None:
        self._known[label] = None
        for key in suffixes_of(label):
            bucket = self._by_suffix.get(key)
            if bucket is None:
                bucket = self._by_suffix[key] = {}
            bucket[label] = None

    def remove_domain(self, label: Label) -> None:
        self._known.pop(label, None)
        for key in suffixes_of(label):
            bucket = self._by_suffix.get(key)
            if bucket is None:
                continue
            bucket.pop(label, None)
            if not bucket:
                del self._by_suffix[key]

    def find_parents_of(self, label: Label) -> list[Label]:
        for key in ancestor_suffixes(label):
            bucket = self._by_suffix.get(key)
            if bucket is None:
                continue
            length = len(key)
            parents = [p for p in bucket if len(p) == length]
            if parents:
                return parents
        return []

    def find_sub_domains(self, label: Label) -> list[Label]:
        return list(self._by_suffix.get(label, ()))

    def get_domains(self) -> list[Label]:
        return list(self._known)

    def contains(self, label: Label) -> bool:
        return label in self._known

    def __len__(self) -> int:
        return len(self._known)

    def suffix_count(self) -> int:
        """Number of distinct suffix keys (for memory reporting)."""
        return len(self._by_suffix)
