"""Generate synthetic label sets for profiling and differential tests.

Label shape:
  - a TLD from a small pool, an organisation under it, then 0 to
    max_depth - 2 extra segments drawn from a subdomain pool
  - organisations follow a Zipf-like distribution (the first few get
    most of the labels), so deep shared suffixes are common and the
    merge has real ancestor/descendant work to do
  - labels repeat now and then, which exercises the duplicate branch

With num_orgs set, organisations are "org-0" .. "org-N" instead of the
small named pool, which makes the top level of the forest wide. That
is where linear scans hurt.

Labels are spread round-robin over num_sources in-memory sources so
cross-origin reporting has something to find.
"""
from __future__ import annotations

import random

from domain_forest.sources.reader import LinesSource

_TLD = ["com", "org", "io", "net", "dev"]
_ORGS = [
    "acme", "initech", "globex", "umbrella", "hooli",
    "stark", "wayne", "wonka", "tyrell", "cyberdyne",
    "soylent", "oscorp", "aperture", "vandelay", "pied-piper",
]
_SUBDOMAINS = [
    "api", "internal", "www", "mail", "cdn", "auth", "admin",
    "staging", "prod", "eu", "us", "db", "one", "two",
]


class LabelGenerator:
    """Generate reproducible label workloads."""

    __slots__ = ("_rng", "_num_labels", "_max_depth", "_orgs", "_org_weights")

    def __init__(
        self,
        num_labels: int = 1_000,
        max_depth: int = 5,
        seed: int = 42,
        num_orgs: int | None = None,
    ) -> None:
        if max_depth < 2:
            raise ValueError("max_depth must be at least 2")
        if num_orgs is not None and num_orgs < 1:
            raise ValueError("num_orgs must be at least 1")
        self._rng = random.Random(seed)
        self._num_labels = num_labels
        self._max_depth = max_depth
        self._orgs = _ORGS if num_orgs is None else [f"org-{i}" for i in range(num_orgs)]
        # Zipf weights: org i has weight 1/(i+1)
        self._org_weights = [1.0 / (i + 1) for i in range(len(self._orgs))]

    def _label(self) -> str:
        org = self._rng.choices(self._orgs, weights=self._org_weights, k=1)[0]
        segments = [self._rng.choice(_TLD), org]
        extra = self._rng.randint(0, self._max_depth - 2)
        segments.extend(self._rng.choice(_SUBDOMAINS) for _ in range(extra))
        segments.reverse()
        return ".".join(segments)

    def generate(self) -> list[str]:
        """Generate all labels as a list, duplicates included."""
        return [self._label() for _ in range(self._num_labels)]

    def sources(self, num_sources: int = 3) -> list[LinesSource]:
        """Generate labels and deal them round-robin into named sources."""
        if num_sources < 1:
            raise ValueError("num_sources must be at least 1")
        buckets: list[list[str]] = [[] for _ in range(num_sources)]
        for i, label in enumerate(self.generate()):
            buckets[i % num_sources].append(label)
        return [
            LinesSource(f"source-{i}", lines) for i, lines in enumerate(buckets)
        ]
