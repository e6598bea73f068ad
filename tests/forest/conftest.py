"""Shared fixtures and helpers for forest tests."""
from __future__ import annotations

import pytest

from domain_forest.domain.types import Label
from domain_forest.forest.forest import STRATEGIES, Forest

SEED = 42

# one.internal.acme.com -> internal.acme.com -> acme.com, plus unrelated names
ACME_LABELS = [
    "two.internal.acme.com",
    "acme.com",
    "one.internal.acme.com",
    "internal.acme.com",
    "mydb.acme.com",
    "api.openai.com",
    "www.api.openai.com",
]

ACME_SHAPE = {
    "acme.com": frozenset({"internal.acme.com", "mydb.acme.com"}),
    "internal.acme.com": frozenset({"one.internal.acme.com", "two.internal.acme.com"}),
    "one.internal.acme.com": frozenset(),
    "two.internal.acme.com": frozenset(),
    "mydb.acme.com": frozenset(),
    "api.openai.com": frozenset({"www.api.openai.com"}),
    "www.api.openai.com": frozenset(),
}


def build(labels: list[str], strategy: str = "indexed", origin: str = "source") -> Forest:
    """Add every label to a fresh Forest, in order."""
    forest = Forest(strategy)
    for label in labels:
        forest.add(label, origin)
    return forest


def root_labels(forest: Forest) -> list[Label]:
    return [n.label for n in forest.roots()]


def child_labels(forest: Forest, label: Label) -> list[Label]:
    return [n.label for n in forest.children(label)]


@pytest.fixture(params=sorted(STRATEGIES))
def strategy(request) -> str:
    return request.param


@pytest.fixture
def acme_forest(strategy: str) -> Forest:
    return build(ACME_LABELS, strategy)
