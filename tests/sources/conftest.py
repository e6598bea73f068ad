"""Shared fixtures for source and service tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from domain_forest.sources.reader import LinesSource

# Same data the CLI and report tests use: three files, first one wins duplicates
DOMAINS1 = [
    "internal.acme.com",
    "someservice-a.internal.acme.com",
    "mydb.acme.com",
    "",
    "  www.acme.com  ",
]
DOMAINS2 = [
    "internal.acme.com",
    "someservice-b.internal.acme.com",
    "replica.mydb.acme.com",
    ".broken.acme.com",
]
DOMAINS3 = [
    "MyDB.acme.com",
    "www.someservice-a.internal.acme.com",
    "someservice-c.internal.acme.com",
]


def list_source_of(*lines: str, name: str = "source") -> list[LinesSource]:
    return [LinesSource(name, lines)]


@pytest.fixture
def domain_files(tmp_path: Path) -> list[Path]:
    """Write DOMAINS1..3 to files and return their paths in order."""
    paths = []
    for i, lines in enumerate([DOMAINS1, DOMAINS2, DOMAINS3], start=1):
        p = tmp_path / f"domains{i}.txt"
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        paths.append(p)
    return paths
