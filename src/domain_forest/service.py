"""Build a forest from named sources.

Sources are read one after another and their lines merged strictly in
order: source order first, then line order within a source. Each line
is trimmed; blank lines and lines starting with "." are skipped; the
rest is lower-cased and tagged with the source's name as its origin.

A source that cannot be read contributes no lines. By default that is
logged as a warning and the run continues; with strict=True it raises
SourceReadError instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from domain_forest.domain.labels import normalize_label
from domain_forest.domain.name import Name
from domain_forest.forest.forest import Forest
from domain_forest.sources.reader import NamedSource, ReadFailure

log = logging.getLogger(__name__)


class SourceReadError(RuntimeError):
    """Raised in strict mode when a source cannot be read."""


@dataclass(slots=True)
class SourceStats:
    """Per-source counts from one build."""
    source: str
    lines: int = 0
    merged: int = 0
    duplicates: int = 0
    skipped: int = 0
    failed: bool = False


def build_forest(
    sources: Iterable[NamedSource],
    strategy: str = "indexed",
    *,
    strict: bool = False,
    stats: list[SourceStats] | None = None,
) -> Forest:
    """Read every source in order and merge its labels into one Forest.

    If *stats* is given, one SourceStats per source is appended to it.
    """
    forest = Forest(strategy)
    for source in sources:
        source_stats = _merge_source(forest, source, strict)
        if stats is not None:
            stats.append(source_stats)
    return forest


def domains_with_sub_domains(
    sources: Iterable[NamedSource],
    strategy: str = "indexed",
) -> list[Name]:
    """Return the top-level Names after merging every source."""
    return build_forest(sources, strategy).roots()


def _merge_source(forest: Forest, source: NamedSource, strict: bool) -> SourceStats:
    stats = SourceStats(source=source.name)
    result = source.read()
    if isinstance(result, ReadFailure):
        if strict:
            raise SourceReadError(f"{source.name}: {result.reason}")
        log.warning("Skipping source %s: %s", source.name, result.reason)
        stats.failed = True
        return stats

    for raw in result.lines:
        stats.lines += 1
        label = normalize_label(raw)
        if label is None:
            stats.skipped += 1
            continue
        if forest.add(label, source.name):
            stats.merged += 1
        else:
            stats.duplicates += 1

    log.info(
        "Merged %s: %d lines, %d new, %d duplicate, %d skipped",
        source.name, stats.lines, stats.merged, stats.duplicates, stats.skipped,
    )
    return stats
