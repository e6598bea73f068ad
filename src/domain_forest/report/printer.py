"""Text rendering for forests and cross-origin summaries.

Every line is "label (origin)", indented two spaces per level. Origins
that are file paths are shown by base name only.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from domain_forest.domain.name import Name
from domain_forest.forest.forest import Forest
from domain_forest.report.summary import OriginSummary

INDENT = "  "


def format_name(name: Name, depth: int = 0) -> str:
    return f"{INDENT * depth}{name.label} ({Path(name.origin).name})"


def format_forest(forest: Forest, depth: int | None = 1) -> str:
    """Render the forest, top-level Names first.

    *depth* limits how many levels below the top are printed: 1 (the
    default) shows immediate children only, 0 only top-level Names,
    None the whole tree.
    """
    lines = [
        format_name(name, level)
        for level, name in forest.walk()
        if depth is None or level <= depth
    ]
    return "\n".join(lines)


def format_summary(summaries: Iterable[OriginSummary]) -> str:
    """Render each top-level Name with its cross-origin descendants beneath it."""
    lines: list[str] = []
    for summary in summaries:
        lines.append(format_name(summary.name))
        lines.extend(format_name(d, 1) for d in summary.descendants)
    return "\n".join(lines)


def format_counts(forest: Forest) -> str:
    """One-line size report: names, top-level names, and deepest level."""
    deepest = max((level for level, _ in forest.walk()), default=-1)
    return (
        f"{len(forest):,} names, {len(forest.roots()):,} top-level, "
        f"{deepest + 1} level(s)"
    )
