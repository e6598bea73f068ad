"""Timing harness: build the same forest with each collection strategy.

The suffix index replaces linear scans over every known name with
O(depth) lookups. The harness feeds one synthetic label list through
Forest.add() once per strategy, times it, and checks the resulting
forests have the same shape.
"""
from __future__ import annotations

import cProfile
import io
import pstats
import time
from dataclasses import dataclass

from domain_forest.forest.forest import Forest
from domain_forest.profiling.load_generator import LabelGenerator


@dataclass(slots=True)
class BuildResult:
    """Timing results from building one forest."""
    strategy: str
    total_labels: int
    names: int
    roots: int
    total_time_ms: float
    labels_per_sec: float
    cprofile_stats: str | None = None


@dataclass(slots=True)
class ComparisonResult:
    indexed: BuildResult
    linear: BuildResult
    shapes_match: bool


def run_build(
    labels: list[str],
    strategy: str = "indexed",
    profile: bool = False,
) -> tuple[BuildResult, Forest]:
    """Merge *labels* into a fresh Forest and time it.

    If profile=True, wraps the build in cProfile and includes the
    stats in the result.
    """
    forest = Forest(strategy)

    def _run() -> None:
        for label in labels:
            forest.add(label)

    cprofile_text = None
    start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(20)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - start) * 1000

    lps = len(labels) / (total_ms / 1000) if total_ms > 0 else 0.0
    result = BuildResult(
        strategy=strategy,
        total_labels=len(labels),
        names=len(forest),
        roots=len(forest.roots()),
        total_time_ms=total_ms,
        labels_per_sec=lps,
        cprofile_stats=cprofile_text,
    )
    return result, forest


def run_comparison(
    num_labels: int = 2_000,
    max_depth: int = 5,
    seed: int = 42,
    num_orgs: int | None = 500,
) -> ComparisonResult:
    """Build one generated label set with both strategies."""
    labels = LabelGenerator(
        num_labels=num_labels, max_depth=max_depth, seed=seed, num_orgs=num_orgs,
    ).generate()
    indexed, indexed_forest = run_build(labels, "indexed")
    linear, linear_forest = run_build(labels, "linear")
    return ComparisonResult(
        indexed=indexed,
        linear=linear,
        shapes_match=indexed_forest.shape() == linear_forest.shape(),
    )
