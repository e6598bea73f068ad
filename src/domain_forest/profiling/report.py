"""Report generation for profiling results.

Formats BuildResult data into human-readable tables for terminal output.
"""
from __future__ import annotations

from domain_forest.profiling.harness import BuildResult, ComparisonResult


def format_report(result: BuildResult, label: str | None = None) -> str:
    """Format a BuildResult as a readable report string."""
    lines = [
        f"=== {label or result.strategy} ===",
        f"Labels merged:     {result.total_labels:,}",
        f"Distinct names:    {result.names:,}",
        f"Top-level names:   {result.roots:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.labels_per_sec:,.0f} labels/sec",
    ]
    return "\n".join(lines)


def format_comparison(comparison: ComparisonResult) -> str:
    """Format a linear vs indexed comparison table."""
    before, after = comparison.linear, comparison.indexed

    def _speedup(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        ratio = old / new
        return f"{ratio:.1f}x"

    lines = [
        f"{'Metric':<30} {'Linear':>12} {'Indexed':>12} {'Speedup':>10}",
        "-" * 66,
        f"{'Total time (ms)':<30} {before.total_time_ms:>12.1f} "
        f"{after.total_time_ms:>12.1f} "
        f"{_speedup(before.total_time_ms, after.total_time_ms):>10}",
        f"{'Throughput (labels/sec)':<30} {before.labels_per_sec:>12,.0f} "
        f"{after.labels_per_sec:>12,.0f} "
        f"{_speedup(after.labels_per_sec, before.labels_per_sec):>10}",
        f"{'Distinct names':<30} {before.names:>12,} {after.names:>12,}",
        f"{'Top-level names':<30} {before.roots:>12,} {after.roots:>12,}",
        "",
        f"Same forest: {'yes' if comparison.shapes_match else 'NO'}",
    ]
    return "\n".join(lines)
