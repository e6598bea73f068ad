"""Profiling harness and label generation for domain-forest."""

from domain_forest.profiling.harness import (
    BuildResult,
    ComparisonResult,
    run_build,
    run_comparison,
)
from domain_forest.profiling.load_generator import LabelGenerator
from domain_forest.profiling.report import format_comparison, format_report

__all__ = [
    "BuildResult",
    "ComparisonResult",
    "LabelGenerator",
    "format_comparison",
    "format_report",
    "run_build",
    "run_comparison",
]
