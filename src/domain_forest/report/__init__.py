"""Reporting on a built forest: cross-origin summary and text output."""

from domain_forest.report.printer import (
    format_counts,
    format_forest,
    format_name,
    format_summary,
)
from domain_forest.report.summary import (
    OriginSummary,
    cross_origin_descendants,
    cross_origin_summary,
)

__all__ = [
    "OriginSummary",
    "cross_origin_descendants",
    "cross_origin_summary",
    "format_counts",
    "format_forest",
    "format_name",
    "format_summary",
]
