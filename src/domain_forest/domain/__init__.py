"""Domain model for domain-forest.

Re-exports the public types for convenient access:
    from domain_forest.domain import Name, Label, is_descendant_of
"""
from domain_forest.domain.labels import (
    InvalidLabel,
    ancestor_suffixes,
    depth_of,
    is_descendant_of,
    normalize_label,
    suffixes_of,
    validate_label,
)
from domain_forest.domain.name import Name
from domain_forest.domain.types import SEPARATOR, Label, Origin

__all__ = [
    "InvalidLabel",
    "Label",
    "Name",
    "Origin",
    "SEPARATOR",
    "ancestor_suffixes",
    "depth_of",
    "is_descendant_of",
    "normalize_label",
    "suffixes_of",
    "validate_label",
]
