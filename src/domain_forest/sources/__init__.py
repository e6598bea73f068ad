"""Readers for the text sources labels are taken from."""

from domain_forest.sources.reader import (
    FileSource,
    Lines,
    LinesSource,
    NamedSource,
    ReadFailure,
    ReadResult,
    ResourceSource,
    sources_of,
)

__all__ = [
    "FileSource",
    "Lines",
    "LinesSource",
    "NamedSource",
    "ReadFailure",
    "ReadResult",
    "ResourceSource",
    "sources_of",
]
