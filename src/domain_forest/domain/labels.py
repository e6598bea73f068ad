"""Label helpers: normalisation, suffix enumeration, and the descent test.

A label is read right to left: "one.internal.acme.com" descends from
"internal.acme.com", which descends from "acme.com". Descent is purely
textual. The parent must be a tail of the child and the character
just before that tail must be the separator, so "non-internal.acme.com"
is NOT a descendant of "internal.acme.com" even though it ends with it.
"""
from __future__ import annotations

from typing import Iterator

from domain_forest.domain.types import SEPARATOR, Label


class InvalidLabel(ValueError):
    """Raised when text cannot be turned into a usable label."""


def normalize_label(raw: str) -> Label | None:
    """Trim and lower-case a raw source line.

    Returns None for lines that carry no label: blank lines and lines
    starting with the separator (malformed, e.g. ".acme.com").
    """
    text = raw.strip()
    if not text or text.startswith(SEPARATOR):
        return None
    # IDNs would need more than lower(); out of scope here
    return text.lower()


def validate_label(raw: str) -> Label:
    """Like normalize_label() but raises InvalidLabel instead of returning None."""
    label = normalize_label(raw)
    if label is None:
        raise InvalidLabel(f"Not a usable label: {raw!r}")
    return label


def is_descendant_of(label: Label, parent: Label) -> bool:
    """True if *label* is a strict hierarchical sub-name of *parent*."""
    return (
        len(label) > len(parent)
        # there must be a separator right before the parent's copy
        and label[len(label) - len(parent) - 1] == SEPARATOR
        and label.endswith(parent)
    )


def suffixes_of(label: Label) -> Iterator[Label]:
    """Yield the label and every suffix left after dropping leading segments.

    "a.b.c" yields "a.b.c", "b.c", "c".
    """
    yield label
    yield from ancestor_suffixes(label)


def ancestor_suffixes(label: Label) -> Iterator[Label]:
    """Yield the proper suffixes of *label*, most specific first.

    "a.b.c" yields "b.c", "c". A trailing separator yields nothing
    after it, so "a.b." stops at "b.".
    """
    current = label
    idx = current.find(SEPARATOR)
    while idx >= 0:
        current = current[idx + 1:]
        if not current:
            return
        yield current
        idx = current.find(SEPARATOR)


def depth_of(label: Label) -> int:
    """Number of segments in the label."""
    return label.count(SEPARATOR) + 1
