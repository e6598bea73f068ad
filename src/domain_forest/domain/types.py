"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = str  # normalised dotted name, e.g. "one.internal.acme.com"
Origin: TypeAlias = str  # name of the source a label was first read from

SEPARATOR = "."
