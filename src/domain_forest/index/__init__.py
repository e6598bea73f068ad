"""Name collections: the suffix index and its linear baseline."""

from domain_forest.index.base import NameList
from domain_forest.index.linear import LinearNameList
from domain_forest.index.suffix_index import SuffixIndex

__all__ = [
    "LinearNameList",
    "NameList",
    "SuffixIndex",
]
