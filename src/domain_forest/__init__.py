"""domain-forest: group domain names under their parent domains.

    from domain_forest import Forest
    forest = Forest()
    forest.add("one.internal.acme.com", origin="a.txt")
    forest.add("internal.acme.com", origin="b.txt")
"""

from domain_forest.domain.labels import InvalidLabel, is_descendant_of, normalize_label
from domain_forest.domain.name import Name
from domain_forest.forest.forest import Forest, ForestInvariantError
from domain_forest.service import SourceReadError, build_forest, domains_with_sub_domains

__all__ = [
    "Forest",
    "ForestInvariantError",
    "InvalidLabel",
    "Name",
    "SourceReadError",
    "build_forest",
    "domains_with_sub_domains",
    "is_descendant_of",
    "normalize_label",
]
