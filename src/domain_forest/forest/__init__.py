"""Forest construction: the name arena, the merge algorithm, and the Forest."""

from domain_forest.forest.arena import DuplicateName, NameArena
from domain_forest.forest.forest import STRATEGIES, Forest, ForestInvariantError
from domain_forest.forest.merge import merge

__all__ = [
    "DuplicateName",
    "Forest",
    "ForestInvariantError",
    "NameArena",
    "STRATEGIES",
    "merge",
]
