"""Incremental merge: place one new Name into a forest level.

merge() classifies the new Name against a single collection (the top
level, or the children of some Name) and takes exactly one of four
branches:

    1. duplicate    -- the label is already in the collection: no-op.
    2. descendant   -- a member is an ancestor: recurse into that
                       member's children.
    3. ancestor     -- one or more members descend from the new Name:
                       pull them out and merge each into the new Name's
                       children, then register the new Name here.
    4. independent  -- register the new Name here.

Branch 3 goes through merge() again rather than appending, so an
absorbed member keeps its own subtree and absorbed members that turn
out to be nested get nested. Members absorbed in the same pass are
only compared against what is already in the new Name's children at
the moment each one is merged.

Each call does O(depth) index work at its level and recurses at most
once per level on branch 2, so placing a name costs O(depth^2) lookups
with the suffix index.
"""
from __future__ import annotations

from domain_forest.domain.name import Name
from domain_forest.domain.types import Label
from domain_forest.forest.arena import NameArena
from domain_forest.index.base import NameList


def merge(arena: NameArena, names: NameList, name: Name) -> list[Label]:
    """Merge *name* into *names* and return the labels registered there.

    *arena* resolves labels found in *names* back to Name records; it
    must own every Name reachable from *names*. *name* itself does not
    have to be in the arena yet.
    """
    if names.contains(name.label):
        return names.get_domains()

    parents = names.find_parents_of(name.label)
    if parents:
        # at most one parent per level in a well-formed forest
        parent = arena.get(parents[0])
        merge(arena, parent.children, name)
        return names.get_domains()

    sub_domains = names.find_sub_domains(name.label)
    if sub_domains:
        for label in sub_domains:
            names.remove_domain(label)
        for label in sub_domains:
            merge(arena, name.children, arena.get(label))

    names.add_domain(name.label)
    return names.get_domains()
