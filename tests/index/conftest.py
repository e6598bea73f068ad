"""Shared fixtures for name collection tests."""
from __future__ import annotations

import pytest

from domain_forest.index.base import NameList
from domain_forest.index.linear import LinearNameList
from domain_forest.index.suffix_index import SuffixIndex


@pytest.fixture(params=[SuffixIndex, LinearNameList], ids=["indexed", "linear"])
def name_list(request) -> NameList:
    """An empty collection of each implementation."""
    return request.param()


@pytest.fixture
def acme_level(name_list: NameList) -> NameList:
    """One forest level holding three unrelated labels."""
    for label in ["internal.acme.com", "mydb.acme.com", "api.openai.com"]:
        name_list.add_domain(label)
    return name_list
