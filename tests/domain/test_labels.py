"""Tests for label normalisation, suffix enumeration and the descent test."""

import pytest

from domain_forest.domain.labels import (
    InvalidLabel,
    ancestor_suffixes,
    depth_of,
    is_descendant_of,
    normalize_label,
    suffixes_of,
    validate_label,
)


class TestNormalizeLabel:

    def test_trims_whitespace(self):
        assert normalize_label("  internal.acme.com\t") == "internal.acme.com"

    def test_lower_cases(self):
        assert normalize_label("One.Internal.ACME.com") == "one.internal.acme.com"

    @pytest.mark.parametrize("raw", ["", "   ", "\t ", "\n"])
    def test_blank_lines_are_dropped(self, raw):
        assert normalize_label(raw) is None

    def test_leading_dot_is_malformed(self):
        assert normalize_label(".acme.com") is None
        assert normalize_label("   .acme.com") is None

    def test_validate_raises_on_unusable_text(self):
        with pytest.raises(InvalidLabel):
            validate_label("  ")
        with pytest.raises(ValueError):
            validate_label(".com")

    def test_validate_returns_normalised_label(self):
        assert validate_label(" ACME.com ") == "acme.com"


class TestIsDescendantOf:

    def test_direct_child(self):
        assert is_descendant_of("one.internal.acme.com", "internal.acme.com")

    def test_deeper_descendant(self):
        assert is_descendant_of("one.internal.acme.com", "acme.com")
        assert is_descendant_of("one.internal.acme.com", "com")

    def test_not_reflexive(self):
        assert not is_descendant_of("acme.com", "acme.com")

    def test_requires_separator_before_parent(self):
        """Ending with the parent text is not enough."""
        assert not is_descendant_of("non-internal.acme.com", "internal.acme.com")
        assert not is_descendant_of("myacme.com", "acme.com")

    def test_ancestor_is_not_descendant(self):
        assert not is_descendant_of("acme.com", "internal.acme.com")

    def test_unrelated(self):
        assert not is_descendant_of("api.openai.com", "acme.com")


class TestSuffixes:

    def test_suffixes_include_label(self):
        assert list(suffixes_of("a.b.c")) == ["a.b.c", "b.c", "c"]

    def test_single_segment(self):
        assert list(suffixes_of("localhost")) == ["localhost"]
        assert list(ancestor_suffixes("localhost")) == []

    def test_ancestor_suffixes_most_specific_first(self):
        assert list(ancestor_suffixes("x.a.b.c")) == ["a.b.c", "b.c", "c"]

    def test_trailing_separator_yields_no_empty_suffix(self):
        assert list(ancestor_suffixes("a.b.")) == ["b."]

    def test_depth(self):
        assert depth_of("com") == 1
        assert depth_of("one.internal.acme.com") == 4
