"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from blog.domain.model import Tag
from blog.domain.value import Pagination, TagName


class TestPagination:
    """Tests for Pagination.of."""

    def test_non_positive_values_are_coerced(self):
        pagination = Pagination.of(0, -5, default_page_size=100)

        assert pagination.page == 1
        assert pagination.page_size == 100
        assert pagination.offset == 0

    def test_offset_and_limit(self):
        pagination = Pagination.of(3, 20)

        assert pagination.limit == 20
        assert pagination.offset == 40


class TestTagName:
    """Tests for tag name normalization."""

    @pytest.mark.parametrize("raw", ["Rust", "rust", " RUST "])
    def test_case_and_whitespace_are_normalized(self, raw):
        assert TagName(raw).root == "RUST"
        assert Tag(name=raw).name == "RUST"

    @pytest.mark.parametrize("raw", ["", "   ", "x" * 51])
    def test_invalid_names_are_rejected(self, raw):
        with pytest.raises(ValidationError):
            TagName(raw)
