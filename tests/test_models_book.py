"""Tests for the BookRecord model."""

import pytest
from pydantic import ValidationError

from book_search_mcp.models import BookRecord


@pytest.fixture
def book() -> BookRecord:
    return BookRecord(
        title="火星での園芸入門",
        author="火星の園芸家",
        year=2250,
        description="火星の特殊な環境で植物を育てる方法を解説。",
        isbn="978-0-123456-47-13",
    )


class TestBookRecord:
    def test_fields(self, book):
        assert book.title == "火星での園芸入門"
        assert book.author == "火星の園芸家"
        assert book.year == 2250
        assert book.isbn == "978-0-123456-47-13"

    def test_fictional_values_accepted(self):
        """Far-future years and non-standard ISBNs are not validated."""
        record = BookRecord(title="t", author="a", year=3000, description="d", isbn="not-an-isbn")
        assert record.year == 3000
        assert record.isbn == "not-an-isbn"

    def test_record_is_frozen(self, book):
        with pytest.raises(ValidationError):
            book.title = "changed"

    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            BookRecord(title="t", author="a", year=2000, description="d")

    def test_value_equality(self, book):
        assert book == BookRecord(**book.model_dump())


class TestMatches:
    def test_matches_each_field(self, book):
        assert book.matches("園芸入門")  # title
        assert book.matches("園芸家")  # author
        assert book.matches("植物")  # description

    def test_isbn_is_not_searched(self, book):
        assert not book.matches("978-0-123456")

    def test_case_insensitive(self):
        record = BookRecord(title="Mixed Case", author="Dr. Who", year=1, description="", isbn="x")
        assert record.matches("dr.")
        assert record.matches("DR.")
        assert record.matches("mIXED")

    def test_keyword_is_not_trimmed(self, book):
        assert not book.matches(" 火星")

    def test_empty_keyword_matches(self, book):
        assert book.matches("")
