"""Tests for search result rendering."""

from book_search_mcp.database.catalog import get_catalog
from book_search_mcp.tools.formatting import (
    DEFAULT_TEMPLATES,
    ResultTemplates,
    format_book,
    render_search_results,
)


class TestRenderSearchResults:
    def test_no_results_message(self):
        text = render_search_results("xyz", ())
        assert text == "キーワード 'xyz' に一致する本が見つかりませんでした。"

    def test_single_result_layout(self):
        book = get_catalog()[0]
        text = render_search_results("量子", (book,))

        assert text == (
            "キーワード '量子' の検索結果:\n\n"
            "タイトル: 量子コンピュータで料理する方法\n"
            "著者: Dr. スーパーサイエンティスト\n"
            "出版年: 2157\n"
            "ISBN: 978-0-123456-47-11\n"
            "説明: 量子コンピュータを使用して、分子レベルで料理を再構築する革新的な方法を解説\n\n"
        )

    def test_blocks_separated_by_blank_line_in_order(self):
        books = get_catalog()[:3]
        text = render_search_results("", books)

        header, *blocks = text.rstrip("\n").split("\n\n")
        assert header == "キーワード '' の検索結果:"
        assert len(blocks) == 3
        for block, book in zip(blocks, books, strict=True):
            assert block == format_book(book)

    def test_empty_and_non_empty_are_structurally_distinct(self):
        empty = render_search_results("k", ())
        full = render_search_results("k", get_catalog()[:1])

        assert "\n" not in empty
        assert full.startswith(DEFAULT_TEMPLATES.header.format(keyword="k") + "\n\n")
        assert "タイトル: " in full and "タイトル: " not in empty

    def test_field_values_not_truncated(self):
        book = get_catalog()[3]
        assert f"説明: {book.description}" in format_book(book)

    def test_custom_templates(self):
        templates = ResultTemplates(
            no_results="No books found for '{keyword}'.",
            header="Results for '{keyword}':",
            book="{title} by {author} ({year}) [{isbn}]\n{description}",
        )
        book = get_catalog()[2]

        assert render_search_results("zzz", (), templates) == "No books found for 'zzz'."
        assert render_search_results("火星", (book,), templates) == (
            "Results for '火星':\n\n"
            f"{book.title} by {book.author} (2250) [978-0-123456-47-13]\n"
            f"{book.description}\n\n"
        )
