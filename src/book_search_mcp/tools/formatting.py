"""
Plain-text rendering of search results.

The rendered text always has one of two shapes:
- a single "no results" line, or
- a header line, a blank line, then one block per book with a blank line
  after each block.

The wording lives in ``ResultTemplates`` so the server can be localized
without changing that structure. The defaults are Japanese, matching the
catalog contents.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from ..models.book import BookRecord


class ResultTemplates(BaseModel):
    """Text templates used to render search results.

    ``no_results`` and ``header`` receive ``keyword``; ``book`` receives
    the fields of a ``BookRecord``.
    """

    model_config = ConfigDict(frozen=True)

    no_results: str = "キーワード '{keyword}' に一致する本が見つかりませんでした。"
    header: str = "キーワード '{keyword}' の検索結果:"
    book: str = (
        "タイトル: {title}\n"
        "著者: {author}\n"
        "出版年: {year}\n"
        "ISBN: {isbn}\n"
        "説明: {description}"
    )


DEFAULT_TEMPLATES = ResultTemplates()


def format_book(book: BookRecord, templates: ResultTemplates = DEFAULT_TEMPLATES) -> str:
    """Render one book as a block of ``label: value`` lines."""
    return templates.book.format(
        title=book.title,
        author=book.author,
        year=book.year,
        isbn=book.isbn,
        description=book.description,
    )


def render_search_results(
    keyword: str,
    matches: Sequence[BookRecord],
    templates: ResultTemplates = DEFAULT_TEMPLATES,
) -> str:
    """Render a match set as the text returned by the search tool."""
    if not matches:
        return templates.no_results.format(keyword=keyword)

    output = templates.header.format(keyword=keyword) + "\n\n"
    for book in matches:
        output += format_book(book, templates) + "\n\n"
    return output
