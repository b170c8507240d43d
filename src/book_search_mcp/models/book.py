"""
Book model for the Book Search MCP Server.

A ``BookRecord`` is one entry of the fictional catalog. Records are frozen
value objects: the catalog is built once and shared by every tool
invocation, so nothing downstream may modify them.

Years and ISBNs are fictional and deliberately left unvalidated
(``year=3000`` and 14-digit ISBNs both occur in the seed data).
"""

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """A single book in the fictional catalog."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="本のタイトル",
        examples=["量子コンピュータで料理する方法"],
    )

    author: str = Field(
        ...,
        description="著者名",
        examples=["Dr. スーパーサイエンティスト"],
    )

    year: int = Field(
        ...,
        description="出版年（架空）",
        examples=[2157, 3000],
    )

    description: str = Field(
        ...,
        description="本の説明",
    )

    isbn: str = Field(
        ...,
        description="架空のISBN",
        examples=["978-0-123456-47-11"],
    )

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on title, author or description."""
        needle = keyword.lower()
        return (
            needle in self.title.lower()
            or needle in self.author.lower()
            or needle in self.description.lower()
        )
