"""
In-memory catalog store for the Book Search MCP Server.

The catalog is a fixed, read-only collection of fictional books. It is
built lazily on first access and shared by every tool invocation for the
lifetime of the process; it is never mutated or reloaded.

CONCURRENCY:
FastMCP may dispatch several requests concurrently, so the first build is
guarded by a lock (double-checked). Once built, the catalog is an immutable
tuple of frozen records and reads need no locking.
"""

import logging
import threading

from ..models.book import BookRecord

logger = logging.getLogger(__name__)


# Seed data, in catalog order. Order matters: search results preserve it.
SEED_BOOKS: tuple[dict[str, str | int], ...] = (
    {
        "title": "量子コンピュータで料理する方法",
        "author": "Dr. スーパーサイエンティスト",
        "year": 2157,
        "description": "量子コンピュータを使用して、分子レベルで料理を再構築する革新的な方法を解説",
        "isbn": "978-0-123456-47-11",
    },
    {
        "title": "タイムトラベルと税金対策",
        "author": "未来の会計士",
        "year": 3000,
        "description": "タイムトラベルを活用した効率的な税金対策を解説",
        "isbn": "978-0-123456-47-12",
    },
    {
        "title": "火星での園芸入門",
        "author": "火星の園芸家",
        "year": 2250,
        "description": "火星の特殊な環境で植物を育てる方法を解説。",
        "isbn": "978-0-123456-47-13",
    },
    {
        "title": "AIと恋愛の心理学",
        "author": "ロボット心理学者",
        "year": 2200,
        "description": "AIとの恋愛関係における心理学的な考察と実践的なアドバイス。",
        "isbn": "978-0-123456-47-14",
    },
    {
        "title": "テレパシーでプログラミング",
        "author": "サイキックエンジニア",
        "year": 2300,
        "description": "テレパシー能力を使用してコードを書く方法を解説。",
        "isbn": "978-0-123456-47-15",
    },
)


def build_catalog() -> tuple[BookRecord, ...]:
    """Build the catalog from the seed data."""
    return tuple(BookRecord.model_validate(entry) for entry in SEED_BOOKS)


class _CatalogStore:
    """Internal storage for the catalog singleton."""

    _instance: tuple[BookRecord, ...] | None = None
    _lock = threading.Lock()


def get_catalog() -> tuple[BookRecord, ...]:
    """
    Get the catalog, building it on first use.

    Every call returns the same tuple object, so callers can rely on
    identical content and order for the lifetime of the process.
    """
    catalog = _CatalogStore._instance  # type: ignore[reportPrivateUsage]
    if catalog is not None:
        return catalog

    with _CatalogStore._lock:  # type: ignore[reportPrivateUsage]
        if _CatalogStore._instance is None:  # type: ignore[reportPrivateUsage]
            _CatalogStore._instance = build_catalog()  # type: ignore[reportPrivateUsage]
            logger.info(
                "Book catalog initialized with %d records",
                len(_CatalogStore._instance),  # type: ignore[reportPrivateUsage]
            )
        return _CatalogStore._instance  # type: ignore[reportPrivateUsage]


def reset_catalog() -> None:
    """Drop the cached catalog (useful for testing)."""
    with _CatalogStore._lock:  # type: ignore[reportPrivateUsage]
        _CatalogStore._instance = None  # type: ignore[reportPrivateUsage]
