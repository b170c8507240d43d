"""
Catalog data layer for the Book Search MCP Server.

This package provides:
- The lazily-built, read-only book catalog (catalog.py)
- Keyword matching over catalog records (book_repository.py)
"""

from .book_repository import DEFAULT_LIMIT, match_books
from .catalog import SEED_BOOKS, build_catalog, get_catalog, reset_catalog

__all__ = [
    "DEFAULT_LIMIT",
    "SEED_BOOKS",
    "build_catalog",
    "get_catalog",
    "match_books",
    "reset_catalog",
]
