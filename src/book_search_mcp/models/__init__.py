"""
Book Search MCP Server Models.

Pydantic models for the entities served by the Book Search MCP Server:
- BookRecord: an immutable entry of the fictional book catalog
"""

from .book import BookRecord

__all__ = [
    "BookRecord",
]
