"""
Book query matching for the Book Search MCP Server.

Search is plain substring matching: a record matches when the lowercased
keyword occurs in its lowercased title, author or description. There is
no tokenizing, no relevance scoring and no whitespace trimming, so the
empty keyword matches every record.

Results keep catalog order and are cut to ``limit`` entries.
"""

import logging
from collections.abc import Sequence

from ..models.book import BookRecord

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


def match_books(
    records: Sequence[BookRecord],
    keyword: str,
    limit: int | None = None,
) -> tuple[BookRecord, ...]:
    """
    Filter ``records`` by ``keyword`` and keep at most ``limit`` matches.

    Args:
        records: Catalog records, in catalog order
        keyword: Search term; matched case-insensitively against title,
            author and description
        limit: Maximum number of matches (``DEFAULT_LIMIT`` when None).
            Zero or negative limits produce no matches.

    Returns:
        Matching records in their original order
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        return ()

    matches: list[BookRecord] = []
    for record in records:
        if record.matches(keyword):
            matches.append(record)
            if len(matches) == limit:
                break

    logger.debug("Matched %d record(s) for keyword %r (limit=%d)", len(matches), keyword, limit)
    return tuple(matches)
