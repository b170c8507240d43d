"""
Search tool implementation for the Book Search MCP Server.

MCP TOOL STRUCTURE:
- Metadata: name ``search``, description, input schema
- Input validation: the ``SearchQuery`` Pydantic model
- Handler: match the catalog, render text, wrap it in a tool result

Invalid arguments are reported as a JSON-RPC ``INVALID_PARAMS`` error.
An empty match set is not an error: it renders a normal "no results" text.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, CallToolResult, ErrorData, TextContent
from pydantic import BaseModel, Field, ValidationError

from ..database.book_repository import DEFAULT_LIMIT, match_books
from ..database.catalog import get_catalog
from .formatting import render_search_results

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT VALIDATION SCHEMA
# =============================================================================


class SearchQuery(BaseModel):
    """
    Input schema for the search tool.

    The keyword is used as-is: it is not stripped and may be empty, in
    which case every record matches.
    """

    keyword: str = Field(
        ...,
        description="検索キーワード",
        strict=True,
        examples=["量子", "火星"],
    )

    limit: int | None = Field(
        default=None,
        description="最大結果数",
        strict=True,
        examples=[1, 5],
    )

    @property
    def effective_limit(self) -> int:
        """The limit to apply, with the default filled in."""
        return DEFAULT_LIMIT if self.limit is None else self.limit


def decode_search_query(arguments: Any) -> SearchQuery:
    """
    Decode raw tool arguments into a ``SearchQuery``.

    Raises:
        McpError: ``INVALID_PARAMS`` when the arguments are not an object or
            do not match the input schema
    """
    # MCP ERROR HANDLING: Invalid parameters
    # A tools/call without an arguments object, or with arguments of the
    # wrong shape, is a protocol-level error (-32602), not a tool result
    # with isError set. The session continues either way.
    if not isinstance(arguments, Mapping):
        logger.warning("Invalid search parameters: expected an object, got %s", type(arguments).__name__)
        raise McpError(
            ErrorData(
                code=INVALID_PARAMS,
                message="Invalid search parameters: expected an object",
            )
        )

    try:
        return SearchQuery.model_validate(dict(arguments))
    except ValidationError as e:
        logger.warning("Invalid search parameters: %s", e)
        raise McpError(
            ErrorData(
                code=INVALID_PARAMS,
                message="Invalid search parameters",
                data={
                    "errors": [
                        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
                        for err in e.errors()
                    ]
                },
            )
        ) from e


# =============================================================================
# TOOL HANDLER IMPLEMENTATION
# =============================================================================


def run_search(query: SearchQuery) -> str:
    """Search the catalog and render the matches as text."""
    matches = match_books(get_catalog(), query.keyword, query.effective_limit)
    logger.debug(
        "search: keyword=%r limit=%d -> %d match(es)",
        query.keyword,
        query.effective_limit,
        len(matches),
    )
    return render_search_results(query.keyword, matches)


def search_books_handler(arguments: Any) -> CallToolResult:
    """
    Handle one invocation of the search tool.

    Args:
        arguments: Raw arguments from the MCP tools/call request

    Returns:
        A successful tool result holding exactly one text content item

    Raises:
        McpError: ``INVALID_PARAMS`` for malformed arguments
    """
    # STEP 1: Validate input arguments
    # Strict types: "3" is not a limit and true is not an integer
    query = decode_search_query(arguments)

    # STEP 2: Match and render
    # No matches is a successful outcome with a "no results" text
    text = run_search(query)

    # STEP 3: Wrap as a tool result
    # MCP RESPONSE FORMAT: Tools return content arrays with typed items
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=False,
    )


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

# Tool metadata for MCP server registration
# WHY: The server answers tools/list from this metadata and routes tools/call
#      for "search" to the handler
# HOW: inputSchema is generated from SearchQuery, the same model that
#      validates the arguments, so the advertised schema and the checks agree
# WHAT: The handler takes the raw arguments object, untouched by any
#       signature-based coercion

search_tool: dict[str, Any] = {
    "name": "search",
    "description": "Search for book in our fictional database",
    "inputSchema": SearchQuery.model_json_schema(),
    "handler": search_books_handler,
}
