"""
MCP Tools for the Book Search Server.

Tools are invoked by clients via ``tools/call`` requests. This server
exposes exactly one: ``search``, a keyword search over the fictional
book catalog. It never modifies the catalog.
"""

from .search import search_tool

# Export all tools for server registration
# Each tool is a dictionary with metadata and handler
all_tools = [
    search_tool,
]

__all__ = [
    "all_tools",
    "search_tool",
]
