"""
Book Search MCP Server Package.

An MCP (Model Context Protocol) server exposing keyword search over a
small, fixed catalog of fictional books.

Key Components:
- models: Pydantic model for book records
- database: the in-memory catalog and keyword matching
- config: Configuration management with Pydantic v2
- tools: the ``search`` MCP tool and its result rendering
- capabilities: the capability handshake responder
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
