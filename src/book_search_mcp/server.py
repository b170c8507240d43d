"""Book Search MCP Server - FastMCP Implementation

Exposes a fictional book catalog to MCP clients through a single tool.
Clients connect via stdio transport.

Features exposed:
- Tools: ``search`` - keyword search over titles, authors and descriptions
- Resources, resource templates, prompts: advertised but always empty

MCP PROTOCOL OVERVIEW:
1. Clients connect over a transport (stdio here)
2. The initialize handshake declares the server's capabilities
3. JSON-RPC 2.0 requests (tools/list, tools/call, resources/read, ...) are
   routed to handlers, and their errors become JSON-RPC error responses
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    CallToolRequest,
    ErrorData,
    ListToolsRequest,
    ListToolsResult,
    ServerResult,
    Tool,
)

from .capabilities import INSTRUCTIONS, CatalogCapabilities
from .config import ServerConfig, get_config
from .database.catalog import get_catalog
from .tools import all_tools

# Initialize logging - stderr for logs, stdout for MCP protocol
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)


# =============================================================================
# TOOL REGISTRATION
# =============================================================================


def install_tool_handlers(server: FastMCP, tools: list[dict[str, Any]]) -> None:
    """Serve tools/list and tools/call from the tool registry.

    WHY: A tools/call with arguments that fail validation must come back as
         a JSON-RPC INVALID_PARAMS error. Signature-based registration would
         coerce the arguments first and report failures as tool results.
    HOW: The handlers go straight into the protocol server's request table,
         so an McpError raised by a tool handler becomes the error response.
    WHAT: tools/list advertises each tool's own inputSchema; tools/call hands
          the raw arguments object to the tool's handler.
    """
    protocol = server._mcp_server  # type: ignore[reportPrivateUsage]
    registry = {tool["name"]: tool for tool in tools}

    async def _list_tools(_: ListToolsRequest) -> ServerResult:
        return ServerResult(
            ListToolsResult(
                tools=[
                    Tool(
                        name=tool["name"],
                        description=tool["description"],
                        inputSchema=tool["inputSchema"],
                    )
                    for tool in registry.values()
                ]
            )
        )

    async def _call_tool(request: CallToolRequest) -> ServerResult:
        name = request.params.name
        tool = registry.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            raise McpError(ErrorData(code=INVALID_PARAMS, message=f"Unknown tool: {name}"))

        logger.debug("tools/call %s arguments=%s", name, request.params.arguments)
        return ServerResult(tool["handler"](request.params.arguments))

    protocol.request_handlers[ListToolsRequest] = _list_tools
    protocol.request_handlers[CallToolRequest] = _call_tool

    logger.info("Registered %d tools", len(registry))


# =============================================================================
# CAPABILITY CONFIGURATION
# =============================================================================


def install_capability_handlers(server: FastMCP, responder: CatalogCapabilities) -> None:
    """Route the handshake and resource/prompt requests to the responder.

    MCP CAPABILITY NEGOTIATION:
    FastMCP derives capabilities from what is registered and flags every
    list as changeable. This server's inventory is fixed, so the initialize
    response uses the responder's capability set instead.

    Unknown resources fail with ``resource_not_found`` and the requested URI
    as error data; prompts fail with INVALID_PARAMS.
    """
    protocol = server._mcp_server  # type: ignore[reportPrivateUsage]

    # The transport asks for these options when a session starts
    def _initialization_options(*_args: Any, **_kwargs: Any):
        return responder.initialization_options()

    protocol.create_initialization_options = _initialization_options

    @protocol.list_resources()
    async def _list_resources():
        return responder.list_resources().resources

    @protocol.list_resource_templates()
    async def _list_resource_templates():
        return responder.list_resource_templates().resourceTemplates

    @protocol.list_prompts()
    async def _list_prompts():
        return responder.list_prompts().prompts

    @protocol.read_resource()
    async def _read_resource(uri: Any):
        return responder.read_resource(str(uri))

    @protocol.get_prompt()
    async def _get_prompt(name: str, arguments: dict[str, str] | None):
        return responder.get_prompt(name, arguments)


# =============================================================================
# MCP SERVER INITIALIZATION
# =============================================================================


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """Build the FastMCP server with the search tool and capability handlers.

    FastMCP supplies the transports and the session loop; the request
    handlers for tools, resources and prompts are this server's own.
    """
    config = config or get_config()

    server = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=INSTRUCTIONS,
    )

    install_tool_handlers(server, all_tools)
    install_capability_handlers(server, CatalogCapabilities(config))
    return server


# Load configuration
config = get_config()

mcp = create_server(config)


# =============================================================================
# TRANSPORT CONFIGURATION
# =============================================================================


def configure_logging(config: ServerConfig) -> None:
    """Apply the configured log level."""
    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - verbose protocol logging active")
    else:
        # Reduce noise but keep important messages
        logging.getLogger().setLevel(config.log_level)
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def run_stdio_server() -> None:
    """Run the MCP server using stdio transport.

    Stdin receives JSON-RPC requests, stdout sends responses.
    """
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    configure_logging(config)

    # Set up signal handlers for graceful shutdown
    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main() -> None:
    """Main entry point for the MCP server.

    Started via ``book-search-mcp`` or ``python -m book_search_mcp``.
    """
    try:
        logger.info("=" * 60)
        logger.info("Book Search MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("Catalog: %d books", len(get_catalog()))
        logger.info("=" * 60)

        if config.transport == "stdio":
            run_stdio_server()
        else:
            logger.error("Unsupported transport: %s", config.transport)
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
