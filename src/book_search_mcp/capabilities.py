"""Capability handshake for the Book Search MCP Server.

MCP CAPABILITY NEGOTIATION:
During ``initialize`` the server declares which feature categories it
supports. This server enables all three (prompts, resources, tools) but
only has one tool; the resource and prompt inventories are always empty.

``CatalogCapabilities`` is a stateless responder: each operation depends
only on that fixed, empty inventory and answers the same way every time.
"""

import logging
from typing import Any

from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import (
    INVALID_PARAMS,
    ErrorData,
    GetPromptResult,
    Implementation,
    InitializeResult,
    ListPromptsResult,
    ListResourcesResult,
    ListResourceTemplatesResult,
    PromptsCapability,
    ReadResourceResult,
    ResourcesCapability,
    ServerCapabilities,
    ToolsCapability,
)

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"

# JSON-RPC server-defined error code for unknown resources
RESOURCE_NOT_FOUND = -32002

INSTRUCTIONS = (
    "架空の本のデータベースを検索するサーバーです。"
    "タイトル、著者、説明文で検索できます。"
)


class CatalogCapabilities:
    """Answers session-info and resource/prompt metadata requests."""

    def __init__(self, config: ServerConfig | None = None):
        self._config = config

    @property
    def config(self) -> ServerConfig:
        return self._config or get_config()

    def server_capabilities(self) -> ServerCapabilities:
        return ServerCapabilities(
            prompts=PromptsCapability(listChanged=False),
            resources=ResourcesCapability(subscribe=False, listChanged=False),
            tools=ToolsCapability(listChanged=False),
        )

    def negotiate_protocol_version(self, requested: str | None = None) -> str:
        """Agree on the client's version when the SDK supports it.

        Without a supported request the server falls back to its baseline,
        ``PROTOCOL_VERSION``.
        """
        if requested in SUPPORTED_PROTOCOL_VERSIONS:
            return requested
        return PROTOCOL_VERSION

    def session_info(self, requested_version: str | None = None) -> InitializeResult:
        """Server metadata sent in response to ``initialize``."""
        info = self.config.server_info
        return InitializeResult(
            protocolVersion=self.negotiate_protocol_version(requested_version),
            capabilities=self.server_capabilities(),
            serverInfo=Implementation(name=info["name"], version=info["version"]),
            instructions=INSTRUCTIONS,
        )

    def initialization_options(self) -> InitializationOptions:
        """Session options the protocol layer uses to answer ``initialize``.

        The capability set is fixed: it does not depend on which handlers
        the server framework happens to register.
        """
        info = self.session_info()
        return InitializationOptions(
            server_name=info.serverInfo.name,
            server_version=info.serverInfo.version,
            capabilities=info.capabilities,
            instructions=info.instructions,
        )

    def list_resources(self) -> ListResourcesResult:
        return ListResourcesResult(resources=[], nextCursor=None)

    def list_resource_templates(self) -> ListResourceTemplatesResult:
        return ListResourceTemplatesResult(resourceTemplates=[], nextCursor=None)

    def list_prompts(self) -> ListPromptsResult:
        return ListPromptsResult(prompts=[], nextCursor=None)

    def read_resource(self, uri: str) -> ReadResourceResult:
        """Always fails: the server has no resources.

        Raises:
            McpError: ``RESOURCE_NOT_FOUND`` with ``{"uri": uri}`` as data
        """
        logger.warning("Resource requested but none exist: %s", uri)
        raise McpError(
            ErrorData(
                code=RESOURCE_NOT_FOUND,
                message="resource_not_found",
                data={"uri": uri},
            )
        )

    def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> GetPromptResult:  # noqa: ARG002
        """Always fails: the server has no prompts.

        Raises:
            McpError: ``INVALID_PARAMS``
        """
        logger.warning("Prompt requested but none exist: %s", name)
        raise McpError(ErrorData(code=INVALID_PARAMS, message="prompt not found"))
