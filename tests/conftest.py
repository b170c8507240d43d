"""Test configuration and fixtures for the Book Search MCP Server.

This conftest.py provides:
1. Configuration overrides - Test-specific MCP server configurations
2. Environment isolation - No BOOK_SEARCH_* variables leak between tests
3. Catalog fixtures - Small hand-built catalogs for matcher tests
4. MCP protocol assertion helpers
"""

import os
from collections.abc import Generator

import pytest

from book_search_mcp.config import ServerConfig, reset_config
from book_search_mcp.database.catalog import reset_catalog
from book_search_mcp.models.book import BookRecord

# === Configuration Fixtures ===


@pytest.fixture
def test_config() -> Generator[ServerConfig, None, None]:
    """Provide a test-specific MCP server configuration."""
    reset_config()

    config = ServerConfig(
        server_name="test-book-search",
        server_version="0.0.1-test",
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()


# === Environment Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment without BOOK_SEARCH_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("BOOK_SEARCH_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_env(clean_env) -> dict[str, str]:
    """Provide a test environment with common test settings."""
    test_vars = {
        "BOOK_SEARCH_DEBUG": "true",
        "BOOK_SEARCH_LOG_LEVEL": "DEBUG",
        "BOOK_SEARCH_SERVER_NAME": "test-server",
    }

    os.environ.update(test_vars)
    return test_vars


# === Catalog Fixtures ===


@pytest.fixture
def mixed_case_books() -> tuple[BookRecord, ...]:
    """A small catalog with mixed-case ASCII text for case-folding tests."""
    return (
        BookRecord(
            title="Cooking With Qubits",
            author="Dr. Ada Quantum",
            year=2157,
            description="Recipes rebuilt at the molecular level.",
            isbn="000-0-000000-00-01",
        ),
        BookRecord(
            title="Gardening on Mars",
            author="Red Planet Society",
            year=2250,
            description="Growing plants in thin air. Foreword by DR. GREEN.",
            isbn="000-0-000000-00-02",
        ),
        BookRecord(
            title="Telepathic Programming",
            author="Psychic Engineer",
            year=2300,
            description="Writing code without a keyboard.",
            isbn="000-0-000000-00-03",
        ),
    )


# === MCP Protocol Testing Fixtures ===


@pytest.fixture
def search_call_request() -> dict:
    """Provide a tools/call request for the search tool."""
    return {
        "jsonrpc": "2.0",
        "id": "search-1",
        "method": "tools/call",
        "params": {
            "name": "search",
            "arguments": {"keyword": "量子"},
        },
    }


# === Helper Functions ===


def assert_mcp_error(error, error_code: int) -> None:
    """Assert that an McpError carries a well-formed JSON-RPC error.

    MCP defines standard error codes that servers must use.
    """
    assert isinstance(error.error.code, int)
    assert isinstance(error.error.message, str)
    assert error.error.code == error_code


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Automatic cleanup after each test."""
    yield

    reset_config()
    reset_catalog()
