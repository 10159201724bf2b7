# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the NocoDB records fetch as a single MCP tool, "nocodb-fetch".
#   The tool is a thin wrapper around core/nocodb.py — it validates the
#   arguments, builds FetchParams, and turns the FetchResult into text.
#
# HOW IT WORKS (the flow):
#   1. An MCP host (Claude Desktop, an agent, ...) calls "nocodb-fetch"
#   2. FastMCP validates limit/offset/shuffle against the Field bounds below;
#      out-of-range values are rejected before our code runs
#   3. nocodb_fetch() calls core.nocodb.fetch_records()
#   4. The FetchResult is serialized to ONE text block and returned
#
#   Every outcome of a valid call is text: the records envelope as JSON,
#   or an error string.  Nothing is raised back to the host.
#
# RUNNING THIS SERVER:
#     a) python main.py                (loads .env, then serves on stdio)
#     b) python -m tools.mcp_server    (serves on stdio, env only)
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core.config import NocoDBSettings, load_settings
from core.models import DEFAULT_LIMIT, MAX_LIMIT, FetchParams
from core.nocodb import fetch_records

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport.  Anything we print there corrupts the JSON-RPC
# stream, so all logging goes to STDERR.
#
# Colors: CYAN = incoming call, YELLOW = status, GREEN = response.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

TOOL_NAME = "nocodb-fetch"
TOOL_DESCRIPTION = "Fetch NocoDB records and log them"


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a one-line preview of the response in GREEN, then return it."""
    preview = text if len(text) <= 200 else text[:200] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(preview)}{_RESET}")
    return text


# =============================================================================
# Server factory
# =============================================================================
# Settings are read once, here, and captured by the tool closure.  Tests
# build their own server with a hand-made NocoDBSettings.
# =============================================================================
def create_server(settings: Optional[NocoDBSettings] = None) -> FastMCP:
    """Build the "nocodb" FastMCP server with the nocodb-fetch tool."""
    if settings is None:
        settings = load_settings()

    mcp = FastMCP("nocodb")

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def nocodb_fetch(
        limit: Annotated[
            int, Field(ge=1, le=MAX_LIMIT, description="Records per page (1-1000)")
        ] = DEFAULT_LIMIT,
        offset: Annotated[
            int, Field(ge=0, description="0-based index of the first record")
        ] = 0,
        shuffle: Annotated[
            int, Field(ge=0, le=1, description="1 to return records in random order")
        ] = 0,
        token: Annotated[
            Optional[str], Field(description="NocoDB API token; or set NOCODB_TOKEN")
        ] = None,
    ) -> str:
        _log_request(
            TOOL_NAME,
            limit=limit,
            offset=offset,
            shuffle=shuffle,
            token="***" if token else None,
        )

        result = fetch_records(
            FetchParams(limit=limit, offset=offset, shuffle=shuffle, token=token),
            settings,
        )
        if result.is_error:
            _log_status(f"Failed: {result.error}")
        else:
            _log_status(f"Returning {result.envelope.count} records")
        return _log_response(TOOL_NAME, result.to_text())

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    create_server().run()
