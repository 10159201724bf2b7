# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes core/ as MCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/:
#     1. Declares the tool name, description and argument bounds
#     2. Builds core.models.FetchParams from the validated arguments
#     3. Serializes the FetchResult into the single text block MCP returns
#
#   It holds no HTTP or parsing logic of its own.
# =============================================================================
