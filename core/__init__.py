# =============================================================================
# core/__init__.py
# =============================================================================
# This package holds ALL of the NocoDB fetch logic: settings, data models,
# URL building, response-shape extraction and the HTTP round trip itself.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  core/ can be driven from a
#   plain Python REPL (or a test) without an MCP host anywhere in sight.
# =============================================================================
