# =============================================================================
# gong_mcp/__init__.py
# =============================================================================
# An MCP server that lets an AI agent list Gong calls and read their
# transcripts.
#
# LAYOUT:
#   core/   → pure Python: credentials, request signing, the Gong HTTP client.
#             Nothing here imports FastMCP.
#   tools/  → the MCP-facing layer: operation registry, dispatcher, and the
#             FastMCP server that exposes them.
#   main.py → process wiring (env, logging, stdio server).
# =============================================================================

__version__ = "0.1.0"
