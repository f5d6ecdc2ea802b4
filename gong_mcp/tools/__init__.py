# =============================================================================
# gong_mcp/tools/__init__.py
# =============================================================================
# The translation layer between MCP and core/.
#
#   operations.py  → what tools exist and what arguments they take
#   dispatcher.py  → validate, call Gong, wrap the result in an envelope
#   mcp_server.py  → FastMCP wiring
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT sign requests or build HTTP calls (that's core/)
#   - They do NOT reshape Gong's data: calls and transcripts are passed
#     through exactly as Gong returns them
# =============================================================================
