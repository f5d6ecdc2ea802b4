# =============================================================================
# gong_mcp/core/__init__.py
# =============================================================================
# Everything needed to talk to Gong, and nothing about MCP.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any agent framework.  The
#   client can be used from a plain script or a notebook exactly as the
#   tool server uses it.
# =============================================================================
