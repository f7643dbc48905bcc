# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP "translation layer" between the protocol and the
# analytics logic in core/.
#
#   registry.py    → the ten tool descriptors and their handlers
#   dispatcher.py  → name lookup + the single fault-isolation boundary
#   mcp_server.py  → FastMCP wiring and process bootstrap
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP or format text (that's in core/)
#   - They do NOT know about Google ADK (that's agent/)
# =============================================================================
