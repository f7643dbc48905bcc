# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK analyst agent.
#
# ARCHITECTURAL ROLE:
#   The agent is an MCP *client* of tools/mcp_server.py.  It decides WHICH
#   analytics tool to call and HOW to explain the result; it never talks to
#   the analytics API directly and contains no formatting logic.
# =============================================================================
