# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic behind the analytics tools: settings,
# the HTTP client, response-shape extraction, text formatting and the ten
# tool handlers.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   orchestration framework.  Handlers take an AnalyticsApiClient and a
#   plain dict of arguments and return a ToolResult, so they can be tested
#   with a fake HTTP transport and nothing else.
# =============================================================================
