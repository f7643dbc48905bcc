# =============================================================================
# tools/dispatcher.py  —  Name → handler dispatch and fault isolation
# =============================================================================
#
# HOW IT WORKS:
#   1. Look the tool name up in the registry
#   2. Unknown name → ToolResult(isError=True) listing the valid names
#   3. Known name   → await the handler and return its ToolResult unchanged
#   4. Anything the handler raises (UpstreamError, NetworkError, a KeyError
#      from a malformed payload, ...) is logged and turned into
#      ToolResult(isError=True, "Error: <message>")
#
# This is the ONLY place where handler exceptions are caught.  Nothing
# raised below this function ever reaches the MCP transport.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from core.api_client import AnalyticsApiClient
from core.errors import UnknownToolError
from core.models import ToolResult
from tools.registry import HANDLERS, tool_names


async def dispatch(
    client: AnalyticsApiClient,
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> ToolResult:
    """Run one tool call and always return a ToolResult."""
    handler = HANDLERS.get(name)
    if handler is None:
        error = UnknownToolError(name, tool_names())
        logging.warning(str(error))
        return ToolResult.error(str(error))

    try:
        return await handler(client, dict(arguments or {}))
    except Exception as exc:
        message = str(exc) or exc.__class__.__name__
        logging.error(f"Tool {name} failed: {message}")
        return ToolResult.error(f"Error: {message}")
