# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
#   ConfigurationError  → missing API key at startup (fatal, process exits)
#   UpstreamError       → backend answered with a non-2xx status
#   NetworkError        → the request never completed
#   UnknownToolError    → tool name not in the registry
#
# Everything except ConfigurationError is caught by the dispatcher and
# turned into a ToolResult with isError=True.  An empty result set is NOT
# an error; handlers format it as a normal, explanatory text block.
# =============================================================================


class AnalyticsError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(AnalyticsError):
    """Required process configuration is missing or invalid."""


class UpstreamError(AnalyticsError):
    """The analytics API returned a non-2xx response."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class NetworkError(AnalyticsError):
    """The HTTP request could not be completed."""


class UnknownToolError(AnalyticsError):
    """A tool name that the registry does not know."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown tool: {name}. Available tools: {', '.join(available)}")
