# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the ten analytics tools from tools/registry.py over MCP.  Each
#   tool is a thin wrapper: it collects its arguments, hands them to the
#   dispatcher, and turns the ToolResult into an MCP response.
#
# HOW IT WORKS (the flow):
#   1. The MCP client (an agent, Claude Desktop, ...) calls a tool by name
#   2. FastMCP validates the arguments against the typed signature below
#   3. The wrapper forwards them to tools/dispatcher.py → core/ handler
#   4. The handler makes ONE GET against the analytics API and formats it
#   5. Success → the text is returned; failure → raised as ToolError, which
#      the transport reports as isError: true with the same text
#
# RUNNING THIS SERVER:
#     ROBINHOOD_API_KEY=... python -m tools.mcp_server
#   or via the console script:  robinhood-analytics-mcp
#   ROBINHOOD_API_URL overrides the default API gateway.
# =============================================================================

import logging
import sys
from typing import Annotated, Any, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.api_client import AnalyticsApiClient
from core.config import load_settings
from core.errors import ConfigurationError
from tools.dispatcher import dispatch
from tools.registry import TOOLS, get_descriptor

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON stream, so every log line goes to STDERR.
#   CYAN   → incoming tool call with its arguments
#   YELLOW → intermediate status
#   GREEN  → response summary
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str, is_error: bool) -> None:
    """Log a one-line response summary in GREEN."""
    outcome = "error" if is_error else "ok"
    logging.info(f"{_GREEN}  ← {tool_name} {outcome}: {len(text)} chars{_RESET}")


# =============================================================================
# Argument types
# =============================================================================
# FastMCP builds each tool's JSON schema from these annotations.  The
# descriptions come from the registry so both stay in sync.
# =============================================================================

def _described(tool: str, param: str) -> Any:
    return Field(description=get_descriptor(tool).input_schema["properties"][param]["description"])


ProjectNumber = Annotated[int, _described("get_search_terms", "project_number")]
AccountPrefix = Annotated[Optional[str], _described("get_search_terms", "account_prefix")]
Device = Annotated[Optional[Literal["desktop", "mobile"]], _described("get_pricing", "device")]
Keyword = Annotated[Optional[str], _described("get_market_share", "q")]
SearchTerm = Annotated[Optional[str], _described("get_pricing", "search_term")]


# =============================================================================
# Server factory
# =============================================================================
def create_server(client: AnalyticsApiClient) -> FastMCP:
    """Build the FastMCP server with every registry tool bound to `client`."""
    mcp = FastMCP("robinhood-analytics")

    def register(name: str):
        descriptor = get_descriptor(name)
        return mcp.tool(name=descriptor.name, description=descriptor.description)

    async def call(tool_name: str, **arguments) -> str:
        _log_request(tool_name, **arguments)
        result = await dispatch(client, tool_name, {k: v for k, v in arguments.items() if v is not None})
        text = result.joined_text
        _log_response(tool_name, text, bool(result.is_error))
        if result.is_error:
            raise ToolError(text)
        return text

    # --- Account level ---------------------------------------------------------

    @register("list_accounts")
    async def list_accounts() -> str:
        return await call("list_accounts")

    @register("list_projects")
    async def list_projects(
        account_prefix: Annotated[Optional[str], _described("list_projects", "account_prefix")] = None,
    ) -> str:
        return await call("list_projects", account_prefix=account_prefix)

    @register("get_scraping_stats")
    async def get_scraping_stats() -> str:
        return await call("get_scraping_stats")

    # --- Market -----------------------------------------------------------------

    @register("get_market_share")
    async def get_market_share(
        project_number: ProjectNumber,
        account_prefix: AccountPrefix = None,
        source: Annotated[Optional[str], _described("get_market_share", "source")] = None,
        q: Keyword = None,
        device: Device = None,
    ) -> str:
        return await call(
            "get_market_share",
            project_number=project_number, account_prefix=account_prefix,
            source=source, q=q, device=device,
        )

    @register("get_market_overview")
    async def get_market_overview(
        project_number: ProjectNumber,
        account_prefix: AccountPrefix = None,
        q: Keyword = None,
        device: Device = None,
    ) -> str:
        return await call(
            "get_market_overview",
            project_number=project_number, account_prefix=account_prefix, q=q, device=device,
        )

    # --- Rankings ---------------------------------------------------------------

    @register("get_rankings")
    async def get_rankings(
        project_number: ProjectNumber,
        account_prefix: AccountPrefix = None,
        search_term: Annotated[Optional[str], _described("get_rankings", "search_term")] = None,
        location: Annotated[Optional[str], _described("get_rankings", "location")] = None,
        device: Device = None,
        company: Annotated[Optional[str], _described("get_rankings", "company")] = None,
        date_from: Annotated[Optional[str], _described("get_rankings", "date_from")] = None,
        date_to: Annotated[Optional[str], _described("get_rankings", "date_to")] = None,
        limit: Annotated[Optional[int], _described("get_rankings", "limit")] = None,
    ) -> str:
        return await call(
            "get_rankings",
            project_number=project_number, account_prefix=account_prefix,
            search_term=search_term, location=location, device=device, company=company,
            date_from=date_from, date_to=date_to, limit=limit,
        )

    # --- Catalog ----------------------------------------------------------------

    @register("get_pricing")
    async def get_pricing(
        project_number: ProjectNumber,
        account_prefix: AccountPrefix = None,
        search_term: SearchTerm = None,
        company: Annotated[Optional[str], _described("get_pricing", "company")] = None,
        device: Device = None,
    ) -> str:
        return await call(
            "get_pricing",
            project_number=project_number, account_prefix=account_prefix,
            search_term=search_term, company=company, device=device,
        )

    @register("get_search_terms")
    async def get_search_terms(project_number: ProjectNumber, account_prefix: AccountPrefix = None) -> str:
        return await call("get_search_terms", project_number=project_number, account_prefix=account_prefix)

    @register("get_title_analysis")
    async def get_title_analysis(project_number: ProjectNumber, account_prefix: AccountPrefix = None) -> str:
        return await call("get_title_analysis", project_number=project_number, account_prefix=account_prefix)

    @register("get_google_ads")
    async def get_google_ads(
        project_number: ProjectNumber,
        account_prefix: AccountPrefix = None,
        search_term: SearchTerm = None,
    ) -> str:
        return await call(
            "get_google_ads",
            project_number=project_number, account_prefix=account_prefix, search_term=search_term,
        )

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Read configuration, build the client and serve MCP over stdio."""
    load_dotenv()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logging.error(f"ERROR: {exc}")
        sys.exit(1)

    client = AnalyticsApiClient.from_settings(settings)
    mcp = create_server(client)
    _log_status(f"Robinhood Analytics MCP server running ({len(TOOLS)} tools) against {client.base_url}")
    mcp.run()


if __name__ == "__main__":
    main()
