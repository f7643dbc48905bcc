# =============================================================================
# tools/registry.py  —  The static tool registry
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the ten tools this server exposes (name, description, argument
#   schema) and binds each name to its handler in core/.  Both tables are
#   built once at import time and never change afterwards.
#
# TOOL NAMING CONVENTIONS:
#   - list_*  → enumerate accounts / projects (start here)
#   - get_*   → read one kind of project data
#   Every tool is read-only and idempotent.
#
# The schemas are metadata for the protocol layer.  Nothing in this module
# validates incoming arguments against them.
# =============================================================================

from typing import Any, Awaitable, Callable, Mapping

from core.accounts import handle_get_scraping_stats, handle_list_accounts, handle_list_projects
from core.api_client import AnalyticsApiClient
from core.catalog import (
    handle_get_google_ads,
    handle_get_pricing,
    handle_get_search_terms,
    handle_get_title_analysis,
)
from core.market import handle_get_market_overview, handle_get_market_share
from core.models import ToolDescriptor, ToolResult
from core.rankings import handle_get_rankings

Handler = Callable[[AnalyticsApiClient, Mapping[str, Any]], Awaitable[ToolResult]]

DEVICES = ["desktop", "mobile"]

# -----------------------------------------------------------------------------
# Shared parameter definitions
# -----------------------------------------------------------------------------
ACCOUNT_PREFIX = {"type": "string", "description": "Account prefix (default: 'acc1_')"}
PROJECT_NUMBER = {"type": "integer", "description": "Project number (default: 1)"}
DEVICE = {"type": "string", "enum": DEVICES, "description": "Filter by device type"}
SEARCH_TERM = {"type": "string", "description": "Filter by search term"}
KEYWORD = {
    "type": "string",
    "description": "Filter by search term / keyword (e.g., 'leggings', 'running shoes')",
}


def _schema(properties: dict[str, Any], required: tuple[str, ...] = ()) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": list(required)}


def _project_schema(**extra: Any) -> dict[str, Any]:
    properties = {"account_prefix": ACCOUNT_PREFIX, "project_number": PROJECT_NUMBER}
    properties.update(extra)
    return _schema(properties, required=("project_number",))


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="list_accounts",
        description=(
            "List all Robinhood Analytics accounts available to you. "
            "Start here — this returns your account prefix(es) needed for all other tools. "
            "Most users have one account (acc1_)."
        ),
        input_schema=_schema({}),
    ),
    ToolDescriptor(
        name="list_projects",
        description=(
            "List all projects within a Robinhood Analytics account. "
            "Each project tracks a set of search terms across locations and devices. "
            "Use list_accounts first to get your account_prefix."
        ),
        input_schema=_schema({
            "account_prefix": {
                "type": "string",
                "description": "Account prefix from list_accounts (e.g., 'acc1_'). Defaults to 'acc1_'.",
            },
        }),
    ),
    ToolDescriptor(
        name="get_market_share",
        description=(
            "Get company-level SERP market share data from Google Shopping. "
            "Shows each company's 7-day market share with the trend against the previous 7 days, "
            "average rank, visibility score, number of products and recent history — broken down "
            "by search term, location, device, and date. "
            "Use this to answer questions like 'Who dominates the leggings market?' "
            "or 'How has Nike's market share changed?'"
        ),
        input_schema=_project_schema(
            source={"type": "string", "description": "Filter by retailer/source name (e.g., 'Amazon', 'Nike')"},
            q=KEYWORD,
            device=DEVICE,
        ),
    ),
    ToolDescriptor(
        name="get_market_overview",
        description=(
            "Get daily market-wide trends and overview data from Google Shopping, grouped by date. "
            "Shows aggregated daily metrics across the entire market: total products tracked, "
            "average prices, position distributions, new entrants, and more. "
            "Use this for high-level questions like 'How is the market trending?' "
            "or 'Are there more competitors entering this space?'"
        ),
        input_schema=_project_schema(q=KEYWORD, device=DEVICE),
    ),
    ToolDescriptor(
        name="get_rankings",
        description=(
            "Get product ranking data from Google Shopping SERP tracking. "
            "Returns positions, prices, market share, and visibility for individual products "
            "across search terms, locations, and devices. "
            "Use this for questions like 'What are my top products?' or "
            "'How does my product rank for running shoes in New York?'"
        ),
        input_schema=_project_schema(
            search_term={"type": "string", "description": "Filter by search query (e.g., 'running shoes')"},
            location={"type": "string", "description": "Filter by city location (e.g., 'New York, NY')"},
            device=DEVICE,
            company={"type": "string", "description": "Filter by company/brand name (e.g., 'Nike')"},
            date_from={"type": "string", "description": "Start date (YYYY-MM-DD)"},
            date_to={"type": "string", "description": "End date (YYYY-MM-DD)"},
            limit={"type": "integer", "description": "Max number of results to return (default: 50)"},
        ),
    ),
    ToolDescriptor(
        name="get_pricing",
        description=(
            "Get competitor pricing data from Google Shopping. "
            "Shows product prices, price changes over time, and price distributions "
            "across companies. Use this for questions like "
            "'How are competitors pricing running shoes?' or 'Who has the cheapest product?'"
        ),
        input_schema=_project_schema(
            search_term=SEARCH_TERM,
            company={"type": "string", "description": "Filter by company name"},
            device=DEVICE,
        ),
    ),
    ToolDescriptor(
        name="get_search_terms",
        description=(
            "Get the list of search terms (keywords) tracked in a project, "
            "with summary metrics for each. Use this to see which keywords are being "
            "monitored and their performance overview."
        ),
        input_schema=_project_schema(),
    ),
    ToolDescriptor(
        name="get_title_analysis",
        description=(
            "Get AI-powered title optimization analysis for Google Shopping product listings. "
            "Shows title quality scores, keyword coverage, and improvement suggestions. "
            "Use this for questions like 'Which of my titles need improvement?' "
            "or 'What keywords am I missing in my product titles?'"
        ),
        input_schema=_project_schema(),
    ),
    ToolDescriptor(
        name="get_google_ads",
        description=(
            "Get Google Ads performance data linked to Google Shopping products. "
            "Shows impressions, clicks, cost, conversions, and ROAS for products. "
            "Requires Google Ads integration to be set up in the project. "
            "Use this for questions like 'Which products have the best ROAS?' "
            "or 'How much am I spending on ads for running shoes?'"
        ),
        input_schema=_project_schema(search_term=SEARCH_TERM),
    ),
    ToolDescriptor(
        name="get_scraping_stats",
        description=(
            "Get your account's scraping/scanning usage stats. "
            "Shows how many scans you've used today, your daily limit, and remaining quota. "
            "Use this to check your account usage."
        ),
        input_schema=_schema({}),
    ),
)

HANDLERS: Mapping[str, Handler] = {
    "list_accounts": handle_list_accounts,
    "list_projects": handle_list_projects,
    "get_market_share": handle_get_market_share,
    "get_market_overview": handle_get_market_overview,
    "get_rankings": handle_get_rankings,
    "get_pricing": handle_get_pricing,
    "get_search_terms": handle_get_search_terms,
    "get_title_analysis": handle_get_title_analysis,
    "get_google_ads": handle_get_google_ads,
    "get_scraping_stats": handle_get_scraping_stats,
}

_BY_NAME = {tool.name: tool for tool in TOOLS}


def tool_names() -> list[str]:
    """Registry order, which is also the order tools are advertised in."""
    return [tool.name for tool in TOOLS]


def get_descriptor(name: str) -> ToolDescriptor:
    """Raises KeyError for names outside the registry."""
    return _BY_NAME[name]


def get_handler(name: str) -> Handler:
    """Raises KeyError for names outside the registry."""
    return HANDLERS[name]
