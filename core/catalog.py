# =============================================================================
# core/catalog.py  —  Product-catalog tools
# =============================================================================
#
#   get_pricing         → competitor prices            (show 50)
#   get_search_terms    → tracked keywords              (show 50)
#   get_title_analysis  → title quality + suggestions   (show 30)
#   get_google_ads      → Ads performance per product   (show 50)
#
# These endpoints have no fixed row schema, so rows are rendered as a plain
# "key: value" listing.  Title analysis rows are long (suggestions, missing
# keywords), hence the smaller cap.
# =============================================================================

from typing import Any

from core.api_client import AnalyticsApiClient
from core.arguments import Arguments, account_prefix, no_data, project_number
from core.formatting import render_fields, truncation_notice
from core.models import RowSet, ToolResult

PRICING_KEYS = ("data", "pricing_data", "results")
SEARCH_TERM_KEYS = ("data", "search_terms", "keywords")
TITLE_ANALYSIS_KEYS = ("data", "title_analysis", "titles")
GOOGLE_ADS_KEYS = ("data", "products", "results")

UNDER_DEVELOPMENT = "This endpoint may still be under development."


def render_rows(rowset: RowSet, heading: str, count_label: str, display_limit: int) -> str:
    text = f"## {heading}\n"
    filters = rowset.filter_description()
    if filters:
        text += f"Filters: {filters}\n"
    text += f"{count_label}: {len(rowset.rows)}\n\n"

    for row in rowset.rows[:display_limit]:
        if isinstance(row, dict):
            text += render_fields(row) + "\n"
        else:
            text += f"• {row}\n"
    text += truncation_notice(len(rowset.rows), display_limit)
    return text


async def handle_get_pricing(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)
    params = {
        "search_term": args.get("search_term"),
        "company": args.get("company"),
        "device": args.get("device"),
    }

    data = await client.get_pricing(prefix, project, params)
    rowset = RowSet.from_payload(data, PRICING_KEYS)
    if not rowset.rows:
        return no_data("pricing data", project, rowset, UNDER_DEVELOPMENT, params)
    return ToolResult.text(render_rows(rowset, f"Pricing Data — Project {project}", "Results", 50))


async def handle_get_search_terms(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)

    data = await client.get_search_terms(prefix, project)
    rowset = RowSet.from_payload(data, SEARCH_TERM_KEYS)
    if not rowset.rows:
        return no_data("search terms data", project, rowset, UNDER_DEVELOPMENT)
    return ToolResult.text(render_rows(rowset, f"Search Terms — Project {project}", "Total keywords", 50))


async def handle_get_title_analysis(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)

    data = await client.get_title_analysis(prefix, project)
    rowset = RowSet.from_payload(data, TITLE_ANALYSIS_KEYS)
    if not rowset.rows:
        return no_data("title analysis data", project, rowset, UNDER_DEVELOPMENT)
    return ToolResult.text(render_rows(rowset, f"Title Analysis — Project {project}", "Titles analyzed", 30))


def _ads_unavailable(data: Any) -> bool:
    return isinstance(data, dict) and data.get("google_ads_available") is False


async def handle_get_google_ads(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)
    params = {"search_term": args.get("search_term")}

    data = await client.get_google_ads(prefix, project, params)
    rowset = RowSet.from_payload(data, GOOGLE_ADS_KEYS)
    if not rowset.rows:
        if _ads_unavailable(data):
            rowset.message = "Google Ads integration is not set up for this project."
        return no_data("Google Ads data", project, rowset, UNDER_DEVELOPMENT, params)
    return ToolResult.text(render_rows(rowset, f"Google Ads Data — Project {project}", "Products", 50))
