# =============================================================================
# core/rankings.py  —  Product ranking tool
# =============================================================================
#
#   get_rankings → GET /v1/accounts/{prefix}/projects/{num}/rankings
#
# One row per product × search term × location × device × date.  The
# backend's "limit" parameter defaults to 50 and the tool never shows more
# than 50 rows either way.  Prices may arrive as "$158.00" strings.
# =============================================================================

from typing import Any

from core.api_client import AnalyticsApiClient
from core.arguments import Arguments, account_prefix, limit, no_data, project_number
from core.formatting import (
    extract_date,
    first_present,
    format_currency,
    format_history,
    format_number,
    format_percent,
    is_blank,
    trend,
    truncation_notice,
)
from core.models import RowSet, ToolResult

RANKING_KEYS = ("data", "rankings", "results")
RANKINGS_DISPLAY_LIMIT = 50
RANKING_HISTORY_POINTS = 5

UNDER_DEVELOPMENT = "This endpoint may still be under development."


def _with_trend(rendered: str, current: Any, previous: Any, previous_rendered: str) -> str:
    arrow = trend(current, previous)
    if arrow:
        rendered += f" {arrow}"
    if not is_blank(previous):
        rendered += f" (prev {previous_rendered})"
    return rendered


def format_ranking_row(index: int, row: dict[str, Any]) -> str:
    title = first_present(row, "title", "product_title", "name") or "Untitled product"
    text = f"{index}. **{title}**\n"

    context = [str(v) for v in (first_present(row, "company", "source"),) if v]
    term = first_present(row, "search_term", "q")
    if term:
        context.append(f'"{term}"')
    for key in ("location", "device"):
        if row.get(key):
            context.append(str(row[key]))
    if context:
        text += f"   {' | '.join(context)}\n"

    position = first_present(row, "position", "rank", "avg_position")
    if position is not None:
        prev_position = first_present(row, "prev_position", "previous_position")
        line = f"Position: {format_number(position)}"
        if prev_position is not None:
            line += f" (prev {format_number(prev_position)})"
        text += f"   {line}\n"

    price = first_present(row, "price", "extracted_price")
    price_text = format_currency(price)
    if price_text:
        prev_price = first_present(row, "prev_price", "previous_price")
        text += f"   Price: {_with_trend(price_text, price, prev_price, format_currency(prev_price) or str(prev_price))}\n"

    share = row.get("market_share")
    if not is_blank(share):
        prev_share = row.get("prev_market_share")
        text += f"   Market Share: {_with_trend(format_percent(share), share, prev_share, format_percent(prev_share))}\n"

    visibility = row.get("visibility")
    if not is_blank(visibility):
        prev_visibility = row.get("prev_visibility")
        rendered = _with_trend(format_number(visibility), visibility, prev_visibility, format_number(prev_visibility))
        text += f"   Visibility: {rendered}\n"

    date = extract_date(row.get("date"))
    if date:
        text += f"   Date: {date}\n"

    history = format_history(row.get("recent_history"), RANKING_HISTORY_POINTS, ("position", "rank", "value"))
    if history:
        text += f"   History: {history}\n"
    return text + "\n"


async def handle_get_rankings(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)
    filters = {
        "search_term": args.get("search_term"),
        "location": args.get("location"),
        "device": args.get("device"),
        "company": args.get("company"),
        "date_from": args.get("date_from"),
        "date_to": args.get("date_to"),
    }
    params = {**filters, "limit": limit(args)}

    data = await client.get_rankings(prefix, project, params)
    rowset = RowSet.from_payload(data, RANKING_KEYS)
    if not rowset.rows:
        return no_data("ranking data", project, rowset, UNDER_DEVELOPMENT, filters)

    text = f"## Rankings — Project {project}\n"
    applied = rowset.filter_description()
    if applied:
        text += f"Filters: {applied}\n"
    text += f"Results: {len(rowset.rows)}\n\n"

    for index, row in enumerate(rowset.rows[:RANKINGS_DISPLAY_LIMIT], start=1):
        text += format_ranking_row(index, row)
    text += truncation_notice(len(rowset.rows), RANKINGS_DISPLAY_LIMIT)
    return ToolResult.text(text)
