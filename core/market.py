# =============================================================================
# core/market.py  —  Market share & market overview tools
# =============================================================================
#
#   get_market_share     → company-level share of visible SERP results,
#                          7-day value vs. the previous 7 days
#   get_market_overview  → market-wide daily aggregates, grouped by date
#
# Both endpoints answer {data: [...], filters_applied: {...}, total_results}.
# Shares arrive as fractions (0.42) and are rendered as percentages (42.0%).
# =============================================================================

from typing import Any

from core.api_client import AnalyticsApiClient
from core.arguments import Arguments, account_prefix, no_data, project_number
from core.formatting import (
    extract_date,
    first_present,
    format_history,
    format_number,
    format_percent,
    is_blank,
    render_fields,
    trend,
    truncation_notice,
)
from core.models import RowSet, ToolResult

MARKET_SHARE_KEYS = ("data", "market_share", "results")
MARKET_OVERVIEW_KEYS = ("data", "market_overview", "results")

MARKET_SHARE_DISPLAY_LIMIT = 50
OVERVIEW_DATE_LIMIT = 14
OVERVIEW_ROW_LIMIT = 60
SHARE_HISTORY_POINTS = 7

NOT_PROCESSED = "The data may not have been processed yet."


def _header(rowset: RowSet, title: str, total_label: str) -> str:
    text = f"## {title}\n"
    filters = rowset.filter_description()
    if filters:
        text += f"Filters: {filters}\n"
    text += f"{total_label}: {rowset.total_results}\n\n"
    return text


# -----------------------------------------------------------------------------
# get_market_share
# -----------------------------------------------------------------------------
def _metric_line(label: str, current: Any, previous: Any, percent: bool) -> str:
    render = format_percent if percent else format_number
    line = f"  {label}: {render(current)}"
    arrow = trend(current, previous)
    if arrow:
        line += f" {arrow}"
    if not is_blank(previous):
        line += f" (prev {render(previous)})"
    return line + "\n"


def format_market_share_row(row: dict[str, Any]) -> str:
    text = f"**{first_present(row, 'source', 'company') or 'Unknown'}**"
    if row.get("q"):
        text += f' | "{row["q"]}"'
    if row.get("device"):
        text += f" | {row['device']}"
    if row.get("location"):
        text += f" | {row['location']}"
    text += "\n"

    share = first_present(row, "7d_market_share", "market_share")
    if share is not None:
        prev_share = first_present(row, "7d_prev_market_share", "prev_market_share")
        text += _metric_line("Market Share (7d)", share, prev_share, percent=True)

    rank = first_present(row, "7d_avg_rank", "avg_rank")
    if rank is not None:
        text += _metric_line("Avg Rank", rank, first_present(row, "7d_prev_avg_rank", "prev_avg_rank"), percent=False)

    visibility = first_present(row, "7d_visibility", "visibility")
    if visibility is not None:
        prev_visibility = first_present(row, "7d_prev_visibility", "prev_visibility")
        text += _metric_line("Visibility", visibility, prev_visibility, percent=False)

    products = first_present(row, "product_count", "products")
    if products is not None:
        text += f"  Products: {products}\n"

    date = extract_date(row.get("date"))
    if date:
        text += f"  Date: {date}\n"

    history = format_history(
        row.get("recent_history"),
        SHARE_HISTORY_POINTS,
        ("market_share", "7d_market_share", "value"),
        as_percent=True,
    )
    if history:
        text += f"  Recent: {history}\n"
    return text + "\n"


async def handle_get_market_share(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)
    params = {
        "source": args.get("source"),
        "q": args.get("q"),
        "device": args.get("device"),
    }

    data = await client.get_market_share(prefix, project, params)
    rowset = RowSet.from_payload(data, MARKET_SHARE_KEYS)
    if not rowset.rows:
        return no_data("market share data", project, rowset, NOT_PROCESSED, params)

    text = _header(rowset, f"Market Share Data — Project {project}", "Total results")
    for row in rowset.rows[:MARKET_SHARE_DISPLAY_LIMIT]:
        text += format_market_share_row(row)
    text += truncation_notice(len(rowset.rows), MARKET_SHARE_DISPLAY_LIMIT)
    return ToolResult.text(text)


# -----------------------------------------------------------------------------
# get_market_overview
# -----------------------------------------------------------------------------
UNKNOWN_DATE = "Unknown date"
OVERVIEW_LABEL_KEYS = ("date", "q", "device", "location")


def group_by_date(rows: list[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """Bucket rows by date, keeping the order in which dates first appear."""
    buckets: dict[str, list[dict[str, Any]]] = {}
    for row in rows:
        date = extract_date(row.get("date")) or UNKNOWN_DATE
        buckets.setdefault(date, []).append(row)
    return buckets


def format_overview_row(row: dict[str, Any]) -> str:
    parts = []
    if row.get("q"):
        parts.append(f'"{row["q"]}"')
    for key in ("device", "location"):
        if row.get(key):
            parts.append(str(row[key]))
    text = f"- {' | '.join(parts) or 'All searches'}\n"
    return text + render_fields(row, skip=OVERVIEW_LABEL_KEYS, indent="    ")


async def handle_get_market_overview(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    project = project_number(args)
    params = {
        "q": args.get("q"),
        "device": args.get("device"),
    }

    data = await client.get_market_overview(prefix, project, params)
    rowset = RowSet.from_payload(data, MARKET_OVERVIEW_KEYS)
    if not rowset.rows:
        return no_data("market overview data", project, rowset, NOT_PROCESSED, params)

    buckets = group_by_date(rowset.rows)
    shown = list(buckets.items())[:OVERVIEW_DATE_LIMIT]

    text = _header(rowset, f"Market Overview — Project {project}", "Total data points")
    rendered = 0
    for date, rows in shown:
        if rendered >= OVERVIEW_ROW_LIMIT:
            break
        text += f"### {date}\n"
        for row in rows[: OVERVIEW_ROW_LIMIT - rendered]:
            text += format_overview_row(row)
            rendered += 1
        text += "\n"

    # rows past the cap, counted within the dates that made the cut
    text += truncation_notice(sum(len(rows) for _, rows in shown), rendered)
    omitted = len(buckets) - len(shown)
    if omitted > 0:
        text += f"... and {omitted} more date(s) not shown.\n"
    return ToolResult.text(text)
