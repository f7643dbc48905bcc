# =============================================================================
# core/accounts.py  —  Account-level tools
# =============================================================================
#
#   list_accounts       → GET /v1/accounts
#   list_projects       → GET /v1/accounts/{prefix}/projects
#   get_scraping_stats  → GET /v1/account/scraping-stats
#
# list_accounts is the entry point of every conversation: it hands the
# agent the account prefix that all the other tools need.
# =============================================================================

from typing import Any

from core.api_client import AnalyticsApiClient
from core.arguments import Arguments, account_prefix
from core.formatting import is_blank
from core.models import RowSet, ToolResult

ACCOUNT_KEYS = ("accounts", "data")
PROJECT_KEYS = ("projects", "data")


async def handle_list_accounts(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    data = await client.list_accounts()
    accounts = RowSet.from_payload(data, ACCOUNT_KEYS).rows

    if not accounts:
        return ToolResult.text("No accounts found. Your data may still be processing.")

    text = f"Found {len(accounts)} account(s):\n\n"
    for acc in accounts:
        projects = acc.get("projects_count")
        text += f"• **{acc.get('account_name') or acc.get('account_prefix')}**\n"
        text += f"  Prefix: `{acc.get('account_prefix')}`\n"
        text += f"  Projects: {'unknown' if projects is None else projects}\n"
        text += f"  Data available: {'Yes' if acc.get('data_available') else 'Pending'}\n\n"
    text += "Use `list_projects` with an account prefix to see projects."
    return ToolResult.text(text)


def _join(values: Any) -> str:
    if isinstance(values, list):
        return ", ".join(str(v) for v in values)
    return str(values)


async def handle_list_projects(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    prefix = account_prefix(args)
    data = await client.list_projects(prefix)
    rowset = RowSet.from_payload(data, PROJECT_KEYS)

    if not rowset.rows:
        return ToolResult.text(
            f"No projects found for account `{prefix}`. "
            f"{rowset.message or 'Data may still be processing.'}"
        )

    text = f"Account `{prefix}` — {len(rowset.rows)} project(s):\n\n"
    for p in rowset.rows:
        text += f"• **Project {p.get('project_number')}**: {p.get('name') or 'Untitled'}\n"
        if p.get("country"):
            text += f"  Country: {p['country']}\n"
        for key, label in (("search_terms", "Search terms"), ("locations", "Locations"), ("devices", "Devices")):
            if p.get(key):
                text += f"  {label}: {_join(p[key])}\n"
        text += "\n"
    return ToolResult.text(text)


async def handle_get_scraping_stats(client: AnalyticsApiClient, args: Arguments) -> ToolResult:
    data = await client.get_scraping_stats()
    stats = data if isinstance(data, dict) else {}

    def value_or_na(key: str) -> Any:
        return "N/A" if stats.get(key) is None else stats[key]

    text = "## Scraping Stats\n\n"
    text += f"Scans used today: {value_or_na('scans_used_today')}\n"
    text += f"Daily limit: {value_or_na('scans_limit')}\n"
    if stats.get("scans_remaining") is not None:
        text += f"Remaining: {stats['scans_remaining']}\n"
    if stats.get("projects_active") is not None:
        text += f"Active projects: {stats['projects_active']}\n"
    if not is_blank(stats.get("last_scan_at")):
        text += f"Last scan: {stats['last_scan_at']}\n"
    if stats.get("message"):
        text += f"\nNote: {stats['message']}\n"
    return ToolResult.text(text)
