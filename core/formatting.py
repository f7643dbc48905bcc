# =============================================================================
# core/formatting.py  —  Text-rendering primitives shared by all handlers
# =============================================================================
#
# Tool output is read by an LLM, so everything here returns plain strings
# (markdown-ish, no tables).  The numeric helpers are tolerant: the backend
# sometimes sends prices as "$1,200.50" and metrics as strings, and a value
# that can't be parsed simply renders as nothing rather than raising.
# =============================================================================

import math
from typing import Any, Iterable, Optional

TREND_UP = "↑"
TREND_DOWN = "↓"
TREND_FLAT = "→"


def parse_number(value: Any) -> Optional[float]:
    """Coerce a JSON scalar to a finite float.

    Accepts ints, floats and numeric strings with currency decoration
    ("$158.00", "$1,200.50").  NaN, infinities, underscore-grouped
    literals and anything else return None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = value.replace("$", "").replace(",", "").strip()
        if not cleaned or "_" in cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def format_percent(fraction: Any) -> str:
    """0.1534 → '15.3%'.  Unparseable input → 'N/A'."""
    number = parse_number(fraction)
    if number is None:
        return "N/A"
    return f"{number * 100:.1f}%"


def format_currency(value: Any) -> Optional[str]:
    number = parse_number(value)
    if number is None:
        return None
    return f"${number:,.2f}"


def format_number(value: Any) -> str:
    """Render a metric compactly: integers without decimals, floats to 2 places."""
    number = parse_number(value)
    if number is None:
        return str(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}"


def trend(current: Any, previous: Any) -> str:
    """Percentage change from previous to current, with an arrow.

    (110, 100) → '↑10.0%', (90, 100) → '↓10.0%'.  Empty string when the
    previous value is zero or either side can't be parsed.
    """
    cur = parse_number(current)
    prev = parse_number(previous)
    if cur is None or prev is None or prev == 0:
        return ""

    change = (cur - prev) / prev * 100
    magnitude = f"{abs(change):.1f}"
    if magnitude == "0.0":
        return f"{TREND_FLAT}0.0%"
    arrow = TREND_UP if change > 0 else TREND_DOWN
    return f"{arrow}{magnitude}%"


def extract_date(value: Any) -> Optional[str]:
    """Dates come either as '2025-07-01' or as {'value': '2025-07-01'}."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        inner = value.get("value")
        if isinstance(inner, str) and inner:
            return inner
    return None


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def _render_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(_render_value(item) for item in value)
    if isinstance(value, dict) and "value" in value and len(value) == 1:
        return str(value["value"])
    return str(value)


def render_fields(row: dict[str, Any], skip: Iterable[str] = (), indent: str = "  ") -> str:
    """Labelled key/value listing of a row, one field per line.

    None and empty-string values are left out.
    """
    skipped = set(skip)
    lines = []
    for key, value in row.items():
        if key in skipped or is_blank(value):
            continue
        lines.append(f"{indent}{key}: {_render_value(value)}\n")
    return "".join(lines)


def format_history(
    entries: Any,
    limit: int,
    value_keys: tuple[str, ...],
    as_percent: bool = False,
) -> str:
    """Compact 'date: value → date: value' rendering of the last `limit` points."""
    if not isinstance(entries, list) or not entries:
        return ""

    parts = []
    for entry in entries[-limit:]:
        if isinstance(entry, dict):
            label = extract_date(entry.get("date"))
            value = next((entry[k] for k in value_keys if not is_blank(entry.get(k))), None)
        else:
            label, value = None, entry
        if is_blank(value):
            continue
        rendered = format_percent(value) if as_percent else format_number(value)
        parts.append(f"{label}: {rendered}" if label else rendered)
    return " → ".join(parts)


def truncation_notice(total: int, shown: int, noun: str = "rows") -> str:
    if total <= shown:
        return ""
    return f"\n... and {total - shown} more {noun} (showing first {shown}).\n"


def filter_echo(filters: dict[str, Any]) -> str:
    """' (search term: "leggings") (source: "Nike")' for every given filter."""
    labels = {
        "q": "search term",
        "search_term": "search term",
        "source": "source",
        "company": "company",
        "device": "device",
        "location": "location",
        "date_from": "from",
        "date_to": "to",
    }
    return "".join(
        f' ({labels.get(key, key)}: "{value}")' for key, value in filters.items() if not is_blank(value)
    )


def first_present(row: dict[str, Any], *keys: str) -> Any:
    """Value of the first key that holds something, else None."""
    for key in keys:
        if not is_blank(row.get(key)):
            return row[key]
    return None
