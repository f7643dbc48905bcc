# =============================================================================
# core/arguments.py  —  Argument defaults and the shared "no data" message
# =============================================================================
#
# Every project-scoped tool accepts the same two addressing arguments:
#
#   account_prefix   default "acc1_" (most users have exactly one account)
#   project_number   default 1 (also when 0 / missing)
#
# and answers an empty result set with the same kind of sentence, so both
# live here instead of being repeated in ten handlers.
# =============================================================================

from typing import Any, Mapping, Optional

from core.formatting import filter_echo
from core.models import RowSet, ToolResult

DEFAULT_ACCOUNT_PREFIX = "acc1_"
DEFAULT_PROJECT_NUMBER = 1
DEFAULT_LIMIT = 50

Arguments = Mapping[str, Any]


def account_prefix(args: Arguments) -> str:
    return args.get("account_prefix") or DEFAULT_ACCOUNT_PREFIX


def project_number(args: Arguments) -> Any:
    number = args.get("project_number") or DEFAULT_PROJECT_NUMBER
    # JSON numbers may arrive as 2.0; the URL path wants "2"
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def limit(args: Arguments) -> str:
    value = args.get("limit") or DEFAULT_LIMIT
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def no_data(
    label: str,
    project: Any,
    rowset: RowSet,
    default_hint: str,
    filters: Optional[Mapping[str, Any]] = None,
) -> ToolResult:
    """'No <label> found for project <n> (filters). <backend message or hint>'"""
    text = f"No {label} found for project {project}"
    text += filter_echo(dict(filters or {}))
    text += f". {rowset.message or default_hint}"
    return ToolResult.text(text)
