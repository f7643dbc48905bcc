# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# between the analytics API and the MCP layer.  None of them is persisted:
# each one lives for the duration of a single tool call, except the tool
# descriptors which are built once at import time.
#
# THE RESPONSE BOUNDARY:
#   The backend returns untyped JSON.  Depending on the endpoint, rows live
#   under "data", under a domain key ("pricing_data", "products", ...), or
#   under a generic fallback.  RowSet.from_payload() probes an ordered list
#   of candidate keys ONCE, so the formatting code only ever sees a list.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# ToolDescriptor — what the MCP layer advertises for one tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON-Schema arguments of one tool."""

    name: str                          # Stable identifier, e.g. "get_rankings"
    description: str                   # Read by the LLM to decide WHEN to call it
    input_schema: dict[str, Any]       # {"type": "object", "properties": ..., "required": [...]}

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    @property
    def parameters(self) -> list[str]:
        return list(self.input_schema.get("properties", {}))


# -----------------------------------------------------------------------------
# ToolResult — what every handler (and the dispatcher) returns
# -----------------------------------------------------------------------------
@dataclass
class ToolResult:
    """A list of text blocks plus an error flag.

    is_error stays None for normal results (including "no data found") and
    is only set to True on the dispatcher's failure paths.
    """

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: Optional[bool] = None

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}], is_error=True)

    @property
    def joined_text(self) -> str:
        """All text blocks joined into one string."""
        return "\n".join(block["text"] for block in self.content if block.get("type") == "text")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the MCP CallToolResult wire shape."""
        result: dict[str, Any] = {"content": [dict(block) for block in self.content]}
        if self.is_error is not None:
            result["isError"] = self.is_error
        return result


# -----------------------------------------------------------------------------
# RowSet — one API response, reduced to the rows the formatter needs
# -----------------------------------------------------------------------------
@dataclass
class RowSet:
    """Rows extracted from an API payload plus the metadata around them."""

    rows: list[Any] = field(default_factory=list)
    total_results: Optional[int] = None
    filters_applied: dict[str, Any] = field(default_factory=dict)
    message: Optional[str] = None
    raw: Any = None

    @classmethod
    def from_payload(cls, payload: Any, keys: tuple[str, ...]) -> "RowSet":
        """Build a RowSet by trying each candidate key in order.

        The first key that is present with a list value wins.  A payload that
        is itself a list is taken as the rows.
        """
        if isinstance(payload, list):
            return cls(rows=payload, total_results=len(payload), raw=payload)
        if not isinstance(payload, dict):
            return cls(raw=payload)

        rows: list[Any] = []
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                rows = value
                break

        filters = payload.get("filters_applied")
        total = payload.get("total_results")
        return cls(
            rows=rows,
            total_results=total if isinstance(total, int) else len(rows),
            filters_applied=filters if isinstance(filters, dict) else {},
            message=payload.get("message") or None,
            raw=payload,
        )

    def __len__(self) -> int:
        return len(self.rows)

    def filter_description(self) -> str:
        """'q=leggings, device=mobile' for every truthy applied filter."""
        return ", ".join(f"{k}={v}" for k, v in self.filters_applied.items() if v)
