"""Pagination — page/limit parsing and the {data, meta} list envelope.

Invariants:
    - page and limit are always >= 1 once parsed
    - offset == (page - 1) * limit
    - meta.total counts every visible row, independent of the current page
    - HTTP query values outside 1..MAX_PAGE / 1..MAX_LIMIT are rejected with 400
      by the routes; the controller only fills in absent values
"""

from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25

# (MAX_PAGE - 1) * MAX_LIMIT stays inside a signed 64-bit OFFSET
MAX_PAGE = 1_000_000
MAX_LIMIT = 1_000


def parse_positive_int(raw: Any, default: int) -> int:
    """Absent (or non-numeric, < 1) values fall back to default."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def build_page(data: list[dict], total: int, page: int, limit: int) -> dict:
    """Wrap one page of projected rows in the pagination envelope."""
    return {
        "data": data,
        "meta": {"total": total, "page": page, "limit": limit},
    }
