"""
Utility helpers for formatting numbers and ISO dates for display.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def parse_iso_date(value: Optional[str]) -> Optional[dt.date]:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def format_date(value: Optional[str], fmt: str = "%d %b %Y") -> str:
    """Render an ISO ``YYYY-MM-DD`` string; unparseable values are shown as-is."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return value or "–"
    return parsed.strftime(fmt)
