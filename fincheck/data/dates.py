"""
Indonesian registration-date parsing ("23 Desember 2021" → "2021-12-23").
"""
from __future__ import annotations

from fincheck.config import MONTHS_ID


def parse_indo_date(text) -> str | None:
    """Parse "<day> <month-name> <year>" into a "YYYY-MM-DD" string.

    Commas are dropped and matching is case-insensitive. Returns None when
    the text is empty, has fewer than three tokens, or names an unknown month.
    The day is zero-padded but not range-checked, so "35 Januari 2021"
    becomes "2021-01-35".
    """
    if not text or not isinstance(text, str):
        return None

    parts = text.lower().replace(",", "").split()
    if len(parts) < 3:
        return None

    day, month_name, year = parts[0], parts[1], parts[2]
    mm = MONTHS_ID.get(month_name)
    if mm is None:
        return None
    return f"{year}-{mm}-{day.zfill(2)}"
