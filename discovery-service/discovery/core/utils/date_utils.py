# date_utils.py — Centralized date-safe and number-safe utilities
#
# Keeps sorting and aggregation total when upstream records carry corrupted
# values (None, "", bool, list, "invalid", ...).
# Used across content_schema.py, sort_selector.py, statistics.py.

import math
from datetime import date, datetime, timezone
from typing import Any, Optional


def safe_timestamp(value: Any) -> Optional[float]:
    """
    Convert a raw date value to a POSIX timestamp.

    Accepts ISO-8601 strings ("2024-01-01", "2024-01-01T10:00:00Z"),
    datetime and date objects. Naive values are read as UTC, the same way
    a browser reads a bare "YYYY-MM-DD" date.

    Returns:
        float timestamp, or None when the value cannot be interpreted
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only learned the "Z" suffix in 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


def safe_number(value: Any) -> Optional[float]:
    """
    Convert a raw numeric field (reading time, score, ...) to float.

    bool is rejected explicitly: True would otherwise sort as 1.
    NaN is treated as missing so it can never poison a comparison.
    """
    if isinstance(value, bool) or value is None:
        return None

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None

    if math.isnan(number):
        return None
    return number


def safe_count(value: Any) -> int:
    """Non-negative integer metric (stars, forks). Missing or invalid -> 0."""
    number = safe_number(value)
    if number is None or number < 0 or math.isinf(number):
        return 0
    return int(number)
