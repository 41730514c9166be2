from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Tuple

WEEKDAY_LABELS: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

TIME_RANGE_DAYS: Dict[str, int] = {
    "week": 7,
    "month": 30,
    "quarter": 90,
    "year": 365,
}
DEFAULT_RANGE_DAYS = TIME_RANGE_DAYS["month"]


def to_calendar_date(value: Any) -> Optional[date]:
    """Truncate a datetime (or ISO string) to its calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def weekday_label(d: date) -> str:
    """Three-letter English weekday, Monday first (ISO-8601)."""
    return WEEKDAY_LABELS[d.weekday()]


def resolve_time_range(
    time_range: Optional[str], now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """Turn a range keyword into a concrete [start, end] window ending at ``now``.

    - week: last 7 days
    - quarter: last 90 days
    - year: last 365 days
    - month (default, also any unknown key): last 30 days
    """
    end_dt = now or datetime.now()
    key = (time_range or "month").strip().lower()
    days = TIME_RANGE_DAYS.get(key, DEFAULT_RANGE_DAYS)
    return end_dt - timedelta(days=days), end_dt


def month_range(month: str) -> Tuple[datetime, datetime]:
    """First and last instant of a ``YYYY-MM`` month; raises ValueError on bad input."""
    first = datetime.strptime(month.strip(), "%Y-%m")
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    last_day = next_first - timedelta(days=1)
    return first, last_day.replace(hour=23, minute=59, second=59, microsecond=999999)
