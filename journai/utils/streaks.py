"""Consecutive-day writing streaks."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, NamedTuple, Optional

from journai.utils.date_utils import to_calendar_date

_ONE_DAY = timedelta(days=1)


class StreakSummary(NamedTuple):
    current_streak: int
    longest_streak: int


def compute_streaks(timestamps: Iterable, today: Optional[date] = None) -> StreakSummary:
    """Return the current and longest runs of consecutive days with an entry.

    Timestamps are truncated to calendar dates first, so several entries on
    the same day count once. The current streak is anchored on ``today``
    (defaults to the local date) and is 0 when nothing was written today.
    """
    days = sorted({d for d in (to_calendar_date(ts) for ts in timestamps) if d is not None})
    if not days:
        return StreakSummary(0, 0)

    longest = 0
    run = 1
    for prev, cur in zip(days, days[1:]):
        if prev + _ONE_DAY == cur:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    today = today or date.today()
    present = set(days)
    current = 0
    if today in present:
        current = 1
        while today - timedelta(days=current) in present:
            current += 1

    return StreakSummary(current, longest)
