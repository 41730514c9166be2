from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from journai.core.config import settings
from journai.models.mood import Mood
from journai.schemas.insight import InsightReport, MoodShare, WeekdayActivity, WordCountPoint
from journai.services.journal_service import JournalService
from journai.utils.date_utils import WEEKDAY_LABELS, resolve_time_range, to_calendar_date, weekday_label
from journai.utils.enums_mapping import mood_label, normalize_mood
from journai.utils.streaks import compute_streaks
from journai.utils.text_cleaning import count_words

logger = logging.getLogger(__name__)


def round_half_up(numerator: int, denominator: int) -> int:
    if not denominator:
        return 0
    value = Decimal(numerator) / Decimal(denominator)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class _DayBucket:
    word_count: int = 0
    entry_count: int = 0


class InsightAggregator:
    @staticmethod
    def aggregate(
        entries: Iterable[Any],
        *,
        today: Optional[date] = None,
        trend_limit: Optional[int] = None,
    ) -> InsightReport:
        """Build the insights report for entries already scoped to one user and window.

        Entries only need ``content``, ``mood`` and ``created_at`` attributes.
        """
        if entries is None:
            raise TypeError("entries must be an iterable of journal entries, not None")
        limit = settings.INSIGHT_TREND_LIMIT if trend_limit is None else trend_limit

        total_entries = 0
        total_words = 0
        mood_counts: Dict[str, int] = {}
        daily: Dict[str, _DayBucket] = {}
        weekly: Dict[str, int] = {label: 0 for label in WEEKDAY_LABELS}
        timestamps: List[datetime] = []

        for entry in entries:
            total_entries += 1
            words = count_words(getattr(entry, "content", None))
            total_words += words

            label = mood_label(normalize_mood(getattr(entry, "mood", None)))
            mood_counts[label] = mood_counts.get(label, 0) + 1

            created_at = getattr(entry, "created_at", None)
            day = to_calendar_date(created_at)
            if day is None:
                continue
            timestamps.append(created_at)

            bucket = daily.setdefault(day.isoformat(), _DayBucket())
            bucket.word_count += words
            bucket.entry_count += 1
            weekly[weekday_label(day)] += 1

        streaks = compute_streaks(timestamps, today=today)

        distribution = [
            MoodShare(mood=m, count=c, percentage=round_half_up(c * 100, total_entries))
            for m, c in mood_counts.items()
        ]
        distribution.sort(key=lambda share: share.count, reverse=True)

        trend = [
            WordCountPoint(date=key, word_count=b.word_count, entry_count=b.entry_count)
            for key, b in sorted(daily.items())
        ][: max(limit, 0)]

        return InsightReport(
            total_entries=total_entries,
            total_words=total_words,
            average_words_per_entry=round_half_up(total_words, total_entries),
            current_streak=streaks.current_streak,
            longest_streak=streaks.longest_streak,
            mood_distribution=distribution,
            word_count_trend=trend,
            weekly_activity=[WeekdayActivity(day=d, entries=weekly[d]) for d in WEEKDAY_LABELS],
        )


class JournalInsightService:
    @staticmethod
    def get_journal_insights(
        db: Session,
        user_id: str,
        time_range: Optional[str] = None,
        mood: Optional[Mood] = None,
        *,
        now: Optional[datetime] = None,
    ) -> InsightReport:
        time_range = time_range or settings.DEFAULT_TIME_RANGE
        start_dt, end_dt = resolve_time_range(time_range, now=now)
        journals = JournalService.list_journals_in_range(db, user_id, start_dt, end_dt, mood=mood)
        report = InsightAggregator.aggregate(journals, today=end_dt.date())
        logger.info(
            "[insights] user=%s entries=%d range=%s mood=%s",
            user_id,
            report.total_entries,
            time_range,
            mood_label(mood) if mood is not None else "none",
        )
        return report
