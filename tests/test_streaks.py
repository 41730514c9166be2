"""
Tests for consecutive-day writing streaks.

Run with: python -m pytest tests/test_streaks.py -v
"""

from datetime import date, datetime, timedelta

TODAY = date(2025, 3, 12)


def _at(d: date, hour: int = 9) -> datetime:
    return datetime(d.year, d.month, d.day, hour)


def _days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


class TestComputeStreaks:
    """Tests for current and longest streak computation."""

    def test_empty(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        assert compute_streaks([], today=TODAY) == StreakSummary(0, 0)

    def test_three_days_ending_today(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        stamps = [_at(_days_ago(2)), _at(_days_ago(1)), _at(TODAY)]
        assert compute_streaks(stamps, today=TODAY) == StreakSummary(current_streak=3, longest_streak=3)

    def test_gap_breaks_current_streak(self):
        """D, D+1, D+3 with today = D+3."""
        from journai.utils.streaks import StreakSummary, compute_streaks

        stamps = [_at(_days_ago(3)), _at(_days_ago(2)), _at(TODAY)]
        assert compute_streaks(stamps, today=TODAY) == StreakSummary(current_streak=1, longest_streak=2)

    def test_same_day_counts_once(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        stamps = [_at(TODAY, 7), _at(TODAY, 12), _at(TODAY, 23)]
        assert compute_streaks(stamps, today=TODAY) == StreakSummary(1, 1)

    def test_single_entry_not_today(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        assert compute_streaks([_at(_days_ago(4))], today=TODAY) == StreakSummary(0, 1)

    def test_no_entry_today_means_no_current_streak(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        stamps = [_at(_days_ago(n)) for n in range(1, 6)]
        assert compute_streaks(stamps, today=TODAY) == StreakSummary(0, 5)

    def test_longest_run_in_the_middle(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        run = [_at(_days_ago(n)) for n in range(10, 16)]  # six days
        recent = [_at(_days_ago(1)), _at(TODAY)]
        assert compute_streaks(recent + run, today=TODAY) == StreakSummary(2, 6)

    def test_unsorted_input_and_plain_dates(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        stamps = [TODAY, _days_ago(2), _days_ago(1)]
        assert compute_streaks(stamps, today=TODAY) == StreakSummary(3, 3)

    def test_month_boundary(self):
        from journai.utils.streaks import StreakSummary, compute_streaks

        today = date(2025, 3, 1)
        stamps = [datetime(2025, 2, 27, 8), datetime(2025, 2, 28, 8), datetime(2025, 3, 1, 8)]
        assert compute_streaks(stamps, today=today) == StreakSummary(3, 3)
