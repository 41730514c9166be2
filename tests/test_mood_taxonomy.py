"""Tests for the closed mood set and its string mapping."""

import pytest

from journai.models import Mood
from journai.utils.enums_mapping import MOOD_LOOKUP, mood_label, normalize_mood


class TestNormalizeMood:
    @pytest.mark.parametrize("raw", ["happy", "HAPPY", "Happy", "  happy \n"])
    def test_case_and_whitespace_insensitive(self, raw):
        assert normalize_mood(raw) is Mood.HAPPY

    @pytest.mark.parametrize("raw", ["", "   ", None, "joyful", "happy!", "ecstatic", "héureux", 42])
    def test_unknown_input_is_neutral(self, raw):
        assert normalize_mood(raw) is Mood.NEUTRAL

    def test_every_label_round_trips(self):
        for label, mood in MOOD_LOOKUP.items():
            assert normalize_mood(label) is mood
            assert mood_label(mood) == label

    def test_enum_passes_through(self):
        assert normalize_mood(Mood.TIRED) is Mood.TIRED


class TestMoodSet:
    def test_exactly_twelve_moods(self):
        assert len(Mood) == 12
        assert set(MOOD_LOOKUP.values()) == set(Mood)

    def test_label_of_missing_mood_is_neutral(self):
        assert mood_label(None) == "neutral"
