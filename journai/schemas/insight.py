"""Pydantic schemas for the journal insights report."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MoodShare(BaseModel):
    """How often one mood occurs in the window."""
    mood: str
    count: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)


class WordCountPoint(BaseModel):
    """Words and entries written on one calendar day."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    word_count: int = Field(alias="wordCount", ge=0)
    entry_count: int = Field(alias="entryCount", ge=0)


class WeekdayActivity(BaseModel):
    day: str
    entries: int = Field(ge=0, default=0)


class InsightReport(BaseModel):
    """Aggregated statistics for one user's entries over a time window."""
    model_config = ConfigDict(populate_by_name=True)

    total_entries: int = Field(alias="totalEntries", ge=0, default=0)
    total_words: int = Field(alias="totalWords", ge=0, default=0)
    average_words_per_entry: int = Field(alias="averageWordsPerEntry", ge=0, default=0)
    current_streak: int = Field(alias="currentStreak", ge=0, default=0)
    longest_streak: int = Field(alias="longestStreak", ge=0, default=0)
    mood_distribution: List[MoodShare] = Field(alias="moodDistribution", default_factory=list)
    word_count_trend: List[WordCountPoint] = Field(alias="wordCountTrend", default_factory=list)
    weekly_activity: List[WeekdayActivity] = Field(alias="weeklyActivity", default_factory=list)
