from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from journai.models.mood import Mood


class AnalysisResult(BaseModel):
    """Mood, one-line summary and reasoning extracted from a model reply."""
    model_config = ConfigDict(frozen=True)

    mood: Mood = Mood.NEUTRAL
    summary: str = ""
    reason: str = ""
