from __future__ import annotations

from typing import Any, Dict, Optional

from journai.models.mood import DEFAULT_MOOD, Mood

MOOD_LOOKUP: Dict[str, Mood] = {
    "happy": Mood.HAPPY,
    "sad": Mood.SAD,
    "anxious": Mood.ANXIOUS,
    "excited": Mood.EXCITED,
    "angry": Mood.ANGRY,
    "peaceful": Mood.PEACEFUL,
    "grateful": Mood.GRATEFUL,
    "frustrated": Mood.FRUSTRATED,
    "worried": Mood.WORRIED,
    "content": Mood.CONTENT,
    "neutral": Mood.NEUTRAL,
    "tired": Mood.TIRED,
}

MOOD_LABELS: Dict[Mood, str] = {mood: label for label, mood in MOOD_LOOKUP.items()}


def normalize_mood(raw: Any) -> Mood:
    """Map free text onto the closed mood set; anything unknown is neutral."""
    if isinstance(raw, Mood):
        return raw
    if not isinstance(raw, str):
        return DEFAULT_MOOD
    return MOOD_LOOKUP.get(raw.strip().lower(), DEFAULT_MOOD)


def mood_label(mood: Optional[Mood]) -> str:
    if mood is None:
        return MOOD_LABELS[DEFAULT_MOOD]
    return MOOD_LABELS[normalize_mood(mood)]
