from __future__ import annotations

from enum import Enum as PyEnum


class Mood(str, PyEnum):
    HAPPY = "happy"
    SAD = "sad"
    ANXIOUS = "anxious"
    EXCITED = "excited"
    ANGRY = "angry"
    PEACEFUL = "peaceful"
    GRATEFUL = "grateful"
    FRUSTRATED = "frustrated"
    WORRIED = "worried"
    CONTENT = "content"
    NEUTRAL = "neutral"
    TIRED = "tired"


DEFAULT_MOOD = Mood.NEUTRAL
