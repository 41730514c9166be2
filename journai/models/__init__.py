from journai.models.journal import JournalEntry
from journai.models.mood import DEFAULT_MOOD, Mood

__all__ = ["DEFAULT_MOOD", "JournalEntry", "Mood"]
