import os
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

os.environ.setdefault("DB_URL", "sqlite://")

from journai.db.session import Base  # noqa: E402
from journai.models import Mood  # noqa: E402

TODAY = date(2025, 3, 12)  # a Wednesday


@dataclass
class FakeEntry:
    """Minimal stand-in for a stored journal entry."""
    content: Optional[str]
    mood: Optional[Mood]
    created_at: datetime


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_entry():
    def _make(content="", mood=Mood.NEUTRAL, day=TODAY, at=time(9, 0)):
        return FakeEntry(content=content, mood=mood, created_at=datetime.combine(day, at))

    return _make


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
