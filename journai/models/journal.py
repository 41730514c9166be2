from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from journai.db.session import Base
from journai.models.mood import Mood


class JournalEntry(Base):
    __tablename__ = "journal"

    journal_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255))
    content: Mapped[Optional[str]] = mapped_column(Text)
    mood: Mapped[Mood] = mapped_column(
        Enum(Mood, name="journal_mood", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Mood.NEUTRAL,
    )
    summary: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), index=True
    )

    def __repr__(self) -> str:
        return f"<JournalEntry id={self.journal_id} user={self.user_id} mood={self.mood}>"
