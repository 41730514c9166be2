from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from journai.core.config import settings
from journai.models.journal import JournalEntry
from journai.models.mood import Mood
from journai.utils.date_utils import month_range
from journai.utils.enums_mapping import normalize_mood
from journai.utils.text_cleaning import generate_title

logger = logging.getLogger(__name__)


def _require_content(content: Optional[str]) -> str:
    if not content or not content.strip():
        raise ValueError("Journal content cannot be empty")
    return content


def _title_for(content: str, title: Optional[str]) -> str:
    return title or generate_title(content, settings.TITLE_MAX_WORDS, settings.TITLE_MAX_LENGTH)


class JournalService:
    @staticmethod
    def list_journals_in_range(
        db: Session,
        user_id: str,
        start_dt: datetime,
        end_dt: datetime,
        *,
        mood: Optional[Mood] = None,
    ) -> List[JournalEntry]:
        # Inclusive on both ends
        stmt = (
            select(JournalEntry)
            .where(JournalEntry.user_id == user_id)
            .where(JournalEntry.created_at >= start_dt, JournalEntry.created_at <= end_dt)
            .order_by(JournalEntry.created_at.asc())
        )
        if mood is not None:
            stmt = stmt.where(JournalEntry.mood == normalize_mood(mood))
        return list(db.scalars(stmt))

    @staticmethod
    def list_user_journals(
        db: Session,
        user_id: str,
        *,
        limit: int = 31,
        offset: int = 0,
        month: Optional[str] = None,
    ) -> List[JournalEntry]:
        """Newest first. A ``YYYY-MM`` month returns that whole month and ignores paging."""
        stmt = (
            select(JournalEntry)
            .where(JournalEntry.user_id == user_id)
            .order_by(JournalEntry.created_at.desc())
        )
        if month:
            start_dt, end_dt = month_range(month)
            stmt = stmt.where(JournalEntry.created_at >= start_dt, JournalEntry.created_at <= end_dt)
        else:
            stmt = stmt.offset(offset).limit(limit)
        return list(db.scalars(stmt))

    @staticmethod
    def count_user_journals(db: Session, user_id: str) -> int:
        stmt = select(func.count()).select_from(JournalEntry).where(JournalEntry.user_id == user_id)
        return int(db.scalar(stmt) or 0)

    @staticmethod
    def get_journal(db: Session, journal_id: int, user_id: str) -> Optional[JournalEntry]:
        stmt = select(JournalEntry).where(
            JournalEntry.journal_id == journal_id, JournalEntry.user_id == user_id
        )
        return db.scalars(stmt).first()

    @staticmethod
    def create_journal(
        db: Session,
        user_id: str,
        content: str,
        *,
        mood: Optional[str] = None,
        summary: Optional[str] = None,
        title: Optional[str] = None,
        created_at: Optional[datetime] = None,
        commit: bool = True,
    ) -> JournalEntry:
        content = _require_content(content)

        journal = JournalEntry(
            user_id=user_id,
            title=_title_for(content, title),
            content=content,
            mood=normalize_mood(mood),
            summary=summary,
        )
        if created_at is not None:
            journal.created_at = created_at
        db.add(journal)
        if commit:
            db.commit()
            db.refresh(journal)
        else:
            db.flush()
        logger.info("[journal] saved journal_id=%s for user=%s", journal.journal_id, user_id)
        return journal

    @staticmethod
    def update_journal(
        db: Session,
        journal_id: int,
        user_id: str,
        content: str,
        *,
        mood: Optional[str] = None,
        summary: Optional[str] = None,
        title: Optional[str] = None,
        commit: bool = True,
    ) -> Optional[JournalEntry]:
        """Replace an entry's text and analysis; the title is regenerated unless given."""
        journal = JournalService.get_journal(db, journal_id, user_id)
        if journal is None:
            return None
        content = _require_content(content)

        journal.title = _title_for(content, title)
        journal.content = content
        journal.mood = normalize_mood(mood)
        journal.summary = summary
        db.add(journal)
        if commit:
            db.commit()
            db.refresh(journal)
        else:
            db.flush()
        logger.info("[journal] updated journal_id=%s", journal_id)
        return journal

    @staticmethod
    def delete_journal(db: Session, journal_id: int, user_id: str, *, commit: bool = True) -> bool:
        journal = JournalService.get_journal(db, journal_id, user_id)
        if journal is None:
            return False
        db.delete(journal)
        if commit:
            db.commit()
        else:
            db.flush()
        logger.info("[journal] deleted journal_id=%s", journal_id)
        return True
