# crud/journal_entry.py
from typing import Optional, List
from uuid import UUID
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import desc

from app.models.journal_entry import JournalEntry


class CRUDJournalEntry:
    """CRUD operations for JournalEntry model."""

    def get_by_user_and_date(
        self, db: Session, *, user_id: UUID, day: date
    ) -> Optional[JournalEntry]:
        return (
            db.query(JournalEntry)
            .filter(JournalEntry.user_id == user_id, JournalEntry.date == day)
            .first()
        )

    def get_multi_by_user(
        self, db: Session, *, user_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[JournalEntry]:
        """Get a user's entries, most recent date first."""
        return (
            db.query(JournalEntry)
            .filter(JournalEntry.user_id == user_id)
            .order_by(desc(JournalEntry.date))
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create(
        self, db: Session, *, user_id: UUID, day: date, reflection: str, goals: str
    ) -> JournalEntry:
        db_obj = JournalEntry(user_id=user_id, date=day, reflection=reflection, goals=goals)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: JournalEntry, reflection: str, goals: str
    ) -> JournalEntry:
        db_obj.reflection = reflection
        db_obj.goals = goals
        db_obj.updated_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: JournalEntry) -> JournalEntry:
        db.delete(db_obj)
        db.commit()
        return db_obj


# Create singleton instance
crud_journal_entry = CRUDJournalEntry()
