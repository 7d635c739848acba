# services/journal_entry.py
import logging
from typing import List
from datetime import date
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.journal_entry import crud_journal_entry
from app.models.journal_entry import JournalEntry
from app.models.user_auth import UserAuth
from app.schemas.journal_entry import JournalEntryUpsert

logger = logging.getLogger(__name__)


class JournalEntryService:
    """Service layer for the daily reflection journal. One entry per date."""

    def __init__(self):
        self.crud = crud_journal_entry

    def upsert_entry(
        self,
        db: Session,
        entry_date: date,
        entry_data: JournalEntryUpsert,
        requesting_user: UserAuth,
    ) -> JournalEntry:
        """
        Create the entry for a date, or overwrite the existing one.

        Raises:
            ValidationError: If both reflection and goals are blank
        """
        reflection = entry_data.reflection.strip()
        goals = entry_data.goals.strip()
        if not reflection and not goals:
            raise ValidationError("Either reflection or goals must be provided")

        entry = self.crud.get_by_user_and_date(db, user_id=requesting_user.id, day=entry_date)
        if entry:
            return self.crud.update(db, db_obj=entry, reflection=reflection, goals=goals)

        entry = self.crud.create(
            db, user_id=requesting_user.id, day=entry_date, reflection=reflection, goals=goals
        )
        logger.info("Created journal entry %s for %s", entry.id, entry_date)
        return entry

    def get_entry(self, db: Session, entry_date: date, requesting_user: UserAuth) -> JournalEntry:
        entry = self.crud.get_by_user_and_date(db, user_id=requesting_user.id, day=entry_date)
        if not entry:
            raise NotFoundError(f"No journal entry for {entry_date}")
        return entry

    def list_entries(
        self, db: Session, requesting_user: UserAuth, skip: int = 0, limit: int = 100
    ) -> List[JournalEntry]:
        return self.crud.get_multi_by_user(db, user_id=requesting_user.id, skip=skip, limit=limit)

    def delete_entry(self, db: Session, entry_date: date, requesting_user: UserAuth) -> JournalEntry:
        entry = self.get_entry(db, entry_date, requesting_user)
        return self.crud.delete(db, db_obj=entry)


journal_entry_service = JournalEntryService()
