# services/dopamine_record.py
import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud.dopamine_record import crud_dopamine_record
from app.models.dopamine_record import DopamineRecord
from app.models.user_auth import UserAuth
from app.schemas.dopamine_record import DopamineRecordCreate
from app.services import analysis

logger = logging.getLogger(__name__)


class DopamineRecordService:
    """Service layer for logged dopamine records."""

    def __init__(self):
        self.crud = crud_dopamine_record

    def create_record(
        self, db: Session, record_data: DopamineRecordCreate, requesting_user: UserAuth
    ) -> DopamineRecord:
        """Store a record with its server-computed composite score."""
        dopamine_score = analysis.score(
            record_data.usage_time,
            record_data.pattern_repetition,
            record_data.stress_level,
        )
        record = self.crud.create(
            db, obj_in=record_data, user_id=requesting_user.id, dopamine_score=dopamine_score
        )
        logger.info(
            "Created record %s for user %s (score %s)", record.id, requesting_user.id, dopamine_score
        )
        return record

    def get_record(
        self, db: Session, record_id: UUID, requesting_user: UserAuth
    ) -> DopamineRecord:
        """
        Raises:
            NotFoundError: If the record does not exist or belongs to someone else
        """
        record = self.crud.get_for_user(db, id=record_id, user_id=requesting_user.id)
        if not record:
            raise NotFoundError("Record not found")
        return record

    def list_records(
        self,
        db: Session,
        requesting_user: UserAuth,
        skip: int = 0,
        limit: Optional[int] = 100,
    ) -> List[DopamineRecord]:
        return self.crud.get_multi_by_user(
            db, user_id=requesting_user.id, skip=skip, limit=limit
        )

    def delete_record(
        self, db: Session, record_id: UUID, requesting_user: UserAuth
    ) -> DopamineRecord:
        record = self.get_record(db, record_id, requesting_user)
        self.crud.delete(db, db_obj=record)
        logger.info("Deleted record %s for user %s", record_id, requesting_user.id)
        return record


dopamine_record_service = DopamineRecordService()
