# crud/dopamine_record.py
from typing import Optional, List
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy import desc

from app.models.dopamine_record import DopamineRecord
from app.schemas.dopamine_record import DopamineRecordCreate


class CRUDDopamineRecord:
    """CRUD operations for DopamineRecord model."""

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(
        self, db: Session, *, obj_in: DopamineRecordCreate, user_id: UUID, dopamine_score: int
    ) -> DopamineRecord:
        """
        Create a new record.

        Args:
            db: Database session
            obj_in: Submitted record fields
            user_id: Owner of the record
            dopamine_score: Score computed for the submitted metrics

        Returns:
            Created DopamineRecord instance
        """
        db_obj = DopamineRecord(
            **obj_in.model_dump(),
            user_id=user_id,
            dopamine_score=dopamine_score,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_for_user(self, db: Session, *, id: UUID, user_id: UUID) -> Optional[DopamineRecord]:
        """Get a record by ID, only if it belongs to the user."""
        return (
            db.query(DopamineRecord)
            .filter(DopamineRecord.id == id, DopamineRecord.user_id == user_id)
            .first()
        )

    def get_multi_by_user(
        self, db: Session, *, user_id: UUID, skip: int = 0, limit: Optional[int] = 100
    ) -> List[DopamineRecord]:
        """
        Get a user's records, newest first.

        Args:
            db: Database session
            user_id: Owner UUID
            skip: Number of records to skip
            limit: Maximum number of records to return (None for all)

        Returns:
            List of DopamineRecord instances
        """
        query = (
            db.query(DopamineRecord)
            .filter(DopamineRecord.user_id == user_id)
            .order_by(desc(DopamineRecord.created_at))
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete(self, db: Session, *, db_obj: DopamineRecord) -> DopamineRecord:
        db.delete(db_obj)
        db.commit()
        return db_obj


# Create singleton instance
crud_dopamine_record = CRUDDopamineRecord()
