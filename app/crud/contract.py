# crud/contract.py
from typing import Optional, List
from uuid import UUID
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import desc

from app.models.contract import WordToSelfContract, ContractStatus
from app.schemas.contract import ContractCreate


class CRUDContract:
    """CRUD operations for WordToSelfContract model."""

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, obj_in: ContractCreate, user_id: UUID) -> WordToSelfContract:
        """
        Create a new contract. Contracts start active with integrity 100.

        Args:
            db: Database session
            obj_in: ContractCreate schema
            user_id: Owner UUID

        Returns:
            Created WordToSelfContract instance
        """
        obj_data = obj_in.model_dump(exclude_unset=True)
        if not obj_data.get("start_date"):
            obj_data["start_date"] = datetime.now(timezone.utc)

        db_obj = WordToSelfContract(
            **obj_data,
            user_id=user_id,
            status=ContractStatus.active,
            integrity_score=100,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_for_user(
        self, db: Session, *, id: UUID, user_id: UUID
    ) -> Optional[WordToSelfContract]:
        return (
            db.query(WordToSelfContract)
            .filter(WordToSelfContract.id == id, WordToSelfContract.user_id == user_id)
            .first()
        )

    def get_multi_by_user(
        self, db: Session, *, user_id: UUID, status: Optional[ContractStatus] = None
    ) -> List[WordToSelfContract]:
        """Get a user's contracts, newest first, optionally filtered by status."""
        query = db.query(WordToSelfContract).filter(WordToSelfContract.user_id == user_id)
        if status is not None:
            query = query.filter(WordToSelfContract.status == status)
        return query.order_by(desc(WordToSelfContract.created_at)).all()

    # =====================================================================
    # UPDATE OPERATIONS
    # =====================================================================

    def update_status(
        self, db: Session, *, db_obj: WordToSelfContract, status: ContractStatus
    ) -> WordToSelfContract:
        db_obj.status = status
        db_obj.updated_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete(self, db: Session, *, db_obj: WordToSelfContract) -> WordToSelfContract:
        db.delete(db_obj)
        db.commit()
        return db_obj


# Create singleton instance
crud_contract = CRUDContract()
