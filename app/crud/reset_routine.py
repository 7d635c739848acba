# crud/reset_routine.py
from typing import Optional, List, Dict, Any
from uuid import UUID
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from app.models.reset_routine import ResetRoutine


class CRUDResetRoutine:
    """CRUD operations for ResetRoutine model."""

    def get_for_user(self, db: Session, *, id: UUID, user_id: UUID) -> Optional[ResetRoutine]:
        return (
            db.query(ResetRoutine)
            .filter(ResetRoutine.id == id, ResetRoutine.user_id == user_id)
            .first()
        )

    def get_multi_by_user(self, db: Session, *, user_id: UUID) -> List[ResetRoutine]:
        return (
            db.query(ResetRoutine)
            .filter(ResetRoutine.user_id == user_id)
            .order_by(ResetRoutine.duration, ResetRoutine.name)
            .all()
        )

    def create_many(
        self, db: Session, *, user_id: UUID, entries: List[Dict[str, Any]]
    ) -> List[ResetRoutine]:
        """Create one routine per catalog entry in a single commit."""
        routines = [
            ResetRoutine(
                user_id=user_id,
                name=entry["name"],
                category=entry["category"],
                duration=entry["duration"],
                dopamine_reduction=entry["dopamine_reduction"],
                completed=False,
            )
            for entry in entries
        ]
        db.add_all(routines)
        db.commit()
        for routine in routines:
            db.refresh(routine)
        return routines

    def mark_completed(self, db: Session, *, db_obj: ResetRoutine) -> ResetRoutine:
        db_obj.completed = True
        db_obj.completed_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def reset_all(self, db: Session, *, user_id: UUID) -> int:
        """Clear completion on every routine of the user. Returns rows touched."""
        count = (
            db.query(ResetRoutine)
            .filter(ResetRoutine.user_id == user_id, ResetRoutine.completed.is_(True))
            .update(
                {ResetRoutine.completed: False, ResetRoutine.completed_at: None},
                synchronize_session=False,
            )
        )
        db.commit()
        return count


# Create singleton instance
crud_reset_routine = CRUDResetRoutine()
