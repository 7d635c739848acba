# services/reset_routine.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.crud.reset_routine import crud_reset_routine
from app.data.routine_repository import ROUTINE_REPOSITORY, get_catalog_entry
from app.models.reset_routine import ResetRoutine
from app.models.user_auth import UserAuth
from app.schemas.reset_routine import ResetRoutineRead, ResetRoutineList
from app.services import analysis

logger = logging.getLogger(__name__)


class ResetRoutineService:
    """Service layer for reset routines seeded from the catalog."""

    def __init__(self):
        self.crud = crud_reset_routine

    def get_or_create_routines(self, db: Session, requesting_user: UserAuth) -> List[ResetRoutine]:
        """Get the user's routines, seeding them from the catalog on first use."""
        routines = self.crud.get_multi_by_user(db, user_id=requesting_user.id)
        if routines:
            return routines

        logger.info("Seeding reset routines for user %s", requesting_user.id)
        try:
            self.crud.create_many(db, user_id=requesting_user.id, entries=ROUTINE_REPOSITORY)
        except IntegrityError:
            # Another request seeded first; its rows are the ones to use.
            db.rollback()
            logger.info("Routines for user %s were seeded concurrently", requesting_user.id)
        return self.crud.get_multi_by_user(db, user_id=requesting_user.id)

    def to_read(self, routine: ResetRoutine) -> ResetRoutineRead:
        result = ResetRoutineRead.model_validate(routine, from_attributes=True)
        result.description = get_catalog_entry(routine.category)["description"]
        return result

    def summarize(self, routines: List[ResetRoutine]) -> ResetRoutineList:
        return ResetRoutineList(
            routines=[self.to_read(routine) for routine in routines],
            completed_count=sum(1 for routine in routines if routine.completed),
            total_effect=analysis.routine_effect(routines),
        )

    def complete_routine(
        self, db: Session, routine_id: UUID, requesting_user: UserAuth
    ) -> ResetRoutine:
        """
        Raises:
            NotFoundError: If the routine does not belong to the user
            ConflictError: If it was already completed
        """
        routine = self.crud.get_for_user(db, id=routine_id, user_id=requesting_user.id)
        if not routine:
            raise NotFoundError("Routine not found")
        if routine.completed:
            raise ConflictError("Routine already completed")

        routine = self.crud.mark_completed(db, db_obj=routine)
        logger.info("Routine %s completed by user %s", routine.id, requesting_user.id)
        return routine

    def reset_routines(self, db: Session, requesting_user: UserAuth) -> List[ResetRoutine]:
        self.crud.reset_all(db, user_id=requesting_user.id)
        return self.get_or_create_routines(db, requesting_user)


reset_routine_service = ResetRoutineService()
