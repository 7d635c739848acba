# app/api/routers/routines.py
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_auth import UserAuth
from app.schemas.reset_routine import ResetRoutineRead, ResetRoutineList
from app.services.reset_routine import reset_routine_service

router = APIRouter(prefix="/routines", tags=["Reset Routines"])


@router.get("", response_model=ResetRoutineList, summary="List my reset routines")
def list_routines(
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """The first call seeds one routine per catalog category."""
    routines = reset_routine_service.get_or_create_routines(db, current_user)
    return reset_routine_service.summarize(routines)


@router.post("/reset", response_model=ResetRoutineList, summary="Clear all completion flags")
def reset_routines(
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    routines = reset_routine_service.reset_routines(db, current_user)
    return reset_routine_service.summarize(routines)


@router.post("/{routine_id}/complete", response_model=ResetRoutineRead, summary="Complete a routine")
def complete_routine(
    routine_id: UUID,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    routine = reset_routine_service.complete_routine(db, routine_id, current_user)
    return reset_routine_service.to_read(routine)
