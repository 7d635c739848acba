# app/api/routers/records.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.data.labels import score_level_label
from app.models.user_auth import UserAuth
from app.schemas.analysis import ScorePreviewRequest, ScorePreviewResponse
from app.schemas.dopamine_record import DopamineRecordCreate, DopamineRecordRead
from app.schemas.user_auth import SuccessResponse
from app.services import analysis
from app.services.dopamine_record import dopamine_record_service

router = APIRouter(prefix="/records", tags=["Dopamine Records"])


@router.post(
    "",
    response_model=DopamineRecordRead,
    status_code=status.HTTP_201_CREATED,
    summary="Log a dopamine record"
)
def create_record(
    record_data: DopamineRecordCreate,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Log one dopamine-seeking event.

    The composite `dopamine_score` is computed from usage time, pattern
    repetition and stress level; any client-side value is ignored.
    """
    return dopamine_record_service.create_record(db, record_data, current_user)


@router.post(
    "/score-preview",
    response_model=ScorePreviewResponse,
    summary="Preview the score for unsaved inputs"
)
def score_preview(
    preview: ScorePreviewRequest,
    current_user: UserAuth = Depends(get_current_user),
):
    value = analysis.score(preview.usage_time, preview.pattern_repetition, preview.stress_level)
    level = analysis.score_level(value)
    return ScorePreviewResponse(dopamine_score=value, score_level=level, label=score_level_label(level))


@router.get(
    "",
    response_model=List[DopamineRecordRead],
    summary="List my records"
)
def list_records(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the authenticated user's records, newest first."""
    return dopamine_record_service.list_records(db, current_user, skip=skip, limit=limit)


@router.get(
    "/{record_id}",
    response_model=DopamineRecordRead,
    summary="Get a record"
)
def get_record(
    record_id: UUID,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return dopamine_record_service.get_record(db, record_id, current_user)


@router.delete(
    "/{record_id}",
    response_model=SuccessResponse,
    summary="Delete a record"
)
def delete_record(
    record_id: UUID,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    dopamine_record_service.delete_record(db, record_id, current_user)
    return SuccessResponse(message="Record deleted successfully")
