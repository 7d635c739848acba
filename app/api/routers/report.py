# app/api/routers/report.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.data.labels import all_labels
from app.models.user_auth import UserAuth
from app.schemas.analysis import AnalysisResult
from app.services.report import report_service

router = APIRouter(prefix="/report", tags=["Analysis Report"])


@router.get(
    "",
    response_model=AnalysisResult,
    summary="Analyse my records"
)
def get_report(
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Aggregate analysis over every record of the authenticated user.

    Includes situation and mood breakdowns, average mood and score,
    the 7-day integrity score, a weekly trend and feedback messages.
    """
    return report_service.build_report(db, current_user)


@router.get("/labels", summary="Display labels for categories")
def get_labels():
    return all_labels()
