# app/api/routers/wellness.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_auth import UserAuth
from app.schemas.analysis import WellnessSummary
from app.services.report import report_service

router = APIRouter(prefix="/wellness", tags=["Wellness Dashboard"])


@router.get("/summary", response_model=WellnessSummary, summary="Wellness dashboard numbers")
def get_wellness_summary(
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Latest and previous dopamine score with their trend, the 7-day
    integrity score, contract counts and routine progress.
    """
    return report_service.build_wellness_summary(db, current_user)
