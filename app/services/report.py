# services/report.py
from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Session

from app.crud.contract import crud_contract
from app.crud.dopamine_record import crud_dopamine_record
from app.models.contract import ContractStatus
from app.models.user_auth import UserAuth
from app.schemas.analysis import AnalysisResult, WellnessSummary
from app.services import analysis
from app.services.reset_routine import reset_routine_service


class ReportService:
    """Loads a user's data and hands it to the pure analysis functions."""

    def build_report(
        self, db: Session, requesting_user: UserAuth, now: Optional[datetime] = None
    ) -> AnalysisResult:
        records = crud_dopamine_record.get_multi_by_user(db, user_id=requesting_user.id, limit=None)
        contracts = crud_contract.get_multi_by_user(db, user_id=requesting_user.id)
        return analysis.analyze(records, contracts=contracts, now=now)

    def build_wellness_summary(
        self, db: Session, requesting_user: UserAuth, now: Optional[datetime] = None
    ) -> WellnessSummary:
        """Dashboard numbers: latest scores, integrity, contracts and routines."""
        records = crud_dopamine_record.get_multi_by_user(db, user_id=requesting_user.id, limit=None)
        contracts = crud_contract.get_multi_by_user(db, user_id=requesting_user.id)
        routines = reset_routine_service.get_or_create_routines(db, requesting_user)

        current = records[0].dopamine_score if records else None
        previous = records[1].dopamine_score if len(records) > 1 else None

        return WellnessSummary(
            current_score=current,
            previous_score=previous,
            score_level=analysis.score_level(current) if current is not None else None,
            score_trend=analysis.score_trend(current, previous),
            integrity_score=analysis.integrity_score(records, now),
            active_contracts=sum(1 for c in contracts if c.status == ContractStatus.active),
            average_contract_integrity=analysis.average_contract_integrity(contracts),
            completed_routines=sum(1 for r in routines if r.completed),
            total_routines=len(routines),
            routine_effect=analysis.routine_effect(routines),
        )


report_service = ReportService()
