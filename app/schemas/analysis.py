# schemas/analysis.py
from pydantic import BaseModel, Field
from typing import Optional, Dict, List, Literal
from datetime import date
import enum


class ScoreLevel(str, enum.Enum):
    healthy = "healthy"
    caution = "caution"
    danger = "danger"


# =====================================================================
# ANALYSIS
# =====================================================================

class WeeklyTrend(BaseModel):
    """One ISO week of records."""
    week_start: date
    average_score: float
    record_count: int
    goal_completion_rate: float = 100.0


class AnalysisResult(BaseModel):
    """Aggregate statistics over a set of records."""
    total_records: int
    situation_breakdown: Dict[str, int]
    mood_breakdown: Dict[str, int]
    average_mood: float
    most_common_situation: Optional[str] = None
    average_score: float
    score_level: ScoreLevel
    integrity_score: int = Field(..., ge=0, le=100)
    weekly_trend: List[WeeklyTrend] = []
    feedback: List[str]


# =====================================================================
# SCORE PREVIEW
# =====================================================================

class ScorePreviewRequest(BaseModel):
    usage_time: int = Field(0, ge=0, description="Usage time in minutes")
    pattern_repetition: int = Field(0, ge=0)
    stress_level: int = Field(1, ge=1, le=5)


class ScorePreviewResponse(BaseModel):
    dopamine_score: int
    score_level: ScoreLevel
    label: str


# =====================================================================
# WELLNESS DASHBOARD
# =====================================================================

class WellnessSummary(BaseModel):
    current_score: Optional[int] = None
    previous_score: Optional[int] = None
    score_level: Optional[ScoreLevel] = None
    score_trend: Optional[Literal["improved", "increased", "maintained"]] = None
    integrity_score: int
    active_contracts: int
    average_contract_integrity: int
    completed_routines: int
    total_routines: int
    routine_effect: int
