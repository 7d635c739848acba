# app/schemas/__init__.py

from .user_auth import (
    UserAuthBase,
    UserAuthCreate,
    UserAuthOut,
    LoginRequest,
    TokenResponse,
    RefreshTokenRequest,
    Status,
    SuccessResponse,
)
from .dopamine_record import (
    DopamineRecordBase,
    DopamineRecordCreate,
    DopamineRecordRead,
)
from .journal_entry import JournalEntryUpsert, JournalEntryRead
from .contract import (
    ContractBase,
    ContractCreate,
    ContractStatusUpdate,
    ContractRead,
    ContractWithProgress,
)
from .reset_routine import ResetRoutineRead, ResetRoutineList
from .analysis import (
    ScoreLevel,
    WeeklyTrend,
    AnalysisResult,
    ScorePreviewRequest,
    ScorePreviewResponse,
    WellnessSummary,
)


__all__ = [
    # Auth
    "UserAuthBase", "UserAuthCreate", "UserAuthOut",
    "LoginRequest", "TokenResponse", "RefreshTokenRequest",
    "Status", "SuccessResponse",

    # Records
    "DopamineRecordBase", "DopamineRecordCreate", "DopamineRecordRead",

    # Journal
    "JournalEntryUpsert", "JournalEntryRead",

    # Contracts & routines
    "ContractBase", "ContractCreate", "ContractStatusUpdate", "ContractRead", "ContractWithProgress",
    "ResetRoutineRead", "ResetRoutineList",

    # Analysis
    "ScoreLevel", "WeeklyTrend", "AnalysisResult",
    "ScorePreviewRequest", "ScorePreviewResponse", "WellnessSummary",
]
