# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all and app-wide imports see them
from .user_auth import UserAuth, Status
from .dopamine_record import DopamineRecord, Situation, Mood
from .journal_entry import JournalEntry
from .contract import WordToSelfContract, GoalType, ContractStatus
from .reset_routine import ResetRoutine, RoutineCategory

__all__ = [
    "Base",
    "UserAuth",
    "Status",
    "DopamineRecord",
    "Situation",
    "Mood",
    "JournalEntry",
    "WordToSelfContract",
    "GoalType",
    "ContractStatus",
    "ResetRoutine",
    "RoutineCategory",
]
