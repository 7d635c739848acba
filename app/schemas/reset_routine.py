# schemas/reset_routine.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from app.models.reset_routine import RoutineCategory


class ResetRoutineRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    category: RoutineCategory
    description: str = ""
    duration: int
    completed: bool
    dopamine_reduction: int
    completed_at: Optional[datetime] = None


class ResetRoutineList(BaseModel):
    routines: List[ResetRoutineRead]
    completed_count: int
    total_effect: int
