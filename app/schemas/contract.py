# schemas/contract.py
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional
from datetime import datetime, timezone
from uuid import UUID

from app.models.contract import GoalType, ContractStatus


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive input is taken as UTC; offsets are converted, never dropped.
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ContractBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=2000)
    goal_type: GoalType = GoalType.time_limit
    target_value: float = Field(0, ge=0)
    unit: str = Field("시간", max_length=50)
    end_date: Optional[datetime] = None


class ContractCreate(ContractBase):
    """New contracts always start active with full integrity."""
    start_date: Optional[datetime] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(v)

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractStatusUpdate(BaseModel):
    status: ContractStatus


class ContractRead(ContractBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    start_date: datetime
    status: ContractStatus
    integrity_score: int = Field(..., ge=0, le=100)
    created_at: datetime


class ContractWithProgress(ContractRead):
    completion: float
