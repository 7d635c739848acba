# schemas/dopamine_record.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.models.dopamine_record import Situation, Mood


class DopamineRecordBase(BaseModel):
    """Fields the user submits for one logged event."""
    situation: Situation
    mood: Mood
    note: str = Field("", max_length=2000)
    image_url: Optional[str] = Field(None, max_length=1024)
    usage_time: int = Field(0, ge=0, description="Usage time in minutes")
    pattern_repetition: int = Field(0, ge=0, description="How many times the pattern repeated")
    stress_level: int = Field(1, ge=1, le=5)


class DopamineRecordCreate(DopamineRecordBase):
    """Create payload. The score is always computed server-side."""
    pass


class DopamineRecordRead(DopamineRecordBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    dopamine_score: int = Field(..., ge=0, le=100)
    created_at: datetime
    updated_at: Optional[datetime] = None
