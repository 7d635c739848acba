# schemas/journal_entry.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import date, datetime
from uuid import UUID


class JournalEntryUpsert(BaseModel):
    reflection: str = Field("", max_length=10000)
    goals: str = Field("", max_length=10000)


class JournalEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    date: date
    reflection: str
    goals: str
    created_at: datetime
    updated_at: Optional[datetime] = None
