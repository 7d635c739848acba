# models/dopamine_record.py

import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Text, Integer, DateTime, Uuid, ForeignKey, Enum as SqlEnum
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class Situation(str, enum.Enum):
    boredom = "boredom"
    stress = "stress"
    habit = "habit"
    social = "social"
    work = "work"
    entertainment = "entertainment"
    other = "other"


class Mood(str, enum.Enum):
    good = "good"
    neutral = "neutral"
    bad = "bad"


class DopamineRecord(Base):
    __tablename__ = "dopamine_record"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user_id = Column(Uuid, ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)

    image_url = Column(String(1024), nullable=True)
    situation = Column(SqlEnum(Situation), nullable=False)
    mood = Column(SqlEnum(Mood), nullable=False)
    note = Column(Text, nullable=False, default="")

    # ---- Usage metrics ----
    usage_time = Column(Integer, nullable=False, default=0)          # minutes
    pattern_repetition = Column(Integer, nullable=False, default=0)
    stress_level = Column(Integer, nullable=False, default=1)        # 1-5
    dopamine_score = Column(Integer, nullable=False, default=0)      # 0-100, derived

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="records")
