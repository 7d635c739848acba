# models/contract.py

import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Text, Float, Integer, DateTime, Uuid, ForeignKey, Enum as SqlEnum
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class GoalType(str, enum.Enum):
    time_limit = "time_limit"
    frequency_limit = "frequency_limit"
    behavior_change = "behavior_change"


class ContractStatus(str, enum.Enum):
    active = "active"
    completed = "completed"
    failed = "failed"


class WordToSelfContract(Base):
    """A self-commitment ("word to self") with a completion lifecycle."""
    __tablename__ = "word_to_self_contract"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user_id = Column(Uuid, ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    goal_type = Column(SqlEnum(GoalType), nullable=False, default=GoalType.time_limit)
    target_value = Column(Float, nullable=False, default=0)
    unit = Column(String(50), nullable=False, default="시간")

    start_date = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    end_date = Column(DateTime, nullable=True)

    status = Column(SqlEnum(ContractStatus), nullable=False, default=ContractStatus.active)
    integrity_score = Column(Integer, nullable=False, default=100)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="contracts")
