# models/reset_routine.py

import uuid
import enum
from sqlalchemy import (
    Column, String, Integer, Boolean, DateTime, Uuid, ForeignKey, UniqueConstraint,
    Enum as SqlEnum
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class RoutineCategory(str, enum.Enum):
    meditation = "meditation"
    breathing = "breathing"
    gratitude = "gratitude"
    exercise = "exercise"
    reading = "reading"


class ResetRoutine(Base):
    __tablename__ = "reset_routine"
    __table_args__ = (
        UniqueConstraint("user_id", "category", name="uq_reset_routine_user_category"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user_id = Column(Uuid, ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    category = Column(SqlEnum(RoutineCategory), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes

    completed = Column(Boolean, nullable=False, default=False)
    dopamine_reduction = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime, nullable=True)

    user = relationship("UserAuth", back_populates="routines")
