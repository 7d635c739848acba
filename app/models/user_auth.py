# models/user_auth.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, DateTime, Integer, Uuid, Enum as SqlEnum
)
import enum
from sqlalchemy.orm import relationship
from app.core.config import Base


class Status(enum.Enum):
    active = "active"
    suspended = "suspended"
    deactivated = "deactivated"


class UserAuth(Base):
    __tablename__ = "user_auth"

    # ---- Base fields ----
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    username = Column(String(50), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # ---- Account status ----
    status = Column(SqlEnum(Status), default=Status.active)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    # ---- Login tracking ----
    last_login_at = Column(DateTime, nullable=True)
    failed_login_attempts = Column(Integer, default=0)
    lockout_until = Column(DateTime, nullable=True)

    # ---- Relationships ----
    records = relationship("DopamineRecord", back_populates="user", cascade="all, delete-orphan")
    journal_entries = relationship("JournalEntry", back_populates="user", cascade="all, delete-orphan")
    contracts = relationship("WordToSelfContract", back_populates="user", cascade="all, delete-orphan")
    routines = relationship("ResetRoutine", back_populates="user", cascade="all, delete-orphan")
