# models/journal_entry.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Date, DateTime, Text, Uuid, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.config import Base


class JournalEntry(Base):
    __tablename__ = "journal_entry"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_journal_entry_user_date"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user_id = Column(Uuid, ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False, index=True)

    reflection = Column(Text, nullable=False, default="")
    goals = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="journal_entries")
