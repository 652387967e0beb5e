from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class QuestionPoolRecord(Base):
    """One row per category: the ordered, deduplicated question pool."""

    __tablename__ = "question_pools"
    key: Mapped[str] = mapped_column(String(128), primary_key=True)  # quiz_pool:<category>
    category: Mapped[str] = mapped_column(String(64), index=True)
    items: Mapped[list] = mapped_column(JSON, default=list)  # oldest first
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
