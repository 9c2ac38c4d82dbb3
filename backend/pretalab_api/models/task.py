"""Task ORM — one row per task document.

Invariants:
    - id is a 24-char hex object id, generated on insert, never reused
    - title is non-nullable text; completed defaults to False
    - created_at set on insert; updated_at refreshed on every write
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pretalab_api.core.domain_types import new_document_id
from pretalab_api.db.base import Base, utcnow


class Task(Base):
    """Task document."""
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_document_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
