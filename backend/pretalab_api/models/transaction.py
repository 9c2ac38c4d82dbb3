"""Transaction ORM — one row per financial transaction document.

Invariants:
    - id is a 24-char hex object id, generated on insert, never reused
    - type column only ever holds "income" or "expense" (validated before write,
      enforced again by a CHECK constraint)
    - amount is signed: positive = inflow, negative = outflow
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pretalab_api.core.domain_types import new_document_id
from pretalab_api.db.base import Base, utcnow


class Transaction(Base):
    """Transaction document."""
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint(
            "type IN ('income', 'expense')", name="ck_transactions_type",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_document_id,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
