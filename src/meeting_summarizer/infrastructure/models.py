"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SummaryModel(Base):
    """SQLAlchemy model for summaries table.

    Only ``edited_summary`` changes after insert; there is no delete path.
    """

    __tablename__ = "summaries"
    __table_args__ = (Index("ix_summaries_created_at", "created_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    original_text: Mapped[str] = mapped_column(Text, nullable=False)
    custom_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    generated_summary: Mapped[str] = mapped_column(Text, nullable=False)
    edited_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
