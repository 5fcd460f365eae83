"""
Notes API — Note SQLAlchemy Model
===================================

What:  ORM model representing the `notes` table.
Why:   The table plays the role of a document collection: one row per note,
       addressed by its string id.
Who:   Used by SqlNoteRepository and by Alembic for schema management.

Table Design Rationale:
    - seq: Integer surrogate key. Rows come back ordered by it, which gives the
      store a stable "natural" order (insertion order) without relying on
      timestamps that clients may overwrite on update.
    - id: The public note id (UUID string), unique and never changed after insert.
    - description: Free text; NOT NULL so an update that blanks it out fails.
    - date_time: Set by the service on create only, hence nullable for rows
      inserted through the update (upsert) path without a timestamp.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import TIMESTAMP, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base


class NoteRecord(Base):
    """A persisted note row."""

    __tablename__ = "notes"

    seq: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Insertion sequence; defines the natural retrieval order",
    )

    id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        index=True,
        comment="Public note identifier (UUID string)",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body text",
    )

    # Why TIMESTAMP WITH TIME ZONE: all timestamps are stored in UTC
    date_time: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="When the note was created (UTC); not refreshed on update",
    )

    def __repr__(self) -> str:
        return f"<NoteRecord(id={self.id}, date_time='{self.date_time}')>"
