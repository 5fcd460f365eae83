"""
Notes API — SQLAlchemy Note Repository
========================================

What:  NoteRepository implementation backed by the `notes` table.
Why:   Gives the document-store contract (find_all, find_by_id, save,
       delete_by_id) a concrete async SQLAlchemy backend.
How:   Each instance wraps the per-request AsyncSession. Writes are committed
       before returning; a failed write (or commit) is rolled back
       and re-raised as DatabaseError with the SQLAlchemy error chained.

Save semantics (upsert):
    note.id is None        → INSERT with a fresh UUID
    note.id is unknown     → INSERT with that id
    note.id already stored → replace description and date_time in place
                             (seq is kept, so the note keeps its list position)
"""

import logging
import uuid
from datetime import timezone
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.exceptions import DatabaseError
from notes_api.models.note import NoteRecord
from notes_api.repositories.base import NoteRepository
from notes_api.schemas.note import Note

logger = logging.getLogger(__name__)


def new_note_id() -> str:
    """Generate a store-assigned note id."""
    return str(uuid.uuid4())


def _to_note(record: NoteRecord) -> Note:
    """Convert a row to a Note; naive timestamps (SQLite) are read as UTC."""
    note = Note.model_validate(record)
    if note.date_time is not None and note.date_time.tzinfo is None:
        note = note.model_copy(update={"date_time": note.date_time.replace(tzinfo=timezone.utc)})
    return note


class SqlNoteRepository(NoteRepository):
    """Note persistence over an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all(self) -> List[Note]:
        result = await self._session.execute(
            select(NoteRecord).order_by(NoteRecord.seq)
        )
        return [_to_note(row) for row in result.scalars().all()]

    async def find_by_id(self, note_id: str) -> Optional[Note]:
        record = await self._get_record(note_id)
        if record is None:
            return None
        return _to_note(record)

    async def save(self, note: Note) -> Note:
        try:
            record = await self._get_record(note.id) if note.id else None
            if record is None:
                record = NoteRecord(
                    id=note.id or new_note_id(),
                    description=note.description,
                    date_time=note.date_time,
                )
                self._session.add(record)
                logger.debug("Inserting note %s", record.id)
            else:
                record.description = note.description
                record.date_time = note.date_time
                logger.debug("Replacing note %s", record.id)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise DatabaseError(
                message="Could not save the note.",
                context={"note_id": note.id, "error_type": type(e).__name__},
            ) from e
        return _to_note(record)

    async def delete_by_id(self, note_id: str) -> None:
        try:
            result = await self._session.execute(
                delete(NoteRecord).where(NoteRecord.id == note_id)
            )
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise DatabaseError(
                message="Could not delete the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e
        logger.debug("Deleted %d row(s) for note %s", result.rowcount, note_id)

    async def _get_record(self, note_id: str) -> Optional[NoteRecord]:
        result = await self._session.execute(
            select(NoteRecord).where(NoteRecord.id == note_id)
        )
        return result.scalar_one_or_none()


# ── FastAPI Dependency ────────────────────────────────────────────────────
async def get_note_repository(
    db: AsyncSession = Depends(get_db_session),
) -> NoteRepository:
    """Bind a repository to the request-scoped session."""
    return SqlNoteRepository(db)
