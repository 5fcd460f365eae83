"""
Notes API — Abstract Note Repository Interface
================================================

What:  Abstract base class defining the document-store contract for notes.
Why:   The service only needs four operations; any backend that provides them
       (relational table, document database, key-value store) can sit behind it.
How:   Concrete implementations inherit from NoteRepository and implement all four.
Who:   Called by NoteService.

Contract:
    find_all()        → every note, in the store's natural (insertion) order
    find_by_id(id)    → the note, or None
    save(note)        → upsert by id; assigns an id when the note has none
    delete_by_id(id)  → removes the note; no-op when the id is unknown
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from notes_api.schemas.note import Note


class NoteRepository(ABC):
    """
    Abstract interface for note persistence.

    Implementations:
        - SqlNoteRepository: async SQLAlchemy (PostgreSQL in production, SQLite in tests)
    """

    @abstractmethod
    async def find_all(self) -> List[Note]:
        """Return all notes, oldest insert first. No store-side sorting by timestamp."""
        ...

    @abstractmethod
    async def find_by_id(self, note_id: str) -> Optional[Note]:
        ...

    @abstractmethod
    async def save(self, note: Note) -> Note:
        """
        Insert or update a note keyed by `note.id`.

        Returns:
            The stored note, including the id assigned on insert.

        Raises:
            DatabaseError: The write failed; nothing was persisted.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, note_id: str) -> None:
        ...
