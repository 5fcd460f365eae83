# Repositories package init
"""
Notes API — Repository Layer
==============================

What:  The document-store client the Note Service talks to.

Inventory:
    - NoteRepository (abstract): find_all / find_by_id / save / delete_by_id
    - SqlNoteRepository: async SQLAlchemy implementation
    - get_note_repository: FastAPI dependency wiring a repository to the request session
"""

from notes_api.repositories.base import NoteRepository
from notes_api.repositories.note_repository import SqlNoteRepository, get_note_repository

__all__ = ["NoteRepository", "SqlNoteRepository", "get_note_repository"]
