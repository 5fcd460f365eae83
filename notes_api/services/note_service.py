"""
Notes API — Note Service (Business Logic)
===========================================

What:  Validates note input, calls the repository and wraps every outcome
       in a SuccessResponse or ErrorResponse envelope.
Why:   Keeps HTTP concerns out of the business rules: the service decides
       *what* went wrong (bad request vs server error), the route decides
       which status code that becomes.
How:   Each operation catches its own failures and returns a ServiceFailure;
       nothing but a ServiceResult leaves a NoteService method.

Operation summary:
    list_notes   → all notes, newest insert first
    create_note  → description check, server timestamp, insert
    get_note     → unknown id is a BAD_REQUEST failure
    update_note  → unconditional upsert; every failure is INTERNAL_SERVER_ERROR
    delete_note  → unconditional delete; unknown ids succeed

Design Decision:
    NoteService is stateless — it receives the repository for each call,
    so a single module-level instance serves every request.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional, Tuple

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.repositories.base import NoteRepository
from notes_api.schemas.note import ErrorDetail, ErrorResponse, Note, SuccessResponse
from notes_api.services.result import ServiceFailure, ServiceResult, ServiceSuccess

logger = logging.getLogger(__name__)


# Status category → (code, title) of the single ErrorResponse entry
_ERROR_CATEGORIES: Dict[HTTPStatus, Tuple[str, str]] = {
    HTTPStatus.BAD_REQUEST: ("400_BAD_REQUEST", "Invalid Request"),
    HTTPStatus.NOT_FOUND: ("404_NOT_FOUND", "Resource Not Found"),
    HTTPStatus.INTERNAL_SERVER_ERROR: ("500_INTERNAL_ERROR", "Server Error"),
}
_UNKNOWN_CATEGORY = ("UNKNOWN_ERROR", "Unknown Error")


def create_error_response(status: HTTPStatus, message: str) -> ErrorResponse:
    """
    Build an ErrorResponse holding exactly one error for the given status category.

    Statuses outside the known categories map to UNKNOWN_ERROR.
    """
    code, title = _ERROR_CATEGORIES.get(status, _UNKNOWN_CATEGORY)
    logger.error("Creating error response: code=%s, title=%s, detail=%s", code, title, message)
    return ErrorResponse(errors=[ErrorDetail(code=code, title=title, detail=message)])


def _failure(status: HTTPStatus, message: str) -> ServiceFailure:
    return ServiceFailure(status=status, body=create_error_response(status, message))


def _validate_description(description: Optional[str]) -> None:
    """Raise ValidationError when the description is missing or blank."""
    if description is None or not description.strip():
        raise ValidationError("Description is 'Null/Empty'", field="description")


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        ValidationError / ValueError   → BAD_REQUEST (create only)
        NotFoundError                  → BAD_REQUEST (get only)
        anything else                  → INTERNAL_SERVER_ERROR, logged with traceback;
                                         the client gets a generic detail
    """

    async def list_notes(self, repo: NoteRepository) -> ServiceResult:
        """
        Return every note, most recently inserted first.

        The repository yields notes in insertion order; the list is reversed
        here rather than sorted in the store.
        """
        logger.info("Listing all notes")
        try:
            notes = await repo.find_all()
        except Exception as e:
            logger.error("Exception in list_notes: %s", str(e), exc_info=True)
            return _failure(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                "Unexpected error occurred while retrieving notes.",
            )

        notes = list(reversed(notes))
        logger.info("Retrieved %d notes from the store", len(notes))
        return ServiceSuccess(body=SuccessResponse(data=notes))

    async def create_note(self, repo: NoteRepository, note: Note) -> ServiceResult:
        """
        Validate and insert a new note.

        Workflow:
            1. Reject a missing/blank description (ValidationError → 400)
            2. Drop any client-supplied id; the store assigns one
            3. Stamp dateTime with the current UTC time
            4. Save and wrap the stored note

        Error Recovery:
            ValueError while saving → 400 with the reason appended
            Anything else           → 500 with a generic detail
        """
        logger.info("Creating note: %r", note)
        try:
            _validate_description(note.description)
            to_save = note.model_copy(
                update={"id": None, "date_time": datetime.now(timezone.utc)}
            )
            saved = await repo.save(to_save)
            logger.info("Note saved successfully with ID: %s", saved.id)
            return ServiceSuccess(body=SuccessResponse(data=saved))

        except ValidationError as e:
            logger.warning("Validation failed: %s", e.message)
            return _failure(HTTPStatus.BAD_REQUEST, e.message)

        except ValueError as e:
            logger.warning("Invalid value while saving note: %s", str(e))
            return _failure(
                HTTPStatus.BAD_REQUEST,
                f"Validation error occurred while saving note: {e}",
            )

        except Exception as e:
            logger.error("Exception in create_note: %s", str(e), exc_info=True)
            return _failure(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                "Unexpected error occurred while saving note.",
            )

    async def get_note(self, repo: NoteRepository, note_id: str) -> ServiceResult:
        """Look up a single note; an unknown id is a BAD_REQUEST failure."""
        logger.info("Fetching note with ID: %s", note_id)
        try:
            note = await repo.find_by_id(note_id)
            if note is None:
                raise NotFoundError(note_id)
            logger.info("Note found with ID: %s", note_id)
            return ServiceSuccess(body=SuccessResponse(data=note))

        except NotFoundError as e:
            logger.warning("No note found for ID: %s", note_id)
            return _failure(HTTPStatus.BAD_REQUEST, e.message)

        except Exception as e:
            logger.error("Exception in get_note: %s", str(e), exc_info=True)
            return _failure(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                f"Unexpected error occurred while retrieving note with ID: {note_id}",
            )

    async def update_note(self, repo: NoteRepository, note: Note) -> ServiceResult:
        """
        Save the note as given (upsert by id).

        No description check and no existence check: an unknown id is
        inserted, and dateTime is stored exactly as the client sent it.
        """
        logger.info("Updating note: %r", note)
        try:
            updated = await repo.save(note)
            logger.info("Note updated successfully with ID: %s", updated.id)
            return ServiceSuccess(body=SuccessResponse(data=updated))

        except Exception as e:
            logger.error("Exception in update_note: %s", str(e), exc_info=True)
            return _failure(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                "Unexpected error occurred while updating note.",
            )

    async def delete_note(self, repo: NoteRepository, note_id: str) -> ServiceResult:
        """Delete by id. Deleting an unknown id succeeds with the same confirmation."""
        logger.info("Deleting note with ID: %s", note_id)
        try:
            await repo.delete_by_id(note_id)
            logger.info("Note with ID: %s successfully deleted", note_id)
            return ServiceSuccess(
                body=SuccessResponse(data=f"Note with id -> {note_id} successfully deleted.")
            )

        except Exception as e:
            logger.error("Exception in delete_note: %s", str(e), exc_info=True)
            return _failure(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                f"Unexpected error occurred while deleting note with ID: {note_id}",
            )


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
