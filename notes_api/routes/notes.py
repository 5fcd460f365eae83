"""
Notes API — Notes Route Handlers
==================================

What:  The five CRUD endpoints under /notes.
Why:   Maps HTTP verbs to NoteService calls and service results to status codes.
How:   Each handler logs the request, calls the service with a request-scoped
       repository, logs the outcome and renders the envelope.

Status mapping:
    ┌──────────────────────┬─────────┬──────────────────────────────┐
    │ Endpoint             │ Success │ Failure                      │
    ├──────────────────────┼─────────┼──────────────────────────────┤
    │ GET    /notes        │ 200     │ 500                          │
    │ POST   /notes        │ 201     │ 400 (validation) / 500       │
    │ GET    /notes/{id}   │ 200     │ 400 (unknown id) / 500       │
    │ PUT    /notes        │ 200     │ 500 (always)                 │
    │ DELETE /notes/{id}   │ 200     │ 500 (always)                 │
    └──────────────────────┴─────────┴──────────────────────────────┘
"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from notes_api.repositories import NoteRepository, get_note_repository
from notes_api.schemas.note import (
    ErrorResponse,
    MessageEnvelope,
    Note,
    NoteEnvelope,
    NoteListEnvelope,
)
from notes_api.services.note_service import note_service
from notes_api.services.result import ServiceResult

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/notes", tags=["Notes"])


def render(
    result: ServiceResult,
    success_status: HTTPStatus,
    failure_status: Optional[HTTPStatus] = None,
) -> JSONResponse:
    """
    Turn a service result into a JSON response.

    Failures use `failure_status` when the endpoint fixes one, otherwise the
    status category chosen by the service.
    """
    if result.ok:
        status = success_status
    else:
        status = failure_status or result.status
    return JSONResponse(
        status_code=int(status),
        content=result.body.model_dump(mode="json", by_alias=True),
    )


@router.get(
    "",
    responses={
        200: {"description": "All notes, most recently created first", "model": NoteListEnvelope},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(
    repo: NoteRepository = Depends(get_note_repository),
) -> JSONResponse:
    logger.info("Received request to get all notes")
    result = await note_service.list_notes(repo)
    if result.ok:
        logger.info("Returning %d notes", len(result.body.data))
    else:
        logger.error("Failed to list notes: %s", result.detail)
    return render(result, HTTPStatus.OK)


@router.post(
    "",
    status_code=201,
    responses={
        201: {"description": "Note created", "model": NoteEnvelope},
        400: {"description": "Missing or empty description", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from the request body. The id is assigned by the store "
        "and dateTime by the server; only `description` is read from the client."
    ),
)
async def create_note(
    note: Note = Body(...),
    repo: NoteRepository = Depends(get_note_repository),
) -> JSONResponse:
    logger.info("Received request to save note: %r", note)
    result = await note_service.create_note(repo, note)
    if result.ok:
        logger.info("Created note %s", result.body.data.id)
    else:
        logger.warning("Failed to save note: %s", result.detail)
    return render(result, HTTPStatus.CREATED)


@router.get(
    "/{note_id}",
    responses={
        200: {"description": "The note", "model": NoteEnvelope},
        400: {"description": "No note for this id", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    repo: NoteRepository = Depends(get_note_repository),
) -> JSONResponse:
    logger.info("Received request to get note with ID: %s", note_id)
    result = await note_service.get_note(repo, note_id)
    if not result.ok:
        logger.warning("Could not return note %s: %s", note_id, result.detail)
    return render(result, HTTPStatus.OK)


@router.put(
    "",
    responses={
        200: {"description": "Note saved", "model": NoteEnvelope},
        500: {"description": "Any failure, including invalid input", "model": ErrorResponse},
    },
    summary="Update a note",
    description=(
        "Saves the note under its id. An unknown id is inserted rather than "
        "rejected, and dateTime is stored as sent."
    ),
)
async def update_note(
    note: Note = Body(...),
    repo: NoteRepository = Depends(get_note_repository),
) -> JSONResponse:
    logger.info("Received request to update note: %r", note)
    result = await note_service.update_note(repo, note)
    if not result.ok:
        logger.error("Failed to update note: %s", result.detail)
    return render(result, HTTPStatus.OK, failure_status=HTTPStatus.INTERNAL_SERVER_ERROR)


@router.delete(
    "/{note_id}",
    responses={
        200: {"description": "Confirmation message", "model": MessageEnvelope},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note by ID",
)
async def delete_note(
    note_id: str,
    repo: NoteRepository = Depends(get_note_repository),
) -> JSONResponse:
    logger.info("Received request to delete note with ID: %s", note_id)
    result = await note_service.delete_note(repo, note_id)
    if not result.ok:
        logger.error("Failed to delete note with ID: %s. Error: %s", note_id, result.detail)
    return render(result, HTTPStatus.OK, failure_status=HTTPStatus.INTERNAL_SERVER_ERROR)
