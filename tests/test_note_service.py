"""
Notes API — Note Service Unit Tests
=====================================

What:  Tests for NoteService business logic and error envelope construction.
How:   Uses a mocked NoteRepository (no database).

What we test:
    ✅ List reverses the store order; store failures become 500
    ✅ Create validates description, discards client ids, stamps dateTime
    ✅ Get distinguishes unknown ids (400) from store failures (500)
    ✅ Update is an unconditional save; every failure is 500
    ✅ Delete confirms even for unknown ids
    ✅ create_error_response category mapping
"""

from datetime import datetime, timezone
from http import HTTPStatus
from unittest.mock import AsyncMock

import pytest

from notes_api.exceptions import DatabaseError
from notes_api.schemas.note import Note
from notes_api.services.note_service import NoteService, create_error_response

EMPTY_DESCRIPTION = "Validation error: Description is 'Null/Empty'"


def _echo_save(note: Note) -> Note:
    """Mimic the store: assign an id when missing and return the note."""
    return note.model_copy(update={"id": note.id or "generated-id"})


class TestNoteServiceList:
    """Tests for list_notes."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_list_notes_reverses_store_order(self, mock_repository):
        first = Note(id="a", description="first")
        second = Note(id="b", description="second")
        store_order = [first, second]
        mock_repository.find_all.return_value = store_order

        result = await self.service.list_notes(mock_repository)

        assert result.ok
        assert [n.id for n in result.body.data] == ["b", "a"]
        # The repository's list is left untouched
        assert [n.id for n in store_order] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, mock_repository):
        result = await self.service.list_notes(mock_repository)

        assert result.ok
        assert result.body.data == []

    @pytest.mark.asyncio
    async def test_list_notes_store_failure_is_server_error(self, mock_repository):
        mock_repository.find_all.side_effect = DatabaseError()

        result = await self.service.list_notes(mock_repository)

        assert not result.ok
        assert result.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert result.body.errors[0].code == "500_INTERNAL_ERROR"


class TestNoteServiceCreate:
    """Tests for create_note validation and persistence."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, mock_repository):
        mock_repository.save.side_effect = _echo_save
        before = datetime.now(timezone.utc)

        result = await self.service.create_note(mock_repository, Note(description="Buy milk"))

        assert result.ok
        saved = result.body.data
        assert saved.id == "generated-id"
        assert saved.description == "Buy milk"
        assert saved.date_time >= before
        mock_repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_note_ignores_client_id_and_timestamp(self, mock_repository):
        mock_repository.save.side_effect = _echo_save
        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)

        await self.service.create_note(
            mock_repository,
            Note(id="client-chosen", description="Buy milk", date_time=stale),
        )

        sent = mock_repository.save.await_args.args[0]
        assert sent.id is None
        assert sent.date_time > stale

    @pytest.mark.asyncio
    @pytest.mark.parametrize("description", ["", "   ", None])
    async def test_create_note_rejects_blank_description(self, mock_repository, description):
        result = await self.service.create_note(mock_repository, Note(description=description))

        assert not result.ok
        assert result.status == HTTPStatus.BAD_REQUEST
        assert len(result.body.errors) == 1
        error = result.body.errors[0]
        assert error.code == "400_BAD_REQUEST"
        assert error.title == "Invalid Request"
        assert error.detail == EMPTY_DESCRIPTION
        mock_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_note_value_error_is_bad_request(self, mock_repository):
        mock_repository.save.side_effect = ValueError("description too long")

        result = await self.service.create_note(mock_repository, Note(description="x"))

        assert result.status == HTTPStatus.BAD_REQUEST
        assert result.body.errors[0].detail == (
            "Validation error occurred while saving note: description too long"
        )

    @pytest.mark.asyncio
    async def test_create_note_store_failure_is_generic_server_error(self, mock_repository):
        mock_repository.save.side_effect = DatabaseError(context={"secret": "dsn"})

        result = await self.service.create_note(mock_repository, Note(description="x"))

        assert result.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert result.body.errors[0].detail == "Unexpected error occurred while saving note."


class TestNoteServiceGet:
    """Tests for get_note retrieval."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_note_found(self, mock_repository, sample_note):
        mock_repository.find_by_id.return_value = sample_note

        result = await self.service.get_note(mock_repository, sample_note.id)

        assert result.ok
        assert result.body.data == sample_note
        mock_repository.find_by_id.assert_awaited_once_with(sample_note.id)

    @pytest.mark.asyncio
    async def test_get_note_not_found_is_bad_request(self, mock_repository):
        result = await self.service.get_note(mock_repository, "missing-id")

        assert not result.ok
        assert result.status == HTTPStatus.BAD_REQUEST
        assert result.body.errors[0].detail == "No note found for id -> missing-id"

    @pytest.mark.asyncio
    async def test_get_note_store_failure(self, mock_repository):
        mock_repository.find_by_id.side_effect = RuntimeError("connection reset")

        result = await self.service.get_note(mock_repository, "abc")

        assert result.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert result.body.errors[0].detail == (
            "Unexpected error occurred while retrieving note with ID: abc"
        )


class TestNoteServiceUpdate:
    """Tests for update_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_note_saves_as_given(self, mock_repository, sample_note):
        changed = sample_note.model_copy(update={"description": "Buy oat milk"})
        mock_repository.save.side_effect = _echo_save

        result = await self.service.update_note(mock_repository, changed)

        assert result.ok
        assert result.body.data == changed
        # dateTime is passed through, not refreshed
        assert mock_repository.save.await_args.args[0].date_time == sample_note.date_time

    @pytest.mark.asyncio
    async def test_update_note_does_not_validate_description(self, mock_repository):
        mock_repository.save.side_effect = _echo_save

        result = await self.service.update_note(mock_repository, Note(id="a", description=""))

        assert result.ok

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [DatabaseError(), ValueError("bad"), RuntimeError("boom")])
    async def test_update_note_every_failure_is_server_error(self, mock_repository, error):
        mock_repository.save.side_effect = error

        result = await self.service.update_note(mock_repository, Note(id="a", description="x"))

        assert result.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert result.body.errors[0].detail == "Unexpected error occurred while updating note."


class TestNoteServiceDelete:
    """Tests for delete_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_delete_note_confirms(self, mock_repository):
        result = await self.service.delete_note(mock_repository, "abc")

        assert result.ok
        assert result.body.data == "Note with id -> abc successfully deleted."
        mock_repository.delete_by_id.assert_awaited_once_with("abc")

    @pytest.mark.asyncio
    async def test_delete_note_failure(self, mock_repository):
        mock_repository.delete_by_id = AsyncMock(side_effect=DatabaseError())

        result = await self.service.delete_note(mock_repository, "abc")

        assert result.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert result.body.errors[0].detail == (
            "Unexpected error occurred while deleting note with ID: abc"
        )


class TestCreateErrorResponse:
    """Tests for the status category → (code, title) mapping."""

    @pytest.mark.parametrize(
        "status, code, title",
        [
            (HTTPStatus.BAD_REQUEST, "400_BAD_REQUEST", "Invalid Request"),
            (HTTPStatus.NOT_FOUND, "404_NOT_FOUND", "Resource Not Found"),
            (HTTPStatus.INTERNAL_SERVER_ERROR, "500_INTERNAL_ERROR", "Server Error"),
            (HTTPStatus.CONFLICT, "UNKNOWN_ERROR", "Unknown Error"),
        ],
    )
    def test_category_mapping(self, status, code, title):
        response = create_error_response(status, "something happened")

        assert len(response.errors) == 1
        assert response.errors[0].code == code
        assert response.errors[0].title == title
        assert response.errors[0].detail == "something happened"
