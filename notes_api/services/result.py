"""
Notes API — Service Result Types
==================================

What:  The tagged union every NoteService operation returns.
Why:   A service call ends in exactly one of two shapes. The literal `ok`
       field tells them apart, so type checkers narrow `result.body` on
       `if result.ok:` without isinstance checks in the routes.

    ServiceSuccess(ok=True,  body=SuccessResponse)
    ServiceFailure(ok=False, status=HTTPStatus, body=ErrorResponse)

`status` on a failure is the error category the service chose
(BAD_REQUEST, INTERNAL_SERVER_ERROR). Routes use it as the HTTP status
unless their contract fixes one.
"""

from http import HTTPStatus
from typing import Literal, Union

from pydantic import BaseModel

from notes_api.schemas.note import ErrorResponse, SuccessResponse


class ServiceSuccess(BaseModel):
    model_config = {"frozen": True}

    ok: Literal[True] = True
    body: SuccessResponse


class ServiceFailure(BaseModel):
    model_config = {"frozen": True}

    ok: Literal[False] = False
    status: HTTPStatus
    body: ErrorResponse

    @property
    def detail(self) -> str:
        """Detail of the first error entry, for log lines."""
        return self.body.errors[0].detail


ServiceResult = Union[ServiceSuccess, ServiceFailure]
