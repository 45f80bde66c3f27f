"""
Handler outcomes and their HTTP rendering.

Handlers decide *what* happened (Success, Created, NotFound, Conflict) and
return a `HandlerResult`; routers turn it into a response. InvalidArgument
is not a result: handlers raise `HTTPException(status_code=400)` for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class HandlerResult:
    status_code: int
    body: Any = None
    location: str | None = None


def ok(body: Any) -> HandlerResult:
    return HandlerResult(status.HTTP_200_OK, body)


def created(body: Any, *, location: str | None = None) -> HandlerResult:
    return HandlerResult(status.HTTP_201_CREATED, body, location)


def not_found(body: Any = None) -> HandlerResult:
    return HandlerResult(status.HTTP_404_NOT_FOUND, body)


def conflict(body: Any) -> HandlerResult:
    return HandlerResult(status.HTTP_409_CONFLICT, body)


def to_response(result: HandlerResult) -> Response:
    headers = {"Location": result.location} if result.location else None
    if result.body is None:
        return Response(status_code=result.status_code, headers=headers)
    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.body),
        headers=headers,
    )


def bad_request(detail: str) -> HTTPException:
    """
    InvalidArgument: the caller raises it so the store is never consulted.
    """
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
