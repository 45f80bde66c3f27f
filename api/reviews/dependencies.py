"""
Collaborators of the review handler, as FastAPI dependencies.
"""

from __future__ import annotations

from typing import Callable, Protocol

from . import repository
from .schemas import NewReview
from .validator import is_review_valid

ReviewValidator = Callable[[NewReview], bool]


class ReviewStore(Protocol):
    async def find_by_id(self, review_id: int) -> dict | None: ...

    async def find_by_reviewer(self, reviewer_email: str) -> list[dict]: ...

    async def insert(self, review: NewReview) -> int: ...

    async def delete_by_id(self, review_id: int) -> int: ...


def get_review_store() -> ReviewStore:
    return repository


def get_review_validator() -> ReviewValidator:
    return is_review_valid
