"""
Pydantic schemas for review endpoints.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from core.db import BIGINT_MAX

MIN_RATING = 0
MAX_RATING = 5

# Strict: a JSON `true` is not restaurant 1 or a rating of 1.
RestaurantRef = Annotated[int, Field(strict=True, le=BIGINT_MAX)]
Rating = Annotated[float, Field(strict=True)]


class NewReview(BaseModel):
    # Range and presence checks live in the review validator, not here, so a
    # rating of 7 is a 400 with the handler's message.
    restaurant_id: RestaurantRef | None = None
    reviewer_email: str | None = Field(default=None, max_length=320)
    rating: Rating | None = None
    content: str | None = Field(default=None, max_length=4000)


class Review(BaseModel):
    id: int
    restaurant_id: int
    reviewer_email: str
    rating: float
    content: str | None = None
