"""
Pydantic schemas for restaurant endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NewRestaurant(BaseModel):
    # Optional on the wire so that missing fields reach the validator and get
    # the same 400 as blank ones.
    name: str | None = Field(default=None, max_length=200)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)


class Restaurant(BaseModel):
    id: int
    name: str
    city: str
    state: str
