from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from restaurants.dependencies import get_restaurant_store, get_restaurant_validator
from restaurants.repository import LocationCriteria
from restaurants.schemas import NewRestaurant
from reviews.dependencies import get_review_store, get_review_validator
from reviews.schemas import NewReview


class FakeRestaurantStore:
    """In-memory stand-in for the asyncpg restaurant repository."""

    def __init__(self, rows: list[dict] | None = None):
        self.rows: list[dict] = [dict(row) for row in rows or []]
        self.insert_calls: list[NewRestaurant] = []
        self.lookups = 0

    async def find_by_id(self, restaurant_id: int) -> dict | None:
        self.lookups += 1
        return next((row for row in self.rows if row["id"] == restaurant_id), None)

    async def find(self, criteria: LocationCriteria | None = None) -> list[dict]:
        self.lookups += 1
        if criteria is None:
            return list(self.rows)
        return [
            row for row in self.rows
            if row["city"] == criteria.city and row["state"] == criteria.state
        ]

    async def find_by_key(self, name: str, city: str, state: str) -> dict | None:
        self.lookups += 1
        return next(
            (
                row for row in self.rows
                if (row["name"], row["city"], row["state"]) == (name, city, state)
            ),
            None,
        )

    async def insert(self, restaurant: NewRestaurant) -> dict:
        self.insert_calls.append(restaurant)
        row = {
            "id": max((row["id"] for row in self.rows), default=0) + 1,
            "name": restaurant.name,
            "city": restaurant.city,
            "state": restaurant.state,
        }
        self.rows.append(row)
        return row


class FakeReviewStore:
    """In-memory stand-in for the asyncpg review repository."""

    def __init__(self, rows: list[dict] | None = None, *, restaurant_ids: set[int] | None = None):
        self.rows: list[dict] = [dict(row) for row in rows or []]
        self.restaurant_ids = restaurant_ids if restaurant_ids is not None else {1, 2}
        self.insert_calls: list[NewReview] = []
        # When set, delete_by_id returns this instead of the real count.
        self.forced_rows_affected: int | None = None

    async def find_by_id(self, review_id: int) -> dict | None:
        return next((row for row in self.rows if row["id"] == review_id), None)

    async def find_by_reviewer(self, reviewer_email: str) -> list[dict]:
        return [row for row in self.rows if row["reviewer_email"] == reviewer_email]

    async def insert(self, review: NewReview) -> int:
        self.insert_calls.append(review)
        if review.restaurant_id not in self.restaurant_ids:
            return 0
        review_id = max((row["id"] for row in self.rows), default=0) + 1
        self.rows.append(
            {
                "id": review_id,
                "restaurant_id": review.restaurant_id,
                "reviewer_email": review.reviewer_email,
                "rating": review.rating,
                "content": review.content,
            }
        )
        return review_id

    async def delete_by_id(self, review_id: int) -> int:
        if self.forced_rows_affected is not None:
            return self.forced_rows_affected
        before = len(self.rows)
        self.rows = [row for row in self.rows if row["id"] != review_id]
        return before - len(self.rows)


MCDONALDS = {"id": 1, "name": "McDonalds", "city": "Pittsburgh", "state": "PA"}
WENDYS = {"id": 2, "name": "Wendys", "city": "Cleveland", "state": "OH"}

REVIEW = {
    "id": 1,
    "restaurant_id": 1,
    "reviewer_email": "sam@example.com",
    "rating": 4.0,
    "content": "Fries were hot.",
}


@pytest.fixture
def restaurant_store():
    return FakeRestaurantStore([MCDONALDS, WENDYS])


@pytest.fixture
def review_store():
    return FakeReviewStore([REVIEW])


@pytest.fixture
def client(restaurant_store, review_store):
    app.dependency_overrides[get_restaurant_store] = lambda: restaurant_store
    app.dependency_overrides[get_review_store] = lambda: review_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def reject_everything():
    """Override both validators so every payload is rejected."""
    app.dependency_overrides[get_restaurant_validator] = lambda: (lambda _: False)
    app.dependency_overrides[get_review_validator] = lambda: (lambda _: False)
    yield
    app.dependency_overrides.pop(get_restaurant_validator, None)
    app.dependency_overrides.pop(get_review_validator, None)
