"""
Restaurant persistence (raw SQL).
"""

from __future__ import annotations

from dataclasses import dataclass

from core import db

from .schemas import NewRestaurant


@dataclass(frozen=True)
class LocationCriteria:
    city: str
    state: str


async def find_by_id(restaurant_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, city, state
        FROM restaurants
        WHERE id = $1
        """,
        restaurant_id,
    )


async def find(criteria: LocationCriteria | None = None) -> list[dict]:
    if criteria is None:
        return await db.fetch_all(
            """
            SELECT id, name, city, state
            FROM restaurants
            ORDER BY id ASC
            """
        )
    return await db.fetch_all(
        """
        SELECT id, name, city, state
        FROM restaurants
        WHERE city = $1
          AND state = $2
        ORDER BY id ASC
        """,
        criteria.city,
        criteria.state,
    )


async def find_by_key(name: str, city: str, state: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, city, state
        FROM restaurants
        WHERE name = $1
          AND city = $2
          AND state = $3
        ORDER BY id ASC
        LIMIT 1
        """,
        name,
        city,
        state,
    )


async def insert(restaurant: NewRestaurant) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO restaurants (name, city, state)
        VALUES ($1, $2, $3)
        RETURNING id, name, city, state
        """,
        restaurant.name,
        restaurant.city,
        restaurant.state,
    )
    if row is None:
        raise RuntimeError("Failed to insert restaurant.")
    return row
