"""
Business rules for a restaurant that has not been stored yet.
"""

from __future__ import annotations

from .schemas import NewRestaurant


def _is_blank(value: str | None) -> bool:
    return not (value or "").strip()


def is_restaurant_valid(restaurant: NewRestaurant) -> bool:
    return not (
        _is_blank(restaurant.name)
        or _is_blank(restaurant.city)
        or _is_blank(restaurant.state)
    )
