"""
Collaborators of the restaurant handler, as FastAPI dependencies.

Routes resolve the store and validator through these functions so tests can
swap in fakes with `app.dependency_overrides`.
"""

from __future__ import annotations

from typing import Callable, Protocol

from . import repository
from .repository import LocationCriteria
from .schemas import NewRestaurant
from .validator import is_restaurant_valid

RestaurantValidator = Callable[[NewRestaurant], bool]


class RestaurantStore(Protocol):
    async def find_by_id(self, restaurant_id: int) -> dict | None: ...

    async def find(self, criteria: LocationCriteria | None = None) -> list[dict]: ...

    async def find_by_key(self, name: str, city: str, state: str) -> dict | None: ...

    async def insert(self, restaurant: NewRestaurant) -> dict: ...


def get_restaurant_store() -> RestaurantStore:
    return repository


def get_restaurant_validator() -> RestaurantValidator:
    return is_restaurant_valid
