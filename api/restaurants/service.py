"""
Restaurant handler: request decisions for the restaurant endpoints.

Each operation checks its input, consults the store and returns a
`HandlerResult`. Bad input is raised as a 400 before the store is touched.

Create runs: validate -> look up (name, city, state) -> insert. The lookup
and the insert are separate store calls, so two concurrent creates of the
same restaurant can both insert unless the store itself rejects the second.
"""

from __future__ import annotations

import logging

from core import results
from core.results import HandlerResult

from . import schemas
from .dependencies import RestaurantStore, RestaurantValidator
from .repository import LocationCriteria

logger = logging.getLogger(__name__)

INVALID_RESTAURANT_DETAIL = "Restaurants require a nonblank name, city, and state."
LOCATION_PAIR_DETAIL = "City and state must be supplied together, or neither."


def _optional(value: str | None) -> str | None:
    """
    Blank query values count as absent.
    """
    value = (value or "").strip()
    return value or None


def _to_restaurant(row: dict) -> schemas.Restaurant:
    return schemas.Restaurant(
        id=int(row["id"]),
        name=str(row["name"]),
        city=str(row["city"]),
        state=str(row["state"]),
    )


async def list_restaurants(
    city: str | None = None,
    state: str | None = None,
    *,
    store: RestaurantStore,
) -> HandlerResult:
    city, state = _optional(city), _optional(state)
    if (city is None) != (state is None):
        raise results.bad_request(LOCATION_PAIR_DETAIL)

    criteria = LocationCriteria(city=city, state=state) if city and state else None
    rows = await store.find(criteria)
    logger.debug("restaurants_listed city=%s state=%s count=%s", city, state, len(rows))
    return results.ok([_to_restaurant(row) for row in rows])


async def get_restaurant(restaurant_id: int, *, store: RestaurantStore) -> HandlerResult:
    if restaurant_id <= 0:
        raise results.bad_request("id must be greater than 0")

    row = await store.find_by_id(restaurant_id)
    if row is None:
        return results.not_found()
    return results.ok(_to_restaurant(row))


async def create_restaurant(
    payload: schemas.NewRestaurant,
    *,
    store: RestaurantStore,
    validator: RestaurantValidator,
) -> HandlerResult:
    if not validator(payload):
        logger.info("restaurant_rejected reason=invalid")
        raise results.bad_request(INVALID_RESTAURANT_DETAIL)

    existing = await store.find_by_key(payload.name, payload.city, payload.state)
    if existing is not None:
        restaurant = _to_restaurant(existing)
        logger.info("restaurant_duplicate id=%s", restaurant.id)
        return results.conflict(restaurant)

    restaurant = _to_restaurant(await store.insert(payload))
    logger.info("restaurant_created id=%s", restaurant.id)
    return results.created(restaurant, location=f"/restaurants/{restaurant.id}")
