"""
Restaurant API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, Response

from core.db import BIGINT_MAX
from core.results import to_response

from . import schemas, service
from .dependencies import (
    RestaurantStore,
    RestaurantValidator,
    get_restaurant_store,
    get_restaurant_validator,
)

router = APIRouter()


@router.get("/restaurants", response_model=list[schemas.Restaurant])
async def list_restaurants(
    city: str | None = Query(default=None, max_length=100),
    state: str | None = Query(default=None, max_length=50),
    store: RestaurantStore = Depends(get_restaurant_store),
) -> Response:
    """
    List all restaurants, or those in one city and state.
    """
    return to_response(await service.list_restaurants(city, state, store=store))


@router.get(
    "/restaurants/{restaurant_id}",
    response_model=schemas.Restaurant,
    responses={400: {}, 404: {}},
)
async def get_restaurant(
    restaurant_id: int = Path(le=BIGINT_MAX),
    store: RestaurantStore = Depends(get_restaurant_store),
) -> Response:
    return to_response(await service.get_restaurant(restaurant_id, store=store))


@router.post(
    "/restaurants",
    status_code=201,
    response_model=schemas.Restaurant,
    responses={400: {}, 409: {"model": schemas.Restaurant}},
)
async def create_restaurant(
    payload: schemas.NewRestaurant,
    store: RestaurantStore = Depends(get_restaurant_store),
    validator: RestaurantValidator = Depends(get_restaurant_validator),
) -> Response:
    """
    Add a restaurant. An existing (name, city, state) match is returned with
    409 instead of being inserted again.
    """
    return to_response(
        await service.create_restaurant(payload, store=store, validator=validator)
    )
