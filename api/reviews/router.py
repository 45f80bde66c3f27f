"""
Review API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, Response

from core.db import BIGINT_MAX
from core.results import to_response
from restaurants.dependencies import RestaurantStore, get_restaurant_store

from . import schemas, service
from .dependencies import (
    ReviewStore,
    ReviewValidator,
    get_review_store,
    get_review_validator,
)

router = APIRouter()


@router.get(
    "/reviews/{review_id}",
    response_model=schemas.Review,
    responses={400: {}, 404: {}},
)
async def get_review(
    review_id: int = Path(le=BIGINT_MAX),
    store: ReviewStore = Depends(get_review_store),
) -> Response:
    return to_response(await service.get_review(review_id, store=store))


@router.get("/reviews", response_model=list[schemas.Review], responses={400: {}})
async def list_reviews(
    reviewer_email: str | None = Query(default=None, alias="reviewerEmail", max_length=320),
    store: ReviewStore = Depends(get_review_store),
) -> Response:
    """
    All reviews written by one reviewer.
    """
    return to_response(await service.list_reviews_by_reviewer(reviewer_email, store=store))


@router.post("/reviews", status_code=201, response_model=bool, responses={400: {}})
async def create_review(
    payload: schemas.NewReview,
    store: ReviewStore = Depends(get_review_store),
    restaurants: RestaurantStore = Depends(get_restaurant_store),
    validator: ReviewValidator = Depends(get_review_validator),
) -> Response:
    """
    Add a review. The body is `true` when it was stored, `false` otherwise.
    """
    return to_response(
        await service.create_review(
            payload,
            store=store,
            restaurants=restaurants,
            validator=validator,
        )
    )


@router.delete("/reviews", response_model=bool, responses={400: {}, 404: {}})
async def delete_review(
    # A missing reviewId is treated like 0 and rejected by the handler.
    review_id: int = Query(default=0, alias="reviewId", le=BIGINT_MAX),
    store: ReviewStore = Depends(get_review_store),
) -> Response:
    return to_response(await service.delete_review(review_id, store=store))
