"""
Review handler: request decisions for the review endpoints.
"""

from __future__ import annotations

import logging

from core import results
from core.results import HandlerResult
from restaurants.dependencies import RestaurantStore

from . import schemas
from .dependencies import ReviewStore, ReviewValidator

logger = logging.getLogger(__name__)

INVALID_REVIEW_DETAIL = (
    "Reviews require a valid restaurant, reviewer email, and a rating between 0 and 5."
)


def _to_review(row: dict) -> schemas.Review:
    content = row.get("content")
    return schemas.Review(
        id=int(row["id"]),
        restaurant_id=int(row["restaurant_id"]),
        reviewer_email=str(row["reviewer_email"]),
        rating=float(row["rating"]),
        content=str(content) if content is not None else None,
    )


async def get_review(review_id: int, *, store: ReviewStore) -> HandlerResult:
    if review_id <= 0:
        raise results.bad_request("id must be greater than 0")

    row = await store.find_by_id(review_id)
    if row is None:
        return results.not_found()
    return results.ok(_to_review(row))


async def list_reviews_by_reviewer(reviewer_email: str | None, *, store: ReviewStore) -> HandlerResult:
    reviewer_email = (reviewer_email or "").strip()
    if not reviewer_email:
        raise results.bad_request("reviewerEmail is required.")

    rows = await store.find_by_reviewer(reviewer_email)
    return results.ok([_to_review(row) for row in rows])


async def create_review(
    payload: schemas.NewReview,
    *,
    store: ReviewStore,
    restaurants: RestaurantStore,
    validator: ReviewValidator,
) -> HandlerResult:
    """
    A review must pass the validator and point at a stored restaurant, or it
    is a 400. The response body is only whether the review was stored; a
    zero id from the store means it was not (the restaurant was deleted
    between the lookup and the insert).
    """
    if not validator(payload):
        logger.info("review_rejected reason=invalid restaurant_id=%s", payload.restaurant_id)
        raise results.bad_request(INVALID_REVIEW_DETAIL)

    if await restaurants.find_by_id(payload.restaurant_id) is None:
        logger.info("review_rejected reason=unknown_restaurant restaurant_id=%s", payload.restaurant_id)
        raise results.bad_request(INVALID_REVIEW_DETAIL)

    review_id = await store.insert(payload)
    if review_id == 0:
        logger.warning("review_not_inserted restaurant_id=%s", payload.restaurant_id)
        return results.created(False)

    logger.info("review_created id=%s restaurant_id=%s", review_id, payload.restaurant_id)
    return results.created(True, location=f"/reviews/{review_id}")


async def delete_review(review_id: int, *, store: ReviewStore) -> HandlerResult:
    if review_id <= 0:
        raise results.bad_request("reviewId is required.")

    deleted = await store.delete_by_id(review_id)
    if deleted != 1:
        logger.info("review_delete_missing review_id=%s rows=%s", review_id, deleted)
        return results.not_found(False)

    logger.info("review_deleted review_id=%s", review_id)
    return results.ok(True)
