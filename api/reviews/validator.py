"""
Business rules for a review that has not been stored yet.

Whether the referenced restaurant still exists is decided by the store at
insert time; here it only has to be a usable id.
"""

from __future__ import annotations

from .schemas import MAX_RATING, MIN_RATING, NewReview


def is_review_valid(review: NewReview) -> bool:
    if review.restaurant_id is None or review.restaurant_id <= 0:
        return False
    if not (review.reviewer_email or "").strip():
        return False
    if review.rating is None:
        return False
    return MIN_RATING <= review.rating <= MAX_RATING
