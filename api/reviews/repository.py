"""
Review persistence (raw SQL).
"""

from __future__ import annotations

from core import db

from .schemas import NewReview


async def find_by_id(review_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, restaurant_id, reviewer_email, rating, content
        FROM reviews
        WHERE id = $1
        """,
        review_id,
    )


async def find_by_reviewer(reviewer_email: str) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, restaurant_id, reviewer_email, rating, content
        FROM reviews
        WHERE reviewer_email = $1
        ORDER BY id ASC
        """,
        reviewer_email,
    )


async def insert(review: NewReview) -> int:
    """
    Insert a review and return its id, or 0 when the restaurant it points at
    does not exist.
    """
    row = await db.fetch_one(
        """
        INSERT INTO reviews (restaurant_id, reviewer_email, rating, content)
        SELECT r.id, $2::text, $3::double precision, $4::text
        FROM restaurants r
        WHERE r.id = $1
        RETURNING id
        """,
        review.restaurant_id,
        review.reviewer_email,
        review.rating,
        review.content,
    )
    return int(row["id"]) if row is not None else 0


async def delete_by_id(review_id: int) -> int:
    command_status = await db.execute(
        """
        DELETE FROM reviews
        WHERE id = $1
        """,
        review_id,
    )
    return db.rows_affected(command_status)
