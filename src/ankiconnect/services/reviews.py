"""Review log operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from ankiconnect.models import Review
from ankiconnect.services.base import ServiceBase


class ReviewService(ServiceBase):
    """Read and write the review log."""

    def count_reviewed_today(self) -> int:
        return self._invoke("getNumCardsReviewedToday")

    def get_deck_reviews(self, deck: str, start_id: int) -> list[Review]:
        """Return the reviews of a deck logged after ``start_id``.

        Args:
            deck: Deck name
            start_id: Review ID (epoch milliseconds) to start after

        Returns:
            Reviews in the order the bridge lists them
        """
        rows = self._invoke("cardReviews", {"deck": deck, "startID": start_id})
        return [Review.from_list(row) for row in rows]

    def get_latest_review_id(self, deck: str) -> int:
        """Return the newest review ID of a deck, or 0 if it was never reviewed."""
        return self._invoke("getLatestReviewID", {"deck": deck})

    def insert_reviews(self, reviews: Iterable[Review]) -> Self:
        self._invoke("insertReviews", {"reviews": [r.to_list() for r in reviews]})
        return self
