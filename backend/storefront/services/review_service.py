"""Review service for product feedback and rating summaries."""

import logging
from collections.abc import Iterable
from typing import Optional

from storefront.database.mongodb import mongodb
from storefront.exceptions import NotFoundError
from storefront.models.review import RATING_LABELS, RatingSummary, ReviewCreate, ReviewInDB

logger = logging.getLogger(__name__)


def summarize_ratings(product_id: str, reviews: Iterable[ReviewInDB]) -> RatingSummary:
    """Average, count and star distribution for a product's reviews."""
    distribution = {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    total = 0
    count = 0
    for review in reviews:
        if review.rating in distribution:
            distribution[review.rating] += 1
            total += review.rating
            count += 1

    if not count:
        return RatingSummary(productId=product_id, distribution=distribution)

    average = round(total / count, 1)
    return RatingSummary(
        productId=product_id,
        average=average,
        count=count,
        distribution=distribution,
        label=RATING_LABELS[int(average + 0.5)],
    )


class ReviewService:
    """Review service for handling review-related operations."""

    @staticmethod
    async def create_review(review: ReviewCreate) -> ReviewInDB:
        """Submit a review for an existing product."""
        if await mongodb.get_product(review.productId) is None:
            raise NotFoundError(f"Product not found: {review.productId}")

        created = await mongodb.create_review(review)
        logger.info("Review stored for %s: %d stars", created.productId, created.rating)
        return created

    @staticmethod
    async def list_reviews(product_id: Optional[str] = None) -> list[ReviewInDB]:
        """List reviews, newest first."""
        return await mongodb.list_reviews(product_id)

    @staticmethod
    async def rating_summary(product_id: str) -> RatingSummary:
        """Aggregate rating for a product."""
        reviews = await mongodb.list_reviews(product_id)
        return summarize_ratings(product_id, reviews)


# Global review service instance
review_service = ReviewService()
