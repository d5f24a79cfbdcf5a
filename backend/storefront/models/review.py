"""Product review data models."""

from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

MAX_REVIEW_IMAGES = 5

# Index is the star count.
RATING_LABELS = ["", "Poor", "Fair", "Good", "Very Good", "Excellent!"]


class ReviewBase(BaseModel):
    """Base review model."""

    productId: str = Field(..., min_length=1)
    userId: Optional[str] = None
    rating: int
    title: str
    comment: str = ""
    images: list[str] = Field(default_factory=list)


class ReviewCreate(ReviewBase):
    """Review submission with the same rules as the review form."""

    @field_validator("rating")
    @classmethod
    def check_rating(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("Please select a rating")
        return v

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        if len(v) < 5:
            raise ValueError("Title must be at least 5 characters")
        if len(v) > 100:
            raise ValueError("Title must not exceed 100 characters")
        return v

    @field_validator("comment")
    @classmethod
    def check_comment(cls, v: str) -> str:
        v = v.strip()
        if v and len(v) < 10:
            raise ValueError("Comment must be at least 10 characters")
        if len(v) > 1000:
            raise ValueError("Comment must not exceed 1000 characters")
        return v

    @field_validator("images")
    @classmethod
    def check_images(cls, v: list[str]) -> list[str]:
        if len(v) > MAX_REVIEW_IMAGES:
            raise ValueError(f"Maximum {MAX_REVIEW_IMAGES} images allowed")
        return v


class ReviewInDB(ReviewBase):
    """Review model as stored in database."""

    createdAt: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RatingSummary(BaseModel):
    """Aggregate rating for one product."""

    productId: str
    average: float = Field(0.0, ge=0, le=5)
    count: int = 0
    distribution: dict[int, int] = Field(
        default_factory=lambda: {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    )
    label: str = ""
