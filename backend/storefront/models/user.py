"""Customer account models."""

from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    """Base customer model."""

    userId: str = Field(..., min_length=1, description="Unique user identifier")
    firstName: str = Field(..., min_length=1, max_length=100)
    lastName: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, pattern=r"^\+?1?\d{9,15}$")
    role: str = Field("customer", pattern="^(customer|admin)$")


class UserCreate(UserBase):
    """Customer creation model."""

    pass


class UserInDB(UserBase):
    """Customer as stored in database."""

    createdAt: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updatedAt: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {
        "json_schema_extra": {
            "example": {
                "userId": "user_001",
                "firstName": "Maya",
                "lastName": "Patel",
                "email": "maya.patel@example.com",
                "phone": "+1234567890",
                "role": "customer",
                "createdAt": "2024-01-01T00:00:00Z",
                "updatedAt": "2024-01-01T00:00:00Z",
            }
        }
    }


class UserResponse(UserBase):
    """Customer response model."""

    createdAt: datetime
    updatedAt: datetime
