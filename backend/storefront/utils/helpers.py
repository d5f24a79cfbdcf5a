"""Utility helper functions."""

import uuid
from datetime import UTC, datetime


def generate_uuid() -> str:
    """Generate a unique UUID."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def round_money(amount: float) -> float:
    """Round a monetary amount to cents."""
    return round(amount, 2)
