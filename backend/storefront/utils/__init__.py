"""Utilities package."""

from storefront.utils.helpers import generate_uuid, round_money, utc_now
from storefront.utils.logger import setup_logging

__all__ = [
    "setup_logging",
    "generate_uuid",
    "round_money",
    "utc_now",
]
