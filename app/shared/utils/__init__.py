"""Shared utilities: datetime, asset URLs."""

from app.shared.utils.asset_urls import rewrite_image_url
from app.shared.utils.datetime import (
    ensure_utc,
    utc_now,
)

__all__ = [
    "rewrite_image_url",
    "utc_now",
    "ensure_utc",
]
