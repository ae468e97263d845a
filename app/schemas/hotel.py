"""Schemas for hotel lookups."""

import uuid
from datetime import datetime

from app.schemas.common import CamelModel


def parse_uuid(value: str, message: str = "Invalid ID format") -> str:
    """Return value in canonical UUID form, or raise ValueError(message)."""
    try:
        return str(uuid.UUID(str(value).strip()))
    except (ValueError, AttributeError, TypeError):
        raise ValueError(message) from None


class HotelPublic(CamelModel):
    """Fields safe to show to anyone holding an invite link."""

    id: str
    name: str
    address: str | None = None
    room_count: int


class HotelDetail(HotelPublic):
    """Hotel as seen by its own members."""

    hotel_type: str | None = None
    subscription_status: str
    subscription_tier: str | None = None
    created_at: datetime
