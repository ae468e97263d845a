"""Schemas for rooms and bookings."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, ValidationInfo, field_validator

from app.models.enums import BookingStatus, RoomStatus, RoomType
from app.schemas.common import (
    CamelModel,
    Money,
    NormalizedEmail,
    SuccessResponse,
    UpperCase,
)
from app.schemas.hotel import parse_uuid

ROOM_NUMBER_MAX_LEN = 10


class RoomCreateRequest(CamelModel):
    """Bulk room creation: every number gets the same type, rate and status."""

    room_numbers: list[str] = Field(..., min_length=1)
    type: Annotated[RoomType, UpperCase]
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    status: Annotated[RoomStatus, UpperCase] = RoomStatus.AVAILABLE

    @field_validator("room_numbers")
    @classmethod
    def validate_room_numbers(cls, v: list[str]) -> list[str]:
        cleaned = [n.strip() for n in v]
        bad = [n for n in cleaned if not 1 <= len(n) <= ROOM_NUMBER_MAX_LEN]
        if bad:
            raise ValueError(
                f"room numbers must be 1-{ROOM_NUMBER_MAX_LEN} characters: {bad}"
            )
        return cleaned


class RoomCreateResponse(SuccessResponse):
    count: int
    message: str


class RoomStatusUpdate(CamelModel):
    status: Annotated[RoomStatus, UpperCase]


class RoomOut(CamelModel):
    id: str
    hotel_id: str
    room_number: str
    type: str
    rate_per_night: Money
    status: str
    created_at: datetime | None = None


class BookingCreateRequest(CamelModel):
    """New booking. total_price is optional; when sent it must match rate x nights."""

    room_id: str
    guest_name: str = Field(..., min_length=2, max_length=255)
    guest_email: NormalizedEmail
    check_in_date: date
    check_out_date: date
    total_price: Decimal | None = Field(default=None, gt=0, max_digits=14, decimal_places=2)
    status: Annotated[BookingStatus, UpperCase] = BookingStatus.PENDING

    @field_validator("room_id")
    @classmethod
    def validate_room_id(cls, v: str) -> str:
        return parse_uuid(v, "Invalid room ID")

    @field_validator("guest_name")
    @classmethod
    def strip_guest_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Guest name is required")
        return v

    @field_validator("check_out_date")
    @classmethod
    def check_dates(cls, v: date, info: ValidationInfo) -> date:
        # check_in_date is missing from info.data when it failed its own validation.
        check_in = info.data.get("check_in_date")
        if check_in is not None and v <= check_in:
            raise ValueError("Check-out date must be after check-in date")
        return v


class BookingStatusUpdate(CamelModel):
    status: Annotated[BookingStatus, UpperCase]


class BookingOut(CamelModel):
    id: str
    room_id: str
    room_number: str | None = None
    room_type: str | None = None
    guest_name: str
    guest_email: str
    check_in_date: date
    check_out_date: date
    total_price: Money
    status: str
    created_at: datetime | None = None


class BookingCreateResponse(SuccessResponse):
    booking: BookingOut
