"""Booking endpoints, scoped to the caller's hotel."""

from fastapi import APIRouter, status

from app.api.v1.deps import HotelMember, Store
from app.models import Booking
from app.schemas.inventory import (
    BookingCreateRequest,
    BookingCreateResponse,
    BookingOut,
    BookingStatusUpdate,
)
from app.services import inventory

router = APIRouter()


def _to_out(booking: Booking) -> BookingOut:
    room = booking.room
    return BookingOut(
        id=booking.id,
        room_id=booking.room_id,
        room_number=room.room_number if room else None,
        room_type=room.type if room else None,
        guest_name=booking.guest_name,
        guest_email=booking.guest_email,
        check_in_date=booking.check_in,
        check_out_date=booking.check_out,
        total_price=booking.total_price,
        status=booking.status,
        created_at=booking.created_at,
    )


@router.get("", response_model=list[BookingOut])
def list_bookings(identity: HotelMember, store: Store) -> list[BookingOut]:
    """All bookings of the caller's hotel, latest check-in first."""
    return [_to_out(b) for b in inventory.list_bookings(store, identity.hotel_id)]


@router.post("", response_model=BookingCreateResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    body: BookingCreateRequest,
    identity: HotelMember,
    store: Store,
) -> BookingCreateResponse:
    """
    Book a room of the caller's hotel.

    The total price is computed as nightly rate x nights; a totalPrice in the body
    is optional and must match. 404 when the room belongs to another hotel.
    """
    booking = inventory.create_booking(store, identity.hotel_id, body)
    return BookingCreateResponse(booking=_to_out(booking))


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: str, identity: HotelMember, store: Store) -> BookingOut:
    return _to_out(inventory.get_booking(store, identity.hotel_id, booking_id))


@router.patch("/{booking_id}", response_model=BookingOut)
def update_booking(
    booking_id: str,
    body: BookingStatusUpdate,
    identity: HotelMember,
    store: Store,
) -> BookingOut:
    booking = inventory.update_booking_status(store, identity.hotel_id, booking_id, body.status)
    return _to_out(booking)
