"""Room inventory and booking integrity: unique room numbers, date ranges, stay pricing, tenant ownership."""

import logging
from datetime import date
from decimal import Decimal

from app.models import Booking, Room
from app.models.enums import BookingStatus, RoomStatus, RoomType
from app.schemas.inventory import BookingCreateRequest
from app.services.errors import ConflictError, NotFoundError, ValidationError
from app.services.store import CredentialStore

logger = logging.getLogger(__name__)

ROOM_NOT_FOUND_MESSAGE = "Room not found or not part of your hotel"
BOOKING_NOT_FOUND_MESSAGE = "Booking not found"

# Allowed booking status changes. CANCELLED is terminal.
BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}


def _duplicate_message(numbers: list[str]) -> str:
    return f"Room numbers already exist: {', '.join(numbers)}"


def nights(check_in: date, check_out: date) -> int:
    """Number of nights in [check_in, check_out). Raises ValidationError unless check_out > check_in."""
    count = (check_out - check_in).days
    if count < 1:
        raise ValidationError(
            "Check-out date must be after check-in date",
            details=[{"field": "checkOutDate", "message": "must be after checkInDate"}],
        )
    return count


def compute_total_price(rate_per_night: Decimal, check_in: date, check_out: date) -> Decimal:
    return Decimal(rate_per_night) * nights(check_in, check_out)


def add_rooms(
    store: CredentialStore,
    hotel_id: str,
    room_numbers: list[str],
    room_type: RoomType,
    price: Decimal,
    status: RoomStatus = RoomStatus.AVAILABLE,
) -> list[Room]:
    """
    Insert rooms for every number, all or nothing.

    Repeated numbers within the request are collapsed. If any number already exists
    in the hotel, nothing is written and the ConflictError names every collision.
    The (hotel_id, room_number) unique constraint settles concurrent inserts.
    """
    if price <= 0:
        raise ValidationError("Price must be positive")
    unique_numbers = list(dict.fromkeys(room_numbers))
    if not unique_numbers:
        raise ValidationError("At least one room number required")

    existing = store.find_room_numbers(hotel_id, unique_numbers)
    if existing:
        raise ConflictError(_duplicate_message(existing), details={"duplicates": existing})

    rooms = [
        Room(
            hotel_id=hotel_id,
            room_number=number,
            type=room_type.value,
            rate_per_night=price,
            status=status.value,
        )
        for number in unique_numbers
    ]
    store.add(*rooms)
    try:
        store.commit()
    except ConflictError as e:
        # Lost a race with another writer; report what is there now.
        existing = store.find_room_numbers(hotel_id, unique_numbers)
        raise ConflictError(
            _duplicate_message(existing) if existing else e.message,
            details={"duplicates": existing},
        ) from e
    logger.info("Rooms added: hotel_id=%s count=%s", hotel_id, len(rooms))
    return rooms


def list_rooms(store: CredentialStore, hotel_id: str) -> list[Room]:
    return store.list_rooms(hotel_id)


def get_room(store: CredentialStore, hotel_id: str, room_id: str) -> Room:
    """Fetch a room of the hotel; rooms of other hotels are reported as missing."""
    room = store.get_room(room_id)
    if room is None or room.hotel_id != hotel_id:
        raise NotFoundError(ROOM_NOT_FOUND_MESSAGE)
    return room


def update_room_status(
    store: CredentialStore, hotel_id: str, room_id: str, status: RoomStatus
) -> Room:
    room = get_room(store, hotel_id, room_id)
    room.status = status.value
    store.commit()
    return room


def create_booking(
    store: CredentialStore, hotel_id: str, body: BookingCreateRequest
) -> Booking:
    """
    Create a booking in the hotel.

    The total is always rate_per_night x nights. A client-supplied total_price that
    differs is rejected rather than stored.
    """
    stay_nights = nights(body.check_in_date, body.check_out_date)
    room = get_room(store, hotel_id, body.room_id)
    total = compute_total_price(room.rate_per_night, body.check_in_date, body.check_out_date)
    if body.total_price is not None and Decimal(body.total_price) != total:
        raise ValidationError(
            "Total price does not match the room rate for this stay",
            details=[
                {
                    "field": "totalPrice",
                    "message": f"expected {total} ({stay_nights} nights x {room.rate_per_night})",
                }
            ],
        )

    booking = Booking(
        hotel_id=hotel_id,
        room_id=room.id,
        guest_name=body.guest_name,
        guest_email=body.guest_email.strip().lower(),
        check_in=body.check_in_date,
        check_out=body.check_out_date,
        total_price=total,
        status=(body.status or BookingStatus.PENDING).value,
    )
    store.add(booking)
    store.commit(conflict_message="Booking could not be stored")
    logger.info(
        "Booking created: hotel_id=%s booking_id=%s room_id=%s nights=%s",
        hotel_id,
        booking.id,
        room.id,
        stay_nights,
    )
    return booking


def list_bookings(store: CredentialStore, hotel_id: str) -> list[Booking]:
    return store.list_bookings(hotel_id)


def get_booking(store: CredentialStore, hotel_id: str, booking_id: str) -> Booking:
    booking = store.get_booking(booking_id)
    if booking is None or booking.hotel_id != hotel_id:
        raise NotFoundError(BOOKING_NOT_FOUND_MESSAGE)
    return booking


def update_booking_status(
    store: CredentialStore, hotel_id: str, booking_id: str, status: BookingStatus
) -> Booking:
    booking = get_booking(store, hotel_id, booking_id)
    current = BookingStatus(booking.status)
    if status == current:
        return booking
    if status not in BOOKING_TRANSITIONS[current]:
        raise ValidationError(
            f"Cannot change booking status from {current.value} to {status.value}"
        )
    booking.status = status.value
    store.commit()
    logger.info("Booking status: booking_id=%s %s -> %s", booking.id, current.value, status.value)
    return booking
