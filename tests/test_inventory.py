"""Unit tests for app.services.inventory: date ranges, pricing, duplicate rooms, tenant scoping."""

import unittest
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from app.models import Booking, Room
from app.models.enums import BookingStatus, RoomStatus, RoomType
from app.schemas.inventory import BookingCreateRequest
from app.services import inventory
from app.services.errors import ConflictError, NotFoundError, ValidationError

HOTEL_A = "aaaaaaaa-aaaa-4aaa-8aaa-aaaaaaaaaaaa"
HOTEL_B = "bbbbbbbb-bbbb-4bbb-8bbb-bbbbbbbbbbbb"
ROOM_ID = "cccccccc-cccc-4ccc-8ccc-cccccccccccc"


def _room(hotel_id: str = HOTEL_A, rate: str = "50000") -> Room:
    return Room(
        id=ROOM_ID,
        hotel_id=hotel_id,
        room_number="101",
        type="DELUXE",
        rate_per_night=Decimal(rate),
        status="AVAILABLE",
    )


def _booking_request(**overrides: object) -> BookingCreateRequest:
    data = {
        "roomId": ROOM_ID,
        "guestName": "Grace Hopper",
        "guestEmail": "Grace@Example.com",
        "checkInDate": "2025-01-20",
        "checkOutDate": "2025-01-22",
    }
    data.update(overrides)
    return BookingCreateRequest.model_validate(data)


class TestNightsAndPrice(unittest.TestCase):
    def test_one_night_is_valid(self) -> None:
        self.assertEqual(inventory.nights(date(2025, 1, 20), date(2025, 1, 21)), 1)

    def test_same_day_is_invalid(self) -> None:
        with self.assertRaises(ValidationError):
            inventory.nights(date(2025, 1, 20), date(2025, 1, 20))

    def test_reversed_range_is_invalid(self) -> None:
        with self.assertRaises(ValidationError):
            inventory.nights(date(2025, 1, 22), date(2025, 1, 20))

    def test_price_is_rate_times_nights(self) -> None:
        total = inventory.compute_total_price(
            Decimal("50000"), date(2025, 1, 20), date(2025, 1, 22)
        )
        self.assertEqual(total, Decimal("100000"))


class TestAddRooms(unittest.TestCase):
    def test_inserts_all_rooms_once(self) -> None:
        store = MagicMock()
        store.find_room_numbers.return_value = []
        rooms = inventory.add_rooms(
            store, HOTEL_A, ["101", "102", "101"], RoomType.SUITE, Decimal("50000")
        )
        self.assertEqual([r.room_number for r in rooms], ["101", "102"])
        self.assertTrue(all(r.status == RoomStatus.AVAILABLE.value for r in rooms))
        self.assertTrue(all(r.hotel_id == HOTEL_A for r in rooms))
        store.add.assert_called_once()
        store.commit.assert_called_once()

    def test_duplicates_reject_whole_batch_and_name_every_collision(self) -> None:
        store = MagicMock()
        store.find_room_numbers.return_value = ["101", "103"]
        with self.assertRaises(ConflictError) as ctx:
            inventory.add_rooms(
                store, HOTEL_A, ["101", "102", "103"], RoomType.SINGLE, Decimal("100")
            )
        self.assertIn("101", ctx.exception.message)
        self.assertIn("103", ctx.exception.message)
        self.assertEqual(ctx.exception.details, {"duplicates": ["101", "103"]})
        store.add.assert_not_called()
        store.commit.assert_not_called()

    def test_constraint_race_still_reports_duplicates(self) -> None:
        store = MagicMock()
        store.find_room_numbers.side_effect = [[], ["102"]]
        store.commit.side_effect = ConflictError("Resource already exists")
        with self.assertRaises(ConflictError) as ctx:
            inventory.add_rooms(store, HOTEL_A, ["101", "102"], RoomType.DOUBLE, Decimal("10"))
        self.assertEqual(ctx.exception.message, "Room numbers already exist: 102")

    def test_non_positive_price_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            inventory.add_rooms(MagicMock(), HOTEL_A, ["101"], RoomType.SINGLE, Decimal("0"))


class TestCreateBooking(unittest.TestCase):
    def test_price_computed_and_status_defaults_to_pending(self) -> None:
        store = MagicMock()
        store.get_room.return_value = _room()
        booking = inventory.create_booking(store, HOTEL_A, _booking_request())
        self.assertEqual(booking.total_price, Decimal("100000"))
        self.assertEqual(booking.status, BookingStatus.PENDING.value)
        self.assertEqual(booking.guest_email, "grace@example.com")
        self.assertEqual(booking.hotel_id, HOTEL_A)
        store.commit.assert_called_once()

    def test_matching_client_price_accepted(self) -> None:
        store = MagicMock()
        store.get_room.return_value = _room()
        booking = inventory.create_booking(
            store, HOTEL_A, _booking_request(totalPrice=100000)
        )
        self.assertEqual(booking.total_price, Decimal("100000"))

    def test_mismatched_client_price_rejected(self) -> None:
        store = MagicMock()
        store.get_room.return_value = _room()
        with self.assertRaises(ValidationError):
            inventory.create_booking(store, HOTEL_A, _booking_request(totalPrice=1))
        store.add.assert_not_called()

    def test_room_of_other_hotel_is_not_found(self) -> None:
        store = MagicMock()
        store.get_room.return_value = _room(hotel_id=HOTEL_B)
        with self.assertRaises(NotFoundError):
            inventory.create_booking(store, HOTEL_A, _booking_request())
        store.add.assert_not_called()

    def test_missing_room_is_not_found(self) -> None:
        store = MagicMock()
        store.get_room.return_value = None
        with self.assertRaises(NotFoundError):
            inventory.create_booking(store, HOTEL_A, _booking_request())


class TestBookingRequestSchema(unittest.TestCase):
    def test_checkout_must_follow_checkin(self) -> None:
        from pydantic import ValidationError as SchemaError

        with self.assertRaises(SchemaError):
            _booking_request(checkOutDate="2025-01-20")

    def test_lowercase_status_accepted(self) -> None:
        self.assertIs(_booking_request(status="confirmed").status, BookingStatus.CONFIRMED)


class TestBookingStatus(unittest.TestCase):
    def _store_with(self, status: BookingStatus) -> MagicMock:
        store = MagicMock()
        store.get_booking.return_value = Booking(
            id="b1", hotel_id=HOTEL_A, room_id=ROOM_ID, status=status.value
        )
        return store

    def test_pending_can_be_confirmed(self) -> None:
        store = self._store_with(BookingStatus.PENDING)
        booking = inventory.update_booking_status(store, HOTEL_A, "b1", BookingStatus.CONFIRMED)
        self.assertEqual(booking.status, "CONFIRMED")

    def test_cancelled_is_terminal(self) -> None:
        store = self._store_with(BookingStatus.CANCELLED)
        with self.assertRaises(ValidationError):
            inventory.update_booking_status(store, HOTEL_A, "b1", BookingStatus.CONFIRMED)

    def test_other_hotel_booking_not_found(self) -> None:
        store = self._store_with(BookingStatus.PENDING)
        with self.assertRaises(NotFoundError):
            inventory.update_booking_status(store, HOTEL_B, "b1", BookingStatus.CANCELLED)


if __name__ == "__main__":
    unittest.main()
