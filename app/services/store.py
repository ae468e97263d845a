"""Credential store adapter: typed reads and writes over the ORM session."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession
from sqlalchemy.orm import joinedload

from app.models import Booking, Hotel, Room, Session, Staff, User
from app.services.errors import ConflictError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CredentialStore:
    """
    Thin adapter over a SQLAlchemy session.

    Reads return ORM rows or None; writes are staged with add() and made durable by
    commit(). Uniqueness is enforced by database constraints: commit() turns an
    IntegrityError into ConflictError after rolling back, so a pre-check that lost a
    race still yields a clean 409.
    """

    def __init__(self, db: DbSession) -> None:
        self.db = db

    # Users / staff

    def get_user(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def get_hotel_user(self, hotel_id: str, user_id: str) -> User | None:
        return (
            self.db.query(User)
            .filter(User.id == user_id, User.hotel_id == hotel_id)
            .first()
        )

    def list_hotel_users(self, hotel_id: str) -> list[User]:
        return (
            self.db.query(User)
            .filter(User.hotel_id == hotel_id)
            .order_by(User.created_at.desc(), User.id)
            .all()
        )

    def get_staff_profile(self, user_id: str) -> Staff | None:
        return self.db.query(Staff).filter(Staff.user_id == user_id).first()

    # Hotels

    def get_hotel(self, hotel_id: str) -> Hotel | None:
        return self.db.get(Hotel, hotel_id)

    # Rooms

    def get_room(self, room_id: str) -> Room | None:
        return self.db.get(Room, room_id)

    def find_room_numbers(self, hotel_id: str, room_numbers: list[str]) -> list[str]:
        """Return which of room_numbers already exist in the hotel, sorted."""
        if not room_numbers:
            return []
        rows = (
            self.db.query(Room.room_number)
            .filter(Room.hotel_id == hotel_id, Room.room_number.in_(room_numbers))
            .all()
        )
        return sorted(r.room_number for r in rows)

    def list_rooms(self, hotel_id: str) -> list[Room]:
        return (
            self.db.query(Room)
            .filter(Room.hotel_id == hotel_id)
            .order_by(Room.room_number.asc())
            .all()
        )

    # Bookings

    def get_booking(self, booking_id: str) -> Booking | None:
        return (
            self.db.query(Booking)
            .options(joinedload(Booking.room))
            .filter(Booking.id == booking_id)
            .first()
        )

    def list_bookings(self, hotel_id: str) -> list[Booking]:
        return (
            self.db.query(Booking)
            .options(joinedload(Booking.room))
            .filter(Booking.hotel_id == hotel_id)
            .order_by(Booking.check_in.desc(), Booking.created_at.desc(), Booking.id)
            .all()
        )

    # Sessions

    def get_session(self, session_id: str) -> Session | None:
        return self.db.get(Session, session_id)

    def delete_session(self, session_id: str) -> int:
        return (
            self.db.query(Session)
            .filter(Session.id == session_id)
            .delete(synchronize_session=False)
        )

    def delete_user_sessions(self, user_id: str) -> int:
        return (
            self.db.query(Session)
            .filter(Session.user_id == user_id)
            .delete(synchronize_session=False)
        )

    def delete_sessions_expired_before(self, cutoff) -> int:
        return (
            self.db.query(Session)
            .filter(Session.expires_at.is_not(None), Session.expires_at < cutoff)
            .delete(synchronize_session=False)
        )

    # Unit of work

    def add(self, *rows: object) -> None:
        self.db.add_all(rows)

    def commit(self, conflict_message: str = "Resource already exists") -> None:
        """Commit staged changes; a uniqueness violation becomes ConflictError."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Commit rejected by constraint: %s", e.orig)
            raise ConflictError(conflict_message) from e
