"""ORM models for room inventory and bookings."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base, new_id
from app.models.enums import BookingStatus, RoomStatus


class Room(Base):
    """A bookable room. (hotel_id, room_number) is unique."""

    __tablename__ = "rooms"
    __table_args__ = (
        UniqueConstraint("hotel_id", "room_number", name="uq_rooms_hotel_room_number"),
        UniqueConstraint("id", "hotel_id", name="uq_rooms_id_hotel"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    hotel_id = Column(
        String(36),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_number = Column(String(10), nullable=False)
    type = Column(String(16), nullable=False)
    rate_per_night = Column(Numeric(12, 2), nullable=False)
    status = Column(String(16), nullable=False, default=RoomStatus.AVAILABLE.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class Booking(Base):
    """A guest stay in one room. check_out is strictly after check_in."""

    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("check_out > check_in", name="ck_bookings_date_range"),
        CheckConstraint("total_price >= 0", name="ck_bookings_total_price"),
        # A booking's room must belong to the booking's hotel.
        ForeignKeyConstraint(
            ["room_id", "hotel_id"],
            ["rooms.id", "rooms.hotel_id"],
            name="fk_bookings_room_hotel",
            ondelete="CASCADE",
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    hotel_id = Column(
        String(36),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id = Column(String(36), nullable=False, index=True)
    guest_name = Column(String(255), nullable=False)
    guest_email = Column(String(320), nullable=False)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    total_price = Column(Numeric(14, 2), nullable=False)
    status = Column(String(16), nullable=False, default=BookingStatus.PENDING.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    room = relationship("Room")
