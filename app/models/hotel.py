"""ORM model for hotels (the tenant boundary)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base, new_id


class Hotel(Base):
    """
    A tenant. Every room, booking and non-owner user belongs to exactly one hotel.

    room_count and the subscription fields are informational only.
    """

    __tablename__ = "hotels"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    address = Column(String(1024), nullable=True)
    hotel_type = Column(String(64), nullable=True)
    room_count = Column(Integer, nullable=False, default=0)
    subscription_status = Column(String(32), nullable=False, default="trial")
    subscription_tier = Column(String(32), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
