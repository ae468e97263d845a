"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.hotel import Hotel
from app.models.inventory import Booking, Room
from app.models.user import Session, Staff, User

__all__ = ["Base", "Booking", "Hotel", "Room", "Session", "Staff", "User"]
