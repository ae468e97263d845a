"""SQLAlchemy declarative Base and shared model configuration."""

import uuid

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def new_id() -> str:
    """Primary key factory: random UUID4 rendered as a string."""
    return str(uuid.uuid4())
