"""ORM models for identities: users, their staff profile, and login sessions."""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base, new_id
from app.models.enums import Role, StaffStatus


class User(Base):
    """
    Identity record used for login and hotel-scoped authorization.

    email is stored case-folded and is unique across all hotels. password_hash is
    nullable for externally provisioned accounts; such users can never log in with
    a password.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    fullname = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.STAFF.value)
    hotel_id = Column(
        String(36),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    is_approved = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    hotel = relationship("Hotel")
    staff_profile = relationship("Staff", back_populates="user", uselist=False)

    @property
    def role_enum(self) -> Role:
        return Role.parse(self.role)


class Staff(Base):
    """Staff-specific profile (phone, hire date, status); 1:1 with a User when present."""

    __tablename__ = "staff"

    id = Column(String(36), primary_key=True, default=new_id)
    fullname = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(32), nullable=True)
    hotel_id = Column(
        String(36),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(String(32), nullable=False)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    status = Column(String(16), nullable=False, default=StaffStatus.INACTIVE.value)
    hire_date = Column(Date, nullable=False, server_default=func.current_date())

    user = relationship("User", back_populates="staff_profile")


class Session(Base):
    """Opaque session token bound to a user. expires_at is NULL for non-expiring sessions."""

    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user = relationship("User")
