"""Enumerations shared by ORM models, schemas and services."""

from enum import Enum


class Role(str, Enum):
    """Canonical user role. Compare roles only through this type."""

    OWNER = "owner"
    MANAGER = "manager"
    STAFF = "staff"
    FRONTDESK = "frontdesk"
    CLEANER = "cleaner"

    @classmethod
    def parse(cls, value: "str | Role") -> "Role":
        """Case-insensitive lookup; raises ValueError for unknown roles."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for role in cls:
            if role.value == normalized:
                return role
        raise ValueError(f"Unknown role: {value!r}")

    def is_one_of(self, *roles: "Role") -> bool:
        return self in roles


# Roles a staff member may pick when signing up through an invite link.
STAFF_SIGNUP_ROLES = (Role.STAFF, Role.MANAGER, Role.FRONTDESK, Role.CLEANER)

# Roles allowed to approve staff and change their role.
APPROVER_ROLES = (Role.OWNER, Role.MANAGER)


class StaffStatus(str, Enum):
    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"


class RoomType(str, Enum):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    STANDARD = "STANDARD"
    SUITE = "SUITE"
    DELUXE = "DELUXE"


class RoomStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"
    CLEANING = "CLEANING"
    RESERVED = "RESERVED"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
