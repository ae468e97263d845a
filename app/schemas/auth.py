"""Request/response schemas for auth endpoints."""

from pydantic import Field, field_validator

from app.core.security import (
    LOGIN_PASSWORD_MIN_LEN,
    OWNER_PASSWORD_MIN_LEN,
    PASSWORD_MAX_LEN,
    STAFF_PASSWORD_MIN_LEN,
)
from app.models.enums import STAFF_SIGNUP_ROLES, Role
from app.schemas.common import CamelModel, NormalizedEmail, SuccessResponse
from app.schemas.hotel import parse_uuid


def _strip_name(value: str) -> str:
    value = value.strip()
    if len(value) < 2:
        raise ValueError("must be at least 2 characters")
    return value


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: NormalizedEmail
    password: str = Field(..., min_length=LOGIN_PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class OwnerSignupRequest(CamelModel):
    """Owner signup: creates the hotel and its auto-approved owner."""

    fullname: str = Field(..., min_length=2, max_length=255)
    email: NormalizedEmail
    password: str = Field(..., min_length=OWNER_PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    hotel_name: str = Field(..., min_length=2, max_length=255)
    location: str | None = Field(default=None, max_length=1024)
    room_count: int | None = Field(default=None, gt=0)
    hotel_type: str | None = Field(default=None, max_length=64)

    @field_validator("fullname", "hotel_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        return _strip_name(v)


class StaffSignupRequest(CamelModel):
    """Staff signup through a hotel invite link; the account starts unapproved."""

    fullname: str = Field(..., min_length=2, max_length=255)
    email: NormalizedEmail
    phone: str | None = Field(default=None, min_length=10, max_length=32)
    password: str = Field(..., min_length=STAFF_PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    hotel_id: str = Field(..., description="UUID of the hotel from the invite link")
    role: Role

    @field_validator("fullname")
    @classmethod
    def strip_fullname(cls, v: str) -> str:
        return _strip_name(v)

    @field_validator("phone")
    @classmethod
    def strip_phone(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("hotel_id")
    @classmethod
    def validate_hotel_id(cls, v: str) -> str:
        return parse_uuid(v, "Invalid hotel ID")

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v: object) -> Role:
        role = Role.parse(str(v))
        if role not in STAFF_SIGNUP_ROLES:
            raise ValueError(
                f"role must be one of {[r.value for r in STAFF_SIGNUP_ROLES]}"
            )
        return role


class UserSummary(CamelModel):
    """User fields returned after login or signup."""

    id: str
    fullname: str
    email: str | None = None
    role: str
    hotel_id: str | None = None
    hotel_name: str | None = None


class AuthResponse(SuccessResponse):
    user: UserSummary


class MessageResponse(SuccessResponse):
    message: str


class SessionUser(UserSummary):
    is_approved: bool


class SessionStatusResponse(CamelModel):
    """GET /auth/session: who the cookie belongs to, if anyone."""

    authenticated: bool
    user: SessionUser | None = None
