"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    OwnerSignupRequest,
    SessionStatusResponse,
    StaffSignupRequest,
    UserSummary,
)
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.health import HealthResponse
from app.schemas.hotel import HotelDetail, HotelPublic
from app.schemas.inventory import (
    BookingCreateRequest,
    BookingOut,
    RoomCreateRequest,
    RoomOut,
)
from app.schemas.staff import StaffApprovalRequest, StaffMember

__all__ = [
    "AuthResponse",
    "BookingCreateRequest",
    "BookingOut",
    "ErrorResponse",
    "HealthResponse",
    "HotelDetail",
    "HotelPublic",
    "LoginRequest",
    "MessageResponse",
    "OwnerSignupRequest",
    "RoomCreateRequest",
    "RoomOut",
    "SessionStatusResponse",
    "StaffApprovalRequest",
    "StaffMember",
    "StaffSignupRequest",
    "SuccessResponse",
    "UserSummary",
]
