"""Schemas for staff listing and approval."""

from datetime import datetime

from pydantic import Field, field_validator

from app.models.enums import Role
from app.schemas.common import CamelModel
from app.schemas.hotel import parse_uuid


class StaffMember(CamelModel):
    """A user of the caller's hotel (never includes the password hash)."""

    id: str
    fullname: str
    email: str
    role: str
    is_approved: bool
    created_at: datetime


class StaffApprovalRequest(CamelModel):
    """Approve or revoke a staff member; optionally change their role."""

    staff_id: str
    is_approved: bool
    role: Role | None = Field(default=None, description="New role; owner cannot be assigned")

    @field_validator("staff_id")
    @classmethod
    def validate_staff_id(cls, v: str) -> str:
        return parse_uuid(v, "Invalid staff ID")

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v: object) -> Role | None:
        if v is None:
            return None
        return Role.parse(str(v))
