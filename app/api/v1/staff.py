"""Staff listing and approval endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import HotelMember, Sessions, Store, require_roles
from app.models.enums import APPROVER_ROLES
from app.schemas.staff import StaffApprovalRequest, StaffMember
from app.services import staff as staff_service
from app.services.staff import Identity

router = APIRouter()


@router.get("", response_model=list[StaffMember])
def list_staff(identity: HotelMember, store: Store) -> list[StaffMember]:
    """Every user of the caller's hotel, newest first."""
    users = staff_service.list_staff(store, identity.hotel_id)
    return [StaffMember.model_validate(u) for u in users]


@router.put("", response_model=StaffMember)
def update_staff(
    body: StaffApprovalRequest,
    identity: Annotated[Identity, Depends(require_roles(*APPROVER_ROLES))],
    store: Store,
    sessions: Sessions,
) -> StaffMember:
    """Approve or revoke a staff member of the caller's hotel (owner or manager only)."""
    user = staff_service.set_approval(
        store,
        sessions,
        identity,
        body.staff_id,
        body.is_approved,
        role=body.role,
    )
    return StaffMember.model_validate(user)
