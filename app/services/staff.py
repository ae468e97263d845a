"""Account lifecycle: owner and staff signup, login, and staff approval."""

import logging
from dataclasses import dataclass

from app.core.security import hash_password, verify_password
from app.models import Hotel, Staff, User
from app.models.base import new_id
from app.models.enums import APPROVER_ROLES, Role, StaffStatus
from app.schemas.auth import OwnerSignupRequest, StaffSignupRequest
from app.services import notifications
from app.services.errors import (
    AuthorizationError,
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from app.services.sessions import SessionManager
from app.services.store import CredentialStore, normalize_email

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "An account with this email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
NOT_APPROVED_MESSAGE = "Account not approved yet"
INVALID_INVITE_MESSAGE = "Invalid hotel invite link"
STAFF_PENDING_MESSAGE = (
    "Staff account created! Your account is pending approval from a manager or owner."
)


@dataclass(frozen=True)
class Identity:
    """The caller as resolved from a live session: re-read from the store on every request."""

    user_id: str
    role: Role
    hotel_id: str | None
    is_approved: bool
    fullname: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(
            user_id=user.id,
            role=user.role_enum,
            hotel_id=user.hotel_id,
            is_approved=bool(user.is_approved),
            fullname=user.fullname,
            email=user.email,
        )


def _ensure_email_free(store: CredentialStore, email: str) -> None:
    if store.get_user_by_email(email) is not None:
        raise ConflictError(EMAIL_TAKEN_MESSAGE)


def signup_owner(store: CredentialStore, body: OwnerSignupRequest) -> tuple[User, Hotel]:
    """
    Create a hotel and its owner in one transaction. Owners are approved immediately.

    Raises ConflictError when the email is already registered (checked up front and
    again by the unique index on commit).
    """
    email = normalize_email(body.email)
    _ensure_email_free(store, email)

    hotel = Hotel(
        id=new_id(),
        name=body.hotel_name,
        address=body.location,
        hotel_type=body.hotel_type,
        room_count=body.room_count or 0,
        subscription_status="trial",
    )
    user = User(
        id=new_id(),
        fullname=body.fullname,
        email=email,
        password_hash=hash_password(body.password),
        role=Role.OWNER.value,
        hotel_id=hotel.id,
        is_approved=True,
    )
    store.add(hotel, user)
    store.commit(conflict_message=EMAIL_TAKEN_MESSAGE)
    logger.info("Owner signup: user_id=%s hotel_id=%s", user.id, hotel.id)
    return user, hotel


def signup_staff(store: CredentialStore, body: StaffSignupRequest) -> User:
    """
    Create an unapproved staff user and its INACTIVE staff profile in one transaction.

    Raises ValidationError for an unknown hotel and ConflictError for a taken email.
    """
    if body.role == Role.OWNER:
        raise ValidationError("Owners cannot sign up through an invite link")
    hotel = store.get_hotel(body.hotel_id)
    if hotel is None:
        raise ValidationError(INVALID_INVITE_MESSAGE)
    email = normalize_email(body.email)
    _ensure_email_free(store, email)

    user = User(
        id=new_id(),
        fullname=body.fullname,
        email=email,
        password_hash=hash_password(body.password),
        role=body.role.value,
        hotel_id=hotel.id,
        is_approved=False,
    )
    profile = Staff(
        fullname=body.fullname,
        email=email,
        phone=body.phone,
        hotel_id=hotel.id,
        role=body.role.value,
        user_id=user.id,
        status=StaffStatus.INACTIVE.value,
    )
    store.add(user, profile)
    store.commit(conflict_message=EMAIL_TAKEN_MESSAGE)
    logger.info("Staff signup: user_id=%s hotel_id=%s role=%s", user.id, hotel.id, user.role)
    notifications.notify_pending_approval(hotel, user)
    return user


def authenticate(store: CredentialStore, email: str, password: str) -> User:
    """
    Check credentials. Unknown email, missing password hash and wrong password all
    raise the same InvalidCredentialsError (HTTP 400); valid credentials on an unapproved account
    raise AuthorizationError.
    """
    user = store.get_user_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed: email=%s", normalize_email(email))
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
    if not user.is_approved:
        logger.info("Login refused, not approved: user_id=%s", user.id)
        raise AuthorizationError(NOT_APPROVED_MESSAGE)
    return user


def list_staff(store: CredentialStore, hotel_id: str) -> list[User]:
    return store.list_hotel_users(hotel_id)


def set_approval(
    store: CredentialStore,
    sessions: SessionManager,
    actor: Identity,
    staff_user_id: str,
    is_approved: bool,
    role: Role | None = None,
) -> User:
    """
    Approve or revoke a user of the actor's hotel, optionally changing their role.

    Only owners and managers may call this. The target must belong to the actor's
    hotel (NotFoundError otherwise). Owners cannot be revoked or re-roled here, and
    nobody can be made owner. Revoking approval also drops the target's sessions.
    """
    if not actor.role.is_one_of(*APPROVER_ROLES):
        raise AuthorizationError("Forbidden")
    if actor.hotel_id is None:
        raise AuthorizationError("No hotel associated")

    target = store.get_hotel_user(actor.hotel_id, staff_user_id)
    if target is None:
        raise NotFoundError("Staff not found")

    if target.role_enum == Role.OWNER and (not is_approved or role not in (None, Role.OWNER)):
        raise AuthorizationError("The hotel owner cannot be revoked or re-assigned")
    if role == Role.OWNER and target.role_enum != Role.OWNER:
        raise ValidationError("The owner role cannot be assigned")

    target.is_approved = is_approved
    if role is not None:
        target.role = role.value
    profile = store.get_staff_profile(target.id)
    if profile is not None:
        profile.status = (StaffStatus.ACTIVE if is_approved else StaffStatus.INACTIVE).value
        profile.role = target.role
    store.commit()
    logger.info(
        "Approval updated: actor_id=%s target_id=%s is_approved=%s role=%s",
        actor.user_id,
        target.id,
        is_approved,
        target.role,
    )

    if not is_approved:
        sessions.invalidate_user_sessions(target.id)
    notifications.notify_approval_changed(target)
    return target
