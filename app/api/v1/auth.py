"""Login, logout, signup and session endpoints (cookie-based sessions)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.deps import Sessions, Store, get_session_token
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    OwnerSignupRequest,
    SessionStatusResponse,
    SessionUser,
    StaffSignupRequest,
    UserSummary,
)
from app.schemas.common import SuccessResponse
from app.services import staff as staff_service
from app.services.sessions import apply_cookie

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    store: Store,
    sessions: Sessions,
) -> AuthResponse:
    """
    Authenticate with email and password and set the session cookie.
    Unapproved staff accounts get 403 even with correct credentials.
    """
    user = staff_service.authenticate(store, body.email, body.password)
    session = sessions.create_session(user.id)
    apply_cookie(response, sessions.create_session_cookie(session.id))
    return AuthResponse(
        user=UserSummary(
            id=user.id,
            fullname=user.fullname,
            email=user.email,
            role=user.role,
            hotel_id=user.hotel_id,
        )
    )


@router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    sessions: Sessions,
    token: Annotated[str | None, Depends(get_session_token)],
) -> SuccessResponse:
    """Invalidate the current session (if any) and clear the cookie. Always succeeds."""
    sessions.invalidate_session(token)
    apply_cookie(response, sessions.create_blank_session_cookie())
    return SuccessResponse()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: OwnerSignupRequest,
    response: Response,
    store: Store,
    sessions: Sessions,
) -> AuthResponse:
    """Create a hotel with its owner account and sign the owner in."""
    user, hotel = staff_service.signup_owner(store, body)
    session = sessions.create_session(user.id)
    apply_cookie(response, sessions.create_session_cookie(session.id))
    return AuthResponse(
        user=UserSummary(
            id=user.id,
            fullname=user.fullname,
            email=user.email,
            role=user.role,
            hotel_id=hotel.id,
            hotel_name=hotel.name,
        )
    )


@router.post(
    "/staff-signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def staff_signup(body: StaffSignupRequest, store: Store) -> MessageResponse:
    """Register a staff account against a hotel. No session is issued until approval."""
    staff_service.signup_staff(store, body)
    return MessageResponse(message=staff_service.STAFF_PENDING_MESSAGE)


@router.get("/session", response_model=SessionStatusResponse)
def get_session(
    store: Store,
    sessions: Sessions,
    token: Annotated[str | None, Depends(get_session_token)],
) -> SessionStatusResponse:
    """Report whether the cookie maps to a live session, with fresh user attributes."""
    session, user = sessions.validate_session(token)
    if session is None or user is None:
        return SessionStatusResponse(authenticated=False)
    hotel_name = None
    if user.hotel_id:
        hotel = store.get_hotel(user.hotel_id)
        hotel_name = hotel.name if hotel else None
    return SessionStatusResponse(
        authenticated=True,
        user=SessionUser(
            id=user.id,
            fullname=user.fullname,
            email=user.email,
            role=user.role,
            hotel_id=user.hotel_id,
            hotel_name=hotel_name,
            is_approved=bool(user.is_approved),
        ),
    )
