"""Identity and authorization guard: FastAPI dependencies shared by protected routes."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.models.enums import Role
from app.services.errors import AuthenticationError, AuthorizationError
from app.services.sessions import SessionManager
from app.services.staff import NOT_APPROVED_MESSAGE, Identity
from app.services.store import CredentialStore


def get_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    """Dependency: credential store bound to the request's DB session."""
    return CredentialStore(db)


def get_session_manager(
    store: Annotated[CredentialStore, Depends(get_store)],
) -> SessionManager:
    """Dependency: session manager for this request."""
    return SessionManager(store, get_settings())


def get_session_token(
    request: Request,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> str | None:
    return request.cookies.get(sessions.cookie_name) or None


def get_current_identity(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> Identity:
    """Dependency: resolve the session cookie to a live identity. Raises 401 if absent or unknown."""
    if token is None:
        raise AuthenticationError("Unauthorized")
    session, user = sessions.validate_session(token)
    if session is None or user is None:
        raise AuthenticationError("Unauthorized")
    return Identity.from_user(user)


def require_approved(
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> Identity:
    """Dependency: the caller's account must currently be approved. Raises 403 otherwise."""
    if not identity.is_approved:
        raise AuthorizationError(NOT_APPROVED_MESSAGE)
    return identity


def require_hotel(
    identity: Annotated[Identity, Depends(require_approved)],
) -> Identity:
    """Dependency: approved caller bound to a hotel. Raises 403 "No hotel associated" otherwise."""
    if identity.hotel_id is None:
        raise AuthorizationError("No hotel associated")
    return identity


def require_roles(*roles: Role) -> Callable[[Identity], Identity]:
    """Build a dependency that admits only hotel members holding one of roles."""

    def _require_roles(
        identity: Annotated[Identity, Depends(require_hotel)],
    ) -> Identity:
        if not identity.role.is_one_of(*roles):
            raise AuthorizationError("Forbidden")
        return identity

    return _require_roles


HotelMember = Annotated[Identity, Depends(require_hotel)]
Store = Annotated[CredentialStore, Depends(get_store)]
Sessions = Annotated[SessionManager, Depends(get_session_manager)]
