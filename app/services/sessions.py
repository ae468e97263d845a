"""Session manager: opaque, database-backed session tokens carried in a cookie."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from starlette.responses import Response

from app.core.security import generate_session_token
from app.models import Session, User
from app.services.store import CredentialStore

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CookieDescriptor:
    """Name, value and Set-Cookie attributes, independent of the web framework."""

    name: str
    value: str
    attributes: dict[str, Any] = field(default_factory=dict)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SessionManager:
    """
    Issues, validates and invalidates sessions.

    Sessions hold only the user id; role, hotel and approval are read from the
    users table on every validate_session() call, so a demoted or un-approved user
    is seen as such on their next request.
    """

    def __init__(self, store: CredentialStore, settings: "Settings") -> None:
        self.store = store
        self.settings = settings

    @property
    def cookie_name(self) -> str:
        return self.settings.SESSION_COOKIE_NAME

    def create_session(self, user_id: str) -> Session:
        """Persist a new session for user_id and return it."""
        expires_at = None
        if self.settings.SESSION_MAX_AGE_HOURS is not None:
            expires_at = datetime.now(UTC) + timedelta(hours=self.settings.SESSION_MAX_AGE_HOURS)
        session = Session(
            id=generate_session_token(),
            user_id=user_id,
            expires_at=expires_at,
        )
        self.store.add(session)
        self.store.commit(conflict_message="Could not create session")
        return session

    def validate_session(self, token: str | None) -> tuple[Session | None, User | None]:
        """
        Resolve token to (session, user). Returns (None, None) for unknown, expired or
        orphaned tokens; never raises for those. Storage errors propagate.
        """
        if not token:
            return None, None
        session = self.store.get_session(token)
        if session is None:
            return None, None
        if session.expires_at is not None and _as_utc(session.expires_at) <= datetime.now(UTC):
            self.store.delete_session(token)
            self.store.commit()
            return None, None
        user = self.store.get_user(session.user_id)
        if user is None:
            return None, None
        return session, user

    def invalidate_session(self, token: str | None) -> None:
        """Delete the session. Unknown or empty tokens are a no-op."""
        if not token:
            return
        self.store.delete_session(token)
        self.store.commit()

    def invalidate_user_sessions(self, user_id: str) -> int:
        """Delete every session of user_id; returns how many were removed."""
        deleted = self.store.delete_user_sessions(user_id)
        self.store.commit()
        if deleted:
            logger.info("Invalidated sessions: user_id=%s count=%s", user_id, deleted)
        return deleted

    def delete_expired_sessions(self, now: datetime | None = None) -> int:
        cutoff = now or datetime.now(UTC)
        deleted = self.store.delete_sessions_expired_before(cutoff)
        self.store.commit()
        return deleted

    def _cookie_attributes(self) -> dict[str, Any]:
        return {
            "httponly": True,
            "secure": self.settings.session_cookie_secure,
            "samesite": self.settings.SESSION_COOKIE_SAMESITE,
            "path": "/",
        }

    def create_session_cookie(self, token: str) -> CookieDescriptor:
        """Cookie carrying the token; without SESSION_MAX_AGE_HOURS it lives until logout."""
        attributes = self._cookie_attributes()
        if self.settings.SESSION_MAX_AGE_HOURS is not None:
            attributes["max_age"] = self.settings.SESSION_MAX_AGE_HOURS * 3600
        return CookieDescriptor(self.cookie_name, token, attributes)

    def create_blank_session_cookie(self) -> CookieDescriptor:
        """Cookie that clears the session client-side when set."""
        attributes = self._cookie_attributes()
        attributes["max_age"] = 0
        attributes["expires"] = 0
        return CookieDescriptor(self.cookie_name, "", attributes)


def apply_cookie(response: Response, cookie: CookieDescriptor) -> None:
    """Write a CookieDescriptor onto a Starlette/FastAPI response."""
    response.set_cookie(key=cookie.name, value=cookie.value, **cookie.attributes)
