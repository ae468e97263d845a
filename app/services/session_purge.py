"""Session purge: delete sessions whose expires_at has passed."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.services.sessions import SessionManager
from app.services.store import CredentialStore

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def run_session_purge(db: Session, settings: "Settings", now: datetime | None = None) -> int:
    """
    Delete expired sessions and return how many were removed.

    Without SESSION_MAX_AGE_HOURS sessions never expire and the purge is skipped.
    Idempotent: safe to run repeatedly.
    """
    if settings.SESSION_MAX_AGE_HOURS is None:
        logger.info("Sessions do not expire (SESSION_MAX_AGE_HOURS unset); skipping.")
        return 0

    cutoff = now or datetime.now(UTC)
    deleted_count = SessionManager(CredentialStore(db), settings).delete_expired_sessions(cutoff)

    if deleted_count > 0:
        logger.info(
            "Session purge: cutoff=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
