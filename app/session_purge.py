"""
CLI entrypoint for the expired-session purge. Run from cron, e.g.:

  python -m app.session_purge

Or hourly: 0 * * * * cd /path/to/innkeep && .venv/bin/python -m app.session_purge
"""

import logging
import sys

from app.core import SessionLocal, configure_logging, get_settings
from app.services.session_purge import run_session_purge

logger = logging.getLogger(__name__)


def main() -> int:
    """Delete sessions past their expiry."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        deleted = run_session_purge(db, settings)
        logger.info("Session purge completed: sessions_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Session purge failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
