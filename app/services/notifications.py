"""Outbound notifications. No delivery channel is configured; events are logged only."""

import logging

from app.models import Hotel, User

logger = logging.getLogger(__name__)


def notify_pending_approval(hotel: Hotel, user: User) -> None:
    """Tell the hotel's owners/managers a staff account is waiting for approval."""
    logger.info(
        "Pending staff approval: hotel_id=%s user_id=%s role=%s",
        hotel.id,
        user.id,
        user.role,
    )


def notify_approval_changed(user: User) -> None:
    """Tell a staff member their approval state changed."""
    logger.info(
        "Staff approval changed: user_id=%s is_approved=%s",
        user.id,
        user.is_approved,
    )
