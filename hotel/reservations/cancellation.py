"""Cancellation guard: confirmed -> cancelled, for future stays only."""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ..errors import InvalidRequestError, NotFoundError
from ..models import BookingStatus
from . import ledger

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def cancel_booking(db: Session, booking_id: int, user_id: int, today: Optional[date] = None) -> None:
    """Cancel a booking owned by ``user_id``.

    Someone else's booking is reported exactly like a missing one. Stays
    starting today or earlier cannot be cancelled.
    """
    booking = ledger.find_by_id(db, booking_id)
    if booking.user_id != user_id:
        raise NotFoundError("Booking not found")
    if booking.status != BookingStatus.CONFIRMED.value:
        raise InvalidRequestError("Cannot cancel this booking")
    if booking.check_in <= (today or utc_today()):
        raise InvalidRequestError("Cannot cancel past or ongoing stays")

    if not ledger.cancel(db, booking.id):
        db.rollback()
        raise InvalidRequestError("Cannot cancel this booking")
    db.commit()
    logger.info("Booking %s cancelled by user %s", booking.id, user_id)
