"""Conflict-checked booking creation."""
from __future__ import annotations

import logging
from typing import Any, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ConflictError, InvalidRequestError
from ..models import Booking, Room
from ..schemas import BookingCreate
from . import catalog, ledger
from .locks import RoomLocks

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("room_id", "check_in", "check_out", "full_name", "email", "phone")
ROOM_TAKEN = "Room no longer available for those dates"


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return value is None


def create_booking(
    db: Session,
    room_locks: RoomLocks,
    user_id: int,
    booking_in: BookingCreate,
) -> Tuple[Booking, Room]:
    """Book a room for ``[check_in, check_out)`` or raise.

    The overlap check and the insert run while the room's lock scope is
    held and the room row is locked (on SQLite, the database write lock), and
    the insert is committed before the scope is released, so two overlapping
    requests for one room can never both end up confirmed, even from separate
    processes. On PostgreSQL the exclusion constraint on
    ``bookings`` backs this up; a violation surfaces as ``ConflictError``.
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(booking_in, name))]
    if missing:
        raise InvalidRequestError("Missing fields")
    if booking_in.check_out <= booking_in.check_in:
        raise InvalidRequestError("checkOut must be after checkIn")

    # Only rooms that exist get a lock scope.
    room_id = catalog.find_by_id(db, booking_in.room_id).id

    with room_locks.hold(room_id):
        try:
            room = catalog.lock_room(db, room_id)
            if ledger.has_overlapping_confirmed(db, room.id, booking_in.check_in, booking_in.check_out):
                logger.info(
                    "Rejected booking for room %s [%s, %s): overlap",
                    room.id,
                    booking_in.check_in,
                    booking_in.check_out,
                )
                raise ConflictError(ROOM_TAKEN)
            booking = ledger.insert_confirmed(
                db,
                user_id=user_id,
                room_id=room.id,
                check_in=booking_in.check_in,
                check_out=booking_in.check_out,
                full_name=booking_in.full_name,
                email=booking_in.email,
                phone=booking_in.phone,
                special_requests=booking_in.special_requests,
            )
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Booking insert for room %s rejected by storage: %s", room_id, exc.orig)
            raise ConflictError(ROOM_TAKEN) from exc
        except Exception:
            db.rollback()
            raise

    logger.info(
        "Booking %s confirmed: room=%s user=%s [%s, %s)",
        booking.id,
        room.id,
        user_id,
        booking.check_in,
        booking.check_out,
    )
    return booking, room
