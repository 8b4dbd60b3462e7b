"""Booking ledger: the durable record of every booking and its status."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Booking, BookingStatus, Room
from .overlap import overlap_clause

CONFIRMED = BookingStatus.CONFIRMED.value
CANCELLED = BookingStatus.CANCELLED.value


def confirmed_bookings_for_rooms(db: Session, room_ids: Iterable[int]) -> List[Booking]:
    room_ids = list(room_ids)
    if not room_ids:
        return []
    return (
        db.query(Booking)
        .filter(Booking.room_id.in_(room_ids), Booking.status == CONFIRMED)
        .all()
    )


def confirmed_bookings_for_room(db: Session, room_id: int) -> List[Booking]:
    return confirmed_bookings_for_rooms(db, [room_id])


def has_overlapping_confirmed(db: Session, room_id: int, check_in: date, check_out: date) -> bool:
    q = db.query(Booking).filter(
        Booking.room_id == room_id,
        Booking.status == CONFIRMED,
        overlap_clause(Booking.check_in, Booking.check_out, check_in, check_out),
    )
    return db.query(q.exists()).scalar()


def insert_confirmed(
    db: Session,
    *,
    user_id: int,
    room_id: int,
    check_in: date,
    check_out: date,
    full_name: str,
    email: str,
    phone: str,
    special_requests: Optional[str] = None,
) -> Booking:
    """Add a confirmed booking and flush it; the caller owns the commit."""
    booking = Booking(
        user_id=user_id,
        room_id=room_id,
        check_in=check_in,
        check_out=check_out,
        full_name=full_name,
        email=email,
        phone=phone,
        special_requests=special_requests or "",
        status=CONFIRMED,
    )
    db.add(booking)
    db.flush()
    return booking


def find_by_id(db: Session, booking_id: int) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def cancel(db: Session, booking_id: int) -> bool:
    """Flip a confirmed booking to cancelled in one conditional update.

    Returns False when the row was not confirmed at update time.
    """
    updated = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.status == CONFIRMED)
        .update({Booking.status: CANCELLED}, synchronize_session="fetch")
    )
    return updated == 1


def list_for_user(db: Session, user_id: int) -> List[Tuple[Booking, str, Decimal]]:
    """Bookings of one user, latest check-in first, with room name and rate."""
    rows = (
        db.query(Booking, Room.name, Room.price_per_night)
        .join(Room, Booking.room_id == Room.id)
        .filter(Booking.user_id == user_id)
        .order_by(Booking.check_in.desc(), Booking.id.desc())
        .all()
    )
    return [(booking, room_name, price) for booking, room_name, price in rows]
