"""Which rooms are free for a stay."""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ..errors import InvalidRequestError
from ..models import Booking, Room
from . import catalog, ledger
from .overlap import overlaps


def search(
    db: Session,
    check_in: Optional[date],
    check_out: Optional[date],
    guests: Optional[int] = None,
) -> List[Room]:
    """Rooms holding at least ``guests`` people with no confirmed booking
    overlapping ``[check_in, check_out)``. An empty list is a valid answer."""
    if not check_in or not check_out:
        raise InvalidRequestError("checkIn & checkOut required")
    if check_out <= check_in:
        raise InvalidRequestError("checkOut must be after checkIn")

    rooms = catalog.find_by_capacity_at_least(db, guests or 1)
    by_room: Dict[int, List[Booking]] = defaultdict(list)
    for booking in ledger.confirmed_bookings_for_rooms(db, (room.id for room in rooms)):
        by_room[booking.room_id].append(booking)

    return [
        room
        for room in rooms
        if not any(
            overlaps(check_in, check_out, booking.check_in, booking.check_out)
            for booking in by_room[room.id]
        )
    ]
