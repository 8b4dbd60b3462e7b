from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user, get_room_locks
from ..models import User
from ..rate_limit import BOOKING_WRITE_LIMIT, limiter
from ..reservations import ledger
from ..reservations.cancellation import cancel_booking
from ..reservations.locks import RoomLocks
from ..reservations.transaction import create_booking
from ..schemas import (
    BookingCreate,
    BookingCreated,
    BookingList,
    BookingRead,
    BookingSummary,
    OkResponse,
    RoomRead,
)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", response_model=BookingCreated)
@limiter.limit(BOOKING_WRITE_LIMIT)
def book_room(
    request: Request,
    booking_in: BookingCreate,
    current_user: User = Depends(get_current_user),
    room_locks: RoomLocks = Depends(get_room_locks),
    db: Session = Depends(get_db),
) -> BookingCreated:
    booking, room = create_booking(db, room_locks, current_user.id, booking_in)
    return BookingCreated(
        booking=BookingRead.model_validate(booking),
        room=RoomRead.model_validate(room),
    )


@router.get("", response_model=BookingList)
def list_my_bookings(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> BookingList:
    return BookingList(
        bookings=[
            BookingSummary(
                **BookingRead.model_validate(booking).model_dump(),
                room_name=room_name,
                price_per_night=price,
            )
            for booking, room_name, price in ledger.list_for_user(db, current_user.id)
        ]
    )


@router.patch("/{booking_id}/cancel", response_model=OkResponse)
@limiter.limit(BOOKING_WRITE_LIMIT)
def cancel_my_booking(
    request: Request,
    booking_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> OkResponse:
    cancel_booking(db, booking_id, current_user.id)
    return OkResponse()
