"""Read-only access to the room catalog plus the one-time starter seed."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from sqlalchemy import func, text
from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Room

logger = logging.getLogger(__name__)

STARTER_ROOMS = (
    {
        "name": "Standard Room",
        "description": "Cozy room with queen bed, city view, workstation.",
        "price_per_night": Decimal("79"),
        "capacity": 2,
        "image": "https://images.unsplash.com/photo-1560066984-138dadb4c035?q=80&w=1200&auto=format&fit=crop",
    },
    {
        "name": "Deluxe Room",
        "description": "Spacious room with king bed, balcony, partial sea view.",
        "price_per_night": Decimal("129"),
        "capacity": 3,
        "image": "https://images.unsplash.com/photo-1584132967334-10e028bd69f7?q=80&w=1200&auto=format&fit=crop",
    },
    {
        "name": "Family Suite",
        "description": "Two-bedroom suite with lounge, perfect for families.",
        "price_per_night": Decimal("199"),
        "capacity": 5,
        "image": "https://images.unsplash.com/photo-1600585154526-990dced4db0d?q=80&w=1200&auto=format&fit=crop",
    },
)


def list_rooms(db: Session) -> List[Room]:
    return db.query(Room).order_by(Room.id).all()


def find_by_capacity_at_least(db: Session, guests: int) -> List[Room]:
    return db.query(Room).filter(Room.capacity >= guests).order_by(Room.id).all()


def find_by_id(db: Session, room_id: int) -> Room:
    room = db.query(Room).filter(Room.id == room_id).first()
    if room is None:
        raise NotFoundError("Room not found")
    return room


def lock_room(db: Session, room_id: int) -> Room:
    """Load a room with a row lock held until the session's transaction ends.

    SQLite has no row locks and ignores ``FOR UPDATE``, so there the
    transaction is opened with ``BEGIN IMMEDIATE``, which takes the database
    write lock up front and serialises writers across processes. It must run
    before the session writes anything in the current transaction.
    """
    if db.get_bind().dialect.name == "sqlite":
        db.execute(text("BEGIN IMMEDIATE"))
    room = db.query(Room).filter(Room.id == room_id).with_for_update().first()
    if room is None:
        raise NotFoundError("Room not found")
    return room


def seed_rooms(db: Session) -> int:
    """Insert the starter rooms if the catalog is empty. Returns rows added."""
    if db.query(func.count(Room.id)).scalar():
        return 0
    db.add_all(Room(**fields) for fields in STARTER_ROOMS)
    db.commit()
    logger.info("Seeded %d starter rooms", len(STARTER_ROOMS))
    return len(STARTER_ROOMS)
