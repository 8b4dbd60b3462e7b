from datetime import date
from typing import List, Optional

from circuitbreaker import circuit
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ..cache import CatalogCache
from ..database import get_db
from ..rate_limit import SEARCH_LIMIT, limiter
from ..reservations import availability, catalog
from ..schemas import RoomList, RoomRead

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


def get_catalog_cache(request: Request) -> CatalogCache:
    return request.app.state.catalog_cache


@circuit(failure_threshold=5, recovery_timeout=60)
def _load_catalog(db: Session) -> List[RoomRead]:
    return [RoomRead.model_validate(room) for room in catalog.list_rooms(db)]


@router.get("", response_model=RoomList)
def list_rooms(
    db: Session = Depends(get_db),
    cache: CatalogCache = Depends(get_catalog_cache),
) -> RoomList:
    rooms = cache.get()
    if rooms is None:
        rooms = _load_catalog(db)
        cache.set(rooms)
    return RoomList(rooms=rooms)


@router.get("/search", response_model=RoomList)
@limiter.limit(SEARCH_LIMIT)
def search_rooms(
    request: Request,
    check_in: Optional[date] = Query(None, alias="checkIn"),
    check_out: Optional[date] = Query(None, alias="checkOut"),
    guests: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
) -> RoomList:
    rooms = availability.search(db, check_in, check_out, guests)
    return RoomList(rooms=[RoomRead.model_validate(room) for room in rooms])
