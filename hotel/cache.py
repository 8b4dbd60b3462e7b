"""TTL cache for the room catalog, which never changes after seeding."""
from __future__ import annotations

from typing import List, Optional

from cachetools import TTLCache

from .schemas import RoomRead

_KEY = "room-catalog"


class CatalogCache:
    def __init__(self, ttl: int) -> None:
        self._cache: TTLCache[str, List[RoomRead]] = TTLCache(maxsize=1, ttl=ttl)

    def get(self) -> Optional[List[RoomRead]]:
        return self._cache.get(_KEY)

    def set(self, rooms: List[RoomRead]) -> None:
        self._cache[_KEY] = list(rooms)

    def invalidate(self) -> None:
        self._cache.pop(_KEY, None)
