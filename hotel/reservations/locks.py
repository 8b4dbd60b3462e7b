"""Per-room mutual exclusion for the check-then-insert booking sequence."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class RoomLocks:
    """Hands out one lock per room id.

    Requests for different rooms never contend; requests for the same room
    are serialised for as long as the ``hold`` block runs.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: Dict[int, threading.Lock] = {}

    def _lock_for(self, room_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(room_id)
            if lock is None:
                lock = self._locks[room_id] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, room_id: int) -> Iterator[None]:
        lock = self._lock_for(room_id)
        with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
