"""Unit tests for the per-room lock registry."""
import threading

from hotel.reservations.locks import RoomLocks


class TestRoomLocks:
    def test_same_room_reuses_one_lock(self):
        locks = RoomLocks()
        with locks.hold(1):
            pass
        with locks.hold(1):
            pass

        assert len(locks) == 1

    def test_same_room_is_exclusive(self):
        locks = RoomLocks()
        entered = threading.Event()

        def contender():
            with locks.hold(1):
                entered.set()

        with locks.hold(1):
            worker = threading.Thread(target=contender)
            worker.start()
            assert not entered.wait(0.2)
        worker.join(timeout=5)

        assert entered.is_set()

    def test_different_rooms_do_not_contend(self):
        locks = RoomLocks()
        entered = threading.Event()

        def other_room():
            with locks.hold(2):
                entered.set()

        with locks.hold(1):
            worker = threading.Thread(target=other_room)
            worker.start()
            assert entered.wait(5)
        worker.join(timeout=5)
