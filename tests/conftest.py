from datetime import date
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from hotel.app import create_app
from hotel.auth import get_password_hash
from hotel.config import Settings
from hotel.database import Database
from hotel.models import User
from hotel.reservations.catalog import list_rooms, seed_rooms
from hotel.schemas import BookingCreate

@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        rate_limiting_enabled=False,
        metrics_enabled=False,
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture()
def client(settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def database(tmp_path) -> Generator[Database, None, None]:
    db = Database(f"sqlite:///{tmp_path / 'core.db'}")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def db_session(database) -> Generator:
    with database.session() as session:
        yield session


@pytest.fixture()
def rooms(db_session):
    seed_rooms(db_session)
    return list_rooms(db_session)


@pytest.fixture()
def guest(db_session) -> User:
    user = User(name="Jane Guest", email="jane@example.com", hashed_password=get_password_hash("Passw0rd!"))
    db_session.add(user)
    db_session.commit()
    return user


def _booking_request(room_id: int, check_in: str, check_out: str, **overrides) -> BookingCreate:
    fields = {
        "room_id": room_id,
        "check_in": date.fromisoformat(check_in),
        "check_out": date.fromisoformat(check_out),
        "full_name": "Jane Guest",
        "email": "jane@example.com",
        "phone": "+1 555 0100",
    }
    fields.update(overrides)
    return BookingCreate(**fields)


@pytest.fixture()
def booking_request():
    """Factory for BookingCreate payloads with valid guest contact details."""
    return _booking_request
