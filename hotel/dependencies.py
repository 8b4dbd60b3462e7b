"""Reusable FastAPI dependencies for auth and database access."""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .auth import decode_token
from .database import Database, get_database, get_db
from .errors import UnauthorizedError
from .models import User
from .reservations.locks import RoomLocks

bearer_scheme = HTTPBearer(auto_error=False, description="Token returned by /api/login or /api/register")


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise UnauthorizedError("Missing token")
    payload = decode_token(credentials.credentials)
    user_id = payload.get("id")
    if user_id is None:
        raise UnauthorizedError("Invalid token")
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UnauthorizedError("Invalid token")
    return user


def get_room_locks(database: Database = Depends(get_database)) -> RoomLocks:
    return database.room_locks
