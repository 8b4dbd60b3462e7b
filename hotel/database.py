"""Database handle owned by the application for its whole lifetime."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from fastapi import Depends, Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .reservations.locks import RoomLocks

logger = logging.getLogger(__name__)

# Storage-level guard: confirmed bookings of one room may not share a night.
_OVERLAP_GUARD_DDL = (
    "CREATE EXTENSION IF NOT EXISTS btree_gist",
    """
    DO $$
    BEGIN
        IF NOT EXISTS (SELECT 1 FROM pg_constraint WHERE conname = 'no_confirmed_room_overlap') THEN
            ALTER TABLE bookings ADD CONSTRAINT no_confirmed_room_overlap
                EXCLUDE USING gist (room_id WITH =, daterange(check_in, check_out, '[)') WITH &&)
                WHERE (status = 'confirmed');
        END IF;
    END $$;
    """,
)


class Base(DeclarativeBase):
    pass


class Database:
    """Engine, session factory and room lock registry for one process.

    Created once by the app factory and shared by every request; ``dispose``
    releases the pooled connections on shutdown.
    """

    def __init__(self, url: str) -> None:
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.url = url
        self.engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )
        self.room_locks = RoomLocks()

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def create_all(self) -> None:
        from . import models  # noqa: F401  registers the tables on Base.metadata

        Base.metadata.create_all(bind=self.engine)
        if self.dialect == "postgresql":
            with self.engine.begin() as conn:
                for statement in _OVERLAP_GUARD_DDL:
                    conn.execute(text(statement))
            logger.info("Installed booking overlap exclusion constraint")

    def drop_all(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """Provide a database session bound to the application's handle."""
    with database.session() as db:
        yield db
