from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from .cache import CatalogCache
from .config import Settings, get_settings
from .database import Database
from .errors import register_error_handlers
from .logging_middleware import add_audit_middleware
from .rate_limit import apply_rate_limiter
from .reservations.catalog import seed_rooms
from .routers import bookings, rooms, users


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database: Database = app.state.database
    if settings.run_db_migrations:
        database.create_all()
    if settings.seed_rooms:
        with database.session() as db:
            if seed_rooms(db):
                app.state.catalog_cache.invalidate()
    yield
    database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    fastapi_app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    fastapi_app.state.settings = settings
    fastapi_app.state.database = Database(settings.database_url)
    fastapi_app.state.catalog_cache = CatalogCache(ttl=settings.room_cache_ttl)

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    apply_rate_limiter(fastapi_app, settings)
    add_audit_middleware(fastapi_app, "hotel", settings.log_dir)
    register_error_handlers(fastapi_app)
    if settings.metrics_enabled:
        Instrumentator().instrument(fastapi_app).expose(fastapi_app)

    @fastapi_app.get("/api/health", tags=["health"])
    def health() -> dict[str, bool]:
        return {"ok": True}

    fastapi_app.include_router(users.router)
    fastapi_app.include_router(rooms.router)
    fastapi_app.include_router(bookings.router)
    return fastapi_app
