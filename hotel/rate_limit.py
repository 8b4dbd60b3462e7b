"""Per-client request limits for the public endpoints (SlowAPI)."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .config import Settings, get_settings

AUTH_LIMIT = "10/minute"
SEARCH_LIMIT = "60/minute"
BOOKING_WRITE_LIMIT = "20/minute"

limiter = Limiter(key_func=get_remote_address, default_limits=[get_settings().default_rate_limit])


def rate_limit_handler(_: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(status_code=429, content={"detail": f"Rate limit exceeded: {exc.detail}"})


def apply_rate_limiter(app: FastAPI, settings: Settings) -> None:
    """Attach the limiter to an app, honouring the ``rate_limiting_enabled`` toggle."""

    limiter.enabled = settings.rate_limiting_enabled
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
