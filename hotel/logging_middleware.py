"""HTTP audit logging middleware."""
from __future__ import annotations

import logging
from pathlib import Path
from time import perf_counter

from fastapi import FastAPI, Request

_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _build_logger(name: str, log_dir: Path) -> logging.Logger:
    logger = logging.getLogger(f"audit.{name}")
    if logger.handlers:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / f"{name}.log")
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def add_audit_middleware(app: FastAPI, name: str, log_dir: str | Path = "logs") -> None:
    """Log one line per request to ``<log_dir>/<name>.log``; 5xx at ERROR."""
    logger = _build_logger(name, Path(log_dir))

    @app.middleware("http")
    async def audit_logger(request: Request, call_next):  # type: ignore[override]
        started = perf_counter()
        response = await call_next(request)
        elapsed_ms = (perf_counter() - started) * 1000
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s | status=%s | client=%s | duration=%.2fms",
            request.method,
            target,
            response.status_code,
            request.client.host if request.client else "unknown",
            elapsed_ms,
        )
        return response
