"""ASGI entry point: ``uvicorn hotel.main:app``."""
from .app import create_app

app = create_app()
