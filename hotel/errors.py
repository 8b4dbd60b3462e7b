"""Domain errors raised by the reservation core and rendered by the API."""
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class HotelError(Exception):
    """Base class; every subclass maps onto one HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(HotelError):
    """Missing or malformed input, or an illegal status transition."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(HotelError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(HotelError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HotelError):
    """The requested dates collide with a confirmed booking."""

    status_code = status.HTTP_409_CONFLICT


def hotel_error_handler(_: Request, exc: HotelError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Missing fields", "errors": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain and request-validation handlers to an app."""

    app.add_exception_handler(HotelError, hotel_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
