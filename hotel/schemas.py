"""Pydantic schemas for the public JSON API (camelCase on the wire)."""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RegisterRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserPublic(ApiModel):
    id: int
    name: str
    email: str


class AuthResponse(ApiModel):
    user: UserPublic
    token: str


class RoomRead(ApiModel):
    id: int
    name: str
    description: str
    price_per_night: float
    capacity: int
    image: str


class RoomList(ApiModel):
    rooms: List[RoomRead]


class BookingCreate(ApiModel):
    # Presence is checked by the booking transaction, not here.
    room_id: Optional[int] = None
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    special_requests: Optional[str] = None


class BookingRead(ApiModel):
    id: int
    user_id: int
    room_id: int
    check_in: date
    check_out: date
    full_name: str
    email: str
    phone: str
    special_requests: str
    status: str
    created_at: datetime


class BookingCreated(ApiModel):
    booking: BookingRead
    room: RoomRead


class BookingSummary(BookingRead):
    room_name: Optional[str] = None
    price_per_night: Optional[float] = None


class BookingList(ApiModel):
    bookings: List[BookingSummary]


class OkResponse(ApiModel):
    ok: bool = True
