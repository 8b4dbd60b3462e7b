from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import auth
from ..database import get_db
from ..errors import ConflictError, UnauthorizedError
from ..models import User
from ..rate_limit import AUTH_LIMIT, limiter
from ..schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
@limiter.limit(AUTH_LIMIT)
def register_user(request: Request, user_in: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    if db.query(User).filter(User.email == user_in.email).first():
        raise ConflictError("Email already registered")

    user = User(
        name=user_in.name,
        email=user_in.email,
        hashed_password=auth.get_password_hash(user_in.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Email already registered") from exc
    db.refresh(user)
    return AuthResponse(user=UserPublic.model_validate(user), token=auth.issue_token(user))


@router.post("/login", response_model=AuthResponse)
@limiter.limit(AUTH_LIMIT)
def login(request: Request, credentials: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user = auth.authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise UnauthorizedError("Invalid email or password")
    return AuthResponse(user=UserPublic.model_validate(user), token=auth.issue_token(user))
