"""Access token issuance and decoding."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from cpms.config import settings
from cpms.errors import AuthenticationError
from cpms.schemas.user import LoginRequest
from cpms.services import user_service

ALGORITHM = "HS256"


def create_access_token(user_id: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired token")


def login(db: Session, request: LoginRequest) -> str:
    user = user_service.authenticate(db, request.email, request.password)
    return create_access_token(user.id)
