from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from cpms.config import settings
from cpms.database import get_db
from cpms.errors import AuthenticationError
from cpms.models.user import User
from cpms.services.auth_service import decode_token

security = HTTPBearer(auto_error=False)


def _user_from_token(db: Session, token: str) -> User:
    payload = decode_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationError("Invalid token payload")

    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user:
        raise AuthenticationError("User not found")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return _user_from_token(db, credentials.credentials)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[User]:
    if credentials is None:
        return None
    return _user_from_token(db, credentials.credentials)


def get_creator_id(current_user: Optional[User] = Depends(get_optional_user)) -> int:
    """Identity stamped on newly created projects."""
    if current_user is not None:
        return current_user.id
    if settings.WRITE_REQUIRES_AUTH:
        raise AuthenticationError("Not authenticated")
    return settings.DEFAULT_CREATOR_ID


def require_writer(current_user: Optional[User] = Depends(get_optional_user)) -> Optional[User]:
    if current_user is None and settings.WRITE_REQUIRES_AUTH:
        raise AuthenticationError("Not authenticated")
    return current_user
