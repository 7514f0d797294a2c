"""User service layer: registration, lookup, deletion and credential checks."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cpms.errors import AuthenticationError, ConflictError, NotFoundError
from cpms.models.user import User
from cpms.schemas.user import UserCreate
from cpms.utils.passwords import generate_salt, hash_password, verify_password

logger = logging.getLogger(__name__)

EMAIL_IN_USE_MESSAGE = "Email already in use."
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def email_exists(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def create_user(db: Session, data: UserCreate) -> User:
    # Pre-check only; the unique constraint on users.email decides races.
    if email_exists(db, data.email):
        raise ConflictError(EMAIL_IN_USE_MESSAGE)

    salt = generate_salt()
    user = User(email=data.email, salt=salt, password=hash_password(data.password, salt))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("duplicate email rejected by unique constraint")
        raise ConflictError(EMAIL_IN_USE_MESSAGE)
    db.refresh(user)
    logger.info("registered user id=%s", user.id)
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("deleted user id=%s", user_id)


def authenticate(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if user is None:
        logger.info("login failed: unknown email")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password, user.salt):
        logger.info("login failed: bad password for user id=%s", user.id)
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    return user
