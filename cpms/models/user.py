"""SQLAlchemy model for user accounts."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from cpms.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # base64 PBKDF2 digest
    salt = Column(String(64), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
