"""Pydantic request/response contracts for users and login."""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserOut(BaseModel):
    """Public view of a user. Password hash and salt are never serialized."""

    id: int
    email: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    token: str
    token_type: str = Field(default="bearer", serialization_alias="tokenType")
