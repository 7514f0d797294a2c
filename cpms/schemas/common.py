"""Shared response bodies."""

from typing import Any, List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str
    errors: Optional[List[Any]] = None


class HealthResponse(BaseModel):
    status: str = "ok"
