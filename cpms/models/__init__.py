"""SQLAlchemy model package."""

from cpms.models.user import User
from cpms.models.construction import Construction

__all__ = [
    "User",
    "Construction",
]
