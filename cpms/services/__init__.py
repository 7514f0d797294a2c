"""Service layer package."""

from cpms.services import (
    auth_service,
    construction_service,
    user_service,
)
