"""Domain errors raised by the service layer and converted to HTTP responses in main."""

from typing import Any, List, Optional


class CPMSError(Exception):
    status_code = 500

    def __init__(self, message: str = "", errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(CPMSError):
    """Missing, malformed or oversized request fields."""

    status_code = 400


class BusinessRuleError(CPMSError):
    status_code = 400


class ConflictError(CPMSError):
    status_code = 409


class NotFoundError(CPMSError):
    """Unknown id. Rendered with an empty body."""

    status_code = 404


class AuthenticationError(CPMSError):
    status_code = 401
