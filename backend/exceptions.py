"""
Domain errors raised by the crud layer and translated into HTTP responses
by the handlers registered in main.py.
"""
from typing import Any, Optional


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code


class InputError(AppError):
    """Malformed query input such as an unparseable date."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """The request is well formed but clashes with stored state."""
    status_code = 400


class InsufficientStockError(ConflictError):
    def __init__(self, available, requested):
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}",
            details={"available": available, "requested": requested},
        )
        self.available = available
        self.requested = requested


class AuthenticationError(AppError):
    status_code = 401


class PermissionDeniedError(AppError):
    status_code = 403
