"""Domain error types."""

from __future__ import annotations


class AppError(Exception):
    """Error with an HTTP-facing status code and a caller-safe message."""

    status_code: int = 500

    def __init__(self, message: str = 'Internal server error', status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Raised when a request is malformed or missing required input."""

    status_code = 400

    def __init__(self, message: str = 'Validation error') -> None:
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = 401

    def __init__(self, message: str = 'Unauthorized') -> None:
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = 'Not found') -> None:
        super().__init__(message)


class InvalidTransitionError(Exception):
    """Raised when a recording session method is called from a state that does not allow it."""
