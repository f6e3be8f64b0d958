# app/core/errors.py


class AppError(Exception):
    """Base class for errors raised by the domain services.

    Each subclass carries the HTTP status the API layer answers with, so
    services stay free of FastAPI imports.
    """

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404


class BusinessError(AppError):
    """Input rejected before any computation or I/O happens."""

    status_code = 422


class PermissionDeniedError(AppError):
    status_code = 403


class PersistenceError(AppError):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(f"store operation failed: {message}")
