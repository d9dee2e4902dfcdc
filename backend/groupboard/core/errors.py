# groupboard/core/errors.py
"""
Application error taxonomy.

Services raise these; the handlers registered in ``groupboard.main`` turn
them into ``{"message": ...}`` JSON bodies with the matching status code.
"""


class AppError(Exception):
    """Base application error class."""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed required input."""

    status_code = 400
    default_message = "Required fields are missing."


class NotFoundError(AppError):
    """A referenced user or group does not exist."""

    status_code = 404
    default_message = "Resource not found."


class ConflictError(AppError):
    """Duplicate username, or a membership change that contradicts current state."""

    status_code = 400
    default_message = "Resource already exists."


class AuthError(AppError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401
    default_message = "Unauthorized."


class ForbiddenError(AppError):
    """Authenticated, but not allowed to perform the action."""

    status_code = 403
    default_message = "Forbidden."


class StorageError(AppError):
    """Persistence failure. The message is generic; details only go to the log."""

    status_code = 500
    default_message = "A database error occurred."
