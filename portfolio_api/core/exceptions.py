"""
Application error taxonomy.
Each error kind maps to a fixed HTTP status; handlers live in main.py.
"""


class AppError(Exception):
    """Base class for expected, client-facing errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(AppError):
    """Bad, missing or expired credentials or token."""

    status_code = 401
    default_message = "Invalid credentials"


class AuthorizationError(AppError):
    """Authenticated but the role is not allowed."""

    status_code = 403
    default_message = "Only admin can access this route"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Uniqueness violation."""

    status_code = 409
    default_message = "Resource already exists"


class UnexpectedError(AppError):
    """Store or configuration failure. Reported without internal detail."""

    status_code = 500
    default_message = "Internal server error"
