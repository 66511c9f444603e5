"""Domain errors and the HTTP status each one maps to."""


class TareasError(Exception):
    """Base class for errors that terminate a request with a known status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TareasError):
    """Raised when required request fields are missing."""

    status_code = 400
    default_message = "Missing required fields"


class ConflictError(TareasError):
    """Raised when a unique value (user email) is already taken."""

    status_code = 400
    default_message = "Resource already exists"


class AuthenticationError(TareasError):
    """Raised for bad credentials or a missing bearer token."""

    status_code = 401
    default_message = "Invalid credentials"


class AuthorizationError(TareasError):
    """Raised when a presented token is malformed, forged or expired."""

    status_code = 403
    default_message = "Invalid token"


class NotFoundError(TareasError):
    status_code = 404
    default_message = "Not found"


class StorageError(TareasError):
    """Raised when a snapshot file cannot be read or written.

    The message given here is logged; callers only ever see the default.
    """

    status_code = 500
    default_message = "Internal server error"
