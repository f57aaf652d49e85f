"""Custom application exception classes.

Each exception maps to a specific HTTP status code and error code
for consistent API error responses.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(self.message)

    def wrap(self, prefix: str) -> "AppError":
        """Return a copy of this error with ``prefix`` prepended to its message.

        The copy keeps the concrete class, so callers can still tell a
        not-found from a storage failure with ``isinstance``. Raise it
        ``from`` the original to keep the chain.
        """
        wrapped = self.__class__.__new__(self.__class__)
        wrapped.__dict__.update(self.__dict__)
        wrapped.message = f"{prefix}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


class CustomerNotFoundError(AppError):
    """Raised when no customer matches the given id or email."""

    def __init__(self, lookup: str = ""):
        message = "customer not found"
        if lookup:
            message = f"{message} ({lookup})"
        super().__init__(
            message=message,
            error_code="RESOURCE_NOT_FOUND",
            status_code=404,
        )


class StorageError(AppError):
    """Raised when the database rejects or fails a statement."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(
            message=f"{operation}: {cause}",
            error_code="STORAGE_ERROR",
            status_code=500,
        )


class ValidationError(AppError):
    """Raised when a request body cannot be decoded."""

    def __init__(self, message: str, details: list | dict | None = None):
        self.details = details or {}
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
        )


class ConfigurationError(AppError):
    """Raised at startup when required configuration is missing."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
        )
