"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"Not found" is not an error in this application: lookups return None
and mutations return False instead.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: dict | None = None,
        code: str = "VAL_VALIDATION_ERROR",
    ) -> None:
        self.details = details or {}
        super().__init__(message, code=code)


class InvalidArgumentError(ValidationError):
    """Raised when a note field is absent or is not text."""

    def __init__(self, message: str = "Invalid argument", details: dict | None = None) -> None:
        super().__init__(message, details=details, code="VAL_INVALID_ARGUMENT")
