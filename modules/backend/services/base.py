"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories and implement business rules.

Usage:
    from modules.backend.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, repository: NoteRepository | None = None) -> None:
            super().__init__()
            self.repo = repository or NoteRepository()
"""

from typing import Any

from modules.backend.core.exceptions import InvalidArgumentError
from modules.backend.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Logging context
    - Common validation patterns

    Subclasses should:
    - Call super().__init__() in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _validate_required(self, fields: dict[str, Any]) -> None:
        """
        Validate that every field is present and is text.

        Empty strings are accepted. All fields are checked before
        raising, so the error lists every missing field at once.

        Args:
            fields: Dictionary of field names to values

        Raises:
            InvalidArgumentError: If any field is None or not a string
        """
        missing = [name for name, value in fields.items() if value is None]
        if missing:
            raise InvalidArgumentError(
                "Required fields missing",
                details={"missing_fields": missing},
            )

        for name, value in fields.items():
            if not isinstance(value, str):
                raise InvalidArgumentError(
                    f"{name} must be text",
                    details={"field": name, "type": type(value).__name__},
                )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
