"""
Custom exceptions and error handling utilities.

This module centralizes all custom exceptions used throughout the application
and provides utilities for consistent error handling and reporting.
"""

from typing import Dict, Any, List, Optional
import logging


# =================== BASE EXCEPTIONS ===================

class TeamsAppError(Exception):
    """Base exception for all Teams API errors."""

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Dict[str, Any] = None,
        original_exception: Exception = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__
        }

        if self.details:
            result["details"] = self.details

        if self.original_exception:
            result["original_error"] = str(self.original_exception)

        return result


# =================== VALIDATION EXCEPTIONS ===================

class ValidationError(TeamsAppError):
    """Raised when a field value violates its invariant."""

    def __init__(
        self,
        field: str,
        message: str,
        value: Any = None,
        details: Dict[str, Any] = None
    ):
        error_details = {"field": field}
        if value is not None:
            error_details["value"] = str(value)
        if details:
            error_details.update(details)

        super().__init__(
            message=message,
            code="validation_error",
            details=error_details
        )
        self.field = field


# =================== STORE EXCEPTIONS ===================

class StoreError(TeamsAppError):
    """Raised when the persistence layer cannot complete an operation."""

    def __init__(
        self,
        operation: str,
        message: str = None,
        entity_type: str = "Team",
        original_exception: Exception = None
    ):
        if message is None:
            message = f"{entity_type} store failed during '{operation}'"
        super().__init__(
            message=message,
            code="store_error",
            details={"operation": operation, "entity_type": entity_type},
            original_exception=original_exception
        )
        self.operation = operation


class DatabaseConfigurationError(StoreError):
    """Raised when no database session can be created."""

    def __init__(self, operation: str = "connect"):
        super().__init__(
            operation=operation,
            message="Database is not configured (set DATABASE_URL)"
        )
        self.code = "database_not_configured"


# =================== CONFIGURATION EXCEPTIONS ===================

class ConfigurationError(TeamsAppError):
    """Raised when application configuration is invalid."""

    def __init__(self, environment: str, problems: List[str]):
        super().__init__(
            message=f"Invalid {environment} configuration: " + "; ".join(problems),
            code="configuration_error",
            details={"environment": environment, "problems": problems}
        )
        self.problems = problems


# =================== DISPATCH EXCEPTIONS ===================

class UnsupportedOperationError(TeamsAppError):
    """Raised when a request has no registered handler."""

    def __init__(self, operation: str, context: str = None):
        message = f"Unsupported operation: {operation}"
        if context:
            message += f" ({context})"

        super().__init__(
            message=message,
            code="unsupported_operation",
            details={"operation": operation, "context": context}
        )


# =================== ERROR HANDLING UTILITIES ===================

def handle_exception(
    exception: Exception,
    logger: logging.Logger,
    context: Dict[str, Any] = None
) -> Dict[str, Any]:
    """
    Centralized exception handling utility.

    Args:
        exception: The exception to handle
        logger: Logger instance for error reporting
        context: Additional context information

    Returns:
        Dictionary representation of the error
    """
    if isinstance(exception, TeamsAppError):
        error_dict = exception.to_dict()
        logger.error(f"TeamsAppError: {exception.message}", extra={
            "error_code": exception.code,
            "details": exception.details,
            "context": context
        })
    else:
        error_dict = {
            "error": str(exception),
            "code": "unexpected_error",
            "type": exception.__class__.__name__
        }
        logger.error(f"Unexpected error: {str(exception)}", extra={
            "exception_type": exception.__class__.__name__,
            "context": context
        }, exc_info=True)

    if context:
        error_dict["context"] = context

    return error_dict


def create_error_response(
    exception: Exception,
    status_code: Optional[int] = None
) -> Dict[str, Any]:
    """
    Build an API error payload with a suggested HTTP status code.

    Validation failures are client errors, store failures are server errors.
    """
    if isinstance(exception, TeamsAppError):
        body = exception.to_dict()
    else:
        body = {
            "error": str(exception),
            "code": "unexpected_error",
            "type": exception.__class__.__name__
        }

    if status_code is None:
        if isinstance(exception, ValidationError):
            status_code = 400
        else:
            status_code = 500

    body["status_code"] = status_code
    return body
