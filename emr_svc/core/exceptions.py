"""
Shared exception classes and error handling utilities for the EMR service.

This module provides:
- The domain exception hierarchy (validation, not-found, storage, connection)
- Consistent error response formatting
- Exception handlers for FastAPI integration

Usage:
    from core.exceptions import EntityNotFoundError, ValidationError

    # In service layer - raise domain exceptions
    raise EntityNotFoundError(entity_type="Patient", key=1001)

    # In FastAPI - register handlers via setup_exception_handlers(app)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class EMRServiceError(Exception):
    """
    Base exception for all EMR service domain errors.

    Provides consistent error structure with status code and detail message.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code. Uses class default if not provided.
            **kwargs: Additional context to include in error response.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result: Dict[str, Any] = {"error": self.__class__.__name__, "detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# CALLER ERRORS
# =============================================================================

class ValidationError(EMRServiceError):
    """Raised when caller-supplied data fails a field-level rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    detail = "Invalid data"

    def __init__(self, field: str, rule: str, **kwargs: Any):
        self.field = field
        self.rule = rule
        super().__init__(detail=f"Invalid '{field}': {rule}", field=field, rule=rule, **kwargs)


class EntityNotFoundError(EMRServiceError):
    """Raised when a target or referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Entity not found"

    def __init__(self, entity_type: str, key: Any, **kwargs: Any):
        self.entity_type = entity_type
        self.key = key
        super().__init__(
            detail=f"{entity_type} '{key}' not found",
            entity_type=entity_type,
            key=key,
            **kwargs
        )


# =============================================================================
# DATABASE EXCEPTIONS
# =============================================================================

class DatabaseError(EMRServiceError):
    """
    Raised when a storage operation fails for a reason outside caller control.

    The original low-level message is kept in ``detail`` and the original
    exception is chained as ``__cause__`` by the code raising this.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Database operation failed"

    def __init__(self, operation: Optional[str] = None, message: Optional[str] = None, **kwargs: Any):
        self.operation = operation
        if operation and message:
            detail = f"Database error during {operation}: {message}"
        elif operation:
            detail = f"Database error during {operation}"
        else:
            detail = message
        super().__init__(detail=detail, operation=operation, **kwargs)


class ConstraintViolationError(DatabaseError):
    """Raised when storage rejects a write (duplicate key, foreign key)."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Storage constraint violated"


class DatabaseConnectionError(DatabaseError):
    """Raised when the database connection cannot be opened or has been lost."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Failed to connect to database"


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def emr_service_exception_handler(
    request: Request,
    exc: EMRServiceError
) -> JSONResponse:
    """
    Handle EMRServiceError exceptions and return consistent JSON responses.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{exc.__class__.__name__}: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(EMRServiceError, emr_service_exception_handler)
