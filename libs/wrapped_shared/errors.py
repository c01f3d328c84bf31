"""
Standardized error responses and HTTP exception helpers.

This module provides consistent error handling helpers for FastAPI endpoints.
"""

from typing import Any, Optional

from fastapi import HTTPException, status

from .models import ErrorResponse


def validation_error(
    detail: str = "Invalid input parameters",
    field: Optional[str] = None,
    value: Optional[Any] = None,
) -> HTTPException:
    """
    Create a 422 Unprocessable Entity exception with consistent error structure.

    Args:
        detail: Error message explaining the validation error
        field: Optional field name that failed validation
        value: Optional invalid value provided

    Returns:
        HTTPException with 422 status code and structured error content
    """
    error_msg = detail
    if field:
        error_msg = f"{detail} for field '{field}'"
        if value is not None:
            error_msg += f" with value '{value}'"

    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=ErrorResponse(error="Validation Error", detail=error_msg).model_dump(),
    )


def service_error(
    message: str = "Internal service error",
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> HTTPException:
    """
    Create a service error exception with consistent structure.

    Args:
        message: Error message explaining the service error
        status_code: HTTP status code to use

    Returns:
        HTTPException with provided status code and structured error content
    """
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error="Service Error", detail=message).model_dump(),
    )
