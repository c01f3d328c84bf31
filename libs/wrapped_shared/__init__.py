"""
Shared utilities for the order-wrapped project.

This package provides the configuration base, logging, error helpers
and common response models used by the wrapped service.
"""

# Configuration
from .config import BaseServiceConfig

# Error helpers
from .errors import service_error, validation_error

# Health check
from .health import format_health_response

# Logging
from .logging import get_logger

# Models
from .models import ErrorResponse, HealthResponse, HealthStatus

__all__ = [
    # Configuration
    "BaseServiceConfig",
    # Errors
    "validation_error",
    "service_error",
    # Health
    "format_health_response",
    # Logging
    "get_logger",
    # Models
    "ErrorResponse",
    "HealthResponse",
    "HealthStatus",
]
