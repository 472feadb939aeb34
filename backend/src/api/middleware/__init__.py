"""Middleware package for API request processing.

This module registers the error handlers and exposes the error taxonomy.
"""

from flask import Flask

from backend.src.api.middleware.error_classifier import classify_error
from backend.src.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorResponseModel,
    QuotaExceededError,
    SafetyBlockError,
    ServiceError,
    ValidationError,
)


def register_middleware(app: Flask) -> None:
    """Register middleware with the Flask application.

    Args:
        app: Flask application
    """
    from backend.src.api.middleware.error_handler import register_error_handlers

    register_error_handlers(app)


__all__ = [
    "register_middleware",
    "classify_error",
    "APIError",
    "ErrorResponseModel",
    "ValidationError",
    "ConfigurationError",
    "AuthenticationError",
    "SafetyBlockError",
    "QuotaExceededError",
    "ServiceError",
]
