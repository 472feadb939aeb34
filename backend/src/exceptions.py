"""Custom exception types for the API.

This module defines the error taxonomy surfaced to API clients and the error response model.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from flask import Response, jsonify
from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    details: Optional[Union[str, List[Dict[str, Any]]]] = Field(
        None, description="Additional error details"
    )

    def to_json(self) -> Dict[str, Any]:
        """Serialize, leaving out details when there are none."""
        return self.model_dump(exclude_none=True)


class APIError(Exception):
    """Base class for all API errors."""

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Union[str, List[Dict[str, Any]]]] = None,
    ):
        """Initialize the API error.

        Args:
            message: Custom error message (uses default_message if None)
            details: Additional error details
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> Tuple[Response, int]:
        """Convert to Flask response."""
        error_model = ErrorResponseModel(error=self.message, details=self.details)
        return jsonify(error_model.to_json()), self.status_code


class ValidationError(APIError):
    """Error for invalid request data: missing content, bad files, nothing to send."""

    status_code = 400
    default_message = "Invalid request data"


class ConfigurationError(APIError):
    """The service is missing a credential it needs."""

    status_code = 500
    default_message = "Gemini API key not configured"


class AuthenticationError(APIError):
    """The remote model rejected the configured credential."""

    status_code = 500
    default_message = "Invalid API key configuration"


class SafetyBlockError(APIError):
    """The remote model refused the content."""

    status_code = 400
    default_message = "Content was blocked by safety filters"


class QuotaExceededError(APIError):
    """The remote model's quota is exhausted."""

    status_code = 429
    default_message = "API quota exceeded. Please try again later."


class ServiceError(APIError):
    """Error from underlying services."""

    status_code = 500
    default_message = "Service error"
