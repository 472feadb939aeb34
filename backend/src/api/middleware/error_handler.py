"""Error handling middleware for API requests.

This module provides error handling for API requests.
"""

import logging
import traceback
from typing import Tuple

from flask import Flask, Response, current_app, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from backend.conf.config import Config
from backend.src.exceptions import APIError, ErrorResponseModel, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers with the Flask application.

    Args:
        app: Flask application
    """

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError) -> Tuple[Response, int]:  # type: ignore
        """Handle custom API errors.

        Args:
            error: Custom API error

        Returns:
            JSON response with error details
        """
        logger.error(f"API error ({error.__class__.__name__}): {error.message}")
        if hasattr(error, "details") and error.details:
            logger.error(f"Error details: {error.details}")

        return error.to_response()

    @app.errorhandler(RequestEntityTooLarge)
    def handle_request_too_large(error: RequestEntityTooLarge) -> Tuple[Response, int]:  # type: ignore
        """Report request bodies over the transport limit as an oversized file."""
        logger.warning(f"Request body too large: {error}")
        max_mb = Config.MAX_FILE_SIZE // (1024 * 1024)
        return ValidationError(f"File too large. Maximum size is {max_mb}MB.").to_response()

    @app.errorhandler(Exception)
    def handle_exception(error: Exception) -> Tuple[Response, int]:  # type: ignore
        """Handle uncaught exceptions.

        Args:
            error: Exception that was raised

        Returns:
            JSON response with error message
        """
        if isinstance(error, HTTPException):
            response = ErrorResponseModel(error=error.description or error.name)
            return jsonify(response.to_json()), error.code or 500

        logger.error(f"Unhandled exception: {str(error)}")
        logger.error(traceback.format_exc())

        # Only include detailed error info in development mode
        details = str(error) if current_app.config.get("DEVELOPMENT_MODE", False) else None

        response = ErrorResponseModel(error="Internal server error", details=details)
        return jsonify(response.to_json()), 500
