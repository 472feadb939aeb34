"""Health and diagnostic endpoints."""

import logging
from datetime import datetime, timezone
from typing import Tuple

from flask import Blueprint, Response, jsonify
from pydantic import BaseModel, Field

from backend.src.exceptions import APIError, ConfigurationError, ServiceError
from backend.src.services import ChatService

logger = logging.getLogger(__name__)


class HealthResponseModel(BaseModel):
    """Health check response model."""

    status: str = Field("healthy", description="Service status")
    timestamp: str = Field(..., description="Current time, ISO 8601")
    configured: bool = Field(..., description="Whether a model API key is configured")
    model: str = Field(..., description="Model used for chat")


class ModelTestResponseModel(BaseModel):
    """Model connectivity test response model."""

    status: str = Field("success", description="Test status")
    message: str = Field(..., description="Answer returned by the model")


def init_health_routes(chat_service: ChatService) -> Blueprint:
    """Initialize health and diagnostic routes.

    Args:
        chat_service: Service whose model connection is reported.

    Returns:
        Blueprint: Flask blueprint with configured routes.
    """
    health_bp = Blueprint("health", __name__)
    model_service = chat_service.model_service

    @health_bp.route("/health", methods=["GET"])
    def health() -> Tuple[Response, int]:
        response = HealthResponseModel(
            timestamp=datetime.now(timezone.utc).isoformat(),
            configured=model_service.is_configured,
            model=model_service.model_name,
        )
        return jsonify(response.model_dump()), 200

    @health_bp.route("/test-gemini", methods=["GET"])
    def test_gemini() -> Tuple[Response, int]:
        """Check that the model answers a fixed prompt.

        Returns:
            Response with the model's answer
        """
        if not model_service.is_configured:
            raise ConfigurationError()
        try:
            message = chat_service.check_model()
        except APIError:
            raise
        except Exception as e:
            logger.error(f"Gemini test error: {str(e)}")
            raise ServiceError(message="Failed to connect to Gemini AI", details=str(e)) from e

        response = ModelTestResponseModel(message=message)
        return jsonify(response.model_dump()), 200

    @health_bp.route("/", methods=["GET"])
    def root() -> Tuple[Response, int]:
        return jsonify({"message": "hello backend is working"}), 200

    return health_bp
