"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging

from flask import Flask

from backend.src.api.endpoints import register_endpoints
from backend.src.api.middleware import register_middleware
from backend.src.services import ChatService

logger = logging.getLogger(__name__)


def setup_api(app: Flask, chat_service: ChatService) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        chat_service: Service running the chat pipeline
    """
    register_middleware(app)

    register_endpoints(app, chat_service)
    logger.debug(f"Registered routes: {sorted(rule.rule for rule in app.url_map.iter_rules())}")
