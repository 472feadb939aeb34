"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from flask import Flask

from backend.src.api.endpoints.chat import init_chat_routes
from backend.src.api.endpoints.health import init_health_routes
from backend.src.services import ChatService


def register_endpoints(app: Flask, chat_service: ChatService) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        chat_service: Service running the chat pipeline
    """
    app.register_blueprint(init_chat_routes(chat_service))

    # Health check and model self-test
    app.register_blueprint(init_health_routes(chat_service))
