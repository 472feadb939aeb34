"""Flask application answering chat prompts with optional file attachments."""

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Config reads the environment at import time
load_dotenv()

from backend.conf.config import Config, ModelSettings
from backend.src.api import setup_api
from backend.src.services import (
    AttachmentStore,
    BaseModelService,
    create_attachment_store,
    create_chat_service,
    create_model_service,
)

# Logging is configured in backend/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    model_service: Optional[BaseModelService] = None,
    store: Optional[AttachmentStore] = None,
    development_mode: Optional[bool] = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        model_service: Model service to use. Built from the environment if None.
        store: Transient upload storage. Uses Config.UPLOAD_DIR if None.
        development_mode: Whether error responses may include diagnostic details.
            Defaults to Config.DEVELOPMENT_MODE.
    """
    logger.info("Starting application setup...")

    app = Flask(__name__)
    CORS(app)
    app.config["MAX_CONTENT_LENGTH"] = Config.MAX_CONTENT_LENGTH
    # Long prompts arrive as a plain form field
    app.config["MAX_FORM_MEMORY_SIZE"] = Config.MAX_FILE_SIZE
    app.config["DEVELOPMENT_MODE"] = (
        Config.DEVELOPMENT_MODE if development_mode is None else development_mode
    )

    if model_service is None:
        model_service = create_model_service()
    if store is None:
        store = create_attachment_store()

    logger.info("Creating chat service")
    chat_service = create_chat_service(model_service, store)

    logger.info("Setting up API routes")
    setup_api(app, chat_service)

    if model_service.is_configured:
        logger.info("Gemini API key configured")
    else:
        logger.warning("GOOGLE_API_KEY / GEMINI_API_KEY not found")

    logger.info("Application setup complete")
    return app


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run the chat backend (--host, --port, --model, --debug)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=Config.FLASK_HOST,
        help=f"Interface to bind (default: {Config.FLASK_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", Config.FLASK_PORT)),
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help=f"Gemini model to use (default: {Config.GEMINI_MODEL_NAME})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Include diagnostic details in error responses",
    )

    args = parser.parse_args()

    settings = ModelSettings.from_env(model_name=args.model)
    logger.info(f"Using model: {settings.model_name}")
    if settings.request_timeout is not None:
        logger.info(f"Model request timeout: {settings.request_timeout}s")

    try:
        model_service = create_model_service(settings)
    except Exception as e:
        logger.error(f"Failed to initialize Gemini model service: {str(e)}")
        sys.exit(1)

    app = create_app(model_service, development_mode=args.debug or None)

    base_url = f"http://localhost:{args.port}"
    logger.info(f"Server running on port {args.port}")
    logger.info(f"Health check:  {base_url}/health")
    logger.info(f"Test Gemini:   {base_url}/test-gemini")
    logger.info(f"Chat endpoint: {base_url}/chat")

    app.run(host=args.host, port=args.port, threaded=True)
