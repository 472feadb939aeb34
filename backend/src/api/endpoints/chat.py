"""Chat endpoints module.

This module provides the Flask route answering a prompt with optional file
attachments using the remote model.
"""

import logging
from typing import List, Tuple

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import HTTPException

from backend.conf.config import Config
from backend.src.api.middleware import classify_error
from backend.src.data_classes import IncomingRequest
from backend.src.exceptions import APIError
from backend.src.services import ChatService

logger = logging.getLogger(__name__)


# Schema definitions
class ChatResponseModel(BaseModel):
    """Chat response model."""

    model_config = ConfigDict(populate_by_name=True)

    output: str = Field(..., description="Generated response text")
    files_processed: int = Field(
        0, alias="filesProcessed", description="Number of files received with the request"
    )


def _uploaded_files() -> List[FileStorage]:
    # Browsers send an empty part for a file input left blank
    return [
        upload
        for upload in request.files.getlist(Config.UPLOAD_FIELD_NAME)
        if upload and upload.filename
    ]


def init_chat_routes(chat_service: ChatService) -> Blueprint:
    """Initialize chat routes with the provided services.

    Args:
        chat_service: Service running the chat pipeline.

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/chat", methods=["POST"])
    def chat() -> Tuple[Response, int]:
        """Answer a prompt with optional file attachments.

        Expects a multipart form with an optional ``prompt`` field and up to
        ten ``files``.

        Returns:
            Response with the model output and the number of processed files
        """
        prompt = request.form.get("prompt", "")
        uploads = _uploaded_files()
        logger.info(f"Processing chat request with {len(uploads)} files")

        validator = chat_service.validator
        try:
            # Limits we can check before anything is written to disk
            validator.check_count(len(uploads))
            for upload in uploads:
                validator.check_media_type(upload.filename or "", upload.mimetype)

            attachments = chat_service.store.save_all(uploads)
            result = chat_service.process(IncomingRequest(prompt=prompt, attachments=attachments))
        except (APIError, HTTPException):
            raise
        except Exception as e:
            logger.error(f"Error in chat endpoint: {str(e)}")
            raise classify_error(
                e, debug=current_app.config.get("DEVELOPMENT_MODE", False)
            ) from e

        if result.files_skipped:
            logger.info(f"{result.files_skipped} files could not be read and were skipped")

        response = ChatResponseModel(output=result.output, files_processed=result.files_processed)
        return jsonify(response.model_dump(by_alias=True)), 200

    return chat_bp
