"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from backend.conf.config import Config, ModelSettings
from backend.src.services.attachments import (
    AttachmentReader,
    AttachmentStore,
    AttachmentValidator,
    ContentPartAssembler,
)
from backend.src.services.chat import ChatService
from backend.src.services.llm import BaseModelService, GeminiModelService, ResponseNormalizer

logger = logging.getLogger(__name__)


def create_model_service(settings: Optional[ModelSettings] = None) -> BaseModelService:
    """Create the model service.

    Args:
        settings: Model settings. Read from the environment if None.

    Returns:
        Initialized model service
    """
    if settings is None:
        settings = ModelSettings.from_env()
    try:
        return GeminiModelService(settings)
    except Exception as e:
        logger.error(f"Failed to create Gemini model service: {e}")
        raise e


def create_attachment_store(upload_dir: Optional[Union[str, Path]] = None) -> AttachmentStore:
    """Create the transient attachment store.

    Args:
        upload_dir: Directory for stored uploads. Defaults to Config.UPLOAD_DIR.

    Returns:
        Configured AttachmentStore instance
    """
    store = AttachmentStore(upload_dir=upload_dir)
    store.upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Storing uploads in {store.upload_dir}")
    return store


def create_chat_service(
    model_service: Optional[BaseModelService] = None,
    store: Optional[AttachmentStore] = None,
) -> ChatService:
    """Create and configure a ChatService instance.

    Args:
        model_service: Model service for generating answers
        store: Transient storage for uploads

    Returns:
        Configured ChatService instance
    """
    if model_service is None:
        logger.info("No model service provided, creating new one")
        model_service = create_model_service()

    if store is None:
        store = create_attachment_store()

    return ChatService(
        model_service=model_service,
        store=store,
        validator=AttachmentValidator(
            max_files=Config.MAX_FILES,
            max_file_size=Config.MAX_FILE_SIZE,
            allowed_media_types=Config.ALLOWED_MEDIA_TYPES,
        ),
        assembler=ContentPartAssembler(AttachmentReader()),
        normalizer=ResponseNormalizer(),
    )
