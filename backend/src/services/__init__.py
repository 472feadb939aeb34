"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .attachments import (
    AttachmentReader,
    AttachmentStore,
    AttachmentValidator,
    CleanupManager,
    ContentPartAssembler,
)
from .chat import ChatService
from .factory import create_attachment_store, create_chat_service, create_model_service
from .llm import BaseModelService, GeminiModelService, ModelError, ResponseNormalizer

__all__ = [
    # Model Services
    "BaseModelService",
    "GeminiModelService",
    "ModelError",
    "ResponseNormalizer",
    # Attachment handling
    "AttachmentValidator",
    "AttachmentStore",
    "AttachmentReader",
    "CleanupManager",
    "ContentPartAssembler",
    # Other Services
    "ChatService",
    # Factory Functions
    "create_model_service",
    "create_attachment_store",
    "create_chat_service",
]
