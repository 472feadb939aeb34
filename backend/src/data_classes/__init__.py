"""Data classes module for chat request processing.

Classes:
    - Attachment: An uploaded file held in transient storage
    - TextPart, InlineBinaryPart, PlaceholderPart: Typed content parts
    - ModelRequest: Ordered, immutable set of parts for one model call
    - IncomingRequest: Prompt plus stored attachments
    - AttachmentResult: Per-attachment assembly outcome
    - ChatResult: Successful outcome of a chat request
Types:
    - ContentPart: Union of the content part classes
"""

from backend.src.data_classes.attachment import Attachment
from backend.src.data_classes.content_part import (
    ContentPart,
    InlineBinaryPart,
    ModelRequest,
    PlaceholderPart,
    TextPart,
)
from backend.src.data_classes.chat_result import (
    AttachmentResult,
    ChatResult,
    IncomingRequest,
)

__all__ = [
    "Attachment",
    "ContentPart",
    "TextPart",
    "InlineBinaryPart",
    "PlaceholderPart",
    "ModelRequest",
    "IncomingRequest",
    "AttachmentResult",
    "ChatResult",
]
