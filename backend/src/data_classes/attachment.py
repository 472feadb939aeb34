"""Data class representing an uploaded file held in transient storage."""

from dataclasses import dataclass
from pathlib import Path

from backend.conf.config import Config


@dataclass(frozen=True)
class Attachment:
    """A single uploaded file, tracked for the lifetime of one request.

    Attributes:
        id: Unique identifier, also used as the stored file name stem
        original_name: File name as sent by the client
        media_type: Declared media (MIME) type
        size: Size in bytes of the stored file
        path: Location of the stored file in transient storage
    """

    id: str
    original_name: str
    media_type: str
    size: int
    path: Path

    @property
    def is_image(self) -> bool:
        return self.media_type in Config.IMAGE_MEDIA_TYPES

    @property
    def is_text(self) -> bool:
        return self.media_type in Config.TEXT_MEDIA_TYPES

    @property
    def is_document(self) -> bool:
        return self.media_type in Config.DOCUMENT_MEDIA_TYPES

    @property
    def document_kind(self) -> str:
        """Human-readable document kind used in placeholder texts."""
        return "PDF" if "pdf" in self.media_type else "Word"
