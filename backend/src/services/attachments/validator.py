"""Admission checks for uploaded attachments."""

import logging
from typing import Iterable, Optional

from backend.conf.config import Config
from backend.src.data_classes import Attachment
from backend.src.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AttachmentValidator:
    """Enforces the per-request and per-file upload limits.

    Attributes:
        max_files: Maximum number of attachments per request
        max_file_size: Maximum size of a single attachment in bytes
        allowed_media_types: Media types accepted for upload
    """

    def __init__(
        self,
        max_files: int = Config.MAX_FILES,
        max_file_size: int = Config.MAX_FILE_SIZE,
        allowed_media_types: Optional[Iterable[str]] = None,
    ) -> None:
        self.max_files = max_files
        self.max_file_size = max_file_size
        self.allowed_media_types = frozenset(
            allowed_media_types
            if allowed_media_types is not None
            else Config.ALLOWED_MEDIA_TYPES
        )

    def check_count(self, count: int) -> None:
        """Reject requests carrying too many files.

        Raises:
            ValidationError: If count exceeds max_files
        """
        if count > self.max_files:
            logger.warning(f"Rejected request with {count} files")
            raise ValidationError(f"Too many files. Maximum is {self.max_files} files.")

    def check_media_type(self, name: str, media_type: str) -> None:
        """Reject a file whose declared media type is not allowed.

        Raises:
            ValidationError: If media_type is not in the allow-list
        """
        if media_type not in self.allowed_media_types:
            logger.warning(f"Rejected file '{name}' with media type {media_type}")
            raise ValidationError(
                f"File type {media_type} is not supported",
                details=f"Rejected file: {name}",
            )

    def check_size(self, name: str, size: int) -> None:
        """Reject a file larger than max_file_size.

        Raises:
            ValidationError: If size exceeds max_file_size
        """
        if size > self.max_file_size:
            logger.warning(f"Rejected file '{name}' of {size} bytes")
            max_mb = self.max_file_size // (1024 * 1024)
            raise ValidationError(
                f"File too large. Maximum size is {max_mb}MB.",
                details=f"Rejected file: {name}",
            )

    def validate(self, attachments: Iterable[Attachment]) -> None:
        """Run every check on a request's attachments.

        The request is rejected as a whole on the first failing attachment.

        Args:
            attachments: Stored attachments of one request

        Raises:
            ValidationError: If any limit is violated
        """
        attachments = list(attachments)
        self.check_count(len(attachments))
        for attachment in attachments:
            self.check_media_type(attachment.original_name, attachment.media_type)
            self.check_size(attachment.original_name, attachment.size)
