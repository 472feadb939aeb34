"""Transient storage for uploaded files.

Every upload is written to the upload directory under a unique name, so
concurrent requests never share a file. Files are removed once the request
that stored them has been handled.
"""

import logging
import uuid
from pathlib import Path
from typing import Iterable, List, Optional, Union

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from backend.conf.config import Config
from backend.src.data_classes import Attachment

logger = logging.getLogger(__name__)


class AttachmentStore:
    """Stores uploads on disk and removes them again.

    Attributes:
        upload_dir: Directory holding the stored files
        field_name: Prefix used for stored file names
    """

    def __init__(
        self,
        upload_dir: Optional[Union[str, Path]] = None,
        field_name: str = Config.UPLOAD_FIELD_NAME,
    ) -> None:
        self.upload_dir = Path(upload_dir) if upload_dir is not None else Config.UPLOAD_DIR
        self.field_name = field_name

    def save(self, upload: FileStorage) -> Attachment:
        """Write one upload to transient storage.

        Args:
            upload: Uploaded file from the request

        Returns:
            Attachment describing the stored file
        """
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        original_name = upload.filename or "upload"
        attachment_id = uuid.uuid4().hex
        suffix = Path(secure_filename(original_name)).suffix
        path = self.upload_dir / f"{self.field_name}-{attachment_id}{suffix}"

        upload.save(str(path))
        size = path.stat().st_size
        logger.debug(f"Stored upload '{original_name}' ({size} bytes) at {path}")

        return Attachment(
            id=attachment_id,
            original_name=original_name,
            media_type=upload.mimetype or "application/octet-stream",
            size=size,
            path=path,
        )

    def save_all(self, uploads: Iterable[FileStorage]) -> List[Attachment]:
        """Store several uploads, keeping their order.

        If storing one upload fails, the files stored before it are removed.

        Args:
            uploads: Uploaded files in upload order

        Returns:
            List of stored attachments in the same order
        """
        attachments: List[Attachment] = []
        try:
            for upload in uploads:
                attachments.append(self.save(upload))
        except Exception:
            for attachment in attachments:
                self.remove(attachment)
            raise
        return attachments

    def remove(self, attachment: Attachment) -> bool:
        """Delete an attachment's stored file.

        A file that is already gone is ignored silently. Other failures are
        logged and swallowed.

        Args:
            attachment: Attachment to remove

        Returns:
            bool: True if a file was deleted
        """
        try:
            attachment.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(
                f"Failed to remove stored file for '{attachment.original_name}': {str(e)}"
            )
            return False
        return True
