"""Request-scoped cleanup of transient attachment storage."""

import logging
from types import TracebackType
from typing import Iterable, List, Optional, Type

from backend.src.data_classes import Attachment
from backend.src.services.attachments.store import AttachmentStore

logger = logging.getLogger(__name__)


class CleanupManager:
    """Removes a request's stored attachments when its scope ends.

    Use as a context manager around the work done with the attachments. The
    files are removed exactly once, whether the block returns or raises;
    later calls to ``release`` do nothing.

    Attributes:
        store: Store the attachments were saved in
        attachments: Attachments owned by the request
        released: Whether cleanup has already run
    """

    def __init__(self, store: AttachmentStore, attachments: Iterable[Attachment]) -> None:
        self.store = store
        self.attachments: List[Attachment] = list(attachments)
        self.released = False

    def release(self) -> int:
        """Remove every attachment's stored file.

        Returns:
            int: Number of files deleted by this call
        """
        if self.released:
            return 0
        self.released = True

        removed = 0
        for attachment in self.attachments:
            try:
                if self.store.remove(attachment):
                    removed += 1
            except Exception as e:
                logger.warning(f"Cleanup failed for '{attachment.original_name}': {str(e)}")
        if self.attachments:
            logger.debug(f"Removed {removed}/{len(self.attachments)} stored attachments")
        return removed

    def __enter__(self) -> "CleanupManager":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()
