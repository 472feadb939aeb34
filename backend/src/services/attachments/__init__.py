"""Attachment handling: validation, transient storage, reading and assembly."""

from .assembler import Assembly, ContentPartAssembler
from .cleanup import CleanupManager
from .reader import AttachmentReader
from .store import AttachmentStore
from .validator import AttachmentValidator

__all__ = [
    "AttachmentValidator",
    "AttachmentStore",
    "AttachmentReader",
    "CleanupManager",
    "ContentPartAssembler",
    "Assembly",
]
