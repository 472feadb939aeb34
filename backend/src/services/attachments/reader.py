"""Read stored attachments back from transient storage."""

from backend.src.data_classes import Attachment


class AttachmentReader:
    """Loads an attachment's bytes or decoded text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_bytes(self, attachment: Attachment) -> bytes:
        return attachment.path.read_bytes()

    def read_text(self, attachment: Attachment) -> str:
        # Invalid byte sequences become replacement characters
        return self.read_bytes(attachment).decode(self.encoding, errors="replace")
