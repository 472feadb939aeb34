"""Result types produced while processing a chat request."""

from dataclasses import dataclass, field
from typing import List, Optional

from backend.src.data_classes.attachment import Attachment
from backend.src.data_classes.content_part import ContentPart


@dataclass
class IncomingRequest:
    """A chat submission after its uploads have been stored.

    Attributes:
        prompt: Prompt text, possibly empty
        attachments: Stored attachments in upload order
    """

    prompt: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    @property
    def has_prompt(self) -> bool:
        return bool(self.prompt)


@dataclass
class AttachmentResult:
    """Outcome of turning one attachment into content parts.

    Attributes:
        attachment: The processed attachment
        parts: Parts produced for it, empty when it was skipped
        error: The error that caused the attachment to be skipped
    """

    attachment: Attachment
    parts: List[ContentPart] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ChatResult:
    """Successful outcome of a chat request.

    Attributes:
        output: Plain-text answer from the model
        files_processed: Number of files received with the request
        files_skipped: Number of files that could not be read
    """

    output: str
    files_processed: int = 0
    files_skipped: int = 0
