"""Assembly of the ordered content parts sent to the model.

The prompt comes first, followed by the parts for each attachment in upload
order:
- images are embedded inline
- text and markdown files are inlined as text
- PDF and Word documents are replaced by a placeholder asking for plain text

When there is no prompt, each image or text file is followed by a default
instruction. An attachment that cannot be read is logged and skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from backend.conf.prompts import (
    DOCUMENT_PLACEHOLDER_TEMPLATE,
    IMAGE_ANALYSIS_PROMPT,
    TEXT_FILE_TEMPLATE,
    TEXT_SUMMARY_PROMPT,
)
from backend.src.data_classes import (
    Attachment,
    AttachmentResult,
    ContentPart,
    InlineBinaryPart,
    ModelRequest,
    PlaceholderPart,
    TextPart,
)
from backend.src.exceptions import ValidationError
from backend.src.services.attachments.reader import AttachmentReader

logger = logging.getLogger(__name__)


@dataclass
class Assembly:
    """Assembled model request plus the outcome for each attachment."""

    request: ModelRequest
    results: List[AttachmentResult] = field(default_factory=list)

    @property
    def skipped(self) -> List[AttachmentResult]:
        return [result for result in self.results if not result.ok]


class ContentPartAssembler:
    """Builds the model request for a prompt and its attachments."""

    def __init__(self, reader: AttachmentReader) -> None:
        self.reader = reader

    def assemble(self, prompt: str, attachments: Sequence[Attachment]) -> Assembly:
        """Build the ordered content parts.

        Args:
            prompt: User prompt, may be empty
            attachments: Validated attachments in upload order

        Returns:
            Assembly: The model request and per-attachment results

        Raises:
            ValidationError: If no content part could be produced
        """
        has_prompt = bool(prompt)
        parts: List[ContentPart] = []
        if has_prompt:
            parts.append(TextPart(prompt))

        results: List[AttachmentResult] = []
        for attachment in attachments:
            result = self.process_attachment(attachment, has_prompt)
            results.append(result)
            parts.extend(result.parts)

        skipped = sum(1 for result in results if not result.ok)
        if skipped:
            logger.warning(f"Skipped {skipped} of {len(results)} attachments")

        if not parts:
            raise ValidationError("No valid content to process")

        return Assembly(request=ModelRequest(parts=tuple(parts)), results=results)

    def process_attachment(self, attachment: Attachment, has_prompt: bool) -> AttachmentResult:
        """Turn a single attachment into content parts.

        Read failures are captured in the result instead of being raised.

        Args:
            attachment: Attachment to process
            has_prompt: Whether the user supplied a prompt

        Returns:
            AttachmentResult for the attachment
        """
        try:
            parts = self._parts_for(attachment, has_prompt)
        except Exception as e:
            logger.error(f"Error processing file: {attachment.original_name}: {str(e)}")
            return AttachmentResult(attachment=attachment, error=e)
        return AttachmentResult(attachment=attachment, parts=parts)

    def _parts_for(self, attachment: Attachment, has_prompt: bool) -> List[ContentPart]:
        if attachment.is_image:
            parts: List[ContentPart] = [
                InlineBinaryPart(
                    data=self.reader.read_bytes(attachment),
                    media_type=attachment.media_type,
                )
            ]
            if not has_prompt:
                parts.append(TextPart(IMAGE_ANALYSIS_PROMPT))
            return parts

        if attachment.is_text:
            content = self.reader.read_text(attachment)
            parts = [
                TextPart(
                    TEXT_FILE_TEMPLATE.format(name=attachment.original_name, content=content)
                )
            ]
            if not has_prompt:
                parts.append(TextPart(TEXT_SUMMARY_PROMPT))
            return parts

        if attachment.is_document:
            return [
                PlaceholderPart(
                    DOCUMENT_PLACEHOLDER_TEMPLATE.format(
                        kind=attachment.document_kind, name=attachment.original_name
                    )
                )
            ]

        logger.warning(
            f"No content produced for '{attachment.original_name}' ({attachment.media_type})"
        )
        return []
