"""Chat service turning a prompt and attachments into a single model answer.

This service orchestrates the request pipeline:
1. Rejecting empty requests and validating attachments
2. Assembling the ordered content parts, reading each attachment
3. Calling the remote model once
4. Normalizing the response into plain text

Stored attachments are removed as soon as they have been read, and in any
case before the service returns or raises.
"""

import logging
from typing import Optional

from backend.conf.prompts import MODEL_TEST_PROMPT
from backend.src.data_classes import ChatResult, IncomingRequest, ModelRequest, TextPart
from backend.src.exceptions import ConfigurationError, SafetyBlockError, ValidationError
from backend.src.services.attachments import (
    AttachmentReader,
    AttachmentStore,
    AttachmentValidator,
    CleanupManager,
    ContentPartAssembler,
)
from backend.src.services.llm import BaseModelService, ResponseNormalizer, find_block_reason

logger = logging.getLogger(__name__)


class ChatService:
    """Runs the chat pipeline for one request at a time.

    The service holds no per-request state, so a single instance is shared by
    all concurrent requests.

    Attributes:
        model_service: Service calling the remote model
        store: Transient storage the attachments were saved in
        validator: Upload limit checks
        assembler: Builds the content parts
        normalizer: Extracts text from model responses
    """

    def __init__(
        self,
        model_service: BaseModelService,
        store: AttachmentStore,
        validator: Optional[AttachmentValidator] = None,
        assembler: Optional[ContentPartAssembler] = None,
        normalizer: Optional[ResponseNormalizer] = None,
    ) -> None:
        self.model_service = model_service
        self.store = store
        self.validator = validator or AttachmentValidator()
        self.assembler = assembler or ContentPartAssembler(AttachmentReader())
        self.normalizer = normalizer or ResponseNormalizer()

    def process(self, request: IncomingRequest) -> ChatResult:
        """Answer a chat request.

        Args:
            request: Prompt and stored attachments

        Returns:
            ChatResult: Model answer and file counts

        Raises:
            ValidationError: If the request has no content or invalid attachments
            ConfigurationError: If the model service has no credentials
            SafetyBlockError: If the model blocked the prompt
            ModelError: If the model call fails
        """
        with CleanupManager(self.store, request.attachments) as cleanup:
            if not request.has_prompt and not request.attachments:
                raise ValidationError("Please provide a prompt or upload files")

            self.validator.validate(request.attachments)

            if not self.model_service.is_configured:
                raise ConfigurationError()

            assembly = self.assembler.assemble(request.prompt, request.attachments)
            # Everything has been read into memory
            cleanup.release()

            response = self.model_service.generate_content(assembly.request)

        block_reason = find_block_reason(response)
        if block_reason:
            logger.warning(f"Prompt blocked by the model: {block_reason}")
            raise SafetyBlockError()

        output = self.normalizer.normalize(response)
        return ChatResult(
            output=output,
            files_processed=len(request.attachments),
            files_skipped=len(assembly.skipped),
        )

    def check_model(self) -> str:
        """Send a fixed prompt to the model to verify connectivity.

        Returns:
            str: The model's answer

        Raises:
            ConfigurationError: If the model service has no credentials
            ModelError: If the model call fails
        """
        if not self.model_service.is_configured:
            raise ConfigurationError()
        response = self.model_service.generate_content(
            ModelRequest(parts=(TextPart(MODEL_TEST_PROMPT),))
        )
        return self.normalizer.normalize(response)
