"""Model service package."""

from .llm_service import BaseModelService, GeminiModelService, ModelError
from .response_normalizer import (
    CandidatePartsStrategy,
    ExtractionStrategy,
    ResponseNormalizer,
    SerializationStrategy,
    TextAccessorStrategy,
    find_block_reason,
)

__all__ = [
    "BaseModelService",
    "GeminiModelService",
    "ModelError",
    "ResponseNormalizer",
    "ExtractionStrategy",
    "TextAccessorStrategy",
    "CandidatePartsStrategy",
    "SerializationStrategy",
    "find_block_reason",
]
