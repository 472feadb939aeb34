"""Extract plain text from model responses.

Responses differ between client library versions: some expose a ``text``
accessor, some only the raw candidate structure. Each strategy below handles
one shape and returns None when it does not apply; the normalizer tries them
in order and always ends with a full serialization of the response.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

logger = logging.getLogger(__name__)


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from an object attribute or a mapping key."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


class ExtractionStrategy(ABC):
    """One way of getting text out of a response."""

    name: str = "strategy"

    @abstractmethod
    def extract(self, response: Any) -> Optional[str]:
        """Return the response text, or None if this strategy does not apply."""


class TextAccessorStrategy(ExtractionStrategy):
    """Use the response's own text accessor (attribute, property or method)."""

    name = "text_accessor"

    def extract(self, response: Any) -> Optional[str]:
        try:
            text = _field(response, "text")
            if callable(text):
                text = text()
        except ValueError as e:
            # The SDK raises when the response has no valid text part
            logger.debug(f"Text accessor unavailable: {e}")
            return None
        return text if isinstance(text, str) else None


class CandidatePartsStrategy(ExtractionStrategy):
    """Join the text parts of the first candidate's content."""

    name = "candidate_parts"

    def extract(self, response: Any) -> Optional[str]:
        candidates = _field(response, "candidates")
        if not candidates:
            return None
        try:
            first = candidates[0]
        except (IndexError, KeyError, TypeError):
            return None

        parts = _field(_field(first, "content"), "parts")
        if parts is None or isinstance(parts, (str, bytes)):
            return None
        try:
            texts = [_field(part, "text") for part in parts]
        except TypeError:
            return None
        return "".join(text for text in texts if isinstance(text, str))


class SerializationStrategy(ExtractionStrategy):
    """Serialize the whole response as JSON."""

    name = "serialization"

    def extract(self, response: Any) -> Optional[str]:
        for method in ("to_dict", "model_dump"):
            serializer = getattr(response, method, None)
            if callable(serializer):
                try:
                    return json.dumps(serializer(), default=str)
                except Exception as e:
                    logger.debug(f"{method}() failed on response: {e}")
        if isinstance(response, (dict, list, str, int, float, bool)) or response is None:
            return json.dumps(response, default=str)
        if hasattr(response, "__dict__"):
            return json.dumps(vars(response), default=str)
        return json.dumps(str(response))


DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (
    TextAccessorStrategy(),
    CandidatePartsStrategy(),
    SerializationStrategy(),
)


class ResponseNormalizer:
    """Turns any model response into plain text using ordered strategies."""

    def __init__(self, strategies: Optional[Sequence[ExtractionStrategy]] = None):
        self.strategies: List[ExtractionStrategy] = list(
            strategies if strategies is not None else DEFAULT_STRATEGIES
        )

    def normalize(self, response: Any) -> str:
        """Extract plain text from a model response.

        Args:
            response: Model response of any supported shape

        Returns:
            str: The response text
        """
        for strategy in self.strategies:
            text = strategy.extract(response)
            if text is not None:
                logger.debug(f"Extracted response text using {strategy.name}")
                return text
        # Only reached with a custom strategy list lacking a serializer
        return json.dumps(str(response))


def find_block_reason(response: Any) -> Optional[str]:
    """Return the prompt block reason reported in a response, if any.

    Args:
        response: Model response

    Returns:
        The block reason name, or None when the prompt was not blocked
    """
    reason = _field(_field(response, "prompt_feedback"), "block_reason")
    if not reason or isinstance(reason, bool):
        return None
    return str(getattr(reason, "name", reason))
