"""Typed parts of a multimodal model request.

A request to the remote model is an ordered sequence of parts:
    - TextPart: plain text (the prompt, inlined text files, default instructions)
    - InlineBinaryPart: raw bytes with a media type, used for images
    - PlaceholderPart: text standing in for a document that cannot be embedded
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class TextPart:
    """Plain text part."""

    text: str

    def to_gemini(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class InlineBinaryPart:
    """Binary payload sent inline with the request.

    The bytes are kept raw; the Gemini SDK base64-encodes them on the wire.
    """

    data: bytes
    media_type: str

    @property
    def base64_data(self) -> str:
        """Base64 encoding of the payload."""
        return base64.b64encode(self.data).decode("ascii")

    def to_gemini(self) -> Dict[str, Any]:
        return {"inline_data": {"mime_type": self.media_type, "data": self.data}}

    def __repr__(self) -> str:
        return f"InlineBinaryPart(media_type='{self.media_type}', size={len(self.data)})"


@dataclass(frozen=True)
class PlaceholderPart:
    """Text asking the user to supply a converted version of a document."""

    text: str

    def to_gemini(self) -> Dict[str, Any]:
        return {"text": self.text}


ContentPart = Union[TextPart, InlineBinaryPart, PlaceholderPart]


@dataclass(frozen=True)
class ModelRequest:
    """Immutable request for a single model call.

    Attributes:
        parts: Ordered content parts
        role: Role the parts are sent under
    """

    parts: Tuple[ContentPart, ...]
    role: str = "user"

    def to_contents(self) -> list:
        """Render as the ``contents`` argument of ``generate_content``."""
        return [{"role": self.role, "parts": [part.to_gemini() for part in self.parts]}]

    def __len__(self) -> int:
        return len(self.parts)
