"""Configuration module for the backend."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    UPLOAD_DIR: Path = Path(os.getenv("UPLOAD_DIR", str(BASE_DIR / "backend" / "uploads")))

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_HOST: str = os.getenv("HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("PORT", "4000"))
    # Diagnostic details are only returned to clients in development mode
    DEVELOPMENT_MODE: bool = (
        os.getenv("APP_ENV", os.getenv("FLASK_ENV", "production")) == "development"
    )

    # =========================================================================
    # Upload Configuration
    # =========================================================================
    UPLOAD_FIELD_NAME: str = "files"
    MAX_FILES: int = 10
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10MB per file
    # Transport-level body cap, large enough for MAX_FILES full-size uploads
    MAX_CONTENT_LENGTH: int = MAX_FILES * MAX_FILE_SIZE + 1024 * 1024

    IMAGE_MEDIA_TYPES: FrozenSet[str] = frozenset(
        {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
    )
    TEXT_MEDIA_TYPES: FrozenSet[str] = frozenset({"text/plain", "text/markdown"})
    PDF_MEDIA_TYPE: str = "application/pdf"
    WORD_MEDIA_TYPES: FrozenSet[str] = frozenset(
        {
            "application/msword",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        }
    )
    DOCUMENT_MEDIA_TYPES: FrozenSet[str] = WORD_MEDIA_TYPES | {PDF_MEDIA_TYPE}
    ALLOWED_MEDIA_TYPES: FrozenSet[str] = (
        IMAGE_MEDIA_TYPES | TEXT_MEDIA_TYPES | DOCUMENT_MEDIA_TYPES
    )

    # =========================================================================
    # Gemini Configuration
    # =========================================================================
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")
    GEMINI_TEMPERATURE: Optional[float] = None  # Use the model's default
    GEMINI_MAX_TOKENS: Optional[int] = None


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


@dataclass(frozen=True)
class ModelSettings:
    """Credential-bearing settings for the remote model.

    Built once at startup and handed to the model service, so no credential
    lives in module-level state.

    Attributes:
        api_key: Google API key, or None when the service is not configured
        model_name: Gemini model identifier
        temperature: Sampling temperature, None for the model default
        max_output_tokens: Output token cap, None for the model default
        request_timeout: Per-call timeout in seconds. None leaves the
            transport default in place and no timeout is added.
    """

    api_key: Optional[str]
    model_name: str = Config.GEMINI_MODEL_NAME
    temperature: Optional[float] = Config.GEMINI_TEMPERATURE
    max_output_tokens: Optional[int] = Config.GEMINI_MAX_TOKENS
    request_timeout: Optional[float] = None

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)

    @classmethod
    def from_env(cls, model_name: Optional[str] = None) -> "ModelSettings":
        """Read model settings from the process environment.

        GOOGLE_API_KEY is preferred, GEMINI_API_KEY is used as a fallback.

        Args:
            model_name: Optional override for the configured model name

        Returns:
            ModelSettings instance
        """
        api_key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY") or None
        return cls(
            api_key=api_key,
            model_name=model_name or os.getenv("GEMINI_MODEL_NAME", Config.GEMINI_MODEL_NAME),
            temperature=_optional_float(os.getenv("GEMINI_TEMPERATURE")),
            request_timeout=_optional_float(os.getenv("GEMINI_REQUEST_TIMEOUT")),
        )
