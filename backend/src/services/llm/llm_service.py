"""Service module for interacting with the remote generative model.

This module provides a high-level interface for sending an assembled multimodal
request to the model:
- BaseModelService: interface used by the chat pipeline
- GeminiModelService: Google's Gemini API
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import google.generativeai as genai
from google.generativeai.generative_models import GenerativeModel
from google.generativeai.types import GenerationConfig

from backend.conf.config import ModelSettings
from backend.src.data_classes import ModelRequest
from backend.src.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ModelError(RuntimeError):
    """Raised when the remote model call fails.

    The SDK exception is kept as ``__cause__`` so callers can classify it.
    """


class BaseModelService(ABC):
    """Base class for model services.

    This abstract class defines the interface that all model services must implement.
    """

    model_name: str = ""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the service holds the credentials it needs."""

    @abstractmethod
    def generate_content(self, request: ModelRequest) -> Any:
        """Send the request to the model in a single call.

        Args:
            request: Assembled content parts

        Returns:
            The model response, in whatever shape the client library returns

        Raises:
            ConfigurationError: If the service has no credentials
            ModelError: If the model call fails
        """


class GeminiModelService(BaseModelService):
    """Service for interacting with Google's Gemini API.

    Calls are made exactly once per request. No retries are attempted and no
    timeout is set unless ``settings.request_timeout`` is given.

    Attributes:
        settings: Model settings built at startup
        model_name: Gemini model identifier
        client: Gemini model client, None when no API key is configured
    """

    def __init__(self, settings: ModelSettings):
        """Initialize the Gemini model service.

        Args:
            settings: Model settings, including the API key
        """
        self.settings = settings
        self.model_name = settings.model_name
        self.client: Optional[GenerativeModel] = None

        if not settings.is_configured:
            logger.warning(
                "Gemini API key not found. Set GOOGLE_API_KEY or GEMINI_API_KEY to enable chat."
            )
            return

        # The SDK keeps the key in its own client configuration
        genai.configure(api_key=settings.api_key)  # type: ignore

        generation_config = GenerationConfig(
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
        )
        self.client = GenerativeModel(
            model_name=settings.model_name,
            generation_config=generation_config,
        )
        logger.info(f"Initialized Gemini model service with model: {settings.model_name}")

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def generate_content(self, request: ModelRequest) -> Any:
        """Generate a response using Gemini's API.

        Args:
            request: Assembled content parts, sent with the request's role

        Returns:
            Gemini response object

        Raises:
            ConfigurationError: If no API key is configured
            ModelError: If the API call fails
        """
        if self.client is None:
            raise ConfigurationError()

        request_options: Optional[Dict[str, Any]] = None
        if self.settings.request_timeout is not None:
            request_options = {"timeout": self.settings.request_timeout}

        logger.info(f"Sending request to Gemini with {len(request)} parts")
        try:
            return self.client.generate_content(  # type: ignore
                request.to_contents(),
                request_options=request_options,
            )
        except Exception as e:
            logger.error(f"Error generating response from Gemini: {str(e)}")
            raise ModelError(str(e)) from e
