"""Configuration and prompt texts for the backend."""

from backend.conf.config import Config, ModelSettings

__all__ = ["Config", "ModelSettings"]
