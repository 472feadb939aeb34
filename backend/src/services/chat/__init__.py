"""Chat request processing service."""

from backend.src.services.chat.chat_service import ChatService

__all__ = ["ChatService"]
