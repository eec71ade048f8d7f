"""
Services layer - Business logic extraction

This module contains service classes that encapsulate business logic,
separated from the API routing layer for better testability and reusability.
"""

from .answer_service import AnswerAssembler
from .chat_service import ChatService

__all__ = [
    "AnswerAssembler",
    "ChatService",
]
