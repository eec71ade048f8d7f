"""
Repository Interfaces - Abstract data access contracts

- DocumentRepository: Interface for loading the FAQ document collection

Infrastructure implementations live in faq_chat.infrastructure.
"""

from .document_repository import DocumentRepository

__all__ = [
    "DocumentRepository",
]
