# faq_chat/core/exceptions.py - Custom exception hierarchy
from typing import Any


class FaqChatException(Exception):  # noqa: N818
    """Base exception for faq-chat application"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {"error": self.__class__.__name__, "message": self.message, "details": self.details}


class InvalidInputError(FaqChatException):  # noqa: N818
    """Input validation errors"""

    pass


class DocumentSourceUnavailableError(FaqChatException):  # noqa: N818
    """Document collection could not be loaded or parsed"""

    pass


class ConfigurationError(FaqChatException):  # noqa: N818
    """Configuration errors"""

    pass


# HTTP Status Code mapping
EXCEPTION_STATUS_CODE_MAP = {
    InvalidInputError: 422,
    DocumentSourceUnavailableError: 503,
    ConfigurationError: 500,
    FaqChatException: 500,  # Default
}


def get_status_code(exception: FaqChatException) -> int:
    """Get HTTP status code for exception"""
    return EXCEPTION_STATUS_CODE_MAP.get(type(exception), 500)
