# faq_chat/api/models.py - Pydantic models for request/response validation
import re
from typing import Any

from pydantic import BaseModel, Field, validator


class ChatRequest(BaseModel):
    """Chat endpoint request model"""

    # Empty or missing messages are answered with a fixed response, not rejected
    message: str | None = Field(None, max_length=1000, description="질문")
    # Upper bound comes from api.topk_max
    topk: int | None = Field(None, ge=1, description="인용 문서 수")

    @validator("message")
    def sanitize_message(cls, v):  # noqa: N805
        """XSS 방지: HTML 태그 제거"""
        if v is None:
            return v
        return re.sub(r"<[^>]+>", "", v).strip()

    class Config:
        json_schema_extra = {"example": {"message": "환불은 언제까지 가능한가요?", "topk": 3}}


class Citation(BaseModel):
    """Citation model"""

    id: str
    title: str
    snippet: str
    score: int


class Meta(BaseModel):
    """Response metadata"""

    model: str
    latencyMs: int  # noqa: N815


class Suggestion(BaseModel):
    """Suggested document"""

    id: str
    title: str
    tags: list[str] = []


class Hints(BaseModel):
    """Fallback hints for unanswered questions"""

    categories: list[str]
    suggestions: list[Suggestion]


class ChatResponse(BaseModel):
    """Chat endpoint response model"""

    answer: str
    citations: list[Citation]
    meta: Meta
    hints: Hints | None = None


class Category(BaseModel):
    """Tag with its document count"""

    name: str
    count: int


class CategoriesResponse(BaseModel):
    categories: list[Category]


class SuggestionsResponse(BaseModel):
    suggestions: list[Suggestion]


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    documents: int | None
    source: str
    timestamp: str
    version: str | None = None


class ErrorResponse(BaseModel):
    """Error response model"""

    error: str
    message: str
    details: dict[str, Any] | None = None
