"""Stats router - handles /stats/* endpoints"""
from datetime import datetime

from fastapi import APIRouter, Depends

from ... import __version__
from ...api.models import HealthResponse
from ...services.chat_service import ChatService
from .chat import get_chat_service

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(service: ChatService = Depends(get_chat_service)):
    """Health check endpoint"""
    count = service.document_count()
    return {
        "status": "healthy" if count is not None else "degraded",
        "documents": count,
        "source": service.repository.describe(),
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
    }
