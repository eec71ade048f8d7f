"""Chat router - handles /api/chat, /api/categories and /api/suggestions endpoints"""
import time

from fastapi import APIRouter, Depends, Query, Request

from ...api.models import CategoriesResponse, ChatRequest, ChatResponse, SuggestionsResponse
from ...services.chat_service import ChatService

router = APIRouter()


def get_chat_service(request: Request) -> ChatService:
    """Chat service built by the application factory"""
    return request.app.state.chat_service


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
def chat(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    start_time = time.perf_counter()
    result = service.ask(req.message, k=req.topk, started_at=start_time)
    return result.to_dict()


@router.get("/categories", response_model=CategoriesResponse)
def categories(service: ChatService = Depends(get_chat_service)):
    """Tag frequencies across the FAQ collection, most frequent first"""
    store = service.get_store()
    return {"categories": [{"name": name, "count": count} for name, count in store.categories()]}


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    limit: int = Query(6, ge=1, le=50), service: ChatService = Depends(get_chat_service)
):
    """Example questions taken from the head of the FAQ collection"""
    store = service.get_store()
    return {"suggestions": [doc.to_suggestion() for doc in store.head(limit)]}
