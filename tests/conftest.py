# tests/conftest.py - pytest 공통 설정 / 픽스처
import json
import os
import sys
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# 프로젝트 루트를 경로에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from faq_chat.api.main import create_app  # noqa: E402
from faq_chat.core.config import Settings  # noqa: E402
from faq_chat.domain.models import Document, DocumentStore  # noqa: E402
from faq_chat.infrastructure import (  # noqa: E402
    InMemoryDocumentRepository,
    JsonFileDocumentRepository,
)
from faq_chat.services import ChatService  # noqa: E402

# ========================================
# 테스트용 데이터
# ========================================


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """샘플 FAQ 레코드"""
    return [
        {
            "id": "faq-1",
            "title": "환불 정책",
            "content": "환불은 7일 이내 가능합니다.",
            "tags": ["결제", "환불"],
        },
        {
            "id": "faq-2",
            "title": "교환 신청",
            "content": "교환은 14일 이내에 주문 내역에서 신청할 수 있습니다.",
            "tags": ["배송", "교환"],
        },
        {
            "id": "faq-3",
            "title": "배송 기간",
            "content": "결제 후 2~3일 이내에 출고됩니다.",
            "tags": ["배송"],
        },
        {
            "id": "faq-4",
            "title": "Password reset",
            "content": "Use the reset link sent to your email address.",
        },
    ]


@pytest.fixture
def sample_documents(sample_records) -> list[Document]:
    """샘플 Document 목록"""
    return [Document.from_dict(r) for r in sample_records]


@pytest.fixture
def sample_store(sample_documents) -> DocumentStore:
    """샘플 DocumentStore"""
    return DocumentStore(sample_documents, source="test")


@pytest.fixture
def memory_repository(sample_records) -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository(sample_records)


@pytest.fixture
def faq_file(tmp_path, sample_records) -> str:
    """샘플 레코드를 담은 임시 JSON 파일"""
    path = tmp_path / "faq.json"
    path.write_text(json.dumps(sample_records, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def json_repository(faq_file) -> JsonFileDocumentRepository:
    return JsonFileDocumentRepository(faq_file)


# ========================================
# 테스트용 설정
# ========================================


@pytest.fixture
def test_settings(faq_file) -> Settings:
    """기본값 기반 테스트 설정 (config.yml 과 무관)"""
    return Settings.from_config({"documents": {"path": faq_file}})


@pytest.fixture
def chat_service(memory_repository) -> ChatService:
    return ChatService(memory_repository)


# ========================================
# FastAPI TestClient
# ========================================


@pytest.fixture
def test_client(test_settings, memory_repository) -> Generator[TestClient, None, None]:
    """FastAPI TestClient"""
    app = create_app(settings=test_settings, repository=memory_repository)

    with TestClient(app) as client:
        yield client


# ========================================
# pytest 설정
# ========================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
