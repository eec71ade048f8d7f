# tests/integration/test_api_endpoints.py
import pytest
from fastapi.testclient import TestClient

from faq_chat.api.main import create_app
from faq_chat.core.config import Settings
from faq_chat.infrastructure import JsonFileDocumentRepository


@pytest.mark.integration
class TestChatEndpoint:
    """Integration tests for /api/chat"""

    def test_refund_question(self, test_client):
        response = test_client.post("/api/chat", json={"message": "환불"})

        assert response.status_code == 200
        data = response.json()

        assert "7일 이내" in data["answer"]
        assert data["citations"][0]["id"] == "faq-1"
        assert data["citations"][0]["score"] > 0
        assert set(data["citations"][0]) == {"id", "title", "snippet", "score"}
        assert data["meta"]["model"] == "local-search"
        assert data["meta"]["latencyMs"] >= 0
        assert "hints" not in data

    @pytest.mark.parametrize("body", [{"message": ""}, {"message": "   "}, {}, {"message": None}])
    def test_empty_question(self, test_client, body):
        response = test_client.post("/api/chat", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["answer"] == "질문이 비어있습니다."
        assert data["citations"] == []
        assert data["meta"]["latencyMs"] == 0

    def test_html_only_message_is_empty(self, test_client):
        response = test_client.post("/api/chat", json={"message": "<b></b>"})
        assert response.json()["answer"] == "질문이 비어있습니다."

    def test_no_match_returns_hints(self, test_client):
        response = test_client.post("/api/chat", json={"message": "zzz999"})

        assert response.status_code == 200
        data = response.json()
        assert data["answer"] == "관련 문서를 찾지 못했습니다."
        assert data["citations"] == []
        assert data["hints"]["categories"]
        assert data["hints"]["suggestions"][0] == {
            "id": "faq-1",
            "title": "환불 정책",
            "tags": ["결제", "환불"],
        }

    def test_tie_keeps_source_order(self, test_client):
        data = test_client.post("/api/chat", json={"message": "이내"}).json()
        assert [c["id"] for c in data["citations"]] == ["faq-1", "faq-2", "faq-3"]

    def test_topk(self, test_client):
        data = test_client.post("/api/chat", json={"message": "이내", "topk": 1}).json()
        assert len(data["citations"]) == 1
        # the top score is shared with documents cut by topk
        assert data["answer"].endswith("조금 더 자세히 알려주세요.")

    def test_topk_above_configured_max(self, test_client):
        response = test_client.post("/api/chat", json={"message": "이내", "topk": 15})

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidInputError"

    def test_topk_bound_follows_configured_max(self, memory_repository):
        settings = Settings.from_config({"api": {"topk_max": 30}})
        app = create_app(settings=settings, repository=memory_repository)

        with TestClient(app) as client:
            accepted = client.post("/api/chat", json={"message": "이내", "topk": 25})
            rejected = client.post("/api/chat", json={"message": "이내", "topk": 31})

        assert accepted.status_code == 200
        assert len(accepted.json()["citations"]) == 3
        assert rejected.status_code == 422
        assert rejected.json()["error"] == "InvalidInputError"

    def test_topk_validation(self, test_client):
        response = test_client.post("/api/chat", json={"message": "환불", "topk": 0})
        assert response.status_code == 422

    def test_non_string_message_rejected(self, test_client):
        response = test_client.post("/api/chat", json={"message": ["환불"]})
        assert response.status_code == 422


@pytest.mark.integration
class TestCatalogEndpoints:
    """Integration tests for /api/categories and /api/suggestions"""

    def test_categories(self, test_client):
        data = test_client.get("/api/categories").json()
        assert data["categories"][0] == {"name": "배송", "count": 2}

    def test_suggestions(self, test_client):
        data = test_client.get("/api/suggestions", params={"limit": 2}).json()
        assert [s["id"] for s in data["suggestions"]] == ["faq-1", "faq-2"]


@pytest.mark.integration
class TestHealthEndpoint:
    """Integration tests for /stats/health"""

    def test_health(self, test_client):
        response = test_client.get("/stats/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["documents"] == 4
        assert data["source"] == "memory"
        assert "timestamp" in data


@pytest.mark.integration
class TestDocumentSourceFailure:
    """A broken document source is reported, never treated as zero matches"""

    @pytest.fixture
    def broken_client(self, tmp_path):
        path = tmp_path / "faq.json"
        path.write_text("{broken", encoding="utf-8")
        settings = Settings.from_config({"documents": {"path": str(path)}})
        app = create_app(settings=settings, repository=JsonFileDocumentRepository(path))

        with TestClient(app) as client:
            yield client

    def test_chat_returns_503(self, broken_client):
        response = broken_client.post("/api/chat", json={"message": "환불"})

        assert response.status_code == 503
        data = response.json()
        assert data["error"] == "DocumentSourceUnavailableError"
        assert "not valid JSON" in data["message"]

    def test_empty_question_still_answered(self, broken_client):
        response = broken_client.post("/api/chat", json={"message": ""})
        assert response.status_code == 200

    def test_health_is_degraded(self, broken_client):
        data = broken_client.get("/stats/health").json()

        assert data["status"] == "degraded"
        assert data["documents"] is None


@pytest.mark.integration
class TestUndecodableDocumentSource:
    """A file that is not UTF-8 is a source failure, and the app still starts"""

    def test_chat_returns_503(self, tmp_path):
        path = tmp_path / "faq.json"
        path.write_bytes(b"\xff\xfe[]")
        settings = Settings.from_config({"documents": {"path": str(path)}})
        app = create_app(settings=settings, repository=JsonFileDocumentRepository(path))

        with TestClient(app) as client:
            response = client.post("/api/chat", json={"message": "환불"})
            health = client.get("/stats/health").json()

        assert response.status_code == 503
        assert response.json()["error"] == "DocumentSourceUnavailableError"
        assert "UTF-8" in response.json()["message"]
        assert health["status"] == "degraded"


@pytest.mark.integration
class TestJsonFileApp:
    """End-to-end flow against a JSON file source"""

    def test_reload_per_request(self, faq_file):
        settings = Settings.from_config(
            {"documents": {"path": faq_file, "reload_per_request": True}}
        )
        app = create_app(settings=settings)

        with TestClient(app) as client:
            data = client.post("/api/chat", json={"message": "교환"}).json()

        assert data["citations"][0]["id"] == "faq-2"
