"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from api import main
from contract_analyzer import ContractAnalyzer


@pytest.fixture
def client_with_reply(monkeypatch):
    def make(reply):
        analyzer = ContractAnalyzer(extract_fn=lambda system_prompt, user_prompt: reply)
        monkeypatch.setattr(main, "analyzer", analyzer)
        return TestClient(main.app)
    return make


class TestAnalyzeEndpoints:
    """Test mapping of pipeline results and errors to HTTP responses."""

    def test_analyze_json(self, client_with_reply, contract_text, reply_text):
        client = client_with_reply(reply_text)

        response = client.post("/analyze", json={"contract_text": contract_text})

        assert response.status_code == 200
        body = response.json()
        assert body["buyerNames"] == ["John Doe"]
        assert body["deadlines"]["closingDate"] == "2025-03-01"

    def test_analyze_form(self, client_with_reply, contract_text, reply_text):
        client = client_with_reply(reply_text)

        response = client.post("/analyze/text", data={"contract_text": contract_text})

        assert response.status_code == 200
        assert response.json()["propertyAddress"] == "123 Main St, Denver, CO 80202"

    def test_malformed_reply(self, client_with_reply):
        client = client_with_reply("```json\nnot json at all\n```")

        response = client.post("/analyze", json={"contract_text": "Closing"})

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["error"] == "MalformedReplyError"
        assert detail["reply"] == "not json at all"

    def test_schema_violation(self, client_with_reply):
        client = client_with_reply('{"propertyAddress": "X"}')

        response = client.post("/analyze", json={"contract_text": "Closing"})

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["error"] == "SchemaViolationError"
        assert "buyerNames" in detail["missing_fields"]

    def test_missing_body(self, client_with_reply):
        client = client_with_reply("{}")

        response = client.post("/analyze", json={})

        assert response.status_code == 422


class TestServiceEndpoints:
    """Test index and health endpoints."""

    def test_root(self, client_with_reply):
        response = client_with_reply("{}").get("/")

        assert response.status_code == 200
        assert "POST /analyze" in response.json()["endpoints"]

    def test_health(self, client_with_reply):
        response = client_with_reply("{}").get("/health")

        assert response.json() == {
            "status": "healthy",
            "analyzer_initialized": True,
            "prompts_loaded": True,
        }

    def test_health_without_api_key(self, monkeypatch):
        monkeypatch.setattr(main, "analyzer", None)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        response = TestClient(main.app).get("/health")

        assert response.json()["status"] == "unhealthy"
