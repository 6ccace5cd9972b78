"""
Unit Tests for the JuriMap API

This module covers:
- api/models.py: MapRequest validation
- api/main.py: endpoint behaviour on success and error paths

Each endpoint runs against the real registry built in the app lifespan.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from api.main import app
from api.models import MapRequest
from jurisdictions import JurisdictionRegistry
from jurisdictions.eu_ai_act import EuAiActModule


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def agentic_payload():
    """Bounded-autonomy purchasing agent in the EU and Singapore, as JSON."""
    return {
        "description": "An autonomous procurement agent that places purchase orders with suppliers.",
        "product_type": "agent",
        "decision_impact": "material",
        "automation_level": "human-on-the-loop",
        "target_markets": ["eu-ai-act", "eu-gdpr", "singapore"],
        "agentic_ai_context": {
            "is_agentic": True,
            "autonomy_level": "bounded",
            "can_make_financial_transactions": True,
        },
    }


@pytest.fixture
def chatbot_payload():
    return {
        "description": "A customer support chatbot for an online shop.",
        "product_type": "other",
        "target_markets": ["eu-ai-act"],
    }


# ============================================================================
# MODEL TESTS
# ============================================================================

class TestMapRequest:
    def test_valid_request(self, agentic_payload):
        request = MapRequest(product=agentic_payload, today="2025-06-01")
        assert request.today == date(2025, 6, 1)
        assert request.product.target_markets[0].value == "eu-ai-act"

    def test_today_is_optional(self, chatbot_payload):
        assert MapRequest(product=chatbot_payload).today is None

    def test_target_markets_required(self, chatbot_payload):
        chatbot_payload["target_markets"] = []
        with pytest.raises(ValidationError):
            MapRequest(product=chatbot_payload)

    def test_unknown_product_type_rejected(self, chatbot_payload):
        chatbot_payload["product_type"] = "robot"
        with pytest.raises(ValidationError):
            MapRequest(product=chatbot_payload)


# ============================================================================
# ENDPOINT TESTS
# ============================================================================

class TestHealthEndpoint:
    def test_health_check_returns_healthy(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check_timestamp_is_valid_iso_format(self, api_client):
        timestamp = api_client.get("/health").json()["timestamp"]
        datetime.fromisoformat(timestamp)

    def test_root(self, api_client):
        assert api_client.get("/").json()["name"] == "JuriMap API"


class TestJurisdictionsEndpoint:
    def test_lists_registered_jurisdictions(self, api_client):
        response = api_client.get("/api/jurisdictions")
        assert response.status_code == 200

        jurisdictions = response.json()["jurisdictions"]
        ids = [j["id"] for j in jurisdictions]
        assert ids[:2] == ["eu-ai-act", "eu-gdpr"]
        assert "brazil" in ids

    def test_entries_have_required_fields(self, api_client):
        for entry in api_client.get("/api/jurisdictions").json()["jurisdictions"]:
            assert entry["name"]
            assert entry["region"]
            assert entry["description"]


class TestMapEndpoint:
    def test_full_report(self, api_client, agentic_payload):
        response = api_client.post("/api/map", json={"product": agentic_payload, "today": "2025-06-01"})
        assert response.status_code == 200

        report = response.json()
        assert [r["jurisdiction"] for r in report["results"]] == ["eu-ai-act", "eu-gdpr", "singapore"]
        assert report["errors"] == []
        assert report["aggregate"]["highest_risk_level"]["level"] == "high"
        assert report["summary"]["highest_risk_market"] == "singapore"
        assert set(report["action_plan"]) == {"critical", "important", "recommended"}

        [tension] = report["conflicts"]
        assert tension["id"] == "agentic-ai-framework-divergence"
        assert tension["jurisdictions"] == ["singapore", "eu-ai-act", "eu-gdpr"]

    def test_unregistered_market_reported_not_raised(self, api_client, chatbot_payload, monkeypatch):
        monkeypatch.setattr(
            app.state, "registry", JurisdictionRegistry([EuAiActModule()]).freeze()
        )
        chatbot_payload["target_markets"] = ["china", "eu-ai-act"]

        response = api_client.post("/api/map", json={"product": chatbot_payload})
        assert response.status_code == 200

        report = response.json()
        assert [r["jurisdiction"] for r in report["results"]] == ["eu-ai-act"]
        assert [e["jurisdiction"] for e in report["errors"]] == ["china"]

    def test_invalid_body(self, api_client):
        response = api_client.post("/api/map", json={"product": {"description": "x"}})
        assert response.status_code == 422

    def test_missing_product(self, api_client):
        response = api_client.post("/api/map", json={})
        assert response.status_code == 422


class TestSingleJurisdictionEndpoint:
    def test_maps_one_jurisdiction(self, api_client, chatbot_payload):
        response = api_client.post("/api/map/eu-ai-act", json=chatbot_payload)
        assert response.status_code == 200

        result = response.json()
        assert result["jurisdiction"] == "eu-ai-act"
        assert result["risk_classification"]["level"] == "limited"
        assert [a["id"] for a in result["required_actions"]] == ["eu-ai-act-transparency-disclosure"]

    def test_ignores_target_markets(self, api_client, chatbot_payload):
        response = api_client.post("/api/map/uk", json=chatbot_payload)
        assert response.status_code == 200
        assert response.json()["jurisdiction"] == "uk"

    def test_unregistered_jurisdiction(self, api_client, chatbot_payload):
        response = api_client.post("/api/map/atlantis", json=chatbot_payload)
        assert response.status_code == 404
        assert "not registered" in response.json()["detail"]


class TestExplainEndpoint:
    def test_explains_triggers(self, api_client, chatbot_payload):
        response = api_client.post("/api/explain/eu-ai-act", json=chatbot_payload)
        assert response.status_code == 200

        body = response.json()
        assert body["jurisdiction"] == "eu-ai-act"
        assert body["risk_classification"]["level"] == "limited"
        assert any(t["satisfied"] for t in body["triggers"])
        assert not all(t["satisfied"] for t in body["triggers"])

    def test_unregistered_jurisdiction(self, api_client, chatbot_payload):
        response = api_client.post("/api/explain/atlantis", json=chatbot_payload)
        assert response.status_code == 404
