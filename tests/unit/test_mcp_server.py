"""
Unit Tests for the JuriMap MCP Server

This module tests all 4 MCP tools through their implementation functions:
1. list_jurisdictions - Registered jurisdictions
2. map_product - Full applicability report
3. map_jurisdiction - One jurisdiction's result
4. explain_risk - Risk classification plus evaluated triggers

Tests cover:
- Valid inputs produce JSON-ready output
- Invalid product contexts come back as an error entry
- Unknown jurisdictions come back as an error entry
"""

import json

import pytest

import mcp_server.server as server_module
from jurisdictions import JurisdictionRegistry
from jurisdictions.eu_ai_act import EuAiActModule
from mcp_server import (
    explain_risk_impl,
    list_jurisdictions_impl,
    map_jurisdiction_impl,
    map_product_impl,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_registry():
    """Rebuild the lazily created registry for every test."""
    server_module._registry = None
    yield
    server_module._registry = None


@pytest.fixture
def generator_product():
    return {
        "description": "A marketing copy generator for online shops.",
        "product_type": "generator",
        "user_populations": ["consumers"],
        "target_markets": ["eu-ai-act", "china"],
    }


# =============================================================================
# Test Tool 1: list_jurisdictions
# =============================================================================

class TestListJurisdictions:
    def test_lists_every_builtin_module(self):
        entries = list_jurisdictions_impl()
        assert len(entries) == 12
        assert entries[0]["id"] == "eu-ai-act"

    def test_entry_shape(self):
        for entry in list_jurisdictions_impl():
            assert set(entry) == {"id", "name", "region", "description"}

    def test_respects_environment(self, monkeypatch):
        monkeypatch.setenv("JURIMAP_JURISDICTIONS", "uk,brazil")
        assert [e["id"] for e in list_jurisdictions_impl()] == ["uk", "brazil"]


# =============================================================================
# Test Tool 2: map_product
# =============================================================================

class TestMapProduct:
    def test_report_structure(self, generator_product):
        report = map_product_impl(generator_product)

        assert set(report) == {
            "results",
            "errors",
            "aggregate",
            "merged_artifacts",
            "action_plan",
            "conflicts",
            "summary",
        }
        assert [r["jurisdiction"] for r in report["results"]] == ["eu-ai-act", "china"]
        assert report["summary"]["highest_risk_market"] == "china"

    def test_output_is_json_serializable(self, generator_product):
        json.dumps(map_product_impl(generator_product))

    def test_conflicts_detected(self, generator_product):
        ids = [t["id"] for t in map_product_impl(generator_product)["conflicts"]]
        assert "eu-china-content-labeling" in ids
        assert "china-eu-content-review" in ids

    def test_invalid_product(self):
        result = map_product_impl({"description": "Missing everything else"})
        assert result["error"] == "Invalid product context"
        assert result["details"]

    def test_unregistered_market_is_reported(self, generator_product):
        server_module._registry = JurisdictionRegistry([EuAiActModule()]).freeze()
        report = map_product_impl(generator_product)

        assert [r["jurisdiction"] for r in report["results"]] == ["eu-ai-act"]
        assert [e["jurisdiction"] for e in report["errors"]] == ["china"]


# =============================================================================
# Test Tool 3: map_jurisdiction
# =============================================================================

class TestMapJurisdiction:
    def test_maps_one_jurisdiction(self, generator_product):
        result = map_jurisdiction_impl(generator_product, "china")

        assert result["jurisdiction"] == "china"
        assert result["risk_classification"]["level"] == "high"
        assert result["applicable_laws"][0]["id"] == "china"

    def test_unregistered_jurisdiction(self, generator_product):
        result = map_jurisdiction_impl(generator_product, "atlantis")
        assert result["jurisdiction"] == "atlantis"
        assert "not registered" in result["error"]

    def test_invalid_product(self):
        result = map_jurisdiction_impl({"product_type": "generator"}, "china")
        assert result["error"] == "Invalid product context"


# =============================================================================
# Test Tool 4: explain_risk
# =============================================================================

class TestExplainRisk:
    def test_reports_satisfied_triggers(self, generator_product):
        result = explain_risk_impl(generator_product, "china")
        satisfied = [t["trigger_id"] for t in result["triggers"] if t["satisfied"]]

        assert result["jurisdiction"] == "china"
        assert result["risk_classification"]["level"] == "high"
        assert "cn-cac-genai-public" in satisfied

    def test_unregistered_jurisdiction(self, generator_product):
        assert "error" in explain_risk_impl(generator_product, "atlantis")
