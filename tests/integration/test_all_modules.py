"""
Integration Tests across every jurisdiction module

This module runs a set of representative products through the full pipeline
with all 12 built-in modules registered:
  1. Prohibited social scoring system
  2. Hiring tool with material decisions
  3. Consumer content generator
  4. Agent that can move money
  5. Open-source GPAI provider with systemic risk
  6. Internal analytics tool (nothing applies)

The checks are structural: they hold for every module and every product,
whatever the individual risk levels turn out to be.

Usage:
    pytest tests/integration/test_all_modules.py -v
    pytest -m integration
"""

import json
from datetime import date

import pytest

from jurisdictions import (
    JurisdictionRegistry,
    all_modules,
    analyze_product,
    map_jurisdiction,
)
from shared.models import (
    AgenticAiContext,
    AISector,
    AutomationLevel,
    AutonomyLevel,
    DataCategory,
    DecisionImpact,
    GenerativeAiContext,
    GpaiInfo,
    GpaiRole,
    Jurisdiction,
    ProductContext,
    ProductType,
    RiskLevel,
    SectorContext,
    UserPopulation,
)

pytestmark = pytest.mark.integration

ALL_MARKETS = [j.value for j in Jurisdiction]


# =============================================================================
# Test Products
# =============================================================================

PRODUCTS = {
    "prohibited": dict(
        description="A social scoring system that ranks citizens by trustworthiness.",
        product_type=ProductType.CLASSIFIER,
        user_populations=[UserPopulation.GENERAL_PUBLIC],
        decision_impact=DecisionImpact.DETERMINATIVE,
        automation_level=AutomationLevel.FULLY_AUTOMATED,
    ),
    "hiring": dict(
        description="Resume screening for hiring that ranks job applicants for recruiters.",
        product_type=ProductType.CLASSIFIER,
        data_processed=[DataCategory.PERSONAL],
        user_populations=[UserPopulation.JOB_APPLICANTS],
        decision_impact=DecisionImpact.MATERIAL,
    ),
    "generator": dict(
        description="A marketing image and copy generator for online shops.",
        product_type=ProductType.GENERATOR,
        user_populations=[UserPopulation.CONSUMERS],
        generative_ai_context=GenerativeAiContext(
            uses_foundation_model=True,
            generates_content=True,
            can_generate_deepfakes=True,
        ),
    ),
    "payments-agent": dict(
        description="An autonomous procurement agent that places purchase orders with suppliers.",
        product_type=ProductType.AGENT,
        data_processed=[DataCategory.FINANCIAL],
        decision_impact=DecisionImpact.MATERIAL,
        automation_level=AutomationLevel.HUMAN_ON_THE_LOOP,
        sector_context=SectorContext(sector=AISector.FINANCIAL_SERVICES),
        agentic_ai_context=AgenticAiContext(
            is_agentic=True,
            autonomy_level=AutonomyLevel.BOUNDED,
            can_make_financial_transactions=True,
        ),
    ),
    "gpai-provider": dict(
        description="An open-weights general purpose language model.",
        product_type=ProductType.FOUNDATION_MODEL,
        gpai_info=GpaiInfo(
            is_gpai_model=True,
            gpai_role=GpaiRole.PROVIDER,
            is_open_source=True,
            exceeds_systemic_risk_threshold=True,
        ),
    ),
    "internal-tool": dict(
        description="An internal tool that summarises build metrics for engineers.",
        product_type=ProductType.OTHER,
    ),
}


@pytest.fixture(params=sorted(PRODUCTS))
def product(request):
    return ProductContext(target_markets=ALL_MARKETS, **PRODUCTS[request.param])


@pytest.fixture(scope="module")
def full_registry():
    return JurisdictionRegistry(all_modules()).freeze()


# =============================================================================
# Per-module checks
# =============================================================================

class TestEveryModule:
    def test_registry_covers_every_market(self, full_registry):
        assert full_registry.list_ids() == ALL_MARKETS

    def test_level_is_never_undetermined(self, full_registry, product):
        for module in (e.module for e in full_registry.list()):
            level = module.get_risk_level(product).level
            assert level is not RiskLevel.UNDETERMINED, module.id

    def test_actions_partition_by_priority(self, full_registry, product):
        for market in ALL_MARKETS:
            result = map_jurisdiction(product, market, full_registry)
            actions = full_registry.get_module(market).get_required_actions(product)

            assert len(result.required_actions) + len(result.recommended_actions) == len(actions)
            assert all(a.priority.is_required for a in result.required_actions)
            assert not any(a.priority.is_required for a in result.recommended_actions)

    def test_mapping_is_deterministic(self, full_registry, product):
        for market in ALL_MARKETS:
            first = map_jurisdiction(product, market, full_registry)
            second = map_jurisdiction(product, market, full_registry)
            assert first == second

    def test_explain_covers_every_trigger(self, full_registry, product):
        for module in (e.module for e in full_registry.list()):
            assert len(module.explain(product)) == len(module.triggers)

    def test_timeline_is_always_present(self, full_registry, product):
        for market in ALL_MARKETS:
            result = map_jurisdiction(product, market, full_registry)
            assert result.compliance_timeline is not None

    def test_prohibited_means_stop(self, full_registry):
        ctx = ProductContext(target_markets=ALL_MARKETS, **PRODUCTS["prohibited"])
        result = map_jurisdiction(ctx, "eu-ai-act", full_registry)

        assert result.risk_classification.level is RiskLevel.UNACCEPTABLE
        assert [a.id for a in result.required_artifacts] == ["risk-classification:prohibition-analysis"]


# =============================================================================
# Full pipeline checks
# =============================================================================

class TestFullPipeline:
    def test_every_market_is_mapped(self, full_registry, product):
        report = analyze_product(product, full_registry, today=date(2025, 6, 1))

        assert [r.jurisdiction for r in report.results] == ALL_MARKETS
        assert report.errors == []

    def test_aggregate_matches_results(self, full_registry, product):
        report = analyze_product(product, full_registry, today=date(2025, 6, 1))
        highest = max(r.risk_classification.level.rank for r in report.results)

        assert report.aggregate.highest_risk_level.level.rank == highest
        assert report.aggregate.total_artifacts == sum(len(r.required_artifacts) for r in report.results)
        assert len(report.merged_artifacts) <= report.aggregate.total_artifacts
        assert report.action_plan.total <= report.aggregate.total_actions

    def test_summary_tracks_every_market(self, full_registry, product):
        report = analyze_product(product, full_registry, today=date(2025, 6, 1))
        assert [m.jurisdiction for m in report.summary.market_readiness] == ALL_MARKETS

    def test_report_is_json_serializable(self, full_registry, product):
        report = analyze_product(product, full_registry, today=date(2025, 6, 1))
        json.loads(report.model_dump_json())

    def test_conflict_ids_are_unique(self, full_registry, product):
        report = analyze_product(product, full_registry, today=date(2025, 6, 1))
        ids = [t.id for t in report.conflicts]
        assert len(ids) == len(set(ids))

    def test_nothing_applies_product_has_no_blockers(self, full_registry):
        ctx = ProductContext(target_markets=ALL_MARKETS, **PRODUCTS["internal-tool"])
        report = analyze_product(ctx, full_registry, today=date(2025, 6, 1))

        assert report.summary.critical_blockers == []
        assert all(r.risk_classification.level is RiskLevel.MINIMAL for r in report.results)
