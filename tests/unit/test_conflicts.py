"""
Unit Tests for the Conflict Detector

The rule table is static: each test pins which jurisdiction combinations and
context flags emit which tension ids.
"""

import pytest

from jurisdictions import CONFLICT_RULES, detect_conflicts, map_all_jurisdictions
from shared.models import (
    AgenticAiContext,
    AISector,
    ComplianceTimeline,
    GpaiInfo,
    JurisdictionResult,
    ProductType,
    RiskClassification,
    RiskLevel,
    SectorContext,
)


def _results(*pairs):
    """Build minimal results from (jurisdiction, level) pairs or bare ids."""
    out = []
    for pair in pairs:
        jurisdiction, level = pair if isinstance(pair, tuple) else (pair, RiskLevel.MINIMAL)
        out.append(
            JurisdictionResult(
                jurisdiction=jurisdiction,
                risk_classification=RiskClassification(level=level, justification="-"),
                compliance_timeline=ComplianceTimeline(),
            )
        )
    return out


def _ids(tensions):
    return [t.id for t in tensions]


class TestRuleTable:
    def test_ten_rules_with_unique_ids(self):
        ids = [rule.id for rule in CONFLICT_RULES]
        assert len(ids) == 10
        assert len(set(ids)) == 10

    def test_no_results_no_tensions(self, context_factory):
        assert detect_conflicts(context_factory(), []) == []

    def test_single_jurisdiction_no_tensions(self, context_factory):
        assert detect_conflicts(context_factory(), _results("eu-ai-act")) == []


class TestChinaRules:
    def test_generator_eu_china_content_labeling(self, registry, generator_context):
        results = map_all_jurisdictions(generator_context, registry).results
        assert "eu-china-content-labeling" in _ids(detect_conflicts(generator_context, results))

    def test_content_labeling_needs_generated_content(self, context_factory):
        ctx = context_factory(product_type=ProductType.CLASSIFIER)
        ids = _ids(detect_conflicts(ctx, _results("eu-ai-act", "china")))
        assert "eu-china-content-labeling" not in ids
        assert "china-eu-content-review" in ids

    def test_gdpr_and_china(self, context_factory):
        ids = _ids(detect_conflicts(context_factory(), _results("eu-gdpr", "china")))
        assert ids == [
            "china-eu-content-review",
            "gdpr-china-data-minimisation",
            "cross-border-data-transfer",
            "gdpr-erasure-china-retention",
        ]

    def test_data_minimisation_description(self, context_factory):
        [tension] = [
            t for t in detect_conflicts(context_factory(), _results("eu-gdpr", "china"))
            if t.id == "gdpr-china-data-minimisation"
        ]
        assert tension.description.startswith(
            "GDPR Article 5(1)(c) requires data minimisation — processing only data adequate, "
            "relevant, and limited to what is necessary."
        )

    def test_us_and_china_transparency(self, context_factory):
        ids = _ids(detect_conflicts(context_factory(), _results("us-ca", "china")))
        assert ids == ["us-china-transparency"]

    def test_cross_border_lists_present_regimes_only(self, context_factory):
        tensions = detect_conflicts(context_factory(), _results("brazil", "uk", "china", "singapore"))
        [transfer] = [t for t in tensions if t.id == "cross-border-data-transfer"]
        assert transfer.jurisdictions == ["brazil", "china", "singapore"]

    @pytest.mark.parametrize("open_source", [True, False])
    def test_gpai_filing_description_branches(self, context_factory, open_source):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            gpai_info=GpaiInfo(is_gpai_model=True, is_open_source=open_source),
        )
        [tension] = [
            t for t in detect_conflicts(ctx, _results("eu-ai-act", "china"))
            if t.id == "gpai-opensource-china-filing"
        ]
        assert ("appears to use an open-source GPAI model" in tension.description) is open_source
        assert ("make no distinction for open-source models — all" in tension.description) is open_source


class TestSingaporeRules:
    def test_proportionality_needs_eu_high_risk(self, context_factory):
        ctx = context_factory()
        assert "singapore-eu-proportionality" not in _ids(
            detect_conflicts(ctx, _results("singapore", ("eu-ai-act", RiskLevel.LIMITED)))
        )
        assert "singapore-eu-proportionality" in _ids(
            detect_conflicts(ctx, _results("singapore", ("eu-ai-act", RiskLevel.HIGH)))
        )

    def test_agentic_divergence(self, context_factory):
        ctx = context_factory(agentic_ai_context=AgenticAiContext(is_agentic=True))
        tensions = detect_conflicts(ctx, _results("uk", "singapore", "brazil"))
        [agentic] = [t for t in tensions if t.id == "agentic-ai-framework-divergence"]
        assert agentic.jurisdictions == ["singapore", "uk", "brazil"]

    def test_agentic_divergence_needs_another_market(self, context_factory):
        ctx = context_factory(agentic_ai_context=AgenticAiContext(is_agentic=True))
        assert detect_conflicts(ctx, _results("singapore")) == []


class TestFinancialRule:
    def test_needs_two_financial_regulators(self, context_factory):
        ctx = context_factory(sector_context=SectorContext(sector=AISector.FINANCIAL_SERVICES))
        assert detect_conflicts(ctx, _results("uk", "brazil")) == []
        [tension] = detect_conflicts(ctx, _results("uk", "brazil", "us-federal"))
        assert tension.id == "financial-ai-regulatory-divergence"
        assert tension.jurisdictions == ["uk", "us-federal"]

    def test_not_financial(self, context_factory):
        assert detect_conflicts(context_factory(), _results("uk", "us-federal")) == []


class TestDeterminism:
    def test_same_inputs_same_output(self, registry, generator_context):
        results = map_all_jurisdictions(generator_context, registry).results
        first = detect_conflicts(generator_context, results)
        second = detect_conflicts(generator_context, results)
        assert first == second

    def test_does_not_touch_results(self, registry, generator_context):
        results = map_all_jurisdictions(generator_context, registry).results
        before = [r.model_dump() for r in results]
        detect_conflicts(generator_context, results)
        assert [r.model_dump() for r in results] == before
