"""
Unit Tests for the Requirement Mapper

Covers:
- map_jurisdiction packaging and required/recommended partition
- map_all_jurisdictions ordering and per-jurisdiction failure isolation
- aggregate_requirements highest-risk selection
- summarize_markets readiness
"""

import pytest

from jurisdictions import (
    JurisdictionNotRegisteredError,
    JurisdictionRegistry,
    aggregate_requirements,
    map_all_jurisdictions,
    map_jurisdiction,
    summarize_markets,
)
from jurisdictions.eu_ai_act import EuAiActModule
from jurisdictions.mapper import assess_readiness, highest_risk
from shared.models import (
    ActionPriority,
    ActionRequirement,
    ComplianceTimeline,
    JurisdictionResult,
    ReadinessStatus,
    RiskClassification,
    RiskLevel,
)


def _result(jurisdiction, level, justification="", actions=()):
    actions = list(actions)
    return JurisdictionResult(
        jurisdiction=jurisdiction,
        risk_classification=RiskClassification(level=level, justification=justification or jurisdiction),
        required_actions=[a for a in actions if a.priority.is_required],
        recommended_actions=[a for a in actions if not a.priority.is_required],
        compliance_timeline=ComplianceTimeline(),
    )


def _action(action_id, priority):
    return ActionRequirement(
        id=action_id,
        title=action_id,
        description=action_id,
        priority=priority,
        legal_basis="Law",
    )


# =============================================================================
# map_jurisdiction
# =============================================================================

class TestMapJurisdiction:
    def test_packages_module_output(self, registry, agentic_payments_context):
        result = map_jurisdiction(agentic_payments_context, "singapore", registry)
        module = registry.get_module("singapore")

        assert result.jurisdiction == "singapore"
        assert len(result.applicable_laws) == 1
        assert result.applicable_laws[0].id == module.id
        assert result.applicable_laws[0].name == module.name
        assert result.applicable_laws[0].provisions == module.get_applicable_provisions(
            agentic_payments_context
        )
        assert result.risk_classification == module.get_risk_level(agentic_payments_context)
        assert result.compliance_timeline == module.get_timeline(agentic_payments_context)

    def test_partition_is_total(self, registry, agentic_payments_context):
        module = registry.get_module("singapore")
        raw = module.get_required_actions(agentic_payments_context)
        result = map_jurisdiction(agentic_payments_context, "singapore", registry)

        required = {a.id for a in result.required_actions}
        recommended = {a.id for a in result.recommended_actions}
        assert required.isdisjoint(recommended)
        assert required | recommended == {a.id for a in raw}
        assert all(a.priority is not ActionPriority.RECOMMENDED for a in result.required_actions)
        assert all(a.priority is ActionPriority.RECOMMENDED for a in result.recommended_actions)

    def test_idempotent(self, registry, agentic_payments_context):
        first = map_jurisdiction(agentic_payments_context, "eu-gdpr", registry)
        second = map_jurisdiction(agentic_payments_context, "eu-gdpr", registry)
        assert first.model_dump() == second.model_dump()

    def test_unregistered_raises(self, empty_registry, agentic_payments_context):
        with pytest.raises(JurisdictionNotRegisteredError) as exc_info:
            map_jurisdiction(agentic_payments_context, "us-federal", empty_registry)
        assert exc_info.value.jurisdiction_id == "us-federal"

    def test_gpai_classification_only_from_eu_ai_act(self, registry, context_factory):
        from shared.models import GpaiInfo, GpaiRole

        ctx = context_factory(
            product_type="foundation-model",
            gpai_info=GpaiInfo(is_gpai_model=True, gpai_role=GpaiRole.PROVIDER),
            target_markets=["eu-ai-act", "uk"],
        )
        assert map_jurisdiction(ctx, "eu-ai-act", registry).gpai_classification is not None
        assert map_jurisdiction(ctx, "uk", registry).gpai_classification is None


# =============================================================================
# map_all_jurisdictions
# =============================================================================

class TestMapAllJurisdictions:
    def test_scenario_agentic_payments(self, registry, agentic_payments_context):
        mapped = map_all_jurisdictions(agentic_payments_context, registry)
        by_id = {r.jurisdiction: r for r in mapped.results}

        assert mapped.errors == []
        assert [r.jurisdiction for r in mapped.results] == ["eu-ai-act", "eu-gdpr", "singapore"]
        assert by_id["singapore"].risk_classification.level is RiskLevel.HIGH
        assert by_id["eu-ai-act"].risk_classification.level is RiskLevel.MINIMAL

        aggregated = aggregate_requirements(mapped.results)
        assert aggregated.highest_risk_level.level is RiskLevel.HIGH

    def test_unregistered_market_is_isolated(self, context_factory):
        ctx = context_factory(target_markets=["us-federal"])
        mapped = map_all_jurisdictions(ctx, JurisdictionRegistry())

        assert mapped.results == []
        assert len(mapped.errors) == 1
        assert mapped.errors[0].jurisdiction == "us-federal"
        assert "not registered" in mapped.errors[0].error

    def test_failure_does_not_abort_batch(self, context_factory):
        registry = JurisdictionRegistry([EuAiActModule()])
        ctx = context_factory(target_markets=["us-federal", "eu-ai-act", "china"])
        mapped = map_all_jurisdictions(ctx, registry)

        assert [r.jurisdiction for r in mapped.results] == ["eu-ai-act"]
        assert [e.jurisdiction for e in mapped.errors] == ["us-federal", "china"]

    def test_follows_target_market_order(self, registry, context_factory):
        ctx = context_factory(target_markets=["brazil", "uk", "eu-ai-act"])
        mapped = map_all_jurisdictions(ctx, registry)
        assert [r.jurisdiction for r in mapped.results] == ["brazil", "uk", "eu-ai-act"]


# =============================================================================
# Aggregation
# =============================================================================

class TestAggregateRequirements:
    def test_empty(self):
        aggregated = aggregate_requirements([])
        assert aggregated.highest_risk_level is None
        assert aggregated.total_artifacts == 0
        assert aggregated.total_actions == 0

    def test_highest_rank_wins(self):
        results = [
            _result("a", RiskLevel.LIMITED),
            _result("b", RiskLevel.UNACCEPTABLE),
            _result("c", RiskLevel.HIGH),
        ]
        assert aggregate_requirements(results).highest_risk_level.justification == "b"

    def test_tie_keeps_earliest(self):
        results = [
            _result("a", RiskLevel.HIGH, justification="first"),
            _result("b", RiskLevel.HIGH, justification="second"),
        ]
        assert highest_risk(results).justification == "first"

    def test_flattens_without_dedup(self):
        shared = _action("shared", ActionPriority.CRITICAL)
        results = [
            _result("a", RiskLevel.HIGH, actions=[shared, _action("r", ActionPriority.RECOMMENDED)]),
            _result("b", RiskLevel.LIMITED, actions=[shared]),
        ]
        aggregated = aggregate_requirements(results)
        assert [a.id for a in aggregated.all_actions] == ["shared", "r", "shared"]
        assert aggregated.total_actions == 3


# =============================================================================
# Market summary
# =============================================================================

class TestSummarizeMarkets:
    def test_readiness_statuses(self):
        assert assess_readiness(_result("a", RiskLevel.UNACCEPTABLE, "banned")).status is (
            ReadinessStatus.BLOCKED
        )
        action_required = assess_readiness(
            _result("b", RiskLevel.HIGH, actions=[_action("x", ActionPriority.CRITICAL)])
        )
        assert action_required.status is ReadinessStatus.ACTION_REQUIRED
        assert action_required.blockers == ["x"]
        assert assess_readiness(
            _result("c", RiskLevel.LIMITED, actions=[_action("y", ActionPriority.IMPORTANT)])
        ).status is ReadinessStatus.READY

    def test_highest_and_lowest_markets(self):
        summary = summarize_markets(
            [
                _result("a", RiskLevel.LIMITED),
                _result("b", RiskLevel.UNACCEPTABLE, "banned"),
                _result("c", RiskLevel.MINIMAL),
                _result("d", RiskLevel.MINIMAL),
            ]
        )
        assert summary.highest_risk_market == "b"
        assert summary.lowest_friction_market == "c"
        assert summary.critical_blockers == ["banned"]

    def test_empty(self):
        summary = summarize_markets([])
        assert summary.highest_risk_market is None
        assert summary.lowest_friction_market is None
        assert summary.market_readiness == []
