"""
Unit Tests for the EU modules (AI Act and GDPR)
"""

import pytest

from jurisdictions.eu_ai_act import EuAiActModule
from jurisdictions.eu_gdpr import EuGdprModule
from shared.models import (
    ArtifactType,
    AutomationLevel,
    DataCategory,
    DecisionImpact,
    GpaiInfo,
    GpaiRole,
    ProductType,
    RiskLevel,
    UserPopulation,
)


def _ids(items):
    return [item.id for item in items]


@pytest.fixture
def ai_act():
    return EuAiActModule()


@pytest.fixture
def gdpr():
    return EuGdprModule()


@pytest.fixture
def hiring_context(context_factory):
    return context_factory(
        description="Ranks job applicants for recruiters.",
        user_populations=[UserPopulation.JOB_APPLICANTS],
        decision_impact=DecisionImpact.MATERIAL,
    )


# =============================================================================
# EU AI Act
# =============================================================================

class TestEuAiActLadder:
    def test_ladder_order(self, ai_act):
        assert ai_act.ladder.order == [
            "prohibited-practice",
            "annex-iii-exempt",
            "annex-iii",
            "transparency",
        ]

    def test_social_scoring_is_prohibited(self, ai_act, context_factory):
        ctx = context_factory(description="A social scoring system that ranks citizens.")
        risk = ai_act.get_risk_level(ctx)

        assert risk.level is RiskLevel.UNACCEPTABLE
        assert risk.applicable_categories == ["art5-1c-social-scoring"]
        assert risk.provisions == ["Article 5(1)(c)"]

    def test_prohibited_only_asks_to_stop(self, ai_act, context_factory):
        ctx = context_factory(description="A social scoring system that ranks citizens.")
        assert _ids(ai_act.get_required_actions(ctx)) == ["eu-ai-act-stop-prohibited"]
        assert "eu-ai-act-art5" in _ids(ai_act.get_applicable_provisions(ctx))
        assert any("CRITICAL" in note for note in ai_act.get_timeline(ctx).notes)

    def test_employment_is_high_risk(self, ai_act, hiring_context):
        risk = ai_act.get_risk_level(hiring_context)

        assert risk.level is RiskLevel.HIGH
        assert "annex-iii-4-employment" in risk.applicable_categories
        assert "Annex III" in risk.provisions

    def test_explain_describes_annex_iii_area(self, ai_act, hiring_context):
        [employment] = [t for t in ai_act.explain(hiring_context) if t.trigger_id == "annex-iii-4-employment"]

        assert employment.satisfied
        assert employment.evidence.endswith(
            "AI for recruitment/selection, job ad targeting, filtering applications, evaluating "
            "candidates, decisions on work terms, promotions, termination, task allocation, "
            "monitoring/evaluating worker performance"
        )

    def test_high_risk_obligations(self, ai_act, hiring_context):
        actions = ai_act.get_required_actions(hiring_context)
        artifacts = ai_act.get_required_artifacts(hiring_context)

        assert "eu-ai-act-risk-management" in _ids(actions)
        assert "eu-ai-act-transparency-disclosure" not in _ids(actions)
        assert ArtifactType.CONFORMITY_ASSESSMENT in [a.type for a in artifacts]
        assert "eu-ai-act-art9" in _ids(ai_act.get_applicable_provisions(hiring_context))

    def test_article_6_3_filter_exempts_preparatory_task(self, ai_act, context_factory):
        ctx = context_factory(
            description="Ranks job applicants for recruiters. It performs a preparatory task only.",
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        risk = ai_act.get_risk_level(ctx)

        assert risk.level is RiskLevel.MINIMAL
        assert risk.provisions == ["Article 6(3)"]
        assert "annex-iii-4-employment" in risk.applicable_categories

    def test_profiling_always_passes_filter(self, ai_act, context_factory):
        ctx = context_factory(
            description="Profiling of job applicants. It performs a preparatory task only.",
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        assert ai_act.get_risk_level(ctx).level is RiskLevel.HIGH

    def test_chatbot_is_limited(self, ai_act, context_factory):
        ctx = context_factory(description="A customer support chatbot for an online shop.")

        assert ai_act.get_risk_level(ctx).level is RiskLevel.LIMITED
        assert _ids(ai_act.get_required_actions(ctx)) == ["eu-ai-act-transparency-disclosure"]
        assert _ids(ai_act.get_applicable_provisions(ctx)) == ["eu-ai-act-art50"]

    def test_high_risk_chatbot_adds_transparency(self, ai_act, context_factory):
        ctx = context_factory(
            description="A chatbot that screens job applicants for recruiters.",
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        assert ai_act.get_risk_level(ctx).level is RiskLevel.HIGH
        assert "eu-ai-act-transparency-disclosure" in _ids(ai_act.get_required_actions(ctx))

    def test_nothing_applies_is_minimal(self, ai_act, agentic_payments_context):
        assert ai_act.get_risk_level(agentic_payments_context).level is RiskLevel.MINIMAL
        assert ai_act.get_applicable_provisions(agentic_payments_context) == []
        assert ai_act.get_required_artifacts(agentic_payments_context) == []
        assert ai_act.get_required_actions(agentic_payments_context) == []
        assert ai_act.get_gpai_classification(agentic_payments_context) is None

    def test_explain_reports_every_trigger(self, ai_act, context_factory):
        ctx = context_factory(description="A social scoring system that ranks citizens.")
        explained = ai_act.explain(ctx)

        assert len(explained) == len(ai_act.triggers)
        satisfied = [t.trigger_id for t in explained if t.satisfied]
        assert "art5-1c-social-scoring" in satisfied


class TestEuAiActGpai:
    def test_provider_of_closed_model(self, ai_act, context_factory):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            gpai_info=GpaiInfo(is_gpai_model=True, gpai_role=GpaiRole.PROVIDER),
        )
        gpai = ai_act.get_gpai_classification(ctx)

        assert gpai.is_gpai
        assert gpai.role is GpaiRole.PROVIDER
        assert not gpai.has_systemic_risk
        assert "Article 53(1)(a)" in gpai.provisions
        assert "eu-ai-act-art53" in _ids(ai_act.get_applicable_provisions(ctx))

    def test_open_source_provider_has_reduced_duties(self, ai_act, context_factory):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            gpai_info=GpaiInfo(is_gpai_model=True, gpai_role=GpaiRole.PROVIDER, is_open_source=True),
        )
        gpai = ai_act.get_gpai_classification(ctx)

        assert gpai.is_open_source
        assert "Article 53(1)(a)" not in gpai.provisions
        assert "Article 53(1)(c)" in gpai.provisions

    def test_systemic_risk_threshold(self, ai_act, context_factory):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            gpai_info=GpaiInfo(
                is_gpai_model=True,
                gpai_role=GpaiRole.PROVIDER,
                is_open_source=True,
                exceeds_systemic_risk_threshold=True,
            ),
        )
        gpai = ai_act.get_gpai_classification(ctx)

        assert gpai.has_systemic_risk
        assert "Article 53(1)(a)" in gpai.provisions
        assert "Article 55(1)(a)" in gpai.provisions
        notes = ai_act.get_timeline(ctx).notes
        assert any(note.startswith("URGENT") for note in notes)
        assert any(note.startswith("Systemic risk") for note in notes)

    def test_foundation_model_without_info_defaults_to_provider(self, ai_act, context_factory):
        ctx = context_factory(product_type=ProductType.FOUNDATION_MODEL)
        assert ai_act.get_gpai_classification(ctx).role is GpaiRole.PROVIDER

    def test_gpai_does_not_change_risk_level(self, ai_act, context_factory):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            gpai_info=GpaiInfo(is_gpai_model=True),
        )
        assert ai_act.get_risk_level(ctx).level is RiskLevel.MINIMAL


# =============================================================================
# GDPR
# =============================================================================

class TestGdpr:
    def test_ladder_order(self, gdpr):
        assert gdpr.ladder.order == ["dpia", "general-processing"]

    def test_no_personal_data_is_minimal(self, gdpr, minimal_context):
        assert gdpr.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert gdpr.get_applicable_provisions(minimal_context) == []
        assert gdpr.get_required_artifacts(minimal_context) == []
        assert gdpr.get_required_actions(minimal_context) == []

    def test_personal_data_without_dpia_trigger_is_limited(self, gdpr, context_factory):
        ctx = context_factory(
            data_processed=[DataCategory.PERSONAL],
            user_populations=[UserPopulation.INTERNAL_USERS],
        )
        risk = gdpr.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["general-processing"]
        assert "gdpr-legal-basis-assessment" in _ids(gdpr.get_required_actions(ctx))
        assert "gdpr-conduct-dpia" not in _ids(gdpr.get_required_actions(ctx))

    def test_large_scale_health_data_needs_dpia(self, gdpr, context_factory):
        ctx = context_factory(
            data_processed=[DataCategory.HEALTH],
            user_populations=[UserPopulation.CONSUMERS],
        )
        risk = gdpr.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "dpia-large-scale-special-category" in risk.applicable_categories
        assert "dpia-sensitive-data-processing" in risk.applicable_categories
        assert ArtifactType.DPIA in [a.type for a in gdpr.get_required_artifacts(ctx)]
        assert "gdpr-conduct-dpia" in _ids(gdpr.get_required_actions(ctx))

    def test_solely_automated_material_decisions(self, gdpr, context_factory):
        ctx = context_factory(
            data_processed=[DataCategory.FINANCIAL],
            decision_impact=DecisionImpact.DETERMINATIVE,
            automation_level=AutomationLevel.FULLY_AUTOMATED,
        )
        risk = gdpr.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "dpia-automated-decision-making" in risk.applicable_categories

    def test_broader_personal_data_notion(self, gdpr, context_factory):
        ctx = context_factory(data_processed=[DataCategory.BEHAVIORAL])
        assert gdpr.get_risk_level(ctx).level is RiskLevel.LIMITED

    def test_timeline(self, gdpr, minimal_context):
        assert gdpr.get_timeline(minimal_context).effective_date == "2018-05-25"

    def test_no_gpai_classification(self, gdpr, context_factory):
        ctx = context_factory(product_type=ProductType.FOUNDATION_MODEL)
        assert gdpr.get_gpai_classification(ctx) is None
