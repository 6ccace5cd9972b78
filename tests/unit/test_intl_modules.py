"""
Unit Tests for the UK, Singapore, China and Brazil modules
"""

import pytest

from jurisdictions.brazil import BrazilModule
from jurisdictions.china import ChinaModule
from jurisdictions.singapore import SingaporeModule
from jurisdictions.uk import UkModule
from shared.models import (
    AgenticAiContext,
    AISector,
    AlgorithmFilingStatus,
    AutomationLevel,
    AutonomyLevel,
    DataCategory,
    DecisionImpact,
    FoundationModelSource,
    GenerativeAiContext,
    ProductType,
    RiskLevel,
    SectorContext,
    UserPopulation,
)


def _ids(items):
    return [item.id for item in items]


FINANCIAL = SectorContext(sector=AISector.FINANCIAL_SERVICES)


# =============================================================================
# United Kingdom
# =============================================================================

class TestUk:
    @pytest.fixture
    def module(self):
        return UkModule()

    def test_frontier_model_provider(self, module, context_factory):
        ctx = context_factory(
            product_type=ProductType.FOUNDATION_MODEL,
            generative_ai_context=GenerativeAiContext(is_frontier_model=True),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories[0] == "frontier-model-provider"
        assert "uk-aisi-safety-evaluation" in _ids(module.get_required_actions(ctx))

    def test_financial_material_decisions(self, module, context_factory):
        ctx = context_factory(sector_context=FINANCIAL, decision_impact=DecisionImpact.MATERIAL)
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories[0] == "financial-services-material"
        assert "fca-smcr-accountability" in risk.applicable_categories
        assert "uk-fca-smcr-mapping" in _ids(module.get_required_actions(ctx))

    def test_fully_automated_employment(self, module, context_factory):
        ctx = context_factory(
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
            automation_level=AutomationLevel.FULLY_AUTOMATED,
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories[0] == "automated-employment"

    def test_employment_with_human_review_is_minimal(self, module, context_factory):
        ctx = context_factory(
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        assert module.get_risk_level(ctx).level is RiskLevel.MINIMAL

    def test_biometrics_need_dpia(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.BIOMETRIC])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories[0] == "biometric-processing"
        assert "uk-conduct-dpia" in _ids(module.get_required_actions(ctx))

    def test_third_party_foundation_model_deployer(self, module, context_factory):
        ctx = context_factory(
            generative_ai_context=GenerativeAiContext(
                uses_foundation_model=True,
                foundation_model_source=FoundationModelSource.THIRD_PARTY_API,
            ),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["foundation-model-deployer"]

    def test_generator_with_deepfakes(self, module, context_factory):
        ctx = context_factory(
            product_type=ProductType.GENERATOR,
            generative_ai_context=GenerativeAiContext(can_generate_deepfakes=True),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["genai-content-generation", "deepfake-capabilities"]

    def test_personal_data_is_limited(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.PERSONAL])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories[0] == "personal-data-processing"
        assert "uk-legal-basis-assessment" in _ids(module.get_required_actions(ctx))

    def test_minimal(self, module, minimal_context):
        assert module.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert module.get_required_artifacts(minimal_context) == []
        assert module.get_required_actions(minimal_context) == []


# =============================================================================
# Singapore
# =============================================================================

class TestSingapore:
    @pytest.fixture
    def module(self):
        return SingaporeModule()

    def test_agent_moving_money_is_high_risk(self, module, agentic_payments_context):
        risk = module.get_risk_level(agentic_payments_context)

        assert risk.level is RiskLevel.HIGH
        assert "sg-imda-agentic-basic" in risk.applicable_categories
        assert "sg-imda-agentic-financial" in risk.applicable_categories

    def test_agentic_note_extends_model_framework(self, module, agentic_payments_context):
        notes = module.get_timeline(agentic_payments_context).notes
        assert any("(January 2026) extends — not replaces — the existing" in n for n in notes)

    def test_bounded_agent_without_payments_is_limited(self, module, context_factory):
        ctx = context_factory(
            agentic_ai_context=AgenticAiContext(is_agentic=True, autonomy_level=AutonomyLevel.BOUNDED),
        )
        assert module.get_risk_level(ctx).level is RiskLevel.LIMITED

    def test_broad_autonomy_is_high_risk(self, module, context_factory):
        ctx = context_factory(
            agentic_ai_context=AgenticAiContext(is_agentic=True, autonomy_level=AutonomyLevel.BROAD),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "sg-imda-agentic-broad" in risk.applicable_categories

    def test_financial_services_follow_mas(self, module, context_factory):
        ctx = context_factory(sector_context=FINANCIAL)
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "sg-mas-financial-ai" in risk.applicable_categories

    def test_foundation_model_provider(self, module, context_factory):
        ctx = context_factory(product_type=ProductType.FOUNDATION_MODEL)
        assert module.get_risk_level(ctx).level is RiskLevel.HIGH

    def test_generator_is_limited(self, module, generator_context):
        risk = module.get_risk_level(generator_context)

        assert risk.level is RiskLevel.LIMITED
        assert "sg-imda-genai-content" in risk.applicable_categories

    def test_personal_data_is_limited(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.PERSONAL])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["sg-pdpc-personal-data"]

    def test_minimal(self, module, minimal_context):
        assert module.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert module.get_applicable_provisions(minimal_context) == []
        assert module.get_required_actions(minimal_context) == []


# =============================================================================
# China
# =============================================================================

class TestChina:
    @pytest.fixture
    def module(self):
        return ChinaModule()

    def test_public_generator_is_high_risk(self, module, context_factory):
        ctx = context_factory(
            product_type=ProductType.GENERATOR,
            user_populations=[UserPopulation.CONSUMERS],
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "cn-cac-genai-public" in risk.applicable_categories
        assert "cn-algorithm-filing" in _ids(module.get_required_actions(ctx))
        assert "genai-content-policy:cn-content-review" in _ids(module.get_required_artifacts(ctx))
        assert any(note.startswith("CRITICAL") for note in module.get_timeline(ctx).notes)

    def test_voice_cloning_is_deep_synthesis(self, module, context_factory):
        ctx = context_factory(
            generative_ai_context=GenerativeAiContext(can_generate_synthetic_voice=True),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["cn-deep-synthesis-voice"]
        assert "cn-deep-synthesis-labeling" in _ids(module.get_required_actions(ctx))

    def test_recommender_is_limited(self, module, context_factory):
        ctx = context_factory(product_type=ProductType.RECOMMENDER)
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["cn-recommendation-algo"]
        assert "cn-algorithm-filing" in _ids(module.get_required_actions(ctx))

    def test_unfiled_algorithm_warning(self, module, context_factory):
        ctx = context_factory(
            product_type=ProductType.RECOMMENDER,
            generative_ai_context=GenerativeAiContext(
                algorithm_filing_status=AlgorithmFilingStatus.NOT_FILED
            ),
        )
        assert any(note.startswith("WARNING") for note in module.get_timeline(ctx).notes)

    def test_internal_generator_is_limited(self, module, generator_context):
        risk = module.get_risk_level(generator_context)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["cn-internal-genai"]

    def test_automated_decisions_are_limited(self, module, context_factory):
        ctx = context_factory(
            decision_impact=DecisionImpact.MATERIAL,
            automation_level=AutomationLevel.FULLY_AUTOMATED,
        )
        assert module.get_risk_level(ctx).applicable_categories == ["cn-pipl-automated"]

    def test_minimal(self, module, minimal_context):
        assert module.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert module.get_required_artifacts(minimal_context) == []
        assert module.get_required_actions(minimal_context) == []
        assert module.get_timeline(minimal_context).effective_date == "2022-03-01"


# =============================================================================
# Brazil
# =============================================================================

class TestBrazil:
    @pytest.fixture
    def module(self):
        return BrazilModule()

    def test_human_on_the_loop_counts_as_automated(self, module, agentic_payments_context):
        risk = module.get_risk_level(agentic_payments_context)

        assert risk.level is RiskLevel.HIGH
        assert "br-lgpd-automated-decisions" in risk.applicable_categories
        assert "br-lgpd-art20-review" in _ids(module.get_required_actions(agentic_payments_context))

    def test_human_in_the_loop_is_not_automated(self, module, context_factory):
        ctx = context_factory(decision_impact=DecisionImpact.MATERIAL)
        assert module.get_risk_level(ctx).level is RiskLevel.MINIMAL

    def test_health_data_is_high_risk(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.HEALTH])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "br-lgpd-sensitive-data" in risk.applicable_categories
        assert "br-lgpd-ripd" in _ids(module.get_required_actions(ctx))

    def test_ripd_uses_portuguese_name(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.HEALTH])
        [ripd] = [a for a in module.get_required_artifacts(ctx) if a.id == "dpia:br-ripd"]
        assert ripd.description.startswith(
            "Relatório de Impacto à Proteção de Dados Pessoais (RIPD) — data protection"
        )

    def test_generator_is_limited(self, module, generator_context):
        risk = module.get_risk_level(generator_context)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["br-ai-bill-genai-transparency"]

    def test_personal_data_is_limited(self, module, context_factory):
        ctx = context_factory(data_processed=[DataCategory.PERSONAL])
        risk = module.get_risk_level(ctx)
        actions = _ids(module.get_required_actions(ctx))

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["br-lgpd-personal-data"]
        assert "br-lgpd-legal-basis" in actions
        assert "br-lgpd-ripd" not in actions

    def test_minimal(self, module, minimal_context):
        assert module.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert module.get_timeline(minimal_context).effective_date == "2020-09-18"
