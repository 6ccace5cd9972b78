"""
Unit Tests for JuriMap Shared Models

Covers:
- ProductContext validation and helper methods
- RiskLevel and ActionPriority ordering
- ArtifactRequirement id derivation
- Immutability of engine outputs
"""

import pytest
from pydantic import ValidationError

from shared.models import (
    ActionPriority,
    ActionRequirement,
    ArtifactRequirement,
    ArtifactType,
    DataCategory,
    DecisionImpact,
    Jurisdiction,
    ProductContext,
    ProductType,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)


# =============================================================================
# ProductContext
# =============================================================================

class TestProductContext:
    """Tests for the product context model."""

    def test_minimal_valid_context(self):
        ctx = ProductContext(
            description="A spam filter",
            product_type=ProductType.CLASSIFIER,
            target_markets=["eu-ai-act"],
        )
        assert ctx.target_markets == [Jurisdiction.EU_AI_ACT]
        assert ctx.decision_impact == DecisionImpact.ADVISORY
        assert ctx.data_processed == []
        assert ctx.generative_ai_context is None

    def test_empty_target_markets_rejected(self):
        with pytest.raises(ValidationError):
            ProductContext(
                description="A spam filter",
                product_type=ProductType.CLASSIFIER,
                target_markets=[],
            )

    def test_unknown_jurisdiction_rejected(self):
        with pytest.raises(ValidationError):
            ProductContext(
                description="A spam filter",
                product_type=ProductType.CLASSIFIER,
                target_markets=["atlantis"],
            )

    def test_unknown_product_type_rejected(self):
        with pytest.raises(ValidationError):
            ProductContext(
                description="A spam filter",
                product_type="robot",
                target_markets=["uk"],
            )

    def test_context_is_frozen(self, context_factory):
        ctx = context_factory()
        with pytest.raises(ValidationError):
            ctx.description = "changed"

    def test_has_data(self, context_factory):
        ctx = context_factory(data_processed=[DataCategory.HEALTH])
        assert ctx.has_data(DataCategory.PERSONAL, DataCategory.HEALTH)
        assert not ctx.has_data(DataCategory.BIOMETRIC)

    def test_affects(self, context_factory):
        ctx = context_factory(user_populations=[UserPopulation.TENANTS])
        assert ctx.affects(UserPopulation.TENANTS)
        assert not ctx.affects(UserPopulation.MINORS, UserPopulation.STUDENTS)

    def test_description_mentions_is_case_insensitive(self, context_factory):
        ctx = context_factory(description="A Customer Service CHATBOT")
        assert ctx.description_mentions("chatbot")
        assert not ctx.description_mentions("deepfake")

    def test_accepts_json_payload(self):
        ctx = ProductContext.model_validate(
            {
                "description": "Resume screening tool",
                "product_type": "classifier",
                "user_populations": ["job-applicants"],
                "decision_impact": "determinative",
                "target_markets": ["us-ny", "us-il"],
            }
        )
        assert ctx.decision_impact is DecisionImpact.DETERMINATIVE
        assert ctx.target_markets == [Jurisdiction.US_NY, Jurisdiction.US_IL]


# =============================================================================
# Ordered enums
# =============================================================================

class TestRiskLevel:
    """Tests for risk level ordering."""

    def test_ranks(self):
        assert RiskLevel.UNDETERMINED.rank == 0
        assert RiskLevel.MINIMAL.rank == 1
        assert RiskLevel.LIMITED.rank == 2
        assert RiskLevel.HIGH.rank == 3
        assert RiskLevel.UNACCEPTABLE.rank == 4

    def test_outranks_is_strict(self):
        assert RiskLevel.HIGH.outranks(RiskLevel.LIMITED)
        assert not RiskLevel.HIGH.outranks(RiskLevel.HIGH)
        assert not RiskLevel.MINIMAL.outranks(RiskLevel.LIMITED)


class TestActionPriority:
    """Tests for action priority ordering."""

    def test_critical_beats_important_beats_recommended(self):
        assert ActionPriority.CRITICAL.outranks(ActionPriority.IMPORTANT)
        assert ActionPriority.IMPORTANT.outranks(ActionPriority.RECOMMENDED)
        assert not ActionPriority.RECOMMENDED.outranks(ActionPriority.RECOMMENDED)

    def test_required_partition(self):
        assert ActionPriority.CRITICAL.is_required
        assert ActionPriority.IMPORTANT.is_required
        assert not ActionPriority.RECOMMENDED.is_required


# =============================================================================
# Requirements
# =============================================================================

class TestArtifactRequirement:
    """Tests for artifact id derivation."""

    def test_id_from_type(self):
        artifact = ArtifactRequirement(type=ArtifactType.DPIA, name="DPIA")
        assert artifact.id == "dpia"

    def test_id_from_type_and_template(self):
        artifact = ArtifactRequirement(
            type=ArtifactType.BIAS_AUDIT,
            name="Bias audit",
            template_id="bias-audit-nyc",
        )
        assert artifact.id == "bias-audit:bias-audit-nyc"

    def test_explicit_id_kept(self):
        artifact = ArtifactRequirement(
            id="risk-assessment:tx-traiga",
            type=ArtifactType.RISK_ASSESSMENT,
            name="Risk policy",
        )
        assert artifact.id == "risk-assessment:tx-traiga"

    def test_required_by_default(self):
        assert ArtifactRequirement(type=ArtifactType.MODEL_CARD, name="Card").required


class TestActionRequirement:
    def test_optional_fields_default_to_none(self):
        action = ActionRequirement(
            id="a",
            title="Do it",
            description="Do the thing",
            priority=ActionPriority.IMPORTANT,
            legal_basis="Law",
        )
        assert action.deadline is None
        assert action.estimated_effort is None
        assert action.jurisdictions == []


class TestRiskClassification:
    def test_frozen(self):
        risk = RiskClassification(level=RiskLevel.MINIMAL, justification="nothing applies")
        with pytest.raises(ValidationError):
            risk.level = RiskLevel.HIGH
