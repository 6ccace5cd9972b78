"""
Unit Tests for the jurisdiction module building blocks

Covers Trigger evaluation, the RiskLadder cascade and the JurisdictionModule
defaults.
"""

import pytest

from jurisdictions.base import (
    Finding,
    JurisdictionModule,
    RiskLadder,
    RiskRung,
    Trigger,
    matching,
    trigger_ids,
    unique,
)
from shared.models import (
    ComplianceTimeline,
    DataCategory,
    Jurisdiction,
    RiskLevel,
)


BIOMETRIC = Trigger(
    id="biometric",
    name="Biometric data",
    citation="Law § 1",
    predicate=lambda ctx: ctx.has_data(DataCategory.BIOMETRIC),
)
CHATBOT = Trigger(
    id="chatbot",
    name="Chatbot",
    citation="Law § 2",
    predicate=lambda ctx: ctx.description_mentions("chatbot"),
)

LADDER = RiskLadder(
    jurisdiction="test",
    rungs=[
        RiskRung(
            id="biometric",
            level=RiskLevel.HIGH,
            applies=BIOMETRIC.matches,
            explain=lambda ctx: Finding("biometric", categories=["biometric"], provisions=["Law § 1"]),
        ),
        RiskRung(
            id="chatbot",
            level=RiskLevel.LIMITED,
            applies=CHATBOT.matches,
            explain=lambda ctx: Finding("chatbot", categories=["chatbot"]),
        ),
    ],
    fallback=Finding("nothing applies"),
)


class _TestModule(JurisdictionModule):
    region = "Nowhere"

    @property
    def id(self):
        return "uk"

    @property
    def name(self):
        return "Test Law"

    @property
    def jurisdiction(self):
        return Jurisdiction.UK

    @property
    def ladder(self):
        return LADDER

    @property
    def triggers(self):
        return (BIOMETRIC, CHATBOT)

    def get_applicable_provisions(self, ctx):
        return []

    def get_required_artifacts(self, ctx):
        return []

    def get_required_actions(self, ctx):
        return []

    def get_timeline(self, ctx):
        return ComplianceTimeline()


# =============================================================================
# Triggers
# =============================================================================

class TestTrigger:
    def test_evaluate_satisfied(self, context_factory):
        result = BIOMETRIC.evaluate(context_factory(data_processed=[DataCategory.BIOMETRIC]))
        assert result.trigger_id == "biometric"
        assert result.satisfied is True
        assert "Law § 1" in result.evidence

    def test_evidence_carries_summary(self, context_factory):
        trigger = Trigger(
            id="biometric",
            name="Biometric data",
            citation="Law § 1",
            summary="Remote identification of people",
            predicate=lambda ctx: ctx.has_data(DataCategory.BIOMETRIC),
        )
        result = trigger.evaluate(context_factory(data_processed=[DataCategory.BIOMETRIC]))
        assert result.evidence == "Biometric data (Law § 1). Remote identification of people"
        assert result.description == "Biometric data"

    def test_evaluate_unsatisfied_has_no_evidence(self, context_factory):
        result = BIOMETRIC.evaluate(context_factory())
        assert result.satisfied is False
        assert result.evidence == ""

    def test_matching_keeps_table_order(self, context_factory):
        ctx = context_factory(
            description="A chatbot",
            data_processed=[DataCategory.BIOMETRIC],
        )
        assert trigger_ids(matching([CHATBOT, BIOMETRIC], ctx)) == ["chatbot", "biometric"]

    def test_unique_keeps_first_seen(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


# =============================================================================
# Ladder
# =============================================================================

class TestRiskLadder:
    def test_first_matching_rung_wins(self, context_factory):
        ctx = context_factory(description="A chatbot", data_processed=[DataCategory.BIOMETRIC])
        risk = LADDER.classify(ctx)
        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["biometric"]
        assert risk.provisions == ["Law § 1"]

    def test_lower_rung(self, context_factory):
        risk = LADDER.classify(context_factory(description="A chatbot"))
        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["chatbot"]

    def test_fallback_is_minimal_with_no_categories(self, context_factory):
        risk = LADDER.classify(context_factory())
        assert risk.level is RiskLevel.MINIMAL
        assert risk.justification == "nothing applies"
        assert risk.applicable_categories == []

    def test_order(self):
        assert LADDER.order == ["biometric", "chatbot"]

    def test_select_returns_none_on_fallback(self, context_factory):
        assert LADDER.select(context_factory()) is None

    def test_undetermined_rung_rejected(self):
        with pytest.raises(ValueError):
            RiskLadder(
                jurisdiction="bad",
                rungs=[
                    RiskRung(
                        id="x",
                        level=RiskLevel.UNDETERMINED,
                        applies=lambda ctx: True,
                        explain=lambda ctx: Finding("x"),
                    )
                ],
                fallback=Finding("none"),
            )


# =============================================================================
# Module defaults
# =============================================================================

class TestJurisdictionModule:
    def test_risk_level_uses_ladder(self, context_factory):
        module = _TestModule()
        assert module.get_risk_level(context_factory(description="chatbot")).level is RiskLevel.LIMITED

    def test_gpai_classification_defaults_to_none(self, context_factory):
        assert _TestModule().get_gpai_classification(context_factory()) is None

    def test_explain_evaluates_every_trigger(self, context_factory):
        explained = _TestModule().explain(context_factory(description="chatbot"))
        assert [(t.trigger_id, t.satisfied) for t in explained] == [
            ("biometric", False),
            ("chatbot", True),
        ]

    def test_repr(self):
        assert repr(_TestModule()) == "<_TestModule id='uk'>"

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            JurisdictionModule()
