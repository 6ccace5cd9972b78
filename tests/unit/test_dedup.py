"""
Unit Tests for cross-jurisdiction deduplication
"""

from jurisdictions import merge_actions, merge_artifacts
from jurisdictions.dedup import merge_by_id
from shared.models import (
    ActionPriority,
    ActionRequirement,
    ArtifactRequirement,
    ArtifactType,
    ComplianceTimeline,
    JurisdictionResult,
    RiskClassification,
    RiskLevel,
)


def _action(action_id, priority, title=None):
    return ActionRequirement(
        id=action_id,
        title=title or action_id,
        description=action_id,
        priority=priority,
        legal_basis="Law",
    )


def _result(jurisdiction, actions=(), artifacts=()):
    actions = list(actions)
    return JurisdictionResult(
        jurisdiction=jurisdiction,
        risk_classification=RiskClassification(level=RiskLevel.LIMITED, justification="-"),
        required_artifacts=list(artifacts),
        required_actions=[a for a in actions if a.priority.is_required],
        recommended_actions=[a for a in actions if not a.priority.is_required],
        compliance_timeline=ComplianceTimeline(),
    )


class TestMergeById:
    def test_generic_reduction(self):
        merged = merge_by_id(
            [("a", 1), ("b", 3), ("a", 1), ("c", 2)],
            key=lambda n: "same",
            outranks=lambda x, y: x > y,
        )
        assert merged == [(3, ["a", "b", "c"])]

    def test_first_seen_id_order(self):
        merged = merge_by_id(
            [("a", "y"), ("a", "x"), ("b", "y")],
            key=lambda s: s,
            outranks=lambda x, y: False,
        )
        assert [item for item, _ in merged] == ["y", "x"]
        assert merged[0][1] == ["a", "b"]


class TestMergeActions:
    def test_highest_priority_wins_with_full_attribution(self):
        results = [
            _result("uk", [_action("x", ActionPriority.RECOMMENDED)]),
            _result("eu-gdpr", [_action("x", ActionPriority.CRITICAL)]),
            _result("brazil", [_action("x", ActionPriority.IMPORTANT)]),
        ]
        merged = merge_actions(results)

        assert len(merged) == 1
        assert merged[0].priority is ActionPriority.CRITICAL
        assert merged[0].jurisdictions == ["uk", "eu-gdpr", "brazil"]
        assert merged[0].requirement.jurisdictions == ["uk", "eu-gdpr", "brazil"]

    def test_tie_keeps_first_seen(self):
        results = [
            _result("uk", [_action("x", ActionPriority.IMPORTANT, title="first")]),
            _result("brazil", [_action("x", ActionPriority.IMPORTANT, title="second")]),
        ]
        assert merge_actions(results)[0].requirement.title == "first"

    def test_distinct_ids_kept_apart(self):
        results = [
            _result("uk", [_action("a", ActionPriority.CRITICAL), _action("b", ActionPriority.RECOMMENDED)]),
            _result("china", [_action("c", ActionPriority.IMPORTANT)]),
        ]
        assert [m.requirement.id for m in merge_actions(results)] == ["a", "b", "c"]

    def test_jurisdiction_listed_once(self):
        results = [
            _result("uk", [_action("x", ActionPriority.IMPORTANT)]),
            _result("uk", [_action("x", ActionPriority.CRITICAL)]),
        ]
        merged = merge_actions(results)
        assert merged[0].jurisdictions == ["uk"]
        assert merged[0].priority is ActionPriority.CRITICAL

    def test_empty(self):
        assert merge_actions([]) == []


class TestMergeArtifacts:
    def test_required_beats_optional(self):
        optional = ArtifactRequirement(type=ArtifactType.MODEL_CARD, name="optional", required=False)
        required = ArtifactRequirement(type=ArtifactType.MODEL_CARD, name="required")
        merged = merge_artifacts([_result("uk", artifacts=[optional]), _result("china", artifacts=[required])])

        assert len(merged) == 1
        assert merged[0].requirement.name == "required"
        assert merged[0].jurisdictions == ["uk", "china"]

    def test_template_qualified_ids_stay_distinct(self):
        nyc = ArtifactRequirement(type=ArtifactType.BIAS_AUDIT, name="nyc", template_id="bias-audit-nyc")
        colorado = ArtifactRequirement(
            id="bias-audit:co-algorithmic-discrimination",
            type=ArtifactType.BIAS_AUDIT,
            name="colorado",
        )
        merged = merge_artifacts([_result("us-ny", artifacts=[nyc]), _result("us-co", artifacts=[colorado])])
        assert [m.requirement.name for m in merged] == ["nyc", "colorado"]

    def test_shared_template_merges_across_jurisdictions(self, registry, context_factory):
        from jurisdictions import map_all_jurisdictions
        from shared.models import DecisionImpact, UserPopulation

        ctx = context_factory(
            description="Resume screening for hiring at retail stores",
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.DETERMINATIVE,
            target_markets=["us-ny", "us-il"],
        )
        merged = merge_artifacts(map_all_jurisdictions(ctx, registry).results)
        bias_audit = [m for m in merged if m.requirement.id == "bias-audit:bias-audit-nyc"]
        assert len(bias_audit) == 1
        assert bias_audit[0].jurisdictions == ["us-ny", "us-il"]
