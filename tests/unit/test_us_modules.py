"""
Unit Tests for the US federal and state modules
"""

from jurisdictions.us_federal import UsFederalModule
from jurisdictions.us_states import (
    CaliforniaModule,
    ColoradoModule,
    IllinoisModule,
    NewYorkModule,
    TexasModule,
)
from shared.models import (
    ActionPriority,
    AgenticAiContext,
    AISector,
    AutomationLevel,
    DataCategory,
    DecisionImpact,
    FinancialServicesContext,
    GenerativeAiContext,
    ProductType,
    RiskLevel,
    SectorContext,
    UserPopulation,
)


def _ids(items):
    return [item.id for item in items]


def _assert_silent(module, ctx):
    assert module.get_risk_level(ctx).level is RiskLevel.MINIMAL
    assert module.get_applicable_provisions(ctx) == []
    assert module.get_required_artifacts(ctx) == []
    assert module.get_required_actions(ctx) == []


# =============================================================================
# US federal
# =============================================================================

class TestUsFederal:
    def test_credit_applicants_are_high_risk(self, context_factory):
        module = UsFederalModule()
        ctx = context_factory(user_populations=[UserPopulation.CREDIT_APPLICANTS])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories[0] == "credit-scoring"

    def test_financial_services_model_risk(self, context_factory):
        module = UsFederalModule()
        ctx = context_factory(
            sector_context=SectorContext(
                sector=AISector.FINANCIAL_SERVICES,
                financial_services=FinancialServicesContext(involves_trading=True),
            ),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "sr-11-7-model-risk" in risk.applicable_categories
        assert "us-sr-11-7-governance" in _ids(module.get_required_actions(ctx))
        [rmf] = [a for a in module.get_required_artifacts(ctx) if a.id == "risk-assessment:nist-ai-rmf"]
        assert rmf.required

    def test_generator_is_limited(self, generator_context):
        risk = UsFederalModule().get_risk_level(generator_context)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["ftc-genai-synthetic-content", "nist-genai-profile"]

    def test_consumer_classifier_is_limited(self, context_factory):
        ctx = context_factory(
            product_type=ProductType.CLASSIFIER,
            user_populations=[UserPopulation.CONSUMERS],
        )
        risk = UsFederalModule().get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert "ftc-deceptive-ai" in risk.applicable_categories

    def test_minimal_still_recommends_nist_alignment(self, minimal_context):
        module = UsFederalModule()
        actions = module.get_required_actions(minimal_context)

        assert module.get_risk_level(minimal_context).level is RiskLevel.MINIMAL
        assert _ids(actions) == ["us-nist-rmf-alignment"]
        assert actions[0].priority is ActionPriority.RECOMMENDED
        assert module.get_timeline(minimal_context).effective_date is None


# =============================================================================
# California
# =============================================================================

class TestCalifornia:
    def test_automated_hiring_is_high_risk(self, context_factory):
        module = CaliforniaModule()
        ctx = context_factory(
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
            automation_level=AutomationLevel.FULLY_AUTOMATED,
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == [
            "us-ca-ccpa-automated-decision-making",
            "us-ca-sb243-ai-regulation",
        ]
        assert "risk-assessment:ca-admt" in _ids(module.get_required_artifacts(ctx))

    def test_consumer_biometrics_are_high_risk(self, context_factory):
        ctx = context_factory(
            data_processed=[DataCategory.BIOMETRIC],
            user_populations=[UserPopulation.CONSUMERS],
        )
        risk = CaliforniaModule().get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["us-ca-ccpa-sensitive-personal-info"]

    def test_consumer_personal_data_is_limited(self, context_factory):
        module = CaliforniaModule()
        ctx = context_factory(
            data_processed=[DataCategory.PERSONAL],
            user_populations=[UserPopulation.CONSUMERS],
        )

        assert module.get_risk_level(ctx).level is RiskLevel.LIMITED
        assert "us-ca-ccpa-notice-at-collection" in _ids(module.get_required_actions(ctx))
        assert "transparency-notice:transparency-notice" in _ids(module.get_required_artifacts(ctx))

    def test_minimal(self, minimal_context):
        _assert_silent(CaliforniaModule(), minimal_context)

    def test_agentic_note_requires_agentic_context(self, context_factory):
        ctx = context_factory(
            generative_ai_context=GenerativeAiContext(uses_agentic_capabilities=True),
        )
        notes = CaliforniaModule().get_timeline(ctx).notes
        assert not any(note.startswith("Agentic AI systems") for note in notes)

    def test_agentic_note_for_agentic_systems(self, context_factory):
        ctx = context_factory(agentic_ai_context=AgenticAiContext(is_agentic=True))
        notes = CaliforniaModule().get_timeline(ctx).notes
        assert any(note.startswith("Agentic AI systems") for note in notes)


# =============================================================================
# Colorado
# =============================================================================

class TestColorado:
    def test_material_employment_decision_is_high_risk(self, context_factory):
        module = ColoradoModule()
        ctx = context_factory(
            description="Ranks job applicants for recruiters.",
            user_populations=[UserPopulation.JOB_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        risk = module.get_risk_level(ctx)
        actions = _ids(module.get_required_actions(ctx))

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["co-employment"]
        assert "co-impact-assessment" in actions
        assert "co-ag-notification" in actions
        assert "co-developer-reasonable-care" not in actions
        assert "risk-assessment:co-risk-management" in _ids(module.get_required_artifacts(ctx))

    def test_advisory_in_consequential_area_is_limited_without_duties(self, context_factory):
        module = ColoradoModule()
        ctx = context_factory(user_populations=[UserPopulation.JOB_APPLICANTS])

        assert module.get_risk_level(ctx).level is RiskLevel.LIMITED
        assert "co-sb205-scope" in _ids(module.get_applicable_provisions(ctx))
        assert module.get_required_artifacts(ctx) == []
        assert module.get_required_actions(ctx) == []

    def test_minimal(self, minimal_context):
        module = ColoradoModule()
        _assert_silent(module, minimal_context)
        assert module.get_timeline(minimal_context).effective_date == "2026-02-01"


# =============================================================================
# Illinois
# =============================================================================

class TestIllinois:
    def test_biometrics_trigger_bipa(self, context_factory):
        module = IllinoisModule()
        ctx = context_factory(data_processed=[DataCategory.BIOMETRIC])
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["bipa-biometric-collection"]
        assert "us-il-bipa-consent-mechanism" in _ids(module.get_required_actions(ctx))

    def test_employment_decisions(self, context_factory):
        module = IllinoisModule()
        ctx = context_factory(
            user_populations=[UserPopulation.EMPLOYEES],
            decision_impact=DecisionImpact.DETERMINATIVE,
        )

        assert module.get_risk_level(ctx).applicable_categories == ["il-hra-ai-employment"]
        assert _ids(module.get_required_actions(ctx)) == ["us-il-hra-bias-testing", "us-il-hra-notice"]

    def test_employment_provision_names_the_hra_amendment(self, context_factory):
        ctx = context_factory(
            user_populations=[UserPopulation.EMPLOYEES],
            decision_impact=DecisionImpact.DETERMINATIVE,
        )
        risk = IllinoisModule().get_risk_level(ctx)

        assert risk.provisions == ["Illinois Human Rights Act (HRA) AI Amendment"]

    def test_bipa_enforcement_note(self, context_factory):
        ctx = context_factory(data_processed=[DataCategory.BIOMETRIC])
        notes = IllinoisModule().get_timeline(ctx).notes

        assert any("Class action exposure is significant — settlements" in n for n in notes)

    def test_deepfakes_are_limited(self, context_factory):
        module = IllinoisModule()
        ctx = context_factory(generative_ai_context=GenerativeAiContext(can_generate_deepfakes=True))

        assert module.get_risk_level(ctx).level is RiskLevel.LIMITED
        assert _ids(module.get_required_actions(ctx)) == ["us-il-deepfake-safeguards"]

    def test_consumer_data_is_limited(self, context_factory):
        ctx = context_factory(
            data_processed=[DataCategory.LOCATION],
            user_populations=[UserPopulation.CONSUMERS],
        )
        risk = IllinoisModule().get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["il-consumer-data"]

    def test_minimal(self, minimal_context):
        module = IllinoisModule()
        _assert_silent(module, minimal_context)
        assert module.get_timeline(minimal_context).effective_date == "2008-10-03"


# =============================================================================
# New York
# =============================================================================

class TestNewYork:
    def test_resume_screening_is_an_aedt(self, context_factory):
        module = NewYorkModule()
        ctx = context_factory(
            description="Resume screening for hiring at retail stores",
            decision_impact=DecisionImpact.MATERIAL,
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert risk.applicable_categories == ["ll144-aedt-hiring"]
        assert "bias-audit:bias-audit-nyc" in _ids(module.get_required_artifacts(ctx))
        assert "us-ny-ll144-conduct-audit" in _ids(module.get_required_actions(ctx))
        assert module.get_timeline(ctx).effective_date == "2023-07-05"

    def test_promotion_decisions(self, context_factory):
        ctx = context_factory(
            description="Scores employees during performance evaluation cycles.",
            user_populations=[UserPopulation.EMPLOYEES],
            decision_impact=DecisionImpact.MATERIAL,
        )
        assert NewYorkModule().get_risk_level(ctx).applicable_categories == ["ll144-aedt-promotion"]

    def test_explain_uses_aedt_trigger_names(self, minimal_context):
        names = [t.description for t in NewYorkModule().explain(minimal_context)]

        assert "Automated Employment Decision Tool — Hiring" in names
        assert "Automated Employment Decision Tool — Promotion" in names

    def test_advisory_hiring_tool_is_not_an_aedt(self, context_factory):
        ctx = context_factory(description="Resume screening for hiring at retail stores")
        _assert_silent(NewYorkModule(), ctx)

    def test_consumer_facing_is_limited_without_audit(self, context_factory):
        module = NewYorkModule()
        ctx = context_factory(user_populations=[UserPopulation.CONSUMERS])

        assert module.get_risk_level(ctx).level is RiskLevel.LIMITED
        assert module.get_required_actions(ctx) == []


# =============================================================================
# Texas
# =============================================================================

class TestTexas:
    def test_material_credit_decision_is_high_risk(self, context_factory):
        module = TexasModule()
        ctx = context_factory(
            user_populations=[UserPopulation.CREDIT_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.HIGH
        assert "traiga-financial" in risk.applicable_categories
        assert "algorithmic-impact:tx-traiga" in _ids(module.get_required_artifacts(ctx))
        assert "us-tx-traiga-impact-assessment" in _ids(module.get_required_actions(ctx))

    def test_advisory_credit_tool_is_minimal(self, context_factory):
        ctx = context_factory(user_populations=[UserPopulation.CREDIT_APPLICANTS])
        _assert_silent(TexasModule(), ctx)

    def test_election_deepfakes(self, context_factory):
        module = TexasModule()
        ctx = context_factory(
            description="Produces campaign videos featuring a candidate.",
            generative_ai_context=GenerativeAiContext(can_generate_deepfakes=True),
        )
        risk = module.get_risk_level(ctx)

        assert risk.level is RiskLevel.LIMITED
        assert risk.applicable_categories == ["tx-deepfake-election"]
        assert _ids(module.get_required_actions(ctx)) == ["us-tx-deepfake-safeguards"]

    def test_explain_reports_matched_domain_by_name(self, context_factory):
        ctx = context_factory(
            user_populations=[UserPopulation.CREDIT_APPLICANTS],
            decision_impact=DecisionImpact.MATERIAL,
        )
        satisfied = [t for t in TexasModule().explain(ctx) if t.satisfied]

        assert "High-Risk AI — Financial Services Decisions" in [t.description for t in satisfied]

    def test_generator_needs_disclosure(self, generator_context):
        module = TexasModule()

        assert module.get_risk_level(generator_context).level is RiskLevel.LIMITED
        assert "us-tx-genai-disclosure" in _ids(module.get_required_actions(generator_context))
        assert module.get_timeline(generator_context).effective_date == "2025-09-01"
