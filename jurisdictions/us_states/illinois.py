"""
Illinois AI & Biometric Regulations (BIPA, HRA AI Amendment)

BIPA carries a private right of action with statutory damages, so any
biometric processing ranks above every other Illinois trigger.
"""

from __future__ import annotations

from functools import partial
from typing import List

from shared.models import (
    ActionPriority,
    ActionRequirement,
    ApplicableProvision,
    ArtifactRequirement,
    ArtifactType,
    ComplianceDeadline,
    ComplianceTimeline,
    DataCategory,
    Jurisdiction,
    ProductContext,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import can_generate_deepfakes, is_genai_product, processes_biometric_data
from .common import is_employment_decision

BIPA = "BIPA (740 ILCS 14)"
HRA = "Illinois Human Rights Act AI Amendment"
HRA_FRAMEWORK = "Illinois Human Rights Act (HRA) AI Amendment"

IL_CONSUMER_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
)

_action = partial(ActionRequirement, jurisdictions=["us-il"], priority=ActionPriority.CRITICAL)
_bipa = partial(ApplicableProvision, law="BIPA", regulatory_force=RegulatoryForce.BINDING_LAW)


def _video_interview(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.JOB_APPLICANTS) and (
        ctx.description_mentions("video interview", "video analysis")
        or (ctx.description_mentions("interview") and ctx.description_mentions("ai analysis"))
    )


BIPA_TRIGGERS = (
    Trigger(
        id="bipa-biometric-collection",
        name="Biometric Information Collection",
        citation=BIPA,
        predicate=processes_biometric_data,
    ),
    Trigger(
        id="bipa-biometric-sale",
        name="Sale/Disclosure of Biometric Information",
        citation="BIPA (740 ILCS 14/15(c))",
        predicate=lambda ctx: processes_biometric_data(ctx)
        and ctx.description_mentions("share", "sale", "sell", "third-party", "disclose"),
    ),
)

EMPLOYMENT_AI_TRIGGERS = (
    Trigger(
        id="il-hra-ai-employment",
        name="AI in Employment Decisions (Illinois Human Rights Act)",
        citation=HRA_FRAMEWORK,
        predicate=is_employment_decision,
    ),
    Trigger(
        id="il-aiaaa-video-interview",
        name="AI Video Interview Act",
        citation="Illinois AI Video Interview Act (820 ILCS 42)",
        predicate=_video_interview,
    ),
)

GENAI_TRIGGERS = (
    Trigger(
        id="il-genai-deepfake",
        name="AI-Generated Deepfake Content",
        citation="Illinois Deepfake Laws",
        predicate=can_generate_deepfakes,
    ),
)


# =============================================================================
# Decision ladder
# =============================================================================


ILLINOIS_LADDER = RiskLadder(
    jurisdiction="us-il",
    rungs=[
        RiskRung(
            id="biometric",
            level=RiskLevel.HIGH,
            applies=lambda ctx: bool(matching(BIPA_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes biometric data in Illinois, triggering the Biometric "
                    "Information Privacy Act (BIPA). BIPA is the strictest biometric data law in "
                    "the US with a private right of action and statutory damages of $1,000-$5,000 "
                    "per violation. Compliance is mandatory before any biometric data collection."
                ),
                categories=trigger_ids(matching(BIPA_TRIGGERS, ctx)),
                provisions=[BIPA],
            ),
        ),
        RiskRung(
            id="employment",
            level=RiskLevel.HIGH,
            applies=lambda ctx: bool(matching(EMPLOYMENT_AI_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system is used in employment decisions in Illinois, triggering the "
                    "Illinois Human Rights Act AI amendment. Employers using AI for employment "
                    "decisions must ensure AI does not produce discriminatory outcomes based on "
                    "protected classes."
                ),
                categories=trigger_ids(matching(EMPLOYMENT_AI_TRIGGERS, ctx)),
                provisions=[t.citation for t in matching(EMPLOYMENT_AI_TRIGGERS, ctx)],
            ),
        ),
        RiskRung(
            id="synthetic-media",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(matching(GENAI_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system can generate synthetic media, which may be subject to Illinois "
                    "deepfake and synthetic media disclosure requirements."
                ),
                categories=trigger_ids(matching(GENAI_TRIGGERS, ctx)),
                provisions=["Illinois Deepfake Laws"],
            ),
        ),
        RiskRung(
            id="consumer-data",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: ctx.has_data(*IL_CONSUMER_DATA) and ctx.affects(UserPopulation.CONSUMERS),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes personal data of Illinois consumers. General consumer "
                    "protection obligations apply."
                ),
                categories=["il-consumer-data"],
                provisions=["Illinois Consumer Privacy"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific Illinois regulatory obligations. No biometric "
            "data processing, employment AI decisions, or consumer data concerns identified."
        ),
    ),
)


# =============================================================================
# Provisions
# =============================================================================


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    provisions: List[ApplicableProvision] = []
    if processes_biometric_data(ctx):
        provisions += [
            _bipa(
                id="us-il-bipa-consent",
                article="740 ILCS 14/15(b)",
                title="Written Consent Before Biometric Collection",
                summary=(
                    "Private entities must inform individuals in writing that biometric data is "
                    "being collected or stored, the specific purpose, and the length of retention. "
                    "Written consent must be obtained before collection."
                ),
                relevance=(
                    "This AI system collects biometric data, requiring prior written consent under "
                    "BIPA Section 15(b)."
                ),
                max_penalty="$1,000 per negligent violation; $5,000 per intentional or reckless violation",
            ),
            _bipa(
                id="us-il-bipa-retention",
                article="740 ILCS 14/15(a)",
                title="Biometric Data Retention and Destruction Policy",
                summary=(
                    "Entities possessing biometric data must develop a written, publicly available "
                    "retention schedule and destruction guidelines. Data must be destroyed when the "
                    "initial purpose is satisfied or within 3 years of last interaction, whichever "
                    "comes first."
                ),
                relevance=(
                    "This AI system stores biometric data, requiring a published retention and "
                    "destruction policy."
                ),
            ),
            _bipa(
                id="us-il-bipa-no-sale",
                article="740 ILCS 14/15(c)",
                title="Prohibition on Sale of Biometric Data",
                summary=(
                    "No private entity may sell, lease, trade, or otherwise profit from a person's "
                    "biometric data."
                ),
                relevance=(
                    "This AI system handles biometric data — any monetisation or sharing of "
                    "biometric data is prohibited."
                ),
            ),
            _bipa(
                id="us-il-bipa-security",
                article="740 ILCS 14/15(e)",
                title="Biometric Data Security",
                summary=(
                    "Biometric data must be stored, transmitted, and protected using the reasonable "
                    "standard of care in the industry, and in a manner that is the same or more "
                    "protective than other confidential and sensitive information."
                ),
                relevance="This AI system must apply industry-standard security to biometric data.",
            ),
        ]

    employment = trigger_ids(matching(EMPLOYMENT_AI_TRIGGERS, ctx))
    if "il-hra-ai-employment" in employment:
        provisions.append(
            _bipa(
                id="us-il-hra-ai",
                law="Illinois Human Rights Act",
                article="HRA AI Amendment",
                title="AI in Employment Decisions — Non-Discrimination",
                summary=(
                    "Employers using AI for employment decisions must ensure the AI does not produce "
                    "discriminatory outcomes based on protected classes (race, colour, religion, "
                    "sex, national origin, ancestry, age, disability, marital status, military "
                    "status, sexual orientation, pregnancy). The use of zip codes as a proxy for "
                    "protected classes is prohibited."
                ),
                relevance=(
                    "This AI system makes employment decisions in Illinois, requiring "
                    "non-discrimination testing and compliance."
                ),
                enforcement_authority="Illinois Department of Human Rights",
            )
        )
    if "il-aiaaa-video-interview" in employment:
        provisions.append(
            _bipa(
                id="us-il-video-interview",
                law="Illinois AI Video Interview Act",
                article="820 ILCS 42",
                title="AI Analysis of Video Interviews",
                summary=(
                    "Employers using AI to analyse video interviews must: (1) notify applicants that "
                    "AI will be used, (2) explain how AI works and what characteristics it "
                    "evaluates, (3) obtain consent before the interview. Employers must destroy "
                    "videos within 30 days of applicant request. Sharing of video is restricted."
                ),
                relevance=(
                    "This AI system analyses video interviews for employment purposes, triggering "
                    "the AI Video Interview Act."
                ),
            )
        )

    if is_genai_product(ctx) and matching(GENAI_TRIGGERS, ctx):
        provisions.append(
            _bipa(
                id="us-il-deepfake-disclosure",
                law="Illinois Deepfake Laws",
                article="Illinois Criminal Code Amendments",
                title="Synthetic Media and Deepfake Disclosure",
                summary=(
                    "Illinois law addresses deceptive synthetic media, particularly in the context "
                    "of non-consensual intimate imagery and election interference. Creating or "
                    "distributing deceptive deepfake content may result in criminal and civil "
                    "liability."
                ),
                relevance=(
                    "This AI system can generate synthetic media, triggering disclosure and consent "
                    "obligations under Illinois deepfake provisions."
                ),
            )
        )
    return provisions


# =============================================================================
# Artifacts
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    artifacts: List[ArtifactRequirement] = []
    if processes_biometric_data(ctx):
        artifacts += [
            ArtifactRequirement(
                id="risk-assessment:il-bipa",
                type=ArtifactType.RISK_ASSESSMENT,
                name="BIPA Compliance Assessment",
                legal_basis=BIPA,
                description=(
                    "Assessment of biometric data collection, storage, use, and destruction "
                    "practices for BIPA compliance. Must include written retention and destruction "
                    "policy, consent mechanisms, and security measures."
                ),
            ),
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="BIPA Biometric Data Notice",
                legal_basis="BIPA 740 ILCS 14/15(b)",
                description=(
                    "Written notice to individuals that biometric data is being collected, the "
                    "purpose of collection, and the retention period. Must be provided before any "
                    "biometric data collection."
                ),
                template_id="transparency-notice",
            ),
        ]

    if is_employment_decision(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.BIAS_AUDIT,
                name="Illinois Employment AI Bias Audit",
                legal_basis=HRA,
                description=(
                    "Bias audit of AI system used in employment decisions, testing for "
                    "discriminatory outcomes across Illinois-protected classes (race, colour, "
                    "religion, sex, national origin, ancestry, age, disability, marital status, "
                    "military status, sexual orientation, pregnancy)."
                ),
                template_id="bias-audit-nyc",
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions: List[ActionRequirement] = []
    if processes_biometric_data(ctx):
        actions += [
            _action(
                id="us-il-bipa-consent-mechanism",
                title="Implement BIPA written consent mechanism",
                description=(
                    "Implement a process to inform individuals in writing about "
                    "biometric data collection, its purpose, and retention period, and "
                    "obtain written consent BEFORE any biometric data is collected. "
                    "Consent must be specific to biometric data — general terms of "
                    "service are insufficient."
                ),
                legal_basis="BIPA 740 ILCS 14/15(b)",
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="us-il-bipa-retention-policy",
                title="Publish biometric data retention and destruction policy",
                description=(
                    "Develop and make publicly available a written policy establishing retention "
                    "schedules and guidelines for permanently destroying biometric data when the "
                    "initial purpose is satisfied or within 3 years of last interaction, whichever "
                    "is earlier."
                ),
                legal_basis="BIPA 740 ILCS 14/15(a)",
                estimated_effort="1-2 weeks",
            ),
            _action(
                id="us-il-bipa-security",
                title="Implement biometric data security measures",
                description=(
                    "Store, transmit, and protect biometric data using a reasonable standard of "
                    "care, with protections equal to or greater than those applied to other "
                    "confidential and sensitive information."
                ),
                legal_basis="BIPA 740 ILCS 14/15(e)",
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="us-il-bipa-no-monetisation",
                title="Ensure no sale or profit from biometric data",
                description=(
                    "Verify that biometric data is not sold, leased, traded, or otherwise "
                    "monetised. Review all third-party data sharing arrangements to ensure "
                    "compliance with BIPA Section 15(c) prohibition."
                ),
                legal_basis="BIPA 740 ILCS 14/15(c)",
                estimated_effort="1-2 weeks",
            ),
        ]

    if is_employment_decision(ctx):
        actions += [
            _action(
                id="us-il-hra-bias-testing",
                title="Conduct employment AI bias testing for Illinois protected classes",
                description=(
                    "Test the AI system for discriminatory outcomes across all Illinois HRA "
                    "protected classes: race, colour, religion, sex, national origin, ancestry, age "
                    "(40+), disability, marital status, military status, sexual orientation, and "
                    "pregnancy. Ensure zip codes are not used as proxies for protected classes."
                ),
                legal_basis=HRA,
                estimated_effort="4-8 weeks",
            ),
            _action(
                id="us-il-hra-notice",
                title="Provide notice of AI use in employment decisions",
                description=(
                    "Inform applicants and employees that AI is being used in employment decisions, "
                    "what data is being analysed, and how the AI factors into the decision-making "
                    "process."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=HRA,
                estimated_effort="1-2 weeks",
            ),
        ]

    if _video_interview(ctx):
        actions.append(
            _action(
                id="us-il-video-interview-compliance",
                title="Implement AI Video Interview Act compliance",
                description=(
                    "Before using AI to analyse video interviews: (1) notify applicants of AI use, "
                    "(2) explain how AI works and what characteristics it evaluates, (3) obtain "
                    "applicant consent. Implement video destruction within 30 days of request. "
                    "Restrict video sharing."
                ),
                legal_basis="Illinois AI Video Interview Act (820 ILCS 42)",
                estimated_effort="2-4 weeks",
            )
        )

    if can_generate_deepfakes(ctx):
        actions.append(
            _action(
                id="us-il-deepfake-safeguards",
                title="Implement deepfake safeguards for Illinois compliance",
                description=(
                    "Implement safeguards against the creation and distribution of deceptive "
                    "synthetic media. Ensure AI-generated content is properly labelled and cannot be "
                    "easily used for non-consensual intimate imagery or election interference."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="Illinois Deepfake Laws",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2008-10-03",
        description=(
            "BIPA enacted. All biometric data collection requires written consent and a published "
            "retention/destruction policy."
        ),
        provision=BIPA,
    ),
    ComplianceDeadline(
        date="2020-01-01",
        description=(
            "Illinois AI Video Interview Act took effect. Employers using AI to analyse video "
            "interviews must notify applicants, explain AI use, and obtain consent."
        ),
        provision="820 ILCS 42",
    ),
    ComplianceDeadline(
        date="2026-01-01",
        description=(
            "Illinois Human Rights Act AI amendment effective date. AI in employment decisions must "
            "not produce discriminatory outcomes."
        ),
        provision="Illinois HRA AI Amendment",
    ),
]


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes: List[str] = []
    if risk.level is RiskLevel.HIGH and any("bipa" in c for c in risk.applicable_categories):
        notes.append(
            "CRITICAL: BIPA has been in effect since 2008 with active enforcement. "
            "Private right of action allows individuals to sue directly. Statutory "
            "damages range from $1,000 (negligent) to $5,000 (intentional/reckless) per "
            "violation. Class action exposure is significant — settlements have "
            "exceeded $650 million (Facebook/Meta)."
        )
    if any("employment" in c for c in risk.applicable_categories):
        notes.append(
            "The Illinois Human Rights Act AI amendment is in effect. Employers must proactively "
            "test AI systems for discriminatory outcomes."
        )
    return ComplianceTimeline(effective_date="2008-10-03", deadlines=DEADLINES, notes=notes)


class IllinoisModule(JurisdictionModule):
    region = "US"
    description = "BIPA biometric privacy, HRA AI amendment, AI Video Interview Act"

    @property
    def id(self) -> str:
        return "us-il"

    @property
    def name(self) -> str:
        return "Illinois AI & Biometric Regulations (BIPA, HRA AI Amendment)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_IL

    @property
    def ladder(self) -> RiskLadder:
        return ILLINOIS_LADDER

    @property
    def triggers(self):
        return (*BIPA_TRIGGERS, *EMPLOYMENT_AI_TRIGGERS, *GENAI_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
