"""
Texas Responsible AI Governance Act (TRAIGA) and deepfake statutes

DECISION LADDER:
  1. consequential-decision -> HIGH (any TRAIGA domain)
  2. deepfake               -> LIMITED (Election Code / Penal Code)
  3. genai                  -> LIMITED (TRAIGA disclosure)
  4. consumer-facing        -> LIMITED (DTPA)
  fallback                  -> MINIMAL
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
    Jurisdiction,
    OutputModality,
    ProductContext,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import (
    can_generate_deepfakes,
    is_financial_services_ai,
    is_genai_product,
    makes_material_decisions,
)
from .common import generates_media
from .common import can_generate_deepfakes as can_generate_deepfake_imagery

TRAIGA = "TRAIGA"

_action = partial(ActionRequirement, jurisdictions=["us-tx"], priority=ActionPriority.CRITICAL)
_traiga = partial(ApplicableProvision, law=TRAIGA, regulatory_force=RegulatoryForce.BINDING_LAW)


def _domain(trigger_id: str, name: str, populations=(), keywords=(), predicate=None) -> Trigger:
    """A TRAIGA domain: reached by population, keyword or predicate, and always material."""

    def matches(ctx: ProductContext) -> bool:
        in_domain = (
            (bool(populations) and ctx.affects(*populations))
            or ctx.description_mentions(*keywords)
            or (predicate is not None and predicate(ctx))
        )
        return in_domain and makes_material_decisions(ctx)

    return Trigger(id=trigger_id, name=name, citation=TRAIGA, predicate=matches)


TRAIGA_TRIGGERS = (
    _domain(
        "traiga-employment",
        "High-Risk AI — Employment Decisions",
        populations=(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES),
    ),
    _domain(
        "traiga-education",
        "High-Risk AI — Education Decisions",
        populations=(UserPopulation.STUDENTS,),
    ),
    _domain(
        "traiga-financial",
        "High-Risk AI — Financial Services Decisions",
        populations=(UserPopulation.CREDIT_APPLICANTS,),
        keywords=("credit", "lending", "insurance", "loan"),
        predicate=is_financial_services_ai,
    ),
    _domain(
        "traiga-housing",
        "High-Risk AI — Housing Decisions",
        populations=(UserPopulation.TENANTS,),
        keywords=("housing", "rental", "tenant screen"),
    ),
    _domain(
        "traiga-healthcare",
        "High-Risk AI — Healthcare Decisions",
        populations=(UserPopulation.PATIENTS,),
    ),
    _domain(
        "traiga-government",
        "High-Risk AI — Government Services Decisions",
        keywords=("government service", "public benefit", "welfare", "public assistance"),
    ),
    _domain(
        "traiga-legal",
        "High-Risk AI — Legal Services Decisions",
        keywords=("legal service", "legal decision", "judicial"),
    ),
)

DEEPFAKE_TRIGGERS = (
    Trigger(
        id="tx-deepfake-election",
        name="Election Deepfakes (Texas Election Code)",
        citation="Texas Election Code § 255.004",
        predicate=lambda ctx: can_generate_deepfakes(ctx)
        and ctx.description_mentions("election", "political", "candidate", "campaign"),
    ),
    Trigger(
        id="tx-deepfake-sexual",
        name="Non-Consensual Sexual Deepfakes",
        citation="Texas Penal Code § 21.165",
        predicate=lambda ctx: can_generate_deepfake_imagery(ctx)
        and generates_media(ctx, OutputModality.IMAGE, OutputModality.VIDEO),
    ),
)


def is_high_risk(ctx: ProductContext) -> bool:
    return bool(matching(TRAIGA_TRIGGERS, ctx))


# =============================================================================
# Decision ladder
# =============================================================================


def _explain_deepfakes(ctx: ProductContext) -> Finding:
    triggers = matching(DEEPFAKE_TRIGGERS, ctx)
    return Finding(
        justification=(
            "This AI system can generate synthetic media triggering Texas deepfake provisions: "
            f"{'; '.join(t.name for t in triggers)}. Texas has specific criminal provisions for "
            "election deepfakes and non-consensual sexual deepfakes."
        ),
        categories=trigger_ids(triggers),
        provisions=[t.citation for t in triggers],
    )


TEXAS_LADDER = RiskLadder(
    jurisdiction="us-tx",
    rungs=[
        RiskRung(
            id="consequential-decision",
            level=RiskLevel.HIGH,
            applies=is_high_risk,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes consequential decisions in TRAIGA-regulated domains: "
                    f"{'; '.join(t.name for t in matching(TRAIGA_TRIGGERS, ctx))}. Deployers must "
                    "conduct impact assessments, implement risk management, and provide individual "
                    "notice and opt-out rights."
                ),
                categories=trigger_ids(matching(TRAIGA_TRIGGERS, ctx)),
                provisions=["TRAIGA (Texas Responsible AI Governance Act)"],
            ),
        ),
        RiskRung(
            id="deepfake",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(matching(DEEPFAKE_TRIGGERS, ctx)),
            explain=_explain_deepfakes,
        ),
        RiskRung(
            id="genai",
            level=RiskLevel.LIMITED,
            applies=is_genai_product,
            explain=lambda ctx: Finding(
                justification=(
                    "This generative AI system is subject to Texas AI content disclosure "
                    "requirements. TRAIGA includes provisions for transparency in AI-generated "
                    "content."
                ),
                categories=["tx-genai-disclosure"],
                provisions=["TRAIGA GenAI Provisions"],
            ),
        ),
        RiskRung(
            id="consumer-facing",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: ctx.affects(UserPopulation.CONSUMERS),
            explain=lambda ctx: Finding(
                justification=(
                    "This consumer-facing AI system is subject to general Texas consumer protection "
                    "laws (DTPA) regarding deceptive trade practices."
                ),
                categories=["tx-consumer-protection"],
                provisions=["Texas DTPA"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific Texas regulatory obligations. It does not "
            "make consequential decisions in TRAIGA domains and does not generate synthetic media."
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
    if is_high_risk(ctx):
        provisions += [
            _traiga(
                id="us-tx-traiga-impact-assessment",
                article="TRAIGA Impact Assessment Requirements",
                title="Algorithmic Impact Assessment",
                summary=(
                    "Deployers of high-risk AI systems must conduct and document impact assessments "
                    "before deployment. Assessments must evaluate potential discriminatory impacts, "
                    "describe the AI system's purpose and intended use, and identify risk "
                    "mitigation measures."
                ),
                relevance="This AI system makes consequential decisions, requiring a TRAIGA impact assessment.",
                enforcement_authority="Texas Attorney General",
            ),
            _traiga(
                id="us-tx-traiga-risk-management",
                article="TRAIGA Risk Management",
                title="Risk Management Policy",
                summary=(
                    "Deployers must implement a risk management policy including: identification "
                    "of potential risks of algorithmic discrimination, steps to mitigate identified "
                    "risks, and ongoing monitoring procedures."
                ),
                relevance="This high-risk AI system requires a documented risk management policy under TRAIGA.",
            ),
            _traiga(
                id="us-tx-traiga-notice",
                article="TRAIGA Notice Requirements",
                title="Individual Notice of AI Use",
                summary=(
                    "Deployers must provide clear notice to individuals that an AI system is being "
                    "used to make a consequential decision about them, including what data is used "
                    "and how to contest the decision."
                ),
                relevance="Individuals affected by this AI system's consequential decisions must be notified.",
            ),
            _traiga(
                id="us-tx-traiga-opt-out",
                article="TRAIGA Opt-Out Rights",
                title="Right to Opt Out and Appeal",
                summary=(
                    "Individuals subject to consequential AI decisions have the right to opt out of "
                    "AI-based profiling and to appeal adverse decisions, with access to a human "
                    "reviewer."
                ),
                relevance="Affected individuals must be given opt-out and appeal rights.",
            ),
        ]

    deepfakes = trigger_ids(matching(DEEPFAKE_TRIGGERS, ctx))
    if "tx-deepfake-election" in deepfakes:
        provisions.append(
            _traiga(
                id="us-tx-election-deepfake",
                law="Texas Election Code",
                article="§ 255.004",
                title="Prohibition on Deceptive Election Deepfakes",
                summary=(
                    "It is illegal to create and distribute a deepfake video intended to injure a "
                    "candidate or influence an election within 30 days of an election. Violations "
                    "are a Class A misdemeanor."
                ),
                relevance=(
                    "This AI system can generate deepfakes and may be used in contexts involving "
                    "political content."
                ),
            )
        )
    if "tx-deepfake-sexual" in deepfakes:
        provisions.append(
            _traiga(
                id="us-tx-sexual-deepfake",
                law="Texas Penal Code",
                article="§ 21.165",
                title="Non-Consensual Sexual Deepfakes",
                summary=(
                    "Creating or distributing non-consensual sexually explicit deepfake imagery is a "
                    "criminal offence (state jail felony). This applies to AI-generated images or "
                    "videos depicting a real person in sexual situations without their consent."
                ),
                relevance=(
                    "This AI system can generate realistic images/videos, creating risk for "
                    "non-consensual sexually explicit content."
                ),
            )
        )

    if is_genai_product(ctx):
        provisions.append(
            _traiga(
                id="us-tx-traiga-genai-disclosure",
                article="TRAIGA GenAI Disclosure",
                title="AI-Generated Content Disclosure",
                summary=(
                    "AI systems generating content must disclose that content is AI-generated when "
                    "it could be mistaken for human-created content. Deployers must implement "
                    "mechanisms for labelling AI-generated output."
                ),
                relevance="This generative AI system must implement content disclosure mechanisms under TRAIGA.",
            )
        )
    return provisions


# =============================================================================
# Artifacts and actions
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    artifacts: List[ArtifactRequirement] = []
    if is_high_risk(ctx):
        artifacts += [
            ArtifactRequirement(
                id="algorithmic-impact:tx-traiga",
                type=ArtifactType.ALGORITHMIC_IMPACT,
                name="TRAIGA Algorithmic Impact Assessment",
                legal_basis="TRAIGA Impact Assessment Requirements",
                description=(
                    "Algorithmic impact assessment documenting the AI system's purpose, data "
                    "inputs, decision outputs, potential discriminatory impacts, risk mitigation "
                    "measures, and ongoing monitoring plan. Must be completed before deployment."
                ),
            ),
            ArtifactRequirement(
                id="risk-assessment:tx-traiga",
                type=ArtifactType.RISK_ASSESSMENT,
                name="TRAIGA Risk Management Policy",
                legal_basis="TRAIGA Risk Management",
                description=(
                    "Documented risk management policy covering identification of algorithmic "
                    "discrimination risks, mitigation steps, and monitoring procedures."
                ),
            ),
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="TRAIGA Individual Notice",
                legal_basis="TRAIGA Notice Requirements",
                description=(
                    "Notice template informing individuals that AI is used in consequential "
                    "decisions, what data is used, how to contest decisions, and how to opt out."
                ),
                template_id="transparency-notice",
            ),
        ]

    if is_genai_product(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="genai-content-policy:tx-disclosure",
                type=ArtifactType.GENAI_CONTENT_POLICY,
                name="AI-Generated Content Disclosure Policy",
                required=False,
                legal_basis="TRAIGA GenAI Provisions",
                description=(
                    "Policy documenting mechanisms for disclosing AI-generated content, labelling "
                    "standards, and compliance with Texas deepfake provisions."
                ),
            )
        )
    return artifacts


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions: List[ActionRequirement] = []
    if is_high_risk(ctx):
        actions += [
            _action(
                id="us-tx-traiga-impact-assessment",
                title="Conduct TRAIGA algorithmic impact assessment",
                description=(
                    "Complete an algorithmic impact assessment evaluating: system purpose and "
                    "intended use, data inputs and their sources, potential for algorithmic "
                    "discrimination across protected classes, risk mitigation measures, and ongoing "
                    "monitoring plan. Must be completed before deployment."
                ),
                legal_basis=TRAIGA,
                estimated_effort="4-8 weeks",
            ),
            _action(
                id="us-tx-traiga-risk-policy",
                title="Implement TRAIGA risk management policy",
                description=(
                    "Develop and implement a risk management policy covering identification of "
                    "algorithmic discrimination risks, documented mitigation steps, and ongoing "
                    "monitoring procedures. Policy must be maintained and updated as the system "
                    "evolves."
                ),
                legal_basis=TRAIGA,
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="us-tx-traiga-individual-notice",
                title="Implement individual notice and opt-out mechanisms",
                description=(
                    "Provide clear notice to individuals that AI is being used for consequential "
                    "decisions. Include information about what data is used, how to contest "
                    "decisions, and how to opt out of AI-based profiling. Ensure a human reviewer "
                    "is available for appeals."
                ),
                legal_basis=TRAIGA,
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="us-tx-traiga-discrimination-testing",
                title="Test for algorithmic discrimination",
                description=(
                    "Test the AI system for discriminatory outcomes across Texas-protected classes. "
                    "Document testing methodology, results, and remediation measures. Maintain "
                    "records for regulatory review."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=TRAIGA,
                estimated_effort="4-8 weeks",
            ),
        ]

    if matching(DEEPFAKE_TRIGGERS, ctx):
        actions.append(
            _action(
                id="us-tx-deepfake-safeguards",
                title="Implement Texas deepfake safeguards",
                description=(
                    "Implement safeguards to prevent creation and distribution of deceptive "
                    "deepfakes. For election-related content: ensure AI cannot be easily used to "
                    "create misleading political deepfakes within 30 days of elections. For "
                    "intimate imagery: implement consent verification and content safety filters."
                ),
                legal_basis="Texas Election Code § 255.004, Texas Penal Code § 21.165",
                estimated_effort="2-4 weeks",
            )
        )

    if is_genai_product(ctx):
        actions.append(
            _action(
                id="us-tx-genai-disclosure",
                title="Implement AI-generated content disclosure",
                description=(
                    "Implement mechanisms to disclose that content is AI-generated when it could be "
                    "mistaken for human-created content. Label AI-generated outputs and maintain "
                    "provenance information."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="TRAIGA GenAI Provisions",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2019-09-01",
        description=(
            "Texas Election Code deepfake provision (§ 255.004) took effect. Creating deceptive "
            "political deepfakes within 30 days of an election is a Class A misdemeanor."
        ),
        provision="Texas Election Code § 255.004",
    ),
    ComplianceDeadline(
        date="2025-09-01",
        description=(
            "TRAIGA takes effect. Deployers of high-risk AI systems must comply with impact "
            "assessment, risk management, notice, and opt-out requirements."
        ),
        provision=TRAIGA,
    ),
]


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "TRAIGA (Texas Responsible AI Governance Act) was signed into law in 2025. Compliance "
        "obligations phase in based on system risk level."
    ]
    if risk.level is RiskLevel.HIGH:
        notes.append(
            "High-risk AI system deployers must complete impact assessments and implement risk "
            "management policies before deployment. Ongoing monitoring and annual reassessment "
            "required."
        )
    return ComplianceTimeline(effective_date="2025-09-01", deadlines=DEADLINES, notes=notes)


class TexasModule(JurisdictionModule):
    region = "US"
    description = "TRAIGA consequential decisions, election and sexual deepfake statutes"

    @property
    def id(self) -> str:
        return "us-tx"

    @property
    def name(self) -> str:
        return "Texas Responsible AI Governance Act (TRAIGA)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_TX

    @property
    def ladder(self) -> RiskLadder:
        return TEXAS_LADDER

    @property
    def triggers(self):
        return (*TRAIGA_TRIGGERS, *DEEPFAKE_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
