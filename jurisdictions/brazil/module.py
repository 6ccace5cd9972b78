"""
Brazil AI Regulations (LGPD, AI Bill PL 2338/2023)

The LGPD is in force; the AI Bill passed the Senate in July 2024 and is still
pending in the Chamber of Deputies. AI Bill duties are surfaced as
forward-looking obligations and flagged as pending legislation.

DECISION LADDER:
  1. automated-decisions   -> HIGH (LGPD Article 20)
  2. foundation-model      -> HIGH (AI Bill provider transparency)
  3. sensitive-or-finance  -> HIGH (LGPD Article 11 / BCB)
  4. genai                 -> LIMITED
  5. personal-data         -> LIMITED
  fallback                 -> MINIMAL
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
    AutomationLevel,
    ComplianceDeadline,
    ComplianceTimeline,
    DataCategory,
    FoundationModelSource,
    Jurisdiction,
    ProductContext,
    ProductType,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import is_consumer_facing, is_financial_services_ai, is_genai_product, makes_material_decisions

AI_BILL = "AI Bill (PL 2338/2023)"
PENDING = (
    "PENDING LEGISLATION: The AI Bill (PL 2338/2023) was approved by the Brazilian Senate in "
    "July 2024 and is under consideration in the Chamber of Deputies. It has NOT yet been "
    "enacted into law. "
)

LGPD_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
    DataCategory.MINOR,
    DataCategory.GENETIC,
    DataCategory.POLITICAL,
)

LGPD_SENSITIVE_DATA = (
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.GENETIC,
    DataCategory.POLITICAL,
)

HIGH_RISK_POPULATIONS = (
    UserPopulation.CONSUMERS,
    UserPopulation.CREDIT_APPLICANTS,
    UserPopulation.JOB_APPLICANTS,
    UserPopulation.PATIENTS,
)

HIGH_RISK_KEYWORDS = ("credit", "employment", "health", "education", "justice", "public service")

_action = partial(ActionRequirement, jurisdictions=["brazil"])
_lgpd = partial(ApplicableProvision, law="LGPD", regulatory_force=RegulatoryForce.BINDING_LAW)
_bill = partial(
    ApplicableProvision, law=AI_BILL, regulatory_force=RegulatoryForce.PENDING_LEGISLATION
)


def processes_personal_data(ctx: ProductContext) -> bool:
    return ctx.has_data(*LGPD_DATA)


def is_automated_decision_making(ctx: ProductContext) -> bool:
    """LGPD Article 20 also reaches decisions a human only monitors."""
    return makes_material_decisions(ctx) and ctx.automation_level in (
        AutomationLevel.FULLY_AUTOMATED,
        AutomationLevel.HUMAN_ON_THE_LOOP,
    )


def is_foundation_model_provider(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return ctx.product_type == ProductType.FOUNDATION_MODEL or (
        genai is not None and genai.foundation_model_source == FoundationModelSource.SELF_TRAINED
    )


def _is_high_risk_domain(ctx: ProductContext) -> bool:
    return makes_material_decisions(ctx) and (
        ctx.affects(*HIGH_RISK_POPULATIONS) or ctx.description_mentions(*HIGH_RISK_KEYWORDS)
    )


def _trains_models(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        genai is not None
        and (genai.uses_foundation_model or genai.finetuning_performed)
        and ctx.training_data.uses_training_data
    )


def _generates_content(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (genai is not None and genai.generates_content) or ctx.product_type == ProductType.GENERATOR


def _consumer_decisions(ctx: ProductContext) -> bool:
    return is_consumer_facing(ctx) and makes_material_decisions(ctx)


LGPD_TRIGGERS = (
    Trigger(
        id="br-lgpd-personal-data",
        name="Personal Data Processing",
        citation="LGPD",
        predicate=processes_personal_data,
    ),
    Trigger(
        id="br-lgpd-automated-decisions",
        name="Automated Decision-Making (Article 20)",
        citation="LGPD Article 20",
        predicate=is_automated_decision_making,
    ),
    Trigger(
        id="br-lgpd-sensitive-data",
        name="Sensitive Personal Data Processing",
        citation="LGPD Article 11",
        predicate=lambda ctx: ctx.has_data(*LGPD_SENSITIVE_DATA),
    ),
    Trigger(
        id="br-lgpd-minors",
        name="Children's Data Processing",
        citation="LGPD Article 14",
        predicate=lambda ctx: ctx.has_data(DataCategory.MINOR) or ctx.affects(UserPopulation.MINORS),
    ),
)

AI_BILL_TRIGGERS = (
    Trigger(
        id="br-ai-bill-high-risk",
        name="High-Risk AI System (AI Bill)",
        citation=AI_BILL,
        predicate=_is_high_risk_domain,
    ),
    Trigger(
        id="br-ai-bill-foundation-model",
        name="Foundation Model Provider (AI Bill)",
        citation=AI_BILL,
        predicate=is_foundation_model_provider,
    ),
    Trigger(
        id="br-ai-bill-genai-transparency",
        name="GenAI Transparency (AI Bill)",
        citation=AI_BILL,
        predicate=_generates_content,
    ),
    Trigger(
        id="br-ai-bill-training-data",
        name="Training Data Disclosure (AI Bill)",
        citation=AI_BILL,
        predicate=_trains_models,
    ),
)


def _bill_matches(ctx: ProductContext) -> List[str]:
    return trigger_ids(matching(AI_BILL_TRIGGERS, ctx))


def _all_categories(ctx: ProductContext) -> List[str]:
    return trigger_ids(matching(LGPD_TRIGGERS, ctx) + matching(AI_BILL_TRIGGERS, ctx))


# =============================================================================
# Decision ladder
# =============================================================================


BRAZIL_LADDER = RiskLadder(
    jurisdiction="brazil",
    rungs=[
        RiskRung(
            id="automated-decisions",
            level=RiskLevel.HIGH,
            applies=is_automated_decision_making,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes automated decisions affecting individuals in Brazil, "
                    "triggering LGPD Article 20 rights (review, explanation) and AI Bill high-risk "
                    "classification. Data subjects have the right to request review of automated "
                    "decisions and explanation of the criteria and procedures used."
                ),
                categories=_all_categories(ctx),
                provisions=["LGPD Article 20", AI_BILL],
            ),
        ),
        RiskRung(
            id="foundation-model",
            level=RiskLevel.HIGH,
            applies=is_foundation_model_provider,
            explain=lambda ctx: Finding(
                justification=(
                    "This is a foundation model provider, triggering AI Bill transparency "
                    "obligations including training data disclosure, model documentation, and "
                    "accountability requirements for downstream uses."
                ),
                categories=_all_categories(ctx),
                provisions=[AI_BILL],
            ),
        ),
        RiskRung(
            id="sensitive-or-finance",
            level=RiskLevel.HIGH,
            applies=lambda ctx: ctx.has_data(*LGPD_SENSITIVE_DATA) or is_financial_services_ai(ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes sensitive personal data under LGPD or operates in "
                    "financial services, requiring heightened data protection measures and impact "
                    "assessments."
                ),
                categories=_all_categories(ctx),
                provisions=["LGPD Article 11"],
            ),
        ),
        RiskRung(
            id="genai",
            level=RiskLevel.LIMITED,
            applies=is_genai_product,
            explain=lambda ctx: Finding(
                justification=(
                    "This generative AI system triggers AI Bill transparency requirements for "
                    "AI-generated content and training data disclosure obligations."
                ),
                categories=_bill_matches(ctx),
                provisions=[AI_BILL],
            ),
        ),
        RiskRung(
            id="personal-data",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(matching(LGPD_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes personal data in Brazil, triggering LGPD obligations "
                    "including legal basis, data subject rights, and transparency requirements."
                ),
                categories=trigger_ids(matching(LGPD_TRIGGERS, ctx)),
                provisions=["LGPD"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific Brazilian regulatory obligations. No "
            "personal data processing, automated decisions, or GenAI concerns identified."
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

    if processes_personal_data(ctx):
        provisions += [
            _lgpd(
                id="br-lgpd-legal-basis",
                article="Article 7",
                title="Legal Basis for Processing",
                summary=(
                    "Processing of personal data requires one of 10 legal bases: consent, legal "
                    "obligation, public policy execution, research, contract execution, exercise "
                    "of rights, life/physical safety protection, health protection, legitimate "
                    "interest, or credit protection. For AI systems, legitimate interest and "
                    "consent are most commonly applicable."
                ),
                relevance=(
                    "This AI system processes personal data, requiring a documented legal basis "
                    "under LGPD Article 7."
                ),
                enforcement_authority="ANPD",
            ),
            _lgpd(
                id="br-lgpd-data-subject-rights",
                article="Article 18",
                title="Data Subject Rights",
                summary=(
                    "Data subjects have rights to: confirmation of processing, access, correction, "
                    "anonymisation/blocking/deletion, portability, information about sharing, "
                    "revocation of consent, and opposition to processing. For AI, the right to "
                    "explanation of automated decisions (Article 20) is particularly relevant."
                ),
                relevance=(
                    "This AI system must enable exercise of data subject rights including "
                    "explanation of automated decisions."
                ),
                enforcement_authority="ANPD",
            ),
            ApplicableProvision(
                id="br-anpd-ai-guidance",
                law="ANPD AI Guidance",
                article="ANPD Regulatory Sandbox / AI Analysis",
                title="ANPD AI and Data Protection Guidance",
                summary=(
                    "The Brazilian National Data Protection Authority (ANPD) has published "
                    "guidance on AI and data protection, including analysis of algorithmic "
                    "decision-making, regulatory sandboxes for AI innovation, and guidance on the "
                    "intersection of LGPD and AI systems. ANPD's strategic plan includes AI "
                    "regulation as a priority area."
                ),
                relevance=(
                    "This AI system processes personal data in Brazil and should align with ANPD "
                    "guidance on AI and data protection."
                ),
                regulatory_force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            ),
        ]

    if is_automated_decision_making(ctx):
        provisions.append(
            _lgpd(
                id="br-lgpd-art20-automated",
                article="Article 20",
                title="Review of Automated Decisions",
                summary=(
                    "Data subjects have the right to request review of decisions made solely "
                    "based on automated processing, including profiling, that affect their "
                    "interests. The controller must provide clear and adequate information about "
                    "the criteria and procedures used for the automated decision."
                ),
                relevance=(
                    "This AI system makes automated decisions, triggering the right to human "
                    "review and explanation under LGPD Article 20."
                ),
            )
        )

    bill = _bill_matches(ctx)

    if "br-ai-bill-high-risk" in bill:
        provisions.append(
            _bill(
                id="br-ai-bill-high-risk-obligations",
                article="High-Risk Classification",
                title="High-Risk AI System Obligations (AI Bill)",
                summary=(
                    "NOTE: The AI Bill (PL 2338/2023) was approved by the Brazilian Senate in "
                    "July 2024 and is under consideration in the Chamber of Deputies. It has NOT "
                    "yet been enacted into law. "
                    "Requirements below reflect the latest Senate-approved text and may change "
                    "before final enactment. High-risk AI systems (those making consequential "
                    "decisions in health, education, employment, credit, justice, public services) "
                    "must undergo algorithmic impact assessments, implement governance measures, "
                    "ensure transparency and explainability, and provide rights to affected "
                    "individuals."
                ),
                relevance=(
                    "This AI system makes consequential decisions in a high-risk domain under the "
                    "AI Bill."
                ),
            )
        )

    if "br-ai-bill-foundation-model" in bill:
        provisions.append(
            _bill(
                id="br-ai-bill-foundation-transparency",
                article="Foundation Model Provisions",
                title="Foundation Model Provider Transparency",
                summary=PENDING
                + (
                    "Foundation model providers must publish information about model capabilities "
                    "and limitations, training data sources and methodology, known risks and "
                    "biases, and intended/prohibited uses. Providers are responsible for "
                    "downstream harms from known vulnerabilities."
                ),
                relevance="This is a foundation model requiring provider transparency under the AI Bill.",
            )
        )

    if "br-ai-bill-genai-transparency" in bill:
        provisions.append(
            _bill(
                id="br-ai-bill-genai-transparency",
                article="GenAI Transparency",
                title="AI-Generated Content Transparency",
                summary=PENDING
                + (
                    "AI systems that generate content must disclose that content is AI-generated. "
                    "Users must be informed when they are interacting with AI. Generated content "
                    "should be identifiable as AI-produced through labelling or metadata."
                ),
                relevance=(
                    "This GenAI system must disclose AI-generated content under the AI Bill "
                    "transparency requirements."
                ),
            )
        )

    if "br-ai-bill-training-data" in bill:
        provisions.append(
            _bill(
                id="br-ai-bill-training-disclosure",
                article="Training Data Disclosure",
                title="Training Data Disclosure Requirements",
                summary=PENDING
                + (
                    "AI system providers must disclose information about training data including: "
                    "data sources, processing methodology, measures to ensure data quality, and "
                    "compliance with LGPD for personal data used in training."
                ),
                relevance="This AI system uses training data requiring disclosure under the AI Bill.",
            )
        )

    if is_financial_services_ai(ctx):
        provisions.append(
            ApplicableProvision(
                id="br-central-bank-ai",
                law="Central Bank of Brazil (BCB)",
                article="Resolucao BCB 403/2024, CMN Resolution 4893/2021",
                title="BCB AI and Technology Risk Guidelines",
                summary=(
                    "The Brazilian Central Bank has issued resolutions on technology risk "
                    "management and AI use in financial institutions. Resolucao BCB 403/2024 "
                    "addresses AI-specific considerations including model governance, "
                    "explainability requirements for automated credit decisions, and "
                    "cybersecurity for AI systems. CMN Resolution 4893/2021 covers broader "
                    "information security and technology risk management applicable to AI "
                    "deployments. Financial institutions must document AI model governance and "
                    "validation processes."
                ),
                relevance=(
                    "This AI system operates in Brazilian financial services, triggering Central "
                    "Bank guidelines on AI governance and technology risk."
                ),
                regulatory_force=RegulatoryForce.BINDING_REGULATION,
                enforcement_authority="Banco Central do Brasil",
            )
        )

    if _consumer_decisions(ctx):
        provisions.append(
            ApplicableProvision(
                id="br-cdc-consumer-protection",
                law="Consumer Defence Code (CDC — Lei 8.078/1990)",
                article="Articles 6, 31, 39, 43",
                title="Consumer Defence Code — AI Consumer Protection",
                summary=(
                    "The Brazilian Consumer Defence Code (CDC) applies to AI systems making "
                    "decisions affecting consumers. Key provisions: Article 6 (right to clear and "
                    "adequate information), Article 31 (product/service information "
                    "requirements), Article 39 (prohibition of abusive practices), and Article 43 "
                    "(right to access and correction of consumer data). Courts have applied the "
                    "CDC to AI-driven consumer decisions, establishing precedent for algorithmic "
                    "transparency obligations."
                ),
                relevance=(
                    "This AI system makes material decisions affecting consumers in Brazil, "
                    "triggering Consumer Defence Code protections."
                ),
                regulatory_force=RegulatoryForce.BINDING_LAW,
            )
        )

    if len(ctx.target_markets) > 1 and processes_personal_data(ctx):
        provisions.append(
            _lgpd(
                id="br-lgpd-international-transfer",
                article="Articles 33-34",
                title="International Data Transfer (LGPD)",
                summary=(
                    "LGPD restricts international transfers of personal data to "
                    "countries or organisations that provide an adequate level of "
                    "protection (ANPD adequacy determination), or through specific "
                    "safeguards: standard contractual clauses (approved by ANPD), "
                    "binding corporate rules, or specific consent. ANPD has been "
                    "developing its adequacy assessment framework and standard "
                    "contractual clauses. For AI systems processing data across "
                    "borders, each transfer pathway must have a valid legal mechanism."
                ),
                relevance=(
                    "This AI system operates across multiple markets, potentially requiring "
                    "international personal data transfers subject to LGPD transfer restrictions."
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

    if risk.level is RiskLevel.HIGH and processes_personal_data(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="dpia:br-ripd",
                type=ArtifactType.DPIA,
                name="LGPD Data Protection Impact Report (RIPD)",
                legal_basis="LGPD Article 38",
                description=(
                    "Relatório de Impacto à Proteção de Dados Pessoais (RIPD) — data "
                    "protection impact assessment required for high-risk processing. "
                    "Must describe processing operations, protective measures, risk "
                    "analysis, and methodologies. ANPD may request this at any time."
                ),
            )
        )

    bill = _bill_matches(ctx)
    if "br-ai-bill-high-risk" in bill:
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.ALGORITHMIC_IMPACT,
                name="AI Bill Algorithmic Impact Assessment",
                legal_basis=AI_BILL,
                description=(
                    "Algorithmic impact assessment for high-risk AI systems as required by the AI "
                    "Bill. Must cover: system description and purpose, potential discriminatory "
                    "impacts, risk mitigation measures, transparency mechanisms, and human "
                    "oversight arrangements."
                ),
            )
        )

    if is_foundation_model_provider(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="Foundation Model Transparency Documentation",
                legal_basis=f"{AI_BILL} — Foundation Model Provisions",
                description=(
                    "Documentation of the foundation model covering capabilities, limitations, "
                    "training data sources, methodology, known risks and biases, intended uses, "
                    "and prohibited uses. Required for foundation model providers under the AI "
                    "Bill."
                ),
                template_id="model-card",
            )
        )

    if is_genai_product(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="AI-Generated Content Disclosure Notice",
                required=False,
                legal_basis=f"{AI_BILL} — GenAI Transparency",
                description=(
                    "Disclosure mechanism informing users that content is AI-generated. Required "
                    "for public-facing GenAI systems under the AI Bill."
                ),
                template_id="transparency-notice",
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    critical = partial(_action, priority=ActionPriority.CRITICAL)
    important = partial(_action, priority=ActionPriority.IMPORTANT)
    actions: List[ActionRequirement] = []

    if processes_personal_data(ctx):
        actions += [
            critical(
                id="br-lgpd-legal-basis",
                title="Determine and document legal basis for processing",
                description=(
                    "Identify and document the legal basis (LGPD Article 7) for each processing "
                    "purpose. For consent, implement clear and prominent consent mechanisms. For "
                    "legitimate interest, document the balancing assessment."
                ),
                legal_basis="LGPD Article 7",
                estimated_effort="1-2 weeks",
            ),
            critical(
                id="br-lgpd-data-subject-rights",
                title="Implement data subject rights mechanisms",
                description=(
                    "Enable data subjects to exercise their LGPD rights: confirmation "
                    "of processing, access, correction, "
                    "anonymisation/blocking/deletion, portability, information about "
                    "sharing, consent revocation, and right to oppose processing."
                ),
                legal_basis="LGPD Article 18",
                estimated_effort="3-6 weeks",
            ),
        ]

    if is_automated_decision_making(ctx):
        actions.append(
            critical(
                id="br-lgpd-art20-review",
                title="Implement automated decision review mechanism",
                description=(
                    "Implement a mechanism for data subjects to request human review of "
                    "automated decisions. Prepare clear and adequate explanations of "
                    "the criteria and procedures used for automated decision-making. "
                    "The explanation must be meaningful — not just 'the algorithm "
                    "decided'."
                ),
                legal_basis="LGPD Article 20",
                estimated_effort="3-6 weeks",
            )
        )

    if risk.level is RiskLevel.HIGH and processes_personal_data(ctx):
        actions.append(
            critical(
                id="br-lgpd-ripd",
                title="Conduct LGPD Data Protection Impact Report (RIPD)",
                description=(
                    "Conduct a Relatório de Impacto à Proteção de Dados Pessoais (RIPD) "
                    "covering: description of processing operations and purposes, data "
                    "categories processed, protective measures, risk analysis and "
                    "mitigation, and compliance with LGPD principles. ANPD may request "
                    "this at any time."
                ),
                legal_basis="LGPD Article 38",
                estimated_effort="2-4 weeks",
            )
        )

    bill = _bill_matches(ctx)

    if "br-ai-bill-high-risk" in bill:
        actions.append(
            important(
                id="br-ai-bill-impact-assessment",
                title="Conduct AI Bill algorithmic impact assessment",
                description=(
                    "Conduct an algorithmic impact assessment for this high-risk AI system "
                    "covering: system purpose and functionality, potential for discriminatory "
                    "impacts across protected groups, risk mitigation measures, transparency and "
                    "explainability mechanisms, human oversight arrangements, and ongoing "
                    "monitoring plan."
                ),
                legal_basis=AI_BILL,
                estimated_effort="4-8 weeks",
            )
        )

    if "br-ai-bill-foundation-model" in bill:
        actions.append(
            important(
                id="br-ai-bill-foundation-transparency",
                title="Publish foundation model transparency documentation",
                description=(
                    "Publish comprehensive documentation of the foundation model: capabilities, "
                    "limitations, training data sources and methodology, known risks and biases, "
                    "intended uses, and prohibited uses. Maintain updated documentation as the "
                    "model evolves."
                ),
                legal_basis=f"{AI_BILL} — Foundation Model Provisions",
                estimated_effort="3-6 weeks",
            )
        )

    if "br-ai-bill-genai-transparency" in bill:
        actions.append(
            important(
                id="br-ai-bill-genai-disclosure",
                title="Implement AI-generated content disclosure",
                description=(
                    "Implement mechanisms to disclose that content is AI-generated. Inform users "
                    "when they are interacting with AI. Ensure generated content is identifiable "
                    "as AI-produced through labelling, metadata, or other mechanisms."
                ),
                legal_basis=f"{AI_BILL} — GenAI Transparency",
                estimated_effort="2-4 weeks",
            )
        )

    if "br-ai-bill-training-data" in bill:
        actions.append(
            important(
                id="br-ai-bill-training-disclosure",
                title="Disclose training data information",
                description=(
                    "Document and disclose training data sources, processing methodology, data "
                    "quality measures, and LGPD compliance for any personal data used in training. "
                    "Ensure copyright and intellectual property compliance for training datasets."
                ),
                legal_basis=f"{AI_BILL} — Training Data Disclosure",
                estimated_effort="2-4 weeks",
            )
        )

    if is_financial_services_ai(ctx):
        actions.append(
            important(
                id="br-financial-ai-governance",
                title="Implement financial AI model governance",
                description=(
                    "Implement AI model governance aligned with Central Bank guidelines: document "
                    "model methodology, conduct validation, implement explainability for credit "
                    "decisions, and ensure consumer protection compliance. Automated credit "
                    "decisions must provide meaningful explanations to applicants."
                ),
                legal_basis="Central Bank Guidelines, LGPD Article 20",
                estimated_effort="4-8 weeks",
            )
        )

    if _consumer_decisions(ctx):
        actions.append(
            important(
                id="br-cdc-transparency",
                title="Ensure Consumer Defence Code compliance for AI decisions",
                description=(
                    "Ensure AI-driven consumer decisions comply with CDC: provide clear "
                    "information about AI involvement in decision-making (Article 31), "
                    "avoid abusive or discriminatory automated practices (Article 39), "
                    "and enable consumers to access and correct data used in AI "
                    "decisions (Article 43). Brazilian consumer protection law has been "
                    "actively enforced in the context of automated decisions."
                ),
                legal_basis="Consumer Defence Code (Lei 8.078/1990)",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2020-09-18",
        description=(
            "LGPD entered into force. All personal data processing obligations apply including "
            "consent, data subject rights, and automated decision review."
        ),
        provision="LGPD",
    ),
    ComplianceDeadline(
        date="2021-08-01",
        description=(
            "ANPD enforcement begins. Administrative sanctions including fines up to 2% of revenue "
            "(capped at R$50 million per infraction) became enforceable."
        ),
        provision="LGPD Article 52",
    ),
    ComplianceDeadline(
        date="2026-06-30",
        description=(
            "AI Bill (PL 2338/2023) expected enactment. Foundation model transparency, high-risk "
            "AI impact assessments, and GenAI disclosure obligations expected to take effect."
        ),
        provision=AI_BILL,
        is_mandatory=False,
    ),
]


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "LGPD has been in force since September 2020 with ANPD enforcement since August 2021. "
        "All personal data processing obligations apply immediately."
    ]
    if risk.level is RiskLevel.HIGH:
        notes.append(
            "High-risk processing requires a RIPD (data protection impact report) that ANPD may "
            "request at any time. Automated decisions triggering Article 20 must have review "
            "mechanisms in place before deployment."
        )
    notes.append(
        "The AI Bill (PL 2338/2023) was approved by the Brazilian Senate in July 2024 "
        "and is under consideration in the Chamber of Deputies. While not yet enacted, "
        "it signals the regulatory direction and early compliance is recommended. "
        "Expected enactment: 2025-2026."
    )
    return ComplianceTimeline(effective_date="2020-09-18", deadlines=DEADLINES, notes=notes)


# =============================================================================
# Module
# =============================================================================


class BrazilModule(JurisdictionModule):
    region = "LATAM"
    description = "Brazil LGPD and the pending AI Bill (PL 2338/2023)"

    @property
    def id(self) -> str:
        return "brazil"

    @property
    def name(self) -> str:
        return "Brazil AI Regulations (LGPD, AI Bill PL 2338/2023)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.BRAZIL

    @property
    def ladder(self) -> RiskLadder:
        return BRAZIL_LADDER

    @property
    def triggers(self):
        return (*LGPD_TRIGGERS, *AI_BILL_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
