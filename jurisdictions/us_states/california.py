"""
California (CCPA/CPRA, SB 942, SB 243, AB 730, AB 602)

DECISION LADDER:
  1. high-stakes-automated  -> HIGH (CPRA ADMT, SB 243)
  2. biometric              -> HIGH (CPRA sensitive personal information)
  3. political-deepfake     -> HIGH (AB 730)
  4. sexual-deepfake        -> HIGH (AB 602)
  5. consumer-obligations   -> LIMITED (CCPA, SB 942, ADMT)
  fallback                  -> MINIMAL

Provisions, artifacts and actions are empty at MINIMAL.
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
    OutputModality,
    ProductContext,
    ProductType,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids, unique
from ..predicates import is_financial_services_ai, is_genai_product, makes_material_decisions
from .common import (
    POLITICAL_KEYWORDS,
    STATE_PERSONAL_DATA,
    can_generate_deepfakes,
    generates_content,
    generates_media,
    is_automated,
    is_automated_consumer_decision,
)

CCPA = "CCPA/CPRA"
SB_942 = "California SB 942 (AI Transparency Act)"
SB_942_DEADLINE = "2026-01-01"

CA_SENSITIVE_DATA = (
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.GENETIC,
    DataCategory.POLITICAL,
    DataCategory.LOCATION,
)

HIGH_STAKES_POPULATIONS = (
    UserPopulation.JOB_APPLICANTS,
    UserPopulation.CREDIT_APPLICANTS,
    UserPopulation.TENANTS,
)
HIGH_STAKES_KEYWORDS = ("insurance", "hiring", "employment", "credit", "housing", "lending")
SHARING_KEYWORDS = (
    "advertising",
    "marketing",
    "targeted ads",
    "cross-context behavioral",
    "data shar",
    "third-party",
)

_action = partial(ActionRequirement, jurisdictions=["us-ca"], priority=ActionPriority.CRITICAL)
_ccpa = partial(ApplicableProvision, law=CCPA, regulatory_force=RegulatoryForce.BINDING_LAW)


def processes_consumer_personal_data(ctx: ProductContext) -> bool:
    """CCPA applies to personal information of California consumers."""
    return ctx.affects(UserPopulation.CONSUMERS) and ctx.has_data(*STATE_PERSONAL_DATA)


def has_deepfake_capabilities(ctx: ProductContext) -> bool:
    return can_generate_deepfakes(ctx) or (
        ctx.product_type == ProductType.GENERATOR
        and generates_media(ctx, OutputModality.IMAGE, OutputModality.VIDEO)
    )


def has_political_deepfake_concerns(ctx: ProductContext) -> bool:
    return has_deepfake_capabilities(ctx) and ctx.description_mentions(*POLITICAL_KEYWORDS)


def _is_high_stakes(ctx: ProductContext) -> bool:
    return ctx.affects(*HIGH_STAKES_POPULATIONS) or ctx.description_mentions(*HIGH_STAKES_KEYWORDS)


def _sb942_provider(ctx: ProductContext) -> bool:
    return generates_content(ctx) or ctx.product_type in (
        ProductType.GENERATOR,
        ProductType.FOUNDATION_MODEL,
    )


def _is_agentic(ctx: ProductContext) -> bool:
    return ctx.agentic_ai_context is not None and ctx.agentic_ai_context.is_agentic


def _is_agentic_with_consumer_data(ctx: ProductContext) -> bool:
    return _is_agentic(ctx) and processes_consumer_personal_data(ctx)


CCPA_TRIGGERS = (
    Trigger(
        id="us-ca-ccpa-personal-info",
        name="CCPA/CPRA Personal Information Processing",
        citation="CCPA/CPRA (Cal. Civ. Code §§1798.100-1798.199.100)",
        predicate=processes_consumer_personal_data,
    ),
    Trigger(
        id="us-ca-ccpa-sensitive-personal-info",
        name="CCPA/CPRA Sensitive Personal Information Processing",
        citation="CPRA (Cal. Civ. Code §1798.140(ae))",
        predicate=lambda ctx: ctx.has_data(*CA_SENSITIVE_DATA),
    ),
    Trigger(
        id="us-ca-ccpa-automated-decision-making",
        name="CCPA/CPRA Automated Decision-Making Technology",
        citation="CPRA (Cal. Civ. Code §1798.185(a)(16))",
        predicate=is_automated_consumer_decision,
    ),
    Trigger(
        id="us-ca-ccpa-sale-sharing",
        name="CCPA/CPRA Sale or Sharing of Personal Information",
        citation="CCPA/CPRA (Cal. Civ. Code §1798.120)",
        predicate=lambda ctx: ctx.affects(UserPopulation.CONSUMERS)
        and ctx.description_mentions(*SHARING_KEYWORDS),
    ),
    Trigger(
        id="us-ca-ccpa-minors",
        name="CCPA/CPRA Minors' Data Protections",
        citation="CCPA/CPRA (Cal. Civ. Code §1798.120(c)-(d))",
        predicate=lambda ctx: ctx.affects(UserPopulation.MINORS) or ctx.has_data(DataCategory.MINOR),
    ),
)

SB_942_TRIGGERS = (
    Trigger(
        id="us-ca-sb942-genai-provider",
        name="SB 942 GenAI Transparency Requirements",
        citation=SB_942,
        predicate=_sb942_provider,
    ),
    Trigger(
        id="us-ca-sb942-provenance",
        name="SB 942 AI-Generated Content Provenance",
        citation=SB_942,
        predicate=lambda ctx: generates_content(ctx)
        and generates_media(ctx, OutputModality.IMAGE, OutputModality.VIDEO, OutputModality.AUDIO),
    ),
)

SB_243_TRIGGERS = (
    Trigger(
        id="us-ca-sb243-ai-regulation",
        name="SB 243 AI Regulations",
        citation="California SB 243",
        predicate=is_automated_consumer_decision,
    ),
)

DEEPFAKE_TRIGGERS = (
    Trigger(
        id="us-ca-ab730-political-deepfakes",
        name="AB 730 Political Deepfake Prohibition",
        citation="California AB 730 (Cal. Elec. Code §20010)",
        predicate=lambda ctx: (
            can_generate_deepfakes(ctx)
            or generates_media(ctx, OutputModality.IMAGE, OutputModality.VIDEO, OutputModality.AUDIO)
        )
        and ctx.description_mentions(*POLITICAL_KEYWORDS),
    ),
    Trigger(
        id="us-ca-ab602-sexual-deepfakes",
        name="AB 602 Non-Consensual Sexual Deepfake Prohibition",
        citation="California AB 602 (Cal. Civ. Code §1708.86)",
        predicate=lambda ctx: can_generate_deepfakes(ctx)
        and generates_media(ctx, OutputModality.IMAGE, OutputModality.VIDEO),
    ),
)

FINANCIAL_TRIGGERS = (
    Trigger(
        id="us-ca-ccpa-financial-data",
        name="CCPA/CPRA Financial Data Processing",
        citation="CCPA/CPRA (Cal. Civ. Code §1798.140(ae))",
        predicate=lambda ctx: is_financial_services_ai(ctx) and ctx.affects(UserPopulation.CONSUMERS),
    ),
    Trigger(
        id="us-ca-financial-automated-decisions",
        name="Automated Financial Decision-Making",
        citation="CCPA/CPRA, California Financial Code",
        predicate=lambda ctx: is_financial_services_ai(ctx)
        and is_automated(ctx)
        and makes_material_decisions(ctx),
    ),
)


def _matched(triggers, ctx: ProductContext) -> List[str]:
    return trigger_ids(matching(triggers, ctx))


# =============================================================================
# Decision ladder
# =============================================================================


def _consumer_obligations(ctx: ProductContext) -> bool:
    return (
        processes_consumer_personal_data(ctx)
        or bool(matching(SB_942_TRIGGERS, ctx))
        or is_automated_consumer_decision(ctx)
    )


def _explain_consumer_obligations(ctx: ProductContext) -> Finding:
    categories: List[str] = []
    provisions: List[str] = []
    parts: List[str] = []

    if processes_consumer_personal_data(ctx):
        categories.append("us-ca-ccpa-personal-info")
        provisions.append(CCPA)
        parts.append(
            "This AI system processes personal information of California consumers, triggering "
            "CCPA/CPRA obligations including consumer rights to know, delete, opt-out of "
            "sale/sharing, and limit use of sensitive personal information."
        )

    sb942 = _matched(SB_942_TRIGGERS, ctx)
    if sb942:
        categories += sb942
        provisions.append("SB 942")
        parts.append(
            "This system generates AI content, triggering SB 942 (California AI Transparency Act) "
            "requirements for AI detection tools, provenance data, and disclosure of AI-generated "
            "content."
        )

    if not categories:
        categories.append("us-ca-ccpa-automated-decision-making")
        provisions.append("CPRA §1798.185(a)(16)")

    return Finding(
        justification=" ".join(parts)
        or (
            "This AI system triggers California regulatory obligations requiring transparency and "
            "consumer protections."
        ),
        categories=unique(categories),
        provisions=unique(provisions),
    )


CALIFORNIA_LADDER = RiskLadder(
    jurisdiction="us-ca",
    rungs=[
        RiskRung(
            id="high-stakes-automated",
            level=RiskLevel.HIGH,
            applies=lambda ctx: is_automated_consumer_decision(ctx) and _is_high_stakes(ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes automated decisions with material or determinative "
                    "impact on California consumers in high-stakes domains (employment, credit, "
                    "housing, insurance). This triggers CCPA/CPRA automated decision-making "
                    "technology provisions, SB 243 AI regulations, and heightened opt-out and "
                    "access rights for consumers."
                ),
                categories=["us-ca-ccpa-automated-decision-making", "us-ca-sb243-ai-regulation"],
                provisions=["CPRA §1798.185(a)(16)", "SB 243"],
            ),
        ),
        RiskRung(
            id="biometric",
            level=RiskLevel.HIGH,
            applies=lambda ctx: ctx.has_data(DataCategory.BIOMETRIC)
            and processes_consumer_personal_data(ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes biometric information of California consumers. "
                    "Biometric data is classified as sensitive personal information under CPRA, "
                    "triggering enhanced consumer rights including the right to limit use and "
                    "disclosure, opt-out rights, and heightened data minimisation requirements."
                ),
                categories=["us-ca-ccpa-sensitive-personal-info"],
                provisions=["CPRA §1798.140(ae)", "CPRA §1798.121"],
            ),
        ),
        RiskRung(
            id="political-deepfake",
            level=RiskLevel.HIGH,
            applies=has_political_deepfake_concerns,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system can generate deepfake content in a political context. "
                    "California AB 730 prohibits distribution of deceptive audio/visual media of "
                    "candidates within 60 days of an election. This creates significant legal risk "
                    "and compliance obligations."
                ),
                categories=["us-ca-ab730-political-deepfakes"],
                provisions=["AB 730 (Cal. Elec. Code §20010)"],
            ),
        ),
        RiskRung(
            id="sexual-deepfake",
            level=RiskLevel.HIGH,
            applies=lambda ctx: "us-ca-ab602-sexual-deepfakes" in _matched(DEEPFAKE_TRIGGERS, ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system can generate deepfake visual media, creating liability exposure "
                    "under California AB 602 which prohibits creation of non-consensual sexually "
                    "explicit deepfakes. Providers of systems capable of generating realistic "
                    "synthetic media of identifiable persons must implement safeguards."
                ),
                categories=["us-ca-ab602-sexual-deepfakes"],
                provisions=["AB 602 (Cal. Civ. Code §1708.86)"],
            ),
        ),
        RiskRung(
            id="consumer-obligations",
            level=RiskLevel.LIMITED,
            applies=_consumer_obligations,
            explain=_explain_consumer_obligations,
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not process personal information of California consumers and "
            "does not make automated decisions with significant effects on individuals. California "
            "AI-specific regulations (CCPA/CPRA, SB 942, SB 243) do not impose material "
            "obligations."
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
    ccpa = _matched(CCPA_TRIGGERS, ctx)

    if "us-ca-ccpa-personal-info" in ccpa:
        provisions += [
            _ccpa(
                id="us-ca-ccpa-consumer-rights",
                article="Cal. Civ. Code §§1798.100-1798.125",
                title="Consumer Privacy Rights",
                summary=(
                    "California consumers have the right to know what personal information is "
                    "collected, the right to delete personal information, the right to opt-out of "
                    "sale or sharing of personal information, and the right to non-discrimination "
                    "for exercising their rights."
                ),
                relevance=(
                    "This AI system processes personal information of California consumers, "
                    "triggering all core CCPA/CPRA consumer rights."
                ),
                enforcement_authority="California Privacy Protection Agency",
            ),
            _ccpa(
                id="us-ca-ccpa-notice",
                article="Cal. Civ. Code §1798.100(b)",
                title="Notice at Collection",
                summary=(
                    "Businesses must inform consumers at or before collection of the categories of "
                    "personal information collected, the purposes, whether it is sold or shared, "
                    "and the retention period."
                ),
                relevance=(
                    "Required at all points where the AI system collects personal information from "
                    "California consumers."
                ),
            ),
        ]

    if "us-ca-ccpa-sensitive-personal-info" in ccpa:
        provisions.append(
            _ccpa(
                id="us-ca-cpra-sensitive-info",
                law="CPRA",
                article="Cal. Civ. Code §§1798.121, 1798.140(ae)",
                title="Right to Limit Use and Disclosure of Sensitive Personal Information",
                summary=(
                    "Consumers have the right to limit use and disclosure of sensitive personal "
                    "information (SSN, financial accounts, precise geolocation, racial/ethnic "
                    "origin, biometric data, health data, sexual orientation, contents of "
                    "communications) to what is necessary to provide the requested service."
                ),
                relevance=(
                    "This AI system processes sensitive personal information categories as defined "
                    "by CPRA, triggering enhanced consumer rights and data minimisation obligations."
                ),
            )
        )

    if "us-ca-ccpa-automated-decision-making" in ccpa:
        provisions.append(
            _ccpa(
                id="us-ca-cpra-admt",
                law="CPRA",
                article="Cal. Civ. Code §1798.185(a)(16)",
                title="Automated Decision-Making Technology",
                summary=(
                    "CPRA directs the California Privacy Protection Agency (CPPA) to issue "
                    "regulations governing access and opt-out rights for automated decision-making "
                    "technology, including profiling, that produces legal or similarly significant "
                    "effects on consumers. Consumers have the right to access information about "
                    "automated decision-making, the right to opt out, and the right to request "
                    "human review."
                ),
                relevance=(
                    "This AI system uses automated decision-making that produces significant "
                    "effects on consumers, triggering CPRA's ADMT provisions."
                ),
            )
        )

    if "us-ca-ccpa-sale-sharing" in ccpa:
        provisions.append(
            _ccpa(
                id="us-ca-ccpa-opt-out",
                article="Cal. Civ. Code §1798.120",
                title="Right to Opt-Out of Sale or Sharing of Personal Information",
                summary=(
                    "Consumers have the right to opt out of the sale or sharing of their personal "
                    "information. Businesses must provide a 'Do Not Sell or Share My Personal "
                    "Information' link on their website and honour Global Privacy Control signals."
                ),
                relevance=(
                    "This AI system involves sharing or sale of personal information for "
                    "advertising or marketing purposes."
                ),
            )
        )

    if "us-ca-ccpa-minors" in ccpa:
        provisions.append(
            _ccpa(
                id="us-ca-ccpa-minors-protections",
                article="Cal. Civ. Code §1798.120(c)-(d)",
                title="CCPA/CPRA Minors' Protections",
                summary=(
                    "Sale or sharing of personal information of consumers under 16 requires opt-in "
                    "consent. For consumers under 13, a parent or guardian must opt in. Business "
                    "must not sell or share a minor's personal information if it has actual "
                    "knowledge the consumer is under 16 without affirmative consent."
                ),
                relevance=(
                    "This AI system processes data of minors, triggering enhanced CCPA/CPRA "
                    "protections requiring affirmative opt-in consent for any sale or sharing of "
                    "their data."
                ),
            )
        )

    sb942 = _matched(SB_942_TRIGGERS, ctx)
    if sb942:
        provisions.append(
            _ccpa(
                id="us-ca-sb942-transparency",
                law="California SB 942",
                article="SB 942 (AI Transparency Act)",
                title="GenAI Transparency and Provenance Requirements",
                summary=(
                    "SB 942 requires covered GenAI providers to: (1) make AI detection tools freely "
                    "available to users, (2) include provenance data (manifest or watermark) in "
                    "AI-generated content, (3) maintain a publicly accessible webpage describing AI "
                    "detection tools and their capabilities and limitations, and (4) provide clear "
                    "and conspicuous disclosure that content was generated by AI."
                ),
                relevance=(
                    "This system generates AI content, triggering SB 942 requirements for AI "
                    "detection tools, content provenance data, and AI-generated content disclosure."
                ),
            )
        )
        if "us-ca-sb942-provenance" in sb942:
            provisions.append(
                _ccpa(
                    id="us-ca-sb942-provenance-data",
                    law="California SB 942",
                    article="SB 942 §§3-4",
                    title="AI-Generated Content Provenance Data",
                    summary=(
                        "GenAI providers producing image, video, or audio content must include "
                        "provenance data (either as a manifest embedded in the content or as a "
                        "latent watermark) that identifies the content as AI-generated and the "
                        "provider responsible. Provenance data must be detectable by the provider's "
                        "AI detection tools."
                    ),
                    relevance=(
                        "This system generates visual or audio content, requiring embedded "
                        "provenance data (watermarking or manifests) in AI-generated outputs per "
                        "SB 942."
                    ),
                )
            )

    if matching(SB_243_TRIGGERS, ctx):
        provisions.append(
            _ccpa(
                id="us-ca-sb243-ai-regs",
                law="California SB 243",
                article="SB 243",
                title="SB 243 AI Regulation Requirements",
                summary=(
                    "SB 243 establishes additional AI-specific requirements for automated decision "
                    "systems that make significant decisions affecting California consumers, "
                    "including transparency, accountability, and consumer access requirements."
                ),
                relevance=(
                    "This AI system makes significant automated decisions affecting consumers, "
                    "triggering SB 243 compliance obligations."
                ),
            )
        )

    deepfakes = _matched(DEEPFAKE_TRIGGERS, ctx)
    if "us-ca-ab730-political-deepfakes" in deepfakes:
        provisions.append(
            _ccpa(
                id="us-ca-ab730",
                law="California AB 730",
                article="Cal. Elec. Code §20010",
                title="Prohibition on Political Deepfakes Near Elections",
                summary=(
                    "AB 730 prohibits any person from distributing with actual malice materially "
                    "deceptive audio or visual media of a candidate for elective office within 60 "
                    "days of an election. This applies to AI-generated deepfakes of political "
                    "candidates. Violators are subject to injunctive relief and damages."
                ),
                relevance=(
                    "This AI system can generate synthetic media and operates in a political "
                    "context. AB 730 creates direct liability for deceptive AI-generated media of "
                    "political candidates."
                ),
            )
        )
    if "us-ca-ab602-sexual-deepfakes" in deepfakes:
        provisions.append(
            _ccpa(
                id="us-ca-ab602",
                law="California AB 602",
                article="Cal. Civ. Code §1708.86",
                title="Prohibition on Non-Consensual Sexual Deepfakes",
                summary=(
                    "AB 602 creates a private right of action for individuals depicted in sexually "
                    "explicit deepfakes created without their consent. Any person who creates, "
                    "distributes, or makes available sexually explicit material that is a digital "
                    "alteration of the plaintiff's likeness without consent is liable for damages."
                ),
                relevance=(
                    "This AI system can generate deepfake visual media, creating potential "
                    "liability under AB 602 for non-consensual sexually explicit content "
                    "generation."
                ),
            )
        )

    if _is_agentic_with_consumer_data(ctx):
        provisions.append(
            _ccpa(
                id="us-ca-agentic-ccpa",
                article="Cal. Civ. Code §§1798.100-1798.199.100",
                title="Agentic AI Under CCPA/CPRA Framework",
                summary=(
                    "Agentic AI systems that autonomously collect, process, share, or make "
                    "decisions about California consumers' personal information must comply with "
                    "all CCPA/CPRA requirements. Autonomous data collection by AI agents triggers "
                    "notice-at-collection obligations. Autonomous decisions with significant "
                    "effects trigger ADMT provisions. Agent actions that constitute 'sale' or "
                    "'sharing' of data require opt-out mechanisms."
                ),
                relevance=(
                    "This AI system has agentic capabilities that may autonomously process consumer "
                    "personal information, requiring CCPA/CPRA compliance for all agent-initiated "
                    "data operations."
                ),
            )
        )

    if matching(FINANCIAL_TRIGGERS, ctx):
        provisions.append(
            _ccpa(
                id="us-ca-ccpa-financial",
                article="Cal. Civ. Code §§1798.100, 1798.140(ae)",
                title="CCPA/CPRA Financial Data and Automated Decision-Making",
                summary=(
                    "Financial account information is sensitive personal information under CPRA. AI "
                    "systems making automated financial decisions affecting California consumers "
                    "trigger enhanced rights including the right to limit use of sensitive data, "
                    "opt-out of automated decision-making, and request human review of automated "
                    "decisions."
                ),
                relevance=(
                    "This AI system operates in financial services and processes California "
                    "consumer data, triggering enhanced CCPA/CPRA protections for financial data "
                    "and automated financial decisions."
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

    if processes_consumer_personal_data(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="CCPA/CPRA Privacy Notice at Collection",
                legal_basis="Cal. Civ. Code §§1798.100(b), 1798.130",
                description=(
                    "Privacy notice informing California consumers of: categories of personal "
                    "information collected, purposes of collection, whether information is sold or "
                    "shared, retention period, and consumer rights (know, delete, correct, "
                    "opt-out). Must include a 'Do Not Sell or Share My Personal Information' link "
                    "if applicable."
                ),
                template_id="transparency-notice",
            )
        )

    if is_automated_consumer_decision(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="risk-assessment:ca-admt",
                type=ArtifactType.RISK_ASSESSMENT,
                name="CCPA/CPRA Automated Decision-Making Risk Assessment",
                legal_basis="CPRA §1798.185(a)(16), SB 243",
                description=(
                    "Risk assessment of automated decision-making technology covering: the purpose "
                    "and intended use of the ADMT, the personal information processed, whether it "
                    "produces legal or similarly significant effects, evaluation of risks and "
                    "benefits to consumers, and safeguards implemented to address identified risks."
                ),
            )
        )

    if matching(SB_942_TRIGGERS, ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.GENAI_CONTENT_POLICY,
                name="SB 942 AI Transparency Compliance Documentation",
                legal_basis=SB_942,
                description=(
                    "Documentation of SB 942 compliance including: description of AI detection "
                    "tools made available to users, provenance data implementation (manifests, "
                    "watermarks), publicly accessible webpage describing detection capabilities "
                    "and limitations, and disclosure mechanisms for AI-generated content."
                ),
                template_id="genai-content-policy",
            )
        )

    if (
        risk.level is RiskLevel.HIGH
        and is_automated_consumer_decision(ctx)
        and ctx.affects(*HIGH_STAKES_POPULATIONS)
    ):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.BIAS_AUDIT,
                name="California Automated Decision Bias Audit",
                required=False,
                legal_basis="CPRA §1798.185(a)(16), SB 243",
                description=(
                    "Bias audit evaluating the automated decision-making system for disparate "
                    "impact across protected classes under California law (race, colour, national "
                    "origin, sex, disability, age). While not explicitly mandated for all uses, "
                    "strongly recommended for high-stakes employment, credit, and housing decisions "
                    "under SB 243 and CPRA ADMT regulations."
                ),
                template_id="bias-audit-nyc",
            )
        )

    if is_financial_services_ai(ctx) and processes_consumer_personal_data(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="California Financial AI Model Documentation",
                required=False,
                legal_basis="CCPA/CPRA, California Financial Code",
                description=(
                    "Documentation of the AI model used in financial services including purpose, "
                    "methodology, data categories processed, accuracy metrics, fairness evaluation, "
                    "and consumer impact assessment. Recommended to support CCPA/CPRA transparency "
                    "obligations for automated financial decisions."
                ),
                template_id="model-card",
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def _ccpa_actions(ctx: ProductContext) -> List[ActionRequirement]:
    actions: List[ActionRequirement] = []
    ccpa = _matched(CCPA_TRIGGERS, ctx)

    if processes_consumer_personal_data(ctx):
        actions += [
            _action(
                id="us-ca-ccpa-notice-at-collection",
                title="Provide CCPA/CPRA notice at collection",
                description=(
                    "Provide consumers with a notice at or before the point of collection listing "
                    "the categories of personal information collected, the purposes, retention "
                    "period, and whether information is sold or shared. The notice must be clear, "
                    "conspicuous, and accessible."
                ),
                legal_basis="Cal. Civ. Code §1798.100(b)",
                estimated_effort="1-2 weeks",
            ),
            _action(
                id="us-ca-ccpa-consumer-rights-mechanisms",
                title="Implement CCPA/CPRA consumer rights request mechanisms",
                description=(
                    "Implement mechanisms for consumers to exercise their rights: right to know "
                    "(categories and specific pieces of personal information collected), right to "
                    "delete, right to correct, right to opt-out of sale/sharing. Must provide at "
                    "least two methods for submitting requests, including a toll-free number and a "
                    "website link. Must respond within 45 days."
                ),
                legal_basis="Cal. Civ. Code §§1798.105-1798.125",
                estimated_effort="3-6 weeks",
            ),
            _action(
                id="us-ca-ccpa-data-inventory",
                title="Conduct personal information inventory and mapping",
                description=(
                    "Map all categories of personal information collected, processed, stored, and "
                    "shared by the AI system. Identify sources, purposes, retention periods, and "
                    "third-party recipients. This inventory supports compliance with CCPA/CPRA "
                    "disclosure requirements and consumer rights responses."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="Cal. Civ. Code §§1798.100, 1798.110",
                estimated_effort="2-4 weeks",
            ),
        ]

    if "us-ca-ccpa-sensitive-personal-info" in ccpa:
        actions.append(
            _action(
                id="us-ca-cpra-limit-sensitive-data",
                title="Implement right to limit use of sensitive personal information",
                description=(
                    "Provide consumers with the ability to limit the use and disclosure of their "
                    "sensitive personal information to what is necessary to perform the services "
                    "or provide the goods reasonably expected. Display a 'Limit the Use of My "
                    "Sensitive Personal Information' link. Honour consumer requests within 15 "
                    "business days."
                ),
                legal_basis="Cal. Civ. Code §1798.121",
                estimated_effort="2-4 weeks",
            )
        )

    if is_automated_consumer_decision(ctx):
        actions += [
            _action(
                id="us-ca-cpra-admt-access",
                title="Implement ADMT access and opt-out rights",
                description=(
                    "Enable consumers to: (1) access information about automated decision-making "
                    "technology used to make significant decisions, (2) opt out of having ADMT "
                    "used for significant decisions, and (3) request human review of automated "
                    "decisions. Provide meaningful information about the logic involved in "
                    "automated decision-making and the likely outcome."
                ),
                legal_basis="CPRA §1798.185(a)(16)",
                estimated_effort="3-6 weeks",
            ),
            _action(
                id="us-ca-cpra-admt-risk-assessment",
                title="Conduct automated decision-making risk assessment",
                description=(
                    "Conduct a risk assessment of the automated decision-making technology "
                    "evaluating: purpose and necessity, personal information processed, risks to "
                    "consumers (including disparate impact, privacy, and accuracy concerns), "
                    "benefits of the processing, and safeguards implemented. Document and retain "
                    "the assessment."
                ),
                legal_basis="CPRA §1798.185(a)(16), SB 243",
                estimated_effort="2-4 weeks",
            ),
        ]

    if "us-ca-ccpa-sale-sharing" in ccpa:
        actions.append(
            _action(
                id="us-ca-ccpa-opt-out-link",
                title="Implement 'Do Not Sell or Share' opt-out mechanism",
                description=(
                    "Provide a clear and conspicuous 'Do Not Sell or Share My Personal Information' "
                    "link on the business's website homepage. Honour Global Privacy Control (GPC) "
                    "browser signals as valid opt-out requests. Do not use dark patterns to subvert "
                    "consumer opt-out choices."
                ),
                legal_basis="Cal. Civ. Code §1798.120",
                estimated_effort="1-2 weeks",
            )
        )

    if "us-ca-ccpa-minors" in ccpa:
        actions.append(
            _action(
                id="us-ca-ccpa-minors-opt-in",
                title="Implement opt-in consent for minors' data sale/sharing",
                description=(
                    "Implement affirmative opt-in consent before selling or sharing personal "
                    "information of consumers known to be under 16. For consumers under 13, obtain "
                    "verifiable parental or guardian consent. Implement age-gating or age "
                    "verification mechanisms to identify minor consumers. Do not sell or share "
                    "data of known minors without affirmative authorisation."
                ),
                legal_basis="Cal. Civ. Code §1798.120(c)-(d)",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


def _sb942_actions(sb942: List[str]) -> List[ActionRequirement]:
    if not sb942:
        return []
    actions = [
        _action(
            id="us-ca-sb942-detection-tools",
            title="Make AI detection tools freely available",
            description=(
                "Develop or license and make freely available to users an AI detection tool that "
                "allows users to assess whether content was generated by the provider's GenAI "
                "system. The detection tool must be accessible without charge and the provider "
                "must maintain a publicly accessible webpage describing the tool's capabilities "
                "and limitations."
            ),
            legal_basis=SB_942,
            estimated_effort="4-8 weeks",
            deadline=SB_942_DEADLINE,
        ),
        _action(
            id="us-ca-sb942-disclosure",
            title="Implement AI-generated content disclosure",
            description=(
                "Provide clear and conspicuous disclosure that content was generated by AI. For "
                "image, video, and audio content, include provenance data (manifest or latent "
                "watermark) identifying the content as AI-generated and the provider responsible. "
                "Disclosure must be durable and not easily removable by downstream users."
            ),
            legal_basis=SB_942,
            estimated_effort="3-6 weeks",
            deadline=SB_942_DEADLINE,
        ),
    ]
    if "us-ca-sb942-provenance" in sb942:
        actions.append(
            _action(
                id="us-ca-sb942-provenance-implementation",
                title="Implement provenance data in AI-generated media",
                description=(
                    "Embed provenance data in AI-generated image, video, and audio content using "
                    "either content manifests (e.g., C2PA standard) or latent watermarking. "
                    "Provenance data must identify: (1) that the content is AI-generated, (2) the "
                    "provider responsible, and (3) be detectable by the provider's AI detection "
                    "tools. Consider implementing both manifest-based and watermark-based "
                    "approaches for robustness."
                ),
                legal_basis="California SB 942 §§3-4",
                estimated_effort="4-8 weeks",
                deadline=SB_942_DEADLINE,
            )
        )
    return actions


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions = _ccpa_actions(ctx) + _sb942_actions(_matched(SB_942_TRIGGERS, ctx))

    deepfakes = _matched(DEEPFAKE_TRIGGERS, ctx)
    if "us-ca-ab730-political-deepfakes" in deepfakes:
        actions.append(
            _action(
                id="us-ca-ab730-safeguards",
                title="Implement safeguards against political deepfake generation",
                description=(
                    "Implement technical safeguards to prevent the generation or distribution of "
                    "materially deceptive audio or visual media of candidates for elective office, "
                    "particularly within 60 days of an election. Consider content filters for "
                    "political candidate likenesses, usage policies prohibiting election "
                    "manipulation, and monitoring for misuse. Violations carry liability for "
                    "injunctive relief and damages."
                ),
                legal_basis="AB 730 (Cal. Elec. Code §20010)",
                estimated_effort="3-6 weeks",
            )
        )
    if "us-ca-ab602-sexual-deepfakes" in deepfakes:
        actions.append(
            _action(
                id="us-ca-ab602-safeguards",
                title="Implement safeguards against non-consensual sexual deepfakes",
                description=(
                    "Implement technical safeguards to prevent the creation of sexually explicit "
                    "deepfakes of real persons without consent. This includes content safety "
                    "filters for NSFW generation, identity verification before generating "
                    "likenesses of real persons, usage policies prohibiting non-consensual intimate "
                    "imagery, and abuse reporting mechanisms. AB 602 creates a private right of "
                    "action with damages."
                ),
                legal_basis="AB 602 (Cal. Civ. Code §1708.86)",
                estimated_effort="3-6 weeks",
            )
        )

    if _is_agentic_with_consumer_data(ctx):
        actions.append(
            _action(
                id="us-ca-agentic-data-governance",
                title="Implement data governance for agentic AI operations",
                description=(
                    "Ensure agentic AI systems comply with CCPA/CPRA when autonomously collecting, "
                    "processing, or sharing consumer personal information. Implement: (1) notice "
                    "mechanisms for agent-initiated data collection, (2) data minimisation for "
                    "agent actions, (3) audit logging of all agent data operations, (4) consumer "
                    "access to records of agent-processed data. Autonomous agent actions that "
                    "constitute 'sale' or 'sharing' must honour existing opt-out preferences."
                ),
                legal_basis=CCPA,
                estimated_effort="3-6 weeks",
            )
        )

    if is_financial_services_ai(ctx) and processes_consumer_personal_data(ctx):
        actions.append(
            _action(
                id="us-ca-financial-ccpa-compliance",
                title="Ensure CCPA/CPRA compliance for financial AI",
                description=(
                    "Implement enhanced CCPA/CPRA protections for financial data processing: (1) "
                    "treat financial account information as sensitive personal information with "
                    "right-to-limit, (2) provide enhanced transparency for automated financial "
                    "decisions, (3) enable consumers to request human review of automated credit, "
                    "insurance, or lending decisions, (4) conduct risk assessment of financial "
                    "automated decision-making technology."
                ),
                legal_basis="CCPA/CPRA, Cal. Civ. Code §§1798.121, 1798.185(a)(16)",
                estimated_effort="3-6 weeks",
            )
        )

    if processes_consumer_personal_data(ctx):
        actions.append(
            _action(
                id="us-ca-data-security",
                title="Implement reasonable security measures",
                description=(
                    "Implement and maintain reasonable security procedures and practices "
                    "appropriate to the nature of the personal information to protect it from "
                    "unauthorised access, destruction, use, modification, or disclosure. "
                    "California's data breach notification law (Cal. Civ. Code §1798.82) imposes "
                    "breach notification obligations. The lack of 'reasonable security' can give "
                    "rise to a CCPA private right of action for data breaches."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="Cal. Civ. Code §§1798.81.5, 1798.82, 1798.150",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2020-01-01",
        description=(
            "CCPA entered into force. Core consumer privacy rights (right to know, delete, opt-out "
            "of sale) are enforceable."
        ),
        provision="CCPA (Cal. Civ. Code §1798.100 et seq.)",
    ),
    ComplianceDeadline(
        date="2023-01-01",
        description=(
            "CPRA amendments took effect. Enhanced consumer rights including right to correct, "
            "right to limit sensitive data use, and expanded definitions. California Privacy "
            "Protection Agency (CPPA) assumed enforcement authority."
        ),
        provision="CPRA",
    ),
    ComplianceDeadline(
        date="2024-01-01",
        description=(
            "AB 730 (political deepfakes) is in force. Prohibition on distribution of materially "
            "deceptive media of candidates within 60 days of an election applies."
        ),
        provision="AB 730 (Cal. Elec. Code §20010)",
    ),
]

SB_942_EFFECTIVE = ComplianceDeadline(
    date=SB_942_DEADLINE,
    description=(
        "SB 942 (California AI Transparency Act) takes effect. GenAI providers must make AI "
        "detection tools freely available, include provenance data in AI-generated content, and "
        "maintain public disclosures about detection capabilities."
    ),
    provision="SB 942 (AI Transparency Act)",
)


def build_timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    deadlines = list(DEADLINES)
    notes = [
        "CCPA/CPRA obligations are in force now. All personal information processing of "
        "California consumers must comply with current requirements."
    ]

    if risk.level is RiskLevel.HIGH:
        notes.append(
            "High-risk automated decision-making systems should complete risk assessments and "
            "implement consumer opt-out mechanisms as soon as practicable. CPPA is actively "
            "developing ADMT regulations."
        )

    if matching(SB_942_TRIGGERS, ctx):
        deadlines.append(SB_942_EFFECTIVE)
        notes.append(
            "CRITICAL: SB 942 (AI Transparency Act) takes effect January 1, 2026. GenAI providers "
            "should begin implementing provenance data (watermarking/manifests) and developing AI "
            "detection tools well in advance of this deadline."
        )

    if is_genai_product(ctx):
        notes.append(
            "California has multiple GenAI-relevant laws including SB 942 (transparency), AB 730 "
            "(political deepfakes), and AB 602 (sexual deepfakes). GenAI providers should "
            "implement comprehensive content governance spanning all applicable requirements."
        )

    if _is_agentic(ctx):
        notes.append(
            "Agentic AI systems are assessed under existing CCPA/CPRA and automated "
            "decision-making frameworks. As California develops ADMT regulations, agentic AI "
            "systems may face additional specific requirements. Monitor CPPA rulemaking for "
            "updates."
        )

    if is_financial_services_ai(ctx):
        notes.append(
            "Financial services AI processing California consumer data must comply with both "
            "CCPA/CPRA and applicable state financial regulations. Financial account data is "
            "sensitive personal information under CPRA."
        )

    return ComplianceTimeline(effective_date="2020-01-01", deadlines=deadlines, notes=notes)


# =============================================================================
# Module
# =============================================================================


class CaliforniaModule(JurisdictionModule):
    region = "US"
    description = "CCPA/CPRA privacy rights, SB 942 GenAI transparency, deepfake laws"

    @property
    def id(self) -> str:
        return "us-ca"

    @property
    def name(self) -> str:
        return "California (CCPA/CPRA, SB 942, SB 243, AB 730, AB 602)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_CA

    @property
    def ladder(self) -> RiskLadder:
        return CALIFORNIA_LADDER

    @property
    def triggers(self):
        return (*CCPA_TRIGGERS, *SB_942_TRIGGERS, *SB_243_TRIGGERS, *DEEPFAKE_TRIGGERS, *FINANCIAL_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(ctx, self.get_risk_level(ctx))
