"""
Singapore AI Governance Frameworks (PDPC, IMDA, MAS)

DECISION LADDER:
  1. mas-financial         -> HIGH (any MAS trigger)
  2. agentic-high-autonomy -> HIGH (broad autonomy or financial transactions)
  3. foundation-model      -> HIGH (foundation model provider)
  4. genai-or-agentic      -> LIMITED (any IMDA GenAI or agentic trigger)
  5. personal-data         -> LIMITED (any PDPC trigger)
  fallback                 -> MINIMAL

The three HIGH rungs report every satisfied trigger across all four tables,
not only the ones that decided the level.
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
    AutonomyLevel,
    ComplianceDeadline,
    ComplianceTimeline,
    FoundationModelSource,
    Jurisdiction,
    OutputModality,
    ProductContext,
    ProductType,
    RiskClassification,
    RiskLevel,
)

from ..base import Finding, JurisdictionModule, Predicate, RiskLadder, RiskRung, matching, trigger_ids
from ..predicates import is_consumer_facing, is_financial_services_ai, is_genai_product
from .triggers import (
    HIGH_AUTONOMY_AGENTIC_IDS,
    IMDA_AGENTIC_TRIGGERS,
    IMDA_GENAI_TRIGGERS,
    MAS_TRIGGERS,
    PDPC_TRIGGERS,
    is_agentic_ai,
)

_action = partial(ActionRequirement, jurisdictions=["singapore"])


def _all_categories(ctx: ProductContext) -> List[str]:
    return trigger_ids(
        matching(MAS_TRIGGERS, ctx)
        + matching(IMDA_AGENTIC_TRIGGERS, ctx)
        + matching(IMDA_GENAI_TRIGGERS, ctx)
        + matching(PDPC_TRIGGERS, ctx)
    )


def _has_match(triggers) -> Predicate:
    return lambda ctx: bool(matching(triggers, ctx))


def _high_autonomy(ctx: ProductContext) -> bool:
    return any(t.id in HIGH_AUTONOMY_AGENTIC_IDS for t in matching(IMDA_AGENTIC_TRIGGERS, ctx))


def _mas_finding(ctx: ProductContext) -> Finding:
    names = "; ".join(t.name for t in matching(MAS_TRIGGERS, ctx))
    return Finding(
        justification=(
            f"This AI system operates in financial services in Singapore, triggering MAS "
            f"Guidelines on AI Risk Management for Financial Institutions: {names}. Board/senior "
            f"management oversight, materiality assessment, and full lifecycle controls are "
            f"required."
        ),
        categories=_all_categories(ctx),
        provisions=["MAS AI Risk Management Guidelines", "PDPA"],
    )


def _genai_or_agentic_finding(ctx: ProductContext) -> Finding:
    genai = matching(IMDA_GENAI_TRIGGERS, ctx)
    agentic = matching(IMDA_AGENTIC_TRIGGERS, ctx)
    names = "; ".join(t.name for t in genai + agentic)
    provisions = []
    if genai:
        provisions.append("IMDA GenAI Governance Framework")
    if agentic:
        provisions.append("IMDA Agentic AI Framework")
    if matching(PDPC_TRIGGERS, ctx):
        provisions.append("PDPA")
    return Finding(
        justification=(
            f"This AI system triggers Singapore governance frameworks: {names}. Proportionate "
            f"governance measures apply."
        ),
        categories=_all_categories(ctx),
        provisions=provisions,
    )


SINGAPORE_LADDER = RiskLadder(
    jurisdiction="singapore",
    rungs=[
        RiskRung(
            id="mas-financial",
            level=RiskLevel.HIGH,
            applies=_has_match(MAS_TRIGGERS),
            explain=_mas_finding,
        ),
        RiskRung(
            id="agentic-high-autonomy",
            level=RiskLevel.HIGH,
            applies=_high_autonomy,
            explain=lambda ctx: Finding(
                justification=(
                    "This agentic AI system has broad autonomy or can make financial "
                    "transactions, triggering heightened requirements under the IMDA Model AI "
                    "Governance Framework for Agentic AI across all four dimensions: risk bounding, "
                    "human accountability, technical controls, and end-user responsibility."
                ),
                categories=_all_categories(ctx),
                provisions=["IMDA Agentic AI Framework", "PDPA"],
            ),
        ),
        RiskRung(
            id="foundation-model",
            level=RiskLevel.HIGH,
            applies=lambda ctx: ctx.product_type == ProductType.FOUNDATION_MODEL,
            explain=lambda ctx: Finding(
                justification=(
                    "This is a foundation model provider, triggering comprehensive IMDA GenAI "
                    "governance requirements including testing and evaluation, incident reporting, "
                    "content provenance, and disclosure obligations."
                ),
                categories=_all_categories(ctx),
                provisions=["IMDA GenAI Governance Framework", "PDPA"],
            ),
        ),
        RiskRung(
            id="genai-or-agentic",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(
                matching(IMDA_GENAI_TRIGGERS, ctx) or matching(IMDA_AGENTIC_TRIGGERS, ctx)
            ),
            explain=_genai_or_agentic_finding,
        ),
        RiskRung(
            id="personal-data",
            level=RiskLevel.LIMITED,
            applies=_has_match(PDPC_TRIGGERS),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes personal data in Singapore, triggering PDPA "
                    "obligations and Model AI Governance Framework alignment."
                ),
                categories=trigger_ids(matching(PDPC_TRIGGERS, ctx)),
                provisions=["PDPA", "Model AI Governance Framework"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific Singapore regulatory obligations. No "
            "personal data processing, financial services, GenAI, or agentic AI concerns "
            "identified."
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

    if matching(PDPC_TRIGGERS, ctx):
        provisions += [
            ApplicableProvision(
                id="sg-pdpa-consent",
                law="PDPA",
                article="Part IV (Consent)",
                title="Consent for Personal Data Collection and Use",
                summary=(
                    "Organisations must obtain consent before collecting, using, or disclosing "
                    "personal data. Consent must be informed — individuals must be told the "
                    "purposes of data collection. For AI systems, this includes data used for "
                    "training, inference, and profiling."
                ),
                relevance=(
                    "This AI system processes personal data in Singapore, requiring informed "
                    "consent under PDPA."
                ),
            ),
            ApplicableProvision(
                id="sg-pdpc-advisory-ai",
                law="PDPC Advisory Guidelines on AI and Personal Data",
                article="Advisory Guidelines (2024 Revision)",
                title="PDPC Advisory Guidelines on Use of Personal Data in AI",
                summary=(
                    "PDPC advisory guidelines (revised 2024) provide guidance on responsible use "
                    "of personal data for AI systems, including data collection, use, disclosure, "
                    "and cross-border transfer considerations specific to AI training and "
                    "deployment. Includes guidance on informed consent for AI processing, purpose "
                    "limitation in AI contexts, and model-level data protection."
                ),
                relevance=(
                    "This AI system processes personal data in Singapore. PDPC advisory guidelines "
                    "on AI and personal data apply."
                ),
            ),
            ApplicableProvision(
                id="sg-cbpr-asean-transfer",
                law="PDPA / APEC CBPR / ASEAN Data Management Framework",
                article="PDPA Transfer Provisions, APEC CBPR, ASEAN DMF",
                title="ASEAN/APEC Cross-Border Data Transfer Frameworks",
                summary=(
                    "Singapore participates in the APEC Cross-Border Privacy Rules (CBPR) system "
                    "and the ASEAN Data Management Framework, both of which provide recognized "
                    "mechanisms for cross-border personal data transfers. Organizations "
                    "transferring data across ASEAN or APEC economies may leverage CBPR "
                    "certification or ASEAN DMF alignment as a transfer basis under PDPA, "
                    "complementing contractual and binding corporate rules approaches."
                ),
                relevance=(
                    "This AI system processes personal data in Singapore. Cross-border transfer "
                    "mechanisms including CBPR and ASEAN DMF should be evaluated if data flows "
                    "across borders."
                ),
            ),
        ]

    if matching(IMDA_GENAI_TRIGGERS, ctx):
        imda = partial(ApplicableProvision, law="IMDA GenAI Governance Framework")
        provisions += [
            imda(
                id="sg-imda-genai-testing",
                article="Testing and Evaluation",
                title="GenAI Testing and Evaluation Requirements",
                summary=(
                    "GenAI systems must undergo testing and evaluation covering accuracy, "
                    "robustness, safety, and security. Testing should be proportionate to the risk "
                    "level of the application and include red-teaming for harmful outputs."
                ),
                relevance="This GenAI system requires testing and evaluation per IMDA governance guidelines.",
            ),
            imda(
                id="sg-imda-genai-incident",
                article="Incident Reporting",
                title="GenAI Incident Reporting",
                summary=(
                    "Organisations deploying GenAI should establish incident reporting mechanisms "
                    "for tracking and addressing harms from AI-generated content, model failures, "
                    "or security breaches."
                ),
                relevance="This GenAI system should have incident reporting mechanisms per IMDA guidelines.",
            ),
            imda(
                id="sg-imda-genai-provenance",
                article="Content Provenance",
                title="AI Content Provenance and Disclosure",
                summary=(
                    "GenAI providers should implement content provenance mechanisms (watermarking, "
                    "metadata, labelling) to enable identification of AI-generated content. Users "
                    "should be informed when they are interacting with AI-generated content."
                ),
                relevance="This GenAI system should implement content provenance per IMDA guidelines.",
            ),
        ]

        genai = ctx.generative_ai_context
        if genai is not None and OutputModality.TEXT in genai.output_modalities and is_consumer_facing(ctx):
            provisions.append(
                ApplicableProvision(
                    id="sg-dnc-registry",
                    law="Do Not Call Registry (PDPA Part IX)",
                    article="PDPA Part IX",
                    title="DNC Registry for AI-Generated Communications",
                    summary=(
                        "If AI-generated text communications are sent to consumers in Singapore, "
                        "the Do Not Call Registry under PDPA Part IX may apply. Organisations must "
                        "check the DNC Registry before sending marketing messages, including those "
                        "generated by AI systems."
                    ),
                    relevance=(
                        "This AI system generates text content for consumers, potentially "
                        "triggering DNC Registry obligations."
                    ),
                )
            )

    if matching(IMDA_AGENTIC_TRIGGERS, ctx):
        agentic = partial(ApplicableProvision, law="IMDA Agentic AI Framework")
        provisions += [
            agentic(
                id="sg-imda-agentic-risk-bounding",
                article="Dimension 1: Assess and Bound Risks",
                title="Agentic AI Risk Bounding",
                summary=(
                    "Assess domain sensitivity and bound AI agent risks upfront: limit autonomy "
                    "scope, restrict tool and data access, implement threat modelling for agentic "
                    "interactions, and define clear boundaries for agent actions."
                ),
                relevance=(
                    "This agentic AI system must have its risks assessed and bounded per IMDA "
                    "agentic framework Dimension 1."
                ),
            ),
            agentic(
                id="sg-imda-agentic-human-accountability",
                article="Dimension 2: Human Accountability",
                title="Agentic AI Human Accountability",
                summary=(
                    "Make humans meaningfully accountable for agentic AI: define approval "
                    "checkpoints for consequential actions, allocate responsibility across "
                    "development and deployment teams, combat automation bias through training and "
                    "audits, establish real-time escalation for unexpected behaviour."
                ),
                relevance=(
                    "This agentic AI system requires human accountability mechanisms per IMDA "
                    "framework Dimension 2."
                ),
            ),
            agentic(
                id="sg-imda-agentic-technical-controls",
                article="Dimension 3: Technical Controls",
                title="Agentic AI Technical Controls",
                summary=(
                    "Implement technical controls: comprehensive agent action logging, secure "
                    "development environments, pre-deployment testing for accuracy and edge cases, "
                    "multi-agent system validation (if applicable), gradual rollout strategy, "
                    "continuous monitoring with alert thresholds and failsafe mechanisms."
                ),
                relevance=(
                    "This agentic AI system must implement technical controls per IMDA framework "
                    "Dimension 3."
                ),
            ),
            agentic(
                id="sg-imda-agentic-end-user",
                article="Dimension 4: End-User Responsibility",
                title="Agentic AI End-User Responsibility",
                summary=(
                    "Enable end-user responsibility: notify users of agentic AI use and its "
                    "limitations, provide training for users integrating agentic AI, establish "
                    "human escalation pathways for issues or concerns."
                ),
                relevance=(
                    "This agentic AI system must support end-user responsibility per IMDA "
                    "framework Dimension 4."
                ),
            ),
        ]

    mas_ids = trigger_ids(matching(MAS_TRIGGERS, ctx))
    if mas_ids:
        mas = partial(ApplicableProvision, law="MAS AI Risk Management Guidelines")
        provisions += [
            mas(
                id="sg-mas-governance",
                article="Governance and Oversight",
                title="Board/Senior Management AI Oversight",
                summary=(
                    "The board and senior management of financial institutions must establish "
                    "governance structures for AI risk management, including clear accountability "
                    "for AI-related decisions, risk appetite statements covering AI, and "
                    "allocation of resources for responsible AI use."
                ),
                relevance=(
                    "This AI system operates at a Singapore financial institution, requiring "
                    "board-level AI governance oversight."
                ),
            ),
            mas(
                id="sg-mas-materiality",
                article="Materiality Assessment",
                title="AI Risk Materiality Assessment",
                summary=(
                    "Financial institutions must assess the risk materiality of each AI use case, "
                    "considering the potential impact on customers, the institution, and the "
                    "financial system. Higher materiality triggers more stringent lifecycle "
                    "controls."
                ),
                relevance="This AI use case must undergo a materiality assessment per MAS guidelines.",
            ),
            mas(
                id="sg-mas-lifecycle",
                article="Lifecycle Controls",
                title="AI Lifecycle Controls",
                summary=(
                    "Lifecycle controls encompassing: data management (quality, lineage, privacy), "
                    "transparency and explainability (appropriate to use case materiality), "
                    "fairness and bias mitigation, human oversight, third-party AI management, "
                    "testing and evaluation, documentation, pre-deployment review, post-deployment "
                    "monitoring, and change management."
                ),
                relevance=(
                    "This AI system requires comprehensive lifecycle controls per MAS guidelines "
                    "proportionate to its materiality level."
                ),
            ),
        ]
        if "sg-mas-credit-scoring" in mas_ids:
            provisions.append(
                mas(
                    id="sg-mas-credit-fairness",
                    article="Fairness in Credit Decisions",
                    title="Fair AI Credit Scoring",
                    summary=(
                        "AI credit scoring models must be tested for fairness and bias across "
                        "demographic groups. Adverse credit decisions must be explainable. Model "
                        "validation and ongoing monitoring are required with heightened scrutiny "
                        "for credit scoring AI."
                    ),
                    relevance=(
                        "This AI credit scoring system requires fairness testing and "
                        "explainability per MAS guidelines."
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

    if "sg-pdpc-automated-decisions" in trigger_ids(matching(PDPC_TRIGGERS, ctx)):
        artifacts.append(
            ArtifactRequirement(
                id="dpia:sg-pdpa",
                type=ArtifactType.DPIA,
                name="PDPA Data Protection Impact Assessment",
                legal_basis="PDPA Part IV / PDPC AI Governance Framework",
                description=(
                    "Data protection assessment for AI systems making automated decisions with "
                    "significant impact on individuals. Must address data collection consent, "
                    "purpose limitation, accuracy, and individual rights."
                ),
            )
        )

    if is_genai_product(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="risk-assessment:sg-imda-genai",
                type=ArtifactType.RISK_ASSESSMENT,
                name="IMDA GenAI Governance Assessment",
                required=False,
                legal_basis="IMDA GenAI Governance Framework",
                description=(
                    "Assessment of GenAI system governance covering testing and evaluation "
                    "results, incident reporting mechanisms, content provenance approach, and "
                    "disclosure practices. Proportionate to risk level."
                ),
            )
        )

    if is_agentic_ai(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="risk-assessment:sg-imda-agentic",
                type=ArtifactType.RISK_ASSESSMENT,
                name="IMDA Agentic AI Governance Assessment",
                legal_basis="IMDA Model AI Governance Framework for Agentic AI",
                description=(
                    "Comprehensive assessment across all four dimensions of the IMDA Agentic AI "
                    "Framework: (1) risk bounding analysis, (2) human accountability mapping, (3) "
                    "technical controls inventory, (4) end-user responsibility mechanisms. Must "
                    "document agent scope, tool access, action boundaries, checkpoint definitions, "
                    "and failsafe mechanisms."
                ),
            )
        )

    mas_ids = trigger_ids(matching(MAS_TRIGGERS, ctx))
    if mas_ids:
        artifacts += [
            ArtifactRequirement(
                id="risk-assessment:sg-mas-materiality",
                type=ArtifactType.RISK_ASSESSMENT,
                name="MAS AI Risk Materiality Assessment",
                legal_basis="MAS AI Risk Management Guidelines",
                description=(
                    "Assessment of the AI use case's risk materiality, including potential impact "
                    "on customers, the institution, and the financial system. Determines the level "
                    "of lifecycle controls required."
                ),
            ),
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="MAS AI Model Documentation",
                legal_basis="MAS AI Risk Management Guidelines — Documentation",
                description=(
                    "Comprehensive model documentation covering model purpose, methodology, data "
                    "inputs, performance metrics, validation results, limitations, and monitoring "
                    "plan. Required for all material AI use cases at financial institutions."
                ),
                template_id="model-card",
            ),
        ]
        if "sg-mas-credit-scoring" in mas_ids:
            artifacts.append(
                ArtifactRequirement(
                    id="bias-audit:sg-mas-credit",
                    type=ArtifactType.BIAS_AUDIT,
                    name="MAS AI Fairness Assessment — Credit Scoring",
                    legal_basis="MAS AI Risk Management Guidelines — Fairness",
                    description=(
                        "Fairness assessment of AI credit scoring model testing for bias across "
                        "demographic groups. Must include testing methodology, results, "
                        "remediation measures, and ongoing monitoring plan."
                    ),
                )
            )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def _pdpa_actions() -> List[ActionRequirement]:
    return [
        _action(
            id="sg-pdpa-consent-part-iii",
            title="Implement PDPA Part III consent obligations",
            description=(
                "Under PDPA Sections 13-17, obtain valid consent for collection, use, and "
                "disclosure of personal data. The 2020 amendments introduced deemed consent by "
                "notification (Section 15A) and legitimate interest exceptions (Section 17A), "
                "which may apply to AI processing. Evaluate whether deemed consent or legitimate "
                "interest can be relied upon."
            ),
            legal_basis="PDPA Part III (Sections 13-17), 2020 Amendments (Sections 15A, 17A)",
            priority=ActionPriority.CRITICAL,
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="sg-pdpa-access-correction-part-iv",
            title="Implement PDPA Part IV access and correction obligations",
            description=(
                "Under PDPA Sections 21-22, provide individuals with access to their personal data "
                "and the ability to request corrections. For AI systems, this includes access to "
                "data used in automated decisions."
            ),
            legal_basis="PDPA Part IV (Sections 21-22)",
            priority=ActionPriority.IMPORTANT,
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="sg-pdpa-care-part-v",
            title="Implement PDPA Part V care of personal data obligations",
            description=(
                "Under PDPA Sections 24-26, ensure accuracy of personal data (Section "
                "24 — particularly important for AI systems making decisions based on "
                "personal data), implement reasonable security measures (Section 24), "
                "and establish retention limitation policies (Section 25)."
            ),
            legal_basis="PDPA Part V (Sections 24-26)",
            priority=ActionPriority.IMPORTANT,
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="sg-pdpa-breach-notification-part-via",
            title="Implement PDPA Part VIA data breach notification procedures",
            description=(
                "Under PDPA Sections 26A-26E, notify PDPC and affected individuals within 3 "
                "calendar days of determining a notifiable data breach has occurred. For AI "
                "systems, this includes breaches involving training data, model inversion attacks, "
                "or unauthorized access to personal data processed by the AI."
            ),
            legal_basis="PDPA Part VIA (Sections 26A-26E)",
            priority=ActionPriority.CRITICAL,
            estimated_effort="1-2 weeks",
        ),
        _action(
            id="sg-cross-border-cbpr",
            title="Evaluate ASEAN/APEC cross-border data transfer mechanisms",
            description=(
                "Singapore participates in the APEC Cross-Border Privacy Rules (CBPR) system and "
                "the ASEAN Data Management Framework. For AI products transferring data across "
                "ASEAN or APEC markets, these mechanisms may provide a recognized transfer basis "
                "under the PDPA. Evaluate whether CBPR certification or ASEAN framework alignment "
                "simplifies cross-border compliance."
            ),
            legal_basis="PDPA Transfer provisions, APEC CBPR, ASEAN DMF",
            priority=ActionPriority.RECOMMENDED,
            estimated_effort="2-4 weeks",
        ),
    ]


def _genai_actions() -> List[ActionRequirement]:
    important = partial(
        _action, priority=ActionPriority.IMPORTANT, legal_basis="IMDA GenAI Governance Framework"
    )
    return [
        important(
            id="sg-imda-genai-testing",
            title="Conduct GenAI testing and evaluation",
            description=(
                "Conduct testing and evaluation of the GenAI system covering accuracy, robustness, "
                "safety, and security. Include red-teaming for harmful outputs. Testing should be "
                "proportionate to the risk level and cover both pre-deployment and ongoing "
                "evaluation."
            ),
            estimated_effort="4-8 weeks",
        ),
        important(
            id="sg-imda-genai-incident-reporting",
            title="Establish GenAI incident reporting mechanism",
            description=(
                "Set up incident reporting mechanisms for tracking and addressing harms from "
                "AI-generated content, model failures, or security breaches. Define escalation "
                "procedures and response timelines."
            ),
            estimated_effort="2-4 weeks",
        ),
        important(
            id="sg-imda-genai-provenance",
            title="Implement AI content provenance mechanisms",
            description=(
                "Implement content provenance mechanisms (watermarking, metadata, labelling) to "
                "enable identification of AI-generated content. Ensure users are informed when "
                "interacting with AI-generated content. Consider C2PA or equivalent standards."
            ),
            estimated_effort="3-6 weeks",
        ),
        _action(
            id="sg-imda-ai-verify",
            title="Consider AI Verify toolkit for testing and evaluation",
            description=(
                "IMDA's AI Verify toolkit provides an open-source testing framework for AI "
                "governance. It includes testable criteria mapped to AI governance principles "
                "(transparency, fairness, safety, accountability). Consider using AI Verify or "
                "equivalent to structure testing and evaluation, particularly for GenAI systems "
                "requiring proportionate governance per IMDA guidelines."
            ),
            priority=ActionPriority.RECOMMENDED,
            legal_basis="IMDA AI Verify / Model AI Governance Framework",
            estimated_effort="2-4 weeks",
        ),
    ]


def _agentic_actions(ctx: ProductContext) -> List[ActionRequirement]:
    actions = [
        _action(
            id="sg-imda-agentic-risk-bound",
            title="Assess and bound agentic AI risks (IMDA Dimension 1)",
            description=(
                "Assess domain sensitivity and bound agentic AI risks: define clear boundaries for "
                "agent autonomy scope, restrict tool access to minimum necessary, limit data "
                "access to required scope, conduct threat modelling for agentic interactions, and "
                "document risk bounding decisions."
            ),
            priority=ActionPriority.CRITICAL,
            legal_basis="IMDA Agentic AI Framework — Dimension 1",
            estimated_effort="3-6 weeks",
        ),
        _action(
            id="sg-imda-agentic-human-accountability",
            title="Establish human accountability mechanisms (IMDA Dimension 2)",
            description=(
                "Define approval checkpoints for consequential agentic actions. Allocate "
                "responsibility across development and deployment teams. Combat automation bias "
                "through training and audits. Establish real-time escalation procedures for "
                "unexpected agent behaviour."
            ),
            priority=ActionPriority.CRITICAL,
            legal_basis="IMDA Agentic AI Framework — Dimension 2",
            estimated_effort="3-6 weeks",
        ),
        _action(
            id="sg-imda-agentic-technical-controls",
            title="Implement agentic AI technical controls (IMDA Dimension 3)",
            description=(
                "Implement comprehensive agent action logging, secure development environments, "
                "pre-deployment testing for accuracy and edge cases. For multi-agent systems: "
                "validate agent interactions. Implement gradual rollout strategy, continuous "
                "monitoring with alert thresholds, and failsafe mechanisms (kill switches, "
                "rollback capabilities)."
            ),
            priority=ActionPriority.CRITICAL,
            legal_basis="IMDA Agentic AI Framework — Dimension 3",
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="sg-imda-agentic-end-user",
            title="Enable end-user responsibility (IMDA Dimension 4)",
            description=(
                "Notify users of agentic AI use and its limitations. Provide training materials "
                "for users integrating agentic AI into their workflows. Establish human escalation "
                "pathways for issues or concerns. Document user-facing guidance."
            ),
            priority=ActionPriority.IMPORTANT,
            legal_basis="IMDA Agentic AI Framework — Dimension 4",
            estimated_effort="2-4 weeks",
        ),
    ]
    if ctx.agentic_ai_context.autonomy_level == AutonomyLevel.BROAD:
        actions.append(
            _action(
                id="sg-imda-agentic-graduated-deployment",
                title="Implement graduated deployment strategy for agentic AI",
                description=(
                    "Deploy agentic AI system in phases with increasing autonomy: (1) "
                    "shadow mode — agent suggests but human acts, (2) supervised mode — "
                    "agent acts with human approval, (3) autonomous mode — agent acts "
                    "independently within bounded scope. Each phase should have clear "
                    "success criteria and rollback triggers. Aligns with IMDA Agentic "
                    "AI Framework Dimension 3 (technical controls)."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="IMDA Agentic AI Framework — Dimension 3",
                estimated_effort="4-8 weeks",
            )
        )
    return actions


def _mas_actions(ctx: ProductContext, mas_ids: List[str]) -> List[ActionRequirement]:
    critical = partial(_action, priority=ActionPriority.CRITICAL)
    actions = [
        critical(
            id="sg-mas-governance-structure",
            title="Establish board/senior management AI governance",
            description=(
                "Establish governance structures for AI risk management: board/senior management "
                "oversight and accountability, AI risk appetite statement, resource allocation for "
                "responsible AI, and clear roles and responsibilities for AI-related decisions."
            ),
            legal_basis="MAS AI Risk Management Guidelines — Governance",
            estimated_effort="4-8 weeks",
        ),
        critical(
            id="sg-mas-materiality-assessment",
            title="Conduct AI risk materiality assessment",
            description=(
                "Assess the risk materiality of this AI use case considering: impact on customers "
                "if the AI produces incorrect/unfair outcomes, impact on the institution's "
                "reputation and operations, systemic implications for the financial system. "
                "Materiality level determines the stringency of required lifecycle controls."
            ),
            legal_basis="MAS AI Risk Management Guidelines — Materiality",
            estimated_effort="2-4 weeks",
        ),
        critical(
            id="sg-mas-lifecycle-controls",
            title="Implement AI lifecycle controls per MAS guidelines",
            description=(
                "Implement lifecycle controls proportionate to materiality: data management "
                "(quality, lineage, privacy), transparency/explainability, fairness/bias "
                "mitigation, human oversight, third-party AI management, testing/evaluation, "
                "documentation, pre-deployment review, post-deployment monitoring, and change "
                "management."
            ),
            legal_basis="MAS AI Risk Management Guidelines — Lifecycle",
            estimated_effort="8-16 weeks",
        ),
    ]

    if "sg-mas-credit-scoring" in mas_ids:
        actions.append(
            critical(
                id="sg-mas-credit-fairness-testing",
                title="Conduct fairness testing for AI credit scoring",
                description=(
                    "Test AI credit scoring model for fairness and bias across demographic groups. "
                    "Ensure adverse credit decisions are explainable with specific reasons. "
                    "Implement ongoing monitoring for model drift and fairness degradation. "
                    "Document testing methodology and results."
                ),
                legal_basis="MAS AI Risk Management Guidelines — Fairness",
                estimated_effort="4-8 weeks",
            )
        )

    genai = ctx.generative_ai_context
    if genai is not None and genai.foundation_model_source in (
        FoundationModelSource.THIRD_PARTY_API,
        FoundationModelSource.FINE_TUNED,
    ):
        actions.append(
            _action(
                id="sg-mas-third-party-ai",
                title="Implement third-party AI management controls",
                description=(
                    "Assess and manage risks from third-party AI services: due diligence on AI "
                    "providers, contractual arrangements for accountability, monitoring of "
                    "third-party AI performance, and contingency plans for provider disruption or "
                    "model changes."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="MAS AI Risk Management Guidelines — Third-Party AI",
                estimated_effort="3-6 weeks",
            )
        )

    if "sg-mas-trm" in mas_ids:
        actions.append(
            _action(
                id="sg-mas-trm-compliance",
                title="Comply with MAS Technology Risk Management Guidelines for AI",
                description=(
                    "Ensure AI system deployment meets MAS TRM Guidelines requirements for "
                    "technology risk management in financial institutions: secure development "
                    "lifecycle, access controls, data protection, system availability, and "
                    "incident management. AI-specific concerns include model security, API access "
                    "controls, and data pipeline integrity."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="MAS TRM Guidelines",
                estimated_effort="4-8 weeks",
            )
        )
    return actions


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions: List[ActionRequirement] = []
    if matching(PDPC_TRIGGERS, ctx):
        actions += _pdpa_actions()
    if is_genai_product(ctx):
        actions += _genai_actions()
    if is_agentic_ai(ctx):
        actions += _agentic_actions(ctx)
    mas_ids = trigger_ids(matching(MAS_TRIGGERS, ctx))
    if mas_ids:
        actions += _mas_actions(ctx, mas_ids)
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2014-07-02",
        description="PDPA entered into full force. All personal data obligations apply.",
        provision="PDPA",
    ),
    ComplianceDeadline(
        date="2024-02-01",
        description=(
            "PDPA amendments effective — Notifiable Data Breach regime updated with "
            "3-calendar-day assessment period for data breaches likely to result in "
            "significant harm."
        ),
        provision="PDPA (Amended 2024)",
    ),
    ComplianceDeadline(
        date="2020-02-01",
        description=(
            "Model AI Governance Framework (Second Edition) published by PDPC/IMDA. Widely "
            "adopted industry framework."
        ),
        provision="Model AI Governance Framework",
        is_mandatory=False,
    ),
    ComplianceDeadline(
        date="2024-09-01",
        description=(
            "IMDA GenAI Governance Framework published, providing governance guidelines for GenAI "
            "providers and deployers."
        ),
        provision="IMDA GenAI Governance Framework",
        is_mandatory=False,
    ),
    ComplianceDeadline(
        date="2026-01-15",
        description=(
            "IMDA Model AI Governance Framework for Agentic AI published — world's "
            "first dedicated agentic AI governance framework."
        ),
        provision="IMDA Agentic AI Framework",
        is_mandatory=False,
    ),
    ComplianceDeadline(
        date="2026-06-30",
        description=(
            "MAS Guidelines on AI Risk Management for Financial Institutions — expected "
            "finalisation and enforcement period begins."
        ),
        provision="MAS AI Risk Management Guidelines",
    ),
]


def build_timeline(ctx: ProductContext) -> ComplianceTimeline:
    notes = [
        "Singapore's AI governance approach is framework-based and proportionate. The PDPA "
        "provides the legal foundation, while IMDA and MAS frameworks provide detailed governance "
        "guidance."
    ]
    if is_agentic_ai(ctx):
        notes.append(
            "The IMDA Model AI Governance Framework for Agentic AI (January 2026) "
            "extends — not replaces — the existing Model AI Governance Framework. It "
            "adds four agentic-specific dimensions (risk bounding, human "
            "accountability, technical controls, end-user responsibility) on top of the "
            "base framework's governance principles."
        )
    if is_financial_services_ai(ctx):
        notes.append(
            "MAS Guidelines on AI Risk Management for Financial Institutions (consultation "
            "November 2025) are expected to become enforceable ~2026-2027. Early adoption is "
            "strongly recommended as MAS examinations are already considering AI governance "
            "practices."
        )
    if is_genai_product(ctx):
        notes.append(
            "IMDA GenAI governance guidelines are part of a living framework that will be updated "
            "as GenAI technology evolves. Organisations should monitor IMDA announcements for "
            "updates."
        )
    return ComplianceTimeline(effective_date="2014-07-02", deadlines=DEADLINES, notes=notes)


# =============================================================================
# Module
# =============================================================================


class SingaporeModule(JurisdictionModule):
    """PDPA plus the PDPC, IMDA and MAS AI governance frameworks."""

    region = "APAC"
    description = "Singapore PDPA, IMDA Model AI Governance and MAS frameworks"

    @property
    def id(self) -> str:
        return "singapore"

    @property
    def name(self) -> str:
        return "Singapore AI Governance Frameworks (PDPC, IMDA, MAS)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.SINGAPORE

    @property
    def ladder(self) -> RiskLadder:
        return SINGAPORE_LADDER

    @property
    def triggers(self):
        return (*MAS_TRIGGERS, *IMDA_AGENTIC_TRIGGERS, *IMDA_GENAI_TRIGGERS, *PDPC_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(ctx)
