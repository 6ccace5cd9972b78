"""
EU Artificial Intelligence Act (Regulation (EU) 2024/1689)

DECISION LADDER:
  1. prohibited-practice -> UNACCEPTABLE (Article 5)
  2. annex-iii-exempt    -> MINIMAL (Annex III match, Article 6(3) filter fails)
  3. annex-iii           -> HIGH (Article 6(2), Annex III)
  4. transparency        -> LIMITED (Article 50)
  fallback               -> MINIMAL

Transparency obligations are added on top of a HIGH classification when the
system is also a chatbot, deepfake or emotion-recognition system. GPAI
obligations (Chapter V) are evaluated independently of the ladder.
"""

from __future__ import annotations

from functools import partial
from typing import List, Optional

from shared.models import (
    ActionPriority,
    ActionRequirement,
    ApplicableProvision,
    ArtifactRequirement,
    ArtifactType,
    ComplianceDeadline,
    ComplianceTimeline,
    DataCategory,
    GpaiClassification,
    Jurisdiction,
    ProductContext,
    RiskClassification,
    RiskLevel,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, matching, trigger_ids
from .gpai import classify_gpai, gpai_actions, gpai_artifacts, gpai_provisions
from .triggers import (
    ANNEX_III_CATEGORIES,
    PROHIBITED_PRACTICES,
    TRANSPARENCY_TRIGGERS,
    is_limited_risk_system,
    passes_significant_risk_filter,
)

HIGH_RISK_DEADLINE = "2026-08-02"

_provision = partial(ApplicableProvision, law="EU AI Act")
_action = partial(ActionRequirement, jurisdictions=["eu-ai-act"])


# =============================================================================
# Decision ladder
# =============================================================================


def _prohibited(ctx: ProductContext) -> Finding:
    matched = matching(PROHIBITED_PRACTICES, ctx)
    names = ", ".join(t.name for t in matched)
    return Finding(
        justification=(
            f"This AI system matches prohibited practice(s) under Article 5 of the EU AI Act: "
            f"{names}. These practices are banned in the EU regardless of safeguards."
        ),
        categories=trigger_ids(matched),
        provisions=[t.citation for t in matched],
    )


def _annex_iii_exempt(ctx: ProductContext) -> Finding:
    return Finding(
        justification=(
            "This AI system falls within an Annex III category but does not pose a significant "
            "risk of harm under Article 6(3). It performs a narrow procedural task, improves a "
            "previously completed human activity, detects patterns without replacing human "
            "assessment, or performs a preparatory task."
        ),
        categories=trigger_ids(matching(ANNEX_III_CATEGORIES, ctx)),
        provisions=["Article 6(3)"],
    )


def _annex_iii(ctx: ProductContext) -> Finding:
    matched = matching(ANNEX_III_CATEGORIES, ctx)
    names = ", ".join(t.name for t in matched)
    return Finding(
        justification=(
            f"This AI system falls within Annex III high-risk category: {names}. "
            f"It must comply with requirements under Articles 8-15."
        ),
        categories=trigger_ids(matched),
        provisions=["Article 6(2)", "Annex III", *trigger_ids(matched)],
    )


def _transparency(ctx: ProductContext) -> Finding:
    return Finding(
        justification=(
            "This AI system has transparency obligations under Articles 50-52 of the EU AI Act. "
            "Users must be informed they are interacting with an AI system, and/or AI-generated "
            "content must be labelled."
        ),
        categories=trigger_ids(matching(TRANSPARENCY_TRIGGERS, ctx)),
        provisions=["Article 50"],
    )


def _in_annex_iii(ctx: ProductContext) -> bool:
    return bool(matching(ANNEX_III_CATEGORIES, ctx))


EU_AI_ACT_LADDER = RiskLadder(
    jurisdiction="eu-ai-act",
    rungs=[
        RiskRung(
            id="prohibited-practice",
            level=RiskLevel.UNACCEPTABLE,
            applies=lambda ctx: bool(matching(PROHIBITED_PRACTICES, ctx)),
            explain=_prohibited,
        ),
        RiskRung(
            id="annex-iii-exempt",
            level=RiskLevel.MINIMAL,
            applies=lambda ctx: _in_annex_iii(ctx) and not passes_significant_risk_filter(ctx),
            explain=_annex_iii_exempt,
        ),
        RiskRung(
            id="annex-iii",
            level=RiskLevel.HIGH,
            applies=_in_annex_iii,
            explain=_annex_iii,
        ),
        RiskRung(
            id="transparency",
            level=RiskLevel.LIMITED,
            applies=is_limited_risk_system,
            explain=_transparency,
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not fall into the prohibited, high-risk, or limited-risk "
            "categories under the EU AI Act. No mandatory requirements apply beyond voluntary "
            "codes of conduct."
        ),
    ),
)


def _has_transparency_duties(risk: RiskClassification, ctx: ProductContext) -> bool:
    return risk.level is RiskLevel.LIMITED or is_limited_risk_system(ctx)


# =============================================================================
# Provisions
# =============================================================================


def _high_risk_provisions(risk: RiskClassification) -> List[ApplicableProvision]:
    return [
        _provision(
            id="eu-ai-act-art6",
            article="Articles 6-7",
            title="High-Risk Classification",
            summary="This AI system is classified as high-risk under Annex III of the EU AI Act.",
            relevance=risk.justification,
        ),
        _provision(
            id="eu-ai-act-art9",
            article="Article 9",
            title="Risk Management System",
            summary=(
                "A continuous risk management system must be established, identifying and "
                "mitigating risks throughout the lifecycle."
            ),
            relevance="Required for all high-risk AI systems under Article 9.",
        ),
        _provision(
            id="eu-ai-act-art10",
            article="Article 10",
            title="Data and Data Governance",
            summary=(
                "Training, validation, and testing datasets must meet quality criteria including "
                "relevance, representativeness, and bias examination."
            ),
            relevance="Required for all high-risk AI systems under Article 10.",
        ),
        _provision(
            id="eu-ai-act-art11",
            article="Article 11",
            title="Technical Documentation",
            summary="Technical documentation must be drawn up before the system is placed on the market.",
            relevance="Required for all high-risk AI systems under Article 11.",
        ),
        _provision(
            id="eu-ai-act-art12",
            article="Article 12",
            title="Record-Keeping",
            summary="The system must automatically record events (logs) with at least 6-month retention.",
            relevance="Required for all high-risk AI systems under Article 12.",
        ),
        _provision(
            id="eu-ai-act-art13",
            article="Article 13",
            title="Transparency and Information to Deployers",
            summary=(
                "Instructions for use must be provided to deployers with system capabilities, "
                "limitations, and oversight measures."
            ),
            relevance="Required for all high-risk AI systems under Article 13.",
        ),
        _provision(
            id="eu-ai-act-art14",
            article="Article 14",
            title="Human Oversight",
            summary=(
                "The system must be designed for effective human oversight, including the ability "
                "to override, reverse, or stop the system."
            ),
            relevance="Required for all high-risk AI systems under Article 14.",
        ),
        _provision(
            id="eu-ai-act-art15",
            article="Article 15",
            title="Accuracy, Robustness, and Cybersecurity",
            summary=(
                "Appropriate levels of accuracy, robustness against errors, and cybersecurity must "
                "be ensured."
            ),
            relevance="Required for all high-risk AI systems under Article 15.",
        ),
    ]


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    provisions: List[ApplicableProvision] = []

    if risk.level is RiskLevel.UNACCEPTABLE:
        provisions.append(
            _provision(
                id="eu-ai-act-art5",
                article="Article 5",
                title="Prohibited AI Practices",
                summary=(
                    "This AI system falls under a prohibited practice and cannot be placed on the "
                    "EU market or used within the EU."
                ),
                relevance="The system's intended purpose matches one or more prohibited use cases.",
            )
        )

    if risk.level is RiskLevel.HIGH:
        provisions += _high_risk_provisions(risk)

    if _has_transparency_duties(risk, ctx):
        provisions.append(
            _provision(
                id="eu-ai-act-art50",
                article="Articles 50-52",
                title="Transparency Obligations",
                summary=(
                    "Users must be informed of AI interaction, AI-generated content must be "
                    "labelled, and/or emotion recognition/biometric categorisation must be "
                    "disclosed."
                ),
                relevance=(
                    "This system has transparency obligations based on its interaction with "
                    "natural persons or content generation capabilities."
                ),
            )
        )
    return provisions


# =============================================================================
# Artifacts
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    artifacts: List[ArtifactRequirement] = []

    if risk.level is RiskLevel.HIGH:
        artifacts += [
            ArtifactRequirement(
                type=ArtifactType.RISK_CLASSIFICATION,
                name="EU AI Act Risk Classification Report",
                legal_basis="Articles 6-7, Annex III",
                description=(
                    "Document explaining the risk classification of the AI system, including the "
                    "applicable Annex III category and why the system qualifies as high-risk."
                ),
                template_id="ai-act-risk-assessment",
            ),
            ArtifactRequirement(
                type=ArtifactType.CONFORMITY_ASSESSMENT,
                name="EU AI Act Conformity Assessment",
                legal_basis="Articles 43-44",
                description=(
                    "Conformity assessment demonstrating compliance with Articles 8-15. For most "
                    "Annex III systems, this is a self-assessment (internal control per Annex VI). "
                    "Biometric identification systems require third-party assessment."
                ),
                template_id="ai-act-conformity",
            ),
            ArtifactRequirement(
                type=ArtifactType.RISK_ASSESSMENT,
                name="Risk Management System Documentation",
                legal_basis="Article 9",
                description=(
                    "Documentation of the risk management system covering identification, "
                    "evaluation, and mitigation of risks throughout the AI system lifecycle."
                ),
            ),
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="Technical Documentation / Model Card",
                legal_basis="Article 11",
                description=(
                    "Comprehensive technical documentation covering system description, "
                    "development process, capabilities, limitations, and intended use."
                ),
                template_id="model-card",
            ),
        ]
        if ctx.has_data(DataCategory.BIOMETRIC):
            artifacts.append(
                ArtifactRequirement(
                    id="conformity-assessment:notified-body",
                    type=ArtifactType.CONFORMITY_ASSESSMENT,
                    name="Third-Party Conformity Assessment (Notified Body)",
                    legal_basis="Article 43(1), Annex VII",
                    description=(
                        "Biometric identification systems require conformity assessment by an "
                        "independent notified body under Annex VII, rather than self-assessment."
                    ),
                )
            )

    if _has_transparency_duties(risk, ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="AI Transparency Notice",
                legal_basis="Articles 50-52",
                description=(
                    "User-facing transparency notice informing individuals of AI interaction, "
                    "AI-generated content, or emotion recognition/biometric categorisation."
                ),
                template_id="transparency-notice",
            )
        )

    if risk.level is RiskLevel.UNACCEPTABLE:
        artifacts.append(
            ArtifactRequirement(
                id="risk-classification:prohibition-analysis",
                type=ArtifactType.RISK_CLASSIFICATION,
                name="EU AI Act Prohibition Analysis",
                legal_basis="Article 5",
                description=(
                    "Analysis documenting why this AI system falls under a prohibited practice. "
                    "This system CANNOT be placed on the EU market. This document should be used "
                    "to explore redesign options or market exclusion."
                ),
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def _high_risk_actions() -> List[ActionRequirement]:
    critical = partial(_action, priority=ActionPriority.CRITICAL, deadline=HIGH_RISK_DEADLINE)
    important = partial(_action, priority=ActionPriority.IMPORTANT, deadline=HIGH_RISK_DEADLINE)
    return [
        critical(
            id="eu-ai-act-risk-management",
            title="Establish risk management system",
            description=(
                "Implement a continuous, iterative risk management process covering "
                "identification, analysis, evaluation, and mitigation of risks. Must be maintained "
                "throughout the AI system lifecycle."
            ),
            legal_basis="Article 9",
            estimated_effort="4-8 weeks",
        ),
        critical(
            id="eu-ai-act-data-governance",
            title="Implement data governance and quality measures",
            description=(
                "Ensure training, validation, and testing datasets meet quality criteria: "
                "relevance, representativeness, freedom from errors, completeness. Document design "
                "choices and conduct bias examination."
            ),
            legal_basis="Article 10",
            estimated_effort="4-12 weeks",
        ),
        critical(
            id="eu-ai-act-technical-docs",
            title="Prepare technical documentation",
            description=(
                "Create comprehensive technical documentation covering system description, "
                "development process, monitoring capabilities, and compliance evidence. Must be "
                "completed before placing the system on the market."
            ),
            legal_basis="Article 11",
            estimated_effort="2-4 weeks",
        ),
        critical(
            id="eu-ai-act-logging",
            title="Implement automatic event logging",
            description=(
                "Design the system to automatically record events (logs) throughout its lifetime, "
                "with at least 6-month retention. Logs must include usage periods, input data "
                "references, and human verification records."
            ),
            legal_basis="Article 12",
            estimated_effort="2-4 weeks",
        ),
        critical(
            id="eu-ai-act-human-oversight",
            title="Implement human oversight mechanisms",
            description=(
                "Design effective human oversight including ability to understand system output, "
                "monitor for automation bias, override or reverse decisions, and stop the system. "
                "For biometric identification, require two persons to verify results."
            ),
            legal_basis="Article 14",
            estimated_effort="3-6 weeks",
        ),
        critical(
            id="eu-ai-act-conformity-assessment",
            title="Complete conformity assessment",
            description=(
                "Undergo conformity assessment (self-assessment via Annex VI for most Annex III "
                "systems, or third-party assessment via Annex VII for biometric identification). "
                "Affix CE marking upon successful completion."
            ),
            legal_basis="Articles 43-44",
            estimated_effort="4-8 weeks",
        ),
        critical(
            id="eu-ai-act-eu-database-registration",
            title="Register in EU AI database",
            description=(
                "Register the high-risk AI system in the EU database before placing it on the "
                "market or putting it into service."
            ),
            legal_basis="Article 49",
            estimated_effort="1-2 weeks",
        ),
        important(
            id="eu-ai-act-accuracy-robustness",
            title="Validate accuracy, robustness, and cybersecurity",
            description=(
                "Ensure and document appropriate levels of accuracy for the intended purpose, "
                "robustness against errors and adversarial inputs, and cybersecurity protections "
                "against exploitation."
            ),
            legal_basis="Article 15",
            estimated_effort="3-6 weeks",
        ),
        important(
            id="eu-ai-act-post-market-monitoring",
            title="Establish post-market monitoring system",
            description=(
                "Set up a post-market monitoring system to collect and review performance and "
                "compliance data after deployment. Must include serious incident reporting "
                "procedures."
            ),
            legal_basis="Articles 72-73",
            estimated_effort="2-4 weeks",
        ),
        important(
            id="eu-ai-act-quality-management",
            title="Implement quality management system",
            description=(
                "Establish a quality management system covering compliance strategies, design and "
                "development control, testing procedures, data management, and resource "
                "allocation."
            ),
            legal_basis="Article 17",
            estimated_effort="4-8 weeks",
        ),
    ]


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.UNACCEPTABLE:
        # Nothing else matters until the prohibited characteristics are removed
        return [
            _action(
                id="eu-ai-act-stop-prohibited",
                title="Do not deploy this AI system in the EU",
                description=(
                    "This AI system falls under a prohibited practice (Article 5). It cannot be "
                    "placed on the EU market, put into service, or used within the EU. Consider "
                    "redesigning the system to remove the prohibited characteristics or exclude "
                    "the EU from target markets."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis="Article 5",
            )
        ]

    actions: List[ActionRequirement] = []
    if risk.level is RiskLevel.HIGH:
        actions += _high_risk_actions()

    if _has_transparency_duties(risk, ctx):
        actions.append(
            _action(
                id="eu-ai-act-transparency-disclosure",
                title="Implement transparency disclosures",
                description=(
                    "Ensure users are clearly informed they are interacting with an AI system (for "
                    "chatbots/conversational AI), that content is AI-generated (for "
                    "deepfakes/synthetic media), or that emotion recognition/biometric "
                    "categorisation is in use."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis="Articles 50-52",
                estimated_effort="1-2 weeks",
                deadline=HIGH_RISK_DEADLINE,
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2025-02-02",
        description=(
            "Prohibited AI practices (Article 5) become enforceable. Systems matching prohibited "
            "categories must cease EU operations."
        ),
        provision="Article 5",
    ),
    ComplianceDeadline(
        date="2025-08-02",
        description=(
            "Obligations for GPAI models apply. Transparency obligations for GPAI providers take "
            "effect."
        ),
        provision="Articles 51-56",
    ),
    ComplianceDeadline(
        date="2026-08-02",
        description=(
            "High-risk AI system obligations apply. All requirements under Articles 8-15, "
            "conformity assessment, EU database registration, and post-market monitoring must be "
            "in place."
        ),
        provision="Articles 6-49, 72-73",
    ),
    ComplianceDeadline(
        date="2027-08-02",
        description=(
            "High-risk AI systems covered by Annex I Union harmonisation legislation (product "
            "safety) must comply. Extended deadline for AI systems already on the market as "
            "components of products covered by Annex I legislation."
        ),
        provision="Article 6(1), Annex I",
    ),
]


def build_timeline(
    risk: RiskClassification,
    gpai: Optional[GpaiClassification],
) -> ComplianceTimeline:
    notes: List[str] = []

    if risk.level is RiskLevel.UNACCEPTABLE:
        notes.append(
            "CRITICAL: Prohibited practices have been enforceable since 2 February 2025. "
            "Immediate action required."
        )
    if risk.level is RiskLevel.HIGH:
        notes += [
            "High-risk system obligations apply from 2 August 2026. Plan conformity assessment "
            "and documentation well in advance.",
            "Post-market monitoring and serious incident reporting obligations also apply from "
            "August 2026.",
        ]
    if risk.level is RiskLevel.LIMITED:
        notes.append("Transparency obligations for non-GPAI systems apply from 2 August 2026.")

    if gpai is not None and gpai.is_gpai:
        notes.append(
            "URGENT: GPAI model obligations under Articles 51-56 have been in force since "
            "2 August 2025. Immediate compliance action required."
        )
        if gpai.has_systemic_risk:
            notes.append(
                "Systemic risk obligations (model evaluation, adversarial testing, risk "
                "assessment, incident reporting, cybersecurity) are also in force since "
                "2 August 2025."
            )

    return ComplianceTimeline(effective_date="2024-08-01", deadlines=DEADLINES, notes=notes)


# =============================================================================
# Module
# =============================================================================


class EuAiActModule(JurisdictionModule):
    """EU AI Act: risk tiers, Annex III obligations, Article 50, GPAI."""

    region = "EU"
    description = "European Union Artificial Intelligence Act"

    @property
    def id(self) -> str:
        return "eu-ai-act"

    @property
    def name(self) -> str:
        return "EU Artificial Intelligence Act"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.EU_AI_ACT

    @property
    def ladder(self) -> RiskLadder:
        return EU_AI_ACT_LADDER

    @property
    def triggers(self):
        return (*PROHIBITED_PRACTICES, *ANNEX_III_CATEGORIES, *TRANSPARENCY_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        provisions = build_provisions(ctx, self.get_risk_level(ctx))
        gpai = classify_gpai(ctx)
        if gpai is not None:
            provisions += gpai_provisions(gpai)
        return provisions

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        artifacts = build_artifacts(ctx, self.get_risk_level(ctx))
        gpai = classify_gpai(ctx)
        if gpai is not None:
            artifacts += gpai_artifacts(gpai)
        return artifacts

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        actions = build_actions(ctx, self.get_risk_level(ctx))
        gpai = classify_gpai(ctx)
        if gpai is not None:
            actions += gpai_actions(gpai)
        return actions

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx), classify_gpai(ctx))

    def get_gpai_classification(self, ctx: ProductContext) -> Optional[GpaiClassification]:
        return classify_gpai(ctx)
