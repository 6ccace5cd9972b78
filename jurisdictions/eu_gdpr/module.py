"""
EU General Data Protection Regulation (Regulation (EU) 2016/679)

DECISION LADDER:
  1. dpia               -> HIGH (personal data and any Article 35 DPIA trigger)
  2. general-processing -> LIMITED (personal data, no DPIA trigger)
  fallback              -> MINIMAL (no personal data; GDPR does not apply)

GDPR reads "personal data" more broadly than the shared predicate: behavioural,
employment, criminal, political and genetic data all count.
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
    RiskClassification,
    RiskLevel,
    TrainingDataCategory,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids, unique
from ..predicates import is_fully_automated, makes_material_decisions

_provision = partial(ApplicableProvision, law="GDPR")
_action = partial(ActionRequirement, jurisdictions=["eu-gdpr"])

GDPR_PERSONAL_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
    DataCategory.MINOR,
    DataCategory.EMPLOYMENT,
    DataCategory.CRIMINAL,
    DataCategory.POLITICAL,
    DataCategory.GENETIC,
)

ARTICLE_9_DATA = (
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.GENETIC,
)


# =============================================================================
# Context helpers
# =============================================================================


def processes_personal_data(ctx: ProductContext) -> bool:
    return ctx.has_data(*GDPR_PERSONAL_DATA)


def is_automated_decision_making(ctx: ProductContext) -> bool:
    """Article 22: solely automated decisions with significant effects."""
    return is_fully_automated(ctx) and makes_material_decisions(ctx)


def _is_large_scale(ctx: ProductContext) -> bool:
    return ctx.description_mentions("large-scale", "large scale") or ctx.affects(
        UserPopulation.GENERAL_PUBLIC, UserPopulation.CONSUMERS
    )


def involves_data_transfers(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return ctx.description_mentions("cross-border", "data transfer", "third-party api") or (
        genai is not None and genai.foundation_model_source == FoundationModelSource.THIRD_PARTY_API
    )


def is_genai_with_personal_data_concerns(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    if genai is None or not genai.uses_foundation_model:
        return False
    return ctx.training_data.contains_personal_data or any(
        c in genai.training_data_includes
        for c in (
            TrainingDataCategory.PERSONAL_DATA,
            TrainingDataCategory.PUBLIC_WEB_SCRAPE,
            TrainingDataCategory.USER_GENERATED_CONTENT,
        )
    )


def requires_dpo(ctx: ProductContext) -> bool:
    """Articles 37-39: large-scale processing of special category data."""
    return _is_large_scale(ctx) and ctx.has_data(
        DataCategory.SENSITIVE,
        DataCategory.BIOMETRIC,
        DataCategory.HEALTH,
        DataCategory.GENETIC,
        DataCategory.CRIMINAL,
    )


def _processes_article_9_data(ctx: ProductContext) -> bool:
    return ctx.has_data(*ARTICLE_9_DATA)


def _involves_children(ctx: ProductContext) -> bool:
    return ctx.has_data(DataCategory.MINOR) or ctx.affects(UserPopulation.MINORS)


def _systematic_evaluation(ctx: ProductContext) -> bool:
    profiling = ctx.description_mentions("profiling", "profile", "scoring", "evaluating personal")
    automated = ctx.automation_level in (
        AutomationLevel.FULLY_AUTOMATED,
        AutomationLevel.HUMAN_ON_THE_LOOP,
    )
    return profiling and automated and makes_material_decisions(ctx)


def _public_monitoring(ctx: ProductContext) -> bool:
    return ctx.description_mentions(
        "public space", "public area", "public monitoring", "cctv", "surveillance"
    ) and ctx.description_mentions("monitor", "track", "surveillance")


def _personal_training_data(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    personal = ctx.training_data.contains_personal_data or (
        genai is not None
        and any(
            c in genai.training_data_includes
            for c in (TrainingDataCategory.PERSONAL_DATA, TrainingDataCategory.USER_GENERATED_CONTENT)
        )
    )
    return personal and ctx.training_data.uses_training_data


# =============================================================================
# Article 35 DPIA triggers
# =============================================================================


DPIA_TRIGGERS = (
    Trigger(
        id="dpia-systematic-evaluation",
        name="Systematic and Extensive Evaluation of Personal Aspects (Profiling)",
        citation="Article 35(3)(a)",
        predicate=_systematic_evaluation,
    ),
    Trigger(
        id="dpia-large-scale-special-category",
        name="Large-Scale Processing of Special Category Data",
        citation="Article 35(3)(b)",
        predicate=lambda ctx: _is_large_scale(ctx)
        and ctx.has_data(
            DataCategory.BIOMETRIC,
            DataCategory.HEALTH,
            DataCategory.GENETIC,
            DataCategory.POLITICAL,
            DataCategory.CRIMINAL,
        ),
    ),
    Trigger(
        id="dpia-public-monitoring",
        name="Systematic Monitoring of Publicly Accessible Area",
        citation="Article 35(3)(c)",
        predicate=_public_monitoring,
    ),
    Trigger(
        id="dpia-automated-decision-making",
        name="Automated Decision-Making with Legal/Significant Effects",
        citation="Article 22 / Article 35",
        predicate=is_automated_decision_making,
    ),
    Trigger(
        id="dpia-sensitive-data-processing",
        name="Processing of Sensitive Personal Data",
        citation="Article 9, Article 35",
        predicate=_processes_article_9_data,
    ),
    Trigger(
        id="dpia-minor-data",
        name="Processing of Children's Data",
        citation="Article 8, Article 35",
        predicate=_involves_children,
    ),
    Trigger(
        id="dpia-training-data-personal",
        name="GenAI: Personal Data Used in Model Training",
        citation="Article 35, Recital 91",
        predicate=_personal_training_data,
    ),
)


# =============================================================================
# Decision ladder
# =============================================================================


def _dpia_finding(ctx: ProductContext) -> Finding:
    matched = matching(DPIA_TRIGGERS, ctx)
    names = "; ".join(t.name for t in matched)
    return Finding(
        justification=(
            f"This AI system triggers a DPIA requirement under GDPR due to: {names}. A Data "
            f"Protection Impact Assessment must be conducted before processing begins."
        ),
        categories=trigger_ids(matched),
        provisions=unique([t.citation for t in matched]),
    )


EU_GDPR_LADDER = RiskLadder(
    jurisdiction="eu-gdpr",
    rungs=[
        RiskRung(
            id="dpia",
            level=RiskLevel.HIGH,
            applies=lambda ctx: processes_personal_data(ctx) and bool(matching(DPIA_TRIGGERS, ctx)),
            explain=_dpia_finding,
        ),
        RiskRung(
            id="general-processing",
            level=RiskLevel.LIMITED,
            applies=processes_personal_data,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes personal data and must comply with GDPR principles "
                    "(lawfulness, fairness, transparency, purpose limitation, data minimisation, "
                    "accuracy, storage limitation, integrity, accountability). No DPIA triggers "
                    "were identified, but general GDPR obligations apply."
                ),
                categories=["general-processing"],
                provisions=["Articles 5-6"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not process personal data. GDPR obligations do not apply to "
            "non-personal data processing."
        ),
    ),
)


# =============================================================================
# Builders
# =============================================================================


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    provisions = [
        _provision(
            id="gdpr-art5-principles",
            article="Article 5",
            title="Principles of Processing",
            summary=(
                "Processing must be lawful, fair, and transparent; collected for specified "
                "purposes; adequate, relevant, and limited to what is necessary; accurate; stored "
                "only as long as necessary; and processed securely."
            ),
            relevance="Applies to all personal data processing in the AI system.",
        ),
        _provision(
            id="gdpr-art6-legal-basis",
            article="Articles 6-7",
            title="Legal Basis for Processing",
            summary=(
                "Processing must have a valid legal basis: consent, contract performance, legal "
                "obligation, vital interests, public interest, or legitimate interests. For "
                "consent, it must be freely given, specific, informed, and unambiguous."
            ),
            relevance=(
                "A valid legal basis must be identified for each purpose of personal data "
                "processing in the AI system."
            ),
        ),
        _provision(
            id="gdpr-art12-15-rights",
            article="Articles 12-23",
            title="Data Subject Rights",
            summary=(
                "Data subjects have rights to access, rectification, erasure, restriction, "
                "portability, and objection. For AI systems, the right to explanation of "
                "automated decisions is particularly relevant."
            ),
            relevance=(
                "The AI system must facilitate the exercise of data subject rights, including "
                "providing information about processing and enabling deletion/rectification "
                "requests."
            ),
        ),
    ]

    if is_automated_decision_making(ctx):
        provisions.append(
            _provision(
                id="gdpr-art22",
                article="Article 22",
                title="Automated Individual Decision-Making, Including Profiling",
                summary=(
                    "Data subjects have the right not to be subject to decisions based solely on "
                    "automated processing (including profiling) that produce legal or similarly "
                    "significant effects, unless based on explicit consent, contractual necessity, "
                    "or Union/Member State law. Suitable safeguards including the right to human "
                    "intervention must be provided."
                ),
                relevance=(
                    "This AI system makes fully automated decisions with material or "
                    "determinative impact on individuals, triggering Article 22 protections."
                ),
            )
        )

    if risk.level is RiskLevel.HIGH:
        provisions.append(
            _provision(
                id="gdpr-art35-dpia",
                article="Articles 35-36",
                title="Data Protection Impact Assessment (DPIA)",
                summary=(
                    "A DPIA must be carried out before processing that is likely to result in a "
                    "high risk to individuals. If the DPIA indicates high risk that cannot be "
                    "mitigated, prior consultation with the supervisory authority is required "
                    "(Article 36)."
                ),
                relevance=risk.justification,
            )
        )

    if involves_data_transfers(ctx):
        provisions.append(
            _provision(
                id="gdpr-art44-49-transfers",
                article="Articles 44-49",
                title="International Data Transfers",
                summary=(
                    "Transfers of personal data to third countries require an adequacy decision, "
                    "appropriate safeguards (SCCs, BCRs), or a derogation. Post-Schrems II, "
                    "supplementary measures may be required."
                ),
                relevance=(
                    "The AI system involves data transfers to third-party services or "
                    "cross-border processing, requiring a valid transfer mechanism."
                ),
            )
        )

    if is_genai_with_personal_data_concerns(ctx):
        provisions += [
            _provision(
                id="gdpr-genai-training-data",
                article="Articles 5-6, 9, 14",
                title="Legal Basis for AI Training Data Processing",
                summary=(
                    "Processing personal data for AI model training requires a valid legal basis. "
                    "Legitimate interest (Article 6(1)(f)) is commonly relied upon but requires a "
                    "balancing test. Web-scraped personal data triggers additional transparency "
                    "obligations under Article 14. Special category data in training sets "
                    "requires explicit consent or another Article 9(2) exception."
                ),
                relevance=(
                    "This AI system uses a foundation model trained on data that may include "
                    "personal data. Legal basis for training data processing must be established, "
                    "and data subject rights (including erasure) must be considered."
                ),
            ),
            _provision(
                id="gdpr-genai-erasure",
                article="Article 17",
                title="Right of Erasure and Trained Models",
                summary=(
                    "Data subjects may request erasure of their personal data. For AI models "
                    "trained on personal data, this raises complex questions about whether model "
                    "weights encode personal data and whether retraining is required. Controllers "
                    "must assess technical feasibility of erasure requests in the context of "
                    "trained models."
                ),
                relevance=(
                    "This AI system uses models potentially trained on personal data, requiring a "
                    "documented approach to handling erasure requests for data embedded in model "
                    "weights."
                ),
            ),
        ]

    if _processes_article_9_data(ctx):
        provisions.append(
            _provision(
                id="gdpr-art9-special-category",
                article="Article 9",
                title="Processing of Special Categories of Data",
                summary=(
                    "Processing of special categories (racial/ethnic origin, political opinions, "
                    "religious beliefs, trade union membership, genetic data, biometric data, "
                    "health data, sex life/orientation) is prohibited unless an Article 9(2) "
                    "exception applies."
                ),
                relevance=(
                    "This AI system processes special category data, requiring explicit consent "
                    "or another specific legal basis under Article 9(2)."
                ),
            )
        )

    if _involves_children(ctx):
        provisions.append(
            _provision(
                id="gdpr-art8-children",
                article="Article 8",
                title="Conditions Applicable to Child's Consent",
                summary=(
                    "For information society services offered directly to a child, consent is "
                    "lawful from age 16 (or lower if Member State sets 13-16). Below that "
                    "threshold, parental/guardian consent is required. Clear, child-friendly "
                    "information must be provided."
                ),
                relevance=(
                    "This AI system processes data of minors, requiring age verification and "
                    "parental consent mechanisms."
                ),
            )
        )
    return provisions


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    artifacts: List[ArtifactRequirement] = []
    if risk.level is RiskLevel.HIGH:
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.DPIA,
                name="GDPR Data Protection Impact Assessment",
                legal_basis="Articles 35-36",
                description=(
                    "A DPIA is required before processing that is likely to result in a high risk "
                    "to the rights and freedoms of natural persons. Must describe processing "
                    "operations, assess necessity and proportionality, assess risks, and identify "
                    "mitigation measures."
                ),
                template_id="dpia-gdpr",
            )
        )

    if processes_personal_data(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="GDPR Privacy Notice / Transparency Information",
                legal_basis="Articles 13-14",
                description=(
                    "Privacy notice informing data subjects about processing purposes, legal "
                    "basis, retention periods, data subject rights, and contact details. For AI "
                    "systems, must include information about the existence of automated "
                    "decision-making and meaningful information about the logic involved."
                ),
                template_id="transparency-notice",
            )
        )

    if is_genai_with_personal_data_concerns(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="model-card:gdpr-training-record",
                type=ArtifactType.MODEL_CARD,
                name="Data Processing Record for AI Training",
                legal_basis="Article 30",
                description=(
                    "Record of processing activities specifically documenting AI model training: "
                    "legal basis for training data processing, categories of personal data used, "
                    "retention policy, and technical/organisational measures for data subject "
                    "rights compliance."
                ),
            )
        )
    return artifacts


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    critical = partial(_action, priority=ActionPriority.CRITICAL)
    important = partial(_action, priority=ActionPriority.IMPORTANT)

    actions = [
        critical(
            id="gdpr-legal-basis-assessment",
            title="Determine and document legal basis for processing",
            description=(
                "Identify and document the legal basis (Article 6) for each processing purpose in "
                "the AI system. For consent, implement mechanisms for freely given, specific, "
                "informed, and unambiguous consent. For legitimate interests, conduct and document "
                "a Legitimate Interest Assessment (LIA)."
            ),
            legal_basis="Articles 6-7",
            estimated_effort="1-2 weeks",
        ),
        critical(
            id="gdpr-data-subject-rights",
            title="Implement data subject rights mechanisms",
            description=(
                "Enable data subjects to exercise their rights: access (Art 15), rectification "
                "(Art 16), erasure (Art 17), restriction (Art 18), portability (Art 20), objection "
                "(Art 21). For AI systems, consider how these rights apply to automated processing "
                "and model training data."
            ),
            legal_basis="Articles 12-23",
            estimated_effort="3-6 weeks",
        ),
        critical(
            id="gdpr-privacy-notice",
            title="Prepare and publish privacy notice",
            description=(
                "Provide transparent information to data subjects about processing purposes, "
                "legal basis, data categories, retention periods, and their rights. For AI "
                "systems, include meaningful information about the logic involved in automated "
                "decision-making and its envisaged consequences."
            ),
            legal_basis="Articles 13-14",
            estimated_effort="1-2 weeks",
        ),
        important(
            id="gdpr-records-of-processing",
            title="Maintain records of processing activities",
            description=(
                "Maintain written records of processing activities including purposes, categories "
                "of data subjects and personal data, recipients, transfers, retention periods, and "
                "technical/organisational security measures."
            ),
            legal_basis="Article 30",
            estimated_effort="1-2 weeks",
        ),
    ]

    if risk.level is RiskLevel.HIGH:
        actions.append(
            critical(
                id="gdpr-conduct-dpia",
                title="Conduct Data Protection Impact Assessment",
                description=(
                    "Conduct a DPIA before processing begins. Must systematically describe "
                    "processing, assess necessity and proportionality, assess risks to rights and "
                    "freedoms, and identify measures to address risks. If residual risk is high, "
                    "prior consultation with the supervisory authority (Article 36) is required."
                ),
                legal_basis="Articles 35-36",
                estimated_effort="2-4 weeks",
            )
        )

    if is_automated_decision_making(ctx):
        actions.append(
            critical(
                id="gdpr-art22-safeguards",
                title="Implement Article 22 automated decision-making safeguards",
                description=(
                    "Implement safeguards for automated decisions with legal or similarly "
                    "significant effects: (1) right to obtain human intervention, (2) right to "
                    "express their point of view, (3) right to contest the decision, (4) "
                    "meaningful information about the logic involved. If relying on explicit "
                    "consent or contract, document the legal basis."
                ),
                legal_basis="Article 22",
                estimated_effort="2-4 weeks",
            )
        )

    if _processes_article_9_data(ctx):
        actions.append(
            critical(
                id="gdpr-special-category-basis",
                title="Establish legal basis for special category data processing",
                description=(
                    "Identify and document a valid Article 9(2) exception for processing special "
                    "category data. Common bases include explicit consent (Art 9(2)(a)) or "
                    "substantial public interest (Art 9(2)(g)). Implement additional safeguards "
                    "appropriate to the sensitivity of the data."
                ),
                legal_basis="Article 9",
                estimated_effort="1-2 weeks",
            )
        )

    if _involves_children(ctx):
        actions.append(
            critical(
                id="gdpr-children-consent",
                title="Implement age verification and parental consent",
                description=(
                    "Implement age verification mechanisms and parental/guardian consent "
                    "collection for children's data. Provide child-friendly privacy notices. "
                    "Ensure age threshold complies with applicable Member State law (13-16 years "
                    "depending on Member State)."
                ),
                legal_basis="Article 8",
                estimated_effort="2-4 weeks",
            )
        )

    if requires_dpo(ctx):
        actions.append(
            important(
                id="gdpr-appoint-dpo",
                title="Appoint a Data Protection Officer",
                description=(
                    "Appoint a DPO as required when core activities consist of large-scale "
                    "processing of special categories of data or systematic monitoring of "
                    "individuals. The DPO must be independent, have expert knowledge of data "
                    "protection law, and be provided with adequate resources."
                ),
                legal_basis="Articles 37-39",
                estimated_effort="2-4 weeks",
            )
        )

    if involves_data_transfers(ctx):
        actions.append(
            critical(
                id="gdpr-data-transfers",
                title="Establish valid data transfer mechanisms",
                description=(
                    "Implement appropriate transfer mechanisms for international data transfers: "
                    "adequacy decision, Standard Contractual Clauses (SCCs), Binding Corporate "
                    "Rules (BCRs), or derogations. Conduct a Transfer Impact Assessment per "
                    "Schrems II requirements. Document supplementary measures where needed."
                ),
                legal_basis="Articles 44-49",
                estimated_effort="2-4 weeks",
            )
        )

    if is_genai_with_personal_data_concerns(ctx):
        actions += [
            critical(
                id="gdpr-genai-training-legal-basis",
                title="Establish legal basis for AI training data processing",
                description=(
                    "Determine and document the legal basis for personal data used in model "
                    "training. If relying on legitimate interest (Art 6(1)(f)), conduct a "
                    "Legitimate Interest Assessment balancing the controller's interest against "
                    "data subject rights. For web-scraped data, address Article 14 transparency "
                    "obligations. For user-generated content, verify consent scope covers "
                    "training use."
                ),
                legal_basis="Articles 5-6, 14",
                estimated_effort="2-4 weeks",
            ),
            important(
                id="gdpr-genai-erasure-policy",
                title="Develop policy for right of erasure in trained models",
                description=(
                    "Document the organisation's approach to handling erasure requests (Art 17) "
                    "for personal data that may be encoded in model weights. Consider whether "
                    "retraining, fine-tuning with unlearning techniques, or input/output filtering "
                    "is appropriate. Consult with DPA guidance on model erasure expectations."
                ),
                legal_basis="Article 17",
                estimated_effort="2-4 weeks",
            ),
        ]

    actions.append(
        important(
            id="gdpr-security-measures",
            title="Implement appropriate technical and organisational security measures",
            description=(
                "Implement security measures appropriate to the risk, including as appropriate: "
                "pseudonymisation, encryption, confidentiality/integrity/availability/resilience, "
                "ability to restore access, and regular testing of effectiveness. For AI systems, "
                "consider model security, adversarial robustness, and access controls."
            ),
            legal_basis="Article 32",
            estimated_effort="2-6 weeks",
        )
    )
    return actions


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "GDPR has been in force since 25 May 2018. All obligations apply immediately to any "
        "personal data processing."
    ]
    if risk.level is RiskLevel.HIGH:
        notes += [
            "A DPIA must be conducted BEFORE processing begins. Processing cannot commence until "
            "the DPIA has been completed and risks have been mitigated to an acceptable level.",
            "If the DPIA indicates high residual risk that cannot be mitigated, prior consultation "
            "with the supervisory authority is required under Article 36 before processing may "
            "begin.",
        ]
    return ComplianceTimeline(
        effective_date="2018-05-25",
        deadlines=[
            ComplianceDeadline(
                date="2018-05-25",
                description="GDPR entered into application. All data protection obligations are in force.",
                provision="GDPR",
            )
        ],
        notes=notes,
    )


# =============================================================================
# Module
# =============================================================================


class EuGdprModule(JurisdictionModule):
    region = "EU"
    description = "EU General Data Protection Regulation"

    @property
    def id(self) -> str:
        return "eu-gdpr"

    @property
    def name(self) -> str:
        return "EU General Data Protection Regulation (GDPR)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.EU_GDPR

    @property
    def ladder(self) -> RiskLadder:
        return EU_GDPR_LADDER

    @property
    def triggers(self):
        return DPIA_TRIGGERS

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
