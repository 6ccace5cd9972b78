"""
EU AI Act Chapter V: general-purpose AI models.

GPAI obligations apply alongside (not instead of) the system-level risk
classification. Providers carry Article 53 duties, reduced for open-source
models without systemic risk; systemic-risk models add Article 55. Deployers
must verify upstream provider compliance.
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
    GpaiClassification,
    GpaiRole,
    ProductContext,
    ProductType,
)

from .triggers import GPAI_DESCRIPTION_KEYWORDS

GPAI_DEADLINE = "2025-08-02"

_provision = partial(ApplicableProvision, law="EU AI Act")
_action = partial(ActionRequirement, jurisdictions=["eu-ai-act"], deadline=GPAI_DEADLINE)


def is_gpai_applicable(ctx: ProductContext) -> bool:
    if ctx.gpai_info is not None and ctx.gpai_info.is_gpai_model:
        return True
    if ctx.product_type == ProductType.FOUNDATION_MODEL:
        return True
    return ctx.description_mentions(*GPAI_DESCRIPTION_KEYWORDS)


def _is_provider(role: GpaiRole) -> bool:
    return role in (GpaiRole.PROVIDER, GpaiRole.BOTH)


def _is_deployer(role: GpaiRole) -> bool:
    return role in (GpaiRole.DEPLOYER, GpaiRole.BOTH)


def _full_provider_duties(gpai: GpaiClassification) -> bool:
    """Open-source models without systemic risk skip Art. 53(1)(a)-(b)."""
    return not gpai.is_open_source or gpai.has_systemic_risk


def classify_gpai(ctx: ProductContext) -> Optional[GpaiClassification]:
    """Classify the GPAI role and systemic risk; None when GPAI does not apply."""
    if not is_gpai_applicable(ctx):
        return None

    info = ctx.gpai_info
    if info is not None:
        role = info.gpai_role
    else:
        role = GpaiRole.PROVIDER if ctx.product_type == ProductType.FOUNDATION_MODEL else GpaiRole.DEPLOYER
    is_open_source = info.is_open_source if info else False
    exceeds_threshold = info.exceeds_systemic_risk_threshold if info else False
    designated = info.commission_designated if info else False
    has_systemic_risk = exceeds_threshold or designated

    provisions = ["Article 51"]
    if _is_provider(role):
        if is_open_source and not has_systemic_risk:
            provisions += ["Article 53(1)(c)", "Article 53(1)(d)", "Article 53(2)"]
        else:
            provisions += [
                "Article 53(1)(a)",
                "Article 53(1)(b)",
                "Article 53(1)(c)",
                "Article 53(1)(d)",
            ]
        if has_systemic_risk:
            provisions += [
                "Article 55(1)(a)",
                "Article 55(1)(b)",
                "Article 55(1)(c)",
                "Article 55(1)(d)",
            ]

    parts = [f"GPAI model role: {role.value}."]
    if is_open_source:
        parts.append("Model is open-source.")
    if has_systemic_risk:
        reasons = []
        if exceeds_threshold:
            reasons.append("compute exceeds 10^25 FLOPs threshold")
        if designated:
            reasons.append("designated by European Commission")
        parts.append(f"Systemic risk: {', '.join(reasons)}.")

    return GpaiClassification(
        is_gpai=True,
        has_systemic_risk=has_systemic_risk,
        is_open_source=is_open_source,
        role=role,
        justification=" ".join(parts),
        provisions=provisions,
    )


def gpai_provisions(gpai: GpaiClassification) -> List[ApplicableProvision]:
    provisions = [
        _provision(
            id="eu-ai-act-art51",
            article="Article 51",
            title="Classification of GPAI Models",
            summary=(
                "This product involves a general-purpose AI model subject to GPAI obligations "
                "under the EU AI Act."
            ),
            relevance=gpai.justification,
        )
    ]
    if not _is_provider(gpai.role):
        return provisions

    if _full_provider_duties(gpai):
        provisions.append(
            _provision(
                id="eu-ai-act-art53",
                article="Article 53",
                title="GPAI Provider Obligations",
                summary=(
                    "GPAI model providers must maintain technical documentation, provide "
                    "downstream documentation, comply with copyright law, and publish a training "
                    "data summary."
                ),
                relevance="Required for all GPAI model providers under Article 53.",
            )
        )
    else:
        provisions.append(
            _provision(
                id="eu-ai-act-art53-2",
                article="Article 53(2)",
                title="Open-Source GPAI Exemption",
                summary=(
                    "Open-source GPAI models are exempt from technical documentation and "
                    "downstream documentation obligations (Article 53(1)(a)-(b)), but must still "
                    "comply with copyright and training data summary obligations."
                ),
                relevance=(
                    "This model qualifies for the open-source exemption. Copyright compliance and "
                    "training data summary are still required."
                ),
            )
        )

    if gpai.has_systemic_risk:
        provisions.append(
            _provision(
                id="eu-ai-act-art55",
                article="Article 55",
                title="Systemic Risk Obligations",
                summary=(
                    "GPAI models with systemic risk must undergo model evaluation, adversarial "
                    "testing, systemic risk assessment, incident reporting, and cybersecurity "
                    "measures."
                ),
                relevance=(
                    "This GPAI model has been identified as having systemic risk, triggering "
                    "additional obligations under Article 55."
                ),
            )
        )
    return provisions


def gpai_artifacts(gpai: GpaiClassification) -> List[ArtifactRequirement]:
    if not _is_provider(gpai.role):
        return []

    artifacts: List[ArtifactRequirement] = []
    if _full_provider_duties(gpai):
        artifacts += [
            ArtifactRequirement(
                type=ArtifactType.GPAI_TECHNICAL_DOCUMENTATION,
                name="GPAI Technical Documentation (Annex XI)",
                legal_basis="Article 53(1)(a), Annex XI",
                description=(
                    "Technical documentation of the GPAI model including training and testing "
                    "process, evaluation results, model architecture, compute resources, and "
                    "capability limitations."
                ),
            ),
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="GPAI Downstream Documentation / Model Card",
                legal_basis="Article 53(1)(b)",
                description=(
                    "Information and documentation for downstream AI system providers covering "
                    "capabilities, limitations, intended uses, known risks, and integration "
                    "guidance."
                ),
                template_id="model-card",
            ),
        ]

    artifacts.append(
        ArtifactRequirement(
            type=ArtifactType.GPAI_TRAINING_DATA_SUMMARY,
            name="GPAI Training Data Summary",
            legal_basis="Article 53(1)(d)",
            description=(
                "Sufficiently detailed, publicly available summary of the content used for "
                "training the GPAI model, following the AI Office template."
            ),
        )
    )

    if gpai.has_systemic_risk:
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.GPAI_SYSTEMIC_RISK_ASSESSMENT,
                name="GPAI Systemic Risk Assessment",
                legal_basis="Article 55(1)(b)",
                description=(
                    "Assessment and mitigation plan for possible systemic risks at Union level, "
                    "including risk sources from development, market placement, or use of the "
                    "model."
                ),
            )
        )
    return artifacts


def gpai_actions(gpai: GpaiClassification) -> List[ActionRequirement]:
    actions: List[ActionRequirement] = []

    if _is_provider(gpai.role):
        actions += [
            _action(
                id="eu-ai-act-gpai-copyright",
                title="Implement copyright compliance policy",
                description=(
                    "Put in place a policy to comply with EU copyright law, including identifying "
                    "and respecting text and data mining opt-outs under Directive (EU) 2019/790 "
                    "Article 4(3)."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis="Article 53(1)(c)",
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="eu-ai-act-gpai-training-summary",
                title="Publish training data summary",
                description=(
                    "Draw up and make publicly available a sufficiently detailed summary of the "
                    "content used for training the GPAI model, according to the AI Office "
                    "template."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis="Article 53(1)(d)",
                estimated_effort="2-4 weeks",
            ),
        ]

        if _full_provider_duties(gpai):
            actions += [
                _action(
                    id="eu-ai-act-gpai-tech-docs",
                    title="Prepare GPAI technical documentation",
                    description=(
                        "Draw up and maintain technical documentation of the GPAI model covering "
                        "training process, testing, evaluation results, model architecture, and "
                        "capability limitations per Annex XI."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 53(1)(a)",
                    estimated_effort="4-8 weeks",
                ),
                _action(
                    id="eu-ai-act-gpai-downstream-docs",
                    title="Provide downstream documentation to integrators",
                    description=(
                        "Make available information and documentation to downstream AI system "
                        "providers to enable understanding of model capabilities, limitations, "
                        "and compliance with their own obligations."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 53(1)(b)",
                    estimated_effort="2-4 weeks",
                ),
            ]

        if gpai.has_systemic_risk:
            actions += [
                _action(
                    id="eu-ai-act-gpai-model-evaluation",
                    title="Perform model evaluation with standardised protocols",
                    description=(
                        "Conduct model evaluation in accordance with standardised protocols and "
                        "tools reflecting the state of the art, including conducting and "
                        "documenting adversarial testing."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 55(1)(a)",
                    estimated_effort="4-8 weeks",
                ),
                _action(
                    id="eu-ai-act-gpai-systemic-risk-assessment",
                    title="Assess and mitigate systemic risks",
                    description=(
                        "Assess and mitigate possible systemic risks at Union level, including "
                        "their sources, that may stem from the development, placement on market, "
                        "or use of the GPAI model."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 55(1)(b)",
                    estimated_effort="4-8 weeks",
                ),
                _action(
                    id="eu-ai-act-gpai-incident-reporting",
                    title="Establish incident tracking and reporting",
                    description=(
                        "Keep track of, document, and report serious incidents and possible "
                        "corrective measures to the AI Office and national competent authorities."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 55(1)(c)",
                    estimated_effort="2-4 weeks",
                ),
                _action(
                    id="eu-ai-act-gpai-cybersecurity",
                    title="Ensure adequate cybersecurity for GPAI model",
                    description=(
                        "Ensure an adequate level of cybersecurity protection for the GPAI model "
                        "with systemic risk and its physical infrastructure."
                    ),
                    priority=ActionPriority.CRITICAL,
                    legal_basis="Article 55(1)(d)",
                    estimated_effort="4-8 weeks",
                ),
            ]

    if _is_deployer(gpai.role):
        actions.append(
            _action(
                id="eu-ai-act-gpai-deployer-verify",
                title="Verify GPAI provider compliance",
                description=(
                    "Verify that the upstream GPAI model provider has met their documentation and "
                    "transparency obligations under Article 53. Request and review technical "
                    "documentation and downstream integration guidance."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="Article 53(1)(b)",
                estimated_effort="1-2 weeks",
            )
        )
    return actions
