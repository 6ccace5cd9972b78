"""
JuriMap Conflict Detector

Flags cross-jurisdiction tensions: areas where the requirements of two or
more target jurisdictions pull in different directions and counsel should
advise. Each rule is a static, hand-authored record that fires when a fixed
combination of jurisdictions (and, for some rules, context flags) is present.

TRUSTWORTHINESS PRINCIPLES:

  - Advisory only: never changes a classification, artifact or action
  - Deterministic: same jurisdictions and flags, same tension ids
  - Text is pre-authored, never generated
  - Rules are evaluated in table order; output follows that order
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Union

from shared.models import (
    AISector,
    ConflictTension,
    JurisdictionResult,
    ProductContext,
    ProductType,
    RiskLevel,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Presence:
    """The jurisdictions present in a result set, in first-seen order."""

    ids: List[str]
    results: Sequence[JurisdictionResult] = field(repr=False)

    @classmethod
    def of(cls, results: Sequence[JurisdictionResult]) -> Presence:
        return cls(ids=list(dict.fromkeys(r.jurisdiction for r in results)), results=results)

    def has(self, *jurisdictions: str) -> bool:
        """True if any of the given jurisdictions is present."""
        return any(j in self.ids for j in jurisdictions)

    def only(self, *jurisdictions: str) -> List[str]:
        """Present ids restricted to the given ones, in presence order."""
        return [j for j in self.ids if j in jurisdictions]

    def level_of(self, jurisdiction: str) -> Union[RiskLevel, None]:
        for result in self.results:
            if result.jurisdiction == jurisdiction:
                return result.risk_classification.level
        return None


Guard = Callable[[ProductContext, Presence], bool]
Involved = Union[List[str], Callable[[Presence], List[str]]]
Text = Union[str, Callable[[ProductContext], str]]


@dataclass(frozen=True)
class ConflictRule:
    id: str
    title: str
    applies: Guard = field(repr=False)
    jurisdictions: Involved = field(repr=False)
    description: Text = field(repr=False)
    recommendation: str = field(repr=False)

    def emit(self, ctx: ProductContext, present: Presence) -> ConflictTension:
        involved = self.jurisdictions(present) if callable(self.jurisdictions) else self.jurisdictions
        description = self.description(ctx) if callable(self.description) else self.description
        return ConflictTension(
            id=self.id,
            title=self.title,
            jurisdictions=list(involved),
            description=description,
            recommendation=self.recommendation,
        )


# =============================================================================
# Context flags used by the rules
# =============================================================================


def _is_agentic(ctx: ProductContext) -> bool:
    return ctx.agentic_ai_context is not None and ctx.agentic_ai_context.is_agentic


def _generates_content(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (genai is not None and genai.generates_content) or ctx.product_type in (
        ProductType.GENERATOR,
        ProductType.FOUNDATION_MODEL,
    )


def _is_gpai_or_foundation(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        (ctx.gpai_info is not None and ctx.gpai_info.is_gpai_model)
        or ctx.product_type == ProductType.FOUNDATION_MODEL
        or (genai is not None and genai.uses_foundation_model)
    )


def _is_financial(ctx: ProductContext) -> bool:
    return ctx.sector_context is not None and ctx.sector_context.sector == AISector.FINANCIAL_SERVICES


FINANCIAL_REGULATORS = ("eu-ai-act", "singapore", "us-federal", "uk")
DATA_TRANSFER_REGIMES = ("eu-gdpr", "singapore", "china", "brazil")


def _gpai_open_source_description(ctx: ProductContext) -> str:
    if ctx.gpai_info is not None and ctx.gpai_info.is_open_source:
        return (
            "This product appears to use an open-source GPAI model. Under the EU AI Act Article "
            "53(2), open-source GPAI models benefit from a limited exemption: providers need only "
            "publish a sufficiently detailed summary of training data and comply with copyright "
            "law, rather than meeting the full GPAI provider obligations. However, China's CAC "
            "Algorithm Registry and GenAI Measures make no distinction for open-source models — all "
            "GenAI services offered to users in China must complete algorithm filing with the CAC, "
            "regardless of whether the underlying model is open-source. An organization relying on "
            "the EU open-source exemption to reduce compliance burden will still face full filing "
            "and content review obligations in China."
        )
    return (
        "Under the EU AI Act Article 53(2), open-source GPAI models benefit from reduced provider "
        "obligations (primarily training data summary publication and copyright compliance). "
        "China's CAC Algorithm Registry and GenAI Measures require algorithm filing for all GenAI "
        "services regardless of open-source status. If the underlying model is or becomes "
        "open-source, the EU compliance burden may decrease but China obligations remain unchanged."
    )


# =============================================================================
# Rule table
# =============================================================================


CONFLICT_RULES: List[ConflictRule] = [
    ConflictRule(
        id="china-eu-content-review",
        title="China mandatory content review vs. EU freedom of expression",
        applies=lambda ctx, p: p.has("china") and p.has("eu-ai-act", "eu-gdpr"),
        jurisdictions=["china", "eu-ai-act"],
        description=(
            "China's CAC GenAI Measures (Articles 4-7) require content to align with socialist "
            "core values and prohibit specific content categories. The EU AI Act and fundamental "
            "rights framework protect freedom of expression. Content filtering calibrated for "
            "China compliance may be overly restrictive for EU users, or EU-appropriate content "
            "may violate Chinese requirements."
        ),
        recommendation=(
            "Consider implementing jurisdiction-specific content policies with separate filtering "
            "rulesets for China and EU markets. Consult counsel on whether a single global content "
            "policy can satisfy both frameworks, or whether market-specific deployments are "
            "necessary."
        ),
    ),
    ConflictRule(
        id="gdpr-china-data-minimisation",
        title="GDPR data minimisation vs. China content logging requirements",
        applies=lambda ctx, p: p.has("eu-gdpr") and p.has("china"),
        jurisdictions=["eu-gdpr", "china"],
        description=(
            "GDPR Article 5(1)(c) requires data minimisation — processing only data adequate, "
            "relevant, and limited to what is necessary. China's CAC GenAI Measures require "
            "extensive logging of generated content, user interactions, and training data records "
            "for regulatory review. These logging obligations may conflict with data minimisation "
            "principles for users in both markets."
        ),
        recommendation=(
            "Implement segregated data handling: maintain China-compliant logs for China users "
            "separately from EU user data. Ensure EU user data is not subject to Chinese logging "
            "requirements. Consult counsel on cross-border data flow implications under PIPL and "
            "GDPR."
        ),
    ),
    ConflictRule(
        id="singapore-eu-proportionality",
        title="Singapore proportionate governance vs. EU mandatory conformity assessment",
        applies=lambda ctx, p: (
            p.has("singapore")
            and p.has("eu-ai-act")
            and p.level_of("eu-ai-act") is RiskLevel.HIGH
        ),
        jurisdictions=["singapore", "eu-ai-act"],
        description=(
            "Singapore's Model AI Governance Framework and IMDA guidelines advocate a "
            "proportionate, risk-based approach where governance measures scale with the risk "
            "level. The EU AI Act mandates specific conformity assessment procedures for high-risk "
            "AI systems regardless of proportionality considerations. A system classified as "
            "high-risk under the EU AI Act must complete full conformity assessment even if "
            "Singapore's framework would consider lighter governance sufficient."
        ),
        recommendation=(
            "Implement EU AI Act conformity assessment requirements as the baseline (as they are "
            "more prescriptive), and document how these also satisfy Singapore's governance "
            "framework requirements. The EU compliance baseline will typically exceed Singapore's "
            "requirements."
        ),
    ),
    ConflictRule(
        id="us-china-transparency",
        title="US transparency expectations vs. China algorithm confidentiality",
        applies=lambda ctx, p: p.has("us-federal", "us-ca") and p.has("china"),
        jurisdictions=["us-federal", "china"],
        description=(
            "US frameworks (FTC, NIST AI RMF, state laws) emphasize transparency and "
            "explainability of AI systems, including disclosure of how AI systems work and make "
            "decisions. China's algorithm filing and GenAI regulations require detailed disclosure "
            "to the CAC but may restrict public disclosure of certain algorithm details. "
            "Additionally, Chinese data localization requirements may limit what information can "
            "be shared with US regulators."
        ),
        recommendation=(
            "Develop separate disclosure frameworks for each market. Ensure US transparency "
            "requirements are met without disclosing information that could violate Chinese "
            "algorithm confidentiality requirements. Consult counsel on managing dual regulatory "
            "reporting obligations."
        ),
    ),
    ConflictRule(
        id="cross-border-data-transfer",
        title="Cross-border data transfer conflicts between GDPR/PDPA/LGPD and China PIPL",
        applies=lambda ctx, p: p.has("eu-gdpr", "singapore", "brazil") and p.has("china"),
        jurisdictions=lambda p: p.only(*DATA_TRANSFER_REGIMES),
        description=(
            "Multiple jurisdictions impose restrictions on cross-border personal data transfers, "
            "but with incompatible mechanisms. GDPR requires adequacy decisions or SCCs for "
            "EU-to-third-country transfers. China's PIPL requires security assessment or China "
            "SCCs for China-to-overseas transfers. These mechanisms may not be mutually "
            "compatible, creating challenges for systems that process data across these "
            "jurisdictions."
        ),
        recommendation=(
            "Map all personal data flows across jurisdictions. Implement jurisdiction-specific "
            "transfer mechanisms (EU SCCs for GDPR, China SCCs for PIPL). Consider data "
            "localization where transfer mechanisms are insufficient. Consult counsel on "
            "structuring data flows to minimize cross-border transfer requirements."
        ),
    ),
    ConflictRule(
        id="agentic-ai-framework-divergence",
        title="Singapore agentic AI framework vs. other jurisdictions' general AI frameworks",
        applies=lambda ctx, p: _is_agentic(ctx) and p.has("singapore") and len(p.ids) > 1,
        jurisdictions=lambda p: ["singapore", *[j for j in p.ids if j != "singapore"]],
        description=(
            "Singapore's IMDA Agentic AI Framework (January 2026) is the world's first dedicated "
            "governance framework for agentic AI systems, with specific requirements across four "
            "dimensions (risk bounding, human accountability, technical controls, end-user "
            "responsibility). Other jurisdictions currently address agentic AI through general AI "
            "frameworks (EU AI Act human oversight, US NIST AI RMF). Compliance approaches may "
            "differ significantly."
        ),
        recommendation=(
            "Use Singapore's IMDA Agentic AI Framework as the most comprehensive baseline for "
            "agentic governance, then verify coverage against other jurisdictions' general AI "
            "requirements. Singapore's specific agentic requirements (e.g., gradual rollout, "
            "action logging, risk bounding) will typically satisfy other jurisdictions' more "
            "general oversight requirements."
        ),
    ),
    ConflictRule(
        id="eu-china-content-labeling",
        title="EU AI Act Article 50 vs. China CAC Article 12 content labeling requirements",
        applies=lambda ctx, p: (
            p.has("eu-ai-act", "eu-gdpr") and p.has("china") and _generates_content(ctx)
        ),
        jurisdictions=["eu-ai-act", "china"],
        description=(
            "EU AI Act Article 50 requires that AI-generated content be labeled in a "
            "machine-readable format (e.g., C2PA metadata, watermarking) so that recipients can "
            "detect it is AI-generated. China's CAC GenAI Measures Article 12 mandates visible "
            "labeling of AI-generated content and requires specific label formats defined by "
            "Chinese authorities. The labeling formats, metadata standards, and disclosure "
            "triggers differ: the EU emphasizes machine-readable interoperability while China "
            "prescribes specific visible labeling standards set by the Cyberspace Administration. "
            "A single labeling implementation may not satisfy both regimes."
        ),
        recommendation=(
            "Implement a dual-labeling approach: embed machine-readable provenance metadata "
            "(e.g., C2PA) for EU compliance alongside visible Chinese-format labels for "
            "China-market content. Consult counsel on whether a unified labeling standard can be "
            "devised or whether market-specific labeling pipelines are necessary."
        ),
    ),
    ConflictRule(
        id="gdpr-erasure-china-retention",
        title="GDPR right to erasure vs. China data retention obligations",
        applies=lambda ctx, p: p.has("eu-gdpr") and p.has("china"),
        jurisdictions=["eu-gdpr", "china"],
        description=(
            "GDPR Article 17 grants data subjects the right to erasure ('right to be forgotten'), "
            "requiring controllers to delete personal data upon request when specific conditions "
            "are met. China's CAC GenAI Measures and Cybersecurity Law require retention of user "
            "interaction logs, generated content records, and training data provenance for a "
            "minimum period (typically 6 months for GenAI logs under CAC measures, longer under "
            "cybersecurity regulations) to enable regulatory review and law enforcement access. "
            "For users who interact with systems operating in both markets, an erasure request "
            "under GDPR may conflict with China's mandatory retention periods."
        ),
        recommendation=(
            "Implement strict data segregation: maintain separate data stores for EU and China "
            "users so that GDPR erasure requests can be honored for EU user data without "
            "affecting China-compliant retention of Chinese user data. Avoid architectures where "
            "a single user record is subject to both regimes simultaneously. Consult counsel on "
            "edge cases (e.g., cross-border users, shared training data)."
        ),
    ),
    ConflictRule(
        id="gpai-opensource-china-filing",
        title="EU AI Act GPAI open-source exemption vs. China algorithm filing requirement",
        applies=lambda ctx, p: p.has("eu-ai-act") and p.has("china") and _is_gpai_or_foundation(ctx),
        jurisdictions=["eu-ai-act", "china"],
        description=_gpai_open_source_description,
        recommendation=(
            "Do not assume that open-source model status reduces compliance obligations globally. "
            "Maintain full China CAC algorithm filing documentation regardless of open-source "
            "exemptions claimed under the EU AI Act. Consult counsel on whether the EU open-source "
            "exemption applies to your specific deployment model (the exemption does not apply if "
            "there is a systemic risk designation)."
        ),
    ),
    ConflictRule(
        id="financial-ai-regulatory-divergence",
        title="Divergent financial AI regulatory approaches across jurisdictions",
        applies=lambda ctx, p: _is_financial(ctx) and len(p.only(*FINANCIAL_REGULATORS)) > 1,
        jurisdictions=lambda p: p.only(*FINANCIAL_REGULATORS),
        description=(
            "Financial AI is regulated differently across jurisdictions: EU AI Act classifies "
            "credit scoring and insurance pricing as high-risk (Annex III §5) requiring full "
            "conformity assessment. MAS Guidelines (Singapore) use a proportionate risk-based "
            "approach with materiality assessment. US SR 11-7 focuses on model risk management. "
            "UK FCA uses a principles-based approach. These different frameworks may impose "
            "conflicting documentation, testing, and governance requirements."
        ),
        recommendation=(
            "Identify the most prescriptive requirements across all target jurisdictions "
            "(typically EU AI Act for classification, SR 11-7 for model validation, MAS for "
            "materiality assessment) and implement these as the compliance baseline. Document how "
            "the baseline satisfies each jurisdiction's specific requirements."
        ),
    ),
]


def detect_conflicts(
    ctx: ProductContext,
    results: Sequence[JurisdictionResult],
    rules: Sequence[ConflictRule] = CONFLICT_RULES,
) -> List[ConflictTension]:
    """
    Evaluate the conflict rule table against the mapped jurisdictions.

    Args:
        ctx: Product context (read-only)
        results: Jurisdiction results of the same run
        rules: Rule table (defaults to the built-in table)

    Returns:
        Tensions in rule-table order; empty when nothing applies
    """
    present = Presence.of(results)
    tensions = [rule.emit(ctx, present) for rule in rules if rule.applies(ctx, present)]
    logger.info(
        f"Conflict detection over {len(present.ids)} jurisdictions: "
        f"{[t.id for t in tensions] or 'none'}"
    )
    return tensions
