"""
US Federal AI Regulatory Framework

Federal AI oversight is enforcement-driven: the FTC, CFPB, SEC and banking
supervisors apply existing statutes to AI. NIST guidance is voluntary but
recommended for every system, so this module emits the NIST provision and
action even at MINIMAL.

DECISION LADDER:
  1. credit-scoring         -> HIGH (ECOA / SR 11-7 / FTC)
  2. financial-services     -> HIGH (any financial trigger)
  3. automated-consumer     -> LIMITED (FTC unfairness)
  4. genai-synthetic        -> LIMITED (FTC disclosure, NIST AI 600-1)
  5. consumer-facing        -> LIMITED (any FTC trigger)
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
    FinancialSubSector,
    Jurisdiction,
    ProductContext,
    ProductType,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import (
    can_generate_deepfakes,
    is_financial_services_ai,
    is_fully_automated,
    is_genai_product,
    makes_material_decisions,
)

FTC_SECTION_5 = "FTC Act Section 5"
SR_11_7 = "SR 11-7 / OCC 2011-12"

CONSUMER_POPULATIONS = (
    UserPopulation.CONSUMERS,
    UserPopulation.CREDIT_APPLICANTS,
    UserPopulation.TENANTS,
    UserPopulation.JOB_APPLICANTS,
)

_action = partial(ActionRequirement, jurisdictions=["us-federal"])


def _fs(ctx: ProductContext):
    return ctx.sector_context.financial_services if ctx.sector_context else None


def is_credit_scoring_ai(ctx: ProductContext) -> bool:
    fs = _fs(ctx)
    return (
        (fs is not None and fs.involves_credit)
        or ctx.affects(UserPopulation.CREDIT_APPLICANTS)
        or ctx.description_mentions("credit scor", "creditworth")
    )


def is_high_impact_automated_decision(ctx: ProductContext) -> bool:
    return (
        makes_material_decisions(ctx)
        and is_fully_automated(ctx)
        and ctx.affects(*CONSUMER_POPULATIONS)
    )


def _deceptive_ai(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.CONSUMERS) and (
        ctx.product_type in (ProductType.GENERATOR, ProductType.RECOMMENDER, ProductType.CLASSIFIER)
        or ctx.description_mentions("consumer", "customer")
    )


def _synthetic_content(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        (genai is not None and genai.generates_content)
        or ctx.product_type == ProductType.GENERATOR
        or can_generate_deepfakes(ctx)
    )


def _model_risk(ctx: ProductContext) -> bool:
    """A supervised institution that described its financial activities."""
    return is_financial_services_ai(ctx) and _fs(ctx) is not None


FTC_TRIGGERS = (
    Trigger(
        id="ftc-deceptive-ai",
        name="Deceptive AI Practices",
        citation=FTC_SECTION_5,
        predicate=_deceptive_ai,
    ),
    Trigger(
        id="ftc-genai-synthetic-content",
        name="AI-Generated/Synthetic Content Disclosure",
        citation="FTC Act Section 5, FTC GenAI Guidance",
        predicate=_synthetic_content,
    ),
    Trigger(
        id="ftc-unfair-ai-decisions",
        name="Unfair Automated Decision-Making",
        citation=FTC_SECTION_5,
        predicate=lambda ctx: makes_material_decisions(ctx) and ctx.affects(*CONSUMER_POPULATIONS),
    ),
)

NIST_TRIGGERS = (
    Trigger(
        id="nist-ai-rmf-general",
        name="NIST AI Risk Management Framework",
        citation="NIST AI RMF 1.0",
        predicate=lambda ctx: True,
    ),
    Trigger(
        id="nist-genai-profile",
        name="NIST GenAI Risk Profile",
        citation="NIST AI 600-1",
        predicate=is_genai_product,
    ),
)

FINANCIAL_TRIGGERS = (
    Trigger(
        id="sr-11-7-model-risk",
        name="OCC/Fed SR 11-7 Model Risk Management",
        citation=SR_11_7,
        predicate=_model_risk,
    ),
    Trigger(
        id="cfpb-fair-lending",
        name="CFPB Fair Lending AI Guidance",
        citation="ECOA / Regulation B",
        predicate=lambda ctx: is_credit_scoring_ai(ctx) or ctx.description_mentions("lending", "loan"),
    ),
    Trigger(
        id="sec-ai-advisory",
        name="SEC AI in Investment Advisory",
        citation="SEC Investment Advisers Act",
        predicate=lambda ctx: (
            _fs(ctx) is not None
            and (_fs(ctx).sub_sector == FinancialSubSector.INVESTMENT or _fs(ctx).involves_trading)
        )
        or ctx.description_mentions("investment advi", "robo-advis", "portfolio management"),
    ),
)


# =============================================================================
# Decision ladder
# =============================================================================


def _financial_finding(ctx: ProductContext) -> Finding:
    financial = matching(FINANCIAL_TRIGGERS, ctx)
    return Finding(
        justification=(
            "This AI system operates in financial services and is subject to regulatory oversight: "
            f"{'; '.join(t.name for t in financial)}. Supervised institutions must comply with "
            "model risk management expectations."
        ),
        categories=trigger_ids(financial),
        provisions=[t.citation for t in financial],
    )


US_FEDERAL_LADDER = RiskLadder(
    jurisdiction="us-federal",
    rungs=[
        RiskRung(
            id="credit-scoring",
            level=RiskLevel.HIGH,
            applies=is_credit_scoring_ai,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system is used in credit scoring or lending decisions, subject to "
                    "heightened regulatory scrutiny under ECOA/Regulation B (CFPB fair lending), "
                    "OCC/Fed SR 11-7 (model risk management), and FTC Section 5 (unfair "
                    "practices). Supervisory examination and enforcement is active in this area."
                ),
                categories=["credit-scoring", *trigger_ids(matching(FINANCIAL_TRIGGERS, ctx))],
                provisions=["ECOA/Regulation B", "SR 11-7", FTC_SECTION_5],
            ),
        ),
        RiskRung(
            id="financial-services",
            level=RiskLevel.HIGH,
            applies=lambda ctx: is_financial_services_ai(ctx)
            and bool(matching(FINANCIAL_TRIGGERS, ctx)),
            explain=_financial_finding,
        ),
        RiskRung(
            id="automated-consumer",
            level=RiskLevel.LIMITED,
            applies=is_high_impact_automated_decision,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes automated decisions with material impact on consumers, "
                    "triggering FTC scrutiny for unfair or deceptive practices. While no mandatory "
                    "pre-market assessment exists at the federal level, failure to ensure fairness "
                    "and transparency creates significant enforcement risk."
                ),
                categories=["ftc-unfair-ai-decisions"],
                provisions=[FTC_SECTION_5],
            ),
        ),
        RiskRung(
            id="genai-synthetic",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: is_genai_product(ctx) and _synthetic_content(ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This generative AI system creates content that may be mistaken for "
                    "human-created content. FTC guidance emphasizes disclosure obligations for "
                    "AI-generated content and has taken enforcement actions against deceptive "
                    "AI-generated content. NIST AI 600-1 provides a risk management profile for "
                    "GenAI systems."
                ),
                categories=["ftc-genai-synthetic-content", "nist-genai-profile"],
                provisions=[FTC_SECTION_5, "NIST AI 600-1"],
            ),
        ),
        RiskRung(
            id="consumer-facing",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(matching(FTC_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system interacts with consumers and is subject to FTC oversight for "
                    "unfair or deceptive practices. While US federal law does not mandate "
                    "pre-market AI classification, FTC enforcement creates compliance obligations."
                ),
                categories=trigger_ids(matching(FTC_TRIGGERS, ctx)),
                provisions=[FTC_SECTION_5],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific US federal regulatory obligations beyond "
            "general FTC consumer protection. Voluntary alignment with the NIST AI RMF is "
            "recommended as a best practice."
        ),
    ),
)


# =============================================================================
# Provisions
# =============================================================================


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    provisions = [
        ApplicableProvision(
            id="us-nist-ai-rmf",
            law="NIST AI RMF",
            article="NIST AI 100-1",
            title="NIST AI Risk Management Framework",
            summary=(
                "Voluntary framework for managing AI risks across the lifecycle. Organised into "
                "four functions: Govern, Map, Measure, Manage. While not legally binding, widely "
                "referenced by regulators and increasingly expected as a standard of care."
            ),
            relevance=(
                "Recommended framework for systematic AI risk management regardless of regulatory "
                "requirements."
            ),
            regulatory_force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
        )
    ]

    if matching(FTC_TRIGGERS, ctx):
        provisions.append(
            ApplicableProvision(
                id="us-ftc-section5",
                law="FTC Act",
                article="Section 5",
                title="FTC Prohibition on Unfair or Deceptive Practices",
                summary=(
                    "The FTC prohibits unfair or deceptive acts or practices in commerce. For AI "
                    "systems, this covers making false claims about AI capabilities, failing to "
                    "disclose AI involvement in decisions, using AI to discriminate, and marketing "
                    "AI products with unsubstantiated claims."
                ),
                relevance=(
                    "This AI system is consumer-facing. FTC has actively enforced against AI "
                    "companies for deceptive practices, algorithmic bias, and unfair automated "
                    "decisions."
                ),
                regulatory_force=RegulatoryForce.BINDING_LAW,
                enforcement_authority="Federal Trade Commission",
            )
        )

    if is_genai_product(ctx):
        provisions.append(
            ApplicableProvision(
                id="us-nist-genai-profile",
                law="NIST AI 600-1",
                article="NIST AI 600-1",
                title="NIST Generative AI Risk Profile",
                summary=(
                    "Companion resource to the AI RMF specifically addressing generative AI risks: "
                    "CBRN information, confabulation, data privacy, environmental impact, harmful "
                    "bias, homogenization, human-AI configuration, information integrity, "
                    "information security, intellectual property, obscene/degrading content, and "
                    "value chain risks."
                ),
                relevance=(
                    "This system uses or provides generative AI capabilities. The NIST GenAI "
                    "profile identifies 12 unique risk areas for generative AI requiring specific "
                    "risk management actions."
                ),
                regulatory_force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
            )
        )
        if can_generate_deepfakes(ctx):
            provisions.append(
                ApplicableProvision(
                    id="us-ftc-genai-deepfakes",
                    law="FTC Guidance",
                    article="FTC GenAI Guidance (2023-2024)",
                    title="FTC Guidance on AI-Generated Content and Deepfakes",
                    summary=(
                        "FTC has warned that using AI to generate deceptive content (including "
                        "deepfakes, synthetic voices, and fake reviews) may violate Section 5. "
                        "Companies must not use AI to deceive consumers and should disclose when "
                        "content is AI-generated. FTC has proposed rules specifically targeting "
                        "AI-generated impersonation."
                    ),
                    relevance=(
                        "This system can generate synthetic media or deepfakes, triggering FTC "
                        "disclosure obligations and enforcement risk for deceptive AI-generated "
                        "content."
                    ),
                    regulatory_force=RegulatoryForce.SUPERVISORY_GUIDANCE,
                )
            )

    financial = trigger_ids(matching(FINANCIAL_TRIGGERS, ctx))

    if "sr-11-7-model-risk" in financial:
        provisions.append(
            ApplicableProvision(
                id="us-sr-11-7",
                law=SR_11_7,
                article="SR 11-7",
                title="OCC/Fed Model Risk Management Guidance",
                summary=(
                    "Supervisory guidance applicable to AI/ML models at banking "
                    "institutions. Requires model validation, ongoing monitoring, "
                    "governance framework, and documentation. Models used for material "
                    "decisions (credit, pricing, risk) must have independent "
                    "validation, performance testing, and outcome analysis. Applies to "
                    "AI models regardless of complexity."
                ),
                relevance=(
                    "This AI system operates at a supervised financial institution and uses models "
                    "for decision-making, requiring compliance with SR 11-7 model risk management "
                    "expectations."
                ),
                regulatory_force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            )
        )

    if "cfpb-fair-lending" in financial:
        provisions.append(
            ApplicableProvision(
                id="us-cfpb-fair-lending",
                law="ECOA / Regulation B",
                article="ECOA Section 701, Regulation B",
                title="CFPB Fair Lending AI Guidance",
                summary=(
                    "The Equal Credit Opportunity Act prohibits discrimination in credit "
                    "decisions. CFPB has clarified that creditors using AI/ML models must still "
                    "provide specific and accurate reasons for adverse actions — 'the algorithm "
                    "decided' is not sufficient. AI models must be tested for disparate impact "
                    "across protected classes and creditors must be able to explain individual "
                    "decisions."
                ),
                relevance=(
                    "This AI system is involved in credit decisions. CFPB requires that AI-based "
                    "adverse action reasons be specific and accurate, not generic, and that models "
                    "be tested for fair lending compliance."
                ),
                regulatory_force=RegulatoryForce.BINDING_LAW,
                enforcement_authority="Consumer Financial Protection Bureau",
            )
        )

    if "sec-ai-advisory" in financial:
        provisions.append(
            ApplicableProvision(
                id="us-sec-ai-advisory",
                law="Investment Advisers Act",
                article="SEC AI Examination Priorities",
                title="SEC Examination of AI in Investment Advisory",
                summary=(
                    "SEC examines registered investment advisers' use of AI for conflicts of "
                    "interest, disclosure obligations, and fiduciary duty compliance. Firms using "
                    "AI for portfolio management, recommendations, or trading must disclose AI use "
                    "to clients and ensure AI does not create undisclosed conflicts."
                ),
                relevance=(
                    "This AI system is used in investment advisory or trading, subject to SEC "
                    "examination and fiduciary duty requirements."
                ),
                enforcement_authority="Securities and Exchange Commission",
            )
        )
    return provisions


# =============================================================================
# Artifacts
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    artifacts: List[ArtifactRequirement] = []

    if risk.level in (RiskLevel.HIGH, RiskLevel.LIMITED):
        artifacts.append(
            ArtifactRequirement(
                id="risk-assessment:nist-ai-rmf",
                type=ArtifactType.RISK_ASSESSMENT,
                name="AI Risk Assessment (NIST AI RMF Aligned)",
                required=risk.level is RiskLevel.HIGH,
                legal_basis="NIST AI RMF 1.0",
                description=(
                    "Risk assessment aligned with NIST AI RMF covering Govern, Map, Measure, and "
                    "Manage functions. While voluntary, increasingly expected as standard of care. "
                    "For financial institutions, expected by federal supervisors."
                ),
            )
        )

    if is_genai_product(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.TRANSPARENCY_NOTICE,
                name="AI-Generated Content Disclosure Policy",
                required=False,
                legal_basis="FTC Act Section 5, NIST AI 600-1",
                description=(
                    "Documentation of policies and mechanisms for disclosing AI-generated content "
                    "to consumers. Covers labeling, watermarking, and disclosure practices aligned "
                    "with FTC expectations and NIST GenAI profile recommendations."
                ),
                template_id="transparency-notice",
            )
        )

    if is_financial_services_ai(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="Model Documentation (SR 11-7 Aligned)",
                legal_basis=SR_11_7,
                description=(
                    "Comprehensive model documentation including model purpose, methodology, "
                    "assumptions, limitations, performance metrics, validation results, and "
                    "monitoring plan. Required for supervised financial institutions."
                ),
                template_id="model-card",
            )
        )

    if is_credit_scoring_ai(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.BIAS_AUDIT,
                name="Fair Lending Analysis / Bias Audit",
                legal_basis="ECOA / Regulation B",
                description=(
                    "Analysis of AI credit model for disparate impact across protected classes "
                    "(race, color, religion, national origin, sex, marital status, age). Must "
                    "include testing methodology, results, and remediation plan. CFPB expects "
                    "specific adverse action reason documentation."
                ),
                template_id="bias-audit-nyc",
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def _financial_actions(financial: List[str]) -> List[ActionRequirement]:
    critical = partial(_action, priority=ActionPriority.CRITICAL)
    actions: List[ActionRequirement] = []

    if "sr-11-7-model-risk" in financial:
        actions += [
            critical(
                id="us-sr-11-7-governance",
                title="Establish AI model risk governance framework",
                description=(
                    "Implement model risk governance aligned with SR 11-7: define model inventory, "
                    "establish model risk appetite, assign model ownership, and create model risk "
                    "management policies. Board and senior management must provide effective "
                    "challenge and oversight of model risk."
                ),
                legal_basis=SR_11_7,
                estimated_effort="4-8 weeks",
            ),
            critical(
                id="us-sr-11-7-validation",
                title="Conduct independent model validation",
                description=(
                    "Perform independent validation of AI/ML models as required by SR 11-7. "
                    "Validation must be conducted by persons not involved in model development. "
                    "Must include evaluation of conceptual soundness, outcome analysis, ongoing "
                    "monitoring, and benchmarking. Re-validate when models are materially changed."
                ),
                legal_basis=SR_11_7,
                estimated_effort="4-8 weeks",
            ),
            _action(
                id="us-sr-11-7-monitoring",
                title="Implement ongoing model performance monitoring",
                description=(
                    "Establish ongoing monitoring of AI model performance including tracking of "
                    "key performance metrics, drift detection, outcome analysis, and comparison to "
                    "initial validation benchmarks. Trigger re-validation when performance "
                    "degrades beyond thresholds."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=SR_11_7,
                estimated_effort="3-6 weeks",
            ),
        ]

    if "cfpb-fair-lending" in financial:
        actions += [
            critical(
                id="us-cfpb-adverse-action",
                title="Implement specific adverse action reason codes",
                description=(
                    "When AI model produces adverse credit decisions, provide specific "
                    "and accurate reasons to applicants as required by ECOA. CFPB has "
                    "clarified that generic reasons like 'based on our model' are "
                    "insufficient — the reasons must meaningfully describe the "
                    "principal factors. Use model explainability techniques to generate "
                    "specific reason codes."
                ),
                legal_basis="ECOA Section 701(d), Regulation B §1002.9",
                estimated_effort="3-6 weeks",
            ),
            critical(
                id="us-cfpb-fair-lending-testing",
                title="Conduct fair lending testing on AI credit model",
                description=(
                    "Test AI credit model for disparate impact across protected classes (race, "
                    "color, religion, national origin, sex, marital status, age). Document testing "
                    "methodology, results, and any remediation steps. CFPB expects proactive "
                    "testing, not just reactive review after complaints."
                ),
                legal_basis="ECOA / Regulation B",
                estimated_effort="4-8 weeks",
            ),
        ]

    if "sec-ai-advisory" in financial:
        actions.append(
            critical(
                id="us-sec-ai-disclosure",
                title="Disclose AI use in investment advisory",
                description=(
                    "Disclose to clients the use of AI in investment recommendations, portfolio "
                    "management, or trading. Address potential conflicts of interest from "
                    "AI-driven decisions. Ensure AI use aligns with fiduciary duty obligations and "
                    "client's stated investment objectives."
                ),
                legal_basis="Investment Advisers Act",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    actions = [
        _action(
            id="us-nist-rmf-alignment",
            title="Align with NIST AI Risk Management Framework",
            description=(
                "Implement AI risk management practices aligned with NIST AI RMF 1.0. "
                "Address the four core functions: Govern (governance structure, "
                "policies), Map (context and risk identification), Measure (analysis "
                "and tracking), and Manage (prioritisation and response). While "
                "voluntary, increasingly referenced by federal agencies as expected "
                "practice."
            ),
            priority=ActionPriority.RECOMMENDED,
            legal_basis="NIST AI RMF 1.0",
            estimated_effort="4-8 weeks",
        )
    ]

    if matching(FTC_TRIGGERS, ctx):
        actions.append(
            _action(
                id="us-ftc-transparency",
                title="Ensure truthful AI marketing and transparency",
                description=(
                    "Review all marketing claims about AI capabilities for accuracy. Do not "
                    "overstate AI capabilities, make unsubstantiated efficacy claims, or hide "
                    "material AI involvement in decisions. FTC has enforcement precedent against "
                    "AI companies for deceptive claims."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=FTC_SECTION_5,
                estimated_effort="1-2 weeks",
            )
        )

    if is_high_impact_automated_decision(ctx):
        actions.append(
            _action(
                id="us-ftc-fair-ai-decisions",
                title="Test and document AI decision fairness",
                description=(
                    "Test AI decision systems for unfair outcomes across protected classes and "
                    "demographic groups. FTC considers AI decisions that cause substantial injury, "
                    "are not reasonably avoidable by consumers, and are not outweighed by benefits "
                    "as 'unfair practices'. Document testing methodology and results."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis=FTC_SECTION_5,
                estimated_effort="3-6 weeks",
            )
        )

    if is_genai_product(ctx):
        actions += [
            _action(
                id="us-nist-genai-risk-management",
                title="Address NIST GenAI risk profile areas",
                description=(
                    "Map and address the 12 GenAI-specific risk areas identified in "
                    "NIST AI 600-1: CBRN information, confabulation/hallucination, data "
                    "privacy, environmental impact, harmful bias, homogenisation, "
                    "human-AI configuration, information integrity, information "
                    "security, intellectual property, obscene/degrading content, and "
                    "value chain risks. Document risk assessments and mitigations for "
                    "each applicable area."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="NIST AI 600-1",
                estimated_effort="4-8 weeks",
            ),
            _action(
                id="us-ftc-genai-disclosure",
                title="Implement AI-generated content disclosure",
                description=(
                    "Establish clear disclosure mechanisms for AI-generated content. "
                    "FTC guidance indicates that failing to disclose AI involvement "
                    "when consumers would expect human creation may be deceptive. "
                    "Implement labeling, watermarking, or other provenance mechanisms. "
                    "Pay particular attention to synthetic media that could be mistaken "
                    "for real content."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="FTC Act Section 5, FTC GenAI Guidance",
                estimated_effort="2-4 weeks",
            ),
        ]

    if is_financial_services_ai(ctx):
        actions += _financial_actions(trigger_ids(matching(FINANCIAL_TRIGGERS, ctx)))
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2024-10-30",
        description=(
            "Executive Order 14110 on Safe, Secure, and Trustworthy AI established AI safety "
            "requirements for federal government use and directed agencies to develop AI guidance."
        ),
        provision="EO 14110",
        is_mandatory=False,
    ),
    ComplianceDeadline(
        date="2024-07-26",
        description=(
            "NIST AI 600-1 (Generative AI Profile) published, providing a GenAI-specific companion "
            "to the AI RMF."
        ),
        provision="NIST AI 600-1",
        is_mandatory=False,
    ),
]


def build_timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "US federal AI regulation is primarily enforcement-driven rather than prescriptive. The "
        "FTC, CFPB, SEC, and banking regulators enforce existing authorities against AI misuse. "
        "There is no single 'effective date' — obligations arise from existing statutes."
    ]
    if risk.level is RiskLevel.HIGH:
        notes.append(
            "Financial services AI is subject to immediate supervisory expectations. SR 11-7 model "
            "risk management, ECOA fair lending, and SEC fiduciary duties apply now to AI/ML "
            "models."
        )
    if is_genai_product(ctx):
        notes.append(
            "NIST AI 600-1 (GenAI risk profile) was published in July 2024. While voluntary, it is "
            "increasingly referenced by federal agencies as a standard of practice for GenAI risk "
            "management."
        )
    return ComplianceTimeline(effective_date=None, deadlines=DEADLINES, notes=notes)


# =============================================================================
# Module
# =============================================================================


class UsFederalModule(JurisdictionModule):
    region = "US"
    description = "FTC, CFPB, SEC and banking supervisors; NIST AI RMF"

    @property
    def id(self) -> str:
        return "us-federal"

    @property
    def name(self) -> str:
        return "US Federal AI Regulatory Framework"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_FEDERAL

    @property
    def ladder(self) -> RiskLadder:
        return US_FEDERAL_LADDER

    @property
    def triggers(self):
        return (*FTC_TRIGGERS, *NIST_TRIGGERS, *FINANCIAL_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(ctx, self.get_risk_level(ctx))
