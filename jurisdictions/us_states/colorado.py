"""
Colorado AI Act (SB 24-205)

A high-risk AI system makes, or is a substantial factor in making, a
consequential decision about a consumer in one of eight areas. Developer
and deployer duties apply from February 1, 2026.
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
from ..predicates import (
    has_agentic_capabilities,
    is_consumer_facing,
    is_financial_services_ai,
    is_genai_product,
    makes_material_decisions,
)

EFFECTIVE_DATE = "2026-02-01"
CO_AI_ACT = "Colorado AI Act"

_action = partial(
    ActionRequirement,
    jurisdictions=["us-co"],
    priority=ActionPriority.CRITICAL,
    deadline=EFFECTIVE_DATE,
)
_provision = partial(ApplicableProvision, law=CO_AI_ACT, regulatory_force=RegulatoryForce.BINDING_LAW)


def _area(area_id: str, name: str, description: str, populations=(), keywords=(), predicate=None) -> Trigger:
    """A consequential decision area matched by population, keyword or an extra predicate."""

    def matches(ctx: ProductContext) -> bool:
        return (
            (bool(populations) and ctx.affects(*populations))
            or ctx.description_mentions(*keywords)
            or (predicate is not None and predicate(ctx))
        )

    return Trigger(id=area_id, name=name, citation=description, predicate=matches)


def _insurance_pricing(ctx: ProductContext) -> bool:
    fs = ctx.sector_context.financial_services if ctx.sector_context else None
    return fs is not None and fs.involves_insurance_pricing


CONSEQUENTIAL_DECISION_AREAS = (
    _area(
        "co-education",
        "Education",
        "Decisions related to enrollment, admission, assessment, or discipline in education",
        populations=(UserPopulation.STUDENTS,),
        keywords=("education", "enrollment", "admission", "academic"),
    ),
    _area(
        "co-employment",
        "Employment",
        "Decisions related to hiring, termination, promotion, compensation, or other employment terms",
        populations=(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES),
        keywords=("hiring", "recruitment", "employment", "promotion", "termination", "resume screen"),
    ),
    _area(
        "co-financial-services",
        "Financial Services",
        "Decisions related to lending, credit, insurance, or other financial products and services",
        populations=(UserPopulation.CREDIT_APPLICANTS,),
        keywords=("credit", "lending", "loan", "financial service", "banking"),
        predicate=is_financial_services_ai,
    ),
    _area(
        "co-government-services",
        "Government Services",
        "Decisions related to access to government services, benefits, or programs",
        keywords=(
            "government service",
            "public benefit",
            "public assistance",
            "welfare",
            "social benefit",
            "government program",
        ),
    ),
    _area(
        "co-healthcare",
        "Healthcare",
        "Decisions related to access to healthcare services, treatment, or insurance coverage",
        populations=(UserPopulation.PATIENTS,),
        keywords=("healthcare", "medical", "health service", "clinical", "diagnosis", "treatment"),
        predicate=lambda ctx: ctx.has_data(DataCategory.HEALTH),
    ),
    _area(
        "co-housing",
        "Housing",
        "Decisions related to renting, buying, or obtaining housing",
        populations=(UserPopulation.TENANTS,),
        keywords=("housing", "rental", "tenant screen", "landlord", "lease"),
    ),
    _area(
        "co-insurance",
        "Insurance",
        "Decisions related to insurance underwriting, pricing, claims, or coverage",
        keywords=("insurance", "underwriting", "actuarial", "claims processing"),
        predicate=_insurance_pricing,
    ),
    _area(
        "co-legal-services",
        "Legal Services",
        "Decisions related to access to legal services or legal outcomes",
        keywords=("legal service", "legal aid", "judicial", "court", "sentencing", "parole"),
    ),
)


def consequential_areas(ctx: ProductContext) -> List[Trigger]:
    return matching(CONSEQUENTIAL_DECISION_AREAS, ctx)


def is_high_risk_system(ctx: ProductContext) -> bool:
    return bool(consequential_areas(ctx)) and makes_material_decisions(ctx)


def is_developer(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        ctx.product_type == ProductType.FOUNDATION_MODEL
        or ctx.description_mentions("develop", "provider", "vendor", "build")
        or (genai is not None and genai.foundation_model_source == FoundationModelSource.SELF_TRAINED)
    )


def is_deployer(ctx: ProductContext) -> bool:
    """
    Anyone using a high-risk system is a deployer, except a pure foundation
    model provider with no consumer-facing use.
    """
    return not (ctx.product_type == ProductType.FOUNDATION_MODEL and not is_consumer_facing(ctx))


def _genai_in_consequential_area(ctx: ProductContext) -> bool:
    return is_genai_product(ctx) and bool(consequential_areas(ctx))


# =============================================================================
# Decision ladder
# =============================================================================


def _area_ids(ctx: ProductContext) -> List[str]:
    return trigger_ids(consequential_areas(ctx))


COLORADO_LADDER = RiskLadder(
    jurisdiction="us-co",
    rungs=[
        RiskRung(
            id="consequential-decision",
            level=RiskLevel.HIGH,
            applies=is_high_risk_system,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes consequential decisions in the following area(s) under "
                    "the Colorado AI Act (SB 24-205): "
                    f"{', '.join(a.name for a in consequential_areas(ctx))}. The decision impact is "
                    f"{ctx.decision_impact.value}, classifying this as a high-risk AI system "
                    "requiring impact assessments, risk management policies, consumer notice, and "
                    "algorithmic discrimination prevention."
                ),
                categories=_area_ids(ctx),
                provisions=["SB 24-205 §6-1-1702", "SB 24-205 §6-1-1703", "SB 24-205 §6-1-1704"],
            ),
        ),
        RiskRung(
            id="consumer-data",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: bool(consequential_areas(ctx))
            or ctx.has_data(DataCategory.PERSONAL)
            or ctx.affects(UserPopulation.CONSUMERS),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system processes consumer data or operates in a consequential "
                    "decision area under the Colorado AI Act but does not make material or "
                    "determinative decisions. General transparency obligations and consumer "
                    "notification requirements may apply."
                ),
                categories=_area_ids(ctx),
                provisions=["SB 24-205 §6-1-1704"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not make consequential decisions about consumers in any of the "
            "areas regulated by the Colorado AI Act (SB 24-205). No mandatory obligations apply "
            "under this law."
        ),
    ),
)


# =============================================================================
# Provisions
# =============================================================================


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    provisions = [
        _provision(
            id="co-sb205-scope",
            article="SB 24-205 §6-1-1702",
            title="High-Risk AI System Definition",
            summary=(
                "A high-risk AI system is any AI system that, when deployed, makes or is a "
                "substantial factor in making a consequential decision concerning a consumer. "
                "Consequential decisions include those in education, employment, financial "
                "services, government services, healthcare, housing, insurance, and legal services."
            ),
            relevance=risk.justification,
            enforcement_authority="Colorado Attorney General",
        )
    ]

    if risk.level is RiskLevel.HIGH:
        if is_developer(ctx):
            provisions.append(
                _provision(
                    id="co-sb205-developer-duties",
                    article="SB 24-205 §6-1-1703",
                    title="Developer Duties",
                    summary=(
                        "Developers must use reasonable care to protect consumers from algorithmic "
                        "discrimination. Must make available to deployers: documentation describing "
                        "high-risk uses, known limitations, data used in development, mitigation "
                        "measures, and how to use the system to comply with deployer obligations."
                    ),
                    relevance=(
                        "As a developer of this high-risk AI system, you must provide deployers with "
                        "comprehensive documentation and exercise reasonable care to prevent "
                        "algorithmic discrimination."
                    ),
                )
            )
        if is_deployer(ctx):
            provisions += [
                _provision(
                    id="co-sb205-deployer-risk-mgmt",
                    article="SB 24-205 §6-1-1704(1)",
                    title="Deployer Risk Management Policy",
                    summary=(
                        "Deployers must implement a risk management policy and program to govern "
                        "the deployment of high-risk AI systems. The policy must specify "
                        "principles, processes, and personnel for oversight."
                    ),
                    relevance=(
                        "As a deployer of this high-risk AI system, a risk management policy and "
                        "program is required."
                    ),
                ),
                _provision(
                    id="co-sb205-deployer-impact-assessment",
                    article="SB 24-205 §6-1-1704(2)",
                    title="Deployer Impact Assessment",
                    summary=(
                        "Deployers must complete an impact assessment for each high-risk AI system "
                        "before deployment and annually thereafter. The assessment must cover the "
                        "purpose, intended uses, known risks of algorithmic discrimination, data "
                        "inputs, outputs, and safeguards."
                    ),
                    relevance=(
                        "An impact assessment is required before deploying this high-risk AI "
                        "system in Colorado."
                    ),
                ),
                _provision(
                    id="co-sb205-deployer-notice",
                    article="SB 24-205 §6-1-1704(3)",
                    title="Consumer Notice Requirements",
                    summary=(
                        "Deployers must notify consumers that the AI system is being used to make "
                        "or substantially factor into a consequential decision. Must provide a "
                        "description of the system, contact information, and the right to opt out "
                        "of profiling."
                    ),
                    relevance=(
                        "Consumers must be notified that this AI system is used in consequential "
                        "decisions."
                    ),
                ),
            ]
        provisions.append(
            _provision(
                id="co-sb205-algo-discrimination",
                article="SB 24-205 §6-1-1701(1)",
                title="Algorithmic Discrimination",
                summary=(
                    "Algorithmic discrimination means any condition where the use of an AI system "
                    "results in an unlawful differential treatment or impact that disfavors an "
                    "individual or group based on age, color, disability, ethnicity, genetic "
                    "information, language, national origin, race, religion, reproductive health, "
                    "sex, veteran status, or other protected class."
                ),
                relevance=(
                    "Developers and deployers must use reasonable care to protect consumers from "
                    "algorithmic discrimination in this high-risk AI system."
                ),
            )
        )

    if _genai_in_consequential_area(ctx):
        provisions.append(
            _provision(
                id="co-sb205-genai-consequential",
                article="SB 24-205 §6-1-1702, §6-1-1704",
                title="GenAI in Consequential Decisions",
                summary=(
                    "When generative AI systems are used in or to support consequential decisions, "
                    "all high-risk AI system obligations apply. The use of GenAI does not exempt "
                    "deployers from impact assessment, notice, or anti-discrimination requirements."
                ),
                relevance=(
                    "This system uses generative AI in a consequential decision area, triggering "
                    "full Colorado AI Act obligations."
                ),
            )
        )
    return provisions


# =============================================================================
# Artifacts
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    """Artifacts are only required for high-risk systems."""
    if risk.level is not RiskLevel.HIGH:
        return []

    artifacts: List[ArtifactRequirement] = []
    if is_deployer(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.ALGORITHMIC_IMPACT,
                name="Colorado AI Act Impact Assessment",
                legal_basis="SB 24-205 §6-1-1704(2)",
                description=(
                    "Impact assessment covering the purpose, intended uses, known risks of "
                    "algorithmic discrimination, data categories used, outputs, oversight measures, "
                    "and safeguards implemented. Must be completed before deployment and updated "
                    "annually."
                ),
                template_id="algorithmic-impact",
            )
        )

    artifacts += [
        ArtifactRequirement(
            id="risk-assessment:co-risk-management",
            type=ArtifactType.RISK_ASSESSMENT,
            name="Colorado AI Act Risk Management Policy",
            legal_basis="SB 24-205 §6-1-1704(1)",
            description=(
                "Risk management policy and program documentation specifying principles, "
                "processes, and personnel governing the deployment of the high-risk AI system. "
                "Must address algorithmic discrimination prevention."
            ),
        ),
        ArtifactRequirement(
            type=ArtifactType.TRANSPARENCY_NOTICE,
            name="Colorado Consumer AI Notice",
            legal_basis="SB 24-205 §6-1-1704(3)",
            description=(
                "Consumer-facing notice that the AI system is being used to make or substantially "
                "factor into a consequential decision. Must include system description, contact "
                "information, and information about the right to opt out of profiling."
            ),
            template_id="transparency-notice",
        ),
    ]

    if is_developer(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.MODEL_CARD,
                name="Colorado Developer Disclosure Documentation",
                legal_basis="SB 24-205 §6-1-1703(2)",
                description=(
                    "Documentation for deployers describing the high-risk AI system: intended uses, "
                    "known limitations and risks, data used in development, mitigation measures for "
                    "algorithmic discrimination, and guidance for deployer compliance."
                ),
                template_id="model-card",
            )
        )

    if is_financial_services_ai(ctx) or ctx.affects(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES):
        artifacts.append(
            ArtifactRequirement(
                id="bias-audit:co-algorithmic-discrimination",
                type=ArtifactType.BIAS_AUDIT,
                name="Algorithmic Discrimination Analysis",
                legal_basis="SB 24-205 §6-1-1701(1), §6-1-1704(1)",
                description=(
                    "Analysis documenting testing for algorithmic discrimination across protected "
                    "classes (age, color, disability, ethnicity, genetic information, language, "
                    "national origin, race, religion, reproductive health, sex, veteran status). "
                    "Part of the required risk management program."
                ),
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


def _deployer_actions() -> List[ActionRequirement]:
    return [
        _action(
            id="co-risk-management-policy",
            title="Implement risk management policy and program",
            description=(
                "Establish a risk management policy governing deployment of this high-risk AI "
                "system. The policy must specify principles for AI governance, processes for "
                "identifying and mitigating algorithmic discrimination, personnel responsible for "
                "oversight, and employee training requirements."
            ),
            legal_basis="SB 24-205 §6-1-1704(1)",
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="co-impact-assessment",
            title="Complete impact assessment before deployment",
            description=(
                "Complete an impact assessment covering the purpose, intended uses, technology "
                "type, known risks of algorithmic discrimination, data categories used as inputs "
                "and generated as outputs, performance metrics, and safeguards. Must be updated "
                "annually after initial deployment."
            ),
            legal_basis="SB 24-205 §6-1-1704(2)",
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="co-consumer-notice",
            title="Provide consumer notice of AI use in consequential decisions",
            description=(
                "Notify consumers that a high-risk AI system is being used to make or substantially "
                "factor into a consequential decision. The notice must include a description of the "
                "AI system, contact information for the deployer, and information about the "
                "consumer's right to opt out of profiling in consequential decisions."
            ),
            legal_basis="SB 24-205 §6-1-1704(3)",
            estimated_effort="1-2 weeks",
        ),
        _action(
            id="co-opt-out-mechanism",
            title="Implement consumer opt-out for profiling",
            description=(
                "Provide consumers with the ability to opt out of the deployer's processing of "
                "their personal data for purposes of profiling in furtherance of consequential "
                "decisions. The opt-out mechanism must be clearly accessible and easy to use."
            ),
            legal_basis="SB 24-205 §6-1-1704(3)(c)",
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="co-discrimination-testing",
            title="Test for algorithmic discrimination",
            description=(
                "Conduct testing to identify and mitigate algorithmic discrimination across "
                "protected classes defined by the Colorado AI Act (age, color, disability, "
                "ethnicity, genetic information, language, national origin, race, religion, "
                "reproductive health, sex, veteran status). Document methodology, results, and "
                "remediation steps."
            ),
            legal_basis="SB 24-205 §6-1-1701(1), §6-1-1704(1)",
            estimated_effort="3-6 weeks",
        ),
    ]


def _developer_actions() -> List[ActionRequirement]:
    return [
        _action(
            id="co-developer-reasonable-care",
            title="Exercise reasonable care to prevent algorithmic discrimination",
            description=(
                "As a developer, use reasonable care to protect consumers from known or reasonably "
                "foreseeable risks of algorithmic discrimination arising from the intended uses of "
                "the AI system. Document design choices, data selection criteria, and bias "
                "mitigation measures."
            ),
            legal_basis="SB 24-205 §6-1-1703(1)",
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="co-developer-documentation",
            title="Provide deployer documentation and transparency notice",
            description=(
                "Make available to deployers and publish on your website: a general statement "
                "describing the types of high-risk AI systems the developer develops, documentation "
                "covering known limitations, intended uses, data used in development, risk "
                "mitigation measures, and guidance for deployer compliance."
            ),
            legal_basis="SB 24-205 §6-1-1703(2)-(3)",
            estimated_effort="2-4 weeks",
        ),
    ]


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    """LIMITED systems carry no actions; all duties attach to high-risk systems."""
    if risk.level is not RiskLevel.HIGH:
        return []

    actions: List[ActionRequirement] = []
    if is_deployer(ctx):
        actions += _deployer_actions()
    if is_developer(ctx):
        actions += _developer_actions()

    actions.append(
        _action(
            id="co-ag-notification",
            title="Establish process for AG notification of discrimination",
            description=(
                "Establish a process to notify the Colorado Attorney General within 90 days if the "
                "deployer discovers that the high-risk AI system has caused algorithmic "
                "discrimination. The notification must describe the discrimination, the affected "
                "population, and remediation steps taken."
            ),
            priority=ActionPriority.IMPORTANT,
            legal_basis="SB 24-205 §6-1-1704(4)",
            estimated_effort="1-2 weeks",
        )
    )

    if _genai_in_consequential_area(ctx):
        actions.append(
            _action(
                id="co-genai-consequential-controls",
                title="Implement controls for GenAI use in consequential decisions",
                description=(
                    "When using generative AI in consequential decisions, implement additional "
                    "controls: validate GenAI outputs before they influence decisions, document how "
                    "GenAI outputs are used in the decision process, and ensure human oversight of "
                    "GenAI-assisted consequential decisions. GenAI hallucination risks must be "
                    "addressed in the impact assessment."
                ),
                legal_basis="SB 24-205 §6-1-1702, §6-1-1704",
                estimated_effort="2-4 weeks",
            )
        )

    if has_agentic_capabilities(ctx):
        actions.append(
            _action(
                id="co-agentic-oversight",
                title="Implement oversight for agentic AI in consequential decisions",
                description=(
                    "For AI systems with agentic capabilities making consequential decisions, "
                    "implement human checkpoints before autonomous actions that affect consumers. "
                    "Document the scope of autonomous decision authority, action logging, and "
                    "failsafe mechanisms in the impact assessment."
                ),
                legal_basis="SB 24-205 §6-1-1704(1)-(2)",
                estimated_effort="3-6 weeks",
            )
        )
    return actions


# =============================================================================
# Timeline
# =============================================================================


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "The Colorado AI Act (SB 24-205) was signed into law on May 17, 2024, with an effective "
        "date of February 1, 2026."
    ]
    if risk.level is RiskLevel.HIGH:
        notes += [
            "CRITICAL: All high-risk AI system obligations take effect on February 1, 2026. "
            "Deployers must have risk management policies, impact assessments, and consumer notice "
            "mechanisms in place by this date.",
            "Impact assessments must be updated annually after initial deployment. Discovery of "
            "algorithmic discrimination must be reported to the AG within 90 days.",
        ]
    elif risk.level is RiskLevel.LIMITED:
        notes.append(
            "While the system is not currently classified as high-risk under the Colorado AI Act, "
            "changes in deployment context (e.g., using the system for consequential decisions) "
            "could trigger full obligations."
        )

    return ComplianceTimeline(
        effective_date=EFFECTIVE_DATE,
        deadlines=[
            ComplianceDeadline(
                date=EFFECTIVE_DATE,
                description=(
                    "Colorado AI Act (SB 24-205) takes effect. All developer and deployer "
                    "obligations for high-risk AI systems become enforceable."
                ),
                provision="SB 24-205",
            )
        ],
        notes=notes,
    )


class ColoradoModule(JurisdictionModule):
    region = "US"
    description = "Colorado AI Act: consequential decisions by high-risk AI systems"

    @property
    def id(self) -> str:
        return "us-co"

    @property
    def name(self) -> str:
        return "Colorado AI Act (SB 24-205)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_CO

    @property
    def ladder(self) -> RiskLadder:
        return COLORADO_LADDER

    @property
    def triggers(self):
        return CONSEQUENTIAL_DECISION_AREAS

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
