"""
China AI Regulations (PIPL, CAC GenAI, Deep Synthesis, Recommendation Algorithms)

DECISION LADDER:
  1. public-genai         -> HIGH (public-facing GenAI service)
  2. deep-synthesis       -> HIGH (any deep synthesis trigger)
  3. recommendation       -> LIMITED (recommendation algorithm service)
  4. internal-genai       -> LIMITED (GenAI not offered to the public)
  5. automated-decisions  -> LIMITED (PIPL, fully automated material decisions)
  fallback                -> MINIMAL

Algorithm filing duties follow the reported CAC filing status: an approved
filing downgrades the action to maintenance.
"""

from __future__ import annotations

from functools import partial
from typing import List

from shared.models import (
    ActionPriority,
    ActionRequirement,
    AlgorithmFilingStatus,
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
    RiskClassification,
    RiskLevel,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import is_consumer_facing, is_fully_automated, is_genai_product, makes_material_decisions

CAC_GENAI = "CAC Interim Measures for GenAI Services"
DEEP_SYNTHESIS = "Provisions on Deep Synthesis"
RECOMMENDATION = "Provisions on Recommendation Algorithms"
PIPL = "PIPL (Personal Information Protection Law)"

PIPL_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
    DataCategory.MINOR,
)

_action = partial(ActionRequirement, jurisdictions=["china"])
_cac = partial(ApplicableProvision, law=CAC_GENAI)
_pipl = partial(ApplicableProvision, law=PIPL)


# =============================================================================
# Triggers
# =============================================================================


def _generates_content(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (genai is not None and genai.generates_content) or ctx.product_type == ProductType.GENERATOR


def is_public_facing_genai(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    is_genai = (genai is not None and genai.generates_content) or ctx.product_type in (
        ProductType.GENERATOR,
        ProductType.FOUNDATION_MODEL,
    )
    return is_genai and is_consumer_facing(ctx)


def _trains_models(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        genai is not None
        and (genai.uses_foundation_model or genai.finetuning_performed)
        and ctx.training_data.uses_training_data
    )


def _face_synthesis(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    if genai is None:
        return False
    return genai.can_generate_deepfakes or (
        OutputModality.IMAGE in genai.output_modalities
        and OutputModality.VIDEO in genai.output_modalities
    )


def _text_synthesis(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and genai.generates_content and OutputModality.TEXT in genai.output_modalities


CAC_GENAI_TRIGGERS = (
    Trigger(
        id="cn-cac-genai-public",
        name="Public-Facing GenAI Service",
        citation=CAC_GENAI,
        predicate=is_public_facing_genai,
    ),
    Trigger(
        id="cn-cac-genai-training-data",
        name="GenAI Training Data Legality",
        citation=CAC_GENAI,
        predicate=_trains_models,
    ),
    Trigger(
        id="cn-cac-genai-content-labeling",
        name="AI-Generated Content Labeling",
        citation=CAC_GENAI,
        predicate=_generates_content,
    ),
    Trigger(
        id="cn-cac-genai-content-review",
        name="GenAI Content Review Obligation",
        citation=CAC_GENAI,
        predicate=_generates_content,
    ),
)

DEEP_SYNTHESIS_TRIGGERS = (
    Trigger(
        id="cn-deep-synthesis-face",
        name="Face Generation/Manipulation (Deep Synthesis)",
        citation=DEEP_SYNTHESIS,
        predicate=_face_synthesis,
    ),
    Trigger(
        id="cn-deep-synthesis-voice",
        name="Voice Synthesis/Cloning (Deep Synthesis)",
        citation=DEEP_SYNTHESIS,
        predicate=lambda ctx: ctx.generative_ai_context is not None
        and ctx.generative_ai_context.can_generate_synthetic_voice,
    ),
    Trigger(
        id="cn-deep-synthesis-text",
        name="Text Generation (Deep Synthesis)",
        citation=DEEP_SYNTHESIS,
        predicate=_text_synthesis,
    ),
)

RECOMMENDATION_TRIGGERS = (
    Trigger(
        id="cn-recommendation-algo",
        name="Recommendation Algorithm Service",
        citation=RECOMMENDATION,
        predicate=lambda ctx: ctx.product_type == ProductType.RECOMMENDER
        or ctx.description_mentions(
            "recommend",
            "personali",
            "content feed",
            "newsfeed",
            "suggestion engine",
            "ranking algorithm",
        ),
    ),
)


def is_deep_synthesis_product(ctx: ProductContext) -> bool:
    return bool(matching(DEEP_SYNTHESIS_TRIGGERS, ctx))


def is_recommendation_system(ctx: ProductContext) -> bool:
    return bool(matching(RECOMMENDATION_TRIGGERS, ctx))


def requires_algorithm_filing(ctx: ProductContext) -> bool:
    return is_public_facing_genai(ctx) or is_recommendation_system(ctx) or is_deep_synthesis_product(ctx)


def processes_personal_data(ctx: ProductContext) -> bool:
    return ctx.has_data(*PIPL_DATA)


def _filing_status(ctx: ProductContext):
    genai = ctx.generative_ai_context
    return genai.algorithm_filing_status if genai is not None else None


# =============================================================================
# Decision ladder
# =============================================================================


def _all_categories(ctx: ProductContext) -> List[str]:
    return trigger_ids(
        matching(CAC_GENAI_TRIGGERS, ctx)
        + matching(DEEP_SYNTHESIS_TRIGGERS, ctx)
        + matching(RECOMMENDATION_TRIGGERS, ctx)
    )


def _public_genai_finding(ctx: ProductContext) -> Finding:
    provisions = [CAC_GENAI]
    if is_deep_synthesis_product(ctx):
        provisions.append(DEEP_SYNTHESIS)
    return Finding(
        justification=(
            "This is a public-facing generative AI service in China, triggering mandatory CAC "
            "algorithm filing, training data legality verification, content review obligations, "
            "AI-generated content labeling, user identity verification, and complaint mechanisms. "
            "Non-compliance can result in service suspension."
        ),
        categories=_all_categories(ctx),
        provisions=provisions,
    )


def _deep_synthesis_finding(ctx: ProductContext) -> Finding:
    names = "; ".join(t.name for t in matching(DEEP_SYNTHESIS_TRIGGERS, ctx))
    return Finding(
        justification=(
            f"This AI system has deep synthesis capabilities ({names}), triggering mandatory "
            f"labeling, technology support provider obligations, and potential algorithm filing "
            f"under China's deep synthesis regulations."
        ),
        categories=_all_categories(ctx),
        provisions=[DEEP_SYNTHESIS],
    )


CHINA_LADDER = RiskLadder(
    jurisdiction="china",
    rungs=[
        RiskRung(
            id="public-genai",
            level=RiskLevel.HIGH,
            applies=is_public_facing_genai,
            explain=_public_genai_finding,
        ),
        RiskRung(
            id="deep-synthesis",
            level=RiskLevel.HIGH,
            applies=is_deep_synthesis_product,
            explain=_deep_synthesis_finding,
        ),
        RiskRung(
            id="recommendation",
            level=RiskLevel.LIMITED,
            applies=is_recommendation_system,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system uses recommendation algorithms, triggering algorithm filing "
                    "requirements, user profiling transparency obligations, and opt-out mechanisms "
                    "under China's recommendation algorithm provisions."
                ),
                categories=trigger_ids(matching(RECOMMENDATION_TRIGGERS, ctx)),
                provisions=[RECOMMENDATION],
            ),
        ),
        RiskRung(
            id="internal-genai",
            level=RiskLevel.LIMITED,
            applies=is_genai_product,
            explain=lambda ctx: Finding(
                justification=(
                    "This GenAI system is not public-facing but may still be subject to certain "
                    "Chinese AI regulations depending on deployment scope. Internal-only GenAI has "
                    "reduced obligations but training data legality verification may still apply."
                ),
                categories=["cn-internal-genai"],
                provisions=[f"{CAC_GENAI} (limited)"],
            ),
        ),
        RiskRung(
            id="automated-decisions",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: makes_material_decisions(ctx) and is_fully_automated(ctx),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system makes automated decisions affecting individuals in China. "
                    "General personal information protection obligations under PIPL may apply."
                ),
                categories=["cn-pipl-automated"],
                provisions=[PIPL],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific Chinese AI regulatory obligations. It is not "
            "a public-facing GenAI service, does not use deep synthesis technology, and does not "
            "employ recommendation algorithms."
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

    if matching(CAC_GENAI_TRIGGERS, ctx):
        provisions += [
            _cac(
                id="cn-cac-algorithm-filing",
                article="Article 17",
                title="Algorithm Filing with CAC",
                summary=(
                    "Public-facing GenAI service providers must file their algorithm with the "
                    "Cyberspace Administration of China (CAC) through the Internet Information "
                    "Service Algorithm Filing System within 10 working days of providing the "
                    "service."
                ),
                relevance=(
                    "This GenAI service must be filed with CAC before or within 10 working days of "
                    "launch."
                ),
            ),
            _cac(
                id="cn-cac-training-data",
                article="Article 7",
                title="Training Data Legality Verification",
                summary=(
                    "GenAI providers must verify the legality of training data sources, ensure "
                    "intellectual property rights are respected, obtain consent for personal "
                    "information, and ensure training data does not contain content prohibited by "
                    "Chinese law. Training data quality measures must be implemented."
                ),
                relevance=(
                    "Training data used by this GenAI system must meet legality and quality "
                    "requirements."
                ),
            ),
            _cac(
                id="cn-cac-content-review",
                article="Articles 4, 9",
                title="Content Review and Core Values Alignment",
                summary=(
                    "Generated content must adhere to socialist core values, must not subvert "
                    "state power, endanger national security, damage national unity, promote "
                    "terrorism, incite ethnic hatred, contain violence, obscenity, false "
                    "information, or content prohibited by laws. Providers must establish content "
                    "review mechanisms."
                ),
                relevance=(
                    "This GenAI service must implement content review mechanisms ensuring "
                    "generated content compliance with Chinese law."
                ),
            ),
            _cac(
                id="cn-cac-content-labeling",
                article="Article 12",
                title="Mandatory AI-Generated Content Labeling",
                summary=(
                    "All AI-generated content must be labelled/watermarked in accordance with "
                    "relevant national standards. Labels must not be easily removable. This "
                    "applies to text, images, audio, video, and other generated modalities."
                ),
                relevance=(
                    "All content generated by this system must be labelled as AI-generated with "
                    "non-removable watermarks."
                ),
            ),
            _cac(
                id="cn-cac-user-identity",
                article="Article 11",
                title="User Identity Verification",
                summary=(
                    "GenAI service providers must verify user identity through real-name "
                    "registration in accordance with existing Chinese cybersecurity regulations."
                ),
                relevance="Users of this GenAI service must undergo real-name identity verification.",
            ),
            _cac(
                id="cn-cac-complaint-mechanism",
                article="Article 15",
                title="Complaint and Reporting Mechanism",
                summary=(
                    "GenAI service providers must establish convenient complaint and reporting "
                    "mechanisms, publicly disclose complaint channels, accept and process public "
                    "complaints, and provide timely feedback."
                ),
                relevance="This GenAI service must have a user complaint and reporting mechanism.",
            ),
            _cac(
                id="cn-cac-compliance-personnel",
                article="Articles 17-18",
                title="Compliance and Security Personnel Designation",
                summary=(
                    "GenAI service providers must designate dedicated compliance and security "
                    "personnel responsible for overseeing content review, safety assessments, "
                    "training data verification, user complaint handling, and incident response. "
                    "Providers must accept supervision and inspection by relevant authorities and "
                    "cooperate by providing necessary technical and data support for regulatory "
                    "review."
                ),
                relevance=(
                    "This GenAI service must designate compliance and security personnel and "
                    "accept regulatory supervision."
                ),
            ),
        ]

    if is_genai_product(ctx) and not is_public_facing_genai(ctx):
        provisions.append(
            _cac(
                id="cn-cac-internal-deployment-note",
                article="General Scope",
                title="Internal vs Public Deployment Scope",
                summary=(
                    "Note: CAC GenAI measures apply primarily to GenAI services provided to the "
                    "public within China. Purely internal-use systems may have reduced "
                    "obligations, but algorithm filing may still apply."
                ),
                relevance=(
                    "This GenAI system appears to be non-public-facing. Obligations may "
                    "be reduced but not eliminated — algorithm filing may still apply "
                    "depending on deployment scope."
                ),
            )
        )

    if is_deep_synthesis_product(ctx):
        synthesis = partial(ApplicableProvision, law=DEEP_SYNTHESIS)
        provisions += [
            synthesis(
                id="cn-deep-synthesis-labeling",
                article="Articles 16-17",
                title="Deep Synthesis Content Labeling",
                summary=(
                    "Deep synthesis content (deepfakes, synthetic faces, cloned voices, generated "
                    "video) must be clearly labelled in a manner that cannot be easily removed. "
                    "Both visible labels and embedded metadata identifiers are required."
                ),
                relevance=(
                    "This system generates deep synthesis content that must be labelled per "
                    "Chinese regulation."
                ),
            ),
            synthesis(
                id="cn-deep-synthesis-provider",
                article="Articles 6-10",
                title="Deep Synthesis Provider Obligations",
                summary=(
                    "Technology support providers must implement content review, real-name "
                    "registration for service users, records retention, and cooperation with "
                    "regulatory inspections. Providers must not facilitate illegal deep synthesis "
                    "content."
                ),
                relevance=(
                    "This system provides deep synthesis technology capabilities, triggering "
                    "provider obligations."
                ),
            ),
        ]

    if is_recommendation_system(ctx):
        reco = partial(ApplicableProvision, law=RECOMMENDATION)
        provisions += [
            reco(
                id="cn-reco-algo-filing",
                article="Article 24",
                title="Recommendation Algorithm Filing",
                summary=(
                    "Providers of recommendation algorithm services with public opinion or social "
                    "mobilisation capabilities must file with the Cyberspace Administration within "
                    "10 working days of providing the service."
                ),
                relevance=(
                    "This recommendation system may require algorithm filing with Chinese "
                    "authorities."
                ),
            ),
            reco(
                id="cn-reco-algo-transparency",
                article="Articles 16-17",
                title="Recommendation Algorithm Transparency",
                summary=(
                    "Users must be informed of the use of recommendation algorithms. Users must be "
                    "provided with an option to turn off recommendation features. User profiling "
                    "based on personal characteristics must be transparent."
                ),
                relevance=(
                    "This recommendation system must provide transparency and opt-out mechanisms "
                    "to users."
                ),
            ),
        ]

    if processes_personal_data(ctx):
        provisions += [
            _pipl(
                id="cn-pipl-lawful-basis",
                article="Articles 13-14",
                title="Lawful Basis for Personal Information Processing",
                summary=(
                    "PIPL requires a lawful basis for processing personal information "
                    "of individuals in China. Unlike GDPR, legitimate interest is not a "
                    "standalone basis — consent is the primary mechanism unless a "
                    "specific exception applies (contract performance, HR management, "
                    "public health emergency, news reporting, or publicly disclosed "
                    "information). Consent must be informed, voluntary, and explicit."
                ),
                relevance=(
                    "This AI system processes personal data of individuals in China. A lawful "
                    "basis under PIPL must be established for each processing activity."
                ),
            ),
            _pipl(
                id="cn-pipl-sensitive-pi",
                article="Articles 28-32",
                title="Sensitive Personal Information Protection",
                summary=(
                    "Processing sensitive personal information (biometric, religious, medical, "
                    "financial, location, minors' data) requires separate consent, a specific and "
                    "sufficient necessity justification, and a Personal Information Protection "
                    "Impact Assessment (PIPIA). Processors must inform individuals of the necessity "
                    "and impact on their rights."
                ),
                relevance=(
                    "This AI system may process sensitive personal information, triggering "
                    "enhanced PIPL protections."
                ),
            ),
            _pipl(
                id="cn-pipl-cross-border",
                article="Articles 38-43",
                title="Cross-Border Data Transfer Requirements",
                summary=(
                    "Transferring personal information outside China requires one of: (a) passing "
                    "a CAC security assessment (mandatory for critical information infrastructure "
                    "operators or transfers exceeding 100,000 individuals' data or 10,000 "
                    "individuals' sensitive data), (b) certification by a recognized body, or (c) "
                    "Standard Contract filed with local CAC office. Separate consent for "
                    "cross-border transfer is required."
                ),
                relevance=(
                    "If this AI system transfers personal data outside China, PIPL cross-border "
                    "transfer mechanisms must be established."
                ),
            ),
            _pipl(
                id="cn-pipl-automated-decisions",
                article="Article 24",
                title="Automated Decision-Making Transparency",
                summary=(
                    "Where personal information is used for automated decision-making, "
                    "organizations must ensure transparency and fairness of results. Individuals "
                    "have the right to request an explanation and the right to refuse decisions "
                    "made solely through automated processing that significantly affect their "
                    "rights. Marketing or price differentiation via automated decisions must offer "
                    "a non-personalized option."
                ),
                relevance=(
                    "This AI system uses personal data for processing that may constitute "
                    "automated decision-making under PIPL Article 24."
                ),
            ),
            _pipl(
                id="cn-pipl-impact-assessment",
                article="Article 55",
                title="Personal Information Protection Impact Assessment",
                summary=(
                    "A Personal Information Protection Impact Assessment (PIPIA) is required "
                    "before: processing sensitive personal information, using personal information "
                    "for automated decision-making, entrusting processing to third parties, "
                    "transferring personal information abroad, or any processing that may "
                    "significantly affect individuals' rights. The assessment must evaluate "
                    "legality, necessity, and risk mitigation measures."
                ),
                relevance=(
                    "This AI system's processing activities likely require a PIPIA under PIPL "
                    "Article 55."
                ),
            ),
        ]
    return provisions


# =============================================================================
# Artifacts
# =============================================================================


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    artifacts: List[ArtifactRequirement] = []

    if requires_algorithm_filing(ctx):
        artifacts.append(
            ArtifactRequirement(
                type=ArtifactType.RISK_ASSESSMENT,
                name="China Algorithm Filing Document",
                legal_basis="CAC Algorithm Filing Requirements",
                description=(
                    "Algorithm filing document for submission to CAC through the Internet "
                    "Information Service Algorithm Filing System. Must include: algorithm name and "
                    "description, application scenarios, service scope, technical principles, "
                    "security assessment results, and intended purpose."
                ),
                template_id="china-algorithm-filing",
            )
        )

    if is_public_facing_genai(ctx):
        artifacts += [
            ArtifactRequirement(
                type=ArtifactType.RISK_ASSESSMENT,
                name="China GenAI Safety Assessment",
                legal_basis=f"{CAC_GENAI}, Article 17",
                description=(
                    "Safety assessment of the GenAI service covering: training data legality, "
                    "content generation safety, user protection measures, security measures, "
                    "compliance with content requirements. Required before launch."
                ),
                template_id="china-genai-assessment",
            ),
            ArtifactRequirement(
                id="genai-content-policy:cn-content-review",
                type=ArtifactType.GENAI_CONTENT_POLICY,
                name="Content Review and Moderation Policy",
                legal_basis=f"{CAC_GENAI}, Articles 4, 9",
                description=(
                    "Documented policy for content review and moderation of AI-generated outputs, "
                    "ensuring compliance with Chinese content requirements including alignment "
                    "with socialist core values and prohibition of unlawful content."
                ),
            ),
        ]

    if is_deep_synthesis_product(ctx):
        artifacts.append(
            ArtifactRequirement(
                id="genai-content-policy:cn-deep-synthesis",
                type=ArtifactType.GENAI_CONTENT_POLICY,
                name="Deep Synthesis Content Labeling Policy",
                legal_basis=f"{DEEP_SYNTHESIS}, Articles 16-17",
                description=(
                    "Policy documenting the labeling and watermarking approach for deep synthesis "
                    "content: visible labels, embedded metadata, non-removable identifiers, and "
                    "compliance verification procedures."
                ),
            )
        )
    return artifacts


# =============================================================================
# Actions
# =============================================================================


_FILING_GUIDANCE = {
    AlgorithmFilingStatus.APPROVED: (
        ActionPriority.RECOMMENDED,
        "ongoing",
        "Algorithm filing with the CAC has been approved. Maintain filing currency: update the "
        "filing within 10 working days when material changes are made to the algorithm. Monitor "
        "for renewal requirements and annual reporting obligations.",
    ),
    AlgorithmFilingStatus.FILED: (
        ActionPriority.IMPORTANT,
        "2-4 weeks",
        "Algorithm filing has been submitted to the CAC and is pending review (CAC review takes up "
        "to 30 working days). Monitor filing status and respond promptly to any CAC requests for "
        "supplementary materials.",
    ),
}

_FILING_DEFAULT = (
    ActionPriority.CRITICAL,
    "2-4 weeks",
    "File the algorithm with the Cyberspace Administration of China (CAC) through the Internet "
    "Information Service Algorithm Filing System. Filing must be completed within 10 working days "
    "of providing the service. Required information includes: algorithm name, application "
    "scenarios, service scope, technical principles, and security self-assessment.",
)


def _filing_action(ctx: ProductContext) -> ActionRequirement:
    priority, effort, description = _FILING_GUIDANCE.get(_filing_status(ctx), _FILING_DEFAULT)
    return _action(
        id="cn-algorithm-filing",
        title="File algorithm with CAC",
        description=description,
        priority=priority,
        legal_basis="CAC Algorithm Filing Requirements",
        estimated_effort=effort,
    )


def _public_genai_actions() -> List[ActionRequirement]:
    critical = partial(_action, priority=ActionPriority.CRITICAL)
    return [
        critical(
            id="cn-cac-training-data-verification",
            title="Verify training data legality",
            description=(
                "Verify the legality of all training data sources: ensure data was lawfully "
                "obtained, intellectual property rights are respected, consent was obtained for "
                "personal information, and no prohibited content is included. Implement training "
                "data quality management measures. Document verification results."
            ),
            legal_basis=f"{CAC_GENAI}, Article 7",
            estimated_effort="4-8 weeks",
        ),
        critical(
            id="cn-cac-content-review-mechanism",
            title="Implement content review mechanism",
            description=(
                "Establish a content review mechanism ensuring AI-generated content does not "
                "violate Chinese law, adheres to socialist core values, and does not contain "
                "prohibited content (content subverting state power, endangering national "
                "security, promoting terrorism, inciting ethnic hatred, violence, obscenity, or "
                "false information). Implement both automated and human review processes."
            ),
            legal_basis=f"{CAC_GENAI}, Articles 4, 9",
            estimated_effort="4-8 weeks",
        ),
        critical(
            id="cn-cac-content-labeling",
            title="Implement mandatory AI-generated content labeling",
            description=(
                "Label all AI-generated content (text, images, audio, video) with non-removable "
                "watermarks and identifiers per national standards. Both visible labels "
                "(user-facing) and embedded metadata (machine-readable) are required."
            ),
            legal_basis=f"{CAC_GENAI}, Article 12",
            estimated_effort="3-6 weeks",
        ),
        critical(
            id="cn-cac-user-identity-verification",
            title="Implement real-name user identity verification",
            description=(
                "Implement real-name registration and identity verification for users of the GenAI "
                "service in compliance with Chinese cybersecurity regulations. Users must be "
                "verified before accessing GenAI capabilities."
            ),
            legal_basis=f"{CAC_GENAI}, Article 11",
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="cn-cac-complaint-mechanism",
            title="Establish complaint and reporting mechanism",
            description=(
                "Establish convenient complaint and reporting channels, publicly disclose contact "
                "information, accept and process public complaints in a timely manner, and provide "
                "feedback to complainants."
            ),
            priority=ActionPriority.IMPORTANT,
            legal_basis=f"{CAC_GENAI}, Article 15",
            estimated_effort="1-2 weeks",
        ),
        critical(
            id="cn-cac-safety-assessment",
            title="Conduct GenAI safety assessment",
            description=(
                "Complete a safety assessment covering training data legality, content generation "
                "safety, user protection measures, security mechanisms, and compliance with "
                "content requirements. The assessment must be completed before service launch. "
                "Practical timeline: security assessments typically take 2-4 months. Begin well "
                "before planned service launch."
            ),
            legal_basis=f"{CAC_GENAI}, Article 17",
            estimated_effort="8-16 weeks",
        ),
        critical(
            id="cn-safety-governance-committee",
            title="Establish GenAI safety governance committee",
            description=(
                "Designate compliance and security personnel per Articles 17-18. Establish a safety "
                "governance committee responsible for content review, training data verification, "
                "user complaint handling, and incident response."
            ),
            legal_basis=f"{CAC_GENAI} Articles 17-18",
            estimated_effort="2-4 weeks",
        ),
    ]


def _pipl_actions() -> List[ActionRequirement]:
    return [
        _action(
            id="china-pipl-consent",
            title="Establish lawful basis for personal information processing under PIPL",
            description=(
                "Under PIPL Articles 13-14, establish consent or other lawful basis for "
                "processing personal information of individuals in China. For AI "
                "systems, legitimate interest is not recognized — consent is the "
                "primary basis unless a specific exception applies (contract "
                "performance, HR management, public health emergency, news reporting, "
                "or publicly disclosed information)."
            ),
            legal_basis="PIPL Articles 13-14",
            priority=ActionPriority.CRITICAL,
            estimated_effort="2-4 weeks",
        ),
        _action(
            id="china-pipl-sensitive-pi",
            title="Implement enhanced protections for sensitive personal information",
            description=(
                "Under PIPL Articles 28-32, processing sensitive personal information (biometric, "
                "religious, medical, financial, location, minors' data) requires separate consent, "
                "necessity justification, and a Personal Information Protection Impact Assessment."
            ),
            legal_basis="PIPL Articles 28-32",
            priority=ActionPriority.CRITICAL,
            estimated_effort="3-6 weeks",
        ),
        _action(
            id="china-pipl-cross-border",
            title="Comply with cross-border data transfer requirements",
            description=(
                "Under PIPL Articles 38-43, transferring personal information outside China "
                "requires one of: (a) passing a CAC security assessment (mandatory for critical "
                "information infrastructure operators or large-volume transfers), (b) "
                "certification by a recognized body, or (c) Standard Contract filed with local CAC "
                "office. Data localization may be required for certain data categories."
            ),
            legal_basis="PIPL Articles 38-43",
            priority=ActionPriority.CRITICAL,
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="china-pipl-automated-decisions",
            title="Provide transparency and opt-out for automated decision-making",
            description=(
                "Under PIPL Article 24, where personal information is used for automated "
                "decision-making, the organization must ensure transparency and fairness. "
                "Individuals have the right to request an explanation of automated decisions and "
                "the right to refuse decisions made solely through automated processing that "
                "significantly affect their rights."
            ),
            legal_basis="PIPL Article 24",
            priority=ActionPriority.IMPORTANT,
            estimated_effort="2-4 weeks",
        ),
    ]


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions: List[ActionRequirement] = []

    if requires_algorithm_filing(ctx):
        actions.append(_filing_action(ctx))

    if is_public_facing_genai(ctx):
        actions += _public_genai_actions()

    if is_deep_synthesis_product(ctx):
        actions += [
            _action(
                id="cn-deep-synthesis-labeling",
                title="Implement deep synthesis content labeling",
                description=(
                    "Implement mandatory labeling for all deep synthesis outputs (face "
                    "generation/manipulation, voice cloning, video synthesis). Labels must be "
                    "clearly visible and embedded in metadata. Labels must not be easily removable "
                    "by users."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis=f"{DEEP_SYNTHESIS}, Articles 16-17",
                estimated_effort="3-6 weeks",
            ),
            _action(
                id="cn-deep-synthesis-records",
                title="Maintain deep synthesis service records",
                description=(
                    "Maintain detailed records of deep synthesis service usage including: user "
                    "identity information, service logs, generated content records. Records must "
                    "be retained for at least 6 months and made available for regulatory "
                    "inspection."
                ),
                priority=ActionPriority.CRITICAL,
                legal_basis=f"{DEEP_SYNTHESIS}, Articles 6-10",
                estimated_effort="2-4 weeks",
            ),
        ]

    if is_recommendation_system(ctx):
        actions += [
            _action(
                id="cn-reco-transparency",
                title="Implement recommendation algorithm transparency",
                description=(
                    "Inform users of the use of recommendation algorithms. Display clear "
                    "indicators that content or products are recommended via algorithms. Provide "
                    "user-facing information about how recommendations are generated."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=f"{RECOMMENDATION}, Article 16",
                estimated_effort="2-4 weeks",
            ),
            _action(
                id="cn-reco-opt-out",
                title="Implement recommendation opt-out mechanism",
                description=(
                    "Provide users with a convenient option to turn off recommendation algorithm "
                    "features entirely. Users must also be able to delete or modify their user "
                    "tags/profiles used for personalisation."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis=f"{RECOMMENDATION}, Article 17",
                estimated_effort="1-2 weeks",
            ),
        ]

    if processes_personal_data(ctx):
        actions += _pipl_actions()
    return actions


# =============================================================================
# Timeline
# =============================================================================


DEADLINES = [
    ComplianceDeadline(
        date="2022-03-01",
        description=(
            "Provisions on the Management of Algorithmic Recommendations took effect. "
            "Recommendation algorithm services must file with CAC and provide user "
            "transparency/opt-out."
        ),
        provision=RECOMMENDATION,
    ),
    ComplianceDeadline(
        date="2023-01-10",
        description=(
            "Provisions on the Management of Deep Synthesis took effect. Deep synthesis content "
            "must be labelled. Service providers have mandatory obligations."
        ),
        provision=DEEP_SYNTHESIS,
    ),
    ComplianceDeadline(
        date="2023-08-15",
        description=(
            "CAC Interim Measures for the Management of Generative AI Services took effect. "
            "Public-facing GenAI services must file with CAC, verify training data, implement "
            "content review, label outputs, and verify user identity."
        ),
        provision=CAC_GENAI,
    ),
]


def build_timeline(ctx: ProductContext) -> ComplianceTimeline:
    notes = [
        "China has the most prescriptive AI-specific regulations globally, with distinct laws for "
        "recommendation algorithms (2022), deep synthesis/deepfakes (2023), and generative AI "
        "(2023). All obligations are mandatory with enforcement by the Cyberspace Administration "
        "of China (CAC)."
    ]
    if is_public_facing_genai(ctx):
        notes.append(
            "CRITICAL: The CAC Interim Measures for GenAI Services have been in force since August "
            "15, 2023. Algorithm filing, content review, training data verification, and output "
            "labeling are mandatory. Non-compliance may result in service suspension, fines, or "
            "referral for criminal investigation."
        )
    if is_deep_synthesis_product(ctx):
        notes.append(
            "Deep Synthesis regulations have been in force since January 10, 2023. All deep "
            "synthesis content must be labelled. Service providers must maintain usage records and "
            "cooperate with inspections."
        )
    if is_recommendation_system(ctx):
        notes.append(
            "Recommendation Algorithm provisions have been in force since March 1, 2022. Algorithm "
            "filing, user transparency, and opt-out mechanisms are required."
        )
    if _filing_status(ctx) is AlgorithmFilingStatus.NOT_FILED and requires_algorithm_filing(ctx):
        notes.append(
            "WARNING: This service requires algorithm filing with CAC but has not yet been filed. "
            "Filing must be completed within 10 working days of providing the service. Operating "
            "without filing is a violation."
        )
    return ComplianceTimeline(effective_date="2022-03-01", deadlines=DEADLINES, notes=notes)


# =============================================================================
# Module
# =============================================================================


class ChinaModule(JurisdictionModule):
    region = "APAC"
    description = "China PIPL, CAC GenAI measures, deep synthesis and recommendation rules"

    @property
    def id(self) -> str:
        return "china"

    @property
    def name(self) -> str:
        return "China AI Regulations (PIPL, CAC GenAI, Deep Synthesis, Recommendation Algorithms)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.CHINA

    @property
    def ladder(self) -> RiskLadder:
        return CHINA_LADDER

    @property
    def triggers(self):
        return (*CAC_GENAI_TRIGGERS, *DEEP_SYNTHESIS_TRIGGERS, *RECOMMENDATION_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(ctx)
