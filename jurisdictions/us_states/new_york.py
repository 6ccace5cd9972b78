"""
New York City Automated Employment Decision Tools Law (LL144)

An AEDT may not be used in NYC hiring or promotion without an independent
bias audit from the past year and advance notice to candidates.
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
    Jurisdiction,
    ProductContext,
    RegulatoryForce,
    RiskClassification,
    RiskLevel,
    UserPopulation,
)

from ..base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger, matching, trigger_ids
from ..predicates import can_generate_deepfakes, is_financial_services_ai, is_genai_product, makes_material_decisions

LL144 = "NYC Local Law 144"
HIRING_KEYWORDS = ("hiring", "recruit", "resume screen", "candidate screen", "application screen")
PROMOTION_KEYWORDS = ("promot", "advancement", "performance evaluation")

_action = partial(ActionRequirement, jurisdictions=["us-ny"], priority=ActionPriority.CRITICAL)
_ll144 = partial(
    ApplicableProvision,
    law=LL144,
    regulatory_force=RegulatoryForce.BINDING_LAW,
    enforcement_authority="NYC Department of Consumer and Worker Protection",
)


LL144_TRIGGERS = (
    Trigger(
        id="ll144-aedt-hiring",
        name="Automated Employment Decision Tool — Hiring",
        citation=LL144,
        predicate=lambda ctx: (
            ctx.affects(UserPopulation.JOB_APPLICANTS) or ctx.description_mentions(*HIRING_KEYWORDS)
        )
        and makes_material_decisions(ctx),
    ),
    Trigger(
        id="ll144-aedt-promotion",
        name="Automated Employment Decision Tool — Promotion",
        citation=LL144,
        predicate=lambda ctx: ctx.affects(UserPopulation.EMPLOYEES)
        and ctx.description_mentions(*PROMOTION_KEYWORDS)
        and makes_material_decisions(ctx),
    ),
)

GENAI_TRIGGERS = (
    Trigger(
        id="ny-genai-deepfake",
        name="AI-Generated Deepfake Content",
        citation="New York Deepfake Laws",
        predicate=can_generate_deepfakes,
    ),
)


def is_aedt(ctx: ProductContext) -> bool:
    return bool(matching(LL144_TRIGGERS, ctx))


# =============================================================================
# Decision ladder
# =============================================================================


NEW_YORK_LADDER = RiskLadder(
    jurisdiction="us-ny",
    rungs=[
        RiskRung(
            id="aedt",
            level=RiskLevel.HIGH,
            applies=is_aedt,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system qualifies as an Automated Employment Decision Tool (AEDT) under "
                    "NYC Local Law 144, triggering mandatory annual bias audit by an independent "
                    "auditor and candidate/employee notification requirements. Applies to: "
                    f"{'; '.join(t.name for t in matching(LL144_TRIGGERS, ctx))}."
                ),
                categories=trigger_ids(matching(LL144_TRIGGERS, ctx)),
                provisions=["NYC Local Law 144 (Int. 1894-2020)"],
            ),
        ),
        RiskRung(
            id="financial-services",
            level=RiskLevel.LIMITED,
            applies=is_financial_services_ai,
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system operates in financial services in New York. The NYDFS (New "
                    "York Department of Financial Services) applies cybersecurity and consumer "
                    "protection requirements to AI systems at regulated financial institutions."
                ),
                categories=["ny-financial-ai"],
                provisions=["NYDFS Cybersecurity Regulation (23 NYCRR 500)"],
            ),
        ),
        RiskRung(
            id="synthetic-media",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: is_genai_product(ctx) and bool(matching(GENAI_TRIGGERS, ctx)),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system can generate synthetic media. New York has deepfake-related "
                    "provisions addressing non-consensual intimate imagery and election "
                    "interference."
                ),
                categories=trigger_ids(matching(GENAI_TRIGGERS, ctx)),
                provisions=["New York Deepfake Laws"],
            ),
        ),
        RiskRung(
            id="consumer-facing",
            level=RiskLevel.LIMITED,
            applies=lambda ctx: ctx.affects(UserPopulation.CONSUMERS),
            explain=lambda ctx: Finding(
                justification=(
                    "This AI system is consumer-facing in New York. General consumer protection "
                    "laws apply, including the New York General Business Law and potential NYDFS "
                    "oversight for financial products."
                ),
                categories=["ny-consumer-protection"],
                provisions=["NY General Business Law"],
            ),
        ),
    ],
    fallback=Finding(
        justification=(
            "This AI system does not trigger specific New York regulatory obligations. NYC LL144 "
            "does not apply (not an automated employment decision tool), and no other specific AI "
            "triggers identified."
        ),
    ),
)


# =============================================================================
# Provisions, artifacts, actions
# =============================================================================


def build_provisions(ctx: ProductContext, risk: RiskClassification) -> List[ApplicableProvision]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    provisions: List[ApplicableProvision] = []
    if is_aedt(ctx):
        provisions += [
            _ll144(
                id="us-ny-ll144-bias-audit",
                article="Section 20-871(b)",
                title="Annual Independent Bias Audit Requirement",
                summary=(
                    "An AEDT may not be used unless it has been the subject of a bias audit "
                    "conducted no more than one year prior to the use. The audit must be conducted "
                    "by an independent auditor and must test for impact ratios across sex/gender, "
                    "race/ethnicity, and intersectional categories."
                ),
                relevance="This system is an AEDT subject to mandatory annual bias audit before use in NYC.",
                max_penalty="$500 for a first violation; $500-$1,500 for each subsequent violation",
            ),
            _ll144(
                id="us-ny-ll144-notice",
                article="Section 20-871(c)-(d)",
                title="Candidate/Employee Notice Requirements",
                summary=(
                    "Employers/employment agencies must notify candidates/employees at least 10 "
                    "business days before use of an AEDT. Notice must include: that an AEDT will be "
                    "used, the job qualifications and characteristics the AEDT will assess, "
                    "information about data retention, and instructions for requesting an "
                    "alternative selection process or accommodation."
                ),
                relevance=(
                    "This system requires candidate/employee notification at least 10 business days "
                    "before AEDT use."
                ),
            ),
            _ll144(
                id="us-ny-ll144-summary-publication",
                article="Section 20-871(b)(2)",
                title="Bias Audit Summary Publication",
                summary=(
                    "The summary of the most recent bias audit, including the source and "
                    "explanation of data used, the number of individuals assessed, and the impact "
                    "ratio for each category, must be made publicly available on the employer's "
                    "website."
                ),
                relevance="This AEDT requires public posting of bias audit results on the employer's website.",
            ),
            _ll144(
                id="us-ny-ll144-data-collection",
                article="Section 20-871(c)",
                title="AEDT Data Collection Transparency",
                summary=(
                    "Employers must inform candidates/employees of the type of data collected by the "
                    "AEDT, the data retention policy, and provide the ability to request that data "
                    "collected be deleted. Notice must also indicate the data source and how data "
                    "will be used."
                ),
                relevance="This AEDT must disclose data collection and retention practices.",
            ),
        ]

    if can_generate_deepfakes(ctx):
        provisions.append(
            ApplicableProvision(
                id="us-ny-deepfake",
                law="New York Deepfake Laws",
                article="NY Penal Law / Civil Rights Law Amendments",
                title="Synthetic Media and Deepfake Provisions",
                summary=(
                    "New York law addresses non-consensual intimate deepfake imagery and deceptive "
                    "political deepfakes. Creation or distribution of such content may result in "
                    "civil and criminal liability."
                ),
                relevance="This AI system can generate synthetic media, triggering New York deepfake provisions.",
                regulatory_force=RegulatoryForce.BINDING_LAW,
            )
        )
    return provisions


def build_artifacts(ctx: ProductContext, risk: RiskClassification) -> List[ArtifactRequirement]:
    if risk.level is RiskLevel.MINIMAL or not is_aedt(ctx):
        return []
    return [
        ArtifactRequirement(
            type=ArtifactType.BIAS_AUDIT,
            name="NYC LL144 Independent Bias Audit",
            legal_basis="NYC Local Law 144, Section 20-871(b)",
            description=(
                "Annual independent bias audit of the AEDT testing for disparate impact across "
                "sex/gender categories, race/ethnicity categories, and intersectional categories. "
                "Must include selection/scoring rates, impact ratios, and be conducted within the "
                "past year."
            ),
            template_id="bias-audit-nyc",
        ),
        ArtifactRequirement(
            type=ArtifactType.TRANSPARENCY_NOTICE,
            name="NYC LL144 Candidate/Employee Notice",
            legal_basis="NYC Local Law 144, Section 20-871(c)-(d)",
            description=(
                "Written notice to candidates/employees at least 10 business days before AEDT use, "
                "including: AEDT will be used, qualifications assessed, data retention policy, "
                "alternative process request instructions, and bias audit summary availability."
            ),
            template_id="transparency-notice",
        ),
    ]


def _aedt_actions() -> List[ActionRequirement]:
    return [
        _action(
            id="us-ny-ll144-engage-auditor",
            title="Engage independent auditor for LL144 bias audit",
            description=(
                "Identify and engage an independent auditor to conduct the LL144 bias audit. The "
                "auditor must not be involved in the development, use, or provision of the AEDT. "
                "The audit must test impact ratios for sex/gender, race/ethnicity, and "
                "intersectional categories using either historical data or test data."
            ),
            legal_basis="NYC Local Law 144, Section 20-871(b)",
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="us-ny-ll144-conduct-audit",
            title="Complete annual bias audit",
            description=(
                "Conduct the LL144 bias audit calculating selection rates and impact ratios "
                "(scoring rates for scoring tools) for each category: sex categories, "
                "race/ethnicity categories, and intersectional categories of sex and "
                "race/ethnicity. Document results including the number of individuals assessed "
                "and the date of the audit."
            ),
            legal_basis="NYC Local Law 144, Section 20-871(b)",
            estimated_effort="4-8 weeks",
        ),
        _action(
            id="us-ny-ll144-publish-results",
            title="Publish bias audit summary on employer website",
            description=(
                "Make the most recent bias audit summary publicly available on the employer's or "
                "employment agency's website, including the source and explanation of data used, "
                "the number of individuals the AEDT assessed, and the results including impact "
                "ratios for each category."
            ),
            legal_basis="NYC Local Law 144, Section 20-871(b)(2)",
            estimated_effort="1-2 weeks",
        ),
        _action(
            id="us-ny-ll144-candidate-notice",
            title="Implement 10-day advance candidate notification",
            description=(
                "Implement a process to notify candidates and employees at least 10 business days "
                "before use of the AEDT. Notice must be provided via the job posting, the "
                "employer's website, or via US mail/email. Include: what the AEDT will assess, data "
                "collected and retention policy, and how to request alternatives or accommodations."
            ),
            legal_basis="NYC Local Law 144, Section 20-871(c)-(d)",
            estimated_effort="1-2 weeks",
        ),
        _action(
            id="us-ny-ll144-data-deletion",
            title="Implement AEDT data deletion process",
            description=(
                "Implement a process for candidates/employees to request that data collected by the "
                "AEDT about them be deleted. Response must be provided within 30 days."
            ),
            priority=ActionPriority.IMPORTANT,
            legal_basis="NYC Local Law 144, Section 20-871(c)",
            estimated_effort="1-2 weeks",
        ),
    ]


def build_actions(ctx: ProductContext, risk: RiskClassification) -> List[ActionRequirement]:
    if risk.level is RiskLevel.MINIMAL:
        return []

    actions = _aedt_actions() if is_aedt(ctx) else []
    if can_generate_deepfakes(ctx):
        actions.append(
            _action(
                id="us-ny-deepfake-safeguards",
                title="Implement deepfake safeguards for New York compliance",
                description=(
                    "Implement safeguards against creation and distribution of non-consensual "
                    "intimate deepfakes and deceptive political deepfakes. Ensure AI-generated "
                    "synthetic media is properly labelled and that consent mechanisms are in place "
                    "for likeness use."
                ),
                priority=ActionPriority.IMPORTANT,
                legal_basis="New York Deepfake Laws",
                estimated_effort="2-4 weeks",
            )
        )
    return actions


def build_timeline(risk: RiskClassification) -> ComplianceTimeline:
    notes: List[str] = []
    if any("ll144" in c for c in risk.applicable_categories):
        notes.append(
            "NYC Local Law 144 has been in effect and enforced since July 5, 2023. AEDTs cannot be "
            "used in NYC without a completed bias audit from the past year and proper candidate "
            "notification. DCWP (Department of Consumer and Worker Protection) enforces with fines "
            "of $500 for first violation and $500-$1,500 for subsequent violations per day per AEDT."
        )
    return ComplianceTimeline(
        effective_date="2023-07-05",
        deadlines=[
            ComplianceDeadline(
                date="2023-07-05",
                description=(
                    "NYC Local Law 144 enforcement begins. All AEDTs used in NYC hiring or "
                    "promotion must have a completed bias audit and provide candidate notice."
                ),
                provision=LL144,
            )
        ],
        notes=notes,
    )


class NewYorkModule(JurisdictionModule):
    region = "US"
    description = "NYC Local Law 144 automated employment decision tools"

    @property
    def id(self) -> str:
        return "us-ny"

    @property
    def name(self) -> str:
        return "New York City Automated Employment Decision Tools Law (LL144)"

    @property
    def jurisdiction(self) -> Jurisdiction:
        return Jurisdiction.US_NY

    @property
    def ladder(self) -> RiskLadder:
        return NEW_YORK_LADDER

    @property
    def triggers(self):
        return (*LL144_TRIGGERS, *GENAI_TRIGGERS)

    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        return build_provisions(ctx, self.get_risk_level(ctx))

    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        return build_artifacts(ctx, self.get_risk_level(ctx))

    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        return build_actions(ctx, self.get_risk_level(ctx))

    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return build_timeline(self.get_risk_level(ctx))
