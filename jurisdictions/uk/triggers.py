"""
UK regulator triggers.

The UK has no single AI statute. Duties come from each regulator's remit, so
triggers are grouped by issuing body: AISI, DSIT, ICO and FCA.
"""

from __future__ import annotations

from shared.models import (
    AutomationLevel,
    DataCategory,
    FoundationModelSource,
    ProductContext,
    ProductType,
    TrainingDataCategory,
    UserPopulation,
)

from ..base import Trigger
from ..predicates import (
    is_consumer_facing,
    is_financial_services_ai,
    is_fully_automated,
    makes_material_decisions,
)

UK_PERSONAL_DATA = (
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

UK_SPECIAL_CATEGORY = (
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.GENETIC,
    DataCategory.POLITICAL,
    DataCategory.CRIMINAL,
)

PERSONAL_TRAINING_SOURCES = (
    TrainingDataCategory.PERSONAL_DATA,
    TrainingDataCategory.PUBLIC_WEB_SCRAPE,
    TrainingDataCategory.USER_GENERATED_CONTENT,
)

AISI = "AISI Frontier Model Framework"
DSIT = "DSIT Foundation Model Taskforce Principles"
UK_GDPR = "UK GDPR / Data Protection Act 2018"
FCA = "FCA Principles-Based AI Guidance"


# =============================================================================
# Shared predicates
# =============================================================================


def processes_personal_data(ctx: ProductContext) -> bool:
    """UK GDPR reads personal data broadly, including employment records."""
    return ctx.has_data(*UK_PERSONAL_DATA)


def _is_frontier(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and bool(genai.is_frontier_model)


def _self_trained(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and genai.foundation_model_source == FoundationModelSource.SELF_TRAINED


def _uses_foundation_model(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and genai.uses_foundation_model


def is_frontier_model_provider(ctx: ProductContext) -> bool:
    return _is_frontier(ctx) and (
        ctx.product_type == ProductType.FOUNDATION_MODEL or _self_trained(ctx)
    )


def is_foundation_model_product(ctx: ProductContext) -> bool:
    return ctx.product_type == ProductType.FOUNDATION_MODEL or _uses_foundation_model(ctx)


def is_foundation_model_developer(ctx: ProductContext) -> bool:
    return ctx.product_type == ProductType.FOUNDATION_MODEL or _self_trained(ctx)


def is_automated_employment_decision(ctx: ProductContext) -> bool:
    return (
        ctx.affects(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES)
        and makes_material_decisions(ctx)
        and is_fully_automated(ctx)
    )


def has_deepfake_capabilities(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and (genai.can_generate_deepfakes or genai.can_generate_synthetic_voice)


def involves_children(ctx: ProductContext) -> bool:
    return ctx.has_data(DataCategory.MINOR) or ctx.affects(UserPopulation.MINORS)


def _automated_significant(ctx: ProductContext) -> bool:
    return is_fully_automated(ctx) and makes_material_decisions(ctx)


def _trains_on_personal_data(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    personal = ctx.training_data.contains_personal_data or (
        genai is not None and any(s in genai.training_data_includes for s in PERSONAL_TRAINING_SOURCES)
    )
    return personal and ctx.training_data.uses_training_data


def _needs_dpia(ctx: ProductContext) -> bool:
    """ICO screening criteria for AI processing."""
    special = ctx.has_data(
        DataCategory.BIOMETRIC,
        DataCategory.HEALTH,
        DataCategory.GENETIC,
        DataCategory.CRIMINAL,
        DataCategory.SENSITIVE,
    )
    return (
        (special and is_consumer_facing(ctx))
        or _automated_significant(ctx)
        or ctx.has_data(DataCategory.BIOMETRIC)
    )


def _fs(ctx: ProductContext):
    return ctx.sector_context.financial_services if ctx.sector_context else None


# =============================================================================
# Trigger tables
# =============================================================================


AISI_TRIGGERS = (
    Trigger(
        id="aisi-frontier-safety-evaluation",
        name="Frontier Model Safety Evaluation",
        citation=AISI,
        predicate=lambda ctx: _is_frontier(ctx)
        or (ctx.product_type == ProductType.FOUNDATION_MODEL and _self_trained(ctx)),
    ),
    Trigger(
        id="aisi-pre-deployment-testing",
        name="Pre-Deployment Testing Requirements",
        citation=AISI,
        predicate=_is_frontier,
    ),
    Trigger(
        id="aisi-voluntary-commitments",
        name="Voluntary Safety Commitments (Becoming Mandatory)",
        citation=AISI,
        predicate=lambda ctx: _is_frontier(ctx) or ctx.product_type == ProductType.FOUNDATION_MODEL,
    ),
    Trigger(
        id="aisi-agentic-capability-evaluation",
        name="Agentic Capability Evaluation",
        citation=AISI,
        predicate=lambda ctx: _is_frontier(ctx)
        and (
            (ctx.agentic_ai_context is not None and ctx.agentic_ai_context.is_agentic)
            or ctx.generative_ai_context.uses_agentic_capabilities
        ),
    ),
)

DSIT_TRIGGERS = (
    Trigger(
        id="dsit-foundation-model-transparency",
        name="Foundation Model Transparency",
        citation=DSIT,
        predicate=is_foundation_model_product,
    ),
    Trigger(
        id="dsit-foundation-model-accountability",
        name="Foundation Model Accountability",
        citation=DSIT,
        predicate=lambda ctx: ctx.product_type == ProductType.FOUNDATION_MODEL
        or (_uses_foundation_model(ctx) and _self_trained(ctx)),
    ),
    Trigger(
        id="dsit-foundation-model-safety",
        name="Foundation Model Safety Standards",
        citation=DSIT,
        predicate=lambda ctx: ctx.product_type == ProductType.FOUNDATION_MODEL or _is_frontier(ctx),
    ),
)

ICO_TRIGGERS = (
    Trigger(
        id="ico-lawful-basis-ai-training",
        name="Lawful Basis for AI Training on Personal Data",
        citation=UK_GDPR,
        predicate=_trains_on_personal_data,
    ),
    Trigger(
        id="ico-generated-content-personal-data",
        name="Generated Content Containing Personal Data",
        citation=UK_GDPR,
        predicate=lambda ctx: ctx.generative_ai_context is not None
        and ctx.generative_ai_context.generates_content
        and processes_personal_data(ctx),
    ),
    Trigger(
        id="ico-automated-decisions",
        name="Automated Decision-Making (UK GDPR Article 22 Equivalent)",
        citation=UK_GDPR,
        predicate=_automated_significant,
    ),
    Trigger(
        id="ico-dpia-requirement",
        name="UK DPIA Requirement",
        citation="UK GDPR Article 35 / Data Protection Act 2018",
        predicate=_needs_dpia,
    ),
    Trigger(
        id="ico-children-data",
        name="Children's Data Processing (Age Appropriate Design Code)",
        citation="UK GDPR / Age Appropriate Design Code (Children's Code)",
        predicate=involves_children,
    ),
    Trigger(
        id="ico-special-category",
        name="Special Category Data Processing",
        citation="UK GDPR Article 9 / Data Protection Act 2018 Schedule 1",
        predicate=lambda ctx: ctx.has_data(*UK_SPECIAL_CATEGORY),
    ),
)

FCA_TRIGGERS = (
    Trigger(
        id="fca-fair-treatment",
        name="FCA Fair Treatment of Customers (AI Outcomes)",
        citation=FCA,
        predicate=lambda ctx: is_financial_services_ai(ctx)
        and ctx.affects(UserPopulation.CONSUMERS, UserPopulation.CREDIT_APPLICANTS),
    ),
    Trigger(
        id="fca-ai-bias-avoidance",
        name="FCA AI Bias Avoidance",
        citation=FCA,
        predicate=lambda ctx: is_financial_services_ai(ctx) and makes_material_decisions(ctx),
    ),
    Trigger(
        id="fca-ai-explainability",
        name="FCA AI Explainability Requirements",
        citation=FCA,
        predicate=lambda ctx: is_financial_services_ai(ctx)
        and ctx.automation_level == AutomationLevel.FULLY_AUTOMATED,
    ),
    Trigger(
        id="fca-smcr-accountability",
        name="SM&CR Accountability for AI Decisions",
        citation="Senior Managers & Certification Regime",
        predicate=lambda ctx: is_financial_services_ai(ctx) and makes_material_decisions(ctx),
    ),
    Trigger(
        id="fca-credit-ai",
        name="FCA AI in Credit Decisions",
        citation="FCA Principles-Based AI Guidance / Consumer Credit Act",
        predicate=lambda ctx: (_fs(ctx) is not None and _fs(ctx).involves_credit)
        or ctx.affects(UserPopulation.CREDIT_APPLICANTS)
        or ctx.description_mentions("credit scor", "creditworth", "lending"),
    ),
    Trigger(
        id="fca-insurance-ai",
        name="FCA AI in Insurance Pricing",
        citation="FCA Principles-Based AI Guidance / Insurance Conduct of Business",
        predicate=lambda ctx: (_fs(ctx) is not None and _fs(ctx).involves_insurance_pricing)
        or (
            ctx.description_mentions("insurance")
            and ctx.description_mentions("pricing", "underwriting", "risk")
        ),
    ),
    Trigger(
        id="fca-trading-ai",
        name="FCA AI in Algorithmic Trading",
        citation="FCA / MiFID II Algorithmic Trading Requirements",
        predicate=lambda ctx: _fs(ctx) is not None and _fs(ctx).involves_trading,
    ),
)
