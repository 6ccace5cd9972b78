"""
Shared context predicates used across jurisdiction modules.

These cover the common cases. Modules that apply a different threshold for a
similar idea (e.g. GDPR's broader notion of personal data) keep their own
variant locally.
"""

from __future__ import annotations

from typing import List

from shared.models import (
    AISector,
    AutomationLevel,
    DataCategory,
    DecisionImpact,
    ProductContext,
    ProductType,
    RegulatoryTrigger,
    TrainingDataCategory,
    UserPopulation,
)

PERSONAL_DATA_CATEGORIES = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.MINOR,
)

SPECIAL_CATEGORY_DATA = (
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.GENETIC,
    DataCategory.POLITICAL,
    DataCategory.CRIMINAL,
)


def processes_personal_data(ctx: ProductContext) -> bool:
    """Most common trigger across data protection laws."""
    return ctx.has_data(*PERSONAL_DATA_CATEGORIES)


def is_genai_product(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return (
        ctx.product_type in (ProductType.GENERATOR, ProductType.FOUNDATION_MODEL)
        or (genai is not None and (genai.generates_content or genai.uses_foundation_model))
    )


def is_financial_services_ai(ctx: ProductContext) -> bool:
    return ctx.sector_context is not None and ctx.sector_context.sector == AISector.FINANCIAL_SERVICES


def has_agentic_capabilities(ctx: ProductContext) -> bool:
    agentic = ctx.agentic_ai_context
    genai = ctx.generative_ai_context
    return (agentic is not None and agentic.is_agentic) or (
        genai is not None and genai.uses_agentic_capabilities
    )


def makes_material_decisions(ctx: ProductContext) -> bool:
    """Material or determinative impact on individuals."""
    return ctx.decision_impact in (DecisionImpact.MATERIAL, DecisionImpact.DETERMINATIVE)


def involves_minors(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.MINORS) or ctx.has_data(DataCategory.MINOR)


def processes_biometric_data(ctx: ProductContext) -> bool:
    return ctx.has_data(DataCategory.BIOMETRIC)


def processes_special_category_data(ctx: ProductContext) -> bool:
    """GDPR Art. 9 special categories and their equivalents elsewhere."""
    return ctx.has_data(*SPECIAL_CATEGORY_DATA)


def is_consumer_facing(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.CONSUMERS, UserPopulation.GENERAL_PUBLIC)


def is_fully_automated(ctx: ProductContext) -> bool:
    return ctx.automation_level == AutomationLevel.FULLY_AUTOMATED


def uses_foundation_model(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return ctx.product_type == ProductType.FOUNDATION_MODEL or (
        genai is not None and genai.uses_foundation_model
    )


def can_generate_deepfakes(ctx: ProductContext) -> bool:
    """Deepfakes or synthetic voice of real people."""
    genai = ctx.generative_ai_context
    return genai is not None and (genai.can_generate_deepfakes or genai.can_generate_synthetic_voice)


def involves_credit_or_insurance(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    return fin is not None and (fin.involves_credit or fin.involves_insurance_pricing)


def is_employment_context(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES)


def training_data_includes_personal_data(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    if genai is None:
        return False
    return any(
        c in genai.training_data_includes
        for c in (TrainingDataCategory.PERSONAL_DATA, TrainingDataCategory.USER_GENERATED_CONTENT)
    )


def satisfied_triggers(triggers: List[RegulatoryTrigger]) -> List[RegulatoryTrigger]:
    """Keep only the satisfied triggers."""
    return [t for t in triggers if t.satisfied]
