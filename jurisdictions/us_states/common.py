"""
Predicates shared by the US state modules.

State privacy and AI laws reach further than the generic predicates: they
count decisions a human only monitors as automated, and treat behavioral,
employment and genetic data as personal information.
"""

from __future__ import annotations

from shared.models import (
    AutomationLevel,
    DataCategory,
    OutputModality,
    ProductContext,
    UserPopulation,
)

from ..predicates import makes_material_decisions

STATE_PERSONAL_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
    DataCategory.MINOR,
    DataCategory.EMPLOYMENT,
    DataCategory.GENETIC,
)

DECISION_SUBJECTS = (
    UserPopulation.CONSUMERS,
    UserPopulation.CREDIT_APPLICANTS,
    UserPopulation.JOB_APPLICANTS,
    UserPopulation.TENANTS,
)

POLITICAL_KEYWORDS = ("election", "political", "candidate", "campaign", "voting")


def is_automated(ctx: ProductContext) -> bool:
    """Fully automated, or automated with a human merely on the loop."""
    return ctx.automation_level in (
        AutomationLevel.FULLY_AUTOMATED,
        AutomationLevel.HUMAN_ON_THE_LOOP,
    )


def is_automated_consumer_decision(ctx: ProductContext) -> bool:
    return is_automated(ctx) and makes_material_decisions(ctx) and ctx.affects(*DECISION_SUBJECTS)


def generates_media(ctx: ProductContext, *modalities: OutputModality) -> bool:
    """True if the generative context lists any of the given output modalities."""
    genai = ctx.generative_ai_context
    return genai is not None and any(m in genai.output_modalities for m in modalities)


def generates_content(ctx: ProductContext) -> bool:
    genai = ctx.generative_ai_context
    return genai is not None and genai.generates_content


def can_generate_deepfakes(ctx: ProductContext) -> bool:
    """Deepfake imagery only, synthetic voice excluded."""
    genai = ctx.generative_ai_context
    return genai is not None and genai.can_generate_deepfakes


def is_employment_decision(ctx: ProductContext) -> bool:
    return ctx.affects(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES) and makes_material_decisions(
        ctx
    )
