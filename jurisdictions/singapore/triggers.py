"""
Singapore framework triggers.

Singapore regulates AI through frameworks layered on the PDPA. Each table
belongs to one issuing body; the citation is the framework name.
"""

from __future__ import annotations

from shared.models import AutonomyLevel, DataCategory, ProductContext, ProductType

from ..base import Trigger
from ..predicates import is_financial_services_ai, is_fully_automated, makes_material_decisions

PDPA = "Personal Data Protection Act (PDPA)"
IMDA_GENAI = "IMDA GenAI Governance Framework"
IMDA_AGENTIC = "IMDA Model AI Governance Framework for Agentic AI"
MAS_AIRM = "MAS Guidelines on AI Risk Management for FIs"

PDPA_DATA = (
    DataCategory.PERSONAL,
    DataCategory.SENSITIVE,
    DataCategory.BIOMETRIC,
    DataCategory.HEALTH,
    DataCategory.FINANCIAL,
    DataCategory.LOCATION,
    DataCategory.BEHAVIORAL,
    DataCategory.MINOR,
)


def _agentic(ctx: ProductContext):
    return ctx.agentic_ai_context


def _genai(ctx: ProductContext):
    return ctx.generative_ai_context


def _fin(ctx: ProductContext):
    return ctx.sector_context.financial_services if ctx.sector_context else None


PDPC_TRIGGERS = (
    Trigger(
        id="sg-pdpc-personal-data",
        name="Personal Data Processing (PDPA)",
        citation=PDPA,
        predicate=lambda ctx: ctx.has_data(*PDPA_DATA),
    ),
    Trigger(
        id="sg-pdpc-automated-decisions",
        name="Automated Decision-Making (PDPA)",
        citation="PDPA / Model AI Governance Framework",
        predicate=lambda ctx: makes_material_decisions(ctx) and is_fully_automated(ctx),
    ),
)

IMDA_GENAI_TRIGGERS = (
    Trigger(
        id="sg-imda-genai-foundation",
        name="Foundation Model Usage (IMDA GenAI)",
        citation=IMDA_GENAI,
        predicate=lambda ctx: (_genai(ctx) is not None and _genai(ctx).uses_foundation_model)
        or ctx.product_type == ProductType.FOUNDATION_MODEL,
    ),
    Trigger(
        id="sg-imda-genai-content",
        name="AI Content Generation (IMDA GenAI)",
        citation=IMDA_GENAI,
        predicate=lambda ctx: (_genai(ctx) is not None and _genai(ctx).generates_content)
        or ctx.product_type == ProductType.GENERATOR,
    ),
    Trigger(
        id="sg-imda-genai-deepfake",
        name="Synthetic Media Generation (IMDA GenAI)",
        citation=IMDA_GENAI,
        predicate=lambda ctx: _genai(ctx) is not None
        and (_genai(ctx).can_generate_deepfakes or _genai(ctx).can_generate_synthetic_voice),
    ),
)

IMDA_AGENTIC_TRIGGERS = (
    Trigger(
        id="sg-imda-agentic-basic",
        name="Agentic AI System (IMDA Agentic Framework)",
        citation=IMDA_AGENTIC,
        predicate=lambda ctx: _agentic(ctx) is not None and _agentic(ctx).is_agentic,
    ),
    Trigger(
        id="sg-imda-agentic-broad",
        name="Broad Autonomy Agentic AI",
        citation=IMDA_AGENTIC,
        predicate=lambda ctx: _agentic(ctx) is not None
        and _agentic(ctx).autonomy_level == AutonomyLevel.BROAD,
    ),
    Trigger(
        id="sg-imda-agentic-financial",
        name="Agentic AI with Financial Transactions",
        citation=IMDA_AGENTIC,
        predicate=lambda ctx: _agentic(ctx) is not None
        and _agentic(ctx).can_make_financial_transactions,
    ),
    Trigger(
        id="sg-imda-agentic-multi-agent",
        name="Multi-Agent AI System",
        citation=IMDA_AGENTIC,
        predicate=lambda ctx: _agentic(ctx) is not None and _agentic(ctx).is_multi_agent,
    ),
)

MAS_TRIGGERS = (
    Trigger(
        id="sg-mas-financial-ai",
        name="AI in Financial Services (MAS)",
        citation=MAS_AIRM,
        predicate=is_financial_services_ai,
    ),
    Trigger(
        id="sg-mas-credit-scoring",
        name="AI Credit Scoring (MAS)",
        citation=MAS_AIRM,
        predicate=lambda ctx: _fin(ctx) is not None and _fin(ctx).involves_credit,
    ),
    Trigger(
        id="sg-mas-insurance",
        name="AI Insurance Pricing (MAS)",
        citation=MAS_AIRM,
        predicate=lambda ctx: _fin(ctx) is not None and _fin(ctx).involves_insurance_pricing,
    ),
    Trigger(
        id="sg-mas-trading",
        name="AI Trading (MAS)",
        citation=MAS_AIRM,
        predicate=lambda ctx: _fin(ctx) is not None and _fin(ctx).involves_trading,
    ),
    Trigger(
        id="sg-mas-aml-kyc",
        name="AI AML/KYC (MAS)",
        citation=MAS_AIRM,
        predicate=lambda ctx: _fin(ctx) is not None and _fin(ctx).involves_aml_kyc,
    ),
    Trigger(
        id="sg-mas-trm",
        name="Technology Risk Management (MAS TRM)",
        citation="MAS Technology Risk Management Guidelines",
        predicate=lambda ctx: is_financial_services_ai(ctx)
        and (
            (_genai(ctx) is not None and _genai(ctx).uses_foundation_model)
            or (_agentic(ctx) is not None and _agentic(ctx).is_agentic)
        ),
    ),
)

HIGH_AUTONOMY_AGENTIC_IDS = ("sg-imda-agentic-broad", "sg-imda-agentic-financial")


def is_agentic_ai(ctx: ProductContext) -> bool:
    """Singapore keys agentic duties off the agentic sub-context only."""
    agentic = _agentic(ctx)
    return agentic is not None and agentic.is_agentic


__all__ = [
    "PDPC_TRIGGERS",
    "IMDA_GENAI_TRIGGERS",
    "IMDA_AGENTIC_TRIGGERS",
    "MAS_TRIGGERS",
    "HIGH_AUTONOMY_AGENTIC_IDS",
    "is_agentic_ai",
]
