"""
EU AI Act trigger tables.

  - PROHIBITED_PRACTICES: Article 5(1)(a)-(h)
  - ANNEX_III_CATEGORIES: the eight high-risk areas of Annex III
  - TRANSPARENCY_TRIGGERS: Article 50 limited-risk disclosures

Matching is keyword-based over the product description, combined with the
structured context fields where they exist.
"""

from __future__ import annotations

from shared.models import DataCategory, ProductContext, ProductType, UserPopulation

from ..base import Trigger
from ..predicates import makes_material_decisions


# =============================================================================
# Helper predicates
# =============================================================================


def is_emotion_recognition_system(ctx: ProductContext) -> bool:
    return ctx.description_mentions(
        "emotion recognition",
        "emotion detect",
        "sentiment analysis on face",
        "facial emotion",
    )


def is_chatbot_or_conversational_ai(ctx: ProductContext) -> bool:
    return ctx.description_mentions(
        "chatbot",
        "conversational ai",
        "virtual assistant",
        "ai assistant",
        "customer service ai",
    ) or (ctx.product_type == ProductType.GENERATOR and ctx.description_mentions("interact"))


def is_deepfake_system(ctx: ProductContext) -> bool:
    return ctx.description_mentions("deepfake", "face swap") or (
        ctx.product_type == ProductType.GENERATOR
        and ctx.description_mentions(
            "generate image", "generate video", "generate audio", "synthetic media"
        )
    )


def is_limited_risk_system(ctx: ProductContext) -> bool:
    return (
        is_chatbot_or_conversational_ai(ctx)
        or is_deepfake_system(ctx)
        or is_emotion_recognition_system(ctx)
    )


def passes_significant_risk_filter(ctx: ProductContext) -> bool:
    """
    Article 6(3) filter for Annex III systems.

    A system that profiles natural persons always poses significant risk.
    Otherwise narrow procedural tasks, improvements to completed human
    activity, pattern detection that does not replace human assessment, and
    preparatory tasks fall outside high-risk.
    """
    desc = ctx.description.lower()
    if "profiling" in desc or "profile" in desc:
        return True

    narrow_procedural = "narrow procedural" in desc or "procedural task" in desc
    improves_human_activity = "improves" in desc and "human" in desc
    detects_patterns = "detect pattern" in desc and "replace" not in desc
    preparatory = "preparatory task" in desc
    return not (narrow_procedural or improves_human_activity or detects_patterns or preparatory)


def _essential_services(ctx: ProductContext) -> bool:
    desc = ctx.description.lower()
    credit_scoring = (
        ctx.affects(UserPopulation.CREDIT_APPLICANTS)
        or "credit scor" in desc
        or "creditworth" in desc
    )
    risk_terms = ("risk" in desc or "pricing" in desc or "underwriting" in desc)
    insurance_risk = (
        (ctx.has_data(DataCategory.HEALTH) and ("insurance" in desc or "risk assessment" in desc))
        or ("life insurance" in desc and risk_terms)
        or ("health insurance" in desc and risk_terms)
        or (
            "insurance" in desc
            and ("risk assessment" in desc or "risk pricing" in desc)
            and ("life" in desc or "health" in desc)
        )
    )
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    insurance_pricing = fin is not None and fin.involves_insurance_pricing
    emergency_dispatch = "emergency call" in desc
    public_benefits = ctx.description_mentions(
        "public benefit", "public assistance", "welfare", "social benefit"
    )
    return (
        credit_scoring
        or insurance_risk
        or insurance_pricing
        or emergency_dispatch
        or public_benefits
    )


def _workplace_emotion_recognition(ctx: ProductContext) -> bool:
    return (
        ctx.description_mentions("emotion recognition", "emotion detect")
        and ctx.affects(UserPopulation.EMPLOYEES, UserPopulation.STUDENTS)
        and not ctx.description_mentions("medical", "safety")
    )


# =============================================================================
# Article 5: prohibited practices
# =============================================================================


PROHIBITED_PRACTICES = (
    Trigger(
        id="art5-1c-social-scoring",
        name="Social Scoring",
        citation="Article 5(1)(c)",
        predicate=lambda ctx: ctx.description_mentions(
            "social scor", "social credit", "citizen score"
        )
        or (ctx.description_mentions("behaviour score") and ctx.description_mentions("social context")),
    ),
    Trigger(
        id="art5-1a-subliminal-manipulation",
        name="Subliminal/Manipulative Techniques",
        citation="Article 5(1)(a)",
        predicate=lambda ctx: ctx.description_mentions("subliminal")
        or all(k in ctx.description.lower() for k in ("manipulat", "beyond", "consciousness")),
    ),
    Trigger(
        id="art5-1b-vulnerability-exploitation",
        name="Exploitation of Vulnerabilities",
        citation="Article 5(1)(b)",
        predicate=lambda ctx: ctx.description_mentions("exploit")
        and ctx.description_mentions("vulnerab", "disability", "elderly")
        and ctx.description_mentions("distort"),
    ),
    Trigger(
        id="art5-1d-predictive-policing",
        name="Predictive Policing (Individual Risk Based on Profiling)",
        citation="Article 5(1)(d)",
        predicate=lambda ctx: all(
            k in ctx.description.lower() for k in ("predict", "criminal", "profiling")
        )
        or all(k in ctx.description.lower() for k in ("predictive policing", "personality")),
    ),
    Trigger(
        id="art5-1e-facial-recognition-scraping",
        name="Untargeted Facial Recognition Database Building",
        citation="Article 5(1)(e)",
        predicate=lambda ctx: ctx.description_mentions("facial recognition")
        and ctx.description_mentions("scraping", "untargeted", "scrape"),
    ),
    Trigger(
        id="art5-1f-workplace-emotion-recognition",
        name="Emotion Recognition in Workplace/Education",
        citation="Article 5(1)(f)",
        predicate=_workplace_emotion_recognition,
    ),
    Trigger(
        id="art5-1g-biometric-sensitive-categorisation",
        name="Biometric Categorisation for Sensitive Attributes",
        citation="Article 5(1)(g)",
        predicate=lambda ctx: ctx.has_data(DataCategory.BIOMETRIC)
        and ctx.description_mentions(
            "race", "political opinion", "religion", "sexual orientation", "trade union"
        ),
    ),
    Trigger(
        id="art5-1h-realtime-biometric-public",
        name="Real-Time Remote Biometric Identification in Public Spaces",
        citation="Article 5(1)(h)",
        predicate=lambda ctx: ctx.description_mentions("real-time")
        and ctx.description_mentions("biometric identification")
        and ctx.description_mentions("public space", "public area"),
    ),
)


# =============================================================================
# Annex III: high-risk areas
# =============================================================================


ANNEX_III_CATEGORIES = (
    Trigger(
        id="annex-iii-1-biometrics",
        name="Biometrics",
        citation="Annex III(1)",
        summary=(
            "Remote biometric identification, biometric categorisation, emotion recognition "
            "systems"
        ),
        predicate=lambda ctx: ctx.has_data(DataCategory.BIOMETRIC)
        or is_emotion_recognition_system(ctx),
    ),
    Trigger(
        id="annex-iii-2-critical-infrastructure",
        name="Critical Infrastructure",
        citation="Annex III(2)",
        summary=(
            "Safety components in management/operation of critical digital infrastructure, "
            "road traffic, water/gas/heating/electricity supply"
        ),
        predicate=lambda ctx: ctx.description_mentions(
            "critical infrastructure",
            "power grid",
            "water supply",
            "electricity",
            "gas supply",
            "road traffic",
            "traffic management",
            "digital infrastructure",
        ),
    ),
    Trigger(
        id="annex-iii-3-education",
        name="Education and Vocational Training",
        citation="Annex III(3)",
        summary=(
            "AI for determining access/admission to education, evaluating learning outcomes, "
            "assessing education level, monitoring students during tests"
        ),
        predicate=lambda ctx: ctx.affects(UserPopulation.STUDENTS) and makes_material_decisions(ctx),
    ),
    Trigger(
        id="annex-iii-4-employment",
        name="Employment, Workers Management, Access to Self-Employment",
        citation="Annex III(4)",
        summary=(
            "AI for recruitment/selection, job ad targeting, filtering applications, evaluating "
            "candidates, decisions on work terms, promotions, termination, task allocation, "
            "monitoring/evaluating worker performance"
        ),
        predicate=lambda ctx: ctx.affects(UserPopulation.JOB_APPLICANTS, UserPopulation.EMPLOYEES)
        and makes_material_decisions(ctx),
    ),
    Trigger(
        id="annex-iii-5-essential-services",
        name="Access to Essential Private and Public Services",
        citation="Annex III(5)",
        summary=(
            "AI for credit scoring/creditworthiness, risk assessment in life/health insurance, "
            "evaluating emergency calls, assessing eligibility for public benefits"
        ),
        predicate=_essential_services,
    ),
    Trigger(
        id="annex-iii-6-law-enforcement",
        name="Law Enforcement",
        citation="Annex III(6)",
        summary=(
            "AI for individual risk assessment in law enforcement, polygraphs, evidence "
            "reliability, victimisation risk, crime analytics"
        ),
        predicate=lambda ctx: ctx.description_mentions(
            "law enforcement", "police", "crime analytic", "recidivism"
        ),
    ),
    Trigger(
        id="annex-iii-7-migration",
        name="Migration, Asylum, and Border Control",
        citation="Annex III(7)",
        summary=(
            "AI for examining asylum/visa/residence permit applications, risk assessments "
            "regarding irregular migration"
        ),
        predicate=lambda ctx: ctx.description_mentions(
            "asylum", "migration", "border control", "visa application", "residence permit"
        ),
    ),
    Trigger(
        id="annex-iii-8-justice",
        name="Administration of Justice and Democratic Processes",
        citation="Annex III(8)",
        summary=(
            "AI assisting judicial authorities in researching/interpreting facts and law, "
            "influencing election outcomes or voting behaviour"
        ),
        predicate=lambda ctx: ctx.description_mentions(
            "judicial", "court", "legal research", "election", "voting", "democratic process"
        ),
    ),
)


# =============================================================================
# Article 50: transparency
# =============================================================================


TRANSPARENCY_TRIGGERS = (
    Trigger(
        id="chatbot-disclosure",
        name="Chatbot or conversational AI",
        citation="Article 50(1)",
        predicate=is_chatbot_or_conversational_ai,
    ),
    Trigger(
        id="deepfake-labeling",
        name="Deepfake or synthetic media generation",
        citation="Article 50(4)",
        predicate=is_deepfake_system,
    ),
    Trigger(
        id="emotion-recognition-disclosure",
        name="Emotion recognition system",
        citation="Article 50(3)",
        predicate=is_emotion_recognition_system,
    ),
)


GPAI_DESCRIPTION_KEYWORDS = (
    "large language model",
    "llm",
    "foundation model",
    "general-purpose ai",
    "general purpose ai",
    "gpai",
    "generative ai",
    "multimodal model",
    "text generation model",
    "image generation model",
    "diffusion model",
    "transformer model",
    "pre-trained model",
    "pretrained model",
)
