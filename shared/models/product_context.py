"""
Pydantic Models for the Product Context

This module defines the structured description of an AI product that every
jurisdiction module evaluates. The context is assembled by an external intake
step (interview or codebase analysis) and handed to the engine fully formed.

CONTEXT SECTIONS:

  - Core: description, product type, data categories, user populations
  - Decision profile: decision impact and automation level
  - Markets: the jurisdiction ids the product will launch in
  - Optional sub-contexts: training data, GPAI, generative AI,
    agentic AI, sector (with financial-services detail)

TRUSTWORTHINESS PRINCIPLES:

  - The context is read-only once built; no module mutates it
  - Enum fields are closed sets, validated at construction time
  - Optional sub-contexts are independent; absence means "not applicable"
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enumerations
# =============================================================================


class Jurisdiction(str, Enum):
    """Jurisdiction identifiers understood by the engine."""

    EU_AI_ACT = "eu-ai-act"
    EU_GDPR = "eu-gdpr"
    US_FEDERAL = "us-federal"
    US_CA = "us-ca"
    US_CO = "us-co"
    US_IL = "us-il"
    US_NY = "us-ny"
    US_TX = "us-tx"
    UK = "uk"
    SINGAPORE = "singapore"
    CHINA = "china"
    BRAZIL = "brazil"


class ProductType(str, Enum):
    """What kind of AI system the product is."""

    CLASSIFIER = "classifier"
    RECOMMENDER = "recommender"
    GENERATOR = "generator"
    PREDICTOR = "predictor"
    DETECTOR = "detector"
    RANKER = "ranker"
    AGENT = "agent"
    FOUNDATION_MODEL = "foundation-model"
    OTHER = "other"


class DataCategory(str, Enum):
    """
    Categories of data the product processes.

    Several jurisdictions treat the "special" categories (sensitive,
    biometric, health, genetic, political, criminal) with heightened rules.
    """

    PERSONAL = "personal"
    SENSITIVE = "sensitive"
    BIOMETRIC = "biometric"
    HEALTH = "health"
    FINANCIAL = "financial"
    LOCATION = "location"
    BEHAVIORAL = "behavioral"
    MINOR = "minor"
    EMPLOYMENT = "employment"
    CRIMINAL = "criminal"
    POLITICAL = "political"
    GENETIC = "genetic"
    PUBLIC = "public"
    ANONYMIZED = "anonymized"
    PSEUDONYMIZED = "pseudonymized"
    AGGREGATED = "aggregated"
    OTHER = "other"


class UserPopulation(str, Enum):
    """Who uses, or is affected by, the product."""

    CONSUMERS = "consumers"
    BUSINESSES = "businesses"
    MINORS = "minors"
    EMPLOYEES = "employees"
    PATIENTS = "patients"
    STUDENTS = "students"
    JOB_APPLICANTS = "job-applicants"
    CREDIT_APPLICANTS = "credit-applicants"
    TENANTS = "tenants"
    GENERAL_PUBLIC = "general-public"
    INTERNAL_USERS = "internal-users"
    OTHER = "other"


class DecisionImpact(str, Enum):
    """
    How much weight the product's output carries in decisions about people.

    Ordered: ADVISORY < MATERIAL < DETERMINATIVE.
    """

    ADVISORY = "advisory"
    MATERIAL = "material"
    DETERMINATIVE = "determinative"


class AutomationLevel(str, Enum):
    """Degree of human involvement in the product's decisions."""

    HUMAN_IN_THE_LOOP = "human-in-the-loop"
    HUMAN_ON_THE_LOOP = "human-on-the-loop"
    FULLY_AUTOMATED = "fully-automated"


class GpaiRole(str, Enum):
    """Role of the organisation relative to a general-purpose AI model."""

    PROVIDER = "provider"
    DEPLOYER = "deployer"
    BOTH = "both"


class FoundationModelSource(str, Enum):
    SELF_TRAINED = "self-trained"
    THIRD_PARTY_API = "third-party-api"
    FINE_TUNED = "fine-tuned"
    OPEN_SOURCE = "open-source"


class OutputModality(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    CODE = "code"
    MULTIMODAL = "multimodal"


class TrainingDataCategory(str, Enum):
    """Provenance categories for generative model training data."""

    PUBLIC_WEB_SCRAPE = "public-web-scrape"
    LICENSED_DATASETS = "licensed-datasets"
    USER_GENERATED_CONTENT = "user-generated-content"
    PROPRIETARY_DATA = "proprietary-data"
    SYNTHETIC_DATA = "synthetic-data"
    COPYRIGHTED_WORKS = "copyrighted-works"
    PERSONAL_DATA = "personal-data"
    GOVERNMENT_DATA = "government-data"
    OPEN_SOURCE_DATASETS = "open-source-datasets"


class AlgorithmFilingStatus(str, Enum):
    """Status of a Chinese CAC algorithm filing."""

    NOT_FILED = "not-filed"
    FILED = "filed"
    APPROVED = "approved"
    NOT_APPLICABLE = "not-applicable"


class AutonomyLevel(str, Enum):
    """
    Breadth of autonomous action for agentic systems.

      - NARROW: single well-defined task, tightly constrained
      - BOUNDED: multiple tasks within a defined action scope
      - BROAD: open-ended planning and action
    """

    NARROW = "narrow"
    BOUNDED = "bounded"
    BROAD = "broad"


class AISector(str, Enum):
    FINANCIAL_SERVICES = "financial-services"
    HEALTHCARE = "healthcare"
    EMPLOYMENT = "employment"
    EDUCATION = "education"
    LAW_ENFORCEMENT = "law-enforcement"
    CRITICAL_INFRASTRUCTURE = "critical-infrastructure"
    GENERAL = "general"


class FinancialSubSector(str, Enum):
    BANKING = "banking"
    INSURANCE = "insurance"
    INVESTMENT = "investment"
    PAYMENTS = "payments"
    LENDING = "lending"
    TRADING = "trading"


# =============================================================================
# Sub-contexts
# =============================================================================


class _Frozen(BaseModel):
    """Base for context models: immutable after construction."""

    model_config = ConfigDict(frozen=True)


class TrainingDataInfo(_Frozen):
    """How (and whether) the product's models were trained on data."""

    uses_training_data: bool = Field(
        default=False,
        description="Whether the product trains or fine-tunes its own models",
    )
    sources: List[str] = Field(
        default_factory=list,
        description="Free-text list of training data sources",
    )
    contains_personal_data: bool = Field(
        default=False,
        description="Whether training data includes personal data",
    )
    consent_obtained: Optional[bool] = Field(
        default=None,
        description="Whether consent was obtained for training use (None = unknown)",
    )
    opt_out_mechanism: bool = Field(default=False)
    synthetic_data: bool = Field(default=False)


class ExistingMeasure(_Frozen):
    """A compliance measure the product team already has in place."""

    type: str
    description: str
    implemented: bool = False


class GpaiInfo(_Frozen):
    """General-purpose AI model details (EU AI Act Chapter V)."""

    is_gpai_model: bool = False
    gpai_role: GpaiRole = GpaiRole.DEPLOYER
    model_name: Optional[str] = None
    is_open_source: bool = False
    compute_flops: Optional[float] = Field(
        default=None,
        description="Cumulative training compute in FLOPs, if known",
    )
    exceeds_systemic_risk_threshold: bool = Field(
        default=False,
        description="Training compute above 10^25 FLOPs (Art. 51(2))",
    )
    commission_designated: bool = Field(
        default=False,
        description="Designated as systemic-risk by the Commission (Art. 51(1)(b))",
    )
    provides_downstream_documentation: bool = False
    has_acceptable_use_policy: bool = False
    copyright_compliance_mechanism: Optional[str] = None


class GenerativeAiContext(_Frozen):
    """Generative AI characteristics of the product."""

    uses_foundation_model: bool = False
    foundation_model_source: FoundationModelSource = FoundationModelSource.THIRD_PARTY_API
    model_identifier: Optional[str] = None
    generates_content: bool = False
    output_modalities: List[OutputModality] = Field(default_factory=list)
    can_generate_deepfakes: bool = False
    can_generate_synthetic_voice: bool = False
    has_output_watermarking: bool = False
    has_output_filtering: bool = False
    training_data_includes: List[TrainingDataCategory] = Field(default_factory=list)
    finetuning_performed: bool = False
    finetuning_data_description: Optional[str] = None
    uses_rag: bool = False
    uses_agentic_capabilities: bool = False
    algorithm_filing_status: Optional[AlgorithmFilingStatus] = None
    provides_content_moderation: Optional[bool] = None
    is_frontier_model: Optional[bool] = None
    follows_imda_guidelines: Optional[bool] = None


class AgenticAiContext(_Frozen):
    """Agentic AI characteristics of the product."""

    is_agentic: bool = False
    autonomy_level: AutonomyLevel = AutonomyLevel.NARROW
    tool_access: List[str] = Field(default_factory=list)
    action_scope: List[str] = Field(default_factory=list)
    has_human_checkpoints: bool = False
    human_checkpoint_description: Optional[str] = None
    is_multi_agent: bool = False
    can_access_external_systems: bool = False
    can_modify_data: bool = False
    can_make_financial_transactions: bool = False
    has_failsafe_mechanisms: bool = False
    has_action_logging: bool = False


class FinancialServicesContext(_Frozen):
    """Financial-services detail for sector-specific supervision."""

    sub_sector: FinancialSubSector = FinancialSubSector.BANKING
    involves_credit: bool = False
    involves_insurance_pricing: bool = False
    involves_trading: bool = False
    involves_aml_kyc: bool = False
    involves_regulatory_reporting: bool = False
    regulatory_bodies: List[str] = Field(default_factory=list)
    has_materiality_assessment: bool = False
    has_model_risk_governance: bool = False


class SectorContext(_Frozen):
    sector: AISector = AISector.GENERAL
    financial_services: Optional[FinancialServicesContext] = None


# =============================================================================
# Product Context
# =============================================================================


class ProductContext(_Frozen):
    """
    Structured, read-only description of the AI product under evaluation.

    Every jurisdiction module reads this model; none mutates it. The
    ``target_markets`` list drives which modules the mapper invokes, in order.
    """

    description: str = Field(
        ...,
        description="Free-text description of what the product does",
    )
    product_type: ProductType = Field(
        ...,
        description="Kind of AI system",
    )
    data_processed: List[DataCategory] = Field(
        default_factory=list,
        description="Categories of data the product processes",
    )
    user_populations: List[UserPopulation] = Field(
        default_factory=list,
        description="Populations using or affected by the product",
    )
    decision_impact: DecisionImpact = Field(
        default=DecisionImpact.ADVISORY,
        description="Weight of the product's output in decisions about people",
    )
    automation_level: AutomationLevel = Field(
        default=AutomationLevel.HUMAN_IN_THE_LOOP,
        description="Degree of human involvement in decisions",
    )
    training_data: TrainingDataInfo = Field(
        default_factory=TrainingDataInfo,
        description="Training data provenance",
    )
    target_markets: List[Jurisdiction] = Field(
        ...,
        min_length=1,
        description="Jurisdictions the product will launch in (evaluation order)",
    )
    existing_measures: List[ExistingMeasure] = Field(
        default_factory=list,
        description="Compliance measures already in place",
    )
    launch_date: Optional[str] = Field(
        default=None,
        description="Planned launch date (ISO 8601 date)",
    )

    # Optional sub-contexts
    gpai_info: Optional[GpaiInfo] = None
    generative_ai_context: Optional[GenerativeAiContext] = None
    agentic_ai_context: Optional[AgenticAiContext] = None
    sector_context: Optional[SectorContext] = None

    def has_data(self, *categories: DataCategory) -> bool:
        """Check whether any of the given data categories is processed."""
        return any(c in self.data_processed for c in categories)

    def affects(self, *populations: UserPopulation) -> bool:
        """Check whether any of the given populations is affected."""
        return any(p in self.user_populations for p in populations)

    def description_mentions(self, *keywords: str) -> bool:
        """Case-insensitive substring match against the description."""
        text = self.description.lower()
        return any(k in text for k in keywords)
