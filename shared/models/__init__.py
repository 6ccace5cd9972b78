"""
JuriMap Shared Pydantic Models

This package contains all Pydantic models used across the JuriMap engine.
Models are organized by purpose:

  - product_context.py: The product description every module evaluates
  - risk.py: Risk levels, risk classification, GPAI classification
  - requirements.py: Provisions, artifacts, actions, timelines
  - results.py: Per-jurisdiction results, aggregates, merged views
  - conflicts.py: Cross-jurisdiction tensions and evaluated triggers

Usage:
    from shared.models import (
        ProductContext, Jurisdiction,
        RiskLevel, RiskClassification,
        ActionRequirement, ArtifactRequirement,
        JurisdictionResult, ConflictTension,
    )
"""

# Product context
from .product_context import (
    AgenticAiContext,
    AISector,
    AlgorithmFilingStatus,
    AutomationLevel,
    AutonomyLevel,
    DataCategory,
    DecisionImpact,
    ExistingMeasure,
    FinancialServicesContext,
    FinancialSubSector,
    FoundationModelSource,
    GenerativeAiContext,
    GpaiInfo,
    GpaiRole,
    Jurisdiction,
    OutputModality,
    ProductContext,
    ProductType,
    SectorContext,
    TrainingDataCategory,
    TrainingDataInfo,
    UserPopulation,
)

# Risk classification
from .risk import (
    GpaiClassification,
    RiskClassification,
    RiskLevel,
)

# Requirements
from .requirements import (
    ActionPriority,
    ActionRequirement,
    ApplicableProvision,
    ArtifactRequirement,
    ArtifactType,
    ComplianceDeadline,
    ComplianceTimeline,
    RegulatoryForce,
)

# Mapping results
from .results import (
    ActionPlan,
    ApplicabilityReport,
    AggregatedRequirements,
    ApplicableLaw,
    JurisdictionResult,
    MappingError,
    MarketReadiness,
    MarketSummary,
    MergedAction,
    MergedArtifact,
    ReadinessStatus,
    RequirementMapResult,
)

# Conflicts and triggers
from .conflicts import (
    ConflictTension,
    RegulatoryTrigger,
)

__all__ = [
    # Product context
    "AgenticAiContext",
    "AISector",
    "AlgorithmFilingStatus",
    "AutomationLevel",
    "AutonomyLevel",
    "DataCategory",
    "DecisionImpact",
    "ExistingMeasure",
    "FinancialServicesContext",
    "FinancialSubSector",
    "FoundationModelSource",
    "GenerativeAiContext",
    "GpaiInfo",
    "GpaiRole",
    "Jurisdiction",
    "OutputModality",
    "ProductContext",
    "ProductType",
    "SectorContext",
    "TrainingDataCategory",
    "TrainingDataInfo",
    "UserPopulation",
    # Risk
    "GpaiClassification",
    "RiskClassification",
    "RiskLevel",
    # Requirements
    "ActionPriority",
    "ActionRequirement",
    "ApplicableProvision",
    "ArtifactRequirement",
    "ArtifactType",
    "ComplianceDeadline",
    "ComplianceTimeline",
    "RegulatoryForce",
    # Results
    "ActionPlan",
    "ApplicabilityReport",
    "AggregatedRequirements",
    "ApplicableLaw",
    "JurisdictionResult",
    "MappingError",
    "MarketReadiness",
    "MarketSummary",
    "MergedAction",
    "MergedArtifact",
    "ReadinessStatus",
    "RequirementMapResult",
    # Conflicts
    "ConflictTension",
    "RegulatoryTrigger",
]
