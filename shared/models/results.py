"""
Pydantic Models for Mapping Results

This module defines what the requirement mapper produces: one
JurisdictionResult per successfully mapped jurisdiction, per-jurisdiction
mapping errors, the flattened cross-jurisdiction aggregate, and the
deduplicated, prioritized views built on top of it.

TRUSTWORTHINESS PRINCIPLES:

  - Results are recomputed on every run; nothing is cached
  - Failures are reported per jurisdiction, never swallowed
  - Merged views keep the full jurisdiction attribution of every item
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .conflicts import ConflictTension
from .requirements import (
    ActionPriority,
    ActionRequirement,
    ApplicableProvision,
    ArtifactRequirement,
    ComplianceTimeline,
)
from .risk import GpaiClassification, RiskClassification


class ApplicableLaw(BaseModel):
    """A law (jurisdiction module) and the provisions of it that apply."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    jurisdiction: str
    provisions: List[ApplicableProvision] = Field(default_factory=list)


class JurisdictionResult(BaseModel):
    """
    One jurisdiction module's full output for a product context.

    Every action the module returns lands in exactly one of
    ``required_actions`` (critical/important) or ``recommended_actions``.
    """

    model_config = ConfigDict(frozen=True)

    jurisdiction: str
    applicable_laws: List[ApplicableLaw] = Field(default_factory=list)
    risk_classification: RiskClassification
    required_artifacts: List[ArtifactRequirement] = Field(default_factory=list)
    required_actions: List[ActionRequirement] = Field(default_factory=list)
    recommended_actions: List[ActionRequirement] = Field(default_factory=list)
    compliance_timeline: ComplianceTimeline
    gpai_classification: Optional[GpaiClassification] = None

    @property
    def all_actions(self) -> List[ActionRequirement]:
        return [*self.required_actions, *self.recommended_actions]


class MappingError(BaseModel):
    """A jurisdiction that could not be mapped, and why."""

    model_config = ConfigDict(frozen=True)

    jurisdiction: str
    error: str


class RequirementMapResult(BaseModel):
    """Successes and failures of a batch mapping run."""

    results: List[JurisdictionResult] = Field(default_factory=list)
    errors: List[MappingError] = Field(default_factory=list)


class AggregatedRequirements(BaseModel):
    """
    Flattened cross-jurisdiction view.

    No deduplication happens here; see ``jurisdictions.dedup`` for merged
    views. ``highest_risk_level`` is None only when there were no results.
    """

    all_artifacts: List[ArtifactRequirement] = Field(default_factory=list)
    all_actions: List[ActionRequirement] = Field(default_factory=list)
    highest_risk_level: Optional[RiskClassification] = None
    total_artifacts: int = 0
    total_actions: int = 0


class MergedAction(BaseModel):
    """An action deduplicated across jurisdictions."""

    requirement: ActionRequirement
    jurisdictions: List[str] = Field(
        default_factory=list,
        description="Contributing jurisdictions in first-seen order",
    )

    @property
    def priority(self) -> ActionPriority:
        return self.requirement.priority


class MergedArtifact(BaseModel):
    """An artifact deduplicated across jurisdictions."""

    requirement: ArtifactRequirement
    jurisdictions: List[str] = Field(default_factory=list)


class ActionPlan(BaseModel):
    """Merged actions bucketed by priority and sorted within each bucket."""

    critical: List[MergedAction] = Field(default_factory=list)
    important: List[MergedAction] = Field(default_factory=list)
    recommended: List[MergedAction] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.critical) + len(self.important) + len(self.recommended)


class ReadinessStatus(str, Enum):
    READY = "ready"
    ACTION_REQUIRED = "action-required"
    BLOCKED = "blocked"


class MarketReadiness(BaseModel):
    """Launch readiness for a single jurisdiction."""

    jurisdiction: str
    status: ReadinessStatus
    blockers: List[str] = Field(default_factory=list)


class MarketSummary(BaseModel):
    """Headline figures across all mapped jurisdictions."""

    market_readiness: List[MarketReadiness] = Field(default_factory=list)
    highest_risk_market: Optional[str] = None
    lowest_friction_market: Optional[str] = None
    critical_blockers: List[str] = Field(default_factory=list)
    total_artifacts: int = 0
    total_actions: int = 0


class ApplicabilityReport(BaseModel):
    """
    Everything one run of the engine produces for a product context.

    Built by ``jurisdictions.analysis.analyze_product``; the API and MCP
    surfaces serialize it as-is.
    """

    results: List[JurisdictionResult] = Field(default_factory=list)
    errors: List[MappingError] = Field(default_factory=list)
    aggregate: AggregatedRequirements
    merged_artifacts: List[MergedArtifact] = Field(default_factory=list)
    action_plan: ActionPlan
    conflicts: List[ConflictTension] = Field(default_factory=list)
    summary: MarketSummary
