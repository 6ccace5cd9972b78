"""
Pydantic Models for Regulatory Requirements

This module defines what a jurisdiction module asks of a product: the legal
provisions that apply, the compliance artifacts to produce, the actions to
take, and the timeline in which to take them.

STRUCTURE:

  - ApplicableProvision: one cited article/section with a relevance note
  - ArtifactRequirement: a compliance document (DPIA, model card, ...)
  - ActionRequirement: a concrete step with priority, effort and deadline
  - ComplianceTimeline: effective date, dated deadlines and notes

PRIORITY ORDER (actions):

  CRITICAL (3) > IMPORTANT (2) > RECOMMENDED (1)

  Required actions are CRITICAL or IMPORTANT; RECOMMENDED actions are
  advisory. Use ``ActionPriority.rank`` rather than string comparison.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ActionPriority(str, Enum):
    """Totally ordered action priority."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @property
    def is_required(self) -> bool:
        return self is not ActionPriority.RECOMMENDED

    def outranks(self, other: ActionPriority) -> bool:
        return self.rank > other.rank


_PRIORITY_RANK = {
    ActionPriority.CRITICAL: 3,
    ActionPriority.IMPORTANT: 2,
    ActionPriority.RECOMMENDED: 1,
}


class RegulatoryForce(str, Enum):
    """How binding a cited provision is."""

    BINDING_LAW = "binding-law"
    BINDING_REGULATION = "binding-regulation"
    SUPERVISORY_GUIDANCE = "supervisory-guidance"
    VOLUNTARY_FRAMEWORK = "voluntary-framework"
    PENDING_LEGISLATION = "pending-legislation"


class ArtifactType(str, Enum):
    """Kinds of compliance documents a module can require."""

    DPIA = "dpia"
    RISK_CLASSIFICATION = "risk-classification"
    CONFORMITY_ASSESSMENT = "conformity-assessment"
    MODEL_CARD = "model-card"
    TRANSPARENCY_NOTICE = "transparency-notice"
    BIAS_AUDIT = "bias-audit"
    RISK_ASSESSMENT = "risk-assessment"
    ALGORITHMIC_IMPACT = "algorithmic-impact"
    GPAI_TECHNICAL_DOCUMENTATION = "gpai-technical-documentation"
    GPAI_TRAINING_DATA_SUMMARY = "gpai-training-data-summary"
    GPAI_SYSTEMIC_RISK_ASSESSMENT = "gpai-systemic-risk-assessment"
    GENAI_CONTENT_POLICY = "genai-content-policy"


class ApplicableProvision(BaseModel):
    """A legal provision that applies to the product, with its relevance."""

    model_config = ConfigDict(frozen=True)

    id: str
    law: str
    article: str
    title: str
    summary: str
    relevance: str
    url: Optional[str] = None
    regulatory_force: Optional[RegulatoryForce] = None
    enforcement_authority: Optional[str] = None
    max_penalty: Optional[str] = None


class ArtifactRequirement(BaseModel):
    """
    A compliance document the product must (or should) produce.

    ``id`` identifies the artifact across jurisdictions. When not given it is
    derived from the type, qualified by the template id when one is set, so
    jurisdiction-specific templates stay distinct.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: ArtifactType
    name: str
    required: bool = True
    legal_basis: str = ""
    description: str = ""
    template_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            artifact_type = data.get("type")
            type_value = getattr(artifact_type, "value", artifact_type)
            template_id = data.get("template_id")
            data = {
                **data,
                "id": f"{type_value}:{template_id}" if template_id else type_value,
            }
        return data


class ActionRequirement(BaseModel):
    """A concrete compliance step."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    priority: ActionPriority
    legal_basis: str
    jurisdictions: List[str] = Field(default_factory=list)
    estimated_effort: Optional[str] = Field(
        default=None,
        description="Effort band such as '2-4 weeks'",
    )
    deadline: Optional[str] = Field(
        default=None,
        description="ISO 8601 date by which the action must be complete",
    )


class ComplianceDeadline(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    description: str
    provision: str
    is_mandatory: bool = True


class ComplianceTimeline(BaseModel):
    """When the regime applies and which dated obligations it imposes."""

    model_config = ConfigDict(frozen=True)

    effective_date: Optional[str] = None
    deadlines: List[ComplianceDeadline] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
