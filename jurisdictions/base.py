"""
JuriMap Jurisdiction Module Base

This module defines the contract every jurisdiction module implements and the
building blocks they share: triggers and the risk decision ladder.

ARCHITECTURE:
  - A Trigger is a named predicate over the ProductContext with a citation
  - A RiskLadder is an explicit, ordered list of RiskRungs; the first rung
    whose guard holds decides the level, otherwise the MINIMAL fallback
  - A JurisdictionModule bundles a ladder with provision, artifact, action
    and timeline builders for one legal regime

CONTRACT:
  - Every operation is pure and deterministic for a given context
  - No operation performs I/O or mutates the context
  - get_risk_level never returns UNDETERMINED
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Sequence

from shared.models import (
    ActionRequirement,
    ApplicableProvision,
    ArtifactRequirement,
    ComplianceTimeline,
    GpaiClassification,
    Jurisdiction,
    ProductContext,
    RegulatoryTrigger,
    RiskClassification,
    RiskLevel,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[ProductContext], bool]


# =============================================================================
# Triggers
# =============================================================================


@dataclass(frozen=True)
class Trigger:
    """
    An atomic rule: a predicate over the product context plus the legal
    citation it stands for.
    """

    id: str
    name: str
    citation: str
    predicate: Predicate = field(repr=False, compare=False)
    summary: str = field(default="", repr=False, compare=False)

    def matches(self, ctx: ProductContext) -> bool:
        return bool(self.predicate(ctx))

    def _evidence(self) -> str:
        evidence = f"{self.name} ({self.citation})"
        return f"{evidence}. {self.summary}" if self.summary else evidence

    def evaluate(self, ctx: ProductContext) -> RegulatoryTrigger:
        """Evaluate the predicate and record the evidence."""
        satisfied = self.matches(ctx)
        return RegulatoryTrigger(
            trigger_id=self.id,
            description=self.name,
            satisfied=satisfied,
            evidence=self._evidence() if satisfied else "",
        )


def matching(triggers: Sequence[Trigger], ctx: ProductContext) -> List[Trigger]:
    """Return the satisfied triggers, in table order."""
    return [t for t in triggers if t.matches(ctx)]


def trigger_ids(triggers: Sequence[Trigger]) -> List[str]:
    return [t.id for t in triggers]


def unique(items: Sequence[str]) -> List[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(items))


# =============================================================================
# Risk decision ladder
# =============================================================================


class Finding(NamedTuple):
    """What a rung reports when it fires."""

    justification: str
    categories: List[str] = []
    provisions: List[str] = []
    risk_framework: Optional[str] = None


@dataclass(frozen=True)
class RiskRung:
    """
    One step of a decision ladder.

    ``applies`` is the guard; ``explain`` builds the justification and the
    satisfied categories/provisions once the guard holds.
    """

    id: str
    level: RiskLevel
    applies: Predicate = field(repr=False)
    explain: Callable[[ProductContext], Finding] = field(repr=False)


class RiskLadder:
    """
    Ordered, short-circuiting risk classifier.

    Rungs are checked in declaration order; the first whose guard holds
    decides the classification. When none holds, the fallback finding is
    reported at MINIMAL.
    """

    def __init__(
        self,
        jurisdiction: str,
        rungs: Sequence[RiskRung],
        fallback: Finding,
    ):
        for rung in rungs:
            if rung.level is RiskLevel.UNDETERMINED:
                raise ValueError(
                    f"Rung '{rung.id}' of {jurisdiction} cannot yield UNDETERMINED"
                )
        self.jurisdiction = jurisdiction
        self.rungs = tuple(rungs)
        self.fallback = fallback

    @property
    def order(self) -> List[str]:
        """Rung ids in evaluation order."""
        return [rung.id for rung in self.rungs]

    def select(self, ctx: ProductContext) -> Optional[RiskRung]:
        """Return the first rung whose guard holds, or None."""
        for rung in self.rungs:
            if rung.applies(ctx):
                return rung
        return None

    def classify(self, ctx: ProductContext) -> RiskClassification:
        rung = self.select(ctx)
        if rung is None:
            level, finding = RiskLevel.MINIMAL, self.fallback
        else:
            level, finding = rung.level, rung.explain(ctx)
        logger.debug(
            f"{self.jurisdiction}: rung={rung.id if rung else 'fallback'} level={level.value}"
        )
        return RiskClassification(
            level=level,
            justification=finding.justification,
            applicable_categories=list(finding.categories),
            provisions=list(finding.provisions),
            risk_framework=finding.risk_framework,
        )


# =============================================================================
# Jurisdiction module contract
# =============================================================================


class JurisdictionModule(ABC):
    """
    Base class for jurisdiction modules.

    Each module implements:
      - `id`, `name`, `jurisdiction`: identity
      - `ladder`: the ordered risk decision ladder
      - `get_applicable_provisions()`, `get_required_artifacts()`,
        `get_required_actions()`, `get_timeline()`

    and may override:
      - `get_gpai_classification()` (default: not applicable)
      - `triggers` (all trigger tables, for explainability)
    """

    region: str = ""
    description: str = ""

    @property
    @abstractmethod
    def id(self) -> str:
        """Module identifier (e.g., 'eu-ai-act')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable module name."""
        pass

    @property
    @abstractmethod
    def jurisdiction(self) -> Jurisdiction:
        """Jurisdiction this module covers."""
        pass

    @property
    @abstractmethod
    def ladder(self) -> RiskLadder:
        """Ordered risk decision ladder."""
        pass

    @property
    def triggers(self) -> Sequence[Trigger]:
        """Every trigger the module evaluates, in table order."""
        return ()

    def get_risk_level(self, ctx: ProductContext) -> RiskClassification:
        return self.ladder.classify(ctx)

    @abstractmethod
    def get_applicable_provisions(self, ctx: ProductContext) -> List[ApplicableProvision]:
        pass

    @abstractmethod
    def get_required_artifacts(self, ctx: ProductContext) -> List[ArtifactRequirement]:
        pass

    @abstractmethod
    def get_required_actions(self, ctx: ProductContext) -> List[ActionRequirement]:
        pass

    @abstractmethod
    def get_timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        pass

    def get_gpai_classification(self, ctx: ProductContext) -> Optional[GpaiClassification]:
        return None

    def explain(self, ctx: ProductContext) -> List[RegulatoryTrigger]:
        """Evaluate every trigger and report which are satisfied."""
        return [t.evaluate(ctx) for t in self.triggers]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
