"""
Pydantic Models for Risk Classification

This module defines the per-jurisdiction risk classification produced by each
jurisdiction module's decision ladder, plus the GPAI classification used by
the EU AI Act module.

RISK LEVELS (ordered):

  - MINIMAL (1): no specific obligations under the regime
  - LIMITED (2): transparency or light-touch obligations
  - HIGH (3): full obligations of the regime apply
  - UNACCEPTABLE (4): prohibited practice, product cannot launch
  - UNDETERMINED (0): sentinel for lookup failures, never a module output

TRUSTWORTHINESS PRINCIPLES:

  - Every classification carries a justification in plain language
  - applicable_categories lists the satisfied trigger ids only
  - provisions lists the legal citations behind the level
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .product_context import GpaiRole


class RiskLevel(str, Enum):
    """
    Discrete, ordered risk levels.

    Use ``rank`` for comparisons; string ordering is meaningless here.
    """

    UNACCEPTABLE = "unacceptable"
    HIGH = "high"
    LIMITED = "limited"
    MINIMAL = "minimal"
    UNDETERMINED = "undetermined"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

    def outranks(self, other: RiskLevel) -> bool:
        """True if this level is strictly more severe than ``other``."""
        return self.rank > other.rank


_RISK_RANK = {
    RiskLevel.UNDETERMINED: 0,
    RiskLevel.MINIMAL: 1,
    RiskLevel.LIMITED: 2,
    RiskLevel.HIGH: 3,
    RiskLevel.UNACCEPTABLE: 4,
}


class RiskClassification(BaseModel):
    """
    Outcome of one jurisdiction's risk decision ladder.

    ``risk_framework`` names the regime-specific framework when the level is
    drawn from something other than the headline law (e.g. MAS FEAT).
    """

    model_config = ConfigDict(frozen=True)

    level: RiskLevel = Field(..., description="Determined risk level")
    justification: str = Field(..., description="Plain-language reasoning")
    applicable_categories: List[str] = Field(
        default_factory=list,
        description="Ids of the satisfied triggers behind this level",
    )
    provisions: List[str] = Field(
        default_factory=list,
        description="Legal citations supporting the level",
    )
    risk_framework: Optional[str] = Field(
        default=None,
        description="Regime-specific risk framework, if any",
    )


class GpaiClassification(BaseModel):
    """General-purpose AI model classification (EU AI Act Chapter V)."""

    model_config = ConfigDict(frozen=True)

    is_gpai: bool
    has_systemic_risk: bool = False
    is_open_source: bool = False
    role: GpaiRole = GpaiRole.DEPLOYER
    justification: str = ""
    provisions: List[str] = Field(default_factory=list)
