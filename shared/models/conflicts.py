"""
Pydantic Models for Cross-Jurisdiction Conflicts and Triggers

A ConflictTension is a pre-authored advisory note emitted when a specific
combination of jurisdictions (and context flags) co-occurs. A
RegulatoryTrigger is the evaluated form of a single rule predicate, used to
explain why a classification or requirement applies.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ConflictTension(BaseModel):
    """Advisory note on requirements that pull in different directions."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    jurisdictions: List[str] = Field(default_factory=list)
    description: str
    recommendation: str


class RegulatoryTrigger(BaseModel):
    """An evaluated trigger predicate with its evidence."""

    model_config = ConfigDict(frozen=True)

    trigger_id: str
    description: str
    satisfied: bool
    evidence: str = ""
