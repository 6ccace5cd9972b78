"""
JuriMap Jurisdiction Engine

Jurisdiction modules, the registry that holds them, and the pipeline that
maps a product context onto them.

Usage:
    from jurisdictions import analyze_product, build_default_registry

    registry = build_default_registry()
    report = analyze_product(ctx, registry)
"""

from .analysis import analyze_product
from .base import Finding, JurisdictionModule, RiskLadder, RiskRung, Trigger
from .conflicts import CONFLICT_RULES, ConflictRule, detect_conflicts
from .dedup import merge_actions, merge_artifacts
from .mapper import (
    aggregate_requirements,
    map_all_jurisdictions,
    map_jurisdiction,
    summarize_markets,
)
from .prioritizer import prioritize_actions
from .registry import (
    JurisdictionNotRegisteredError,
    JurisdictionRegistry,
    RegistryFrozenError,
    all_modules,
    build_default_registry,
)

__all__ = [
    # Engine
    "analyze_product",
    "map_jurisdiction",
    "map_all_jurisdictions",
    "aggregate_requirements",
    "summarize_markets",
    "merge_actions",
    "merge_artifacts",
    "prioritize_actions",
    "detect_conflicts",
    "CONFLICT_RULES",
    "ConflictRule",
    # Registry
    "JurisdictionRegistry",
    "JurisdictionNotRegisteredError",
    "RegistryFrozenError",
    "all_modules",
    "build_default_registry",
    # Module building blocks
    "JurisdictionModule",
    "RiskLadder",
    "RiskRung",
    "Trigger",
    "Finding",
]
