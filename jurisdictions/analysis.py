"""
End-to-end applicability analysis.

Runs the full engine over one product context:

  1. map every target market (failures collected, never raised)
  2. flatten requirements and pick the highest risk
  3. merge artifacts and actions across jurisdictions
  4. build the prioritized action plan
  5. detect cross-jurisdiction tensions
  6. summarize launch readiness per market

Usage:
    registry = build_default_registry()
    report = analyze_product(ctx, registry)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from shared.models import ApplicabilityReport, ProductContext

from .conflicts import detect_conflicts
from .dedup import merge_actions, merge_artifacts
from .mapper import aggregate_requirements, map_all_jurisdictions, summarize_markets
from .prioritizer import prioritize_actions
from .registry import JurisdictionRegistry

logger = logging.getLogger(__name__)


def analyze_product(
    ctx: ProductContext,
    registry: JurisdictionRegistry,
    today: Optional[date] = None,
) -> ApplicabilityReport:
    """
    Produce the complete applicability report for a product.

    Args:
        ctx: Product context (read-only)
        registry: Registry to resolve jurisdiction modules from
        today: Reference date for overdue detection (defaults to today)

    Returns:
        ApplicabilityReport; jurisdictions that could not be mapped are
        listed in ``errors`` and excluded from every derived view
    """
    mapped = map_all_jurisdictions(ctx, registry)
    results = mapped.results

    report = ApplicabilityReport(
        results=results,
        errors=mapped.errors,
        aggregate=aggregate_requirements(results),
        merged_artifacts=merge_artifacts(results),
        action_plan=prioritize_actions(merge_actions(results), today=today, launch_date=ctx.launch_date),
        conflicts=detect_conflicts(ctx, results),
        summary=summarize_markets(results),
    )
    logger.info(
        f"Analysis complete: {len(results)} markets, "
        f"{len(report.merged_artifacts)} artifacts, {report.action_plan.total} actions, "
        f"{len(report.conflicts)} conflicts"
    )
    return report
