"""
JuriMap Requirement Mapper

Resolves each target jurisdiction through a registry, invokes its module
against the product context, and packages the output.

OPERATIONS:
  - map_jurisdiction: one jurisdiction; raises JurisdictionNotRegisteredError
  - map_all_jurisdictions: every target market in order; failures are
    collected per jurisdiction and never abort the batch
  - aggregate_requirements: flatten artifacts/actions and pick the highest
    risk classification (earliest wins on equal rank)
  - summarize_markets: readiness and headline figures per market
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from shared.models import (
    ActionPriority,
    ApplicableLaw,
    AggregatedRequirements,
    JurisdictionResult,
    MappingError,
    MarketReadiness,
    MarketSummary,
    ProductContext,
    ReadinessStatus,
    RequirementMapResult,
    RiskClassification,
    RiskLevel,
)

from .registry import JurisdictionId, JurisdictionNotRegisteredError, JurisdictionRegistry, jurisdiction_key

logger = logging.getLogger(__name__)


def map_jurisdiction(
    ctx: ProductContext,
    jurisdiction_id: JurisdictionId,
    registry: JurisdictionRegistry,
) -> JurisdictionResult:
    """
    Map a single jurisdiction.

    Args:
        ctx: Product context (read-only)
        jurisdiction_id: Jurisdiction to map
        registry: Registry to resolve the module from

    Returns:
        The packaged JurisdictionResult

    Raises:
        JurisdictionNotRegisteredError: If no module is registered for the id
    """
    key = jurisdiction_key(jurisdiction_id)
    module = registry.get_module(key)

    risk = module.get_risk_level(ctx)
    provisions = module.get_applicable_provisions(ctx)
    artifacts = module.get_required_artifacts(ctx)
    actions = module.get_required_actions(ctx)
    timeline = module.get_timeline(ctx)
    gpai = module.get_gpai_classification(ctx)

    required = [a for a in actions if a.priority.is_required]
    recommended = [a for a in actions if not a.priority.is_required]

    logger.debug(
        f"Mapped {key}: level={risk.level.value}, "
        f"{len(artifacts)} artifacts, {len(required)} required / "
        f"{len(recommended)} recommended actions"
    )

    return JurisdictionResult(
        jurisdiction=key,
        applicable_laws=[
            ApplicableLaw(
                id=module.id,
                name=module.name,
                jurisdiction=key,
                provisions=list(provisions),
            )
        ],
        risk_classification=risk,
        required_artifacts=list(artifacts),
        required_actions=required,
        recommended_actions=recommended,
        compliance_timeline=timeline,
        gpai_classification=gpai,
    )


def map_all_jurisdictions(
    ctx: ProductContext,
    registry: JurisdictionRegistry,
) -> RequirementMapResult:
    """
    Map every target market of the context, in ``target_markets`` order.

    Unregistered ids are recorded in ``errors``; the remaining markets are
    still mapped.
    """
    results: List[JurisdictionResult] = []
    errors: List[MappingError] = []

    for jurisdiction_id in ctx.target_markets:
        try:
            results.append(map_jurisdiction(ctx, jurisdiction_id, registry))
        except JurisdictionNotRegisteredError as e:
            logger.warning(f"Could not map {e.jurisdiction_id}: {e}")
            errors.append(MappingError(jurisdiction=e.jurisdiction_id, error=str(e)))

    logger.info(f"Mapped {len(results)} jurisdictions ({len(errors)} errors)")
    return RequirementMapResult(results=results, errors=errors)


def highest_risk(results: Sequence[JurisdictionResult]) -> Optional[RiskClassification]:
    """Highest-ranked classification; ties keep the earliest one."""
    best: Optional[RiskClassification] = None
    for result in results:
        current = result.risk_classification
        if best is None or current.level.outranks(best.level):
            best = current
    return best


def aggregate_requirements(results: Sequence[JurisdictionResult]) -> AggregatedRequirements:
    """
    Flatten requirements across jurisdictions without deduplication.

    Returns:
        AggregatedRequirements with all artifacts, all actions (required then
        recommended, per jurisdiction), and the highest risk classification
        (None when ``results`` is empty)
    """
    all_artifacts = [a for r in results for a in r.required_artifacts]
    all_actions = [a for r in results for a in r.all_actions]

    return AggregatedRequirements(
        all_artifacts=all_artifacts,
        all_actions=all_actions,
        highest_risk_level=highest_risk(results),
        total_artifacts=len(all_artifacts),
        total_actions=len(all_actions),
    )


def assess_readiness(result: JurisdictionResult) -> MarketReadiness:
    """
    Launch readiness for one jurisdiction.

      - BLOCKED: the product is classified UNACCEPTABLE
      - ACTION_REQUIRED: at least one critical action is outstanding
      - READY: otherwise
    """
    risk = result.risk_classification
    if risk.level is RiskLevel.UNACCEPTABLE:
        return MarketReadiness(
            jurisdiction=result.jurisdiction,
            status=ReadinessStatus.BLOCKED,
            blockers=[risk.justification],
        )

    critical = [a.title for a in result.required_actions if a.priority is ActionPriority.CRITICAL]
    if critical:
        return MarketReadiness(
            jurisdiction=result.jurisdiction,
            status=ReadinessStatus.ACTION_REQUIRED,
            blockers=critical,
        )
    return MarketReadiness(jurisdiction=result.jurisdiction, status=ReadinessStatus.READY)


def summarize_markets(results: Sequence[JurisdictionResult]) -> MarketSummary:
    """
    Headline figures: readiness per market, the highest-risk market and the
    lowest-friction market (first encountered on ties).
    """
    readiness = [assess_readiness(r) for r in results]
    aggregated = aggregate_requirements(results)

    highest_market: Optional[str] = None
    lowest_market: Optional[str] = None
    highest_rank, lowest_rank = -1, 999
    for result in results:
        rank = result.risk_classification.level.rank
        if rank > highest_rank:
            highest_rank, highest_market = rank, result.jurisdiction
        if rank < lowest_rank:
            lowest_rank, lowest_market = rank, result.jurisdiction

    return MarketSummary(
        market_readiness=readiness,
        highest_risk_market=highest_market,
        lowest_friction_market=lowest_market,
        critical_blockers=[
            b for m in readiness if m.status is ReadinessStatus.BLOCKED for b in m.blockers
        ],
        total_artifacts=aggregated.total_artifacts,
        total_actions=aggregated.total_actions,
    )
