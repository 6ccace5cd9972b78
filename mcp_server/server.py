"""
JuriMap MCP Server

Model Context Protocol server exposing the applicability engine to agents.
Product contexts are passed as plain dictionaries and validated against
``ProductContext``; results come back as JSON-ready dictionaries.

TOOLS:
  1. list_jurisdictions - Registered jurisdictions and their regions
  2. map_product - Full applicability report across target markets
  3. map_jurisdiction - One jurisdiction's result
  4. explain_risk - Risk classification plus evaluated triggers

Validation failures and unknown jurisdictions are returned as an
``error`` entry instead of raised, so an agent can correct its input.

Usage:
    # Run as MCP server
    python -m mcp_server.server

    # Or import for testing
    from mcp_server.server import mcp
"""

import logging
from typing import Any, Dict, List, Optional

from fastmcp import FastMCP
from pydantic import ValidationError

from jurisdictions import (
    JurisdictionNotRegisteredError,
    JurisdictionRegistry,
    analyze_product,
    build_default_registry,
)
from jurisdictions import map_jurisdiction as map_one
from shared.config import EngineConfig
from shared.models import ProductContext

# Configure logging
logger = logging.getLogger(__name__)

# Create FastMCP server
mcp = FastMCP(
    name="jurimap",
    instructions="JuriMap Regulatory Applicability Engine - AI product obligations across jurisdictions",
)

# Registry built on first use
_registry: Optional[JurisdictionRegistry] = None


def get_registry() -> JurisdictionRegistry:
    """Get the shared registry instance (built once from the environment)."""
    global _registry
    if _registry is None:
        _registry = build_default_registry(EngineConfig.from_env())
    return _registry


def _parse_product(product: Dict[str, Any]) -> ProductContext:
    return ProductContext.model_validate(product)


def _validation_error(e: ValidationError) -> Dict[str, Any]:
    logger.warning(f"Invalid product context: {e.error_count()} errors")
    return {
        "error": "Invalid product context",
        "details": e.errors(include_url=False),
    }


# =============================================================================
# Tool 1: list_jurisdictions
# =============================================================================

def list_jurisdictions_impl() -> List[Dict[str, Any]]:
    """
    List every registered jurisdiction.

    Returns:
        List of dictionaries with id, name, region and description, in
        registration order
    """
    return [
        {"id": e.id, "name": e.name, "region": e.region, "description": e.description}
        for e in get_registry().list()
    ]


@mcp.tool()
def list_jurisdictions() -> List[Dict[str, Any]]:
    """List the jurisdictions the engine can evaluate."""
    return list_jurisdictions_impl()


# =============================================================================
# Tool 2: map_product
# =============================================================================

def map_product_impl(product: Dict[str, Any]) -> Dict[str, Any]:
    """
    Produce the full applicability report for a product.

    Args:
        product: ProductContext fields; ``target_markets`` selects and
            orders the jurisdictions

    Returns:
        Dictionary with:
            - results: per-jurisdiction results
            - errors: jurisdictions that could not be mapped
            - aggregate: flattened artifacts/actions and highest risk
            - merged_artifacts: artifacts deduplicated across jurisdictions
            - action_plan: critical / important / recommended buckets
            - conflicts: cross-jurisdiction tensions
            - summary: launch readiness per market
    """
    try:
        ctx = _parse_product(product)
    except ValidationError as e:
        return _validation_error(e)

    report = analyze_product(ctx, get_registry())
    return report.model_dump(mode="json")


@mcp.tool()
def map_product(product: Dict[str, Any]) -> Dict[str, Any]:
    """Map an AI product's obligations across all of its target markets."""
    return map_product_impl(product)


# =============================================================================
# Tool 3: map_jurisdiction
# =============================================================================

def map_jurisdiction_impl(product: Dict[str, Any], jurisdiction_id: str) -> Dict[str, Any]:
    """
    Map a single jurisdiction.

    Args:
        product: ProductContext fields
        jurisdiction_id: Registered jurisdiction id (e.g. "eu-ai-act")

    Returns:
        The JurisdictionResult as a dictionary, or a dictionary with an
        ``error`` entry when the id is not registered
    """
    try:
        ctx = _parse_product(product)
    except ValidationError as e:
        return _validation_error(e)

    try:
        result = map_one(ctx, jurisdiction_id, get_registry())
    except JurisdictionNotRegisteredError as e:
        return {"error": str(e), "jurisdiction": e.jurisdiction_id}
    return result.model_dump(mode="json")


@mcp.tool()
def map_jurisdiction(product: Dict[str, Any], jurisdiction_id: str) -> Dict[str, Any]:
    """Map an AI product's obligations in one jurisdiction."""
    return map_jurisdiction_impl(product, jurisdiction_id)


# =============================================================================
# Tool 4: explain_risk
# =============================================================================

def explain_risk_impl(product: Dict[str, Any], jurisdiction_id: str) -> Dict[str, Any]:
    """
    Explain a jurisdiction's risk classification.

    Returns:
        Dictionary with:
            - jurisdiction: str
            - risk_classification: level, justification, categories, provisions
            - triggers: every trigger the module evaluated, satisfied or not
    """
    try:
        ctx = _parse_product(product)
    except ValidationError as e:
        return _validation_error(e)

    try:
        module = get_registry().get_module(jurisdiction_id)
    except JurisdictionNotRegisteredError as e:
        return {"error": str(e), "jurisdiction": e.jurisdiction_id}

    return {
        "jurisdiction": module.id,
        "risk_classification": module.get_risk_level(ctx).model_dump(mode="json"),
        "triggers": [t.model_dump(mode="json") for t in module.explain(ctx)],
    }


@mcp.tool()
def explain_risk(product: Dict[str, Any], jurisdiction_id: str) -> Dict[str, Any]:
    """Explain why a jurisdiction classifies an AI product the way it does."""
    return explain_risk_impl(product, jurisdiction_id)


# =============================================================================
# Main entry point
# =============================================================================

def main():
    """Run the MCP server"""
    logging.basicConfig(level=EngineConfig.from_env().log_level)
    mcp.run()


if __name__ == "__main__":
    main()
