"""
JuriMap FastAPI Application

HTTP surface for the regulatory applicability engine.
Provides endpoints for:
  - Listing registered jurisdictions
  - Mapping a product across all of its target markets
  - Mapping a single jurisdiction
  - Explaining which triggers a jurisdiction evaluated
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from api.models import (
    ExplainResponse,
    JurisdictionInfo,
    JurisdictionsResponse,
    MapRequest,
)
from jurisdictions import (
    JurisdictionNotRegisteredError,
    JurisdictionRegistry,
    analyze_product,
    build_default_registry,
    map_jurisdiction,
)
from shared.config import EngineConfig
from shared.models import ApplicabilityReport, JurisdictionResult, ProductContext

config = EngineConfig.from_env()

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("jurimap.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("Starting JuriMap API server")
    app.state.registry = build_default_registry(config)
    yield
    logger.info("Shutting down JuriMap API server")


# Create FastAPI app
app = FastAPI(
    title="JuriMap API",
    description="Regulatory applicability engine for AI products",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_registry(request: Request) -> JurisdictionRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        registry = build_default_registry(config)
        request.app.state.registry = registry
    return registry


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    return {
        "name": "JuriMap API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/api/jurisdictions", response_model=JurisdictionsResponse)
async def list_jurisdictions(request: Request):
    """List every registered jurisdiction in registration order."""
    entries = get_registry(request).list()
    return JurisdictionsResponse(
        jurisdictions=[
            JurisdictionInfo(id=e.id, name=e.name, region=e.region, description=e.description)
            for e in entries
        ]
    )


@app.post("/api/map", response_model=ApplicabilityReport)
async def map_product(body: MapRequest, request: Request):
    """
    Map a product across all of its target markets.

    Jurisdictions that are not registered are reported in ``errors``;
    the rest of the report is still produced.
    """
    return analyze_product(body.product, get_registry(request), today=body.today)


@app.post("/api/map/{jurisdiction_id}", response_model=JurisdictionResult)
async def map_single(jurisdiction_id: str, product: ProductContext, request: Request):
    """Map one jurisdiction, regardless of the product's target markets."""
    try:
        return map_jurisdiction(product, jurisdiction_id, get_registry(request))
    except JurisdictionNotRegisteredError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/api/explain/{jurisdiction_id}", response_model=ExplainResponse)
async def explain(jurisdiction_id: str, product: ProductContext, request: Request):
    """Risk classification plus every trigger the module evaluated."""
    try:
        module = get_registry(request).get_module(jurisdiction_id)
    except JurisdictionNotRegisteredError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ExplainResponse(
        jurisdiction=module.id,
        risk_classification=module.get_risk_level(product),
        triggers=module.explain(product),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Run the API server"""
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
