"""
API Request/Response Models

Pydantic models for the FastAPI endpoints. Engine output models are reused
from ``shared.models`` directly; only the request envelopes and the
registry listing live here.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from shared.models import ProductContext, RegulatoryTrigger, RiskClassification


class MapRequest(BaseModel):
    """Request model for POST /api/map"""

    product: ProductContext
    today: Optional[date] = Field(
        None,
        description="Reference date for overdue detection (defaults to the server date)",
    )


class JurisdictionInfo(BaseModel):
    """A registered jurisdiction"""

    id: str
    name: str
    region: str
    description: str


class JurisdictionsResponse(BaseModel):
    """Response model for GET /api/jurisdictions"""

    jurisdictions: List[JurisdictionInfo]


class ExplainResponse(BaseModel):
    """Response model for POST /api/explain/{jurisdiction_id}"""

    jurisdiction: str
    risk_classification: RiskClassification
    triggers: List[RegulatoryTrigger]
