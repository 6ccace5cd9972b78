"""
JuriMap Web API Package

FastAPI-based HTTP interface for the applicability engine.

Usage:
    # Start the server
    uvicorn api.main:app --reload

    # Or via entry point
    jurimap-api
"""

from api.main import app
from api.models import (
    ExplainResponse,
    JurisdictionInfo,
    JurisdictionsResponse,
    MapRequest,
)

__all__ = [
    "app",
    "ExplainResponse",
    "JurisdictionInfo",
    "JurisdictionsResponse",
    "MapRequest",
]
