"""
JuriMap Test Configuration

Shared pytest fixtures and configuration for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from jurisdictions import JurisdictionRegistry, all_modules  # noqa: E402
from shared.models import (  # noqa: E402
    AgenticAiContext,
    AutomationLevel,
    AutonomyLevel,
    DecisionImpact,
    ProductContext,
    ProductType,
)


# =============================================================================
# Environment Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (exercises every module)"
    )


# =============================================================================
# Fixtures: Registry
# =============================================================================

@pytest.fixture
def registry():
    """A frozen registry holding every built-in module."""
    return JurisdictionRegistry(all_modules()).freeze()


@pytest.fixture
def empty_registry():
    """A fresh, unfrozen, empty registry."""
    registry = JurisdictionRegistry()
    yield registry
    registry.clear()


# =============================================================================
# Fixtures: API
# =============================================================================

@pytest.fixture(scope="module")
def api_client():
    """Create FastAPI test client."""
    from fastapi.testclient import TestClient
    from api.main import app
    with TestClient(app) as client:
        yield client


# =============================================================================
# Fixtures: Product Contexts
# =============================================================================

def make_context(**overrides) -> ProductContext:
    """Build a ProductContext with neutral defaults."""
    fields = {
        "description": "An internal tool that summarises engineering metrics.",
        "product_type": ProductType.OTHER,
        "target_markets": ["eu-ai-act"],
    }
    fields.update(overrides)
    return ProductContext(**fields)


@pytest.fixture
def context_factory():
    """Return the ProductContext builder."""
    return make_context


@pytest.fixture
def minimal_context():
    """A product that triggers nothing anywhere."""
    return make_context(
        description="An internal tool that summarises build metrics for engineers.",
        target_markets=["eu-ai-act", "eu-gdpr", "singapore"],
    )


@pytest.fixture
def agentic_payments_context():
    """Bounded-autonomy agent that can move money (EU AI Act, GDPR, Singapore)."""
    return make_context(
        description="An autonomous procurement agent that places purchase orders with suppliers.",
        product_type=ProductType.AGENT,
        decision_impact=DecisionImpact.MATERIAL,
        automation_level=AutomationLevel.HUMAN_ON_THE_LOOP,
        target_markets=["eu-ai-act", "eu-gdpr", "singapore"],
        agentic_ai_context=AgenticAiContext(
            is_agentic=True,
            autonomy_level=AutonomyLevel.BOUNDED,
            can_make_financial_transactions=True,
        ),
    )


@pytest.fixture
def generator_context():
    """A generator targeting the EU AI Act and China."""
    return make_context(
        description="A marketing copy generator for online shops.",
        product_type=ProductType.GENERATOR,
        target_markets=["eu-ai-act", "china"],
    )
