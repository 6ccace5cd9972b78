"""
JuriMap Engine Configuration

Configuration is read from environment variables (optionally from a .env
file via python-dotenv). The engine core itself needs almost nothing; these
settings govern which jurisdictions the default registry exposes, logging,
and the API server.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class EngineConfig:
    """Configuration for the applicability engine and its surfaces."""

    # Registry
    enabled_jurisdictions: List[str] = field(default_factory=list)  # empty = all

    # Logging
    log_level: str = "INFO"

    # API server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load configuration from environment variables."""
        cors = _split_csv(os.getenv("CORS_ORIGINS"))
        return cls(
            enabled_jurisdictions=_split_csv(os.getenv("JURIMAP_JURISDICTIONS")),
            log_level=os.getenv("JURIMAP_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("JURIMAP_HOST", "0.0.0.0"),
            port=int(os.getenv("JURIMAP_PORT", "8000")),
            cors_origins=cors or ["http://localhost:3000", "http://localhost:5173"],
        )

    def is_enabled(self, jurisdiction_id: str) -> bool:
        return not self.enabled_jurisdictions or jurisdiction_id in self.enabled_jurisdictions
