"""
JuriMap Jurisdiction Registry

Maps a jurisdiction id to its module. A registry starts empty and is filled
by explicit ``register`` calls; there is no discovery. Once built, a registry
is handed to the mapper and treated as read-only. ``freeze()`` enforces that;
``clear()`` exists for test isolation only.

Usage:
    registry = build_default_registry()
    module = registry.get_module("eu-ai-act")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from shared.config import EngineConfig
from shared.models import Jurisdiction

from .base import JurisdictionModule

logger = logging.getLogger(__name__)

JurisdictionId = Union[Jurisdiction, str]


class JurisdictionNotRegisteredError(LookupError):
    """Raised when a jurisdiction id has no registered module."""

    def __init__(self, jurisdiction_id: str):
        self.jurisdiction_id = jurisdiction_id
        super().__init__(f'Jurisdiction "{jurisdiction_id}" is not registered')


class RegistryFrozenError(RuntimeError):
    """Raised when a frozen registry is modified."""


def jurisdiction_key(jurisdiction_id: JurisdictionId) -> str:
    return jurisdiction_id.value if isinstance(jurisdiction_id, Jurisdiction) else str(jurisdiction_id)


@dataclass(frozen=True)
class RegistryEntry:
    id: str
    name: str
    region: str
    description: str
    module: JurisdictionModule


class JurisdictionRegistry:
    """Table from jurisdiction id to registered module."""

    def __init__(self, modules: Iterable[JurisdictionModule] = ()):
        self._entries: Dict[str, RegistryEntry] = {}
        self._frozen = False
        for module in modules:
            self.register(module)

    def register(
        self,
        module: JurisdictionModule,
        *,
        jurisdiction_id: Optional[JurisdictionId] = None,
        name: Optional[str] = None,
        region: Optional[str] = None,
        description: Optional[str] = None,
    ) -> RegistryEntry:
        """
        Register a module under its own jurisdiction id (or an override).

        Re-registering an id replaces the previous entry.
        """
        if self._frozen:
            raise RegistryFrozenError("Registry is frozen; build a new one instead")

        key = jurisdiction_key(jurisdiction_id if jurisdiction_id is not None else module.jurisdiction)
        entry = RegistryEntry(
            id=key,
            name=name or module.name,
            region=region if region is not None else module.region,
            description=description if description is not None else module.description,
            module=module,
        )
        if key in self._entries:
            logger.warning(f"Replacing registered jurisdiction '{key}'")
        self._entries[key] = entry
        logger.debug(f"Registered jurisdiction '{key}' ({entry.name})")
        return entry

    def get(self, jurisdiction_id: JurisdictionId) -> RegistryEntry:
        key = jurisdiction_key(jurisdiction_id)
        try:
            return self._entries[key]
        except KeyError:
            raise JurisdictionNotRegisteredError(key) from None

    def get_module(self, jurisdiction_id: JurisdictionId) -> JurisdictionModule:
        return self.get(jurisdiction_id).module

    def list(self) -> List[RegistryEntry]:
        return list(self._entries.values())

    def list_ids(self) -> List[str]:
        return list(self._entries)

    def has(self, jurisdiction_id: JurisdictionId) -> bool:
        return jurisdiction_key(jurisdiction_id) in self._entries

    def clear(self) -> None:
        """Remove every entry and unfreeze. Intended for test isolation."""
        self._entries.clear()
        self._frozen = False

    def freeze(self) -> JurisdictionRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, jurisdiction_id: object) -> bool:
        return isinstance(jurisdiction_id, (str, Jurisdiction)) and self.has(jurisdiction_id)

    def __len__(self) -> int:
        return len(self._entries)


def all_modules() -> List[JurisdictionModule]:
    """One instance of every built-in jurisdiction module."""
    from .brazil import BrazilModule
    from .china import ChinaModule
    from .eu_ai_act import EuAiActModule
    from .eu_gdpr import EuGdprModule
    from .singapore import SingaporeModule
    from .uk import UkModule
    from .us_federal import UsFederalModule
    from .us_states import (
        CaliforniaModule,
        ColoradoModule,
        IllinoisModule,
        NewYorkModule,
        TexasModule,
    )

    return [
        EuAiActModule(),
        EuGdprModule(),
        UsFederalModule(),
        CaliforniaModule(),
        ColoradoModule(),
        IllinoisModule(),
        NewYorkModule(),
        TexasModule(),
        UkModule(),
        SingaporeModule(),
        ChinaModule(),
        BrazilModule(),
    ]


def build_default_registry(config: Optional[EngineConfig] = None) -> JurisdictionRegistry:
    """
    Build a frozen registry of the built-in modules.

    When ``config.enabled_jurisdictions`` is set, only those ids are
    registered.
    """
    config = config or EngineConfig.from_env()
    registry = JurisdictionRegistry()
    for module in all_modules():
        if config.is_enabled(module.id):
            registry.register(module)
    logger.info(f"Jurisdiction registry ready: {', '.join(registry.list_ids()) or '(empty)'}")
    return registry.freeze()
