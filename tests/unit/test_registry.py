"""
Unit Tests for the jurisdiction registry
"""

import pytest

from jurisdictions import (
    JurisdictionNotRegisteredError,
    JurisdictionRegistry,
    RegistryFrozenError,
    all_modules,
    build_default_registry,
)
from jurisdictions.eu_gdpr import EuGdprModule
from jurisdictions.uk import UkModule
from shared.config import EngineConfig
from shared.models import Jurisdiction


ALL_IDS = [
    "eu-ai-act",
    "eu-gdpr",
    "us-federal",
    "us-ca",
    "us-co",
    "us-il",
    "us-ny",
    "us-tx",
    "uk",
    "singapore",
    "china",
    "brazil",
]


class TestRegistration:
    def test_starts_empty(self, empty_registry):
        assert len(empty_registry) == 0
        assert empty_registry.list() == []

    def test_register_and_lookup(self, empty_registry):
        module = UkModule()
        entry = empty_registry.register(module)
        assert entry.id == "uk"
        assert entry.name == module.name
        assert entry.region == module.region
        assert empty_registry.get_module("uk") is module
        assert empty_registry.get_module(Jurisdiction.UK) is module

    def test_register_with_overrides(self, empty_registry):
        entry = empty_registry.register(UkModule(), name="United Kingdom", region="Europe")
        assert entry.name == "United Kingdom"
        assert entry.region == "Europe"

    def test_reregistering_replaces(self, empty_registry):
        first, second = UkModule(), UkModule()
        empty_registry.register(first)
        empty_registry.register(second)
        assert len(empty_registry) == 1
        assert empty_registry.get_module("uk") is second

    def test_has_and_contains(self, empty_registry):
        empty_registry.register(EuGdprModule())
        assert empty_registry.has("eu-gdpr")
        assert "eu-gdpr" in empty_registry
        assert Jurisdiction.EU_GDPR in empty_registry
        assert "uk" not in empty_registry
        assert 42 not in empty_registry


class TestLookupFailure:
    def test_unregistered_id_raises(self, empty_registry):
        with pytest.raises(JurisdictionNotRegisteredError) as exc_info:
            empty_registry.get("us-federal")
        assert exc_info.value.jurisdiction_id == "us-federal"
        assert "not registered" in str(exc_info.value)

    def test_error_is_lookup_error(self):
        assert issubclass(JurisdictionNotRegisteredError, LookupError)


class TestLifecycle:
    def test_clear(self, empty_registry):
        empty_registry.register(UkModule())
        empty_registry.clear()
        assert len(empty_registry) == 0

    def test_frozen_registry_rejects_registration(self, empty_registry):
        empty_registry.freeze()
        assert empty_registry.frozen
        with pytest.raises(RegistryFrozenError):
            empty_registry.register(UkModule())

    def test_clear_unfreezes(self, empty_registry):
        empty_registry.freeze()
        empty_registry.clear()
        empty_registry.register(UkModule())
        assert empty_registry.list_ids() == ["uk"]


class TestDefaultRegistry:
    def test_all_modules_in_order(self):
        assert [m.id for m in all_modules()] == ALL_IDS

    def test_module_ids_match_jurisdictions(self):
        for module in all_modules():
            assert module.jurisdiction.value == module.id

    def test_every_module_has_region_and_description(self):
        for module in all_modules():
            assert module.region
            assert module.description

    def test_default_registry_has_everything(self):
        registry = build_default_registry(EngineConfig())
        assert registry.list_ids() == ALL_IDS
        assert registry.frozen

    def test_enabled_jurisdictions_filter(self):
        registry = build_default_registry(EngineConfig(enabled_jurisdictions=["uk", "china"]))
        assert registry.list_ids() == ["uk", "china"]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("JURIMAP_JURISDICTIONS", "eu-ai-act, brazil")
        config = EngineConfig.from_env()
        assert config.enabled_jurisdictions == ["eu-ai-act", "brazil"]
        assert build_default_registry(config).list_ids() == ["eu-ai-act", "brazil"]

    def test_registries_are_independent(self):
        a = JurisdictionRegistry([UkModule()])
        b = JurisdictionRegistry()
        assert a.has("uk")
        assert not b.has("uk")
