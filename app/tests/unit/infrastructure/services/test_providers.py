"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- get_role_resolver() and get_audit_log() singletons
"""

import pytest

from infrastructure.audit import AuditLog
from infrastructure.configuration import Settings
from infrastructure.identity import RoleResolver
from infrastructure.services import get_audit_log, get_role_resolver, get_settings


@pytest.fixture(autouse=True)
def clear_provider_caches():
    get_settings.cache_clear()
    get_role_resolver.cache_clear()
    get_audit_log.cache_clear()
    yield
    get_settings.cache_clear()
    get_role_resolver.cache_clear()
    get_audit_log.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        """get_settings() returns the same instance (caching)."""
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        """get_settings() cache can be cleared for testing."""
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


@pytest.mark.unit
class TestSingletons:
    """Tests for the other cached providers."""

    def test_get_role_resolver_is_cached(self):
        resolver = get_role_resolver()

        assert isinstance(resolver, RoleResolver)
        assert get_role_resolver() is resolver

    def test_get_audit_log_is_cached(self):
        audit_log = get_audit_log()

        assert isinstance(audit_log, AuditLog)
        assert get_audit_log() is audit_log
