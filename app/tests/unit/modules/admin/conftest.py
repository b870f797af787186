"""Fixtures for modules.admin tests."""

import pytest
from unittest.mock import Mock

from infrastructure.audit import AuditLog
from infrastructure.identity import RoleInfo, UserRole
from modules.admin import (
    AdminOperationController,
    InMemoryArtifactSink,
    InMemoryDomainDataSource,
    InMemoryUserRecordStore,
    UserDataBundle,
)
from tests.factories import make_profile


@pytest.fixture
def bob_profile():
    return make_profile(
        user_id="uid-2",
        email="bob@example.com",
        display_name=None,
        is_active=False,
        email_verified=False,
    )


@pytest.fixture
def store(admin_profile, user_profile, bob_profile):
    return InMemoryUserRecordStore([admin_profile, user_profile, bob_profile])


@pytest.fixture
def alice_data():
    return UserDataBundle(
        words=[{"word": "serendipity", "definition": "happy accident"}],
        test_history=[{"score": 9, "total": 10}],
        statistics=[{"streak": 3}],
    )


@pytest.fixture
def domain_source(user_profile, alice_data):
    return InMemoryDomainDataSource({user_profile.id: alice_data})


@pytest.fixture
def sink():
    return InMemoryArtifactSink()


@pytest.fixture
def audit_log():
    return AuditLog(capacity=100)


@pytest.fixture
def role_provider():
    """Role provider returning an admin; tests may change return_value."""
    return Mock(return_value=RoleInfo(role=UserRole.ADMIN, is_admin=True))


@pytest.fixture
def controller(store, role_provider, settings, domain_source, sink, audit_log, fixed_now):
    return AdminOperationController(
        store,
        role_provider,
        settings,
        domain_source=domain_source,
        artifact_sink=sink,
        audit_log=audit_log,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def revoke_admin(role_provider):
    """Demote the current session to a regular user."""

    def _revoke():
        role_provider.return_value = RoleInfo(role=UserRole.USER, is_admin=False)

    return _revoke
