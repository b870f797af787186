"""Fixtures for modules.session tests."""

import pytest
from unittest.mock import Mock

from infrastructure.identity import IdentityService, RoleInfo, UserRole
from modules.admin import AdminOperationController, InMemoryUserRecordStore
from modules.session import AccessRouter, BootstrapGate, SessionRuntime


@pytest.fixture
def gate():
    return BootstrapGate()


@pytest.fixture
def router():
    return AccessRouter()


@pytest.fixture
def admin_role():
    return RoleInfo(role=UserRole.ADMIN, is_admin=True)


@pytest.fixture
def user_role():
    return RoleInfo(role=UserRole.USER, is_admin=False)


@pytest.fixture
def guest_role():
    return RoleInfo(role=UserRole.GUEST, is_admin=False)


@pytest.fixture
def user_store(admin_profile, user_profile):
    return InMemoryUserRecordStore([admin_profile, user_profile])


@pytest.fixture
def controller_factory(settings, user_store):
    """Builds real admin controllers and records each one built."""
    built = []

    def _factory(role_provider):
        controller = AdminOperationController(user_store, role_provider, settings)
        built.append(controller)
        return controller

    factory = Mock(side_effect=_factory)
    factory.built = built
    return factory


@pytest.fixture
def runtime(settings, user_store, controller_factory):
    identity_service = IdentityService(settings, profile_lookup=user_store.get_profile)
    return SessionRuntime(
        settings,
        identity_service=identity_service,
        controller_factory=controller_factory,
    )


@pytest.fixture
def decisions(runtime):
    """Decisions published by the runtime, in order."""
    published = []
    runtime.subscribe(published.append)
    return published
