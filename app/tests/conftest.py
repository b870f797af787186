"""Shared pytest fixtures."""

from datetime import datetime, timezone

import pytest

from infrastructure.configuration import AdminSettings, SessionSettings, Settings
from infrastructure.identity import UserRole
from infrastructure.services import get_audit_log, get_settings
from tests.factories.identity import make_identity_state, make_profile


@pytest.fixture(autouse=True)
def reset_shared_audit_log():
    """Each test starts from an empty process-wide audit trail."""
    get_settings.cache_clear()
    get_audit_log.cache_clear()
    yield
    get_settings.cache_clear()
    get_audit_log.cache_clear()


@pytest.fixture
def session_settings():
    """Default session settings, independent of the environment."""
    return SessionSettings(
        SESSION_READINESS_PREDICATE="strict",
        SESSION_BOOTSTRAP_WARNING_SECONDS=5.0,
        SESSION_REMEMBER_POST_LOGIN_VIEW=True,
    )


@pytest.fixture
def admin_settings(tmp_path):
    """Admin settings exporting into a temporary directory."""
    return AdminSettings(
        ADMIN_EXPORT_DIRECTORY=str(tmp_path / "exports"),
        ADMIN_AUDIT_LOG_CAPACITY=100,
        ADMIN_RECENT_OPERATIONS_LIMIT=50,
        ADMIN_ALLOW_SELF_DELETE=False,
    )


@pytest.fixture
def settings(session_settings, admin_settings):
    """Settings instance built from explicit sub-settings."""
    return Settings(session=session_settings, admin=admin_settings)


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 9, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def admin_profile():
    return make_profile(
        user_id="admin-1",
        email="admin@example.com",
        display_name="Ada Admin",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_profile():
    return make_profile(user_id="uid-1", email="alice@example.com", display_name="Alice")


@pytest.fixture
def ready_admin_state(admin_profile):
    return make_identity_state(profile=admin_profile, revision=1)


@pytest.fixture
def ready_user_state(user_profile):
    return make_identity_state(profile=user_profile, revision=1)
