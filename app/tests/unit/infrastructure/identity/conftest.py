"""Fixtures for infrastructure.identity tests."""

import pytest
from unittest.mock import AsyncMock

from infrastructure.identity import IdentityService, RoleResolver


@pytest.fixture
def resolver():
    return RoleResolver()


@pytest.fixture
def profile_lookup(admin_profile):
    """Async profile-by-id lookup returning the admin profile."""
    return AsyncMock(return_value=admin_profile)


@pytest.fixture
def identity_service(settings, profile_lookup):
    return IdentityService(settings, profile_lookup=profile_lookup)
