"""Pytest fixtures for audit infrastructure tests."""

import pytest

from infrastructure.audit import AuditEvent


@pytest.fixture
def make_event():
    """Factory for audit events on user records."""

    def _make(
        resource_id="uid-1",
        action="toggle_status",
        result="success",
        correlation_id="corr-1",
        **extra,
    ):
        return AuditEvent(
            correlation_id=correlation_id,
            timestamp="2024-03-09T14:30:00+00:00",
            action=action,
            resource_type="user",
            resource_id=resource_id,
            actor_id="admin-1",
            result=result,
            **extra,
        )

    return _make
