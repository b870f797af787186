"""Tests for the bounded audit log."""

import pytest

from infrastructure.audit import AuditLog


@pytest.mark.unit
class TestAuditLog:
    """Tests for AuditLog."""

    def test_recent_is_newest_first(self, make_event):
        audit_log = AuditLog(capacity=10)
        for index in range(3):
            audit_log.record(make_event(correlation_id=f"corr-{index}"))

        recent = audit_log.recent()

        assert [event.correlation_id for event in recent] == [
            "corr-2",
            "corr-1",
            "corr-0",
        ]

    def test_recent_respects_limit(self, make_event):
        audit_log = AuditLog(capacity=10)
        for index in range(5):
            audit_log.record(make_event(correlation_id=f"corr-{index}"))

        assert len(audit_log.recent(limit=2)) == 2

    def test_capacity_drops_oldest(self, make_event):
        audit_log = AuditLog(capacity=2)
        for index in range(3):
            audit_log.record(make_event(correlation_id=f"corr-{index}"))

        assert len(audit_log) == 2
        assert audit_log.recent()[-1].correlation_id == "corr-1"

    def test_recent_filters_by_resource(self, make_event):
        audit_log = AuditLog()
        audit_log.record(make_event(resource_id="uid-1"))
        audit_log.record(make_event(resource_id="uid-2"))

        recent = audit_log.recent(resource_id="uid-2")

        assert [event.resource_id for event in recent] == ["uid-2"]

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            AuditLog(capacity=0)
