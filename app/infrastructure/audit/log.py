"""Bounded in-memory audit trail.

Every recorded event is written to the structured logs and kept in a
fixed-size buffer so the admin view can list recent operations.
"""

from collections import deque
from typing import Deque, List, Optional

import structlog

from infrastructure.audit.models import AuditEvent


logger = structlog.get_logger()


class AuditLog:
    """Append-only audit trail with a bounded in-memory window.

    Example:
        audit_log = AuditLog(capacity=500)
        audit_log.record(event)
        latest = audit_log.recent(limit=50)
    """

    def __init__(self, capacity: int = 500):
        """Initialize the audit log.

        Args:
            capacity: Maximum number of events kept in memory. Older events
                are dropped from memory but were already logged.
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._events: Deque[AuditEvent] = deque(maxlen=capacity)
        self._logger = logger.bind(component="audit_log")

    def record(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: Event to record
        """
        self._events.append(event)
        self._logger.info("audit_event", **event.to_log_payload())

    def recent(
        self, limit: int = 50, resource_id: Optional[str] = None
    ) -> List[AuditEvent]:
        """List recorded events, newest first.

        Args:
            limit: Maximum number of events to return
            resource_id: Only return events for this target user

        Returns:
            List of AuditEvent, newest first
        """
        events = [
            event
            for event in reversed(self._events)
            if resource_id is None or event.resource_id == resource_id
        ]
        return events[:limit]

    def __len__(self) -> int:
        return len(self._events)
