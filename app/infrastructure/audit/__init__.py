"""Audit infrastructure for admin operations.

This package provides:
- AuditEvent: Pydantic model for structured audit events
- create_audit_event: factory flattening operation metadata
- AuditLog: bounded in-memory audit trail written through structlog
"""

from infrastructure.audit.log import AuditLog
from infrastructure.audit.models import AuditEvent, create_audit_event

__all__ = ["AuditEvent", "AuditLog", "create_audit_event"]
