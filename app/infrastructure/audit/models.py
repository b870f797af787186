"""Audit event model for admin operations.

One flat, validated record per attempted admin operation, attributed to
the acting admin. Operation metadata is flattened into `audit_meta_*`
fields so entries stay queryable once shipped as structured logs.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

META_PREFIX = "audit_meta_"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class AuditEvent(BaseModel):
    """Audit record of a single admin operation attempt.

    `error_type` carries the OperationStatus value of a failed attempt and
    `error_message` its admin-facing message; both are None on success.
    """

    model_config = ConfigDict(extra="allow")

    correlation_id: str
    action: str
    resource_type: str
    resource_id: str
    actor_id: str
    result: str = Field(pattern="^(success|failure)$")
    timestamp: str = Field(default_factory=_utc_timestamp)
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    duration_ms: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.result == "success"

    def to_log_payload(self) -> Dict[str, Any]:
        """Flat dict of the non-null fields, suitable as log keyword args."""
        return self.model_dump(exclude_none=True)


def create_audit_event(
    correlation_id: str,
    action: str,
    resource_type: str,
    resource_id: str,
    actor_id: str,
    result: str,
    error_type: Optional[str] = None,
    error_message: Optional[str] = None,
    duration_ms: Optional[int] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> AuditEvent:
    """Build an AuditEvent, flattening metadata under the audit_meta_ prefix.

    Metadata values are stringified; None values are kept as None and so
    dropped from the log payload.

    Raises:
        ValueError: If result is not 'success' or 'failure'.
    """
    if result not in ("success", "failure"):
        raise ValueError(f"result must be 'success' or 'failure', got: {result}")

    flattened = {
        f"{META_PREFIX}{key}": None if value is None else str(value)
        for key, value in (metadata or {}).items()
    }
    return AuditEvent(
        correlation_id=correlation_id,
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        actor_id=actor_id,
        result=result,
        error_type=error_type,
        error_message=error_message,
        duration_ms=duration_ms,
        **flattened,
    )
