"""Result type for admin operations.

Every admin operation resolves to an OperationResult instead of raising, so
the admin view can show feedback and stay interactive after a failure.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single admin operation.

    Attributes:
        status: Outcome category.
        message: Text suitable for the admin-facing feedback area.
        data: Payload on success (a user list, an export artifact, ...).
        error_code: Stable machine code on failure, e.g. "FORBIDDEN".
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True when trying the same operation again later may succeed."""
        return self.status in (OperationStatus.TRANSIENT_ERROR, OperationStatus.CONFLICT)

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(OperationStatus.SUCCESS, message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Build a failed result with an explicit status."""
        return cls(status, message, data=data, error_code=error_code)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Collaborator failure (store unreachable, sink write failed).

        Nothing retries automatically; the status only tells the admin that
        trying again later is reasonable.
        """
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that repeats on retry: bad payloads, business rules."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def unauthorized(
        cls, message: str = "Admin role required.", error_code: str = "FORBIDDEN"
    ) -> "OperationResult":
        return cls.error(OperationStatus.UNAUTHORIZED, message, error_code)

    @classmethod
    def conflict(
        cls, message: str, error_code: str = "OPERATION_IN_FLIGHT"
    ) -> "OperationResult":
        return cls.error(OperationStatus.CONFLICT, message, error_code)

    @classmethod
    def not_found(cls, message: str, error_code: str = "NOT_FOUND") -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def cancelled(cls, message: str, error_code: str) -> "OperationResult":
        """The user did not confirm an irreversible action."""
        return cls.error(OperationStatus.CANCELLED, message, error_code)
