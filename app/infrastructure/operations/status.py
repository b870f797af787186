"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of admin
operations so callers can render feedback without inspecting exceptions.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Collaborator failure that may succeed on a later attempt
        PERMANENT_ERROR: Non-retryable error (validation, business rule)
        UNAUTHORIZED: Actor is not a resolved admin at call time
        NOT_FOUND: Resource not found
        CONFLICT: Same operation already in flight for the same target
        CANCELLED: Irreversible action not confirmed by the user
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CANCELLED = "cancelled"
