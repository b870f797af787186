"""Error classifier for admin operations.

Converts exceptions raised while running an admin operation into
standardized OperationResult objects, so the admin view stays interactive
and callers never have to catch collaborator exceptions themselves.

Usage:
    from infrastructure.operations.classifiers import classify_error

    try:
        await store.set_active(target.id, active, actor_id)
    except Exception as exc:
        return classify_error(exc)
"""

from infrastructure.operations.errors import (
    AuthorizationError,
    OperationError,
    OperationInFlightError,
    ValidationError,
)
from infrastructure.operations.result import OperationResult


def classify_error(exc: Exception) -> OperationResult:
    """Classify an exception into an OperationResult.

    Mapping:
    - ValidationError → PERMANENT_ERROR (VALIDATION_ERROR)
    - AuthorizationError → UNAUTHORIZED (FORBIDDEN)
    - OperationInFlightError → CONFLICT (OPERATION_IN_FLIGHT)
    - OperationError → PERMANENT_ERROR (OPERATION_FAILED)
    - LookupError → NOT_FOUND (NOT_FOUND)
    - Anything else → TRANSIENT_ERROR (COLLABORATOR_ERROR); the store,
      domain source or artifact sink failed underneath us

    Args:
        exc: Exception raised during the operation

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, ValidationError):
        return OperationResult.permanent_error(
            f"Invalid import payload: {exc}",
            error_code="VALIDATION_ERROR",
        )

    if isinstance(exc, AuthorizationError):
        return OperationResult.unauthorized(str(exc))

    if isinstance(exc, OperationInFlightError):
        return OperationResult.conflict(str(exc))

    if isinstance(exc, OperationError):
        return OperationResult.permanent_error(
            str(exc),
            error_code="OPERATION_FAILED",
        )

    if isinstance(exc, LookupError):
        return OperationResult.not_found(f"Resource not found: {exc}")

    return OperationResult.transient_error(
        f"Collaborator error: {type(exc).__name__}: {exc}",
        error_code="COLLABORATOR_ERROR",
    )
