"""Error taxonomy for the session core.

Four families, each with its own containment rule:

- BootstrapError: identity provider failed to initialize. Fatal to the
  session and surfaced to the top-level render; only a full reload recovers.
- AuthorizationError: role check failed. Contained where raised; renders a
  scoped denial.
- OperationError: one admin operation on one target failed. Contained in
  the admin controller; the in-flight token is always released.
- ValidationError: malformed import payload, rejected before any mutation.
"""

from typing import Optional


class SessionCoreError(Exception):
    """Base exception for all session core errors.

    Example:
        try:
            runtime.admin_controller()
        except SessionCoreError as e:
            logger.error("session_core_error", error=str(e))
    """

    pass


class BootstrapError(SessionCoreError):
    """Raised when the identity provider reports an initialization failure.

    Attributes:
        code: Optional provider error code
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class AuthorizationError(SessionCoreError):
    """Raised when the current actor lacks the role required for an action.

    Attributes:
        required_role: Role the action requires (e.g. 'admin')
    """

    def __init__(self, message: str, required_role: Optional[str] = None):
        super().__init__(message)
        self.required_role = required_role


class OperationError(SessionCoreError):
    """Raised when an admin operation fails for a specific target.

    Attributes:
        operation: Operation kind value (e.g. 'delete_user')
        target_id: ID of the user record the operation acted on
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        target_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.target_id = target_id


class OperationInFlightError(OperationError):
    """Raised when the same operation is already running for the same target."""

    pass


class ValidationError(SessionCoreError):
    """Raised when an import payload is malformed.

    Attributes:
        field: Offending top-level field, when known
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
