"""Operation result types, status enums and the error taxonomy.

This module contains standardized result types for admin operations,
the session core exception hierarchy, and the classifier that turns
exceptions into results.
"""

from infrastructure.operations.classifiers import classify_error
from infrastructure.operations.errors import (
    AuthorizationError,
    BootstrapError,
    OperationError,
    OperationInFlightError,
    SessionCoreError,
    ValidationError,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_error",
    "SessionCoreError",
    "BootstrapError",
    "AuthorizationError",
    "OperationError",
    "OperationInFlightError",
    "ValidationError",
]
