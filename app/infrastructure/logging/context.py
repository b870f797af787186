"""Operation context binding for structured logging.

This module provides utilities for binding operation-scoped context
to logs, so that the correlation ID, acting admin and target user flow
through every log entry emitted while an admin operation runs.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(actor_id="admin-1", operation="delete_user"):
        # All logs within this block will include the context
        logger.info("deleting_user")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_operation_context(
    correlation_id: Optional[str] = None,
    actor_id: Optional[str] = None,
    operation: Optional[str] = None,
    target_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind operation-scoped context to all logs within the context manager.

    Contextvars are task-local under asyncio, so concurrent operations on
    different targets keep their own context.

    Args:
        correlation_id: Unique operation identifier. Auto-generated if not provided.
        actor_id: ID of the admin performing the operation.
        operation: Operation kind (e.g., "toggle_status").
        target_id: ID of the user record the operation acts on.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation ID bound for the block.

    Example:
        with bind_operation_context(
            actor_id=actor_id,
            operation="export_data",
            target_id=target.id,
        ) as correlation_id:
            logger.info("export_started")
    """
    context: dict[str, Any] = {}

    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if actor_id is not None:
        context["actor_id"] = actor_id

    if operation is not None:
        context["operation"] = operation

    if target_id is not None:
        context["target_id"] = target_id

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context.

    Args:
        correlation_id: The correlation ID to set.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
