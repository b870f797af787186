"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the vocabulary session core using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_operation_context(): Context manager for operation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - set_correlation_id(): Set correlation ID in context
    - clear_operation_context(): Clear all operation context

Processors:
    - add_deployment_info(): Processor stamping git SHA and environment
    - mask_sensitive_data(): Processor to redact sensitive fields
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_operation_context,
    )

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")

    # Around an admin operation
    with bind_operation_context(actor_id="admin-1", operation="toggle_status"):
        logger.info("toggling_user_status")
"""

# Core logging setup
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

# Operation context binding
from infrastructure.logging.context import (
    bind_operation_context,
    get_correlation_id,
    set_correlation_id,
    clear_operation_context,
)

# Log processors
from infrastructure.logging.formatters import (
    add_deployment_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_operation_context",
    "get_correlation_id",
    "set_correlation_id",
    "clear_operation_context",
    # Processors
    "add_deployment_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
