"""Structlog configuration and logger setup.

Configures structlog for the session core: callsite context, deployment
info, sensitive-field masking and console (development) or JSON
(production) rendering. Under pytest, output is silenced.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.services.providers.get_settings
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_deployment_info,
    mask_sensitive_data,
    truncate_large_values,
)


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _configure_for_tests() -> BoundLogger:
    # Root logger above CRITICAL keeps test output quiet while the
    # processors still run, so bound loggers behave as in production.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    git_sha: Optional[str] = None,
) -> BoundLogger:
    """Configure structured logging.

    Any argument left as None is read from settings (LOG_LEVEL,
    is_production, GIT_SHA). The environment name stamped on entries is
    "production" or the configured PREFIX.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ...).
        is_production: JSON output when True, console output otherwise.
        git_sha: Commit SHA stamped on every entry.

    Returns:
        Configured logger instance

    Example:
        # At application startup
        logger = configure_logging()

        # Local run without reading settings
        logger = configure_logging(log_level="DEBUG", is_production=False, git_sha="local")
    """
    if _is_test_environment():
        return _configure_for_tests()

    environment = "production" if is_production else "development"
    if log_level is None or is_production is None or git_sha is None:
        # Import here to avoid circular dependency
        from infrastructure.services.providers import get_settings

        settings = get_settings()
        log_level = log_level or settings.LOG_LEVEL
        git_sha = git_sha or settings.GIT_SHA
        if is_production is None:
            is_production = settings.is_production
        environment = "production" if is_production else settings.PREFIX.strip("-")

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_deployment_info(git_sha, environment),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        (
            structlog.processors.JSONRenderer()
            if is_production
            else structlog.dev.ConsoleRenderer()
        ),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds `component` (last dotted part) and `module_path` (full module
    name) of the caller.

    Returns:
        Configured logger instance with module context

    Example:
        # In modules/admin/controller.py
        logger = get_module_logger()
        # context: {"component": "controller", "module_path": "modules.admin.controller"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
