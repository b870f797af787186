"""
Dependency injection services.

Provides cached provider functions for application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_audit_log,
    get_role_resolver,
    get_settings,
)

__all__ = [
    "get_audit_log",
    "get_role_resolver",
    "get_settings",
]
