"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.audit import AuditLog
from infrastructure.configuration import Settings
from infrastructure.identity import RoleResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_role_resolver() -> RoleResolver:
    """
    Get application-scoped role resolver singleton.

    Returns:
        RoleResolver: Cached resolver instance (stateless).
    """
    return RoleResolver()


@lru_cache
def get_audit_log() -> AuditLog:
    """
    Get application-scoped admin audit log.

    Sized from settings.admin.ADMIN_AUDIT_LOG_CAPACITY so every admin
    controller created during the process shares one trail.

    Returns:
        AuditLog: Cached audit log instance.
    """
    settings = get_settings()
    return AuditLog(capacity=settings.admin.ADMIN_AUDIT_LOG_CAPACITY)
