"""Infrastructure modules for the vocabulary session core.

Centralized infrastructure components:
- configuration: Settings management (Settings, SessionSettings, AdminSettings)
- identity: Identity snapshots, profiles and role resolution
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results, error taxonomy and classification
- audit: Admin audit events and trail
- services: Cached providers (get_settings, get_role_resolver, get_audit_log)
"""
