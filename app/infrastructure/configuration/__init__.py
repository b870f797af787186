"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
vocabulary session core using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    SessionSettings: Bootstrap and routing settings class
    AdminSettings: Admin operations settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    warning_after = settings.session.SESSION_BOOTSTRAP_WARNING_SECONDS
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import AdminSettings, SessionSettings

__all__ = ["Settings", "SessionSettings", "AdminSettings"]
