"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.admin import AdminSettings
from infrastructure.configuration.features.session import SessionSettings

__all__ = [
    "AdminSettings",
    "SessionSettings",
]
