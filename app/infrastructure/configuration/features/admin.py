"""Admin operations feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class AdminSettings(FeatureSettings):
    """Configuration for the admin user-management surface.

    Environment Variables:
        ADMIN_EXPORT_DIRECTORY: Directory receiving exported user-data
            artifacts (default: 'exports')
        ADMIN_AUDIT_LOG_CAPACITY: Number of admin audit events kept in memory
            (default: 500)
        ADMIN_RECENT_OPERATIONS_LIMIT: Default page size when listing recent
            admin operations (default: 50)
        ADMIN_ALLOW_SELF_DELETE: Allow an admin to delete their own account
            (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        export_dir = settings.admin.ADMIN_EXPORT_DIRECTORY
        ```
    """

    ADMIN_EXPORT_DIRECTORY: str = Field(
        default="exports", alias="ADMIN_EXPORT_DIRECTORY"
    )
    ADMIN_AUDIT_LOG_CAPACITY: int = Field(
        default=500, gt=0, alias="ADMIN_AUDIT_LOG_CAPACITY"
    )
    ADMIN_RECENT_OPERATIONS_LIMIT: int = Field(
        default=50, gt=0, alias="ADMIN_RECENT_OPERATIONS_LIMIT"
    )
    ADMIN_ALLOW_SELF_DELETE: bool = Field(
        default=False, alias="ADMIN_ALLOW_SELF_DELETE"
    )
