"""Session bootstrap and routing feature settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SessionSettings(FeatureSettings):
    """Session bootstrap and view routing configuration.

    Environment Variables:
        SESSION_READINESS_PREDICATE: Readiness contract with the identity
            provider. One of 'strict' (ready and not initializing),
            'ready_flag' (ready only) or 'settled' (strict and not loading).
        SESSION_BOOTSTRAP_WARNING_SECONDS: Seconds spent initializing before
            the advisory slow-start warning is raised (default: 5)
        SESSION_REMEMBER_POST_LOGIN_VIEW: Land on the view requested while
            signed out once authentication succeeds (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        predicate_name = settings.session.SESSION_READINESS_PREDICATE
        warning_after = settings.session.SESSION_BOOTSTRAP_WARNING_SECONDS
        ```
    """

    SESSION_READINESS_PREDICATE: Literal["strict", "ready_flag", "settled"] = Field(
        default="strict", alias="SESSION_READINESS_PREDICATE"
    )
    SESSION_BOOTSTRAP_WARNING_SECONDS: float = Field(
        default=5.0, gt=0, alias="SESSION_BOOTSTRAP_WARNING_SECONDS"
    )
    SESSION_REMEMBER_POST_LOGIN_VIEW: bool = Field(
        default=True, alias="SESSION_REMEMBER_POST_LOGIN_VIEW"
    )
