"""Navigation tokens and render decisions.

A RenderDecision names what the host shell should show; it never carries
markup. Decisions are immutable values, so two routing passes over the same
inputs compare equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from infrastructure.identity import UserRole


class RequestedView(str, Enum):
    """View requested by navigation. Unknown names parse to MAIN."""

    MAIN = "main"
    STATS = "stats"
    ADMIN = "admin"
    PROFILE = "profile"
    SETTINGS = "settings"
    TERMS = "terms"
    PRIVACY = "privacy"
    TEST_MODE = "testMode"
    RESULTS_MODE = "resultsMode"

    @classmethod
    def parse(cls, name: Union[str, "RequestedView", None]) -> "RequestedView":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return cls.MAIN

    @property
    def is_public(self) -> bool:
        """Public views render without authentication."""
        return self in (RequestedView.TERMS, RequestedView.PRIVACY)


class RenderTarget(str, Enum):
    LOADING = "loading"
    BOOTSTRAP_ERROR = "bootstrap_error"
    AUTH = "auth"
    TERMS = "terms"
    PRIVACY = "privacy"
    TEST = "test"
    RESULTS = "results"
    MAIN = "main"
    STATS = "stats"
    PROFILE = "profile"
    SETTINGS = "settings"
    ADMIN = "admin"
    ACCESS_DENIED = "access_denied"


class RecoveryAction(str, Enum):
    RELOAD = "reload"


@dataclass(frozen=True)
class RenderDecision:
    """What to render for the current session tick.

    Attributes:
        target: Surface to render
        message: User-facing message (failure or denial text)
        recovery_action: Action offered to recover (bootstrap failure and
            slow-start warning only)
        show_timeout_warning: Advisory slow-start warning on the loading surface
        required_role: Role the denied view requires
    """

    target: RenderTarget
    message: Optional[str] = None
    recovery_action: Optional[RecoveryAction] = None
    show_timeout_warning: bool = False
    required_role: Optional[UserRole] = None

    @classmethod
    def view(cls, target: RenderTarget) -> "RenderDecision":
        return cls(target=target)

    @classmethod
    def loading(cls, show_timeout_warning: bool = False) -> "RenderDecision":
        return cls(
            target=RenderTarget.LOADING,
            show_timeout_warning=show_timeout_warning,
            recovery_action=RecoveryAction.RELOAD if show_timeout_warning else None,
        )

    @classmethod
    def bootstrap_failure(cls, message: str) -> "RenderDecision":
        return cls(
            target=RenderTarget.BOOTSTRAP_ERROR,
            message=message,
            recovery_action=RecoveryAction.RELOAD,
        )

    @classmethod
    def access_denied(cls, message: str, required_role: UserRole) -> "RenderDecision":
        return cls(
            target=RenderTarget.ACCESS_DENIED,
            message=message,
            required_role=required_role,
        )

    @property
    def is_placeholder(self) -> bool:
        """True while the session has not been bootstrapped."""
        return self.target in (RenderTarget.LOADING, RenderTarget.BOOTSTRAP_ERROR)
