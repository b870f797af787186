"""Immutable per-tick session context."""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from infrastructure.identity import IdentityState
from modules.session.views import RequestedView


@dataclass(frozen=True)
class SessionContext:
    """Everything the router needs for one evaluation.

    Updates never mutate; each `with_*` method returns a new context.

    Attributes:
        identity: Latest applied identity snapshot
        current_view: View requested by navigation
        test_mode: A vocabulary test is running
        show_results: Test results are shown
        post_login_view: View to land on once authentication succeeds
    """

    identity: IdentityState = field(default_factory=IdentityState)
    current_view: RequestedView = RequestedView.MAIN
    test_mode: bool = False
    show_results: bool = False
    post_login_view: Optional[RequestedView] = None

    def with_identity(self, identity: IdentityState) -> "SessionContext":
        return replace(self, identity=identity)

    def with_view(self, view: Union[str, RequestedView]) -> "SessionContext":
        return replace(self, current_view=RequestedView.parse(view))

    def with_test_mode(self, enabled: bool) -> "SessionContext":
        return replace(self, test_mode=enabled)

    def with_show_results(self, enabled: bool) -> "SessionContext":
        return replace(self, show_results=enabled)

    def remember_post_login(self, view: Optional[RequestedView]) -> "SessionContext":
        return replace(self, post_login_view=view)

    def land_after_login(self) -> "SessionContext":
        """Move to the remembered post-login view (MAIN when none)."""
        landing = self.post_login_view or RequestedView.MAIN
        return replace(self, current_view=landing, post_login_view=None)
