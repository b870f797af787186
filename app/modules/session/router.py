"""Role-gated access routing.

Maps a ready session (authentication, requested view, test/results flags
and role) to the surface the host shell renders.
"""

from typing import Dict, Union

from infrastructure.identity import RoleInfo, UserRole
from infrastructure.logging import get_module_logger
from infrastructure.operations import AuthorizationError
from modules.session.bootstrap import GateState
from modules.session.views import RenderDecision, RenderTarget, RequestedView

logger = get_module_logger()


class AccessRouter:
    """Pure routing over a READY session.

    Precedence, highest first:
        1. terms / privacy render unconditionally
        2. unauthenticated sessions get the AUTH surface
        3. test mode
        4. results mode
        5. view dispatch; ADMIN requires the admin role

    Example:
        router = AccessRouter()
        decision = router.route(
            GateState.READY,
            authenticated=True,
            requested_view="admin",
            test_mode=False,
            show_results=False,
            role_info=RoleInfo(role=UserRole.USER, is_admin=False),
        )
        decision.target  # RenderTarget.ACCESS_DENIED
    """

    PUBLIC_VIEWS: Dict[RequestedView, RenderTarget] = {
        RequestedView.TERMS: RenderTarget.TERMS,
        RequestedView.PRIVACY: RenderTarget.PRIVACY,
    }

    MEMBER_VIEWS: Dict[RequestedView, RenderTarget] = {
        RequestedView.STATS: RenderTarget.STATS,
        RequestedView.PROFILE: RenderTarget.PROFILE,
        RequestedView.SETTINGS: RenderTarget.SETTINGS,
    }

    def route(
        self,
        gate: GateState,
        authenticated: bool,
        requested_view: Union[str, RequestedView],
        test_mode: bool,
        show_results: bool,
        role_info: RoleInfo,
    ) -> RenderDecision:
        """Select the surface to render.

        Args:
            gate: Current bootstrap gate state; must be READY
            authenticated: Whether the session is authenticated
            requested_view: Requested view token; unknown tokens mean MAIN
            test_mode: Whether a vocabulary test is running
            show_results: Whether test results are shown
            role_info: Role of the current session

        Returns:
            RenderDecision for the inputs

        Raises:
            ValueError: If the gate is not READY
        """
        if gate is not GateState.READY:
            raise ValueError(f"cannot route while bootstrap gate is {gate.value}")

        view = RequestedView.parse(requested_view)

        if view in self.PUBLIC_VIEWS:
            return RenderDecision.view(self.PUBLIC_VIEWS[view])

        if not authenticated:
            return RenderDecision.view(RenderTarget.AUTH)

        if test_mode:
            return RenderDecision.view(RenderTarget.TEST)

        if show_results:
            return RenderDecision.view(RenderTarget.RESULTS)

        if view is RequestedView.ADMIN:
            if role_info.is_admin:
                return RenderDecision.view(RenderTarget.ADMIN)
            denial = AuthorizationError(
                "You do not have permission to view the admin panel.",
                required_role=UserRole.ADMIN.value,
            )
            logger.info(
                "admin_view_denied",
                role=role_info.role.value,
                required_role=denial.required_role,
            )
            return RenderDecision.access_denied(str(denial), UserRole.ADMIN)

        return RenderDecision.view(self.MEMBER_VIEWS.get(view, RenderTarget.MAIN))
