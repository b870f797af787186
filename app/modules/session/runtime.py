"""Session runtime.

Consumes identity snapshots, drives the bootstrap gate and the advisory
timer, routes READY sessions and publishes render decisions to the host
shell. Owns the admin controller for as long as the admin view is shown.
"""

import asyncio
from typing import AsyncIterable, Callable, List, Optional, Union, TYPE_CHECKING

from infrastructure.identity import IdentityService, IdentityState, RoleInfo
from infrastructure.logging import get_module_logger
from infrastructure.operations import AuthorizationError
from modules.session.advisory import BootstrapAdvisory
from modules.session.bootstrap import (
    BootstrapGate,
    GateState,
    get_readiness_predicate,
)
from modules.session.context import SessionContext
from modules.session.router import AccessRouter
from modules.session.views import RenderDecision, RenderTarget, RequestedView

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from modules.admin.controller import AdminOperationController


RenderListener = Callable[[RenderDecision], None]
RoleProvider = Callable[[], RoleInfo]
ControllerFactory = Callable[[RoleProvider], "AdminOperationController"]

logger = get_module_logger()


class SessionRuntime:
    """Session core driven by identity snapshots and navigation intents.

    Snapshots are processed one at a time, each to completion (gate,
    advisory, routing, publication) before the next one is accepted.

    Usage:
        runtime = SessionRuntime(
            get_settings(),
            identity_service=IdentityService(get_settings(), profile_lookup=lookup),
            controller_factory=lambda roles: AdminOperationController(store, roles, get_settings()),
        )
        runtime.subscribe(render)
        await runtime.run(channel)

    Args:
        settings: Settings instance
        identity_service: Profile completion and role resolution
        gate: Pre-built bootstrap gate (default: predicate from settings)
        router: Access router
        advisory: Pre-built advisory timer (default: warning delay from settings)
        controller_factory: Builds the admin controller from a role provider
    """

    def __init__(
        self,
        settings: "Settings",
        identity_service: Optional[IdentityService] = None,
        gate: Optional[BootstrapGate] = None,
        router: Optional[AccessRouter] = None,
        advisory: Optional[BootstrapAdvisory] = None,
        controller_factory: Optional[ControllerFactory] = None,
    ):
        session_settings = settings.session
        self._settings = settings
        self._identity = identity_service or IdentityService(settings)
        self._gate = gate or BootstrapGate(
            get_readiness_predicate(session_settings.SESSION_READINESS_PREDICATE)
        )
        self._router = router or AccessRouter()
        self._advisory = advisory or BootstrapAdvisory(
            timeout_seconds=session_settings.SESSION_BOOTSTRAP_WARNING_SECONDS,
            on_warning=self._on_slow_start,
        )
        self._remember_post_login = session_settings.SESSION_REMEMBER_POST_LOGIN_VIEW
        self._controller_factory = controller_factory
        self._controller: Optional["AdminOperationController"] = None
        self._context = SessionContext()
        self._landed = False
        self._decision: Optional[RenderDecision] = None
        self._listeners: List[RenderListener] = []
        self._delivery_lock = asyncio.Lock()
        self._logger = logger.bind(component="session_runtime")

    @property
    def context(self) -> SessionContext:
        return self._context

    @property
    def decision(self) -> RenderDecision:
        """Last published render decision (loading before the first one)."""
        return self._decision or RenderDecision.loading()

    @property
    def gate(self) -> BootstrapGate:
        return self._gate

    def subscribe(self, listener: RenderListener) -> Callable[[], None]:
        """Register a listener for published decisions.

        Args:
            listener: Called with each newly published decision

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def run(self, stream: AsyncIterable[IdentityState]) -> None:
        """Consume snapshots until the stream ends."""
        self._logger.info("session_runtime_started")
        # The warning budget counts from bootstrap start, not from the
        # first snapshot.
        self._advisory.observe(self._gate.state)
        try:
            async for state in stream:
                await self.deliver(state)
        finally:
            self._advisory.cancel()
            self._logger.info(
                "session_runtime_stopped",
                gate=self._gate.state.value,
                revision=self._gate.last_revision,
            )

    async def deliver(self, state: IdentityState) -> RenderDecision:
        """Process one identity snapshot to completion.

        Args:
            state: Snapshot from the identity collaborator

        Returns:
            The decision current after the snapshot
        """
        async with self._delivery_lock:
            state = await self._identity.complete_profile(state)
            return self._apply(state)

    def _apply(self, state: IdentityState) -> RenderDecision:
        transition = self._gate.observe(state)
        if not transition.applied:
            return self.decision

        context = self._context.with_identity(state)
        if not state.authenticated:
            self._landed = False
        elif transition.current is GateState.READY and not self._landed:
            # First READY evaluation of this sign-in, however many
            # authenticated snapshots arrived while initializing.
            context = context.land_after_login()
            self._landed = True
            self._logger.info(
                "session_authenticated",
                landing_view=context.current_view.value,
                revision=state.revision,
            )
        self._context = context

        self._advisory.observe(transition.current)
        return self._publish(self._evaluate())

    def request_view(self, name: Union[str, RequestedView]) -> RenderDecision:
        """Navigation intent from the host shell.

        While signed out, a view other than terms/privacy is remembered as
        the post-login target.
        """
        view = RequestedView.parse(name)
        context = self._context.with_view(view)
        if (
            self._remember_post_login
            and not context.identity.authenticated
            and not view.is_public
        ):
            context = context.remember_post_login(view)
        self._context = context
        return self._publish(self._evaluate())

    def set_test_mode(self, enabled: bool) -> RenderDecision:
        self._context = self._context.with_test_mode(enabled)
        return self._publish(self._evaluate())

    def set_show_results(self, enabled: bool) -> RenderDecision:
        self._context = self._context.with_show_results(enabled)
        return self._publish(self._evaluate())

    def current_role(self) -> RoleInfo:
        """Role of the latest applied snapshot, resolved on every call."""
        return self._identity.resolve_role(self._context.identity)

    def route_current(self) -> RenderDecision:
        """Evaluate the current context without publishing."""
        return self._evaluate()

    def admin_controller(self) -> "AdminOperationController":
        """Controller for the admin view.

        Returns:
            The controller bound to the current admin view

        Raises:
            AuthorizationError: If the admin view is not being rendered
            ValueError: If no controller factory was configured
        """
        if self._decision is None or self._decision.target is not RenderTarget.ADMIN:
            raise AuthorizationError(
                "Admin operations require the admin view.",
                required_role="admin",
            )
        if self._controller is None:
            if self._controller_factory is None:
                raise ValueError("No admin controller factory configured.")
            self._controller = self._controller_factory(self.current_role)
            self._logger.info("admin_controller_mounted")
        return self._controller

    def _evaluate(self) -> RenderDecision:
        placeholder = self._gate.placeholder(
            show_timeout_warning=self._advisory.warning_active
        )
        if placeholder is not None:
            return placeholder

        context = self._context
        return self._router.route(
            self._gate.state,
            authenticated=context.identity.authenticated,
            requested_view=context.current_view,
            test_mode=context.test_mode,
            show_results=context.show_results,
            role_info=self.current_role(),
        )

    def _publish(self, decision: RenderDecision) -> RenderDecision:
        if decision.target is not RenderTarget.ADMIN and self._controller is not None:
            self._controller.unmount()
            self._controller = None
            self._logger.info("admin_controller_unmounted")

        if decision == self._decision:
            return decision

        self._logger.debug(
            "render_decision_published",
            previous=self._decision.target.value if self._decision else None,
            target=decision.target.value,
        )
        self._decision = decision
        for listener in list(self._listeners):
            try:
                listener(decision)
            except Exception as exc:
                self._logger.error(
                    "render_listener_failed",
                    target=decision.target.value,
                    error=str(exc),
                )
        return decision

    def _on_slow_start(self) -> None:
        if self._gate.state is GateState.INITIALIZING:
            self._publish(self._evaluate())
