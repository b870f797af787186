"""Tests for AccessRouter."""

import itertools

import pytest

from infrastructure.identity import UserRole
from modules.session import GateState, RenderTarget, RequestedView


def route(
    router,
    role_info,
    view="main",
    authenticated=True,
    test_mode=False,
    show_results=False,
):
    return router.route(
        GateState.READY,
        authenticated=authenticated,
        requested_view=view,
        test_mode=test_mode,
        show_results=show_results,
        role_info=role_info,
    )


@pytest.mark.unit
class TestAccessRouter:
    """Tests for routing precedence."""

    @pytest.mark.parametrize("gate_state", [GateState.INITIALIZING, GateState.ERROR])
    def test_rejects_gate_not_ready(self, router, user_role, gate_state):
        with pytest.raises(ValueError):
            router.route(gate_state, True, "main", False, False, user_role)

    @pytest.mark.parametrize(
        "view,target",
        [("terms", RenderTarget.TERMS), ("privacy", RenderTarget.PRIVACY)],
    )
    def test_public_views_render_without_authentication(
        self, router, guest_role, view, target
    ):
        decision = route(router, guest_role, view=view, authenticated=False)

        assert decision.target is target

    def test_public_views_win_over_test_mode(self, router, user_role):
        decision = route(router, user_role, view="terms", test_mode=True)

        assert decision.target is RenderTarget.TERMS

    def test_unauthenticated_renders_auth(self, router, guest_role):
        for view in ("main", "stats", "admin", "profile"):
            assert route(router, guest_role, view=view, authenticated=False).target is (
                RenderTarget.AUTH
            )

    def test_test_mode_precedes_results(self, router, user_role):
        decision = route(router, user_role, test_mode=True, show_results=True)

        assert decision.target is RenderTarget.TEST

    def test_results_mode(self, router, user_role):
        decision = route(router, user_role, view="stats", show_results=True)

        assert decision.target is RenderTarget.RESULTS

    def test_admin_view_for_admin(self, router, admin_role):
        assert route(router, admin_role, view="admin").target is RenderTarget.ADMIN

    def test_admin_view_denied_for_user(self, router, user_role):
        decision = route(router, user_role, view="admin")

        assert decision.target is RenderTarget.ACCESS_DENIED
        assert decision.required_role is UserRole.ADMIN
        assert decision.message

    def test_admin_view_denied_for_guest(self, router, guest_role):
        assert route(router, guest_role, view="admin").target is (
            RenderTarget.ACCESS_DENIED
        )

    @pytest.mark.parametrize(
        "view,target",
        [
            ("stats", RenderTarget.STATS),
            ("profile", RenderTarget.PROFILE),
            ("settings", RenderTarget.SETTINGS),
            ("main", RenderTarget.MAIN),
            ("testMode", RenderTarget.MAIN),
            ("resultsMode", RenderTarget.MAIN),
            ("unknown-view", RenderTarget.MAIN),
        ],
    )
    def test_view_dispatch(self, router, user_role, view, target):
        assert route(router, user_role, view=view).target is target

    def test_accepts_enum_views(self, router, user_role):
        assert route(router, user_role, view=RequestedView.STATS).target is (
            RenderTarget.STATS
        )

    def test_is_pure(self, router, admin_role, user_role, guest_role):
        """Identical inputs give equal decisions."""
        combinations = itertools.product(
            [True, False],
            [view.value for view in RequestedView],
            [True, False],
            [True, False],
            [admin_role, user_role, guest_role],
        )
        for authenticated, view, test_mode, show_results, role_info in combinations:
            first = route(router, role_info, view, authenticated, test_mode, show_results)
            second = route(router, role_info, view, authenticated, test_mode, show_results)
            assert first == second

    def test_non_admin_never_reaches_admin(self, router, user_role, guest_role):
        for role_info in (user_role, guest_role):
            for view in RequestedView:
                decision = route(router, role_info, view=view)
                assert decision.target is not RenderTarget.ADMIN
