# modules/session/__init__.py
"""Session bootstrap and role-gated view routing.

This module turns identity snapshots into render decisions:
- BootstrapGate: INITIALIZING / READY / ERROR state machine over snapshots
- BootstrapAdvisory: advisory slow-start warning while initializing
- AccessRouter: pure, role-gated routing of a ready session
- SessionRuntime: run-to-completion driver publishing decisions to the host
"""

from modules.session.advisory import BootstrapAdvisory
from modules.session.bootstrap import (
    READINESS_PREDICATES,
    BootstrapGate,
    GateState,
    GateTransition,
    ReadinessPredicate,
    get_readiness_predicate,
    ready_flag_readiness,
    settled_readiness,
    strict_readiness,
)
from modules.session.context import SessionContext
from modules.session.router import AccessRouter
from modules.session.runtime import SessionRuntime
from modules.session.views import (
    RecoveryAction,
    RenderDecision,
    RenderTarget,
    RequestedView,
)

__all__ = [
    "AccessRouter",
    "BootstrapAdvisory",
    "BootstrapGate",
    "GateState",
    "GateTransition",
    "READINESS_PREDICATES",
    "ReadinessPredicate",
    "RecoveryAction",
    "RenderDecision",
    "RenderTarget",
    "RequestedView",
    "SessionContext",
    "SessionRuntime",
    "get_readiness_predicate",
    "ready_flag_readiness",
    "settled_readiness",
    "strict_readiness",
]
