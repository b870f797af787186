"""Bootstrap gate state machine.

Decides, from identity snapshots alone, whether the application may render
anything beyond a loading or failure placeholder.

States:
    INITIALIZING -> READY       readiness predicate holds
    READY -> INITIALIZING       a newer snapshot no longer satisfies it
    any -> ERROR                provider reported an error (terminal)

Snapshots older than the last applied revision are ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from infrastructure.identity import IdentityState
from infrastructure.logging import get_module_logger
from infrastructure.operations import BootstrapError
from modules.session.views import RenderDecision

logger = get_module_logger()


ReadinessPredicate = Callable[[IdentityState], bool]


def strict_readiness(state: IdentityState) -> bool:
    """Ready flag set and initialization finished."""
    return state.ready and not state.initializing


def ready_flag_readiness(state: IdentityState) -> bool:
    """Ready flag only."""
    return state.ready


def settled_readiness(state: IdentityState) -> bool:
    """Strict readiness with no provider operation still loading."""
    return strict_readiness(state) and not state.loading


READINESS_PREDICATES: Dict[str, ReadinessPredicate] = {
    "strict": strict_readiness,
    "ready_flag": ready_flag_readiness,
    "settled": settled_readiness,
}


def get_readiness_predicate(name: str) -> ReadinessPredicate:
    """Look up a named readiness contract.

    Args:
        name: One of READINESS_PREDICATES keys

    Returns:
        The readiness predicate

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return READINESS_PREDICATES[name]
    except KeyError:
        raise ValueError(
            f"unknown readiness predicate '{name}', expected one of "
            f"{sorted(READINESS_PREDICATES)}"
        ) from None


class GateState(str, Enum):
    INITIALIZING = "initializing"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class GateTransition:
    """Outcome of observing one snapshot.

    Attributes:
        previous: State before the snapshot
        current: State after the snapshot
        revision: Revision of the observed snapshot
        applied: False when the snapshot was ignored (stale, or gate failed)
    """

    previous: GateState
    current: GateState
    revision: int
    applied: bool = True

    @property
    def changed(self) -> bool:
        return self.previous is not self.current


class BootstrapGate:
    """Bootstrap state machine over identity snapshots.

    The gate enforces no timeout; see BootstrapAdvisory for the advisory
    slow-start warning.

    Example:
        gate = BootstrapGate()
        gate.observe(IdentityState(ready=False, initializing=True))
        gate.state            # GateState.INITIALIZING
        gate.observe(IdentityState(ready=True, initializing=False, revision=1))
        gate.state            # GateState.READY
    """

    def __init__(self, readiness: ReadinessPredicate = strict_readiness):
        self._readiness = readiness
        self._state = GateState.INITIALIZING
        self._revision = -1
        self._error: Optional[BootstrapError] = None

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is GateState.READY

    @property
    def error(self) -> Optional[BootstrapError]:
        """Provider failure that moved the gate to ERROR, if any."""
        return self._error

    @property
    def last_revision(self) -> int:
        return self._revision

    def observe(self, identity: IdentityState) -> GateTransition:
        """Apply a snapshot.

        Args:
            identity: Snapshot delivered by the identity collaborator

        Returns:
            GateTransition describing the outcome
        """
        previous = self._state

        if previous is GateState.ERROR:
            logger.debug("bootstrap_snapshot_ignored", reason="gate_failed")
            return GateTransition(previous, previous, identity.revision, applied=False)

        if identity.revision < self._revision:
            logger.debug(
                "bootstrap_snapshot_ignored",
                reason="stale_revision",
                revision=identity.revision,
                last_revision=self._revision,
            )
            return GateTransition(previous, previous, identity.revision, applied=False)

        self._revision = identity.revision

        if identity.failed:
            self._state = GateState.ERROR
            self._error = BootstrapError(identity.error.message, code=identity.error.code)
        elif self._readiness(identity):
            self._state = GateState.READY
        else:
            self._state = GateState.INITIALIZING

        transition = GateTransition(previous, self._state, identity.revision)
        if transition.changed:
            log = logger.error if self._state is GateState.ERROR else logger.info
            log(
                "bootstrap_gate_transition",
                previous=previous.value,
                current=self._state.value,
                revision=identity.revision,
                error=str(self._error) if self._error else None,
            )
        return transition

    def placeholder(self, show_timeout_warning: bool = False) -> Optional[RenderDecision]:
        """Placeholder decision for the current state.

        Args:
            show_timeout_warning: Whether the slow-start warning is active

        Returns:
            Loading or failure decision, or None when READY
        """
        if self._state is GateState.ERROR:
            return RenderDecision.bootstrap_failure(str(self._error))
        if self._state is GateState.INITIALIZING:
            return RenderDecision.loading(show_timeout_warning=show_timeout_warning)
        return None
