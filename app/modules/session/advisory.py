"""Advisory slow-start warning for the bootstrap gate.

Purely informational: firing never changes the gate state.
"""

import asyncio
from typing import Callable, Optional

from infrastructure.logging import get_module_logger
from modules.session.bootstrap import GateState

logger = get_module_logger()


class BootstrapAdvisory:
    """Raise a warning when the gate stays INITIALIZING for too long.

    The timer is armed while the gate is INITIALIZING and cancelled (with
    the warning reset) as soon as the gate leaves that state. A later
    return to INITIALIZING arms it again.

    Args:
        timeout_seconds: Wall-clock budget before the warning fires
        on_warning: Callback invoked once when the warning fires
    """

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        on_warning: Optional[Callable[[], None]] = None,
    ):
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._timeout = timeout_seconds
        self._on_warning = on_warning
        self._handle: Optional[asyncio.TimerHandle] = None
        self._warning = False

    @property
    def warning_active(self) -> bool:
        return self._warning

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def observe(self, state: GateState) -> None:
        """Track the gate state after each snapshot."""
        if state is GateState.INITIALIZING:
            if self._handle is None and not self._warning:
                self._arm()
            return

        self.cancel()
        self._warning = False

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("bootstrap_advisory_not_armed", reason="no_running_loop")
            return
        self._handle = loop.call_later(self._timeout, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._warning = True
        logger.warning("bootstrap_slow_start", timeout_seconds=self._timeout)
        if self._on_warning is not None:
            self._on_warning()
