"""Two-step confirmation for irreversible admin operations.

`request_confirmation` hands out a PendingConfirmation; the UI resolves it
with `confirm()` or `cancel()`, and the operation awaits the decision.
"""

import asyncio
from enum import Enum

from modules.admin.tokens import OperationKind


class ConfirmationState(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PendingConfirmation:
    """Acknowledgment for one irreversible operation on one target.

    The first decision wins; later calls to confirm() or cancel() are
    ignored.

    Args:
        kind: Operation the confirmation applies to
        target_id: User the confirmation applies to
        prompt: Text shown to the admin
    """

    def __init__(self, kind: OperationKind, target_id: str, prompt: str):
        self.kind = kind
        self.target_id = target_id
        self.prompt = prompt
        self._state = ConfirmationState.PENDING
        self._decided = asyncio.Event()

    @property
    def state(self) -> ConfirmationState:
        return self._state

    @property
    def is_decided(self) -> bool:
        return self._state is not ConfirmationState.PENDING

    def matches(self, kind: OperationKind, target_id: str) -> bool:
        return self.kind is kind and self.target_id == target_id

    def confirm(self) -> None:
        self._decide(ConfirmationState.CONFIRMED)

    def cancel(self) -> None:
        self._decide(ConfirmationState.CANCELLED)

    async def wait(self) -> bool:
        """Wait for the admin's decision.

        Returns:
            True if confirmed, False if cancelled
        """
        await self._decided.wait()
        return self._state is ConfirmationState.CONFIRMED

    def _decide(self, state: ConfirmationState) -> None:
        if self.is_decided:
            return
        self._state = state
        self._decided.set()

    def __repr__(self) -> str:
        return (
            f"PendingConfirmation(kind={self.kind.value!r}, "
            f"target_id={self.target_id!r}, state={self._state.value!r})"
        )
