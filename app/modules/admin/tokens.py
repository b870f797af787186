"""In-flight operation tokens.

At most one live token exists per (operation kind, target user) pair. A
token is taken synchronously, before the operation's first await, and is
released when the operation ends, whatever the outcome.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, Set

from infrastructure.operations import OperationInFlightError


class OperationKind(str, Enum):
    TOGGLE_STATUS = "toggle_status"
    RESET_PASSWORD = "reset_password"
    EXPORT_DATA = "export_data"
    IMPORT_DATA = "import_data"
    CHANGE_ROLE = "change_role"
    DELETE_USER = "delete_user"


@dataclass(frozen=True)
class OperationToken:
    kind: OperationKind
    target_id: str


class OperationTokenSet:
    """Set of live operation tokens owned by one admin controller.

    Example:
        tokens = OperationTokenSet()
        with tokens.hold(OperationKind.DELETE_USER, "uid-1"):
            tokens.is_held(OperationKind.DELETE_USER, "uid-1")   # True
            tokens.is_held(OperationKind.EXPORT_DATA, "uid-1")   # False
    """

    def __init__(self):
        self._live: Set[OperationToken] = set()

    def is_held(self, kind: OperationKind, target_id: str) -> bool:
        return OperationToken(kind, target_id) in self._live

    @property
    def live(self) -> FrozenSet[OperationToken]:
        return frozenset(self._live)

    @contextmanager
    def hold(self, kind: OperationKind, target_id: str) -> Iterator[OperationToken]:
        """Hold the token for (kind, target_id) for the duration of the block.

        Raises:
            OperationInFlightError: If the token is already held
        """
        token = OperationToken(kind, target_id)
        if token in self._live:
            raise OperationInFlightError(
                f"{kind.value} is already in progress for user {target_id}",
                operation=kind.value,
                target_id=target_id,
            )
        self._live.add(token)
        try:
            yield token
        finally:
            self._live.discard(token)

    def __len__(self) -> int:
        return len(self._live)
