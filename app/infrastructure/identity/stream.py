"""In-process channel for identity snapshots.

The identity collaborator publishes IdentityState snapshots; the session
runtime consumes them as an async iterator, in emission order.
"""

import asyncio
from typing import AsyncIterator, Optional

import structlog

from infrastructure.identity.models import IdentityState


logger = structlog.get_logger()

_CLOSED = object()


class IdentityStateChannel:
    """Ordered, revision-stamping stream of identity snapshots.

    Each published snapshot gets the next revision number, so consumers can
    recognize stale deliveries even when snapshots are replayed.

    Example:
        channel = IdentityStateChannel()
        channel.publish(IdentityState(ready=True, initializing=False))
        channel.close()

        async for state in channel:
            ...
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._revision = 0
        self._closed = False
        self._latest: Optional[IdentityState] = None
        self._logger = logger.bind(component="identity_channel")

    @property
    def latest(self) -> Optional[IdentityState]:
        """Most recently published snapshot, if any."""
        return self._latest

    def publish(self, state: IdentityState) -> IdentityState:
        """Publish a snapshot.

        Args:
            state: Snapshot emitted by the identity collaborator

        Returns:
            The snapshot as delivered (with its revision stamped)

        Raises:
            RuntimeError: If the channel has been closed
        """
        if self._closed:
            raise RuntimeError("identity channel is closed")

        self._revision += 1
        stamped = state.model_copy(update={"revision": self._revision})
        self._latest = stamped
        self._queue.put_nowait(stamped)
        self._logger.debug("identity_state_published", revision=self._revision)
        return stamped

    def close(self) -> None:
        """Stop the stream once already-published snapshots are consumed."""
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> AsyncIterator[IdentityState]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[IdentityState]:
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                return
            yield item
