"""
In-memory Event Broadcaster Interface

Provides a pub/sub mechanism for distributing ledger notifications
to observers within the same process.
"""

from typing import Any, Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IInMemoryEventBroadcaster(Protocol):
    """
    Interface for in-memory event broadcasting

    Uses anyio's MemoryObjectStream for async support and type safety.
    """

    async def subscribe(self, *, topic: str) -> MemoryObjectReceiveStream[Any]:
        """
        Subscribe to a topic

        Args:
            topic: Topic name (e.g. 'event_created')

        Returns:
            MemoryObjectReceiveStream that will receive published payloads
        """
        ...

    async def broadcast(self, *, topic: str, payload: Any) -> int:
        """
        Broadcast a payload to all subscribers of the topic

        Returns:
            Number of subscribers the payload was delivered to
        """
        ...

    async def unsubscribe(self, *, topic: str, stream: MemoryObjectReceiveStream[Any]) -> None:
        """
        Unsubscribe and cleanup

        Note:
            - Safe to call with a non-existent topic or stream
        """
        ...
