"""
In-memory Event Broadcaster Implementation

Topic-keyed broadcaster used to fan ledger notifications out to observers.
"""

from typing import Any, Dict, List

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger


class InMemoryEventBroadcasterImpl:
    """
    In-memory pub/sub for ledger notifications

    Architecture:
    - Unit of work commit -> publisher -> broadcast() -> observer streams
    - Each topic has a list of subscriber stream tuples
    - Auto-cleanup empty subscriber lists

    Memory Management:
    - Stream max buffer: configurable, defaults to 100 payloads
    - Drop policy: drop if stream full (send_nowait raises WouldBlock), logged as warning
    - Streams closed by their observer are removed on the next broadcast
    """

    def __init__(self, *, max_buffer_size: int = 100) -> None:
        self._max_buffer_size = max_buffer_size
        # topic -> list of (send_stream, receive_stream) tuples
        self._subscribers: Dict[
            str, List[tuple[MemoryObjectSendStream[Any], MemoryObjectReceiveStream[Any]]]
        ] = {}

    async def subscribe(self, *, topic: str) -> MemoryObjectReceiveStream[Any]:
        send_stream, receive_stream = create_memory_object_stream[Any](
            max_buffer_size=self._max_buffer_size
        )
        self._subscribers.setdefault(topic, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to {topic} '
            f'(total subscribers: {len(self._subscribers[topic])})'
        )
        return receive_stream

    async def broadcast(self, *, topic: str, payload: Any) -> int:
        if topic not in self._subscribers:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for {topic}')
            return 0

        delivered = 0
        dropped = 0
        closed: List[tuple[MemoryObjectSendStream[Any], MemoryObjectReceiveStream[Any]]] = []
        for subscriber in self._subscribers[topic]:
            send_stream, _ = subscriber
            try:
                send_stream.send_nowait(payload)
                delivered += 1
            except WouldBlock:
                # Slow consumer
                dropped += 1
                Logger.base.warning(f'⚠️ [BROADCASTER] Stream full for {topic}, dropping payload')
            except (BrokenResourceError, ClosedResourceError):
                # Observer closed its stream without unsubscribing
                closed.append(subscriber)

        if closed:
            await self._remove_subscribers(topic=topic, subscribers=closed)
            Logger.base.info(f'📡 [BROADCASTER] Removed {len(closed)} closed stream(s) from {topic}')

        Logger.base.debug(
            f'📡 [BROADCASTER] Broadcast to {topic}: delivered={delivered}, dropped={dropped}'
        )
        return delivered

    async def _remove_subscribers(
        self,
        *,
        topic: str,
        subscribers: List[tuple[MemoryObjectSendStream[Any], MemoryObjectReceiveStream[Any]]],
    ) -> None:
        for send_stream, receive_stream in subscribers:
            await send_stream.aclose()
            await receive_stream.aclose()
            self._subscribers[topic].remove((send_stream, receive_stream))

        if not self._subscribers[topic]:
            del self._subscribers[topic]

    async def unsubscribe(self, *, topic: str, stream: MemoryObjectReceiveStream[Any]) -> None:
        if topic not in self._subscribers:
            return

        subscribers = self._subscribers[topic]
        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed from {topic} (remaining: {len(subscribers)})'
                )
                break

        if not self._subscribers[topic]:
            del self._subscribers[topic]
