"""
Ticketing Event Publisher Implementation

Keeps the append-only notification log and forwards each notification to
broadcaster subscribers of its topic.
"""

from typing import Any, List, Optional

from anyio.streams.memory import MemoryObjectReceiveStream

from src.platform.event.i_in_memory_broadcaster import IInMemoryEventBroadcaster
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticketing_event_publisher import (
    ITicketingEventPublisher,
)
from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    EventCreatedDomainEvent,
    TicketingDomainEvent,
    TicketPurchasedDomainEvent,
)


class TicketingTopic:
    EVENT_CREATED = 'event_created'
    TICKET_PURCHASED = 'ticket_purchased'
    ALL = 'all'


_TOPIC_BY_EVENT_TYPE = {
    EventCreatedDomainEvent: TicketingTopic.EVENT_CREATED,
    TicketPurchasedDomainEvent: TicketingTopic.TICKET_PURCHASED,
}


class TicketingEventPublisherImpl(ITicketingEventPublisher):
    def __init__(self, *, broadcaster: IInMemoryEventBroadcaster) -> None:
        self.broadcaster = broadcaster
        self._history: List[TicketingDomainEvent] = []

    @Logger.io
    async def publish(self, *, event: TicketingDomainEvent) -> None:
        topic = _TOPIC_BY_EVENT_TYPE[type(event)]
        self._history.append(event)
        await self.broadcaster.broadcast(topic=topic, payload=event)
        await self.broadcaster.broadcast(topic=TicketingTopic.ALL, payload=event)

    async def subscribe(self, *, topic: str = TicketingTopic.ALL) -> MemoryObjectReceiveStream[Any]:
        return await self.broadcaster.subscribe(topic=topic)

    async def unsubscribe(
        self, *, stream: MemoryObjectReceiveStream[Any], topic: str = TicketingTopic.ALL
    ) -> None:
        await self.broadcaster.unsubscribe(topic=topic, stream=stream)

    def history(self, *, event_type: Optional[type] = None) -> List[TicketingDomainEvent]:
        """Notifications in publication order, optionally filtered by type"""
        if event_type is None:
            return list(self._history)
        return [event for event in self._history if isinstance(event, event_type)]
