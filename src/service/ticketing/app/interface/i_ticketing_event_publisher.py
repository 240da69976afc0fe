"""
Ticketing Event Publisher Interface

Use cases hand committed domain events to this port; observers subscribe
through the adapter behind it.
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    TicketingDomainEvent,
)


class ITicketingEventPublisher(ABC):
    @abstractmethod
    async def publish(self, *, event: TicketingDomainEvent) -> None:
        """
        Publish one notification.

        Notifications must reach observers in the order they are published.
        """
        pass
