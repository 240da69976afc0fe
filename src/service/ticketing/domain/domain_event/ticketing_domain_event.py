"""
Ticketing Domain Events

Notifications observers see after a ledger operation commits.
"""

import attrs

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


@attrs.frozen
class EventCreatedDomainEvent:
    """Fired when a host creates an event"""

    event_id: int
    host: str
    title: str
    total_tickets: int

    @classmethod
    def from_event(cls, *, event: EventEntity) -> 'EventCreatedDomainEvent':
        if event.id is None:
            raise ValueError('Event must have an id before it can be announced')
        return cls(
            event_id=event.id,
            host=event.host,
            title=event.title,
            total_tickets=event.total_tickets,
        )


@attrs.frozen
class TicketPurchasedDomainEvent:
    """Fired when a buyer receives a freshly minted ticket"""

    event_id: int
    ticket_id: int
    buyer: str

    @classmethod
    def from_ticket(cls, *, ticket: TicketEntity, buyer: str) -> 'TicketPurchasedDomainEvent':
        return cls(event_id=ticket.event_id, ticket_id=ticket.id, buyer=buyer)


TicketingDomainEvent = EventCreatedDomainEvent | TicketPurchasedDomainEvent
