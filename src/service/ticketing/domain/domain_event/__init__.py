"""Domain Events"""

from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    EventCreatedDomainEvent,
    TicketingDomainEvent,
    TicketPurchasedDomainEvent,
)

__all__ = [
    'EventCreatedDomainEvent',
    'TicketPurchasedDomainEvent',
    'TicketingDomainEvent',
]
