"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ownership_registry import IOwnershipRegistry
from src.service.ticketing.app.interface.i_payment_channel import IPaymentChannel
from src.service.ticketing.app.interface.i_snapshot_participant import ISnapshotParticipant
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.app.interface.i_ticketing_event_publisher import (
    ITicketingEventPublisher,
)

__all__ = [
    'IClock',
    'IEventRepo',
    'IOwnershipRegistry',
    'IPaymentChannel',
    'ISnapshotParticipant',
    'ITicketRepo',
    'ITicketingEventPublisher',
]
