from typing import Dict, List, Optional, Tuple

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class InMemoryTicketRepoImpl(ITicketRepo):
    def __init__(self) -> None:
        self._last_ticket_id = 0
        self._tickets: Dict[int, TicketEntity] = {}

    @Logger.io
    async def next_ticket_id(self) -> int:
        self._last_ticket_id += 1
        return self._last_ticket_id

    @Logger.io
    async def bind(self, *, ticket: TicketEntity) -> TicketEntity:
        if ticket.id in self._tickets:
            raise ValueError(f'Ticket {ticket.id} is already bound to an event')

        self._tickets[ticket.id] = ticket
        return ticket

    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        return self._tickets.get(ticket_id)

    async def list_by_event_id(self, *, event_id: int) -> List[TicketEntity]:
        # Dict keeps insertion order, which is mint order
        return [ticket for ticket in self._tickets.values() if ticket.event_id == event_id]

    def snapshot(self) -> Tuple[int, Dict[int, TicketEntity]]:
        # TicketEntity is frozen, a shallow copy is enough
        return self._last_ticket_id, dict(self._tickets)

    def restore(self, snapshot: Tuple[int, Dict[int, TicketEntity]]) -> None:
        last_ticket_id, tickets = snapshot
        self._last_ticket_id = last_ticket_id
        self._tickets = dict(tickets)
