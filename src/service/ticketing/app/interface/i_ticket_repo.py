from abc import ABC, abstractmethod
from typing import Any, List, Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketRepo(ABC):
    """
    Port for the ticket-to-event binding table and the ticket-ID counter.

    Ticket IDs are global across events; a binding is written once and never changed.
    """

    @abstractmethod
    async def next_ticket_id(self) -> int:
        """Allocate the next ticket id"""
        pass

    @abstractmethod
    async def bind(self, *, ticket: TicketEntity) -> TicketEntity:
        """
        Record which event a ticket was sold for.

        Raises:
            ValueError: If the ticket id is already bound
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def list_by_event_id(self, *, event_id: int) -> List[TicketEntity]:
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Opaque copy of the current state, taken when a unit of work starts"""
        pass

    @abstractmethod
    def restore(self, snapshot: Any) -> None:
        """Return to a state captured by snapshot(); used when a unit of work is not committed"""
        pass
