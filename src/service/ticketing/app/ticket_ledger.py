"""
Ticket Ledger - public operation surface

Every caller-facing operation takes the authenticated caller address
explicitly; the ledger itself never decides who is calling.
"""

from datetime import datetime
from typing import List, Optional

from src.service.ticketing.app.command.event_registry import EventRegistry
from src.service.ticketing.app.command.ticket_ownership_facade import TicketOwnershipFacade
from src.service.ticketing.app.command.ticket_sale_engine import TicketSaleEngine
from src.service.ticketing.app.dto.event_details import EventDetails


class TicketLedger:
    def __init__(
        self,
        *,
        event_registry: EventRegistry,
        ticket_sale_engine: TicketSaleEngine,
        ticket_ownership_facade: TicketOwnershipFacade,
    ) -> None:
        self.event_registry = event_registry
        self.ticket_sale_engine = ticket_sale_engine
        self.ticket_ownership_facade = ticket_ownership_facade

    async def create_event(
        self,
        *,
        title: str,
        date: datetime,
        price_in_wei: int,
        total_tickets: int,
        caller: str,
    ) -> int:
        return await self.event_registry.create_event(
            title=title,
            date=date,
            price_in_wei=price_in_wei,
            total_tickets=total_tickets,
            caller=caller,
        )

    async def buy_ticket(self, *, event_id: int, caller: str, paid_amount: int) -> int:
        return await self.ticket_sale_engine.buy_ticket(
            event_id=event_id, caller=caller, paid_amount=paid_amount
        )

    async def transfer_ticket(
        self, *, from_address: str, to_address: str, ticket_id: int, caller: str
    ) -> None:
        await self.ticket_ownership_facade.transfer_ticket(
            from_address=from_address, to_address=to_address, ticket_id=ticket_id, caller=caller
        )

    async def deactivate_event(self, *, event_id: int, caller: str) -> None:
        await self.event_registry.deactivate_event(event_id=event_id, caller=caller)

    async def get_event_details(self, *, event_id: int) -> EventDetails:
        return await self.event_registry.get_event(event_id=event_id)

    async def find_event(self, *, event_id: int) -> Optional[EventDetails]:
        return await self.event_registry.find_event(event_id=event_id)

    async def approve(self, *, approved: str, ticket_id: int, caller: str) -> None:
        await self.ticket_ownership_facade.approve(
            approved=approved, ticket_id=ticket_id, caller=caller
        )

    async def set_approval_for_all(self, *, operator: str, approved: bool, caller: str) -> None:
        await self.ticket_ownership_facade.set_approval_for_all(
            operator=operator, approved=approved, caller=caller
        )

    async def owner_of(self, *, ticket_id: int) -> str:
        return await self.ticket_ownership_facade.owner_of(ticket_id=ticket_id)

    async def balance_of(self, *, owner: str) -> int:
        return await self.ticket_ownership_facade.balance_of(owner=owner)

    async def get_ticket_event(self, *, ticket_id: int) -> int:
        return await self.ticket_sale_engine.get_ticket_event(ticket_id=ticket_id)

    async def list_event_tickets(self, *, event_id: int) -> List[int]:
        return await self.ticket_sale_engine.list_event_tickets(event_id=event_id)
