from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InactiveEventError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_payment_channel import IPaymentChannel
from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    TicketPurchasedDomainEvent,
)
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class TicketSaleEngine:
    """
    Sells tickets against event records

    Flow (one unit of work):
    1. Check the event: active, not yet started, not sold out, exact payment
    2. Allocate the next global ticket id and mint it to the buyer
    3. Bind ticket -> event and increment tickets_sold
    4. Push the whole payment to the host

    Any failure, including a refused payment in step 4, restores the state
    captured when the unit of work started.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        clock: IClock,
        payment_channel: IPaymentChannel,
    ) -> None:
        self.uow = uow
        self.clock = clock
        self.payment_channel = payment_channel

    @Logger.io
    async def buy_ticket(self, *, event_id: int, caller: str, paid_amount: int) -> int:
        """
        Buy one ticket for an event

        Args:
            event_id: Event to buy for
            caller: Buyer address, receives the ticket
            paid_amount: Value sent with the purchase, must equal the price

        Returns:
            The minted ticket id

        Raises:
            InactiveEventError: Event deactivated or unknown
            EventExpiredError: Event date reached
            SoldOutError: No tickets left
            PaymentMismatchError: paid_amount differs from the price
            PaymentDeliveryError: Host refused the payment
        """
        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if event is None:
                # Unknown ids read as a default record, which is never active
                raise InactiveEventError('Event is not active')

            event.ensure_purchasable(now=self.clock.now(), paid_amount=paid_amount)

            ticket = TicketEntity(id=await self.uow.ticket_repo.next_ticket_id(), event_id=event_id)
            await self.uow.ownership_registry.mint(to_address=caller, token_id=ticket.id)
            await self.uow.ticket_repo.bind(ticket=ticket)
            event.record_sale()
            await self.uow.event_repo.update(event=event)

            await self.payment_channel.push(recipient=event.host, amount=paid_amount)

            self.uow.collect_event(
                TicketPurchasedDomainEvent.from_ticket(ticket=ticket, buyer=caller)
            )
            await self.uow.commit()

        Logger.base.info(
            f'🎟️ [SALE] Ticket {ticket.id} for event {event_id} sold to {caller} '
            f'({event.tickets_sold}/{event.total_tickets})'
        )
        return ticket.id

    async def get_ticket_event(self, *, ticket_id: int) -> int:
        """Event id a ticket was sold for, 0 for unknown tickets"""
        ticket = await self.uow.ticket_repo.get_by_id(ticket_id=ticket_id)
        return ticket.event_id if ticket else 0

    async def list_event_tickets(self, *, event_id: int) -> List[int]:
        tickets = await self.uow.ticket_repo.list_by_event_id(event_id=event_id)
        return [ticket.id for ticket in tickets]
