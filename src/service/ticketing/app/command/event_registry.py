from datetime import datetime
from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import AuthorizationError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.event_details import EventDetails
from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    EventCreatedDomainEvent,
)
from src.service.ticketing.domain.entity.event_entity import EventEntity


class EventRegistry:
    """
    Creates events, answers lookups and deactivates events on the host's request.

    Owns the event-ID counter and the event table through uow.event_repo.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, clock: IClock) -> None:
        self.uow = uow
        self.clock = clock

    @Logger.io
    async def create_event(
        self,
        *,
        title: str,
        date: datetime,
        price_in_wei: int,
        total_tickets: int,
        caller: str,
    ) -> int:
        """
        Create an event hosted by the caller

        Args:
            title: Event title
            date: When the event takes place, must be in the future
            price_in_wei: Exact price of one ticket, must be positive
            total_tickets: Fixed ticket supply, must be positive
            caller: Address of the host

        Returns:
            The new event id

        Raises:
            ValidationError: If any parameter is invalid; nothing is created
        """
        async with self.uow:
            event = EventEntity.create(
                host=caller,
                title=title,
                date=date,
                price_in_wei=price_in_wei,
                total_tickets=total_tickets,
                now=self.clock.now(),
            )
            created = await self.uow.event_repo.create(event=event)
            self.uow.collect_event(EventCreatedDomainEvent.from_event(event=created))
            await self.uow.commit()

        Logger.base.info(
            f'🎫 [EVENT-REGISTRY] Created event {created.id} "{created.title}" '
            f'with {created.total_tickets} tickets for host {created.host}'
        )
        return created.id  # type: ignore[return-value]

    async def get_event(self, *, event_id: int) -> EventDetails:
        """Zero-default lookup: unknown ids yield EventDetails.empty() instead of an error"""
        return await self.find_event(event_id=event_id) or EventDetails.empty()

    async def find_event(self, *, event_id: int) -> Optional[EventDetails]:
        event = await self.uow.event_repo.get_by_id(event_id=event_id)
        return EventDetails.from_entity(event=event) if event else None

    async def require_event(self, *, event_id: int) -> EventDetails:
        details = await self.find_event(event_id=event_id)
        if details is None:
            raise NotFoundError(f'Event {event_id} not found')
        return details

    @Logger.io
    async def deactivate_event(self, *, event_id: int, caller: str) -> None:
        """
        Stop sales for an event. Idempotent for the host.

        An unknown event fails the same host check as a foreign caller, so
        "not found" and "not the host" both surface as AuthorizationError.
        """
        async with self.uow:
            event = await self.uow.event_repo.get_by_id(event_id=event_id)
            if event is None:
                raise AuthorizationError('Only the event host can deactivate the event')

            event.deactivate(caller=caller)
            await self.uow.event_repo.update(event=event)
            await self.uow.commit()

        Logger.base.info(f'🛑 [EVENT-REGISTRY] Event {event_id} deactivated by {caller}')
