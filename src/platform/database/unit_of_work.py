"""
Unit of Work Pattern - serializes ledger mutations and makes each one atomic

Architecture:
- UoW owns the single writer lock of one ledger
- UoW snapshots every participant on enter and restores them unless committed
- Repositories and the ownership registry are reached through the UoW
- Domain events are collected during the block and published only after commit
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Dict, List

import anyio

from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_event_repo import IEventRepo
    from src.service.ticketing.app.interface.i_ownership_registry import IOwnershipRegistry
    from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
    from src.service.ticketing.app.interface.i_ticketing_event_publisher import (
        ITicketingEventPublisher,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the ticket ledger

    Usage:
        async with uow:
            event = await uow.event_repo.create(event=...)
            uow.collect_event(EventCreatedDomainEvent.from_event(event=event))
            await uow.commit()
    """

    event_repo: IEventRepo
    ticket_repo: ITicketRepo
    ownership_registry: IOwnershipRegistry

    def __init__(self) -> None:
        self.domain_events: List[Any] = []

    def collect_event(self, event: Any) -> None:
        self.domain_events.append(event)

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()
        await self._publish_events()

    async def _publish_events(self) -> None:
        events, self.domain_events = self.domain_events, []
        for event in events:
            try:
                await self._publish(event)
            except Exception as e:
                # Log error but don't fail the committed transaction
                Logger.base.error(f'Failed to publish event {event.__class__.__name__}: {e}')

    @abc.abstractmethod
    async def _publish(self, event: Any) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    In-memory implementation of Unit of Work

    One instance guards one ledger. Entering the block waits for the writer
    lock, so mutating operations never interleave. Every repository and the
    ownership registry must support snapshot/restore; a participant that
    cannot be rolled back is rejected at construction.
    """

    def __init__(
        self,
        *,
        event_repo: IEventRepo,
        ticket_repo: ITicketRepo,
        ownership_registry: IOwnershipRegistry,
        event_publisher: ITicketingEventPublisher,
    ) -> None:
        from src.service.ticketing.app.interface.i_snapshot_participant import (
            ISnapshotParticipant,
        )

        super().__init__()
        self.event_repo = event_repo
        self.ticket_repo = ticket_repo
        self.ownership_registry = ownership_registry
        self.event_publisher = event_publisher
        self.participants: List[Any] = [event_repo, ticket_repo, ownership_registry]
        for participant in self.participants:
            if not isinstance(participant, ISnapshotParticipant):
                raise TypeError(
                    f'{type(participant).__name__} cannot take part in a unit of work: '
                    'snapshot() and restore() are required'
                )

        self._lock = anyio.Lock()
        self._snapshots: Dict[int, Any] = {}
        self._committed = False

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self._lock.acquire()
        try:
            self._committed = False
            self.domain_events = []
            self._snapshots = {id(p): p.snapshot() for p in self.participants}
        except BaseException:
            self._snapshots = {}
            self._lock.release()
            raise
        await super().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            self._snapshots = {}
            self._lock.release()

    async def _commit(self) -> None:
        self._committed = True
        self._snapshots = {}

    async def _publish(self, event: Any) -> None:
        await self.event_publisher.publish(event=event)

    async def rollback(self) -> None:
        if self._committed or not self._snapshots:
            return

        for participant in self.participants:
            participant.restore(self._snapshots[id(participant)])
        self.domain_events = []
        self._snapshots = {}
        Logger.base.info('↩️ [UOW] Rolled back uncommitted ledger changes')
