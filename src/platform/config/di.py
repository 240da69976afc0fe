"""
https://python-dependency-injector.ets-labs.org/index.html

Each Container instance wires one independent ledger: its own counters,
tables, registry, payment channel and writer lock.
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.unit_of_work import InMemoryUnitOfWork
from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.ticketing.app.command.event_registry import EventRegistry
from src.service.ticketing.app.command.ticket_ownership_facade import TicketOwnershipFacade
from src.service.ticketing.app.command.ticket_sale_engine import TicketSaleEngine
from src.service.ticketing.app.ticket_ledger import TicketLedger
from src.service.ticketing.driven_adapter.clock.system_clock import SystemClock
from src.service.ticketing.driven_adapter.event.ticketing_event_publisher_impl import (
    TicketingEventPublisherImpl,
)
from src.service.ticketing.driven_adapter.ownership.ownership_registry_in_memory_impl import (
    InMemoryOwnershipRegistryImpl,
)
from src.service.ticketing.driven_adapter.payment.payment_channel_in_memory_impl import (
    InMemoryPaymentChannelImpl,
)
from src.service.ticketing.driven_adapter.repo.event_repo_in_memory_impl import (
    InMemoryEventRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.ticket_repo_in_memory_impl import (
    InMemoryTicketRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # External collaborators (override in tests or when embedding the ledger)
    clock = providers.Singleton(SystemClock)
    payment_channel = providers.Singleton(InMemoryPaymentChannelImpl)
    ownership_registry = providers.Singleton(InMemoryOwnershipRegistryImpl)

    # Notifications
    broadcaster = providers.Singleton(
        InMemoryEventBroadcasterImpl,
        max_buffer_size=config_service.provided.PUBLISHER_STREAM_BUFFER,
    )
    event_publisher = providers.Singleton(TicketingEventPublisherImpl, broadcaster=broadcaster)

    # Repositories
    event_repo = providers.Singleton(InMemoryEventRepoImpl)
    ticket_repo = providers.Singleton(InMemoryTicketRepoImpl)

    # Single writer for the whole ledger
    uow = providers.Singleton(
        InMemoryUnitOfWork,
        event_repo=event_repo,
        ticket_repo=ticket_repo,
        ownership_registry=ownership_registry,
        event_publisher=event_publisher,
    )

    # Components
    event_registry = providers.Singleton(EventRegistry, uow=uow, clock=clock)
    ticket_sale_engine = providers.Singleton(
        TicketSaleEngine, uow=uow, clock=clock, payment_channel=payment_channel
    )
    ticket_ownership_facade = providers.Singleton(TicketOwnershipFacade, uow=uow)

    ticket_ledger = providers.Singleton(
        TicketLedger,
        event_registry=event_registry,
        ticket_sale_engine=ticket_sale_engine,
        ticket_ownership_facade=ticket_ownership_facade,
    )


def build_ticket_ledger(container: Container | None = None) -> TicketLedger:
    return (container or Container()).ticket_ledger()
