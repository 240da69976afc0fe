from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container, build_ticket_ledger
from src.service.ticketing.driven_adapter.clock.system_clock import SystemClock
from test.constants import BUYER_ADDRESS, HOST_ADDRESS


@pytest.mark.unit
class TestContainer:
    def test_components_share_one_unit_of_work(self, container):
        ledger = container.ticket_ledger()

        assert ledger.event_registry.uow is ledger.ticket_sale_engine.uow
        assert ledger.ticket_sale_engine.uow is ledger.ticket_ownership_facade.uow

    def test_broadcaster_buffer_comes_from_settings(self):
        container = Container()
        container.config_service.override(Settings(PUBLISHER_STREAM_BUFFER=7))

        assert container.broadcaster()._max_buffer_size == 7

    def test_broadcaster_buffer_must_be_positive(self):
        with pytest.raises(PydanticValidationError, match='PUBLISHER_STREAM_BUFFER'):
            Settings(PUBLISHER_STREAM_BUFFER=0)

    def test_system_clock_is_utc_aware(self):
        assert SystemClock().now().tzinfo == timezone.utc

    @pytest.mark.asyncio
    async def test_separate_containers_are_independent_ledgers(self, ledger, create_event, clock):
        # Given: one event in the fixture ledger
        await create_event()

        # When
        other = Container()
        other.clock.override(clock)
        other_ledger = build_ticket_ledger(other)
        event_id = await other_ledger.create_event(
            title='Other',
            date=datetime(2031, 1, 1, tzinfo=timezone.utc),
            price_in_wei=1,
            total_tickets=1,
            caller=HOST_ADDRESS,
        )
        await other_ledger.buy_ticket(event_id=event_id, caller=BUYER_ADDRESS, paid_amount=1)

        # Then: counters restart and balances do not leak across ledgers
        assert event_id == 1
        assert await ledger.balance_of(owner=BUYER_ADDRESS) == 0
        assert await other_ledger.balance_of(owner=BUYER_ADDRESS) == 1
