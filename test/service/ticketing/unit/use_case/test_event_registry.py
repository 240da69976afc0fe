from datetime import timedelta

import pytest

from src.platform.exception.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.service.ticketing.app.dto.event_details import EPOCH, EventDetails
from src.service.ticketing.domain.domain_event.ticketing_domain_event import (
    EventCreatedDomainEvent,
)
from src.service.ticketing.domain.value_object.address import ZERO_ADDRESS
from test.constants import (
    ANOTHER_HOST_ADDRESS,
    DEFAULT_EVENT_TITLE,
    DEFAULT_PRICE_IN_WEI,
    DEFAULT_TOTAL_TICKETS,
    HOST_ADDRESS,
    STRANGER_ADDRESS,
)


@pytest.mark.unit
class TestCreateEvent:
    @pytest.mark.asyncio
    async def test_event_ids_start_at_one_and_increase(self, create_event):
        # When
        first = await create_event()
        second = await create_event(caller=ANOTHER_HOST_ADDRESS)

        # Then
        assert (first, second) == (1, 2)

    @pytest.mark.asyncio
    async def test_created_event_details(self, ledger, create_event, future_date):
        # When
        event_id = await create_event()

        # Then
        details = await ledger.get_event_details(event_id=event_id)
        assert details.as_tuple() == (
            HOST_ADDRESS,
            DEFAULT_EVENT_TITLE,
            future_date,
            DEFAULT_PRICE_IN_WEI,
            DEFAULT_TOTAL_TICKETS,
            0,
            True,
        )

    @pytest.mark.asyncio
    async def test_past_date_rejected_and_counter_untouched(self, ledger, create_event, clock):
        # When
        with pytest.raises(ValidationError):
            await create_event(date=clock.now() - timedelta(days=1))

        # Then: the next successful event still gets id 1
        assert await create_event() == 1
        assert (await ledger.find_event(event_id=2)) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'overrides',
        [
            pytest.param({'price_in_wei': 0}, id='zero_price'),
            pytest.param({'total_tickets': 0}, id='zero_supply'),
            pytest.param({'caller': ZERO_ADDRESS}, id='zero_host'),
        ],
    )
    async def test_invalid_parameters_create_nothing(self, ledger, create_event, overrides):
        with pytest.raises(ValidationError):
            await create_event(**overrides)

        assert (await ledger.find_event(event_id=1)) is None

    @pytest.mark.asyncio
    async def test_event_created_notification_published(self, create_event, event_publisher):
        # When
        event_id = await create_event()

        # Then
        assert event_publisher.history() == [
            EventCreatedDomainEvent(
                event_id=event_id,
                host=HOST_ADDRESS,
                title=DEFAULT_EVENT_TITLE,
                total_tickets=DEFAULT_TOTAL_TICKETS,
            )
        ]


@pytest.mark.unit
class TestEventLookup:
    @pytest.mark.asyncio
    async def test_unknown_event_reads_as_empty_record(self, ledger):
        details = await ledger.get_event_details(event_id=42)

        assert details == EventDetails.empty()
        assert details.host == ZERO_ADDRESS
        assert details.date == EPOCH
        assert details.active is False
        assert details.is_found is False

    @pytest.mark.asyncio
    async def test_find_event_returns_none_for_unknown(self, ledger, create_event):
        event_id = await create_event()

        assert (await ledger.find_event(event_id=event_id)).is_found is True
        assert await ledger.find_event(event_id=event_id + 1) is None

    @pytest.mark.asyncio
    async def test_require_event_raises_for_unknown(self, ledger):
        with pytest.raises(NotFoundError):
            await ledger.event_registry.require_event(event_id=7)


@pytest.mark.unit
class TestDeactivateEvent:
    @pytest.mark.asyncio
    async def test_host_deactivates_event(self, ledger, create_event):
        event_id = await create_event()

        await ledger.deactivate_event(event_id=event_id, caller=HOST_ADDRESS)

        assert (await ledger.get_event_details(event_id=event_id)).active is False

    @pytest.mark.asyncio
    async def test_deactivate_twice_is_noop_for_host(self, ledger, create_event):
        event_id = await create_event()

        await ledger.deactivate_event(event_id=event_id, caller=HOST_ADDRESS)
        await ledger.deactivate_event(event_id=event_id, caller=HOST_ADDRESS)

        assert (await ledger.get_event_details(event_id=event_id)).active is False

    @pytest.mark.asyncio
    async def test_non_host_cannot_deactivate(self, ledger, create_event):
        event_id = await create_event()

        with pytest.raises(AuthorizationError):
            await ledger.deactivate_event(event_id=event_id, caller=STRANGER_ADDRESS)

        assert (await ledger.get_event_details(event_id=event_id)).active is True

    @pytest.mark.asyncio
    async def test_unknown_event_fails_host_check(self, ledger):
        with pytest.raises(AuthorizationError):
            await ledger.deactivate_event(event_id=99, caller=HOST_ADDRESS)
