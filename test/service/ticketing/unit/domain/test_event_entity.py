from datetime import datetime, timedelta, timezone

import pytest

from src.platform.exception.exceptions import (
    AuthorizationError,
    EventExpiredError,
    InactiveEventError,
    PaymentMismatchError,
    SoldOutError,
    ValidationError,
)
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.value_object.address import ZERO_ADDRESS
from test.constants import HOST_ADDRESS, STRANGER_ADDRESS


NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
EVENT_DATE = NOW + timedelta(days=7)


def _create(**overrides) -> EventEntity:
    params = {
        'host': HOST_ADDRESS,
        'title': 'Gig',
        'date': EVENT_DATE,
        'price_in_wei': 100,
        'total_tickets': 2,
        'now': NOW,
    }
    params.update(overrides)
    return EventEntity.create(**params)


@pytest.mark.unit
class TestEventEntityCreate:
    def test_create_starts_active_with_nothing_sold(self):
        event = _create()

        assert event.active is True
        assert event.tickets_sold == 0
        assert event.tickets_remaining == 2
        assert event.id is None

    @pytest.mark.parametrize(
        'overrides',
        [
            pytest.param({'price_in_wei': 0}, id='zero_price'),
            pytest.param({'price_in_wei': -5}, id='negative_price'),
            pytest.param({'total_tickets': 0}, id='zero_supply'),
            pytest.param({'total_tickets': True}, id='bool_supply'),
            pytest.param({'date': NOW}, id='date_now'),
            pytest.param({'date': NOW - timedelta(seconds=1)}, id='date_past'),
            pytest.param({'date': datetime(2031, 1, 1)}, id='naive_date'),
            pytest.param({'host': ZERO_ADDRESS}, id='zero_host'),
        ],
    )
    def test_invalid_parameters_rejected(self, overrides):
        with pytest.raises(ValidationError):
            _create(**overrides)

    def test_empty_title_is_allowed(self):
        assert _create(title='').title == ''


@pytest.mark.unit
class TestEventEntityDeactivate:
    def test_host_deactivates(self):
        event = _create()

        event.deactivate(caller=HOST_ADDRESS)

        assert event.active is False

    def test_deactivate_is_idempotent_for_host(self):
        event = _create()

        event.deactivate(caller=HOST_ADDRESS)
        event.deactivate(caller=HOST_ADDRESS)

        assert event.active is False

    def test_non_host_cannot_deactivate(self):
        event = _create()

        with pytest.raises(AuthorizationError):
            event.deactivate(caller=STRANGER_ADDRESS)
        assert event.active is True


@pytest.mark.unit
class TestEventEntityPurchaseChecks:
    def test_purchasable_event_passes(self):
        _create().ensure_purchasable(now=NOW, paid_amount=100)

    def test_expired_exactly_at_event_date(self):
        with pytest.raises(EventExpiredError):
            _create().ensure_purchasable(now=EVENT_DATE, paid_amount=100)

    def test_one_second_before_event_date_still_purchasable(self):
        _create().ensure_purchasable(now=EVENT_DATE - timedelta(seconds=1), paid_amount=100)

    @pytest.mark.parametrize('paid_amount', [0, 99, 101])
    def test_payment_must_equal_price(self, paid_amount):
        with pytest.raises(PaymentMismatchError):
            _create().ensure_purchasable(now=NOW, paid_amount=paid_amount)

    def test_inactive_reported_before_everything_else(self):
        # Given: inactive, expired, sold out and underpaid all at once
        event = _create(total_tickets=1)
        event.record_sale()
        event.deactivate(caller=HOST_ADDRESS)

        # When / Then
        with pytest.raises(InactiveEventError):
            event.ensure_purchasable(now=EVENT_DATE, paid_amount=1)

    def test_expired_reported_before_sold_out_and_mismatch(self):
        event = _create(total_tickets=1)
        event.record_sale()

        with pytest.raises(EventExpiredError):
            event.ensure_purchasable(now=EVENT_DATE, paid_amount=1)

    def test_sold_out_reported_before_mismatch(self):
        event = _create(total_tickets=1)
        event.record_sale()

        with pytest.raises(SoldOutError):
            event.ensure_purchasable(now=NOW, paid_amount=1)


@pytest.mark.unit
class TestEventEntityRecordSale:
    def test_record_sale_until_sold_out(self):
        event = _create(total_tickets=2)

        event.record_sale()
        event.record_sale()

        assert event.tickets_sold == 2
        assert event.is_sold_out is True
        assert event.tickets_remaining == 0

    def test_record_sale_never_exceeds_supply(self):
        event = _create(total_tickets=1)
        event.record_sale()

        with pytest.raises(SoldOutError):
            event.record_sale()
        assert event.tickets_sold == 1
