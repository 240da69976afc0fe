from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import (
    AuthorizationError,
    EventExpiredError,
    InactiveEventError,
    PaymentMismatchError,
    SoldOutError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.value_object.address import is_zero_address


def _validate_host(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if is_zero_address(value):
        raise ValidationError(f'Event {attribute.name} must be a non-null address')


def _validate_positive_int(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f'Event {attribute.name} must be a positive integer')


def _validate_aware_datetime(instance: object, attribute: attrs.Attribute, value: datetime) -> None:
    if not isinstance(value, datetime) or value.tzinfo is None:
        raise ValidationError(f'Event {attribute.name} must be a timezone-aware datetime')


@attrs.define
class EventEntity:
    host: str = attrs.field(validator=_validate_host)
    title: str
    date: datetime = attrs.field(validator=_validate_aware_datetime)
    price_in_wei: int = attrs.field(validator=_validate_positive_int)
    total_tickets: int = attrs.field(validator=_validate_positive_int)
    tickets_sold: int = 0
    active: bool = True
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        host: str,
        title: str,
        date: datetime,
        price_in_wei: int,
        total_tickets: int,
        now: datetime,
    ) -> 'EventEntity':
        _validate_aware_datetime(None, attrs.fields(cls).date, date)
        if date <= now:
            raise ValidationError('Event date must be in the future')

        return cls(
            host=host,
            title=title,
            date=date,
            price_in_wei=price_in_wei,
            total_tickets=total_tickets,
            tickets_sold=0,
            active=True,
        )

    @property
    def tickets_remaining(self) -> int:
        return self.total_tickets - self.tickets_sold

    @property
    def is_sold_out(self) -> bool:
        return self.tickets_sold >= self.total_tickets

    @Logger.io
    def deactivate(self, *, caller: str) -> None:
        if caller != self.host:
            raise AuthorizationError('Only the event host can deactivate the event')

        self.active = False

    @Logger.io
    def ensure_purchasable(self, *, now: datetime, paid_amount: int) -> None:
        # Order matters: the first failing check decides the reported error
        if not self.active:
            raise InactiveEventError('Event is not active')
        if now >= self.date:
            raise EventExpiredError('Event has already taken place')
        if self.is_sold_out:
            raise SoldOutError('Event is sold out')
        if paid_amount != self.price_in_wei:
            raise PaymentMismatchError(
                f'Payment must equal the ticket price of {self.price_in_wei} wei'
            )

    @Logger.io
    def record_sale(self) -> None:
        if self.is_sold_out:
            raise SoldOutError('Event is sold out')

        self.tickets_sold += 1
