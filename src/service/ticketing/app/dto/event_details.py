from datetime import datetime, timezone

import attrs

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.value_object.address import ZERO_ADDRESS, is_zero_address


EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@attrs.frozen
class EventDetails:
    """Read-only snapshot of an event record."""

    host: str
    title: str
    date: datetime
    price_in_wei: int
    total_tickets: int
    tickets_sold: int
    active: bool

    @classmethod
    def from_entity(cls, *, event: EventEntity) -> 'EventDetails':
        return cls(
            host=event.host,
            title=event.title,
            date=event.date,
            price_in_wei=event.price_in_wei,
            total_tickets=event.total_tickets,
            tickets_sold=event.tickets_sold,
            active=event.active,
        )

    @classmethod
    def empty(cls) -> 'EventDetails':
        """All-default record returned for unknown ids by the zero-default lookup."""
        return cls(
            host=ZERO_ADDRESS,
            title='',
            date=EPOCH,
            price_in_wei=0,
            total_tickets=0,
            tickets_sold=0,
            active=False,
        )

    @property
    def is_found(self) -> bool:
        return not is_zero_address(self.host)

    def as_tuple(self) -> tuple[str, str, datetime, int, int, int, bool]:
        return attrs.astuple(self, recurse=False)
