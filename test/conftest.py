"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log directory, debug logging)
- A controllable clock for time-dependent rules
- A fresh, independent ledger container per test
"""

# =============================================================================
# Environment setup MUST happen before any application import, settings and
# the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'ticket-ledger-test')
    os.environ.setdefault('LOG_FILE_ENABLED', 'false')


_early_setup_test_environment()

from collections.abc import Callable, Coroutine  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import Container  # noqa: E402
from src.service.ticketing.app.interface.i_clock import IClock  # noqa: E402
from src.service.ticketing.app.ticket_ledger import TicketLedger  # noqa: E402
from src.service.ticketing.driven_adapter.event.ticketing_event_publisher_impl import (  # noqa: E402
    TicketingEventPublisherImpl,
)
from src.service.ticketing.driven_adapter.payment.payment_channel_in_memory_impl import (  # noqa: E402
    InMemoryPaymentChannelImpl,
)
from test.constants import (  # noqa: E402
    DEFAULT_DAYS_AHEAD,
    DEFAULT_EVENT_TITLE,
    DEFAULT_PRICE_IN_WEI,
    DEFAULT_TOTAL_TICKETS,
    HOST_ADDRESS,
)


START_TIME = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock(IClock):
    """Clock that only moves when a test advances it"""

    def __init__(self, start: datetime = START_TIME) -> None:
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta

    def set(self, moment: datetime) -> None:
        self._now = moment


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(clock: FakeClock) -> Container:
    container = Container()
    container.clock.override(clock)
    return container


@pytest.fixture
def ledger(container: Container) -> TicketLedger:
    return container.ticket_ledger()


@pytest.fixture
def payment_channel(container: Container) -> InMemoryPaymentChannelImpl:
    return container.payment_channel()


@pytest.fixture
def event_publisher(container: Container) -> TicketingEventPublisherImpl:
    return container.event_publisher()


@pytest.fixture
def future_date(clock: FakeClock) -> datetime:
    return clock.now() + timedelta(days=DEFAULT_DAYS_AHEAD)


@pytest.fixture
def create_event(
    ledger: TicketLedger, future_date: datetime
) -> Callable[..., Coroutine[Any, Any, int]]:
    """Factory creating an event with defaults that tests can override"""

    async def _create(**overrides: Any) -> int:
        params: dict[str, Any] = {
            'title': DEFAULT_EVENT_TITLE,
            'date': future_date,
            'price_in_wei': DEFAULT_PRICE_IN_WEI,
            'total_tickets': DEFAULT_TOTAL_TICKETS,
            'caller': HOST_ADDRESS,
        }
        params.update(overrides)
        return await ledger.create_event(**params)

    return _create
