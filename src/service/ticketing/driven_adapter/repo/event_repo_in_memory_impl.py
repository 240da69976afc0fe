from typing import Dict, Optional, Tuple

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class InMemoryEventRepoImpl(IEventRepo):
    """
    Event table kept in process memory

    Stored entities are private copies; callers always receive a copy,
    so mutations only land through update().
    """

    def __init__(self) -> None:
        self._last_event_id = 0
        self._events: Dict[int, EventEntity] = {}

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        self._last_event_id += 1
        stored = attrs.evolve(event, id=self._last_event_id)
        self._events[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        event = self._events.get(event_id)
        return attrs.evolve(event) if event else None

    @Logger.io
    async def update(self, *, event: EventEntity) -> EventEntity:
        if event.id not in self._events:
            raise ValueError(f'Event {event.id} does not exist')

        self._events[event.id] = attrs.evolve(event)
        return attrs.evolve(event)

    def snapshot(self) -> Tuple[int, Dict[int, EventEntity]]:
        return self._last_event_id, {k: attrs.evolve(v) for k, v in self._events.items()}

    def restore(self, snapshot: Tuple[int, Dict[int, EventEntity]]) -> None:
        last_event_id, events = snapshot
        self._last_event_id = last_event_id
        self._events = {k: attrs.evolve(v) for k, v in events.items()}
