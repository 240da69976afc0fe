from abc import ABC, abstractmethod
from typing import Any, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventRepo(ABC):
    """
    Port for the event table and the event-ID counter.

    IDs start at 1, advance by one per created event and are never reused.
    """

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        """
        Allocate the next event id and store the event.

        Returns:
            The stored event with its id assigned
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Opaque copy of the current state, taken when a unit of work starts"""
        pass

    @abstractmethod
    def restore(self, snapshot: Any) -> None:
        """Return to a state captured by snapshot(); used when a unit of work is not committed"""
        pass
