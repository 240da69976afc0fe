from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Monotonic time source; always returns timezone-aware datetimes."""

    @abstractmethod
    def now(self) -> datetime:
        pass
