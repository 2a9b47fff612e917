from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Clock source interface - application layer"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime"""
        pass

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for the given number of seconds"""
        pass
