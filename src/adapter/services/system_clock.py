import asyncio
from datetime import UTC, datetime

from src.app.services.clock import IClock


class SystemClock(IClock):
    """Wall-clock implementation of the clock source"""

    def now(self) -> datetime:
        return datetime.now(UTC)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
