"""
Timer Registry

Single owner of every per-invite countdown task. Countdowns are torn down
en masse before each re-render so that no invite ever has two timers.
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

from src.app.services.clock import IClock
from src.app.services.invitation_engine import compute_remaining
from src.domain.entities import CountdownState, Invite

logger = logging.getLogger(__name__)

TickCallback = Callable[[CountdownState], None]
ExpireCallback = Callable[[], None]


class CountdownHandle:
    """A running countdown for one invite plus its cancellation token"""

    def __init__(self, invite_id: str):
        self.invite_id = invite_id
        self.cancelled = False
        self.task: Optional[asyncio.Task] = None

    @property
    def active(self) -> bool:
        return not self.cancelled and self.task is not None and not self.task.done()

    def cancel(self) -> None:
        self.cancelled = True
        if self.task is not None and not self.task.done():
            self.task.cancel()


class TimerRegistry:
    """
    Process-wide set of active countdown handles.

    Business Rules:
    - At most one active handle per invite id
    - A tick that wakes up after cancellation does nothing
    - on_expire runs at most once per countdown, after which it stops
    - A failing on_tick is logged and the countdown keeps running
    """

    def __init__(self, clock: IClock, interval_seconds: float = 1.0):
        self._clock = clock
        self._interval = interval_seconds
        self._handles: Dict[str, CountdownHandle] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, invite_id: str) -> bool:
        return invite_id in self._handles

    def active_ids(self) -> List[str]:
        return list(self._handles)

    def start_countdown(
        self, invite: Invite, on_tick: TickCallback, on_expire: ExpireCallback
    ) -> CountdownHandle:
        """
        Start ticking for an invite. Must be called from a running event loop.

        Args:
            invite: Invite to count down
            on_tick: Called with the fresh CountdownState on every tick
            on_expire: Called once when the remaining time reaches zero

        Returns:
            The new CountdownHandle
        """
        self.cancel(invite.id)

        handle = CountdownHandle(invite.id)
        handle.task = asyncio.create_task(
            self._run(handle, invite, on_tick, on_expire),
            name=f"countdown-{invite.id}",
        )
        self._handles[invite.id] = handle
        return handle

    def cancel(self, invite_id: str) -> bool:
        """Stop one invite's countdown, returns False if none was running"""
        handle = self._handles.pop(invite_id, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def cancel_all(self) -> int:
        """Stop every countdown and clear the registry"""
        handles = list(self._handles.values())
        self._handles.clear()
        for handle in handles:
            handle.cancel()
        if handles:
            logger.debug(f"Cancelled {len(handles)} countdown(s)")
        return len(handles)

    async def _run(
        self,
        handle: CountdownHandle,
        invite: Invite,
        on_tick: TickCallback,
        on_expire: ExpireCallback,
    ) -> None:
        try:
            while True:
                await self._clock.sleep(self._interval)
                if handle.cancelled:
                    return

                state = compute_remaining(invite, self._clock.now())
                if state.expired:
                    on_expire()
                    return
                try:
                    on_tick(state)
                except Exception:
                    logger.exception(f"Tick for invite {invite.id} failed")
        except Exception:
            logger.exception(f"Countdown for invite {invite.id} stopped after an error")
        finally:
            if self._handles.get(handle.invite_id) is handle:
                del self._handles[handle.invite_id]
