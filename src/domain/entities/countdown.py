"""
Countdown value objects

Derived, never stored: recomputed from an invite and the current time.
"""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict


class CountdownState(BaseModel):
    """Remaining answer time for one invite at one instant"""

    model_config = ConfigDict(frozen=True)

    remaining: timedelta
    expired: bool

    @property
    def label(self) -> str:
        """Human readable countdown, e.g. 'Expires in: 09m 59s'"""
        if self.expired:
            return "Expired"
        total = int(self.remaining.total_seconds())
        minutes, seconds = divmod(total, 60)
        return f"Expires in: {minutes:02d}m {seconds:02d}s"
