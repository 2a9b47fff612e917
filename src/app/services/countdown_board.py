"""
Countdown Board

Latest countdown display state per invite, written by timer callbacks and
read by the student dashboard routes.
"""

from datetime import timedelta
from typing import Dict, Optional

from src.domain.entities import CountdownState

_EXPIRED = CountdownState(remaining=timedelta(0), expired=True)


class CountdownBoard:
    def __init__(self):
        self._states: Dict[str, CountdownState] = {}

    def update(self, invite_id: str, state: CountdownState) -> None:
        self._states[invite_id] = state

    def mark_expired(self, invite_id: str) -> None:
        self._states[invite_id] = _EXPIRED

    def remove(self, invite_id: str) -> None:
        self._states.pop(invite_id, None)

    def get(self, invite_id: str) -> Optional[CountdownState]:
        return self._states.get(invite_id)

    def snapshot(self) -> Dict[str, CountdownState]:
        return dict(self._states)

    def reset(self) -> None:
        self._states.clear()
