"""
Get Countdowns Use Case

Reads the latest countdown tick of every displayed invite.
"""

from src.app.services.countdown_board import CountdownBoard
from src.libs.result import Result, Return

from .dtos import CountdownsResponse, CountdownView


class GetCountdownsUseCase:
    def __init__(self, board: CountdownBoard):
        self.board = board

    async def execute(self) -> Result[CountdownsResponse]:
        countdowns = [
            CountdownView.from_state(invite_id, state)
            for invite_id, state in self.board.snapshot().items()
        ]
        return Return.ok(CountdownsResponse(countdowns=countdowns))
