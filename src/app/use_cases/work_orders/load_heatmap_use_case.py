"""
Load Heatmap Use Case

Builds the hostel floor heatmap from open work order density.
"""

import logging
from typing import Sequence

from src.app.services.density_aggregator import DensityAggregator
from src.app.services.housing_api import IHousingApi
from src.app.use_cases.dtos import ErrorInfo
from src.domain.exceptions import TransportError
from src.libs.result import Result, Return

from .dtos import HeatmapResponse, HeatmapRoom

logger = logging.getLogger(__name__)


class LoadHeatmapUseCase:
    """
    Use case for rendering the technician heatmap.

    Business Rules:
    - Every known floor-plan room gets a cell, tier "none" when idle
    - Rooms outside the floor plan still show up when they have open orders
    - A failed fetch renders the floor plan with no load and reports the error
    """

    def __init__(
        self,
        api: IHousingApi,
        aggregator: DensityAggregator,
        known_rooms: Sequence[str] = (),
    ):
        self.api = api
        self.aggregator = aggregator
        self.known_rooms = [str(room_id) for room_id in known_rooms]

    async def execute(self) -> Result[HeatmapResponse]:
        error = None
        try:
            work_orders = await self.api.fetch_work_orders()
        except TransportError as exc:
            logger.warning(f"Could not fetch work orders for heatmap: {exc}")
            work_orders = []
            error = ErrorInfo.from_transport(exc)

        buckets = self.aggregator.aggregate(work_orders)
        tasks = self.aggregator.open_tasks_by_room(work_orders)

        room_ids = list(self.known_rooms)
        room_ids.extend(room_id for room_id in buckets if room_id not in room_ids)

        rooms = []
        for room_id in room_ids:
            bucket = buckets.get(room_id)
            rooms.append(
                HeatmapRoom(
                    room_id=room_id,
                    count=bucket.count if bucket else 0,
                    tier=self.aggregator.tier_for(buckets, room_id).value,
                    tasks=tasks.get(room_id, []),
                )
            )

        return Return.ok(HeatmapResponse(rooms=rooms, error=error))
