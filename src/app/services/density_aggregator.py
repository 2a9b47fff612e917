"""
Density Aggregator

Reduces the technician's work orders into per-room load buckets that drive
the hostel heatmap.
"""

from collections import Counter
from typing import Dict, Iterable, List, Mapping

from src.domain.entities import DensityBucket, DensityTier, WorkOrder


def tier_for_count(count: int) -> DensityTier:
    """1 -> low, 2 -> medium, 3 or more -> high, 0 -> none"""
    if count <= 0:
        return DensityTier.none
    if count == 1:
        return DensityTier.low
    if count == 2:
        return DensityTier.medium
    return DensityTier.high


class DensityAggregator:
    """
    Stateless work order density aggregation.

    Business Rules:
    - Only pending and in-progress orders count
    - Rooms without open orders are left out of the mapping
    - Room ids are passed through without validation
    """

    @staticmethod
    def open_orders(work_orders: Iterable[WorkOrder]) -> List[WorkOrder]:
        return [order for order in work_orders if order.is_open]

    def aggregate(self, work_orders: Iterable[WorkOrder]) -> Dict[str, DensityBucket]:
        counts = Counter(order.room_id for order in self.open_orders(work_orders))
        return {
            room_id: DensityBucket(count=count, tier=tier_for_count(count))
            for room_id, count in counts.items()
        }

    @staticmethod
    def tier_for(buckets: Mapping[str, DensityBucket], room_id: str) -> DensityTier:
        """Tier for a room, DensityTier.none when it has no open orders"""
        bucket = buckets.get(room_id)
        return bucket.tier if bucket is not None else DensityTier.none

    def open_tasks_by_room(self, work_orders: Iterable[WorkOrder]) -> Dict[str, List[str]]:
        """Descriptions of open tasks grouped by room, in input order"""
        tasks: Dict[str, List[str]] = {}
        for order in self.open_orders(work_orders):
            tasks.setdefault(order.room_id, []).append(order.task)
        return tasks
