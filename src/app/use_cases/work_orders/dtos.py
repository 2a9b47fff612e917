"""
Work Order Use Case DTOs (Data Transfer Objects)

All Response classes for the technician dashboard.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.dtos import ErrorInfo
from src.domain.entities import WorkOrder


class HeatmapRoom(BaseModel):
    """Heatmap cell for one room"""

    room_id: str
    count: int
    tier: str
    tasks: List[str]


class HeatmapResponse(BaseModel):
    """Response for load heatmap use case"""

    rooms: List[HeatmapRoom]
    error: Optional[ErrorInfo] = None


class WorkOrderView(BaseModel):
    """Work order card on the technician task list"""

    id: str
    room_id: str
    task: str
    priority: str
    status: str
    next_status: Optional[str] = None

    @classmethod
    def from_work_order(cls, order: WorkOrder) -> "WorkOrderView":
        return cls(
            id=order.id,
            room_id=order.room_id,
            task=order.task,
            priority=order.priority.value,
            status=order.status.value,
            next_status=order.next_status.value if order.next_status else None,
        )


class WorkOrdersResponse(BaseModel):
    """Response for list open work orders use case"""

    work_orders: List[WorkOrderView]
    error: Optional[ErrorInfo] = None


class UpdateWorkOrderStatusResponse(BaseModel):
    """Response for update work order status use case"""

    order_id: str
    status: str
