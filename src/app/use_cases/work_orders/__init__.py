"""
Technician Work Order Use Cases

Heatmap, task list and status updates.
"""

from .dtos import (
    HeatmapResponse,
    HeatmapRoom,
    UpdateWorkOrderStatusResponse,
    WorkOrdersResponse,
    WorkOrderView,
)
from .list_open_work_orders_use_case import ListOpenWorkOrdersUseCase
from .load_heatmap_use_case import LoadHeatmapUseCase
from .update_work_order_status_use_case import UpdateWorkOrderStatusUseCase

__all__ = [
    "LoadHeatmapUseCase",
    "ListOpenWorkOrdersUseCase",
    "UpdateWorkOrderStatusUseCase",
    "HeatmapResponse",
    "HeatmapRoom",
    "WorkOrdersResponse",
    "WorkOrderView",
    "UpdateWorkOrderStatusResponse",
]
