"""
List Open Work Orders Use Case

Retrieves the technician's task list.
"""

import logging

from src.app.services.density_aggregator import DensityAggregator
from src.app.services.housing_api import IHousingApi
from src.app.use_cases.dtos import ErrorInfo
from src.domain.exceptions import TransportError
from src.libs.result import Result, Return

from .dtos import WorkOrdersResponse, WorkOrderView

logger = logging.getLogger(__name__)


class ListOpenWorkOrdersUseCase:
    """
    Use case for listing open work orders.

    Business Rules:
    - Completed orders are not listed
    - Each card carries the status its next action moves to
    """

    def __init__(self, api: IHousingApi, aggregator: DensityAggregator):
        self.api = api
        self.aggregator = aggregator

    async def execute(self) -> Result[WorkOrdersResponse]:
        try:
            work_orders = await self.api.fetch_work_orders()
        except TransportError as exc:
            logger.warning(f"Could not fetch work orders: {exc}")
            return Return.ok(
                WorkOrdersResponse(work_orders=[], error=ErrorInfo.from_transport(exc))
            )

        views = [
            WorkOrderView.from_work_order(order)
            for order in self.aggregator.open_orders(work_orders)
        ]
        return Return.ok(WorkOrdersResponse(work_orders=views))
