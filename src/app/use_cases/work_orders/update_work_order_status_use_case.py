"""
Update Work Order Status Use Case

Handles a technician starting or completing a work order.
"""

import logging

from src.app.services.housing_api import IHousingApi
from src.domain.entities import WorkOrderStatus
from src.domain.exceptions import InvalidTransition, TransportError
from src.libs.result import Error, Result, Return

from .dtos import UpdateWorkOrderStatusResponse

logger = logging.getLogger(__name__)


class UpdateWorkOrderStatusUseCase:
    """
    Use case for advancing a work order.

    Business Rules:
    - pending -> in-progress (start), in-progress -> completed (complete)
    - Any other move fails with INVALID_TRANSITION
    - The order is re-read from the housing API before validating
    """

    def __init__(self, api: IHousingApi):
        self.api = api

    async def execute(
        self, order_id: str, status: str
    ) -> Result[UpdateWorkOrderStatusResponse]:
        """
        Execute update work order status use case.

        Args:
            order_id: ID of the work order
            status: Target status ("in-progress" or "completed")

        Returns:
            Result with UpdateWorkOrderStatusResponse DTO, or Error
        """
        try:
            target = WorkOrderStatus(status)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    f"Invalid status: {status}. Must be one of: in-progress, completed",
                )
            )

        try:
            work_orders = await self.api.fetch_work_orders()
        except TransportError as exc:
            logger.warning(f"Could not fetch work order {order_id}: {exc}")
            return Return.err(Error("TRANSPORT_ERROR", str(exc)))

        order = next((o for o in work_orders if o.id == str(order_id)), None)
        if order is None:
            return Return.err(Error("WORK_ORDER_NOT_FOUND", "Work order not found"))

        try:
            order.transition_to(target)
        except InvalidTransition as exc:
            logger.warning(f"Ignoring status change for work order {order_id}: {exc}")
            return Return.err(Error("INVALID_TRANSITION", str(exc)))

        try:
            submitted = await self.api.submit_work_order_status(order.id, target)
        except TransportError as exc:
            logger.warning(f"Could not submit status for work order {order_id}: {exc}")
            return Return.err(Error("TRANSPORT_ERROR", str(exc)))

        if not submitted:
            return Return.err(
                Error("SUBMIT_REJECTED", "The housing service rejected the status change")
            )

        logger.info(f"Work order {order.id} moved to {target.value}")
        return Return.ok(
            UpdateWorkOrderStatusResponse(order_id=order.id, status=target.value)
        )
