from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.density_aggregator import DensityAggregator
from src.app.services.housing_api import IHousingApi
from src.app.use_cases.invites import ActivityLogResponse, GetActivityLogUseCase
from src.app.use_cases.work_orders import (
    HeatmapResponse,
    ListOpenWorkOrdersUseCase,
    LoadHeatmapUseCase,
    UpdateWorkOrderStatusResponse,
    UpdateWorkOrderStatusUseCase,
    WorkOrdersResponse,
)
from src.depends import get_density_aggregator, get_housing_api

router = APIRouter(prefix="/technician", tags=["Technician"])


class UpdateWorkOrderStatusRequest(BaseModel):
    """
    Update work order status HTTP request payload
    """

    status: str = Field(..., description="in-progress or completed")


@router.get("/heatmap", status_code=status.HTTP_200_OK, response_model=HeatmapResponse)
async def load_heatmap(
    api: IHousingApi = Depends(get_housing_api),
    aggregator: DensityAggregator = Depends(get_density_aggregator),
):
    """
    Load Heatmap

    One cell per floor-plan room with its open work order count, tier
    (none/low/medium/high) and open task descriptions.
    """
    use_case = LoadHeatmapUseCase(api, aggregator, ApplicationConfig.HEATMAP_ROOMS)
    result = await use_case.execute()
    return result.value


@router.get(
    "/work-orders", status_code=status.HTTP_200_OK, response_model=WorkOrdersResponse
)
async def list_open_work_orders(
    api: IHousingApi = Depends(get_housing_api),
    aggregator: DensityAggregator = Depends(get_density_aggregator),
):
    use_case = ListOpenWorkOrdersUseCase(api, aggregator)
    result = await use_case.execute()
    return result.value


@router.post(
    "/work-orders/{order_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=UpdateWorkOrderStatusResponse,
)
async def update_work_order_status(
    order_id: str,
    request: UpdateWorkOrderStatusRequest,
    api: IHousingApi = Depends(get_housing_api),
):
    """
    Update Work Order Status

    Raises:
        - 404 Not Found: WORK_ORDER_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION
        - 422 Unprocessable Entity: INVALID_STATUS
        - 502 Bad Gateway: TRANSPORT_ERROR, SUBMIT_REJECTED
    """
    use_case = UpdateWorkOrderStatusUseCase(api)
    result = await use_case.execute(order_id, request.status)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "WORK_ORDER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "INVALID_STATUS": status.HTTP_422_UNPROCESSABLE_ENTITY,
            },
        )

    return result.value


@router.get(
    "/activity", status_code=status.HTTP_200_OK, response_model=ActivityLogResponse
)
async def get_activity_log(api: IHousingApi = Depends(get_housing_api)):
    use_case = GetActivityLogUseCase(api)
    result = await use_case.execute("technician")
    return result.value
