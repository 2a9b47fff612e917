from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.clock import IClock
from src.app.services.countdown_board import CountdownBoard
from src.app.services.housing_api import IHousingApi
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry
from src.app.use_cases.invites import (
    ActivityLogResponse,
    CountdownsResponse,
    GetActivityLogUseCase,
    GetCountdownsUseCase,
    InvitesResponse,
    RefreshInvitesUseCase,
    RespondToInviteResponse,
    RespondToInviteUseCase,
    SendInviteResponse,
    SendInviteUseCase,
)
from src.app.use_cases.rooms import (
    BookRoomResponse,
    BookRoomUseCase,
    ListRoomsUseCase,
    RoomsResponse,
)
from src.depends import (
    get_clock,
    get_countdown_board,
    get_housing_api,
    get_invitation_engine,
    get_timer_registry,
)

router = APIRouter(prefix="/student", tags=["Student"])


class RespondToInviteRequest(BaseModel):
    """
    Respond to invite HTTP request payload
    """

    decision: str = Field(..., description="accepted or declined")


class SendInviteRequest(BaseModel):
    """
    Send invite HTTP request payload

    Empty fields are rejected by the use case with MISSING_FIELDS.
    """

    group: str = Field("", description="Booking group name")
    email: str = Field("", description="Roommate email address")


@router.get("/rooms", status_code=status.HTTP_200_OK, response_model=RoomsResponse)
async def list_rooms(
    type: str = Query("all", description="all, single, double or triple"),
    api: IHousingApi = Depends(get_housing_api),
):
    """
    List Rooms

    Raises:
        - 422 Unprocessable Entity: INVALID_ROOM_TYPE
    """
    use_case = ListRoomsUseCase(api)
    result = await use_case.execute(type)

    if result.is_err():
        raise_for_error(
            result.error, {"INVALID_ROOM_TYPE": status.HTTP_422_UNPROCESSABLE_ENTITY}
        )

    return result.value


@router.post(
    "/rooms/{room_id}/book",
    status_code=status.HTTP_200_OK,
    response_model=BookRoomResponse,
)
async def book_room(room_id: str, api: IHousingApi = Depends(get_housing_api)):
    """
    Book Room

    Raises:
        - 409 Conflict: BOOKING_FAILED
        - 502 Bad Gateway: TRANSPORT_ERROR
    """
    use_case = BookRoomUseCase(api)
    result = await use_case.execute(room_id)

    if result.is_err():
        raise_for_error(result.error, {"BOOKING_FAILED": status.HTTP_409_CONFLICT})

    return result.value


@router.get("/invites", status_code=status.HTTP_200_OK, response_model=InvitesResponse)
async def refresh_invites(
    api: IHousingApi = Depends(get_housing_api),
    engine: InvitationEngine = Depends(get_invitation_engine),
    registry: TimerRegistry = Depends(get_timer_registry),
    board: CountdownBoard = Depends(get_countdown_board),
    clock: IClock = Depends(get_clock),
):
    """
    Refresh Invites

    Re-fetches invites, cancels every running countdown and starts one per
    pending invite. A failed fetch returns an empty list with an error field.
    """
    use_case = RefreshInvitesUseCase(api, engine, registry, board, clock)
    result = await use_case.execute()
    return result.value


@router.get(
    "/invites/countdowns",
    status_code=status.HTTP_200_OK,
    response_model=CountdownsResponse,
)
async def get_countdowns(board: CountdownBoard = Depends(get_countdown_board)):
    use_case = GetCountdownsUseCase(board)
    result = await use_case.execute()
    return result.value


@router.post(
    "/invites/{invite_id}/respond",
    status_code=status.HTTP_200_OK,
    response_model=RespondToInviteResponse,
)
async def respond_to_invite(
    invite_id: str,
    request: RespondToInviteRequest,
    api: IHousingApi = Depends(get_housing_api),
    engine: InvitationEngine = Depends(get_invitation_engine),
    registry: TimerRegistry = Depends(get_timer_registry),
    board: CountdownBoard = Depends(get_countdown_board),
):
    """
    Respond To Invite

    Raises:
        - 404 Not Found: INVITE_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION (already answered or expired)
        - 422 Unprocessable Entity: INVALID_DECISION
        - 502 Bad Gateway: TRANSPORT_ERROR, SUBMIT_REJECTED
    """
    use_case = RespondToInviteUseCase(api, engine, registry, board)
    result = await use_case.execute(invite_id, request.decision)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVITE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "INVALID_DECISION": status.HTTP_422_UNPROCESSABLE_ENTITY,
            },
        )

    return result.value


@router.post(
    "/invites",
    status_code=status.HTTP_201_CREATED,
    response_model=SendInviteResponse,
)
async def send_invite(
    request: SendInviteRequest, api: IHousingApi = Depends(get_housing_api)
):
    """
    Send Invite

    Raises:
        - 422 Unprocessable Entity: MISSING_FIELDS, INVALID_EMAIL
        - 502 Bad Gateway: TRANSPORT_ERROR, SUBMIT_REJECTED
    """
    use_case = SendInviteUseCase(api)
    result = await use_case.execute(request.group, request.email)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "MISSING_FIELDS": status.HTTP_422_UNPROCESSABLE_ENTITY,
                "INVALID_EMAIL": status.HTTP_422_UNPROCESSABLE_ENTITY,
            },
        )

    return result.value


@router.get(
    "/activity", status_code=status.HTTP_200_OK, response_model=ActivityLogResponse
)
async def get_activity_log(api: IHousingApi = Depends(get_housing_api)):
    use_case = GetActivityLogUseCase(api)
    result = await use_case.execute("student")
    return result.value
