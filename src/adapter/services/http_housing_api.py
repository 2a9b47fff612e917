import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from src.app.services.housing_api import BookingOutcome, IHousingApi
from src.domain.entities import (
    ActivityLogEntry,
    Invite,
    InviteStatus,
    Room,
    WorkOrder,
    WorkOrderStatus,
)
from src.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

_ROOMS = TypeAdapter(List[Room])
_INVITES = TypeAdapter(List[Invite])
_WORK_ORDERS = TypeAdapter(List[WorkOrder])
_ACTIVITY = TypeAdapter(List[ActivityLogEntry])


class HttpHousingApi(IHousingApi):
    """
    Housing API collaborator over HTTP using httpx.

    Network failures, 5xx responses and malformed payloads raise
    TransportError. A 4xx answer to a submit call is a rejection (False).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, operation: str, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(operation, str(exc)) from exc

        if response.status_code >= 500:
            raise TransportError(operation, f"HTTP {response.status_code}")
        return response

    async def _get_list(self, operation: str, path: str, adapter: TypeAdapter, **kwargs) -> Any:
        response = await self._send(operation, "GET", path, **kwargs)
        if response.is_error:
            raise TransportError(operation, f"HTTP {response.status_code}")
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise TransportError(operation, f"malformed payload: {exc}") from exc

    async def fetch_rooms(self) -> List[Room]:
        return await self._get_list("fetch_rooms", "/rooms", _ROOMS)

    async def fetch_invites(self) -> List[Invite]:
        return await self._get_list("fetch_invites", "/invites", _INVITES)

    async def fetch_work_orders(self) -> List[WorkOrder]:
        return await self._get_list("fetch_work_orders", "/work-orders", _WORK_ORDERS)

    async def fetch_activity_log(self, role: str) -> List[ActivityLogEntry]:
        return await self._get_list(
            "fetch_activity_log", "/audit-log", _ACTIVITY, params={"role": role}
        )

    async def submit_invite_response(self, invite_id: str, decision: InviteStatus) -> bool:
        response = await self._send(
            "submit_invite_response",
            "PATCH",
            f"/invites/{invite_id}",
            json={"status": InviteStatus(decision).value},
        )
        if response.is_error:
            logger.warning(f"Invite {invite_id} response rejected: HTTP {response.status_code}")
            return False
        return True

    async def submit_work_order_status(self, order_id: str, status: WorkOrderStatus) -> bool:
        response = await self._send(
            "submit_work_order_status",
            "PATCH",
            f"/work-orders/{order_id}",
            json={"status": WorkOrderStatus(status).value},
        )
        if response.is_error:
            logger.warning(f"Work order {order_id} update rejected: HTTP {response.status_code}")
            return False
        return True

    async def book_room(self, room_id: str) -> BookingOutcome:
        response = await self._send("book_room", "POST", f"/rooms/{room_id}/book")
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        if response.is_error:
            return BookingOutcome(
                success=False,
                message=payload.get("message", f"HTTP {response.status_code}"),
            )
        return BookingOutcome(
            success=bool(payload.get("success", True)),
            message=payload.get("message", ""),
        )

    async def send_invite(self, group: str, email: str) -> bool:
        response = await self._send(
            "send_invite", "POST", "/invites", json={"group": group, "email": email}
        )
        return not response.is_error
