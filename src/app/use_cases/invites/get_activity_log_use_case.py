"""
Get Activity Log Use Case

Retrieves the dashboard activity log for a role.
"""

import logging

from src.app.services.housing_api import IHousingApi
from src.app.use_cases.dtos import ErrorInfo
from src.domain.exceptions import TransportError
from src.libs.result import Error, Result, Return

from .dtos import ActivityLogResponse

logger = logging.getLogger(__name__)

ROLES = ("student", "technician")


class GetActivityLogUseCase:
    """
    Use case for reading the activity log.

    Business Rules:
    - Role must be student or technician
    - Entries are returned newest first
    """

    def __init__(self, api: IHousingApi):
        self.api = api

    async def execute(self, role: str) -> Result[ActivityLogResponse]:
        if role not in ROLES:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: student, technician",
                )
            )

        try:
            entries = await self.api.fetch_activity_log(role)
        except TransportError as exc:
            logger.warning(f"Could not fetch {role} activity log: {exc}")
            return Return.ok(
                ActivityLogResponse(entries=[], error=ErrorInfo.from_transport(exc))
            )

        entries = sorted(entries, key=lambda entry: entry.timestamp, reverse=True)
        return Return.ok(ActivityLogResponse(entries=entries))
