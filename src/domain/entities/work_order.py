"""
WorkOrder Entity

Maintenance task reported against a room.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.exceptions import InvalidTransition

from .enums import WorkOrderPriority, WorkOrderStatus

_NEXT_STATUS = {
    WorkOrderStatus.pending: WorkOrderStatus.in_progress,
    WorkOrderStatus.in_progress: WorkOrderStatus.completed,
}


class WorkOrder(BaseModel):
    """
    WorkOrder entity - a maintenance task for a technician.

    Business Rules:
    - Technicians start (pending -> in-progress) and complete
      (in-progress -> completed) orders, one step at a time
    - Completed orders stay around but no longer count as open
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    room_id: str = Field(alias="roomId")
    task: str
    priority: WorkOrderPriority = Field(default=WorkOrderPriority.medium)
    status: WorkOrderStatus = Field(default=WorkOrderStatus.pending)

    @field_validator("id", "room_id", mode="before")
    @classmethod
    def _as_str(cls, value):
        return str(value)

    @property
    def is_open(self) -> bool:
        return self.status != WorkOrderStatus.completed

    @property
    def next_status(self) -> Optional[WorkOrderStatus]:
        """Status the next technician action moves to, None once completed"""
        return _NEXT_STATUS.get(self.status)

    def transition_to(self, target: WorkOrderStatus) -> None:
        """
        Advance the order to the next status.

        Raises:
            InvalidTransition: target is not the next step from the current status
        """
        if self.next_status != target:
            raise InvalidTransition(
                "WorkOrder", self.id, self.status.value, WorkOrderStatus(target).value
            )
        self.status = target
