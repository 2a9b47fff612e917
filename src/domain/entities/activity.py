"""
ActivityLogEntry Entity

Read-only record of an action taken from a dashboard.
"""

from datetime import datetime

from pydantic import BaseModel


class ActivityLogEntry(BaseModel):
    """A single dashboard action as reported by the housing API"""

    action: str
    timestamp: datetime
