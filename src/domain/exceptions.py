"""
Domain exceptions for the hostel dashboard core.

None of these is fatal. Use cases catch them and turn them into Result
errors or safe, empty view-state.
"""


class DashboardError(Exception):
    """Base exception for all dashboard core errors."""

    pass


class InvalidTransition(DashboardError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, entity: str, entity_id: str, current: str, target: str):
        self.entity = entity
        self.entity_id = entity_id
        self.current = current
        self.target = target
        super().__init__(
            f"{entity} '{entity_id}' cannot move from '{current}' to '{target}'"
        )


class TransportError(DashboardError):
    """Raised by the housing API collaborator when a call fails."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class TimerRaceIgnored(DashboardError):
    """An expiry that lost to a user response.

    Not a failure: the engine uses it to short-circuit the expiry path and
    reports it at debug level only.
    """

    def __init__(self, invite_id: str, status: str):
        self.invite_id = invite_id
        self.status = status
        super().__init__(f"Invite '{invite_id}' already {status}; expiry ignored")
