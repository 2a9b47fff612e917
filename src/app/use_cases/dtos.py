"""
Shared Use Case DTOs
"""

from pydantic import BaseModel

from src.domain.exceptions import TransportError


class ErrorInfo(BaseModel):
    """Failure reported next to a degraded (empty) view"""

    code: str
    message: str

    @classmethod
    def from_transport(cls, exc: TransportError) -> "ErrorInfo":
        return cls(code="TRANSPORT_ERROR", message=str(exc))
