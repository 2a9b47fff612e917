from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error codes every route maps the same way
COMMON_ERROR_STATUS = {
    "TRANSPORT_ERROR": status.HTTP_502_BAD_GATEWAY,
    "SUBMIT_REJECTED": status.HTTP_502_BAD_GATEWAY,
    "INVALID_TRANSITION": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error, status_by_code: dict) -> None:
    """Translate a use case Error into ClientError, or ServerError for unknown codes"""
    status_code = status_by_code.get(error.code) or COMMON_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
