from typing import Any, Dict, NoReturn, Optional

from fastapi import status
from libs.result import Error

# Every error code a use case or request-chain stage can return, and the
# HTTP status it is answered with. Unknown codes are server errors.
ERROR_STATUS: Dict[str, int] = {
    # Authentication
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_OR_EXPIRED_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_INACTIVE": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_LOCKED": status.HTTP_403_FORBIDDEN,
    # Authorization / throttling
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
    # Resources
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADMIN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REVIEW_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SECURITY_EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ALREADY_RESOLVED": status.HTTP_409_CONFLICT,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "CANNOT_MODIFY_SELF": status.HTTP_400_BAD_REQUEST,
    # Availability
    "FEATURE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "STORE_UNAVAILABLE": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(code: str) -> int:
    return ERROR_STATUS.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code or status_for(base_error.code)
        self.extra = extra or {}
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise the API exception matching a use case error."""
    code = status_for(error.code)
    if code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        raise ServerError(error)
    raise ClientError(error, status_code=code)
