"""Error envelope for the HTTP API

Use case errors reach clients as::

    {"error": {"code": "EVENT_CLOSED", "message": "...", "reason": "..."}}
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

# Status used when a route does not pick one explicitly
ERROR_STATUS_CODES = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_RAID": status.HTTP_400_BAD_REQUEST,
    "INVALID_CALL_ORDER": status.HTTP_400_BAD_REQUEST,
    "EVENT_CLOSED": status.HTTP_409_CONFLICT,
    "INVALID_EVENT_TRANSITION": status.HTTP_409_CONFLICT,
    "CHARACTER_ALREADY_ADDED": status.HTTP_409_CONFLICT,
    "TEMPLATE_EXISTS": status.HTTP_409_CONFLICT,
    "EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CALL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CHARACTER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CHARACTER_NOT_REGISTERED": status.HTTP_404_NOT_FOUND,
    "ATTENDANCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TEMPLATE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = None):
        super().__init__(error.message)
        self.error = error
        if status_code is None:
            status_code = ERROR_STATUS_CODES.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error.model_dump(exclude_none=True)},
    )
