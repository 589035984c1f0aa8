from fastapi import HTTPException, status

from tripwizard.core.errors import ErrorCode, USER_MESSAGES
from tripwizard.models.results import ServiceResult

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TRIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.AUTH_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.BACKEND_READ_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.BACKEND_WRITE_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_error(code: ErrorCode) -> HTTPException:
    """Build an HTTPException carrying only the user-facing message for a code."""
    return HTTPException(
        status_code=STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={"code": code.value, "message": USER_MESSAGES.get(code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])},
    )


def raise_for_result(result: ServiceResult) -> None:
    if not result.ok:
        raise http_error(result.error_code or ErrorCode.INTERNAL_ERROR)
