"""
Application errors for the trip wizard backend.

Every error carries an ``ErrorCode`` so the services can report failures as
result values and the API can map them to HTTP statuses without leaking raw
backend messages to the client.

Usage:
    from tripwizard.core.errors import BackendError, ErrorCode

    raise BackendError("insert into trips failed", code=ErrorCode.BACKEND_WRITE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Read side
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    BACKEND_READ_FAILED = "BACKEND_READ_FAILED"

    # Write side
    BACKEND_WRITE_FAILED = "BACKEND_WRITE_FAILED"

    # Auth
    AUTH_FAILED = "AUTH_FAILED"
    FORBIDDEN = "FORBIDDEN"

    # System errors
    TIMEOUT = "TIMEOUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Some trip details are missing or invalid. Please check and try again.",
    ErrorCode.TRIP_NOT_FOUND: "This trip does not exist or has been removed.",
    ErrorCode.PROFILE_NOT_FOUND: "This profile does not exist.",
    ErrorCode.BACKEND_READ_FAILED: "Failed to load trips. Please try again.",
    ErrorCode.BACKEND_WRITE_FAILED: "Failed to create trip. Please try again.",
    ErrorCode.AUTH_FAILED: "Please sign in to continue.",
    ErrorCode.FORBIDDEN: "You can only change trips you host.",
    ErrorCode.TIMEOUT: "The request timed out. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripWizardError(Exception):
    """Base exception for all trip wizard errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(TripWizardError):
    """Missing or out-of-range wizard input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class BackendError(TripWizardError):
    """The storage backend rejected or failed a request."""

    pass


class BackendTimeoutError(BackendError):
    """The storage backend did not answer in time."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TIMEOUT):
        super().__init__(message, code=code)


class AuthenticationError(TripWizardError):
    """Bearer token missing or rejected."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.AUTH_FAILED):
        super().__init__(message, code=code)
