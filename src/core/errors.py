"""
Custom exceptions and error handling for tumaps.

Defines application-specific exceptions with error codes so handlers can
render a safe, user-facing message without leaking details from the hosted
auth or data services.

Usage:
    from core.errors import AuthenticationError, ErrorCode

    raise AuthenticationError("Invalid login credentials", code=ErrorCode.INVALID_CREDENTIALS)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_CONFIRMED = "EMAIL_NOT_CONFIRMED"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    PASSWORDS_DO_NOT_MATCH = "PASSWORDS_DO_NOT_MATCH"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"

    # Session errors
    SESSION_EXPIRED = "SESSION_EXPIRED"

    # Trip errors
    TRIPS_UNAVAILABLE = "TRIPS_UNAVAILABLE"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    TRIP_SAVE_FAILED = "TRIP_SAVE_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Map errors
    MAP_NOT_CONFIGURED = "MAP_NOT_CONFIGURED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Something went wrong. Please try again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.INVALID_CREDENTIALS: "Invalid email or password.",
    ErrorCode.EMAIL_NOT_CONFIRMED: "Please confirm your email address before signing in.",
    ErrorCode.USER_ALREADY_EXISTS: "An account with this email already exists.",
    ErrorCode.WEAK_PASSWORD: "Password is too weak. Please choose a stronger password.",
    ErrorCode.PASSWORDS_DO_NOT_MATCH: "Passwords do not match.",
    ErrorCode.MISSING_CREDENTIALS: "Email and password are required.",
    ErrorCode.SESSION_EXPIRED: "Your session has expired. Please sign in again.",
    ErrorCode.TRIPS_UNAVAILABLE: "Unable to load your trips. Please try again.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.TRIP_SAVE_FAILED: "Your trip could not be saved. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.MAP_NOT_CONFIGURED: "The map is not configured yet.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TumapsError(Exception):
    """Base exception for all tumaps errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(TumapsError):
    """Authentication against the hosted auth service failed."""

    pass


class SessionError(TumapsError):
    """A stored session could not be read, refreshed or written."""

    pass


class TripStoreError(TumapsError):
    """Reading or writing trips in the hosted backend failed."""

    pass


class ValidationError(TumapsError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        field_errors: dict[str, str] | None = None,
    ):
        super().__init__(message, code=code)
        self.field_errors = field_errors or {}


class MapConfigurationError(TumapsError):
    """The map widget cannot be rendered with the current configuration."""

    pass
