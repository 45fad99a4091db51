"""
Custom exceptions and error handling for trip management.

Defines application-specific exceptions with error codes so callers can
react to a rejected operation without parsing database driver messages.

Usage:
    from trip_management.errors import BookingRejectedError, ErrorCode

    raise BookingRejectedError("Trip 4 is COMPLETED", code=ErrorCode.TRIP_COMPLETED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"

    # Business rule errors
    TRIP_COMPLETED = "TRIP_COMPLETED"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    # Constraint errors
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_PHONE = "DUPLICATE_PHONE"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # System errors
    DATABASE_UNAVAILABLE = "DATABASE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TRIP_NOT_FOUND: "The requested trip does not exist.",
    ErrorCode.CUSTOMER_NOT_FOUND: "The requested customer does not exist.",
    ErrorCode.BOOKING_NOT_FOUND: "The requested booking does not exist.",
    ErrorCode.TRIP_COMPLETED: "This trip has already been completed and can no longer be booked.",
    ErrorCode.INVALID_STATUS_TRANSITION: "The trip cannot move to the requested status.",
    ErrorCode.DUPLICATE_EMAIL: "A customer with this email address already exists.",
    ErrorCode.DUPLICATE_PHONE: "A customer with this phone number already exists.",
    ErrorCode.INVALID_REFERENCE: "The booking refers to a trip or customer that does not exist.",
    ErrorCode.CONSTRAINT_VIOLATION: "The request breaks a data rule. Please check the values and try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.DATABASE_UNAVAILABLE: "The booking database is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripManagementError(Exception):
    """Base exception for all trip management errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NotFoundError(TripManagementError):
    """A trip, customer or booking id did not match any row."""

    pass


class BookingRejectedError(TripManagementError):
    """The booking breaks a business rule (e.g. the trip is completed)."""

    pass


class ConstraintViolationError(TripManagementError):
    """The database rejected the write because of a unique, check or foreign-key constraint."""

    pass


class StatusTransitionError(TripManagementError):
    """The requested trip status change is not in the transition table."""

    pass


class ValidationError(TripManagementError):
    """Input failed validation before reaching the database."""

    pass


class DatabaseError(TripManagementError):
    """The database could not be reached or is not connected."""

    pass
