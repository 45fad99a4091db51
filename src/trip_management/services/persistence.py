"""Unit-of-work helpers shared by the store services.

Every write commits on its own; when the commit fails the session is rolled
back and the database error is translated into a TripManagementError.
Rejections decided before any write raise without touching the session.
"""

import logging
from typing import Any, TypeVar

import pydantic
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from trip_management.db.ddl import COMPLETED_TRIP_MESSAGE
from trip_management.errors import (
    BookingRejectedError,
    ConstraintViolationError,
    DatabaseError,
    ErrorCode,
    TripManagementError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def validate(model: type[ModelT], **data: Any) -> ModelT:
    try:
        return model(**data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e}", code=ErrorCode.VALIDATION_ERROR) from e


def translate_integrity_error(error: IntegrityError) -> TripManagementError:
    """Map a driver-level constraint failure onto an error code.

    SQLite reports column names ("UNIQUE constraint failed: customers.email"),
    PostgreSQL reports constraint names ("uq_customers_email"); both contain
    the column name, which is what the checks below rely on.
    """
    detail = str(error.orig)
    lowered = detail.lower()

    if COMPLETED_TRIP_MESSAGE.lower() in lowered:
        return BookingRejectedError(detail, code=ErrorCode.TRIP_COMPLETED)
    if "unique" in lowered or "duplicate" in lowered:
        if "email" in lowered:
            return ConstraintViolationError(detail, code=ErrorCode.DUPLICATE_EMAIL)
        if "phone" in lowered:
            return ConstraintViolationError(detail, code=ErrorCode.DUPLICATE_PHONE)
    if "foreign key" in lowered:
        return ConstraintViolationError(detail, code=ErrorCode.INVALID_REFERENCE)
    return ConstraintViolationError(detail, code=ErrorCode.CONSTRAINT_VIOLATION)


def commit_or_raise(session: Session) -> None:
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        error = translate_integrity_error(e)
        logger.warning("Write rejected (%s): %s", error.code.value, error.message)
        raise error from e
    except OperationalError as e:
        session.rollback()
        logger.exception("Database unavailable during commit")
        raise DatabaseError(f"Database unavailable: {e}", code=ErrorCode.DATABASE_UNAVAILABLE) from e
