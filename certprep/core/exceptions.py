"""
Domain errors raised by the practice services.

Routers never build error responses for these themselves; the handlers
registered in ``certprep.main`` turn each one into a JSON body with the
status code carried by the exception class.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class CertPrepError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CertPrepError):
    """A question, session or certification id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(CertPrepError):
    """Input rejected before any write."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class AccessDeniedError(CertPrepError):
    """Caller is authenticated but may not touch this resource."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(CertPrepError):
    """Request conflicts with the current state of a resource."""

    status_code = status.HTTP_409_CONFLICT


class StorageUnavailableError(CertPrepError):
    """The backing store failed. Not retried here."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


@contextmanager
def storage_errors(action: str, db: Optional[Session] = None) -> Iterator[None]:
    """
    Wrap low-level SQLAlchemy failures in ``StorageUnavailableError``.

    Args:
        action: Short description used in the error message, e.g. "recording answer"
        db: Session to roll back when the store fails

    Raises:
        StorageUnavailableError: If any SQLAlchemy error escapes the block
    """
    try:
        yield
    except SQLAlchemyError as e:
        if db is not None:
            db.rollback()
        logger.error(f"Storage failure while {action}: {e}")
        raise StorageUnavailableError(f"Storage unavailable while {action}") from e
