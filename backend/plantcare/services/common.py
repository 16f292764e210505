"""Commit helper shared by all services."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from plantcare.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, operation: str) -> None:
    """
    Commit the current transaction or translate the failure.

    Storage-level constraint violations become ``ConflictError``; any other
    database error becomes ``ValidationError`` with the cause appended.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"{operation} rejected by a database constraint: {exc.orig}")
        raise ConflictError(f"{operation} failed: the record conflicts with an existing one") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"{operation} failed")
        raise ValidationError(f"{operation} failed: {exc}") from exc
