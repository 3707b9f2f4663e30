# backend/core/database_utils.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import StoreFailureError, integrity_error_to_api_error

logger = logging.getLogger(__name__)


@contextmanager
def write_transaction(
    db: Session,
    *,
    duplicate_message: str = "Resource already exists with the provided unique values.",
    reference_message: str = "Referenced record does not exist or is still in use.",
    failure_message: str = "Operation failed due to a database error.",
) -> Iterator[Session]:
    """
    Commit the session when the block exits cleanly; otherwise roll back.

    Integrity errors become 400 API errors, any other database error a
    StoreFailureError. Nothing is left half-applied either way.

    Example:
        with write_transaction(db, duplicate_message="Route already exists."):
            db.add(route)
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error: {str(e.orig)}")
        raise integrity_error_to_api_error(
            e, duplicate_message=duplicate_message, reference_message=reference_message
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise StoreFailureError(failure_message)
    except Exception:
        db.rollback()
        raise
