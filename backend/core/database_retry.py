# backend/core/database_retry.py

import logging
import random
import time
from typing import Callable, Set, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Database error codes that indicate retry-able conditions
RETRY_ERROR_CODES: Set[str] = {
    # PostgreSQL
    "40001",  # serialization_failure
    "40P01",  # deadlock_detected
    "55P03",  # lock_not_available
    # MySQL
    "1205",  # Lock wait timeout exceeded
    "1213",  # Deadlock found when trying to get lock
    # SQLite
    "database is locked",
    "database table is locked",
}


def is_retryable_error(error: Exception) -> bool:
    """
    Check if a database error is retryable

    Args:
        error: The exception to check

    Returns:
        True if the error indicates a transient condition that may succeed on retry
    """
    if isinstance(error, (OperationalError, DBAPIError)):
        error_str = str(error).lower()
        transient_markers = ["deadlock", "serialization", "could not serialize", "locked"]
        if any(marker in error_str for marker in transient_markers):
            return True

        orig = getattr(error, "orig", None)
        if orig is not None and getattr(orig, "pgcode", None):
            return orig.pgcode in RETRY_ERROR_CODES
        if orig is not None and getattr(orig, "args", None):
            error_code = str(orig.args[0])
            return any(code in error_code for code in RETRY_ERROR_CODES)

    return False


def retry_on_lock_error(
    func: Callable[..., T],
    *args,
    max_retries: int = None,
    initial_delay: float = None,
    max_delay: float = None,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    **kwargs,
) -> T:
    """
    Retry a function on deadlock or lock errors with exponential backoff.

    The function must roll back its own transaction before raising, so every
    attempt starts from committed state.

    Raises:
        The last exception if all retries fail or the error is not retryable
    """
    max_retries = settings.checkout_retry_attempts if max_retries is None else max_retries
    delay = settings.checkout_retry_initial_delay if initial_delay is None else initial_delay
    max_delay = settings.checkout_retry_max_delay if max_delay is None else max_delay

    for attempt in range(max_retries + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if not is_retryable_error(e) or attempt == max_retries:
                raise

            actual_delay = min(delay, max_delay)
            if jitter:
                # Add random jitter (0-25% of delay)
                actual_delay *= 1 + random.random() * 0.25

            logger.warning(
                f"Database lock error on attempt {attempt + 1}/{max_retries + 1}. "
                f"Retrying in {actual_delay:.2f}s. Error: {str(e)}"
            )

            time.sleep(actual_delay)
            delay *= backoff_factor
