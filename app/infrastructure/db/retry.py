"""
Database retry utilities for handling transient failures.

Write paths serialize on the car row, so under contention the database may
report a deadlock (MySQL) or a busy file (SQLite). Those failures are safe to
retry because the whole unit of work is rolled back first.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# MySQL error codes
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"

SQLITE_BUSY_MESSAGES = ("database is locked", "database table is locked")


def is_deadlock_error(error: Exception) -> bool:
    """
    Check if an exception is a transient lock error.

    Args:
        error: The exception to check

    Returns:
        True if the error is a deadlock or lock timeout that should be retried
    """
    if isinstance(error, (OperationalError, DBAPIError)):
        error_str = str(error)
        if MYSQL_DEADLOCK_ERROR in error_str or MYSQL_LOCK_WAIT_TIMEOUT in error_str:
            return True
        return any(message in error_str for message in SQLITE_BUSY_MESSAGES)
    return False


async def retry_on_deadlock(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Retry a function if it fails due to a database deadlock.

    Uses exponential backoff: base_delay * (2 ** attempt)

    Args:
        func: The async function to execute, typically a whole use case call
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.1)

    Returns:
        The result of the function call

    Raises:
        The original exception if max attempts exceeded or non-deadlock error

    Example:
        reservation = await retry_on_deadlock(
            lambda: use_case.execute(request, current_user)
        )
    """
    for attempt in range(max_attempts):
        try:
            return await func()
        except Exception as e:
            if not is_deadlock_error(e):
                raise

            if attempt >= max_attempts - 1:
                logger.error(
                    "Database lock contention persists after max retries",
                    extra={"attempts": max_attempts, "error": str(e)},
                )
                raise

            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Database lock contention detected, retrying",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": str(e),
                },
            )
            await asyncio.sleep(delay)

    raise RuntimeError("retry_on_deadlock requires max_attempts >= 1")

