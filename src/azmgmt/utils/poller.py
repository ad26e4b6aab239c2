from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Generic, TypeVar

StatusType = TypeVar("StatusType")

logger = logging.getLogger(__name__)


class PollTimeoutError(TimeoutError, Generic[StatusType]):
    """Timeout raised by :func:`poll_until` with last status metadata."""

    def __init__(self, timeout: float, last_status: StatusType | None) -> None:
        super().__init__(f"Operation did not complete within {timeout} seconds")
        self.timeout = timeout
        self.last_status = last_status


def poll_until(
    get_status: Callable[[], StatusType],
    is_done: Callable[[StatusType], bool],
    get_progress: Callable[[StatusType], int | None] | None = None,
    interval: float = 2.0,
    timeout: float = 600.0,
    on_update: Callable[[StatusType], None] | None = None,
) -> StatusType:
    """Call ``get_status`` every ``interval`` seconds until ``is_done`` accepts it.

    Raises :class:`PollTimeoutError` carrying the last status once ``timeout``
    seconds have elapsed without completion.
    """
    start = time.monotonic()
    last_pct = None
    attempts = 0
    while True:
        status = get_status()
        attempts += 1
        if on_update:
            on_update(status)
        if get_progress:
            pct = get_progress(status)
            if pct is not None and pct != last_pct:
                logger.debug("Operation progress: %s%%", pct)
                last_pct = pct
        if is_done(status):
            logger.debug("Operation completed after %d poll(s)", attempts)
            return status
        if time.monotonic() - start > timeout:
            raise PollTimeoutError(timeout, status)
        time.sleep(interval)


__all__ = ["PollTimeoutError", "poll_until"]
