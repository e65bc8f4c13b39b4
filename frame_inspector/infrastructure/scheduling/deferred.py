"""Deferred callback scheduler for frame loader delays."""
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], None]
Schedule = Callable[[float, Callback], object]


def blocking_schedule(delay_seconds: float, callback: Callback) -> None:
    """Sleep for the delay, then run the callback inline."""
    if delay_seconds > 0:
        time.sleep(delay_seconds)
    logger.debug(f"Running deferred callback after {delay_seconds}s")
    callback()
