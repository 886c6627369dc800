"""
Pacing between write requests to the GitHub API.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class Throttle(Protocol):
    """Something the migrator calls between consecutive write requests."""

    def pause(self) -> None:
        """Block until the next request may be sent."""
        ...


class FixedDelayThrottle:
    """Sleep a fixed number of seconds on every pause.

    This does not look at the remaining quota reported by GitHub; it only keeps
    the request rate below what secondary rate limits tolerate.
    """

    def __init__(self, delay: float, *, sleep: Callable[[float], None] = time.sleep) -> None:
        if delay < 0:
            msg = f"Delay must not be negative: {delay}"
            raise ValueError(msg)
        self.delay: float = delay
        self._sleep: Callable[[float], None] = sleep

    def pause(self) -> None:
        if self.delay == 0:
            return
        logger.debug(f"Sleeping {self.delay}s")
        self._sleep(self.delay)
