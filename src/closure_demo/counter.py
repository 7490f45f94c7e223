"""Counter factory — a private integer reachable only through ``increment``."""

from __future__ import annotations

import logging
from typing import Callable

_logger = logging.getLogger(__name__)


def create_counter(start: int = 0) -> Callable[[], int]:
    """Return a nullary function that bumps a private counter and returns it.

    Every call to the factory owns a fresh cell, so two counters never
    observe each other::

        >>> a, b = create_counter(), create_counter()
        >>> a(), a(), b()
        (1, 2, 1)
    """
    counter = start
    _logger.debug("counter created (start=%d)", start)

    def increment() -> int:
        nonlocal counter
        counter += 1
        return counter

    return increment
