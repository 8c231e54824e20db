"""Execution zone used to deliver gesture callbacks.

Hosts run engine setup outside the zone so that engine-internal timers
and bookkeeping do not look like application activity, and run user
handlers inside it through ``run_guarded`` so a failing handler is
reported instead of unwinding into the engine's dispatch loop.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Optional

logger = logging.getLogger("gesture_events.zone")


class ExecutionZone:
    """Error-isolating callback boundary.

    Args:
        on_error: Called with every exception captured by ``run_guarded``.
        max_errors: How many captured exceptions ``errors`` keeps (oldest dropped).
    """

    def __init__(
        self,
        on_error: Optional[Callable[[BaseException], Any]] = None,
        max_errors: int = 50,
    ):
        self._on_error = on_error
        self._outside_depth = 0
        self.errors: deque[Exception] = deque(maxlen=max_errors)
        self.turns = 0

    @property
    def is_outside(self) -> bool:
        return self._outside_depth > 0

    def run_outside(self, fn: Callable, *args, **kwargs):
        """Run ``fn`` outside the zone and return its result.

        Exceptions propagate.
        """
        self._outside_depth += 1
        try:
            return fn(*args, **kwargs)
        finally:
            self._outside_depth -= 1

    def run_guarded(self, fn: Callable, *args, **kwargs):
        """Run ``fn`` inside the zone. Exceptions are captured, never raised."""
        saved, self._outside_depth = self._outside_depth, 0
        self.turns += 1
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            self.errors.append(e)
            logger.error("Error in guarded callback %s: %s", getattr(fn, "__name__", fn), e)
            if self._on_error is not None:
                try:
                    self._on_error(e)
                except Exception as handler_error:
                    logger.error("Zone error handler failed: %s", handler_error)
            return None
        finally:
            self._outside_depth = saved
