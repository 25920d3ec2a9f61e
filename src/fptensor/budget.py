"""Step budget guard.

A `Budget` is a monotonically decreasing step counter passed by reference into
every iterative kernel routine. Each loop iteration calls `consume()` first; when
no step remains the routine fails with `ResourceExhaustedError`. Exhaustion is
sticky, so a budget that has run out refuses every later step.

The count is logical (loop iterations), never wall-clock time.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import default_config
from .errors import ResourceExhaustedError

logger = logging.getLogger(__name__)


class Budget:
    """Step counter with an optional hard ceiling."""

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None:
            if not isinstance(limit, int) or isinstance(limit, bool):
                raise TypeError("limit must be an int or None")
            if limit < 0:
                raise ValueError("limit must be non-negative")
        self._limit = limit
        self._spent = 0
        self._exhausted = False

    @classmethod
    def unlimited(cls) -> "Budget":
        return cls(None)

    @classmethod
    def from_config(cls) -> "Budget":
        return cls(default_config().step_limit)

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    @property
    def spent(self) -> int:
        return self._spent

    @property
    def remaining(self) -> Optional[int]:
        if self._limit is None:
            return None
        return self._limit - self._spent

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def consume(self, steps: int = 1) -> None:
        """Take `steps` steps, or fail if fewer remain."""
        if self._exhausted:
            raise ResourceExhaustedError(self._limit or 0, self._spent)
        if self._limit is not None and self._spent + steps > self._limit:
            self._exhausted = True
            logger.warning("step budget exhausted: limit=%d spent=%d", self._limit, self._spent)
            raise ResourceExhaustedError(self._limit, self._spent)
        self._spent += steps

    def __repr__(self) -> str:
        return f"Budget(limit={self._limit}, spent={self._spent})"


def resolve(budget: Optional[Budget]) -> Budget:
    """Return `budget`, or a fresh budget built from configuration."""
    if budget is None:
        return Budget.from_config()
    return budget
