"""Progress notification throttling."""

import time
from collections.abc import Callable
from typing import Any

__all__ = ["ProgressFn", "Throttle"]

ProgressFn = Callable[[int, int], Any]


class Throttle:
    """Rate-limit calls to a callback.

    The first call goes through immediately; later calls are dropped until
    ``interval`` seconds have passed since the last one that went through.
    Dropped calls are never replayed.

    Parameters
    ----------
    callback : Callable[..., Any]
        Function to call.
    interval : float, optional
        Minimum seconds between calls (default: 0.1).
    clock : Callable[[], float], optional
        Monotonic clock, replaceable in tests.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        interval: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.callback = callback
        self.interval = interval
        self._clock = clock
        self._last: float | None = None

    def __call__(self, *args: Any) -> bool:
        """Forward ``args`` to the callback unless throttled.

        Returns
        -------
        bool
            True if the callback was called.
        """
        now = self._clock()
        if self._last is not None and now - self._last < self.interval:
            return False
        self._last = now
        self.callback(*args)
        return True
