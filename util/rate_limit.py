"""Token Bucket – SRP. OCP: pluggable traffic curve.

a small tool that does one thing well.
"""
from __future__ import annotations

import math
from time import monotonic
from typing import Callable


def flat_multiplier() -> float:
    return 1.0


def diurnal_multiplier() -> float:
    """Return 0.4..1.4 multiplier based on local hour. (Pure function)"""
    from datetime import datetime

    hour = datetime.now().hour
    return 0.9 + 0.5 * math.sin((hour - 3) / 24 * 2 * math.pi)


CURVES = {"flat": flat_multiplier, "diurnal": diurnal_multiplier}


class TokenBucket:
    """ISP: minimal surface – add tokens by time, try consume.

    - rate: events/sec
    - curve: function multiplier for dynamic load (default: flat)
    - clock: monotonic seconds source
    """

    def __init__(
        self,
        rate: float,
        curve: Callable[[], float] = flat_multiplier,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.rate = rate
        self.curve = curve
        self._clock = clock
        self._tokens = 0.0
        self._last = clock()

    def refill(self) -> None:
        now = self._clock()
        # cap at one second of burst
        self._tokens = min(
            max(self.rate, 1.0), self._tokens + self.rate * self.curve() * (now - self._last)
        )
        self._last = now

    def try_consume(self, n: float = 1.0) -> bool:
        if self._tokens >= n:
            self._tokens -= n
            return True
        return False
