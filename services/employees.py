"""Employees Service – SRP: generate random Employee records for demo runs.

Implements the ObjectReader port; the pipeline pulls until exhaustion.
"""
from __future__ import annotations

import random
import string
from typing import Optional

from domain.employee import Employee
from ports.object_reader import ObjectReader

MAX_ID = 2**63 - 1


def random_name(n: int = 10, rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return "".join(rng.choices(string.ascii_lowercase, k=n)).capitalize()


class RandomEmployeeReader(ObjectReader[Employee]):
    """Yields exactly num_messages employees, then stops."""

    def __init__(self, num_messages: int, name_length: int = 10, seed: Optional[int] = None) -> None:
        self.remaining = max(0, num_messages)
        self.name_length = name_length
        self._rng = random.Random(seed)

    def __next__(self) -> Employee:
        if self.remaining <= 0:
            raise StopIteration
        self.remaining -= 1
        return Employee(
            name=random_name(self.name_length, self._rng),
            id=self._rng.randint(1, MAX_ID),
        )
