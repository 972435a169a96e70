"""Common types and helpers shared across models."""

import time
from collections.abc import Callable
from typing import TypeAlias

Clock: TypeAlias = Callable[[], float]


def monotonic_now() -> float:
    return time.monotonic()
