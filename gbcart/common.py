"""Small bit helpers and timing utilities shared by the emulator core."""

from __future__ import annotations

import time

__all__ = ["bit", "bit_set", "between", "delay"]


def bit(value: int, n: int) -> int:
    """Return 1 if bit ``n`` of ``value`` is set, otherwise 0."""
    return 1 if value & (1 << n) else 0


def bit_set(value: int, n: int, on: bool) -> int:
    """Return ``value`` with bit ``n`` set when ``on`` is true, cleared otherwise."""
    if on:
        return value | (1 << n)
    return value & ~(1 << n)


def between(value: int, low: int, high: int) -> bool:
    """Return whether ``low <= value <= high``."""
    return low <= value <= high


def delay(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000)