"""CPU core."""

from __future__ import annotations

__all__ = ["Cpu"]


class Cpu:
    """A CPU core with no instruction set wired in; it halts on its first step."""

    def __init__(self) -> None:
        self.halted = False

    def step(self) -> bool:
        """Advance one instruction; return False once the CPU has stopped."""
        self.halted = True
        return False