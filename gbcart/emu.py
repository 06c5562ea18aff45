"""Emulator main loop and command-line entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from gbcart.cart import CartError, Cartridge
from gbcart.common import delay
from gbcart.cpu import Cpu

__all__ = ["EmuContext", "Emulator", "main"]


@dataclass
class EmuContext:
    """Run state of the emulator."""

    paused: bool = False
    running: bool = False
    ticks: int = 0


@dataclass
class Emulator:
    """Ties a cartridge to the CPU and drives the main loop."""

    context: EmuContext = field(default_factory=EmuContext)
    cpu: Cpu = field(default_factory=Cpu)
    cart: Optional[Cartridge] = None

    def run(self, rom_path: str) -> int:
        """Load ``rom_path`` and run until the CPU stops; return the tick count.

        Raises CartError if the ROM cannot be loaded.
        """
        self.cart = Cartridge.load(rom_path)
        print(f"Opened {rom_path}!")
        print(self.cart.describe())
        print("Cart loaded... ")

        ctx = self.context
        ctx.running = True
        ctx.paused = False
        ctx.ticks = 0

        while ctx.running:
            if ctx.paused:
                delay(10)
                continue
            if not self.cpu.step():
                print("CPU Stopped")
                ctx.running = False
                break
            ctx.ticks += 1
        return ctx.ticks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the emulator on the ROM named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: emu <rom_file>")
        return -1

    emulator = Emulator()
    try:
        emulator.run(args[0])
    except CartError as exc:
        print(exc)
        print(f"Failed to load ROM file {args[0]}")
        return -2
    if emulator.cpu.halted:
        return -3
    return 0


if __name__ == "__main__":
    sys.exit(main())