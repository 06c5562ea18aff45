"""Game Boy cartridge header decoding and a minimal emulator loop."""

__version__ = "0.1.0"
__all__ = ["common", "cart", "cpu", "emu"]