"""Cartridge ROM loading and header decoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = [
    "CartError",
    "RomHeader",
    "rom_type_name",
    "licensee_name",
    "header_checksum",
    "Cartridge",
]

HEADER_OFFSET = 0x100
_HEADER_FORMAT = struct.Struct("<4s48s16sHBBBBBBBBH")
_CHECKSUM_START = 0x0134
_CHECKSUM_END = 0x014C

_ROM_TYPES = (
    "ROM ONLY",
    "MBC1",
    "MBC1+RAM",
    "MBC1+RAM+BATTERY",
    "0x04 ??",
    "MBC2",
    "MBC2+BATTERY",
    "0x07 ??",
    "ROM+RAM 9",
    "ROM+RAM+BATTERY 9",
    "0x0A ??",
    "MMM01",
    "MMM01+RAM",
    "MMM01+RAM+BATTERY",
    "0x0E ??",
    "MBC3+TIMER+BATTERY",
    "MBC3+TIMER+RAM+BATTERY 10",
    "MBC3",
    "MBC3+RAM 10",
    "MBC3+RAM+BATTERY 10",
    "0x14 ??",
    "0x15 ??",
    "0x16 ??",
    "0x17 ??",
    "0x18 ??",
    "MBC5",
    "MBC5+RAM",
    "MBC5+RAM+BATTERY",
    "MBC5+RUMBLE",
    "MBC5+RUMBLE+RAM",
    "MBC5+RUMBLE+RAM+BATTERY",
    "0x1F ??",
    "MBC6",
    "0x21 ??",
    "MBC7+SENSOR+RUMBLE+RAM+BATTERY",
)

_LICENSEES = {
    0x00: "None",
    0x01: "Nintendo Research & Development 1",
    0x08: "Capcom",
    0x13: "EA (Electronic Arts)",
    0x18: "Hudson Soft",
    0x19: "B-AI",
    0x20: "KSS",
    0x22: "Planning Office WADA",
    0x24: "PCM Complete",
    0x25: "San-X",
    0x28: "Kemco",
    0x29: "SETA Corporation",
    0x30: "Viacom",
    0x31: "Nintendo",
    0x32: "Bandai",
    0x33: "Ocean Software/Acclaim Entertainment",
    0x34: "Konami",
    0x35: "HectorSoft",
    0x37: "Taito",
    0x38: "Hudson Soft",
    0x39: "Banpresto",
    0x41: "Ubi Soft1",
    0x42: "Atlus",
    0x44: "Malibu Interactive",
    0x46: "Angel",
    0x47: "Bullet-Proof Software2",
    0x49: "Irem",
    0x50: "Absolute",
    0x51: "Acclaim Entertainment",
    0x52: "Activision",
    0x53: "Sammy USA Corporation",
    0x54: "Konami",
    0x55: "Hi Tech Expressions",
    0x56: "LJN",
    0x57: "Matchbox",
    0x58: "Mattel",
    0x59: "Milton Bradley Company",
    0x60: "Titus Interactive",
    0x61: "Virgin Games Ltd.3",
    0x64: "Lucasfilm Games4",
    0x67: "Ocean Software",
    0x69: "EA (Electronic Arts)",
    0x70: "Infogrames5",
    0x71: "Interplay Entertainment",
    0x72: "Broderbund",
    0x73: "Sculptured Software6",
    0x75: "The Sales Curve Limited7",
    0x78: "THQ",
    0x79: "Accolade",
    0x80: "Misawa Entertainment",
    0x83: "lozc",
    0x86: "Tokuma Shoten",
    0x87: "Tsukuda Original",
    0x91: "Chunsoft Co.8",
    0x92: "Video System",
    0x93: "Ocean Software/Acclaim Entertainment",
    0x95: "Varie",
    0x96: "Yonezawa/s\u2019pal",
    0x97: "Kaneko",
    0x99: "Pack-In-Video",
    0xA4: "Konami (Yu-Gi-Oh!)",
}

UNKNOWN = "UNKNOWN"


class CartError(Exception):
    """Raised when a cartridge cannot be read or decoded."""


def rom_type_name(code: int) -> str:
    """Return the name of a cartridge type code."""
    if 0 <= code < len(_ROM_TYPES):
        return _ROM_TYPES[code]
    return UNKNOWN


def licensee_name(code: int) -> str:
    """Return the publisher name for an old licensee code."""
    return _LICENSEES.get(code, UNKNOWN)


def header_checksum(rom: bytes) -> int:
    """Compute the header checksum over bytes 0x134 to 0x14C."""
    if len(rom) <= _CHECKSUM_END:
        raise CartError("ROM too small to hold a cartridge header")
    checksum = 0
    for value in rom[_CHECKSUM_START:_CHECKSUM_END + 1]:
        checksum = (checksum - value - 1) & 0xFF
    return checksum


@dataclass(frozen=True)
class RomHeader:
    """The cartridge header found at offset 0x100 of a ROM image."""

    entry: bytes
    logo: bytes
    title: str
    new_lic_code: int
    sgb_flag: int
    cart_type: int
    rom_size: int
    ram_size: int
    dest_code: int
    lic_code: int
    version: int
    checksum: int
    global_checksum: int

    @classmethod
    def parse(cls, data: bytes) -> "RomHeader":
        """Decode the header from a whole ROM image."""
        end = HEADER_OFFSET + _HEADER_FORMAT.size
        if len(data) < end:
            raise CartError(
                f"ROM too small to hold a cartridge header ({len(data)} bytes)"
            )
        (
            entry,
            logo,
            raw_title,
            new_lic_code,
            sgb_flag,
            cart_type,
            rom_size,
            ram_size,
            dest_code,
            lic_code,
            version,
            checksum,
            global_checksum,
        ) = _HEADER_FORMAT.unpack_from(data, HEADER_OFFSET)
        # The last title byte is always treated as a terminator.
        title = raw_title[:15].split(b"\x00", 1)[0].decode("latin-1")
        return cls(
            entry=entry,
            logo=logo,
            title=title,
            new_lic_code=new_lic_code,
            sgb_flag=sgb_flag,
            cart_type=cart_type,
            rom_size=rom_size,
            ram_size=ram_size,
            dest_code=dest_code,
            lic_code=lic_code,
            version=version,
            checksum=checksum,
            global_checksum=global_checksum,
        )


@dataclass(frozen=True)
class Cartridge:
    """A loaded ROM image together with its decoded header."""

    filename: str
    rom_data: bytes
    header: RomHeader

    @classmethod
    def load(cls, path: Union[str, "PathLike[str]"]) -> "Cartridge":
        """Read a ROM image from ``path``."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise CartError(f"Failed to open file {path}!") from exc
        return cls(filename=str(path), rom_data=data, header=RomHeader.parse(data))

    @property
    def rom_size(self) -> int:
        """Size of the loaded image in bytes."""
        return len(self.rom_data)

    def type_name(self) -> str:
        """Name of the cartridge type."""
        return rom_type_name(self.header.cart_type)

    def licensee_name(self) -> str:
        """Name of the publisher from the old licensee code."""
        return licensee_name(self.header.lic_code)

    def rom_size_kb(self) -> int:
        """ROM size in KB as declared by the header."""
        return 32 * (1 << self.header.rom_size)

    def checksum_valid(self) -> bool:
        """Whether the header checksum matches the header bytes."""
        return self.header.checksum == header_checksum(self.rom_data)

    def describe(self) -> str:
        """A human-readable summary of the header."""
        h = self.header
        status = "PASSED" if self.checksum_valid() else "FAILED"
        lines = [
            "Cartridge Loaded:",
            f"\t Title     : {h.title}",
            f"\t Type      : {h.cart_type:02X} ({self.type_name()})",
            f"\t ROM Size  : {self.rom_size_kb()} KB",
            f"\t RAM Size  : {h.ram_size:02X}",
            f"\t LIC Code  : {h.lic_code:02X} ({self.licensee_name()})",
            f"\t ROM Vers  : {h.version:02X}",
            f"\t Checksum Status :  {h.checksum:02X} ({status})",
        ]
        return "\n".join(lines)