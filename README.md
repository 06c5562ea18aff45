# gbcart

Reads a Game Boy ROM image and decodes its cartridge header: title,
cartridge type, declared ROM size, RAM size code, licensee, version and
whether the header checksum matches. It also holds an emulator loop that
loads a ROM and steps a CPU.

## Install

```
pip install .
```

## Command line

```
gbcart path/to/game.gb
```

The command loads the ROM, prints `Opened <path>!`, a header summary such as

```
Cartridge Loaded:
	 Title     : TETRIS
	 Type      : 00 (ROM ONLY)
	 ROM Size  : 32 KB
	 RAM Size  : 00
	 LIC Code  : 01 (Nintendo Research & Development 1)
	 ROM Vers  : 00
	 Checksum Status :  0A (PASSED)
```

and then `Cart loaded... `, and starts the emulator loop. `gbcart.emu.main`
returns these values, which become the process exit status (shown here as
seen on POSIX systems):

- `-1` (255): no ROM file was given; `Usage: emu <rom_file>` is printed
- `-2` (254): the file could not be read or is too short to hold a header
- `-3` (253): the CPU stopped

Because the CPU does not yet execute instructions, a run with a valid ROM
always ends with `CPU Stopped` and status `-3`.

## Library use

```python
from gbcart.cart import Cartridge, RomHeader, header_checksum, licensee_name, rom_type_name

cart = Cartridge.load("game.gb")
print(cart.header.title)
print(cart.type_name())          # e.g. "MBC1+RAM+BATTERY"
print(cart.licensee_name())
print(cart.rom_size_kb(), "KB")  # 32 KB shifted left by the header's ROM size code
print(cart.rom_size, "bytes")    # size of the image actually read
print("checksum ok" if cart.checksum_valid() else "checksum bad")
print(cart.describe())

print(rom_type_name(0x13))       # "MBC3+RAM+BATTERY 10"
print(licensee_name(0x31))       # "Nintendo"
```

- `RomHeader.parse(data)` decodes the header at offset `0x100` of raw ROM
  bytes. The title is at most 15 characters and stops at the first zero byte.
- `header_checksum(rom)` computes the checksum over bytes `0x134` to `0x14C`.
- `rom_type_name(code)` and `licensee_name(code)` return `"UNKNOWN"` for codes
  they do not know.
- `CartError` is raised when a file cannot be read or is too short to hold a
  header.

`gbcart.emu.Emulator().run(rom_path)` loads a ROM, prints the summary and
runs the loop until the CPU stops, returning the number of ticks completed.
Its run state is kept in `Emulator.context` (an `EmuContext` with `paused`,
`running` and `ticks`). `gbcart.cpu.Cpu.step()` returns `False` and sets
`Cpu.halted`.

`gbcart.common` has small helpers: `bit`, `bit_set`, `between` and `delay`
(which sleeps for a number of milliseconds).

## What it does not do

- The CPU has no instruction set: it stops on its first step.
- There is no memory bus, graphics, sound, timer or input, and no window is
  opened.
- Only the header is interpreted; no bank switching or cartridge RAM is
  provided.

## Tests

```
pip install ".[test]"
pytest
```