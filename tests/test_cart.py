import pytest

from gbcart.cart import (
    CartError,
    Cartridge,
    RomHeader,
    header_checksum,
    licensee_name,
    rom_type_name,
)


def make_rom(title=b"TESTGAME", cart_type=0x01, rom_size=0x00, lic_code=0x01,
             version=0x00, fix_checksum=True):
    rom = bytearray(0x8000)
    rom[0x134:0x134 + len(title)] = title
    rom[0x147] = cart_type
    rom[0x148] = rom_size
    rom[0x14B] = lic_code
    rom[0x14C] = version
    if fix_checksum:
        rom[0x14D] = header_checksum(bytes(rom))
    return bytes(rom)


def test_parse_reads_fields():
    header = RomHeader.parse(make_rom(cart_type=0x03, rom_size=0x02,
                                      lic_code=0x31, version=0x07))
    assert header.title == "TESTGAME"
    assert header.cart_type == 0x03
    assert header.rom_size == 0x02
    assert header.lic_code == 0x31
    assert header.version == 0x07
    assert len(header.logo) == 0x30
    assert len(header.entry) == 4


def test_title_is_cut_to_fifteen_characters():
    header = RomHeader.parse(make_rom(title=b"ABCDEFGHIJKLMNOP"))
    assert header.title == "ABCDEFGHIJKLMNO"


def test_parse_rejects_short_data():
    with pytest.raises(CartError):
        RomHeader.parse(bytes(0x120))


@pytest.mark.parametrize(
    "code, name",
    [
        (0x00, "ROM ONLY"),
        (0x01, "MBC1"),
        (0x13, "MBC3+RAM+BATTERY 10"),
        (0x22, "MBC7+SENSOR+RUMBLE+RAM+BATTERY"),
        (0x23, "UNKNOWN"),
        (0xFF, "UNKNOWN"),
    ],
)
def test_rom_type_name(code, name):
    assert rom_type_name(code) == name


@pytest.mark.parametrize(
    "code, name",
    [
        (0x00, "None"),
        (0x01, "Nintendo Research & Development 1"),
        (0x31, "Nintendo"),
        (0xA4, "Konami (Yu-Gi-Oh!)"),
        (0xA5, "UNKNOWN"),
        (0x02, "UNKNOWN"),
    ],
)
def test_licensee_name(code, name):
    assert licensee_name(code) == name


def test_checksum_round_trip_and_detection():
    rom = bytearray(make_rom())
    cart = Cartridge("x.gb", bytes(rom), RomHeader.parse(bytes(rom)))
    assert cart.checksum_valid() is True
    rom[0x140] ^= 0xFF
    broken = Cartridge("x.gb", bytes(rom), RomHeader.parse(bytes(rom)))
    assert broken.checksum_valid() is False


def test_checksum_ignores_bytes_outside_range():
    rom = bytearray(make_rom())
    before = header_checksum(bytes(rom))
    rom[0x133] ^= 0xFF
    rom[0x14D] ^= 0xFF
    assert header_checksum(bytes(rom)) == before


def test_checksum_rejects_short_rom():
    with pytest.raises(CartError):
        header_checksum(bytes(0x100))


def test_rom_size_kb_doubles_per_step():
    base = Cartridge.load  # noqa: F841
    sizes = [
        Cartridge("x.gb", make_rom(rom_size=n), RomHeader.parse(make_rom(rom_size=n))).rom_size_kb()
        for n in range(5)
    ]
    assert sizes[0] == 32
    assert all(b == 2 * a for a, b in zip(sizes, sizes[1:]))


def test_load_round_trip(tmp_path):
    rom = make_rom(cart_type=0x00, lic_code=0x31)
    path = tmp_path / "game.gb"
    path.write_bytes(rom)
    cart = Cartridge.load(path)
    assert cart.rom_data == rom
    assert cart.rom_size == len(rom)
    assert cart.filename == str(path)
    assert cart.type_name() == "ROM ONLY"
    assert cart.licensee_name() == "Nintendo"


def test_load_missing_file(tmp_path):
    with pytest.raises(CartError):
        Cartridge.load(tmp_path / "missing.gb")


def test_describe_reports_checksum_status():
    good = make_rom()
    bad = make_rom(fix_checksum=False)
    good_text = Cartridge("a.gb", good, RomHeader.parse(good)).describe()
    bad_text = Cartridge("b.gb", bad, RomHeader.parse(bad)).describe()
    assert "(PASSED)" in good_text
    assert "TESTGAME" in good_text
    assert "(MBC1)" in good_text
    assert "(FAILED)" in bad_text