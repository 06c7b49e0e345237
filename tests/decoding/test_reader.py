import pytest

from mcs96.decoding.errors import TruncatedInstruction
from mcs96.decoding.reader import s8, s16, s24, short_offset, u16, u24


def test_short_offset_bounds() -> None:
    assert short_offset(0x23, 0xFF) == 1023
    assert short_offset(0x24, 0x00) == -1024


def test_short_offset_small_values() -> None:
    assert short_offset(0x20, 0x05) == 5
    assert short_offset(0x27, 0xFF) == -1
    assert short_offset(0x2A, 0x00) == 0x200  # SCALL shares the encoding


def test_signed_reads() -> None:
    assert s8(b"\xfe") == -2
    assert s8(b"\x7f") == 127
    assert s16(b"\x00\x80") == -0x8000
    assert s16(b"\xfd\xff") == -3
    assert s24(b"\xff\xff\xff") == -1
    assert s24(b"\x00\x00\x80") == -0x800000


def test_unsigned_reads_are_little_endian() -> None:
    assert u16(b"\x34\x12") == 0x1234
    assert u24(b"\x12\xff\x00") == 0x00FF12
    assert u24(b"\x00\x12\xff\x00", 1) == 0x00FF12


def test_short_buffer_raises() -> None:
    with pytest.raises(TruncatedInstruction) as excinfo:
        u16(b"\x01")
    assert excinfo.value.needed == 2
    assert excinfo.value.available == 1
