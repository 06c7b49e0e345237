"""Little-endian operand readers and the short-jump offset calculator."""

from __future__ import annotations

import struct

from .errors import TruncatedInstruction


def require(data: bytes, count: int) -> None:
    if len(data) < count:
        raise TruncatedInstruction(needed=count, available=len(data))


def _unpack(fmt: str, data: bytes, offset: int) -> int:
    size = struct.calcsize("<" + fmt)
    require(data, offset + size)
    return struct.unpack_from("<" + fmt, data, offset)[0]


def u8(data: bytes, offset: int = 0) -> int:
    return _unpack("B", data, offset)


def s8(data: bytes, offset: int = 0) -> int:
    return _unpack("b", data, offset)


def u16(data: bytes, offset: int = 0) -> int:
    return _unpack("H", data, offset)


def s16(data: bytes, offset: int = 0) -> int:
    return _unpack("h", data, offset)


def u24(data: bytes, offset: int = 0) -> int:
    require(data, offset + 3)
    return int.from_bytes(data[offset : offset + 3], "little")


def s24(data: bytes, offset: int = 0) -> int:
    value = u24(data, offset)
    return value - 0x1000000 if value & 0x800000 else value


def short_offset(opcode: int, low: int) -> int:
    """
    11-bit signed displacement of SJMP/SCALL.

    The opcode's low three bits supply bits 10..8 (bit 10 is the sign) and
    the operand byte supplies bits 7..0. Range is -1024..1023.
    """
    high = opcode & 0x07
    if high & 0x04:
        high |= 0xF8
    value = (high << 8) | (low & 0xFF)
    return value - 0x10000 if value & 0x8000 else value


__all__ = ["require", "s16", "s24", "s8", "short_offset", "u16", "u24", "u8"]
