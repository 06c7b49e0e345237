"""Exceptions raised by the instruction decoder."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for decode failures.

    A stream walker that hits one of these advances by `fallback_length`
    bytes and tries again.
    """

    fallback_length = 1


class UnknownOpcode(DecodeError):
    def __init__(self, opcode: int, signed: bool = False) -> None:
        self.opcode = opcode
        self.signed = signed
        table = "signed" if signed else "unsigned"
        super().__init__(f"No {table} template for opcode {opcode:#04x}")


class TruncatedInstruction(DecodeError):
    def __init__(self, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(f"Insufficient bytes: need {needed}, have {available}")


__all__ = ["DecodeError", "TruncatedInstruction", "UnknownOpcode"]
