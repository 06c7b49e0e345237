"""Intel MCS-96 (8XC196EA) instruction decoder."""

from .decoding import DecodeError, DecodeResult, Instruction, decode, parse  # noqa: F401

__all__ = ["DecodeError", "DecodeResult", "Instruction", "decode", "parse"]
