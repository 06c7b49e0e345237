"""
Instruction decoding for the Intel MCS-96 family (8XC196EA variant).

`decode()` turns the bytes at one address into an `Instruction` carrying its
length, mnemonic, resolved operands, flow edges and a pseudocode line.
`parse()` does the same but reports failures as a 1-byte placeholder so a
linear sweep can keep going.
"""

from .bind import (  # noqa: F401
    AddressingMode,
    Instruction,
    OpcodeTemplate,
    Operand,
    Variable,
    VarType,
)
from .errors import DecodeError, TruncatedInstruction, UnknownOpcode  # noqa: F401
from .flow import Edge, EdgeKind, FlowRecorder  # noqa: F401
from .regnames import (  # noqa: F401
    Mcs96RegisterNames,
    PlainRegisterNames,
    RegisterNames,
)
from .dispatcher import DecodeResult, Mcs96Decoder, decode, parse  # noqa: F401
from . import decode_map  # noqa: F401

__all__ = [
    "AddressingMode",
    "DecodeError",
    "DecodeResult",
    "Edge",
    "EdgeKind",
    "FlowRecorder",
    "Instruction",
    "Mcs96Decoder",
    "Mcs96RegisterNames",
    "OpcodeTemplate",
    "Operand",
    "PlainRegisterNames",
    "RegisterNames",
    "TruncatedInstruction",
    "UnknownOpcode",
    "VarType",
    "Variable",
    "decode",
    "decode_map",
    "parse",
]
