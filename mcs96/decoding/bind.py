from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .flow import Edge, FlowRecorder


class AddressingMode(str, Enum):
    """Operand addressing mode as encoded by the opcode's low bits."""

    NONE = ""
    DIRECT = "direct"
    IMMEDIATE = "immediate"
    INDIRECT = "indirect"
    INDIRECT_INC = "indirect+"
    INDEXED = "indexed"
    SHORT_INDEXED = "short-indexed"
    LONG_INDEXED = "long-indexed"
    EXTENDED_INDIRECT = "extended-indirect"
    EXTENDED_INDEXED = "extended-indexed"


class Operand(str, Enum):
    """Operand roles a template lists, in assembler order."""

    BREG = "breg"
    WREG = "wreg"
    LREG = "lreg"
    BAOP = "baop"
    WAOP = "waop"
    CADD = "cadd"
    BITNO = "bitno"
    TREG = "treg"
    DBREG = "Dbreg"
    SBREG = "Sbreg"
    DWREG = "Dwreg"
    SWREG = "Swreg"
    DLREG = "Dlreg"
    SLREG = "Slreg"
    COUNT = "breg/#count"
    PTR2_REG = "prt2_reg"
    TBASE = "TBASE"
    INDEX = "INDEX"
    MASK = "#MASK"


class VarType(str, Enum):
    """Semantic type tag attached to each operand position."""

    ADDR = "ADDR"
    BREG = "BREG"
    BYTEREG = "BYTEREG"
    BYTE_REG = "ByteReg"
    BITNO = "BITNO"
    DEST = "DEST"
    COUNT = "COUNT"
    SRC = "SRC"
    SRC1 = "SRC1"
    SRC2 = "SRC2"
    PTRS = "PTRS"
    CNTREG = "CNTREG"
    TBASE = "TBASE"
    INDEX = "INDEX"
    MASK = "MASK"
    WREG = "WREG"


@dataclass(frozen=True, slots=True)
class Variable:
    """A resolved operand: rendered text plus its catalog metadata."""

    description: str
    var_type: Optional[VarType]
    value: str
    bits: int = 0


@dataclass(frozen=True, slots=True)
class OpcodeTemplate:
    mnemonic: str
    length: int
    var_count: int = 0
    var_types: Tuple[VarType, ...] = ()
    operands: Tuple[Operand, ...] = ()
    mode: AddressingMode = AddressingMode.NONE
    description: str = ""
    long_description: str = ""
    variable_length: bool = False
    ignore: bool = False
    reserved: bool = False


@dataclass
class Instruction:
    """
    One decoded instruction.

    Built fresh from an `OpcodeTemplate` on every decode; resolvers fill in
    `vars` and the flow edges, the dispatcher fills in `pseudocode`.
    """

    address: int = 0
    opcode: int = 0
    mnemonic: str = ""
    byte_length: int = 1
    var_count: int = 0
    var_types: Tuple[VarType, ...] = ()
    operands: Tuple[Operand, ...] = ()
    mode: AddressingMode = AddressingMode.NONE
    description: str = ""
    long_description: str = ""
    signed: bool = False
    variable_length: bool = False
    auto_increment: bool = False
    ignore: bool = False
    reserved: bool = False
    checked: bool = False
    raw: bytes = b""
    raw_ops: bytes = b""
    vars: Dict[Operand, Variable] = field(default_factory=dict)
    pseudocode: str = ""
    flow: FlowRecorder = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.flow = FlowRecorder(self.address)

    @classmethod
    def from_template(
        cls,
        template: OpcodeTemplate,
        *,
        address: int,
        opcode: int,
        signed: bool = False,
    ) -> "Instruction":
        return cls(
            address=address,
            opcode=opcode,
            mnemonic=template.mnemonic,
            byte_length=template.length,
            var_count=template.var_count,
            var_types=template.var_types,
            operands=template.operands,
            mode=template.mode,
            description=template.description,
            long_description=template.long_description,
            signed=signed,
            variable_length=template.variable_length,
            ignore=template.ignore,
            reserved=template.reserved,
        )

    @classmethod
    def placeholder(cls, address: int, data: bytes) -> "Instruction":
        """1-byte stand-in returned for undecodable input."""
        raw = bytes(data[:1])
        return cls(
            address=address,
            opcode=raw[0] if raw else 0,
            byte_length=1,
            raw=raw,
        )

    @property
    def next_address(self) -> int:
        return self.address + self.byte_length

    @property
    def xrefs(self) -> Dict[int, List[Edge]]:
        return self.flow.xrefs

    @property
    def calls(self) -> Dict[int, List[Edge]]:
        return self.flow.calls

    @property
    def jumps(self) -> Dict[int, List[Edge]]:
        return self.flow.jumps

    def operand_text(self, operand: Operand) -> Optional[str]:
        var = self.vars.get(operand)
        return var.value if var is not None else None

    def xref(self, template: str, target: int) -> None:
        self.flow.xref(template, target, self.mnemonic)

    def call(self, template: str, target: int) -> None:
        self.flow.call(template, target, self.mnemonic)

    def jump(self, template: str, target: int) -> None:
        self.flow.jump(template, target, self.mnemonic)


__all__ = [
    "AddressingMode",
    "Instruction",
    "OpcodeTemplate",
    "Operand",
    "VarType",
    "Variable",
]
