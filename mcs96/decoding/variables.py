"""Static catalog describing every operand role an opcode template can list."""

from __future__ import annotations

from typing import Dict, NamedTuple, Optional

from .bind import Operand, Variable, VarType


class OperandInfo(NamedTuple):
    description: str
    bits: int


_LOWER_FILE_WORD = (
    "Must be aligned on an address that is evenly divisible by 2. "
    "The value must be in the range of 00-FEH."
)
_LOWER_FILE_LONG = (
    "Must be aligned on an address that is evenly divisible by 4. "
    "The value must be in the range of 00-FCH."
)

OPERAND_CATALOG: Dict[Operand, OperandInfo] = {
    Operand.BAOP: OperandInfo("A byte operand that is addressed by any addressing mode.", 8),
    Operand.WAOP: OperandInfo("A word operand that is addressed by any addressing mode.", 16),
    Operand.BITNO: OperandInfo(
        "A 3-bit field within an opcode that selects one of the eight bits in a byte.", 3
    ),
    Operand.BREG: OperandInfo(
        "A byte register in the internal register file. "
        "The value must be in the range of 00-FFH.",
        8,
    ),
    Operand.WREG: OperandInfo(
        "A word register in the lower register file. " + _LOWER_FILE_WORD, 8
    ),
    Operand.LREG: OperandInfo(
        "A 32-bit register in the lower register file. " + _LOWER_FILE_LONG, 8
    ),
    Operand.TREG: OperandInfo(
        "A 24-bit register in the lower register file. " + _LOWER_FILE_LONG, 8
    ),
    Operand.CADD: OperandInfo("An address in the program code.", 0),
    Operand.DBREG: OperandInfo(
        "A byte register in the lower register file that serves as the "
        "destination of the instruction operation.",
        8,
    ),
    Operand.SBREG: OperandInfo(
        "A byte register in the lower register file that serves as the "
        "source of the instruction operation.",
        8,
    ),
    Operand.DWREG: OperandInfo(
        "A word register in the lower register file that serves as the "
        "destination of the instruction operation. " + _LOWER_FILE_WORD,
        8,
    ),
    Operand.SWREG: OperandInfo(
        "A word register in the lower register file that serves as the "
        "source of the instruction operation. " + _LOWER_FILE_WORD,
        8,
    ),
    Operand.DLREG: OperandInfo(
        "A 32-bit register in the lower register file that serves as the "
        "destination of the instruction operation. " + _LOWER_FILE_LONG,
        8,
    ),
    Operand.SLREG: OperandInfo(
        "A 32-bit register in the lower register file that serves as the "
        "source of the instruction operation. " + _LOWER_FILE_LONG,
        8,
    ),
    Operand.COUNT: OperandInfo(
        "Shift count: an immediate 0-15 or a byte register holding the count.", 8
    ),
    Operand.PTR2_REG: OperandInfo(
        "A double-pointer register, used with the EBMOVI instruction. "
        "Must be aligned on an address that is evenly divisible by 8. "
        "The value must be in the range of 00-F8H.",
        8,
    ),
    Operand.TBASE: OperandInfo("Word register holding the base address of a jump table.", 8),
    Operand.INDEX: OperandInfo("Word register holding the jump-table index.", 8),
    Operand.MASK: OperandInfo("Immediate mask applied to the jump-table index.", 8),
}


def make_variable(operand: Operand, var_type: Optional[VarType], value: str) -> Variable:
    info = OPERAND_CATALOG[operand]
    return Variable(
        description=info.description,
        var_type=var_type,
        value=value,
        bits=info.bits,
    )


__all__ = ["OPERAND_CATALOG", "OperandInfo", "make_variable"]
