from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..constants import ADDRESS_MASK
from .bind import AddressingMode, Instruction, Operand
from .reader import s8, s16, s24, short_offset, u8, u16, u24
from .regnames import PlainRegisterNames, RegisterNames
from .variables import make_variable

logger = logging.getLogger(__name__)

REG = "R_%02X"
PTR = "[R_%02X"
CODE = "0x%X"


@dataclass
class ResolveCtx:
    """Per-decode state handed to the group resolvers."""

    instr: Instruction
    names: RegisterNames

    def op(self, index: int) -> int:
        return u8(self.instr.raw_ops, index)

    def last_index(self, position: int) -> int:
        # Operand bytes are laid out in reverse assembler order.
        return len(self.instr.raw_ops) - 1 - position

    def register(self, value: int) -> str:
        self.instr.xref(REG, value)
        return self.names.format(REG, value)

    def pointer(self, value: int, *, increment: bool = False) -> str:
        self.instr.xref(PTR + "]", value)
        text = self.names.format(PTR, value) + "]"
        return text + "+" if increment else text

    def bind(self, position: int, operand: Operand, text: str) -> None:
        types = self.instr.var_types
        var_type = types[position] if position < len(types) else None
        self.instr.vars[operand] = make_variable(operand, var_type, text)

    def done(self) -> None:
        self.instr.checked = True


Resolver = Callable[[ResolveCtx], None]


# --- relative control flow -------------------------------------------------


def resolve_short_jump(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = instr.next_address + short_offset(instr.opcode, ctx.op(0))
    instr.jump(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


def resolve_short_call(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = instr.next_address + short_offset(instr.opcode, ctx.op(0))
    instr.call(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


def resolve_bit_jump(ctx: ResolveCtx) -> None:
    """JBC/JBS breg, bitno, cadd."""
    instr = ctx.instr
    ctx.bind(0, Operand.BREG, ctx.register(ctx.op(0)))
    ctx.bind(1, Operand.BITNO, "%d" % (instr.opcode & 0x07))
    target = instr.next_address + s8(instr.raw_ops, 1)
    instr.jump(CODE, target)
    ctx.bind(2, Operand.CADD, CODE % target)
    ctx.done()


def resolve_conditional_jump(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = instr.next_address + s8(instr.raw_ops, 0)
    instr.jump(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


def _extended_target(instr: Instruction) -> int:
    return (instr.next_address + s24(instr.raw_ops, 0)) & ADDRESS_MASK


def resolve_f_group(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = _extended_target(instr)
    if instr.mnemonic == "ECALL":
        instr.call(CODE, target)
    else:
        instr.xref(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


# --- extended (24-bit) data forms ------------------------------------------


def _other_operand(instr: Instruction) -> Tuple[int, Operand]:
    for position, operand in enumerate(instr.operands):
        if operand is not Operand.TREG:
            return position, operand
    raise ValueError(f"{instr.mnemonic} has no register operand")


def resolve_extended_indirect(ctx: ResolveCtx) -> None:
    """[treg] in the first operand byte, the data register in the second."""
    instr = ctx.instr
    position, operand = _other_operand(instr)
    ctx.bind(
        instr.operands.index(Operand.TREG),
        Operand.TREG,
        ctx.pointer(ctx.op(0) & 0xFE),
    )
    ctx.bind(position, operand, ctx.register(ctx.op(1)))
    ctx.done()


def resolve_extended_indexed(ctx: ResolveCtx) -> None:
    """disp24[treg]: treg, three displacement bytes, then the data register."""
    instr = ctx.instr
    position, operand = _other_operand(instr)
    base = ctx.op(0) & 0xFE
    offset = u24(instr.raw_ops, 1)
    instr.xref("0x%06X", offset)
    text = ("0x%06X" % offset) + ctx.pointer(base)
    ctx.bind(instr.operands.index(Operand.TREG), Operand.TREG, text)
    ctx.bind(position, operand, ctx.register(ctx.op(4)))
    ctx.done()


def _resolve_extended(ctx: ResolveCtx) -> bool:
    mode = ctx.instr.mode
    if mode is AddressingMode.EXTENDED_INDEXED:
        resolve_extended_indexed(ctx)
        return True
    if mode is AddressingMode.EXTENDED_INDIRECT:
        resolve_extended_indirect(ctx)
        return True
    return False


# --- register walks ---------------------------------------------------------


def resolve_direct(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    for position, operand in enumerate(instr.operands[: instr.var_count]):
        ctx.bind(position, operand, ctx.register(ctx.op(ctx.last_index(position))))
    ctx.done()


def resolve_immediate(ctx: ResolveCtx) -> None:
    """
    The last operand is a literal in the leading operand bytes. Whatever the
    register operands leave over is its width: one byte or a little-endian
    word. Apart from LDBZE this matches opcode bit 4.
    """
    instr = ctx.instr
    last = instr.var_count - 1
    width = len(instr.raw_ops) - last
    for position, operand in enumerate(instr.operands[: instr.var_count]):
        if position == last:
            if width == 1:
                text = "#%02X" % ctx.op(0)
            else:
                text = "#%04X" % u16(instr.raw_ops, 0)
        else:
            text = ctx.register(ctx.op(ctx.last_index(position)))
        ctx.bind(position, operand, text)
    ctx.done()


def resolve_indirect(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    last = instr.var_count - 1
    increment = instr.mode is AddressingMode.INDIRECT_INC
    for position, operand in enumerate(instr.operands[: instr.var_count]):
        if position == last:
            text = ctx.pointer(ctx.op(0) & 0xFE, increment=increment)
        else:
            text = ctx.register(ctx.op(ctx.last_index(position)))
        ctx.bind(position, operand, text)
    ctx.done()


def resolve_indexed(ctx: ResolveCtx) -> None:
    """
    The last operand is off[base]: base register in the first operand byte,
    then an 8-bit (short) or 16-bit (long) offset.
    """
    instr = ctx.instr
    last = instr.var_count - 1
    long_form = instr.mode is AddressingMode.LONG_INDEXED
    for position, operand in enumerate(instr.operands[: instr.var_count]):
        if position == last:
            base = ctx.op(0) & 0xFE
            if long_form:
                offset = u16(instr.raw_ops, 1)
                offset_text = "0x%04X"
            else:
                offset = ctx.op(1)
                offset_text = "0x%02X"
            instr.xref(offset_text, offset)
            text = (offset_text % offset) + ctx.pointer(base)
        else:
            text = ctx.register(ctx.op(ctx.last_index(position)))
        ctx.bind(position, operand, text)
    ctx.done()


_MODE_RESOLVERS = {
    AddressingMode.DIRECT: resolve_direct,
    AddressingMode.IMMEDIATE: resolve_immediate,
    AddressingMode.INDIRECT: resolve_indirect,
    AddressingMode.INDIRECT_INC: resolve_indirect,
    AddressingMode.SHORT_INDEXED: resolve_indexed,
    AddressingMode.LONG_INDEXED: resolve_indexed,
}


def resolve_middle(ctx: ResolveCtx) -> None:
    resolver = _MODE_RESOLVERS.get(ctx.instr.mode)
    if resolver is not None:
        resolver(ctx)


def resolve_c_group(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    if instr.mnemonic in ("BMOV", "BMOVI", "CMPL"):
        resolve_direct(ctx)
        return
    resolve_middle(ctx)


def resolve_low_group(ctx: ResolveCtx) -> None:
    """
    Single-operand and shift instructions, plus EST/ESTB (0x1C-0x1F).

    Shifts with opcode bit 3 set take a count as their last operand; a
    count byte below 0x10 is an immediate rather than a register.
    """
    instr = ctx.instr
    if _resolve_extended(ctx):
        return
    if instr.mode in (AddressingMode.SHORT_INDEXED, AddressingMode.LONG_INDEXED):
        resolve_indexed(ctx)
        return
    for position, operand in enumerate(instr.operands[: instr.var_count]):
        index = ctx.last_index(position)
        value = ctx.op(index)
        if (
            instr.opcode & 0x08
            and index == 0
            and instr.opcode != 0x0F
            and value < 0x10
        ):
            text = "#%02X" % value
        else:
            text = ctx.register(value)
        ctx.bind(position, operand, text)
    ctx.done()


# --- 0xE0-0xEF --------------------------------------------------------------


def _resolve_djnz(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    ctx.bind(0, instr.operands[0], ctx.register(ctx.op(0)))
    target = instr.next_address + s8(instr.raw_ops, 1)
    instr.jump(CODE, target)
    ctx.bind(1, Operand.CADD, CODE % target)
    ctx.done()


def _resolve_tijmp(ctx: ResolveCtx) -> None:
    """TIJMP TBASE, [INDEX], #MASK encodes as [INDEX] #MASK TBASE."""
    ctx.bind(1, Operand.INDEX, ctx.pointer(ctx.op(0)))
    ctx.bind(2, Operand.MASK, "#%02X" % ctx.op(1))
    ctx.bind(0, Operand.TBASE, ctx.register(ctx.op(2)))
    ctx.done()


def _resolve_indirect_branch(ctx: ResolveCtx) -> None:
    """0xE3 is BR [wreg] when the register is even and EBR [treg] when odd."""
    instr = ctx.instr
    value = ctx.op(0)
    if value & 0x01 == 0:
        instr.mnemonic = "BR"
        instr.description = "BRANCH INDIRECT."
        instr.mode = AddressingMode.INDIRECT
        instr.operands = (Operand.WREG,)
    else:
        value &= 0xFE
    instr.jump(PTR + "]", value)
    ctx.bind(0, instr.operands[0], ctx.pointer(value))
    ctx.done()


def _resolve_extended_jump(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = _extended_target(instr)
    instr.jump(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


def _resolve_long_relative(ctx: ResolveCtx) -> None:
    instr = ctx.instr
    target = instr.next_address + s16(instr.raw_ops, 0)
    if instr.mnemonic == "LCALL":
        instr.call(CODE, target)
    else:
        instr.jump(CODE, target)
    ctx.bind(0, Operand.CADD, CODE % target)
    ctx.done()


_E_GROUP = {
    0xE0: _resolve_djnz,
    0xE1: _resolve_djnz,
    0xE2: _resolve_tijmp,
    0xE3: _resolve_indirect_branch,
    0xE4: resolve_direct,
    0xE6: _resolve_extended_jump,
    0xE7: _resolve_long_relative,
    0xEF: _resolve_long_relative,
}


def resolve_e_group(ctx: ResolveCtx) -> None:
    resolver = _E_GROUP.get(ctx.instr.opcode)
    if resolver is not None:
        resolver(ctx)
        return
    _resolve_extended(ctx)


# Checked in order; the first (mask, value) pair matching the opcode wins.
GROUPS: Tuple[Tuple[int, int, Resolver], ...] = (
    (0xF8, 0x20, resolve_short_jump),
    (0xF8, 0x28, resolve_short_call),
    (0xF8, 0x30, resolve_bit_jump),
    (0xF8, 0x38, resolve_bit_jump),
    (0xF0, 0xD0, resolve_conditional_jump),
    (0xF0, 0xF0, resolve_f_group),
    (0xF0, 0xE0, resolve_e_group),
    (0xF0, 0xC0, resolve_c_group),
    (0xE0, 0x00, resolve_low_group),
)


def select_resolver(opcode: int) -> Resolver:
    for mask, value, resolver in GROUPS:
        if opcode & mask == value:
            return resolver
    return resolve_middle


def resolve_operands(instr: Instruction, names: Optional[RegisterNames] = None) -> None:
    """Fill `instr.vars` and the flow edges from `instr.raw_ops`."""
    ctx = ResolveCtx(instr=instr, names=names or PlainRegisterNames())
    select_resolver(instr.opcode)(ctx)
    if not instr.checked:
        logger.debug(
            "No operand resolution for %s (%#04x, mode %r) at %#x",
            instr.mnemonic,
            instr.opcode,
            instr.mode.value,
            instr.address,
        )


__all__ = [
    "GROUPS",
    "ResolveCtx",
    "resolve_operands",
    "select_resolver",
]
