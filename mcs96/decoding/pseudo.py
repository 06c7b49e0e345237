"""Readable one-line pseudocode for decoded instructions."""

from __future__ import annotations

import logging
from typing import Callable, Dict, NamedTuple, Tuple

from .bind import Instruction, VarType

logger = logging.getLogger(__name__)

# Applied in order, first occurrence only. Strips register-name annotations
# and turns register/immediate syntax into `$r_xx` / `0x..` tokens.
_COSMETIC: Tuple[Tuple[str, str], ...] = (
    ("[R_00 ~(Zero Register)]", ""),
    ("R_", "$r_"),
    ("[$r_00]", ""),
    ("$r_00", "0x00"),
    ("$r_02", "0x11"),
    (" ~(", " ("),
    (" ~", ""),
    ("$r_02 (Ones Register)", "0x11"),
    (" (Ones Register)", ""),
    ("#", "0x"),
    (" ( GP Reg RAM )", ""),
)


class Slots(NamedTuple):
    dst: str = ""
    src: str = ""
    byte_reg: str = ""


Template = Callable[[Slots, str], str]


def clean_operand(text: str) -> str:
    for old, new in _COSMETIC:
        text = text.replace(old, new, 1)
    return text


def collect_slots(instr: Instruction) -> Slots:
    if instr.mnemonic in ("DJNZ", "DJNZW"):
        counter = instr.operand_text(instr.operands[0]) or ""
        target = instr.operand_text(instr.operands[1]) or ""
        return Slots(dst=target, src=counter)

    dst = src = byte_reg = ""
    for operand in instr.operands:
        var = instr.vars.get(operand)
        text = clean_operand(var.value if var is not None else "")
        kind = var.var_type if var is not None else None
        if kind is VarType.DEST:
            dst = text.replace("0x000", "$r_", 1).replace("0x", "$r_", 1)
        elif kind in (VarType.ADDR, VarType.PTRS):
            dst = text
        elif kind is VarType.BYTEREG:
            byte_reg = text
        else:
            src = text
    return Slots(dst=dst, src=src, byte_reg=byte_reg)


def _register(names: Tuple[str, ...], template: Template, table: Dict[str, Template]) -> None:
    for name in names:
        table[name] = template


TEMPLATES: Dict[str, Template] = {}

_register(("CLR", "CLRB"), lambda v, m: f"{v.dst} = 0x00", TEMPLATES)
_register(("EXT",), lambda v, m: f"SIGN EXTEND INT {v.dst} TO LONG INT", TEMPLATES)
_register(("EXTB",), lambda v, m: f"SIGN EXTEND SHORT INT {v.dst} TO INT", TEMPLATES)
_register(
    (
        "JNST", "JNH", "JGT", "JNC", "JNVT", "JNV", "JGE", "JNE",
        "JST", "JH", "JLE", "JC", "JVT", "JV", "JLT", "JE",
    ),
    lambda v, m: f"\tJUMP TO: {v.dst}",
    TEMPLATES,
)
_register(
    ("JBS",),
    lambda v, m: f"if bitno: ({v.src}) of {v.byte_reg} is set {{ JUMP TO: {v.dst} }}",
    TEMPLATES,
)
_register(
    ("JBC",),
    lambda v, m: f"if bitno: ({v.src}) of {v.byte_reg} is clear {{ JUMP TO: {v.dst} }}",
    TEMPLATES,
)
_register(("LJMP", "SJMP", "BR", "EBR", "EJMP"), lambda v, m: f"JUMP TO: {v.dst}", TEMPLATES)
_register(("ECALL", "SCALL", "LCALL"), lambda v, m: f"CALL SUB_ {v.dst}", TEMPLATES)
_register(("PUSH",), lambda v, m: f"PUSH {v.src} ONTO THE STACK", TEMPLATES)
_register(("POP",), lambda v, m: f"POP THE STACK TO {v.dst}", TEMPLATES)
_register(("CMP", "CMPB", "CMPL"), lambda v, m: f"if ({v.dst} == {v.src}) {{", TEMPLATES)
_register(("AND", "ANDB"), lambda v, m: f"{v.dst} = {v.dst} & {v.src}", TEMPLATES)
_register(("OR", "ORB", "XOR", "XORB"), lambda v, m: f"{v.dst} = {v.dst} {m} {v.src}", TEMPLATES)
_register(("NOT", "NOTB", "NEG", "NEGB"), lambda v, m: f"{v.dst} = {m} {v.dst}", TEMPLATES)
_register(("ADD", "ADDB", "ADDC", "ADDCB"), lambda v, m: f"{v.dst} = {v.dst} + {v.src}", TEMPLATES)
_register(("XCH", "XCHB"), lambda v, m: f"{v.dst} <={m}=> {v.src}", TEMPLATES)
_register(("SUB", "SUBB", "SUBC", "SUBCB"), lambda v, m: f"{v.dst} = {v.dst} - {v.src}", TEMPLATES)
_register(
    ("MULU", "MULUB", "SGN MUL", "SGN MULB"),
    lambda v, m: f"{v.dst} = {v.dst} * {v.src}",
    TEMPLATES,
)
_register(
    ("DIVU", "DIVUB", "SGN DIV", "SGN DIVB"),
    lambda v, m: f"{v.dst} = {v.dst} / {v.src}",
    TEMPLATES,
)
_register(
    ("SHR", "SHRB", "SHRL", "SHRA", "SHRAB", "SHRAL"),
    lambda v, m: f"{v.dst} >> {v.src}",
    TEMPLATES,
)
_register(("SHL", "SHLB", "SHLL"), lambda v, m: f"{v.dst} << {v.src}", TEMPLATES)
_register(("DEC", "DECB"), lambda v, m: f"{v.dst}--", TEMPLATES)
_register(("INC", "INCB"), lambda v, m: f"{v.dst}++", TEMPLATES)
_register(
    ("LD", "LDB", "LDBZE", "LDBSE", "ELD", "ELDB", "ST", "STB", "EST", "ESTB"),
    lambda v, m: f"{v.dst} = {v.src}",
    TEMPLATES,
)
_register(("NORML",), lambda v, m: f"NORMALIZE {v.src} SHIFT COUNT TO {v.dst}", TEMPLATES)
_register(
    ("BMOV", "BMOVI", "EBMOVI"),
    lambda v, m: f"BMOV {v.dst} count({v.src})",
    TEMPLATES,
)
_register(
    ("DJNZ", "DJNZW"),
    lambda v, m: f"{v.src}--; if ( {v.src} != 0 ) {{ JUMP TO: {v.dst} }}",
    TEMPLATES,
)


def unhandled(slots: Slots) -> str:
    return f"??? {slots.dst} = {slots.src}"


def synthesize(instr: Instruction) -> str:
    slots = collect_slots(instr)
    template = TEMPLATES.get(instr.mnemonic)
    if template is None:
        logger.debug("No pseudocode template for %s at %#x", instr.mnemonic, instr.address)
        return unhandled(slots)
    return template(slots, instr.mnemonic)


__all__ = ["TEMPLATES", "Slots", "clean_operand", "collect_slots", "synthesize"]
