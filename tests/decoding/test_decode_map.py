import logging

from mcs96.config import DecoderConfig
from mcs96.decoding import AddressingMode, Instruction, Operand, decode, decode_map
from mcs96.decoding.decode_map import (
    resolve_bit_jump,
    resolve_c_group,
    resolve_conditional_jump,
    resolve_e_group,
    resolve_f_group,
    resolve_low_group,
    resolve_middle,
    resolve_short_call,
    resolve_short_jump,
    select_resolver,
)

PLAIN = DecoderConfig()


def _decode(data, address=0):
    return decode(bytes(data), address, config=PLAIN)


def test_group_selection_priority() -> None:
    assert select_resolver(0x20) is resolve_short_jump
    assert select_resolver(0x2F) is resolve_short_call
    assert select_resolver(0x31) is resolve_bit_jump
    assert select_resolver(0x3F) is resolve_bit_jump
    assert select_resolver(0xD7) is resolve_conditional_jump
    assert select_resolver(0xF1) is resolve_f_group
    assert select_resolver(0xE7) is resolve_e_group
    assert select_resolver(0xC8) is resolve_c_group
    assert select_resolver(0x1C) is resolve_low_group
    assert select_resolver(0x44) is resolve_middle
    assert select_resolver(0xBF) is resolve_middle


def test_short_call_backwards() -> None:
    instr = _decode([0x2F, 0xFF], 0x500)
    [edge] = instr.calls[0x501]
    assert edge.target == 0x501
    assert instr.jumps == {}
    assert instr.pseudocode == "CALL SUB_ 0x501"


def test_bit_jump() -> None:
    instr = _decode([0x3B, 0x24, 0x10], 0x300)

    assert instr.mnemonic == "JBS"
    assert instr.vars[Operand.BREG].value == "R_24"
    assert instr.vars[Operand.BITNO].value == "3"
    assert instr.vars[Operand.CADD].value == "0x313"
    assert instr.jumps[0x313][0].source == 0x300
    assert list(instr.xrefs) == [0x24]
    assert instr.pseudocode == "if bitno: (3) of $r_24 is set { JUMP TO: 0x313 }"


def test_conditional_jump_negative_displacement() -> None:
    instr = _decode([0xD7, 0xFE], 0x200)
    assert instr.mnemonic == "JNE"
    assert instr.jumps[0x200][0].target == 0x200
    assert instr.pseudocode == "\tJUMP TO: 0x200"


def test_djnz() -> None:
    instr = _decode([0xE0, 0x40, 0xFB], 0x400)

    assert instr.vars[Operand.BREG].value == "R_40"
    assert instr.vars[Operand.CADD].value == "0x3FE"
    assert instr.jumps[0x3FE][0].source == 0x400
    assert instr.pseudocode == "R_40--; if ( R_40 != 0 ) { JUMP TO: 0x3FE }"


def test_long_call_and_jump() -> None:
    call = _decode([0xEF, 0x00, 0x10], 0x1000)
    assert call.calls[0x2003][0].source == 0x1000
    assert call.jumps == {}

    jump = _decode([0xE7, 0xFD, 0xFF], 0x1000)
    assert jump.jumps[0x1000][0].target == 0x1000
    assert jump.calls == {}


def test_extended_jump_wraps_into_address_space() -> None:
    instr = _decode([0xE6, 0x20, 0x00, 0x00], 0x1FFFF0)
    assert instr.jumps[0x14][0].source == 0x1FFFF0
    assert instr.vars[Operand.CADD].value == "0x14"


def test_extended_call() -> None:
    instr = _decode([0xF1, 0x00, 0x00, 0x01], 0x0)
    assert instr.calls[0x10004][0].source == 0x0
    assert instr.pseudocode == "CALL SUB_ 0x10004"


def test_branch_indirect_retag() -> None:
    instr = _decode([0xE3, 0x30], 0x80)

    assert instr.mnemonic == "BR"
    assert instr.description == "BRANCH INDIRECT."
    assert instr.mode is AddressingMode.INDIRECT
    assert instr.operands == (Operand.WREG,)
    assert instr.vars[Operand.WREG].value == "[R_30]"
    assert instr.jumps[0x30][0].text == "[R_30]"
    assert instr.jumps[0x30][0].mnemonic == "BR"
    assert instr.xrefs[0x30][0].source == 0x80
    assert instr.pseudocode == "JUMP TO: [$r_30]"


def test_extended_branch_indirect_masks_low_bit() -> None:
    instr = _decode([0xE3, 0x31], 0x80)
    assert instr.mnemonic == "EBR"
    assert instr.vars[Operand.CADD].value == "[R_30]"
    assert list(instr.jumps) == [0x30]


def test_extended_indexed_load() -> None:
    instr = _decode([0xE9, 0x20, 0x12, 0xFF, 0x00, 0x40], 0x600)

    assert instr.vars[Operand.TREG].value == "0x00FF12[R_20]"
    assert instr.vars[Operand.WREG].value == "R_40"
    assert list(instr.xrefs) == [0xFF12, 0x20, 0x40]
    assert instr.pseudocode == "$r_40 = 0x00FF12[$r_20]"


def test_extended_indirect_store_from_low_group() -> None:
    instr = _decode([0x1C, 0x21, 0x40])

    assert instr.mnemonic == "EST"
    assert instr.vars[Operand.TREG].value == "[R_20]"
    assert instr.vars[Operand.WREG].value == "R_40"


def test_shift_count_immediate_versus_register() -> None:
    imm = _decode([0x08, 0x05, 0x40])
    assert imm.vars[Operand.WREG].value == "R_40"
    assert imm.vars[Operand.COUNT].value == "#05"
    assert imm.pseudocode == "$r_40 >> 0x05"

    reg = _decode([0x08, 0x30, 0x40])
    assert reg.vars[Operand.COUNT].value == "R_30"


def test_normalize_count_is_always_a_register() -> None:
    instr = _decode([0x0F, 0x05, 0x40])
    assert instr.vars[Operand.BREG].value == "R_05"
    assert instr.vars[Operand.LREG].value == "R_40"


def test_immediate_word_and_byte() -> None:
    word = _decode([0xA1, 0x34, 0x12, 0x40])
    assert word.vars[Operand.WAOP].value == "#1234"
    assert word.pseudocode == "$r_40 = 0x1234"
    assert list(word.xrefs) == [0x40]

    byte = _decode([0xB1, 0x7F, 0x40])
    assert byte.vars[Operand.BAOP].value == "#7F"

    zero_extend = _decode([0xAD, 0x7F, 0x40])
    assert zero_extend.vars[Operand.BAOP].value == "#7F"
    assert zero_extend.vars[Operand.WREG].value == "R_40"


def test_three_operand_immediate() -> None:
    instr = _decode([0x41, 0xFF, 0x00, 0x32, 0x34])
    assert instr.vars[Operand.WAOP].value == "#00FF"
    assert instr.vars[Operand.SWREG].value == "R_32"
    assert instr.vars[Operand.DWREG].value == "R_34"
    assert instr.pseudocode == "$r_34 = $r_34 & 0x00FF"


def test_push_immediate_word() -> None:
    instr = _decode([0xC9, 0x34, 0x12])
    assert instr.vars[Operand.WAOP].value == "#1234"


def test_block_move_registers() -> None:
    instr = _decode([0xC1, 0x30, 0x48])
    assert instr.vars[Operand.LREG].value == "R_48"
    assert instr.vars[Operand.WREG].value == "R_30"
    assert instr.pseudocode == "BMOV $r_48 count($r_30)"


def test_extended_block_move() -> None:
    instr = _decode([0xE4, 0x30, 0x48])
    assert instr.checked
    assert instr.vars[Operand.PTR2_REG].value == "R_48"
    assert instr.vars[Operand.WREG].value == "R_30"


def test_table_indirect_jump() -> None:
    instr = _decode([0xE2, 0x30, 0x7F, 0x40])

    assert instr.checked
    assert instr.vars[Operand.INDEX].value == "[R_30]"
    assert instr.vars[Operand.MASK].value == "#7F"
    assert instr.vars[Operand.TBASE].value == "R_40"
    assert instr.pseudocode.startswith("???")


def test_unresolved_mode_leaves_instruction_unchecked(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="mcs96.decoding.decode_map")
    instr = Instruction(
        address=0x10,
        opcode=0x44,
        mnemonic="ADD",
        byte_length=3,
        var_count=1,
        operands=(Operand.WREG,),
        mode=AddressingMode.INDEXED,
        raw=bytes([0x44, 0x30, 0x40]),
        raw_ops=bytes([0x30, 0x40]),
    )
    decode_map.resolve_operands(instr)

    assert not instr.checked
    assert instr.vars == {}
    assert any("No operand resolution" in r.getMessage() for r in caplog.records)
