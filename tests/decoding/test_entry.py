import logging

import pytest

from mcs96 import decode, parse
from mcs96.config import DecoderConfig
from mcs96.decoding import (
    AddressingMode,
    DecodeError,
    Operand,
    TruncatedInstruction,
    UnknownOpcode,
    VarType,
)
from mcs96.decoding.opcodes import SIGNED_OPCODES, UNSIGNED_OPCODES

PLAIN = DecoderConfig()


def test_tables_cover_every_unsigned_opcode() -> None:
    assert sorted(UNSIGNED_OPCODES) == list(range(0x100))
    assert UNSIGNED_OPCODES[0x10].reserved
    assert UNSIGNED_OPCODES[0xFE].ignore
    assert len(SIGNED_OPCODES) == 25


def test_short_jump_scenario() -> None:
    instr = decode(bytes([0x20, 0x05]), 0x100, config=PLAIN)

    assert instr.mnemonic == "SJMP"
    assert instr.byte_length == 2
    assert instr.checked
    assert instr.vars[Operand.CADD].value == "0x107"
    assert instr.vars[Operand.CADD].var_type is VarType.ADDR
    [edge] = instr.jumps[0x107]
    assert edge.target == 0x107
    assert edge.mnemonic == "SJMP"
    assert instr.pseudocode == "JUMP TO: 0x107"


def test_push_direct_register_scenario() -> None:
    instr = decode(bytes([0xC8, 0x10]), 0x2000, config=PLAIN)

    assert instr.mnemonic == "PUSH"
    assert instr.vars[Operand.WAOP].value == "R_10"
    [edge] = instr.xrefs[0x10]
    assert edge.target == 0x10
    assert edge.text == "R_10"
    assert instr.pseudocode == "PUSH $r_10 ONTO THE STACK"


def test_signed_prefix_scenario() -> None:
    data = bytes([0xFE, 0x4C, 0x30, 0x32, 0x34])
    instr = decode(data, config=PLAIN)

    assert instr.signed
    assert instr.mnemonic == "SGN MUL"
    assert instr.byte_length == SIGNED_OPCODES[0x4C].length + 1
    assert instr.raw == data
    assert instr.raw_ops == bytes([0x30, 0x32, 0x34])
    assert instr.vars[Operand.LREG].value == "R_34"
    assert instr.vars[Operand.WREG].value == "R_32"
    assert instr.vars[Operand.WAOP].value == "R_30"
    assert instr.pseudocode == "$r_34 = $r_34 * $r_30"


def test_signed_indexed_reads_mode_bit_after_the_opcode() -> None:
    # 0x4F has bit 0 set; only the byte after it picks the indexed form.
    short = decode(bytes([0xFE, 0x4F, 0x30, 0x10, 0x32, 0x34]), config=PLAIN)
    assert short.mnemonic == "SGN MUL"
    assert short.mode is AddressingMode.SHORT_INDEXED
    assert short.byte_length == 6
    assert short.raw_ops == bytes([0x30, 0x10, 0x32, 0x34])
    assert short.vars[Operand.WAOP].value == "0x10[R_30]"
    assert short.vars[Operand.LREG].value == "R_34"

    long = decode(bytes([0xFE, 0x4F, 0x31, 0x34, 0x12, 0x32, 0x34]), config=PLAIN)
    assert long.mode is AddressingMode.LONG_INDEXED
    assert long.byte_length == 7
    assert long.vars[Operand.WAOP].value == "0x1234[R_30]"


def test_unknown_signed_opcode_scenario() -> None:
    with pytest.raises(UnknownOpcode) as excinfo:
        decode(bytes([0xFE, 0x00]), config=PLAIN)
    assert excinfo.value.signed
    assert excinfo.value.opcode == 0x00

    result = parse(bytes([0xFE, 0x00]), 0x40, config=PLAIN)
    assert not result.ok
    assert isinstance(result.error, UnknownOpcode)
    assert result.length == 1
    assert result.instruction.address == 0x40
    assert result.instruction.raw == b"\xfe"


def test_truncated_buffer_fails_fast() -> None:
    with pytest.raises(TruncatedInstruction) as excinfo:
        decode(bytes([0xA0, 0x30]), config=PLAIN)
    assert excinfo.value.needed == 3
    assert excinfo.value.available == 2

    result = parse(bytes([0xA0, 0x30]), config=PLAIN)
    assert isinstance(result.error, DecodeError)
    assert result.error.fallback_length == 1
    assert result.length == 1


def test_empty_buffer() -> None:
    with pytest.raises(TruncatedInstruction):
        decode(b"", config=PLAIN)
    assert parse(b"", config=PLAIN).length == 1


def test_long_indexed_adds_a_byte() -> None:
    instr = decode(bytes([0xA3, 0x31, 0x34, 0x12, 0x40]), 0x10, config=PLAIN)

    assert instr.mode is AddressingMode.LONG_INDEXED
    assert instr.byte_length == 5
    assert instr.vars[Operand.WAOP].value == "0x1234[R_30]"
    assert instr.vars[Operand.WREG].value == "R_40"
    assert list(instr.xrefs) == [0x40, 0x1234, 0x30]
    assert instr.xrefs[0x1234][0].text == "0x1234"
    assert instr.pseudocode == "$r_40 = 0x1234[$r_30]"


def test_short_indexed() -> None:
    instr = decode(bytes([0xA3, 0x30, 0x10, 0x40, 0xFF]), config=PLAIN)

    assert instr.mode is AddressingMode.SHORT_INDEXED
    assert instr.byte_length == 4
    assert instr.raw == bytes([0xA3, 0x30, 0x10, 0x40])
    assert instr.vars[Operand.WAOP].value == "0x10[R_30]"
    assert list(instr.xrefs) == [0x40, 0x10, 0x30]
    assert instr.xrefs[0x10][0].text == "0x10"


def test_indirect_autoincrement() -> None:
    instr = decode(bytes([0xA2, 0x31, 0x40]), config=PLAIN)

    assert instr.mode is AddressingMode.INDIRECT_INC
    assert instr.auto_increment
    assert instr.byte_length == 3
    assert instr.vars[Operand.WAOP].value == "[R_30]+"

    plain = decode(bytes([0xA2, 0x30, 0x40]), config=PLAIN)
    assert plain.mode is AddressingMode.INDIRECT
    assert not plain.auto_increment
    assert plain.vars[Operand.WAOP].value == "[R_30]"


def test_zero_operand_instructions_are_checked() -> None:
    for opcode in (0xF0, 0xFD, 0xF8, 0xFF):
        instr = decode(bytes([opcode]), config=PLAIN)
        assert instr.checked
        assert instr.byte_length == 1
        assert instr.vars == {}
        assert instr.pseudocode == ""


def test_ret_does_not_look_past_itself() -> None:
    instr = decode(bytes([0xF0, 0x01]), config=PLAIN)
    assert instr.mode is AddressingMode.INDIRECT
    assert not instr.auto_increment


def test_reserved_opcode_decodes_as_one_byte() -> None:
    instr = decode(bytes([0x10]), config=PLAIN)
    assert instr.reserved
    assert instr.byte_length == 1


def test_decode_is_deterministic() -> None:
    data = bytes([0xE9, 0x20, 0x12, 0xFF, 0x00, 0x40])
    assert decode(data, 0x500, config=PLAIN) == decode(data, 0x500, config=PLAIN)


def test_trace_logging(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="mcs96.decoding.dispatcher")
    decode(bytes([0x20, 0x05]), 0x100, config=DecoderConfig(trace=True))
    assert any("SJMP" in record.getMessage() for record in caplog.records)


def test_parse_failure_is_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="mcs96.decoding.dispatcher")
    parse(bytes([0xFE, 0xFE]), config=PLAIN)
    assert any("Decode failed" in record.getMessage() for record in caplog.records)
