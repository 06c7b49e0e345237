from mcs96.decoding import Instruction, Operand, VarType
from mcs96.decoding.pseudo import TEMPLATES, clean_operand, collect_slots, synthesize
from mcs96.decoding.variables import make_variable


def _instr(mnemonic, *bound):
    instr = Instruction(
        mnemonic=mnemonic,
        var_count=len(bound),
        operands=tuple(operand for operand, _, _ in bound),
        var_types=tuple(var_type for _, var_type, _ in bound),
    )
    for operand, var_type, value in bound:
        instr.vars[operand] = make_variable(operand, var_type, value)
    return instr


def test_clean_operand_substitutions() -> None:
    assert clean_operand("R_30") == "$r_30"
    assert clean_operand("R_00") == "0x00"
    assert clean_operand("R_02") == "0x11"
    assert clean_operand("#7F") == "0x7F"
    assert clean_operand("0x10[R_00 ~(Zero Register)]") == "0x10"
    assert clean_operand("R_30 ~( GP Reg RAM )") == "$r_30"
    assert clean_operand("R_02 ~(Ones Register)") == "0x11"
    assert clean_operand("R_18 ~(SP)") == "$r_18 (SP)"


def test_slot_assignment_by_type() -> None:
    instr = _instr(
        "ST",
        (Operand.WREG, VarType.SRC, "R_40"),
        (Operand.WAOP, VarType.DEST, "0x10[R_30]"),
    )
    slots = collect_slots(instr)
    assert slots.dst == "$r_10[$r_30]"
    assert slots.src == "$r_40"
    assert synthesize(instr) == "$r_10[$r_30] = $r_40"


def test_later_sources_overwrite_earlier_ones() -> None:
    instr = _instr(
        "SUB",
        (Operand.DWREG, VarType.DEST, "R_34"),
        (Operand.SWREG, VarType.SRC1, "R_32"),
        (Operand.WAOP, VarType.SRC2, "R_30"),
    )
    assert synthesize(instr) == "$r_34 = $r_34 - $r_30"


def test_templates() -> None:
    dest = (Operand.WREG, VarType.DEST, "R_40")
    assert synthesize(_instr("CLR", dest)) == "$r_40 = 0x00"
    assert synthesize(_instr("INC", dest)) == "$r_40++"
    assert synthesize(_instr("DEC", dest)) == "$r_40--"
    assert synthesize(_instr("NEG", dest)) == "$r_40 = NEG $r_40"
    assert synthesize(_instr("EXT", dest)) == "SIGN EXTEND INT $r_40 TO LONG INT"
    assert synthesize(_instr("POP", dest)) == "POP THE STACK TO $r_40"
    assert (
        synthesize(_instr("CMP", dest, (Operand.WAOP, VarType.SRC, "#0001")))
        == "if ($r_40 == 0x0001) {"
    )
    assert (
        synthesize(_instr("ORB", dest, (Operand.BAOP, VarType.SRC, "R_31")))
        == "$r_40 = $r_40 ORB $r_31"
    )


def test_unmapped_mnemonic_keeps_visible_marker() -> None:
    instr = _instr(
        "SGN MYSTERY",
        (Operand.LREG, VarType.DEST, "R_40"),
        (Operand.WAOP, VarType.SRC2, "R_30"),
    )
    assert "SGN MYSTERY" not in TEMPLATES
    assert synthesize(instr) == "??? $r_40 = $r_30"


def test_every_mnemonic_with_operands_has_a_template() -> None:
    from mcs96.decoding.opcodes import SIGNED_OPCODES, UNSIGNED_OPCODES

    missing = {
        template.mnemonic
        for template in UNSIGNED_OPCODES.values()
        if template.var_count and template.mnemonic not in TEMPLATES
    }
    assert missing == {"TIJMP"}
    signed_missing = {
        "SGN " + template.mnemonic
        for template in SIGNED_OPCODES.values()
        if "SGN " + template.mnemonic not in TEMPLATES
    }
    assert signed_missing == {"SGN MYSTERY"}
