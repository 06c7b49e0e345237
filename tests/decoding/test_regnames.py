from mcs96.config import DecoderConfig
from mcs96.decoding import Mcs96RegisterNames, Operand, PlainRegisterNames, decode
from mcs96.decoding.regnames import register_names_for


def test_plain_names_are_numeric() -> None:
    names = PlainRegisterNames()
    assert names.format("R_%02X", 0x18) == "R_18"
    assert names.format("[R_%02X", 0x00) == "[R_00"


def test_mcs96_names_annotate_registers_only() -> None:
    names = Mcs96RegisterNames()
    assert names.format("R_%02X", 0x18) == "R_18 ~(SP)"
    assert names.format("R_%02X", 0x00) == "R_00 ~(Zero Register)"
    assert names.format("R_%02X", 0x40) == "R_40 ~( GP Reg RAM )"
    assert names.format("R_%02X", 0x04) == "R_04"
    assert names.format("0x%X", 0x18) == "0x18"


def test_config_selects_service() -> None:
    assert isinstance(register_names_for(DecoderConfig()), PlainRegisterNames)
    assert not isinstance(register_names_for(DecoderConfig()), Mcs96RegisterNames)
    assert isinstance(
        register_names_for(DecoderConfig(register_names=True)), Mcs96RegisterNames
    )


def test_annotated_operands_produce_clean_pseudocode() -> None:
    instr = decode(bytes([0xA3, 0x00, 0x10, 0x40]), names=Mcs96RegisterNames())

    assert instr.vars[Operand.WAOP].value == "0x10[R_00 ~(Zero Register)]"
    assert instr.vars[Operand.WREG].value == "R_40 ~( GP Reg RAM )"
    assert instr.pseudocode == "$r_40 = 0x10"


def test_flow_edges_stay_numeric_with_names() -> None:
    instr = decode(bytes([0xC8, 0x18]), 0x10, names=Mcs96RegisterNames())
    assert instr.vars[Operand.WAOP].value == "R_18 ~(SP)"
    assert instr.xrefs[0x18][0].text == "R_18"
