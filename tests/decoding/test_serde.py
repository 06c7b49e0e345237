import json

from mcs96.config import DecoderConfig
from mcs96.decoding import decode
from mcs96.decoding.serde import dumps, instruction_to_dict


def test_instruction_to_dict() -> None:
    instr = decode(bytes([0x20, 0x05]), 0x100, config=DecoderConfig())
    data = instruction_to_dict(instr)

    assert data["mnemonic"] == "SJMP"
    assert data["length"] == 2
    assert data["raw"] == "2005"
    assert data["mode"] == "indexed"
    assert data["operands"]["cadd"] == {"value": "0x107", "type": "ADDR", "bits": 0}
    assert data["jumps"] == [
        {"text": "0x107", "mnemonic": "SJMP", "from": 0x100, "to": 0x107}
    ]
    assert data["xrefs"] == []


def test_dumps_is_json() -> None:
    instr = decode(bytes([0xFE, 0x4C, 0x30, 0x32, 0x34]), config=DecoderConfig())
    payload = json.loads(dumps(instr, sort_keys=True))
    assert payload["mnemonic"] == "SGN MUL"
    assert payload["signed"] is True
    assert set(payload["operands"]) == {"lreg", "wreg", "waop"}
