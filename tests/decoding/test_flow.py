from mcs96 import decode
from mcs96.config import DecoderConfig
from mcs96.decoding.flow import EdgeKind, FlowRecorder


def test_xref_threshold_drops_zero_and_ones_registers() -> None:
    flow = FlowRecorder(0x100)
    assert flow.xref("R_%02X", 0x00, "LD") is False
    assert flow.xref("R_%02X", 0x02, "LD") is False
    assert flow.xrefs == {}


def test_xref_is_deduplicated_per_source() -> None:
    flow = FlowRecorder(0x100)
    assert flow.xref("R_%02X", 0x30, "ADD") is True
    assert flow.xref("[R_%02X]", 0x30, "ADD") is False
    assert flow.xref("R_%02X", 0x32, "ADD") is True

    assert list(flow.xrefs) == [0x30, 0x32]
    [edge] = flow.xrefs[0x30]
    assert edge.text == "R_30"
    assert edge.mnemonic == "ADD"
    assert edge.source == 0x100
    assert edge.target == 0x30
    assert edge.kind is EdgeKind.XREF


def test_calls_and_jumps_always_append() -> None:
    flow = FlowRecorder(0x2000)
    flow.jump("0x%X", 0x2010, "SJMP")
    flow.jump("0x%X", 0x2010, "SJMP")
    flow.call("0x%X", 0x0002, "LCALL")

    assert len(flow.jumps[0x2010]) == 2
    assert flow.calls[0x0002][0].text == "0x2"
    assert [edge.kind for edge in flow.edges()] == [
        EdgeKind.CALL,
        EdgeKind.JUMP,
        EdgeKind.JUMP,
    ]


def test_merge_keeps_one_xref_per_source() -> None:
    first = decode(bytes([0xC8, 0x40]), 0x100, config=DecoderConfig())
    second = decode(bytes([0xC8, 0x40]), 0x200, config=DecoderConfig())

    program = FlowRecorder(0)
    program.merge(first.flow)
    program.merge(second.flow)
    program.merge(first.flow)

    assert [edge.source for edge in program.xrefs[0x40]] == [0x100, 0x200]


def test_merge_appends_calls_and_jumps() -> None:
    program = FlowRecorder(0)
    for address in (0x100, 0x200):
        program.merge(decode(bytes([0x20, 0x00]), address, config=DecoderConfig()).flow)

    assert sorted(program.jumps) == [0x102, 0x202]
    assert program.calls == {}
