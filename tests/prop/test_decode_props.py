from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from mcs96.config import DecoderConfig
from mcs96.decoding import Mcs96Decoder, Mcs96RegisterNames, UnknownOpcode
from mcs96.decoding.opcodes import SIGNED_OPCODES, UNSIGNED_OPCODES

from .strategies import addresses, encodings, unknown_signed_encodings

FAST_MAX_EXAMPLES = int(os.getenv("MCS96_PROP_EXAMPLES", "300"))
NIGHTLY_MAX_EXAMPLES = int(os.getenv("MCS96_PROP_NIGHTLY_EXAMPLES", "5000"))

PLAIN = Mcs96Decoder(DecoderConfig())
NAMED = Mcs96Decoder(DecoderConfig(), Mcs96RegisterNames())


def check_invariants(decoder: Mcs96Decoder, data: bytes, address: int) -> None:
    instr = decoder.decode(data, address)
    head = 2 if instr.signed else 1
    table = SIGNED_OPCODES if instr.signed else UNSIGNED_OPCODES
    template = table[instr.opcode]

    assert len(instr.raw) == instr.byte_length
    assert instr.raw == data[: instr.byte_length]
    assert instr.raw_ops == data[head : instr.byte_length]
    assert instr.byte_length - template.length in (0, 1, 2)
    if instr.signed:
        assert instr.mnemonic.startswith("SGN ")

    for var in instr.vars.values():
        assert var.var_type in template.var_types

    for table_edges in (instr.xrefs, instr.calls, instr.jumps):
        for target, bucket in table_edges.items():
            for edge in bucket:
                assert edge.target == target
                assert edge.source == address
                assert edge.mnemonic == instr.mnemonic

    for target, bucket in instr.xrefs.items():
        assert target > 0x02
        assert len(bucket) == 1

    if instr.var_count == 0:
        assert instr.checked
        assert instr.pseudocode == ""

    assert decoder.decode(data, address) == instr


@given(data=encodings, address=addresses)
@settings(
    max_examples=FAST_MAX_EXAMPLES,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_prop_decode_invariants(data: bytes, address: int) -> None:
    check_invariants(PLAIN, data, address)


@given(data=encodings, address=addresses)
@settings(
    max_examples=FAST_MAX_EXAMPLES,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_prop_names_do_not_change_structure(data: bytes, address: int) -> None:
    plain = PLAIN.decode(data, address)
    named = NAMED.decode(data, address)
    assert named.byte_length == plain.byte_length
    assert named.mnemonic == plain.mnemonic
    assert set(named.vars) == set(plain.vars)
    assert named.xrefs == plain.xrefs
    assert named.jumps == plain.jumps


@given(data=unknown_signed_encodings(), address=addresses)
@settings(max_examples=FAST_MAX_EXAMPLES, deadline=None)
def test_prop_unknown_signed_opcode_falls_back(data: bytes, address: int) -> None:
    with pytest.raises(UnknownOpcode):
        PLAIN.decode(data, address)
    result = PLAIN.parse(data, address)
    assert not result.ok
    assert result.length == 1


@given(data=st.binary(max_size=8), address=addresses)
@settings(max_examples=FAST_MAX_EXAMPLES, deadline=None)
def test_prop_parse_never_raises(data: bytes, address: int) -> None:
    result = PLAIN.parse(data, address)
    assert result.length >= 1
    if result.ok:
        assert result.instruction.raw == data[: result.length]


@pytest.mark.nightly
@given(data=encodings, address=addresses)
@settings(
    max_examples=NIGHTLY_MAX_EXAMPLES,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_prop_decode_nightly(data: bytes, address: int) -> None:
    if not os.getenv("MCS96_PROP_RUN_NIGHTLY"):
        pytest.skip("Nightly fuzzing disabled (set MCS96_PROP_RUN_NIGHTLY=1 to enable)")
    check_invariants(PLAIN, data, address)
