from __future__ import annotations

from hypothesis import strategies as st

from mcs96.constants import ADDRESS_MASK, SIGNED_PREFIX
from mcs96.decoding.opcodes import SIGNED_OPCODES

# Longest encoding is a signed long-indexed form: prefix, opcode, five operand bytes.
MAX_ENCODING = 7

addresses = st.integers(min_value=0, max_value=ADDRESS_MASK)


@st.composite
def unsigned_encodings(draw) -> bytes:
    opcode = draw(st.integers(min_value=0, max_value=0xFD) | st.just(0xFF))
    tail = draw(st.binary(min_size=MAX_ENCODING, max_size=MAX_ENCODING))
    return bytes([opcode]) + tail


@st.composite
def signed_encodings(draw) -> bytes:
    opcode = draw(st.sampled_from(sorted(SIGNED_OPCODES)))
    tail = draw(st.binary(min_size=MAX_ENCODING, max_size=MAX_ENCODING))
    return bytes([SIGNED_PREFIX, opcode]) + tail


@st.composite
def unknown_signed_encodings(draw) -> bytes:
    opcode = draw(
        st.integers(min_value=0, max_value=0xFF).filter(lambda op: op not in SIGNED_OPCODES)
    )
    tail = draw(st.binary(max_size=MAX_ENCODING))
    return bytes([SIGNED_PREFIX, opcode]) + tail


encodings = unsigned_encodings() | signed_encodings()
