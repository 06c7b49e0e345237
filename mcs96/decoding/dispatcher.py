from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import DecoderConfig, load_decoder_config
from ..constants import SIGNED_PREFIX
from .bind import AddressingMode, Instruction
from .decode_map import resolve_operands
from .errors import DecodeError, UnknownOpcode
from .opcodes import SIGNED_OPCODES, UNSIGNED_OPCODES
from .pseudo import synthesize
from .reader import require
from .regnames import RegisterNames, register_names_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    instruction: Instruction
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def length(self) -> int:
        return self.instruction.byte_length


class Mcs96Decoder:
    """
    Turns the bytes at one address into an `Instruction`.

    Holds no per-decode state, so one instance can be shared between
    threads.
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        names: Optional[RegisterNames] = None,
    ) -> None:
        self.config = config if config is not None else load_decoder_config()
        self.names = names if names is not None else register_names_for(self.config)

    def decode(self, data: bytes, address: int = 0) -> Instruction:
        data = bytes(data)
        require(data, 1)
        signed = data[0] == SIGNED_PREFIX
        head = 2 if signed else 1
        if signed:
            require(data, 2)
            opcode = data[1]
            template = SIGNED_OPCODES.get(opcode)
        else:
            opcode = data[0]
            template = UNSIGNED_OPCODES.get(opcode)
        if template is None:
            raise UnknownOpcode(opcode, signed=signed)

        instr = Instruction.from_template(
            template, address=address, opcode=opcode, signed=signed
        )

        # The low bit of the first operand byte picks the addressing variant.
        has_operands = template.length > 1
        if instr.mode is AddressingMode.INDEXED and instr.variable_length and has_operands:
            require(data, head + 1)
            if data[head] & 0x01:
                instr.mode = AddressingMode.LONG_INDEXED
                instr.byte_length += 1
            else:
                instr.mode = AddressingMode.SHORT_INDEXED
        elif instr.mode is AddressingMode.INDIRECT and has_operands:
            require(data, head + 1)
            if data[head] & 0x01:
                instr.mode = AddressingMode.INDIRECT_INC
                instr.auto_increment = True

        if signed:
            instr.byte_length += 1
            instr.mnemonic = "SGN " + instr.mnemonic

        require(data, instr.byte_length)
        instr.raw = data[: instr.byte_length]
        instr.raw_ops = instr.raw[head:]

        if instr.var_count == 0:
            instr.checked = True
        else:
            resolve_operands(instr, self.names)
            instr.pseudocode = synthesize(instr)

        if self.config.trace:
            logger.debug(
                "%06X: %-12s %s",
                instr.address,
                instr.raw.hex(" "),
                instr.mnemonic,
            )
        return instr

    def parse(self, data: bytes, address: int = 0) -> DecodeResult:
        try:
            return DecodeResult(self.decode(data, address))
        except DecodeError as exc:
            logger.debug("Decode failed at %#x: %s", address, exc)
            return DecodeResult(Instruction.placeholder(address, bytes(data)), exc)


def decode(
    data: bytes,
    address: int = 0,
    *,
    config: Optional[DecoderConfig] = None,
    names: Optional[RegisterNames] = None,
) -> Instruction:
    """Decode one instruction, raising `DecodeError` on bad input."""
    return Mcs96Decoder(config, names).decode(data, address)


def parse(
    data: bytes,
    address: int = 0,
    *,
    config: Optional[DecoderConfig] = None,
    names: Optional[RegisterNames] = None,
) -> DecodeResult:
    """Decode one instruction; failures come back as a 1-byte placeholder."""
    return Mcs96Decoder(config, names).parse(data, address)


__all__ = ["DecodeResult", "Mcs96Decoder", "decode", "parse"]
