from __future__ import annotations

from typing import Optional, Protocol

from ..config import DecoderConfig
from ..constants import GP_RAM_END, GP_RAM_START, SFR_NAMES


class RegisterNames(Protocol):
    """Renders a register value through a printf-style template."""

    def format(self, template: str, value: int) -> str: ...


class PlainRegisterNames:
    """Numeric formatting only: `R_%02X` % 0x30 -> `R_30`."""

    def format(self, template: str, value: int) -> str:
        return template % value


class Mcs96RegisterNames(PlainRegisterNames):
    """
    Appends a ` ~(name)` annotation to register-file operands.

    Only templates that render a register (`R_..`) are annotated; offsets,
    immediates and code addresses pass through untouched. The pseudocode
    synthesizer knows how to strip these annotations again.
    """

    def name_for(self, value: int) -> Optional[str]:
        name = SFR_NAMES.get(value)
        if name is not None:
            return name
        if GP_RAM_START <= value <= GP_RAM_END:
            return " GP Reg RAM "
        return None

    def format(self, template: str, value: int) -> str:
        text = template % value
        if "R_" not in template:
            return text
        name = self.name_for(value)
        if name is None:
            return text
        return f"{text} ~({name})"


def register_names_for(config: DecoderConfig) -> RegisterNames:
    if config.register_names:
        return Mcs96RegisterNames()
    return PlainRegisterNames()


__all__ = [
    "Mcs96RegisterNames",
    "PlainRegisterNames",
    "RegisterNames",
    "register_names_for",
]
