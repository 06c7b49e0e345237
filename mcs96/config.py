from __future__ import annotations

from dataclasses import dataclass
import os

_FALSE_VALUES = frozenset({"", "0", "false", "off", "no"})


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().casefold() not in _FALSE_VALUES


@dataclass(frozen=True)
class DecoderConfig:
    """
    Decoder switches, normally read from the environment.

    `register_names` annotates operands with SFR and GP-RAM names
    (`MCS96_REGISTER_NAMES`); `trace` logs every decoded instruction at debug
    level (`MCS96_DECODE_TRACE`).
    """

    register_names: bool = False
    trace: bool = False


def load_decoder_config() -> DecoderConfig:
    return DecoderConfig(
        register_names=_env_flag("MCS96_REGISTER_NAMES", default=False),
        trace=_env_flag("MCS96_DECODE_TRACE", default=False),
    )


__all__ = ["DecoderConfig", "load_decoder_config"]
