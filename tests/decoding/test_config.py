import pytest

from mcs96.config import DecoderConfig, load_decoder_config


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("MCS96_REGISTER_NAMES", raising=False)
    monkeypatch.delenv("MCS96_DECODE_TRACE", raising=False)
    assert load_decoder_config() == DecoderConfig(register_names=False, trace=False)


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("yes", True), ("0", False), ("off", False), ("FALSE", False), ("no", False), ("", False)],
)
def test_env_flags(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("MCS96_REGISTER_NAMES", raw)
    monkeypatch.setenv("MCS96_DECODE_TRACE", raw)
    config = load_decoder_config()
    assert config.register_names is expected
    assert config.trace is expected


def test_environment_drives_default_decoder(monkeypatch) -> None:
    from mcs96.decoding import Operand, decode

    monkeypatch.setenv("MCS96_REGISTER_NAMES", "1")
    instr = decode(bytes([0xC8, 0x18]))
    assert instr.vars[Operand.WAOP].value == "R_18 ~(SP)"
