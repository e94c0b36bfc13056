import pytest

from smdterm.config import (
    ConfigError,
    decode_config,
    encode_config,
    load_config,
    save_config,
)
from smdterm.varlist import Settings, Variable, VarType, default_settings


def small_settings():
    return Settings(
        [
            Variable("b", VarType.BYTE, 7),
            Variable("w", VarType.WORD, 0x1234),
            Variable("s", VarType.SARR, "hi"),
            Variable("l", VarType.LONG, 0x01020304),
        ]
    )


def test_encoding_layout():
    data = encode_config(small_settings())
    assert data == b"SMDT\x00\x00\x03\x07\x12\x34hi\x00\x01\x02\x03\x04"


def test_round_trip_defaults_with_changes():
    source = default_settings()
    source.set("username", "guest")
    source.set("rtime", 42)
    source.set("epoch", 1900)
    target = decode_config(default_settings(), encode_config(source))
    for var in source:
        assert target.get(var.name) == source.get(var.name)


def test_header_prefix():
    data = encode_config(default_settings())
    assert data[:7] == b"SMDT\x00\x00\x03"


def test_fifth_magic_byte_not_checked():
    data = bytearray(encode_config(small_settings()))
    data[4] = ord("X")
    target = Settings([Variable("b", VarType.BYTE), Variable("w", VarType.WORD),
                       Variable("s", VarType.SARR), Variable("l", VarType.LONG)])
    decode_config(target, bytes(data))
    assert target.get("s") == "hi"


def test_bad_magic():
    data = b"XMDT" + encode_config(small_settings())[4:]
    with pytest.raises(ConfigError):
        decode_config(small_settings(), data)


def test_bad_version():
    data = bytearray(encode_config(small_settings()))
    data[6] = 4
    with pytest.raises(ConfigError):
        decode_config(small_settings(), bytes(data))


def test_truncated_leaves_settings_unchanged():
    source = small_settings()
    source.set("b", 99)
    data = encode_config(source)[:-2]
    target = small_settings()
    with pytest.raises(ConfigError):
        decode_config(target, data)
    assert target.get("b") == 7


def test_short_header():
    with pytest.raises(ConfigError):
        decode_config(small_settings(), b"SMD")


def test_nul_in_string_rejected():
    settings = small_settings()
    settings.set("s", "a\0b")
    with pytest.raises(ConfigError):
        encode_config(settings)


def test_file_round_trip(tmp_path):
    path = tmp_path / "cfg.bin"
    source = default_settings()
    source.set("quitstr", "bye")
    save_config(source, path)
    target = load_config(default_settings(), path)
    assert target.get("quitstr") == "bye"
    assert path.read_bytes() == encode_config(source)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(default_settings(), tmp_path / "absent.bin")