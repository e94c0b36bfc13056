import pytest

from smdterm.varlist import Settings, Variable, VarType, default_settings


def test_default_order_and_count():
    settings = default_settings()
    names = [var.name for var in settings]
    assert names[0] == "hsoffset"
    assert names[-1] == "ircwrap"
    assert len(names) == 33
    assert len(settings) == len(set(names))


def test_default_values_from_source():
    settings = default_settings()
    assert settings.get("ctime") == 500000
    assert settings.get("rtime") == 300000
    assert settings.get("dtime") == 500
    assert settings.get("dll") == 1
    assert settings.get("timeserver") == "time.nist.gov:37"
    assert settings.get("epoch") == 1970


def test_unset_defaults_are_empty():
    settings = default_settings()
    assert settings.get("username") == ""
    assert settings.get("hsoffset") == 0


def test_set_and_get_round_trip():
    settings = default_settings()
    settings.set("username", "guest")
    settings.set("rtime", 1234)
    assert settings.get("username") == "guest"
    assert settings.get("rtime") == 1234


def test_byte_truncates_to_width():
    settings = default_settings()
    settings.set("dlm", 0x100)
    assert settings.get("dlm") == 0


def test_type_checks():
    settings = default_settings()
    with pytest.raises(TypeError):
        settings.set("dlm", "one")
    with pytest.raises(TypeError):
        settings.set("username", 5)


def test_unknown_name():
    settings = default_settings()
    with pytest.raises(KeyError):
        settings.get("nosuch")
    with pytest.raises(KeyError):
        settings.set("nosuch", 1)
    assert settings.get_env("nosuch") is None
    assert "nosuch" not in settings


def test_get_env_text():
    settings = default_settings()
    assert settings.get_env("rtime") == "300000"
    assert settings.get_env("timeserver") == "time.nist.gov:37"
    settings.set("dll", 9)
    assert settings.get_env("dll") == "9"


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        Settings([Variable("a", VarType.BYTE), Variable("a", VarType.WORD)])


def test_settings_are_independent():
    first = default_settings()
    second = default_settings()
    first.set("username", "someone")
    assert second.get("username") == ""