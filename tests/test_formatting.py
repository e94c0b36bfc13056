import pytest

from smdterm.formatting import format_bounded


@pytest.mark.parametrize(
    "spec, value",
    [
        ("%d", -42),
        ("%d", 0),
        ("%i", 1234),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 7),
        ("%+05d", 42),
        ("% d", 7),
        ("%x", 255),
        ("%X", 48879),
        ("%x", 0),
        ("%u", 3000000000),
        ("%s", "abc"),
        ("%6s", "ab"),
        ("%-6s|", "ab"),
        ("%.2s", "hello"),
        ("%c", 65),
        ("%3c", 66),
        ("%-3c|", 67),
    ],
)
def test_matches_standard_formatting(spec, value):
    assert format_bounded(spec, 64, value) == spec % value


def test_long_modifier_ignored():
    assert format_bounded("%ld", 64, 5364) == "%d" % 5364


def test_unsigned_wraps_negative():
    assert format_bounded("%u", 64, -1) == "%u" % 0xFFFFFFFF


def test_pointer_is_zero_padded_upper_hex():
    assert format_bounded("%p", 64, 0x1234) == "%08X" % 0x1234


def test_star_width():
    assert format_bounded("%*d", 64, 6, 42) == "%*d" % (6, 42)


def test_negative_star_width_left_aligns():
    assert format_bounded("%*d|", 64, -6, 42) == "%-6d|" % 42


def test_sign_precedes_space_padding():
    assert format_bounded("%5d", 64, -42) == "-  42"


def test_percent_percent_is_swallowed():
    assert format_bounded("a%%b", 64) == "ab"


def test_null_string():
    assert format_bounded("%s", 64, None) == "<NULL>"


def test_char_from_string():
    assert format_bounded("[%c]", 64, "z") == "[%c]" % "z"


def test_count_written():
    slot = [None]
    result = format_bounded("abc%n", 64, slot)
    assert slot[0] == len("abc")
    assert result == "abc"


@pytest.mark.parametrize("size", [0, 1, 5, 11, 20])
def test_plain_text_bounded(size):
    text = "hello world"
    result = format_bounded(text, size)
    assert result == text[:size]
    assert len(result) <= size


def test_string_output_truncated_by_budget():
    result = format_bounded("%s", 4, "abcdefgh")
    assert "abcdefgh".startswith(result)
    assert len(result) < len("abcdefgh")


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_bounded("%d %d", 64, 1)


def test_trailing_percent_ends_output():
    assert format_bounded("abc%", 64) == "abc"