import io

import pytest

from miniprintf.conversions import format_hex, format_pointer, format_signed
from miniprintf.printf import Conversion, convert, printf, sprintf


def test_plain_text_is_copied():
    assert sprintf("plain text") == "plain text"


def test_char_and_string():
    assert sprintf("%c%s", "x", "yz") == "x" + "yz"


def test_signed_conversions():
    assert sprintf("%d|%i", -7, 7) == "-7|7"


def test_percent_alone():
    assert sprintf("%%") == "%"


def test_percent_after_text():
    assert sprintf("100%%") == "100%"


def test_unknown_specifier_prints_nothing():
    assert sprintf("a%qb") == "ab"


def test_unknown_specifier_consumes_no_argument():
    assert sprintf("%q%d", 5) == sprintf("%d", 5)


def test_trailing_percent_is_dropped():
    fmt = "end"
    assert sprintf(fmt + "%") == fmt


@pytest.mark.parametrize("address", [None, 0])
def test_null_pointer(address):
    assert sprintf("%p", address) == "(nil)"


def test_pointer_matches_conversion():
    assert sprintf("%p", 0xBEEF) == format_pointer(0xBEEF)


@pytest.mark.parametrize("value", [0, 1, 255, 0xCAFE, -1])
def test_hex_cases(value):
    assert sprintf("%X", value) == sprintf("%x", value).upper()
    assert sprintf("%x", value) == format_hex(value, False)


def test_unsigned_round_trip():
    assert int(sprintf("%u", 123456)) == 123456


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2) == sprintf("%d", 1)


def test_convert_uses_next_argument():
    values = iter([12, 34])
    assert convert("d", values) == format_signed(12)
    assert convert("d", values) == format_signed(34)


def test_convert_percent_keeps_arguments():
    values = iter([3])
    assert convert("%", values) == "%"
    assert next(values) == 3


def test_convert_unknown_returns_empty():
    assert convert("?", iter([1])) == ""


def test_convert_accepts_enum_member():
    assert convert(Conversion.HEX_UPPER, iter([255])) == format_hex(255, True)


def test_conversion_lookup_and_argument_use():
    assert Conversion("x") is Conversion.HEX_LOWER
    assert Conversion.PERCENT.takes_argument is False
    assert Conversion.STRING.takes_argument is True


def test_printf_writes_to_file_and_returns_length():
    buffer = io.StringIO()
    count = printf("%s=%d%%", "n", -3, file=buffer)
    assert buffer.getvalue() == sprintf("%s=%d%%", "n", -3)
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%c%u", "k", 9)
    captured = capsys.readouterr().out
    assert captured == sprintf("%c%u", "k", 9)
    assert count == len(captured)