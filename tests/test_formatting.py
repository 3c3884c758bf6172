import io

import pytest

from philo.formatting import format_string, print_formatted


def test_char_from_string():
    assert format_string("%c", "A") == "A"


def test_char_from_integer():
    assert format_string("%c", 65) == chr(65)


def test_string_and_literal_text():
    assert format_string("Cadena: %s!", "Hola") == "Cadena: Hola!"


def test_null_string():
    assert format_string("%s", None) == "(null)"


@pytest.mark.parametrize("number", [0, 7, -42, 2024, 2147483647])
def test_decimal_round_trip(number):
    assert int(format_string("%d", number)) == number
    assert format_string("%i", number) == format_string("%d", number)


def test_decimal_minimum():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_like_32_bit():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_of_negative_one():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 48879, 4294967295])
def test_hex_round_trip(number):
    lower = format_string("%x", number)
    assert int(lower, 16) == number
    assert lower == lower.lower()
    assert format_string("%X", number) == lower.upper()


def test_hex_masks_negative():
    assert format_string("%x", -1) == format_string("%x", 4294967295)


def test_percent():
    assert format_string("100%%") == "100%"


def test_null_pointer():
    assert format_string("%p", None) == "0x0"
    assert format_string("%p", 0) == "0x0"


def test_pointer_round_trip():
    text = format_string("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_unknown_conversion_is_dropped_without_using_argument():
    assert format_string("a%qb%s", "c") == "abc"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_type_for_decimal():
    with pytest.raises(TypeError):
        format_string("%d", "seven")


def test_print_formatted_writes_and_counts():
    out = io.StringIO()
    count = print_formatted("Entero: %d %s\n", -42, "ok", file=out)
    assert out.getvalue() == "Entero: -42 ok\n"
    assert count == len(out.getvalue())


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%c%c", "h", "i")
    assert capsys.readouterr().out == "hi"
    assert count == 2