import io

import pytest

from fdfview.libft.printf import (
    HEX_LOWER,
    HEX_UPPER,
    number_base,
    printf,
    render_format,
)


def test_number_base_zero_is_first_digit():
    assert number_base(0, "01") == "0"


@pytest.mark.parametrize("n", [1, 5, 255, 4096, 123456789])
def test_number_base_round_trips_hex_and_binary(n):
    assert int(number_base(n, HEX_LOWER), 16) == n
    assert int(number_base(n, "01"), 2) == n


def test_number_base_rejects_short_base():
    with pytest.raises(ValueError):
        number_base(3, "0")


def test_number_base_rejects_negative():
    with pytest.raises(ValueError):
        number_base(-1, HEX_LOWER)


def test_plain_text_passes_through():
    assert render_format("hello world") == "hello world"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_decimal_conversions(n):
    assert render_format("%d", n) == str(n)
    assert render_format("%i", n) == str(n)


def test_int_wraps_to_32_bits():
    assert render_format("%d", 2**31) == str(-(2**31))


def test_unsigned_of_negative_wraps():
    assert int(render_format("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 10, 255, 0xDEADBEEF])
def test_hex_round_trip_and_case(n):
    lower = render_format("%x", n)
    upper = render_format("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert set(lower) <= set(HEX_LOWER)
    assert set(upper) <= set(HEX_UPPER)


def test_char_from_code_and_string():
    assert render_format("%c%c", 65, "b") == "Ab"


def test_string_and_null():
    assert render_format("[%s]", "abc") == "[abc]"
    assert render_format("%s", None) == "(null)"


def test_string_rejects_non_string():
    with pytest.raises(TypeError):
        render_format("%s", 12)


def test_pointer_prefix_and_value():
    text = render_format("%p", 0x1234)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1234
    assert render_format("%p", None) == "0x0"


def test_percent_and_unknown_specifier():
    assert render_format("100%%") == "100%"
    assert render_format("%q") == "q"


def test_trailing_percent_is_dropped():
    assert render_format("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render_format("%d %d", 1)


def test_none_format_renders_nothing():
    assert render_format(None) == ""
    assert printf(None, stream=io.StringIO()) == 0


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("x=%d s=%s %%", -5, "ok", stream=out)
    assert out.getvalue() == "x=-5 s=ok %"
    assert count == len(out.getvalue())