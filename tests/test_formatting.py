import pytest

from textstack.formatting import format_double, format_text


class _Rendered:
    def __init__(self, text):
        self._text = text

    def __str__(self):
        return self._text


def test_plain_text_passes_through():
    assert format_text("plain text") == "plain text"


def test_empty_format_gives_empty_text():
    assert format_text("") == ""


def test_lone_percent_is_kept():
    assert format_text("%") == "%"


def test_unknown_directive_is_copied():
    assert format_text("%x") == "%x"


def test_string_and_integer():
    result = format_text("Hes name is %s, he is %d years old ", "John", 20)
    assert result == "Hes name is John, he is 20 years old "


def test_none_string_renders_nothing():
    assert format_text("a%sb", None) == "ab"


def test_owned_string_directive_consumes_suffix():
    assert format_text("%sc", "abc") == "abc"


def test_booleans():
    assert format_text("%b %b", True, False) == "true false"


def test_characters_from_str_and_code_point():
    assert format_text("%c%c", "<", ord(">")) == "<>"


def test_nul_character_renders_nothing():
    assert format_text("%c", 0) == ""


def test_long_directive():
    assert format_text("%ld", 2020) == "2020"


def test_integer_alias():
    assert format_text("%i", 26) == "26"


def test_object_directives_use_str():
    obj = _Rendered("abc")
    assert format_text("%t|%tc", obj, obj) == "abc|abc"


def test_double_directives():
    assert format_text("%f", 1.81) == "1.81"
    assert format_text("%lf", 1.81) == "1.81"


def test_trailing_character_after_directive():
    assert format_text("%d!", 3) == "3!"
    assert format_text("%s%", "x") == "x%"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%s and %s", "one")


def test_double_keeps_one_decimal():
    assert format_double(26.0) == "26.0"


@pytest.mark.parametrize("value", [1.81, 26.0, -1.5, 0.125, 1000.0, 0.0])
def test_double_round_trips_without_trailing_zeros(value):
    rendered = format_double(value)
    assert float(rendered) == value
    assert rendered.endswith(".0") or not rendered.endswith("0")