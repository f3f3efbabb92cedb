import pytest

from sheet_to_json.utils.numeric import is_numeric_literal, parse_numeric_literal


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1500000", 1500000),
        ("10", 10),
        ("-3.5", -3.5),
        ("+7", 7),
        (".5", 0.5),
        ("1.", 1.0),
        ("2E-3", 0.002),
        ("0010", 10),
    ],
)
def test_parses_numeric_literals(text, expected):
    assert parse_numeric_literal(text) == expected


@pytest.mark.parametrize("text", ["", " 1", "1,000", "₩1000", "1e", "abc", "0x1F", "NaN", "Infinity", "1 000", "--1", "\u0663"])
def test_rejects_non_literals(text):
    assert not is_numeric_literal(text)
    assert parse_numeric_literal(text) is None


def test_integer_type_only_without_fraction_or_exponent():
    assert isinstance(parse_numeric_literal("42"), int)
    assert isinstance(parse_numeric_literal("42.0"), float)
    assert isinstance(parse_numeric_literal("4e2"), float)
