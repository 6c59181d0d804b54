import pytest

from clade.parser.utils import coerce_array, coerce_float, coerce_integer


@pytest.mark.parametrize(
    "value, expected",
    [("0", 0), ("42", 42), ("-7", -7), ("+3", 3), ("007", 7)],
)
def test_coerce_integer(value, expected):
    assert coerce_integer(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1.0", " 4", "1_000", "0x10", "--1"])
def test_coerce_integer_invalid(value):
    with pytest.raises(ValueError) as excinfo:
        coerce_integer(value)
    assert "is not a valid integer" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", 1.0),
        ("1.5", 1.5),
        ("1,5", 1.5),
        (".5", 0.5),
        ("-2.", -2.0),
        ("+1e-2", 0.01),
        ("3E2", 300.0),
    ],
)
def test_coerce_float(value, expected):
    assert coerce_float(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["", "abc", "1.2.3", "e5", "nan", "inf", "1,5,0"])
def test_coerce_float_invalid(value):
    with pytest.raises(ValueError) as excinfo:
        coerce_float(value)
    assert "is not a valid number" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("single", ["single"]),
        ("", []),
        ("a,,b", ["a", "", "b"]),
        (["x", 1], ["x", "1"]),
    ],
)
def test_coerce_array(value, expected):
    assert coerce_array(value) == expected
