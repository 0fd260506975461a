import math

import numpy as np
import pytest
from hypothesis import given

from _caratio.values import ValueKind, parse_boolean, parse_double, parse_integer

from .generators.carat_file_contents import doubles, int32s


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("FALSE", False), ("True", True), ("fAlSe", False)],
)
def test_parse_boolean(text, expected):
    assert parse_boolean(text) is expected


@pytest.mark.parametrize("text", ["1", "0", "yes", "t", ""])
def test_parse_boolean_invalid(text):
    with pytest.raises(ValueError):
        parse_boolean(text)


@pytest.mark.parametrize(
    "text, expected", [("0", 0), ("-12", -12), ("+7", 7), ("007", 7)]
)
def test_parse_integer(text, expected):
    assert parse_integer(text) == expected


@pytest.mark.parametrize(
    "text", ["1.0", "1_000", "1e3", "", "-", "0x10", "٣", "2147483648", "-2147483649"]
)
def test_parse_integer_invalid(text):
    with pytest.raises(ValueError):
        parse_integer(text)


def test_parse_integer_limits():
    assert parse_integer("2147483647") == np.iinfo(np.int32).max
    assert parse_integer("-2147483648") == np.iinfo(np.int32).min


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("-2", -2.0),
        ("1.0E+4", 10000.0),
        ("1e-3", 0.001),
        (".5", 0.5),
        ("3.", 3.0),
        ("Infinity", math.inf),
        ("-infinity", -math.inf),
    ],
)
def test_parse_double(text, expected):
    assert parse_double(text) == expected


def test_parse_double_nan():
    assert math.isnan(parse_double("NaN"))


@pytest.mark.parametrize("text", ["1,5", "inf", "1_0.0", "e5", "1e", "", "0x1p3"])
def test_parse_double_invalid(text):
    with pytest.raises(ValueError):
        parse_double(text)


@given(int32s)
def test_integer_literals(value):
    assert ValueKind.INTEGER.parse(str(value)) == value


@given(doubles)
def test_double_literals(value):
    assert ValueKind.DOUBLE.parse(repr(value)) == value


def test_try_parse_returns_none():
    assert ValueKind.INTEGER.try_parse("X") is None
    assert ValueKind.INTEGER.try_parse(None) is None
    assert ValueKind.BOOLEAN.try_parse("false") is False


def test_labels():
    assert [k.label for k in ValueKind] == ["Boolean", "Integer", "Number"]
