"""
Parsing of literal values in carat files.

Literals are parsed culture invariant: integers are plain base-10 numbers
with an optional sign, doubles use '.' as decimal separator and may have
an exponent, booleans are 'true' or 'false' in any case. The parse
functions raise ValueError for anything else, including the forms that
python's int() and float() accept beyond these (underscores, 'inf', ...).
"""

import re
from enum import Enum, unique

import numpy as np

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)
DOUBLE_SPECIAL_VALUES = {
    "nan": float("nan"),
    "infinity": float("inf"),
    "+infinity": float("inf"),
    "-infinity": float("-inf"),
}

int32_info = np.iinfo(np.int32)


def parse_boolean(text):
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"invalid boolean literal {text!r}")


def parse_integer(text):
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer literal {text!r}")
    value = int(text)
    if not int32_info.min <= value <= int32_info.max:
        raise ValueError(f"integer literal {text!r} out of range")
    return value


def parse_double(text):
    if DOUBLE_PATTERN.fullmatch(text):
        return float(text)
    try:
        return DOUBLE_SPECIAL_VALUES[text.lower()]
    except KeyError as err:
        raise ValueError(f"invalid double literal {text!r}") from err


@unique
class ValueKind(Enum):
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    DOUBLE = "Number"

    @property
    def label(self):
        """
        Name of the kind as used in error messages.
        """
        return self.value

    @property
    def dtype(self):
        return value_dtypes[self]

    def parse(self, text):
        """
        :returns: text parsed as a value of this kind.
        :raises ValueError: If text is not a literal of this kind.
        """
        return value_parsers[self](text)

    def try_parse(self, text):
        """
        :returns: text parsed as a value of this kind, or None
            if text is None or not a literal of this kind.
        """
        if text is None:
            return None
        try:
            return self.parse(text)
        except ValueError:
            return None


value_parsers = {
    ValueKind.BOOLEAN: parse_boolean,
    ValueKind.INTEGER: parse_integer,
    ValueKind.DOUBLE: parse_double,
}

# numpy dtype used when a list of values is
# read as an array
value_dtypes = {
    ValueKind.BOOLEAN: np.bool_,
    ValueKind.INTEGER: np.int32,
    ValueKind.DOUBLE: np.float64,
}
