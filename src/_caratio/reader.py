"""
The CaratReader is a cursor over the tokens of a carat file meant to be
driven by a hand written recursive descent parser. The reader always holds
the current token (None once the input is exhausted) and offers two kinds
of operations on it:

* probes (match, match_any, try_read_*) which report whether the current
  token is acceptable and only advance if it is, they never raise, and
* commits (expect, expect_any, read_* without default) which raise a
  CaratSyntaxError tagged with the current line if it is not.

A record parser typically looks like

>>> while not reader.eof:
...     if reader.match("NODE"):
...         node_id = reader.read_integer()
...         continue
...     if reader.match("END"):
...         continue
...     raise reader.new_unexpected_token_error()

Parsing is fail fast, there is no recovery after an error and no way to
move the cursor backwards.
"""

import codecs
import io
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any

import numpy as np

from _caratio.errors import (
    DuplicateTokenError,
    ExpectedButFoundError,
    RequiredFieldMissingError,
    UnexpectedTokenError,
)
from _caratio.lines import COMMENT_MARKER
from _caratio.tokenizer import SEPARATORS, CaratTokenizer
from _caratio.values import ValueKind

logger = logging.getLogger(__name__)


def replace_with_question_mark(error):
    return "?" * (error.end - error.start), error.end


# Each byte which can not be decoded is read as "?"
codecs.register_error("carat-replace", replace_with_question_mark)

# Marks that a read_* call has no default value
# and should raise on a mismatch.
REQUIRED = object()


@dataclass
class Slot:
    """
    An optional value which may be assigned once by CaratReader.try_read_*_into.
    """

    value: Any = None

    @property
    def is_set(self):
        return self.value is not None


class CaratReader:
    """
    Reader for carat files, see module documentation.

    >>> reader = CaratReader.from_text("NCTRL = 4")
    >>> reader.match("nctrl")
    True
    >>> reader.expect("=")
    >>> reader.read_integer()
    4
    >>> reader.eof
    True

    """

    def __init__(
        self,
        stream,
        owns_stream=False,
        comment_marker=COMMENT_MARKER,
        separators=SEPARATORS,
    ):
        """
        :param stream: A text stream containing carat data.
        :param owns_stream: Whether the reader should close the stream
            when closed itself. The caller has to close a borrowed stream.
        :param comment_marker: Character starting a comment which lasts
            until the end of the line.
        :param separators: Characters which are always tokens of their
            own, regardless of surrounding whitespace.
        """
        self.stream = stream
        self.owns_stream = owns_stream
        self.tokenizer = CaratTokenizer(stream, comment_marker, separators)

        self._token_lines = self.tokenizer.tokenize_lines()
        self._pending = deque()
        self._token = None
        self._exhausted = False
        self.current_line_number = 0

        self._advance()

    @classmethod
    def from_text(cls, text, **kwargs):
        """
        :returns: A CaratReader reading the given string.
        """
        return cls(io.StringIO(text, newline=None), owns_stream=True, **kwargs)

    @classmethod
    def from_file(cls, path, encoding="ascii", **kwargs):
        """
        :returns: A CaratReader reading the file at path. Bytes which can not
            be decoded with the given encoding are read as "?". The file is
            closed when the reader is closed.
        """
        logger.debug("Opening carat file %s", path)
        stream = open(path, "r", encoding=encoding, errors="carat-replace")
        try:
            return cls(stream, owns_stream=True, **kwargs)
        except BaseException:
            stream.close()
            raise

    @classmethod
    def from_stream(cls, stream, **kwargs):
        """
        :returns: A CaratReader reading from the open text stream,
            which stays open when the reader is closed.
        """
        return cls(stream, owns_stream=False, **kwargs)

    def close(self):
        if self.owns_stream and not self.stream.closed:
            logger.debug("Closing carat stream %s", self.stream)
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def token(self):
        """
        The current Token, None at end of file.
        """
        return self._token

    @property
    def current_token(self):
        """
        The text of the current token, None at end of file.
        """
        if self._token is None:
            return None
        return self._token.text

    @property
    def eof(self):
        return self._token is None

    def _advance(self):
        if self._exhausted:
            return
        if not self._pending:
            tokens = next(self._token_lines, None)
            if tokens is None:
                self._exhausted = True
                self._token = None
                self.current_line_number = self.tokenizer.line_number
                logger.debug(
                    "Reached end of carat input after %d lines",
                    self.current_line_number,
                )
                return
            self._pending.extend(tokens)
        self._token = self._pending.popleft()
        self.current_line_number = self._token.line_number

    def ignore(self):
        """
        Skip the current token.
        """
        self._advance()

    def match(self, expression):
        """
        Advance if the current token equals expression, ignoring case.

        :returns: Whether the current token matched.
        """
        if self.eof or not self._token.matches(expression):
            return False
        self._advance()
        return True

    def match_any_index(self, *expressions):
        """
        Advance if the current token equals any of the expressions,
        ignoring case.

        :returns: The index of the first matching expression, or None
            if none match.
        """
        if self.eof:
            return None
        for index, expression in enumerate(expressions):
            if self._token.matches(expression):
                self._advance()
                return index
        return None

    def match_any(self, *expressions):
        return self.match_any_index(*expressions) is not None

    def expect(self, expression):
        """
        As match, but raises ExpectedButFoundError if the current
        token does not match.
        """
        if not self.match(expression):
            raise ExpectedButFoundError(
                (expression,), self.current_token, self.current_line_number
            )

    def expect_any(self, *expressions):
        """
        As match_any_index, but raises ExpectedButFoundError listing all
        expressions if the current token matches none of them.

        :returns: The index of the matching expression.
        """
        index = self.match_any_index(*expressions)
        if index is None:
            raise ExpectedButFoundError(
                expressions, self.current_token, self.current_line_number
            )
        return index

    def _try_read(self, kind):
        value = kind.try_parse(self.current_token)
        if value is not None:
            self._advance()
        return value

    def _try_read_into(self, kind, slot):
        # A slot is only assigned once, the token of a
        # second assignment is left for the caller.
        if slot.is_set:
            return False
        value = self._try_read(kind)
        if value is None:
            return False
        slot.value = value
        return True

    def _read(self, kind, default):
        value = self._try_read(kind)
        if value is not None:
            return value
        if default is not REQUIRED:
            return default
        raise ExpectedButFoundError(
            (kind.label,), self.current_token, self.current_line_number, quote=False
        )

    def _read_list(self, read_value):
        values = []
        while not self.eof:
            values.append(read_value())
            if not self.match(","):
                break
        return values

    def try_read_boolean(self):
        """
        :returns: The current token as a bool, advancing past it, or None
            without advancing if it is not a boolean.
        """
        return self._try_read(ValueKind.BOOLEAN)

    def try_read_integer(self):
        return self._try_read(ValueKind.INTEGER)

    def try_read_double(self):
        return self._try_read(ValueKind.DOUBLE)

    def try_read_boolean_into(self, slot):
        """
        Assign the current token as a bool to the slot and advance.

        :param slot: A Slot, if it already holds a value, nothing is read.
        :returns: Whether the slot was assigned.
        """
        return self._try_read_into(ValueKind.BOOLEAN, slot)

    def try_read_integer_into(self, slot):
        return self._try_read_into(ValueKind.INTEGER, slot)

    def try_read_double_into(self, slot):
        return self._try_read_into(ValueKind.DOUBLE, slot)

    def read_boolean(self, default=REQUIRED):
        """
        :param default: Returned, without advancing, if the current token
            is not a boolean. If not given, ExpectedButFoundError is raised
            instead.
        :returns: The current token as a bool.
        """
        return self._read(ValueKind.BOOLEAN, default)

    def read_integer(self, default=REQUIRED):
        """
        See read_boolean.
        """
        return self._read(ValueKind.INTEGER, default)

    def read_double(self, default=REQUIRED):
        """
        See read_boolean.
        """
        return self._read(ValueKind.DOUBLE, default)

    def read_string(self):
        """
        :returns: The text of the current token.
        """
        if self.eof:
            raise ExpectedButFoundError(
                ("String",), None, self.current_line_number, quote=False
            )
        value = self.current_token
        self._advance()
        return value

    def read_string_list(self):
        """
        :returns: List of the tokens in a comma separated sequence,
            ie. ['a', 'b'] for "a , b".
        """
        return self._read_list(self.read_string)

    def read_boolean_list(self):
        return self._read_list(self.read_boolean)

    def read_integer_list(self):
        return self._read_list(self.read_integer)

    def read_double_list(self):
        """
        :returns: List of the values in a comma separated sequence of
            doubles, ie. [1.0, 2.5] for "1.0, 2.5".
        """
        return self._read_list(self.read_double)

    def read_boolean_array(self):
        """
        As read_boolean_list, but returns a numpy array of bool_.
        """
        return np.array(self.read_boolean_list(), dtype=ValueKind.BOOLEAN.dtype)

    def read_integer_array(self):
        """
        As read_integer_list, but returns a numpy array of int32.
        """
        return np.array(self.read_integer_list(), dtype=ValueKind.INTEGER.dtype)

    def read_double_array(self):
        """
        As read_double_list, but returns a numpy array of float64.
        """
        return np.array(self.read_double_list(), dtype=ValueKind.DOUBLE.dtype)

    def new_unexpected_token_error(self):
        return UnexpectedTokenError(self.current_token, self.current_line_number)

    def new_duplicate_token_error(self):
        return DuplicateTokenError(self.current_token, self.current_line_number)

    def assert_is_set(self, value, name):
        """
        :param value: A value or Slot for the field.
        :param name: Name of the field used in the error message.
        :raises RequiredFieldMissingError: If value is None or an unset Slot.
        """
        if isinstance(value, Slot):
            value = value.value
        if value is None:
            raise RequiredFieldMissingError(name, self.current_line_number)
