"""
Splitting of normalized lines into tokens.

Tokens are separated by whitespace, except for the separators (by default
':', '=' and ','), which are always tokens of their own. That is,
"NCTRL=4" gives the same tokens as "NCTRL = 4".
"""

from _caratio.lines import COMMENT_MARKER, LineNormalizer, LineSource
from _caratio.token import Token

SEPARATORS = (":", "=", ",")


def split_tokens(line, line_number, separators=SEPARATORS):
    """
    :param line: A normalized line, see lines.normalize_line.
    :param line_number: The physical line number of line.
    :returns: List of tokens on the line in the order they appear.
    """
    for separator in separators:
        line = line.replace(separator, f" {separator} ")
    return [Token(text, line_number) for text in line.split()]


class CaratTokenizer:
    """
    Iterable of all tokens in a text stream.

    >>> tokenizer = CaratTokenizer(io.StringIO("NCTRL=4 ! control points"))
    >>> [t.text for t in tokenizer]
    ['NCTRL', '=', '4']

    """

    def __init__(self, stream, comment_marker=COMMENT_MARKER, separators=SEPARATORS):
        self.line_source = LineSource(stream)
        self.lines = LineNormalizer(self.line_source, comment_marker)
        self.separators = separators

    @property
    def line_number(self):
        """
        The number of physical lines read from the stream so far.
        """
        return self.line_source.line_number

    def tokenize_lines(self):
        """
        Generator of token lists, one list per normalized line.
        """
        for line_number, line in self.lines:
            yield split_tokens(line, line_number, self.separators)

    def __iter__(self):
        for tokens in self.tokenize_lines():
            yield from tokens
